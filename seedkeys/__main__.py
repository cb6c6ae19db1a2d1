from seedkeys.cli import main

main()
