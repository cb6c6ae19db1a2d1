"""Command-line interface for seedkeys."""

import argparse
import asyncio
import sys

import tracerite

from seedkeys.rsakeys import KEY_BITS, derive_rsa_keypair
from seedkeys.stats import format_time, stopwatch
from seedkeys.totp import derive_totp_secret, totp_seed

tracerite.load()

__all__ = ["main"]

EPILOG = """\
examples:
  seedkeys totp 1000 a      TOTP secret for user 1000, version a
  seedkeys rsa 1234567890   RSA keypair from an explicit seed
  seedkeys rsa              RSA keypair from a timestamp seed (printed for reuse)
"""


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Quiet mode: print only the generated secret or keys",
    )
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose mode: show seed and timing diagnostics on stderr",
    )

    parser = argparse.ArgumentParser(
        prog="seedkeys",
        description="Derive TOTP secrets and RSA keypairs deterministically from seeds",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    totp = sub.add_parser(
        "totp", parents=[common], help="Generate TOTP secret from user id and version"
    )
    totp.add_argument("identifier", nargs="?", help="User id (default: 0)")
    totp.add_argument(
        "version",
        nargs="?",
        help="Secret version, a letter bumped on each rotation (default: a)",
    )

    rsa = sub.add_parser("rsa", parents=[common], help="Generate RSA signing keypair from seed")
    rsa.add_argument("seed", nargs="?", help="Seed text (default: timestamp with jitter)")
    rsa.add_argument(
        "--pkcs8",
        action="store_true",
        help="Write the private key as PKCS#8 instead of PKCS#1",
    )
    return parser


def run_totp(args):
    # Empty arguments select the defaults
    identifier = args.identifier or None
    version = args.version or None
    if args.verbose:
        print(f"Seed: {totp_seed(identifier, version)}", file=sys.stderr)
    secret = derive_totp_secret(identifier, version)
    print(secret if args.quiet else f"Generated TOTP Secret: {secret}")


def run_rsa(args):
    timer = stopwatch()
    next(timer)
    result = asyncio.run(
        derive_rsa_keypair(args.seed, private_format="pkcs8" if args.pkcs8 else "pkcs1")
    )
    if args.verbose:
        print(f"Generated {KEY_BITS}-bit RSA key in {format_time(next(timer))}", file=sys.stderr)

    if args.quiet:
        sys.stdout.write(result.private_key + result.public_key)
        return
    print("Generated RSA Keys:\n")
    print(result.private_key)
    print(result.public_key)
    if result.timestamp is not None:
        print(f"Timestamp: {result.timestamp}")
    print(f"Seed: {result.seed}")


def _main(argv=None):
    """Internal main function that may raise exceptions."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return
    if args.command == "totp":
        return run_totp(args)
    return run_rsa(args)


def main(argv=None):
    """Main entry point for the CLI with exception handling."""
    try:
        _main(argv)
    except (KeyboardInterrupt, BrokenPipeError):
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
