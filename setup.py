from setuptools import find_packages, setup

setup(
    name="seedkeys",
    version="0.1.0",
    description="Deterministic TOTP secrets and RSA keypairs from seed text",
    packages=find_packages(include=["seedkeys", "seedkeys.*"]),
    python_requires=">=3.10",
    install_requires=[
        "cryptography>=42",
        "mnemonic>=0.20",
        "pycryptodome>=3.19",
        "tracerite>=1.1",
    ],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["seedkeys=seedkeys.cli:main"]},
)
