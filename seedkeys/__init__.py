"""seedkeys - Deterministic TOTP secrets and RSA keypairs from seed text.

This package derives base32 TOTP secrets from a user id and rotation version,
and 2048-bit RSA keypairs from a seed phrase expanded through BIP-39 into a
ChaCha20 byte stream. The same inputs always give the same output.
"""

from seedkeys.errors import DerivationError, InputError
from seedkeys.rsakeys import RSAKeyResult, derive_rsa_keypair
from seedkeys.totp import base32_encode, derive_totp_secret

try:
    from seedkeys._version import __version__
except ImportError:
    __version__ = "0.0.0.dev0"

__all__ = [
    "DerivationError",
    "InputError",
    "RSAKeyResult",
    "__version__",
    "base32_encode",
    "derive_rsa_keypair",
    "derive_totp_secret",
]
