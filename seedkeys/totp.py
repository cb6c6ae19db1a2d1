"""TOTP secret derivation from a user identifier and a rotation version.

The secret is ``base32(HMAC-SHA256(key=hex(SHA256(seed)), msg=seed))[:32]``
with ``seed = identifier + version``. The HMAC key is the *textual* hex
digest, not the raw digest bytes; secrets already handed out depend on it.
"""

import hashlib
import hmac

__all__ = [
    "BASE32_ALPHABET",
    "Base32Encoder",
    "DEFAULT_IDENTIFIER",
    "DEFAULT_VERSION",
    "SECRET_LENGTH",
    "base32_encode",
    "derive_totp_secret",
    "totp_seed",
]

BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
SECRET_LENGTH = 32
DEFAULT_IDENTIFIER = "0"
DEFAULT_VERSION = "a"


class Base32Encoder:
    """RFC 4648 base32 without padding, fed one byte at a time.

    The accumulator never holds more than 12 bits, so the result does not
    depend on integer width.
    """

    def __init__(self):
        self._buffer = 0
        self._bits = 0
        self._out: list[str] = []

    def update(self, data: bytes) -> "Base32Encoder":
        for byte in data:
            self._buffer = (self._buffer << 8) | byte
            self._bits += 8
            while self._bits >= 5:
                self._bits -= 5
                self._out.append(BASE32_ALPHABET[(self._buffer >> self._bits) & 31])
            self._buffer &= (1 << self._bits) - 1
        return self

    def finalize(self) -> str:
        """Flush a trailing partial group, zero-filled on the right."""
        if self._bits:
            self._out.append(BASE32_ALPHABET[(self._buffer << (5 - self._bits)) & 31])
            self._buffer = self._bits = 0
        return "".join(self._out)


def base32_encode(data: bytes) -> str:
    return Base32Encoder().update(data).finalize()


def totp_seed(identifier: str | None = None, version: str | None = None) -> str:
    """Compose the seed text; parts left as None take their defaults."""
    if identifier is None:
        identifier = DEFAULT_IDENTIFIER
    if version is None:
        version = DEFAULT_VERSION
    return f"{identifier}{version}"


def derive_totp_secret(identifier: str | None = None, version: str | None = None) -> str:
    """Derive the 32-character base32 TOTP secret for a user and version.

    Args:
        identifier: User id, ``"0"`` when omitted
        version: Rotation tag, ``"a"`` when omitted (``b``, ``c``... on rotation)

    Returns:
        32 characters from ``A-Z2-7``
    """
    seed = totp_seed(identifier, version).encode()
    digest_hex = hashlib.sha256(seed).hexdigest()
    secret_bytes = hmac.new(digest_hex.encode(), seed, hashlib.sha256).digest()
    return base32_encode(secret_bytes)[:SECRET_LENGTH]
