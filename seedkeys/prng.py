"""Deterministic byte source for libraries that take a ``randfunc``."""

from seedkeys import cha
from seedkeys.crypto import derive_key

__all__ = ["ChaRandom"]

NONCE = bytes(8) + b"RSAKeyGn"


class ChaRandom:
    """ChaCha20 stream whose whole output is a function of ``entropy_hex``.

    Instances are callable as ``randfunc(n) -> bytes``, the interface expected
    by PyCryptodome. Create one per derivation; never share an instance.
    """

    def __init__(self, entropy_hex: str):
        self._generator = cha.Cha(derive_key(entropy_hex, 32), NONCE)

    def __call__(self, n: int) -> bytes:
        if n <= 0:
            return b""
        return bytes(self._generator(bytearray(n)))
