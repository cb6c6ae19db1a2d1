"""ChaCha20 keystream generator with state kept between calls."""

from typing import Any

from cryptography.hazmat.primitives.ciphers import Cipher
from cryptography.hazmat.primitives.ciphers.algorithms import ChaCha20

__all__ = ["Cha", "generate"]


def _processKeys(key, iv):
    key = memoryview(key)
    iv = memoryview(iv)
    if key.nbytes != 32:
        raise ValueError("key must be 32 bytes")
    if iv.nbytes != 16:
        # Allow original and IETF nonces with zero counter
        if iv.nbytes == 8:
            iv = bytes(8) + iv
        elif iv.nbytes == 12:
            iv = bytes(4) + iv
        else:
            raise ValueError(
                "iv length must be 8 (original nonce), 12 (IETF) or 16 (counter in initial bytes)"
            )
    return bytes(key), bytes(iv)


def _processBuffer(out):
    if not out:
        raise ValueError("Output buffer of non-zero size is required")
    view = memoryview(out)
    if view.readonly:
        raise ValueError("The output buffer must be writable, not e.g. `bytes`")
    view = view.cast("B")
    return view, view.nbytes


class Cha:
    def __init__(self, key: bytes | Any, iv: bytes | Any):
        """Construct a generator that holds its internal state, moving forward on each call."""
        key, iv = _processKeys(key, iv)
        self._encryptor = Cipher(ChaCha20(key, iv), mode=None).encryptor()

    def __call__(self, out: bytearray | Any):
        """Fill the parameter with random bytes"""
        outbuf, outlen = _processBuffer(out)
        outbuf[:] = self._encryptor.update(bytes(outlen))
        return out


def generate(out: bytearray | Any, key: bytes | Any, iv: bytes | Any):
    """Setup a generator, fill the out buffer and dispose the generator"""
    return Cha(key, iv)(out)
