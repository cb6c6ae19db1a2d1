"""Seed helpers for key derivation and fallback seed generation."""

import hashlib
import random

__all__ = [
    "derive_key",
    "generate_fallback_seed",
]


def generate_fallback_seed(timestamp: int, jitter: random.Random) -> str:
    """Seed string from a millisecond timestamp plus up to 999 ms of jitter.

    Not cryptographically secure: anyone who knows roughly when a key was made
    can search the seed space. Pass your own high-entropy seed if that matters.
    """
    return str(timestamp + jitter.randrange(1000))


def derive_key(seed: str, key_bytes: int) -> bytes:
    """Derive a key from a seed string using SHA-512."""
    assert 16 <= key_bytes <= 64, "Only 128-512 bits supported"
    return hashlib.sha512(seed.encode()).digest()[:key_bytes]
