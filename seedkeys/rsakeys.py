"""Seeded RSA keypair derivation.

seed text -> BIP-39 seed expansion -> ChaCha20 byte stream -> RSA key generation.
The same seed always yields the same keypair.
"""

import asyncio
import random
import time
from collections.abc import Callable
from dataclasses import dataclass

from Crypto.PublicKey import RSA
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from mnemonic import Mnemonic

from seedkeys.crypto import generate_fallback_seed
from seedkeys.errors import DerivationError, InputError
from seedkeys.prng import ChaRandom

__all__ = [
    "KEY_BITS",
    "PUBLIC_EXPONENT",
    "RSAKeyResult",
    "derive_rsa_keypair",
    "generate_rsa_keypair",
    "mnemonic_to_seed",
    "serialize_keypair",
]

KEY_BITS = 2048
PUBLIC_EXPONENT = 0x10001

PRIVATE_FORMATS = {
    "pkcs1": serialization.PrivateFormat.TraditionalOpenSSL,
    "pkcs8": serialization.PrivateFormat.PKCS8,
}


@dataclass(frozen=True)
class RSAKeyResult:
    private_key: str
    public_key: str
    seed: str
    timestamp: int | None = None  # Only set when the fallback seed was used


def mnemonic_to_seed(phrase: str) -> bytes:
    """Expand any text to a 64-byte seed as BIP-39 does, without wordlist checks."""
    try:
        return Mnemonic.to_seed(phrase)
    except (TypeError, ValueError) as e:
        raise DerivationError(f"Seed expansion rejected the seed: {e}") from e


def generate_rsa_keypair(bits: int, exponent: int, randfunc: Callable[[int], bytes]):
    """Generate a validated RSA private key drawing randomness only from ``randfunc``."""
    try:
        key = RSA.generate(bits, randfunc=randfunc, e=exponent)
    except ValueError as e:
        raise DerivationError(f"RSA key generation failed: {e}") from e
    p, q, d = key.p, key.q, key.d
    numbers = rsa.RSAPrivateNumbers(
        p=p,
        q=q,
        d=d,
        dmp1=rsa.rsa_crt_dmp1(d, p),
        dmq1=rsa.rsa_crt_dmq1(d, q),
        iqmp=rsa.rsa_crt_iqmp(p, q),
        public_numbers=rsa.RSAPublicNumbers(key.e, key.n),
    )
    try:
        return numbers.private_key()
    except ValueError as e:
        raise DerivationError(f"Generated RSA key is invalid: {e}") from e


def check_private_format(private_format: str):
    if private_format not in PRIVATE_FORMATS:
        raise InputError(f"Unknown private key format: {private_format}")


def serialize_keypair(private_key, private_format: str = "pkcs1") -> tuple[str, str]:
    """PEM text of the private key and of its X.509 SubjectPublicKeyInfo."""
    check_private_format(private_format)
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=PRIVATE_FORMATS[private_format],
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return private_pem.decode("ascii"), public_pem.decode("ascii")


def _derive(seed: str, private_format: str) -> tuple[str, str]:
    entropy_hex = mnemonic_to_seed(seed).hex()
    private_key = generate_rsa_keypair(KEY_BITS, PUBLIC_EXPONENT, ChaRandom(entropy_hex))
    return serialize_keypair(private_key, private_format)


async def derive_rsa_keypair(
    seed: str | None = None,
    *,
    jitter: random.Random | None = None,
    clock: Callable[[], int] = time.time_ns,
    private_format: str = "pkcs1",
) -> RSAKeyResult:
    """Derive a 2048-bit RSA keypair (e=65537) from a seed phrase.

    Args:
        seed: Seed text; when missing or empty, a seed is made from the current
            time in milliseconds plus a random 0-999 ms jitter. That fallback is
            guessable and only suitable where the seed is recorded for reuse.
        jitter: Generator for the fallback jitter (fresh ``random.Random`` if None)
        clock: Nanosecond clock used for the fallback timestamp
        private_format: ``"pkcs1"`` (RSA PRIVATE KEY) or ``"pkcs8"`` (PRIVATE KEY)

    Returns:
        RSAKeyResult with PEM keys, the effective seed and, for a fallback
        seed, the timestamp it was built from.

    Raises:
        InputError: unknown private_format
        DerivationError: seed expansion or key generation failed
    """
    check_private_format(private_format)
    timestamp = None
    if not seed:
        timestamp = clock() // 1_000_000
        seed = generate_fallback_seed(timestamp, jitter or random.Random())
    private_pem, public_pem = await asyncio.to_thread(_derive, seed, private_format)
    return RSAKeyResult(private_pem, public_pem, seed, timestamp)
