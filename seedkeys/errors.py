"""Exception types raised by the derivation functions."""

__all__ = [
    "DerivationError",
    "InputError",
]


class InputError(ValueError):
    """An option passed to a derivation function is not supported.

    Seed text itself is never rejected with this error; any string is accepted.
    """


class DerivationError(ValueError):
    """Seed expansion or key generation failed; no key material was produced."""
