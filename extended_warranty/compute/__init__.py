"""Compute Package - Deterministic warranty rules."""

from .service import (
    count_vowels,
    is_eligible,
    price_of,
    expiration_of,
)

__all__ = ["count_vowels", "is_eligible", "price_of", "expiration_of"]
