"""
Compute Service

Deterministic calculations behind the extended warranty rules:
- Eligibility of a product code (vowel count)
- Warranty price tiers
- Warranty expiration dates

All calculations are deterministic: same input → same output.
"""

from datetime import date
from decimal import Decimal
from typing import TypeVar, Union

from dateutil.relativedelta import relativedelta, MO, SU


VOWELS = frozenset("aeiouAEIOU")

# A code with exactly this many vowels is not eligible
INELIGIBLE_VOWEL_COUNT = 3

PRICE_THRESHOLD = Decimal("500000")
HIGH_TIER_RATE = Decimal("0.2")
LOW_TIER_RATE = Decimal("0.1")

HIGH_TIER_COUNTED_DAYS = 200
LOW_TIER_DAYS = 100
SUNDAY_PUSH_DAYS = 2

DateT = TypeVar("DateT", bound=date)
Number = Union[Decimal, int, float, str]


def _as_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def count_vowels(code: str) -> int:
    """Count the ASCII vowels (either case) in a product code."""
    return sum(1 for char in code if char in VOWELS)


def is_eligible(code: str) -> bool:
    """A product code is eligible unless it has exactly three vowels."""
    return count_vowels(code) != INELIGIBLE_VOWEL_COUNT


def price_of(product_price: Number) -> Decimal:
    """
    Calculate the extended warranty price for a product.

    Products priced above 500000 pay 20% of their price, everything
    else (500000 included) pays 10%.

    Args:
        product_price: Product sale price

    Returns:
        Warranty price as a Decimal
    """
    price = _as_decimal(product_price)
    if price > PRICE_THRESHOLD:
        return price * HIGH_TIER_RATE
    return price * LOW_TIER_RATE


def expiration_of(request_date: DateT, reference_price: Number) -> DateT:
    """
    Calculate the warranty expiration date.

    High tier (reference price above 500000): walk forward one day at a
    time until 200 non-Monday days have been counted, the day being
    checked before each step. A walk that ends on a Sunday is pushed two
    more days. Low tier: exactly 100 days later.

    Works on date and datetime values; the time of day is kept.

    Args:
        request_date: Date the warranty was requested
        reference_price: Price compared against the 500000 threshold

    Returns:
        Expiration date, same type as request_date
    """
    if _as_decimal(reference_price) <= PRICE_THRESHOLD:
        return request_date + relativedelta(days=+LOW_TIER_DAYS)

    current = request_date
    counted = 1
    while counted <= HIGH_TIER_COUNTED_DAYS:
        if current.weekday() != MO.weekday:
            counted += 1
        current += relativedelta(days=+1)

    if current.weekday() == SU.weekday:
        current += relativedelta(days=+SUNDAY_PUSH_DAYS)
    return current
