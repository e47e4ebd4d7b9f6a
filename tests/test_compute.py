"""
Unit Tests for Compute Service

Tests deterministic calculations for eligibility, warranty price and expiration.
"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from extended_warranty.compute.service import (
    count_vowels,
    is_eligible,
    price_of,
    expiration_of
)


class TestEligibility:
    """Tests for the vowel-count eligibility rule."""

    def test_counts_vowels_in_both_cases(self):
        assert count_vowels("FE1TSA0A50") == 3
        assert count_vowels("aEiOu") == 5
        assert count_vowels("XYZ123") == 0

    def test_exactly_three_vowels_not_eligible(self):
        assert is_eligible("FE1TSA0A50") is False
        assert is_eligible("aei") is False
        assert is_eligible("AbEcI") is False

    def test_other_vowel_counts_eligible(self):
        """Only exactly three vowels disqualifies; two or four do not."""
        assert is_eligible("F01TSA0150") is True
        assert is_eligible("ae") is True
        assert is_eligible("aeio") is True
        assert is_eligible("B4R") is True

    def test_accented_vowels_not_counted(self):
        assert count_vowels("áéí") == 0
        assert is_eligible("áéíou") is True


class TestWarrantyPrice:
    """Tests for warranty price tiers."""

    def test_threshold_uses_low_rate(self):
        assert price_of(500000) == Decimal("50000")

    def test_above_threshold_uses_high_rate(self):
        assert price_of(500001) == Decimal("100000.2")

    def test_low_tier(self):
        assert price_of(200000) == Decimal("20000")

    def test_accepts_decimal_and_string(self):
        assert price_of(Decimal("780000")) == Decimal("156000")
        assert price_of("1000") == Decimal("100")

    def test_zero_price(self):
        assert price_of(0) == 0


class TestExpirationDate:
    """Tests for warranty expiration dates."""

    def test_high_tier(self):
        result = expiration_of(date(2018, 8, 16), 780000)
        assert result == date(2019, 4, 6)

    def test_high_tier_landing_on_sunday_moves_to_tuesday(self):
        """2019-04-07 is a Sunday, so the walk is pushed two days."""
        result = expiration_of(date(2018, 8, 17), 780000)
        assert result == date(2019, 4, 9)
        assert result.weekday() == 1

    def test_low_tier_adds_100_days(self):
        result = expiration_of(date(2018, 8, 16), 200000)
        assert result == date(2018, 11, 24)

    def test_threshold_is_low_tier(self):
        assert expiration_of(date(2018, 8, 16), 500000) == date(2018, 11, 24)

    def test_time_of_day_is_kept(self):
        result = expiration_of(datetime(2018, 8, 16, 14, 45, 10), 780000)
        assert result == datetime(2019, 4, 6, 14, 45, 10)

    def test_high_tier_never_ends_on_sunday(self):
        start = date(2018, 1, 1)
        for offset in range(14):
            result = expiration_of(date.fromordinal(start.toordinal() + offset), 600000)
            assert result.weekday() != 6

    @pytest.mark.parametrize("day", range(1, 8))
    def test_high_tier_walk_length(self, day):
        """The walk covers 200 non-Monday days plus every Monday it crosses."""
        start = date(2018, 10, day)
        result = expiration_of(start, 600000)
        span = (result - start).days
        assert 233 <= span <= 236


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
