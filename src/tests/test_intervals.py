"""Tests for grid interval negotiation.

Tests coverage:
- closest_divisor: nearest table entry, first-seen tie-break
- negotiate_interval: raising to the source interval, snapping non-divisors
"""

import pytest
from resampling.intervals import MINUTES_PER_DAY, VALID_DIVISORS, closest_divisor, negotiate_interval


class TestDivisorTable:
    """Sanity checks on the divisor table."""

    def test_every_entry_divides_a_day(self):
        assert all(MINUTES_PER_DAY % d == 0 for d in VALID_DIVISORS)

    def test_table_is_ascending(self):
        assert list(VALID_DIVISORS) == sorted(VALID_DIVISORS)

    def test_whole_day_is_a_valid_target(self):
        assert VALID_DIVISORS[-1] == MINUTES_PER_DAY


class TestClosestDivisor:
    """Test suite for closest_divisor."""

    @pytest.mark.parametrize(
        "minutes, expected",
        [
            (7, 6),      # 6 and 8 tie, smaller wins
            (11, 10),    # 10 and 12 tie
            (13, 12),
            (25, 24),
            (50, 48),
            (100, 96),
            (1000, 720),
            (1200, 1440),
            (5000, 1440),
            (1, 5),
        ],
    )
    def test_closest(self, minutes, expected):
        assert closest_divisor(minutes) == expected

    def test_exact_entry_is_kept(self):
        for divisor in VALID_DIVISORS:
            assert closest_divisor(divisor) == divisor


class TestNegotiateInterval:
    """Test suite for negotiate_interval."""

    def test_valid_interval_unchanged(self):
        assert negotiate_interval(30, 5) == 30

    def test_finer_than_source_is_raised(self):
        assert negotiate_interval(5, 30) == 30

    def test_non_divisor_snapped(self):
        assert negotiate_interval(7, 5) == 6

    def test_raised_then_snapped(self):
        # 7 is raised to the source's 25, which does not divide a day
        assert negotiate_interval(7, 25) == 24

    def test_small_divisors_outside_table_kept(self):
        assert negotiate_interval(4, 1) == 4

    def test_whole_day(self):
        assert negotiate_interval(1440, 5) == 1440

    def test_result_always_divides_a_day(self):
        for requested in range(1, 1500, 7):
            for source in (1, 5, 10, 15, 30, 60):
                assert MINUTES_PER_DAY % negotiate_interval(requested, source) == 0
