"""Tests for grid coverage and input order validators.

Tests coverage:
- GridCoverageValidator: matched/placeholder/empty counts, status classification, summary
- find_order_violations: sorted input, swapped records, short input
"""

from datetime import datetime, timedelta

import pytest
from models.reading import Reading
from models.record import PlaceholderRecord
from resampling.resampler import Resampler
from validators import CoverageResult, GridCoverageValidator, find_order_violations

DAY = datetime(2024, 3, 14)


def readings(minutes: list[int]) -> list[Reading]:
    return [Reading(timestamp=DAY + timedelta(minutes=m)) for m in minutes]


# ============================================================================
# GridCoverageValidator Tests
# ============================================================================

class TestGridCoverageValidator:
    """Test suite for GridCoverageValidator."""

    @pytest.fixture
    def full_grid(self):
        return Resampler(readings(list(range(0, 1440, 5))), 30, 5).get_resampled_sequence()

    @pytest.fixture
    def sparse_grid(self):
        return Resampler(readings([0]), 30, 5, write_placeholders=True).get_resampled_sequence()

    def test_initialization(self):
        validator = GridCoverageValidator(excellent_threshold=98, good_threshold=90, fair_threshold=80)
        assert validator.excellent_threshold == 98
        assert validator.good_threshold == 90
        assert validator.fair_threshold == 80

    def test_full_coverage(self, full_grid):
        result = GridCoverageValidator().validate(full_grid, name='meter-1')

        assert result.name == 'meter-1'
        assert result.total_slots == 48
        assert result.matched_slots == 48
        assert result.missing_slots == 0
        assert result.coverage_pct == 100.0
        assert result.status == 'excellent'
        assert result.is_complete

    def test_placeholders_counted(self, sparse_grid):
        result = GridCoverageValidator().validate(sparse_grid)

        assert result.matched_slots == 1
        assert result.placeholder_slots == 47
        assert result.empty_slots == 0
        assert result.status == 'poor'
        assert not result.is_complete

    def test_empty_slots_counted(self):
        grid = Resampler(readings([0]), 30, 5).get_resampled_sequence()
        result = GridCoverageValidator().validate(grid)

        assert result.empty_slots == 47
        assert result.placeholder_slots == 0
        assert result.missing_slots == 47

    def test_status_thresholds(self):
        validator = GridCoverageValidator()
        record = Reading(timestamp=DAY)

        # 19 of 20 slots matched -> 95%
        result = validator.validate([record] * 19 + [None])
        assert result.coverage_pct == pytest.approx(95.0)
        assert result.status == 'good'

        # 9 of 10 -> 90%
        result = validator.validate([record] * 9 + [PlaceholderRecord(DAY)])
        assert result.status == 'fair'

    def test_empty_sequence(self):
        result = GridCoverageValidator().validate([], name='nothing')

        assert result.total_slots == 0
        assert result.status == 'poor'
        assert not result.is_complete

    def test_validate_multiple_and_summary(self, full_grid, sparse_grid):
        validator = GridCoverageValidator()
        results = validator.validate_multiple({'full': full_grid, 'sparse': sparse_grid})

        assert set(results) == {'full', 'sparse'}
        assert all(isinstance(r, CoverageResult) for r in results.values())

        summary = validator.get_coverage_summary(results)
        assert summary['total_series'] == 2
        assert summary['excellent_count'] == 1
        assert summary['poor_count'] == 1
        assert summary['poor_series'] == ['sparse']
        assert summary['total_missing_slots'] == 47
        assert summary['avg_coverage_pct'] == pytest.approx((100.0 + 100.0 / 48) / 2)

    def test_empty_summary(self):
        summary = GridCoverageValidator().get_coverage_summary({})
        assert summary['total_series'] == 0


# ============================================================================
# find_order_violations Tests
# ============================================================================

class TestOrderViolations:
    """Test suite for find_order_violations."""

    def test_sorted_input(self):
        assert find_order_violations(readings([0, 5, 5, 10, 30])) == []

    def test_swapped_records(self):
        assert find_order_violations(readings([0, 10, 5, 15, 12])) == [2, 4]

    def test_short_input(self):
        assert find_order_violations([]) == []
        assert find_order_violations(readings([30])) == []
