"""Grid coverage validation for resampled day sequences.

This module reports, for a resampled sequence:
- Slots filled by a real record
- Slots filled by a placeholder
- Slots left empty

Coverage Levels:
- Excellent: >99% of slots matched
- Good: 95-99%
- Fair: 90-95%
- Poor: <90%
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np

from models.record import TimedRecord, is_placeholder

logger = logging.getLogger(__name__)


@dataclass
class CoverageResult:
    """Result of grid coverage validation.

    Attributes:
        name: Series name
        total_slots: Number of grid slots
        matched_slots: Slots holding a real record
        placeholder_slots: Slots holding a placeholder
        empty_slots: Slots holding nothing
        coverage_pct: Percentage of slots holding a real record
        status: 'excellent', 'good', 'fair', 'poor'
    """
    name: str
    total_slots: int
    matched_slots: int
    placeholder_slots: int
    empty_slots: int
    coverage_pct: float
    status: str

    @property
    def is_complete(self) -> bool:
        """Every slot holds a real record."""
        return self.total_slots > 0 and self.matched_slots == self.total_slots

    @property
    def missing_slots(self) -> int:
        return self.placeholder_slots + self.empty_slots


class GridCoverageValidator:
    """Validate how much of a day grid was filled with real records.

    Example:
        >>> validator = GridCoverageValidator()
        >>> result = validator.validate(resampler.get_resampled_sequence(), name='meter-7')
        >>> if result.status == 'poor':
        ...     print(f"WARNING: {result.name} only {result.coverage_pct:.1f}% covered")
    """

    def __init__(
        self,
        excellent_threshold: float = 99.0,
        good_threshold: float = 95.0,
        fair_threshold: float = 90.0,
    ):
        """Initialize coverage validator.

        Args:
            excellent_threshold: Threshold for 'excellent' status (default 99%)
            good_threshold: Threshold for 'good' status (default 95%)
            fair_threshold: Threshold for 'fair' status (default 90%)
        """
        self.excellent_threshold = excellent_threshold
        self.good_threshold = good_threshold
        self.fair_threshold = fair_threshold

    def validate(
        self,
        sequence: Sequence[Optional[TimedRecord]],
        name: str = "",
    ) -> CoverageResult:
        """Validate coverage of one resampled sequence.

        Args:
            sequence: Output of ``Resampler.get_resampled_sequence``
            name: Series name used in logs and results

        Returns:
            CoverageResult object
        """
        total = len(sequence)
        if total == 0:
            logger.warning(f"Empty grid for series: {name}")
            return CoverageResult(name, 0, 0, 0, 0, 0.0, 'poor')

        placeholders = sum(1 for item in sequence if is_placeholder(item))
        empty = sum(1 for item in sequence if item is None)
        matched = total - placeholders - empty
        coverage_pct = (matched / total) * 100

        status = self._classify_coverage(coverage_pct)

        if status in ['poor', 'fair']:
            logger.warning(
                f"Low grid coverage for {name}: {coverage_pct:.1f}% "
                f"(status={status})"
            )

        return CoverageResult(
            name=name,
            total_slots=total,
            matched_slots=matched,
            placeholder_slots=placeholders,
            empty_slots=empty,
            coverage_pct=coverage_pct,
            status=status,
        )

    def validate_multiple(
        self,
        sequences: dict[str, Sequence[Optional[TimedRecord]]],
    ) -> dict[str, CoverageResult]:
        """Validate coverage for several named sequences."""
        return {name: self.validate(seq, name=name) for name, seq in sequences.items()}

    def _classify_coverage(self, coverage_pct: float) -> str:
        if coverage_pct >= self.excellent_threshold:
            return 'excellent'
        elif coverage_pct >= self.good_threshold:
            return 'good'
        elif coverage_pct >= self.fair_threshold:
            return 'fair'
        else:
            return 'poor'

    def get_coverage_summary(
        self,
        results: dict[str, CoverageResult],
    ) -> dict[str, Any]:
        """Generate summary statistics for coverage validation.

        Args:
            results: Dictionary of CoverageResult objects

        Returns:
            Summary dictionary
        """
        if not results:
            return {
                'total_series': 0,
                'excellent_count': 0,
                'good_count': 0,
                'fair_count': 0,
                'poor_count': 0,
            }

        by_status = {
            status: [r for r in results.values() if r.status == status]
            for status in ('excellent', 'good', 'fair', 'poor')
        }

        return {
            'total_series': len(results),
            'excellent_count': len(by_status['excellent']),
            'good_count': len(by_status['good']),
            'fair_count': len(by_status['fair']),
            'poor_count': len(by_status['poor']),
            'avg_coverage_pct': float(np.mean([r.coverage_pct for r in results.values()])),
            'total_missing_slots': sum(r.missing_slots for r in results.values()),
            'poor_series': [r.name for r in by_status['poor']],
        }
