"""Validation helpers around the day-grid resampler."""

from .coverage_validator import CoverageResult, GridCoverageValidator
from .order_validator import find_order_violations

__all__ = [
    'CoverageResult',
    'GridCoverageValidator',
    'find_order_violations',
]
