"""Day-grid resampling of timestamped records.

- Resampler: snaps records onto a fixed-width grid for one calendar day
- DataFrameResampler: the same over a pandas DataFrame
- negotiate_interval: picks the grid interval actually used
"""

from .frame import DataFrameResampler
from .intervals import MINUTES_PER_DAY, VALID_DIVISORS, closest_divisor, negotiate_interval
from .resampler import TOLERANCE_RINGS, Resampler

__all__ = [
    "DataFrameResampler",
    "MINUTES_PER_DAY",
    "Resampler",
    "TOLERANCE_RINGS",
    "VALID_DIVISORS",
    "closest_divisor",
    "negotiate_interval",
]
