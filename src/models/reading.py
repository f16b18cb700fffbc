"""
Reading data model representing a single timestamped sample.

Meter readings, sensor samples or DataFrame rows wrapped for the day-grid
resampler; ``metadata`` carries whatever else the source had.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


@dataclass
class Reading:
    """
    Represents one sampled value at a point in time.

    Attributes:
        timestamp: The time the sample was taken
        value: The sampled value, if any
        source: Data source that provided this reading
        metadata: Additional source specific fields
    """

    timestamp: datetime
    value: Optional[float] = None
    source: str = "unknown"
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Coerce the value to float when present"""
        if self.value is not None:
            self.value = float(self.value)
