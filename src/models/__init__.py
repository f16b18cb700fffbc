"""
Data models for records that can be placed on the day grid
"""

from .reading import Reading
from .record import PlaceholderRecord, TimedRecord, is_placeholder

__all__ = ["PlaceholderRecord", "Reading", "TimedRecord", "is_placeholder"]
