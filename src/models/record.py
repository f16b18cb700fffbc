"""
Timed record contracts shared by the resampler and its callers.

Anything exposing a ``timestamp`` datetime can be resampled; the resampler
itself only ever creates :class:`PlaceholderRecord` instances.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class TimedRecord(Protocol):
    """A value with an associated point in time."""

    timestamp: datetime


@dataclass(frozen=True)
class PlaceholderRecord:
    """
    Stand-in for a grid slot that had no acceptable record.

    Attributes:
        timestamp: The start time of the slot it fills
    """

    timestamp: datetime


def is_placeholder(item: object) -> bool:
    return isinstance(item, PlaceholderRecord)


__all__ = ["TimedRecord", "PlaceholderRecord", "is_placeholder"]
