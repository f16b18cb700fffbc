"""Day-grid resampler.

Snaps an ascending sequence of timed records onto a fixed grid that covers
the calendar day of the first record, one output element per slot.

SLOT MATCHING
-------------

For each slot start ``T`` (midnight, midnight + interval, ...):

1. Skip the slot if the next unconsumed record lies more than half an
   interval after ``T``; it belongs to a later slot.
2. Widen a tolerance ring of 1, 2 then 3 source intervals around ``T`` and
   take the first unconsumed record that falls inside it.
3. Walk from that candidate towards ``T`` while the neighbouring record is
   strictly closer (ties go to the later record).
4. Consume the chosen record and everything before it.

Example, 30 minute grid over 5 minute data, slot 01:30 with records at
01:20, 01:25, 01:30, 01:35, 01:40: ring 1 spans 01:25..01:35, the first hit
is 01:25, refinement moves to 01:30 and stops because 01:35 is farther.

Slots with no match hold a ``PlaceholderRecord`` at the slot start when
placeholders are enabled, otherwise ``None``.
"""

import logging
import numbers
from datetime import datetime, timedelta
from typing import Iterable, Optional

from config import _Settings, get_settings
from exceptions import InvalidConfiguration
from models.record import PlaceholderRecord, TimedRecord
from resampling.intervals import MINUTES_PER_DAY, negotiate_interval

logger = logging.getLogger(__name__)

# Ring radii, in multiples of the source interval
TOLERANCE_RINGS = (1, 2, 3)


def _midnight(ts: datetime) -> datetime:
    return ts.replace(hour=0, minute=0, second=0, microsecond=0)


def _distance(ts: datetime, target: datetime) -> float:
    return abs((ts - target).total_seconds())


def _check_interval(field: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidConfiguration(field, f"expected a positive integer, got {value!r}")
    if value <= 0:
        raise InvalidConfiguration(field, f"must be positive, got {value}")
    return int(value)


class Resampler:
    """Resample timed records onto a fixed-width grid for one day.

    Records must be sorted ascending by ``timestamp``; this is assumed, not
    checked (see ``validators.find_order_violations``). The caller's
    sequence is copied and never modified.

    Instances are not safe to share between threads.

    Example:
        >>> resampler = Resampler(readings, requested_interval_minutes=30, source_interval_minutes=5)
        >>> grid = resampler.get_resampled_sequence()
        >>> len(grid)
        48
    """

    def __init__(
        self,
        records: Iterable[TimedRecord],
        requested_interval_minutes: int,
        source_interval_minutes: int,
        write_placeholders: bool = False,
    ):
        """Initialize the resampler.

        Args:
            records: Timed records sorted ascending by timestamp
            requested_interval_minutes: Desired grid interval
            source_interval_minutes: Nominal spacing of ``records``; sizes the tolerance rings
            write_placeholders: Fill unmatched slots with ``PlaceholderRecord`` instead of ``None``

        Raises:
            InvalidConfiguration: If an interval is not a positive integer or
                ``write_placeholders`` is not a bool
        """
        self.requested_interval_minutes = _check_interval(
            "requested_interval_minutes", requested_interval_minutes
        )
        self.source_interval_minutes = _check_interval(
            "source_interval_minutes", source_interval_minutes
        )
        if not isinstance(write_placeholders, bool):
            raise InvalidConfiguration(
                "write_placeholders", f"expected a bool, got {write_placeholders!r}"
            )
        self.write_placeholders = write_placeholders

        self._records: tuple = tuple(records)
        self._interval = negotiate_interval(
            self.requested_interval_minutes, self.source_interval_minutes
        )
        # everything before this index has been consumed
        self._cursor = 0
        self._computed = False
        self._resampled: list[Optional[TimedRecord]] = []

    @classmethod
    def from_settings(
        cls, records: Iterable[TimedRecord], settings: Optional[_Settings] = None
    ) -> "Resampler":
        """Build a resampler from environment-driven settings."""
        settings = settings or get_settings()
        return cls(
            records,
            requested_interval_minutes=settings.requested_interval_minutes,
            source_interval_minutes=settings.source_interval_minutes,
            write_placeholders=settings.write_placeholders,
        )

    @property
    def effective_interval_minutes(self) -> int:
        return self._interval

    @property
    def slot_count(self) -> int:
        return MINUTES_PER_DAY // self._interval

    def slot_starts(self) -> list[datetime]:
        """Start time of every grid slot; empty when there are no records."""
        if not self._records:
            return []
        start = _midnight(self._records[0].timestamp)
        step = timedelta(minutes=self._interval)
        return [start + step * i for i in range(self.slot_count)]

    def get_resampled_sequence(self) -> list[Optional[TimedRecord]]:
        """Return one element per grid slot, computing it on first call.

        Returns:
            The same list on every call; empty when there were no records
        """
        if not self._computed:
            self._run()
            self._computed = True
        return self._resampled

    def _run(self) -> None:
        if not self._records:
            logger.debug("No records to resample")
            return

        first = self._records[0]

        # whole-day grid: the first record stands for the day
        if self._interval == MINUTES_PER_DAY:
            self._resampled.append(first)
            self._consume(0)
            return

        step = timedelta(minutes=self._interval)
        current = _midnight(first.timestamp)
        matched = 0
        placeholders = 0

        for _ in range(self.slot_count):
            index = self._find_candidate(current)

            if index is None:
                found = None
                if self.write_placeholders:
                    found = PlaceholderRecord(current)
                    placeholders += 1
            else:
                index = self._refine(current, index)
                found = self._records[index]
                self._consume(index)
                matched += 1

            self._resampled.append(found)
            current += step

        logger.debug(
            f"Resampled {len(self._records)} records onto {self.slot_count} x {self._interval}m slots "
            f"(matched={matched}, placeholders={placeholders}, skipped={len(self._records) - self._cursor})"
        )

    def _find_candidate(self, target: datetime) -> Optional[int]:
        """Index of the first unconsumed record inside the narrowest ring that has one."""
        if self._cursor >= len(self._records):
            return None

        if self._records[self._cursor].timestamp > target + timedelta(minutes=self._interval / 2):
            return None

        for ring in TOLERANCE_RINGS:
            width = timedelta(minutes=self.source_interval_minutes * ring)
            lower, upper = target - width, target + width

            for index in range(self._cursor, len(self._records)):
                ts = self._records[index].timestamp
                if lower <= ts <= upper:
                    return index
                if ts > upper:
                    break

        return None

    def _refine(self, target: datetime, index: int) -> int:
        """Move ``index`` to the locally nearest record to ``target``."""
        last = len(self._records) - 1

        while True:
            if self._cursor == last:
                return index

            candidate = self._records[index].timestamp
            if candidate > target:
                neighbour = index - 1
                if neighbour < self._cursor:
                    return index
            else:
                neighbour = index + 1
                if neighbour > last:
                    return index

            candidate_distance = _distance(candidate, target)
            neighbour_distance = _distance(self._records[neighbour].timestamp, target)

            if neighbour_distance < candidate_distance or (
                neighbour_distance == candidate_distance and neighbour > index
            ):
                index = neighbour
            else:
                return index

    def _consume(self, index: int) -> None:
        self._cursor = index + 1


__all__ = ["Resampler", "TOLERANCE_RINGS"]
