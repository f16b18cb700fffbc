"""pandas front-end for the day-grid resampler.

Each DataFrame row becomes a ``Reading``; the output frame has exactly one
row per grid slot.
"""
from __future__ import annotations

from typing import Any

import pandas as pd
from loguru import logger

from exceptions import InvalidConfiguration
from models.reading import Reading
from models.record import is_placeholder
from resampling.resampler import Resampler

SLOT_COL = "slot_time"
PLACEHOLDER_COL = "is_placeholder"


class DataFrameResampler:
    """Resamples a DataFrame onto a fixed-width grid for one day."""

    def __init__(
        self,
        requested_interval_minutes: int,
        source_interval_minutes: int,
        write_placeholders: bool = False,
        timestamp_col: str = "timestamp",
        sort: bool = True,
    ):
        """Initialize the DataFrame resampler.

        Args:
            requested_interval_minutes: Desired grid interval
            source_interval_minutes: Nominal spacing of the input rows
            write_placeholders: Emit timestamp-only rows for unmatched slots
            timestamp_col: Name of the timestamp column
            sort: Stable-sort rows by timestamp before resampling
        """
        self.requested_interval_minutes = requested_interval_minutes
        self.source_interval_minutes = source_interval_minutes
        self.write_placeholders = write_placeholders
        self.timestamp_col = timestamp_col
        self.sort = sort

    def resample(self, data: pd.DataFrame) -> pd.DataFrame:
        """Resample ``data``.

        Args:
            data: Input DataFrame with a timestamp column

        Returns:
            DataFrame with a ``slot_time`` column, the input columns (NaN for
            unmatched slots) and an ``is_placeholder`` flag

        Raises:
            InvalidConfiguration: If the timestamp column is missing, an output
                column name is already taken or an interval is invalid
        """
        if self.timestamp_col not in data.columns:
            raise InvalidConfiguration("timestamp_col", f"column {self.timestamp_col!r} not found")
        reserved = [c for c in (SLOT_COL, PLACEHOLDER_COL) if c in data.columns]
        if reserved:
            raise InvalidConfiguration("data", f"reserved output column(s) already present: {reserved}")

        columns = [SLOT_COL, *data.columns, PLACEHOLDER_COL]

        work = data.copy()
        work[self.timestamp_col] = pd.to_datetime(work[self.timestamp_col])
        missing = int(work[self.timestamp_col].isna().sum())
        if missing:
            logger.warning(f"Dropping {missing} rows without a timestamp")
            work = work.dropna(subset=[self.timestamp_col])
        if self.sort:
            work = work.sort_values(self.timestamp_col, kind="stable")

        readings = [
            Reading(timestamp=row[self.timestamp_col].to_pydatetime(), metadata=row)
            for row in work.to_dict(orient="records")
        ]

        resampler = Resampler(
            readings,
            requested_interval_minutes=self.requested_interval_minutes,
            source_interval_minutes=self.source_interval_minutes,
            write_placeholders=self.write_placeholders,
        )
        grid = resampler.get_resampled_sequence()
        if not grid:
            return pd.DataFrame(columns=columns)

        rows: list[dict[str, Any]] = []
        for slot, item in zip(resampler.slot_starts(), grid):
            if item is None:
                values: dict[str, Any] = {}
            elif is_placeholder(item):
                values = {self.timestamp_col: item.timestamp}
            else:
                values = dict(item.metadata)
            rows.append({**values, SLOT_COL: slot, PLACEHOLDER_COL: is_placeholder(item)})

        out = pd.DataFrame(rows, columns=columns)
        logger.debug(
            f"Resampled {len(work)} rows onto {len(out)} x {resampler.effective_interval_minutes}m slots"
        )
        return out

    def __call__(self, data: pd.DataFrame) -> pd.DataFrame:
        """Make resampler callable."""
        return self.resample(data)


__all__ = ["DataFrameResampler", "PLACEHOLDER_COL", "SLOT_COL"]
