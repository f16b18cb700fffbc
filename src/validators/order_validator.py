"""Sort-order check for resampler input.

The resampler assumes ascending timestamps and does not verify them; this
check is for callers that want to fail or warn early.
"""

import logging
from typing import Sequence

import numpy as np

from models.record import TimedRecord

logger = logging.getLogger(__name__)


def find_order_violations(records: Sequence[TimedRecord]) -> list[int]:
    """Positions whose timestamp is earlier than the one before it.

    Args:
        records: Timed records in their given order

    Returns:
        Ascending list of offending positions (empty when sorted)
    """
    if len(records) < 2:
        return []

    # offsets from the first record, in seconds
    origin = records[0].timestamp
    offsets = np.array([(r.timestamp - origin).total_seconds() for r in records])
    violations = (np.flatnonzero(np.diff(offsets) < 0) + 1).tolist()

    if violations:
        logger.warning(f"{len(violations)} records out of timestamp order (first at position {violations[0]})")

    return violations
