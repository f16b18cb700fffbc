"""Grid interval negotiation for the day-grid resampler.

A grid must tile one day exactly, so the effective interval is always a
divisor of 1440 minutes and never finer than the data it is built from.
"""

import logging

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 1440

VALID_DIVISORS = (
    5, 6, 8, 9, 10, 12, 15, 16, 18, 20, 24, 30, 32, 36, 40, 45, 48, 60, 72,
    80, 90, 96, 120, 144, 160, 180, 240, 288, 360, 480, 720, 1440,
)


def closest_divisor(minutes: int) -> int:
    """Return the entry of ``VALID_DIVISORS`` nearest to ``minutes``.

    Ties go to the entry seen first, i.e. the smaller one: 7 resolves to 6,
    not 8.
    """
    closest = None
    for divisor in VALID_DIVISORS:
        if closest is None or abs(divisor - minutes) < abs(closest - minutes):
            closest = divisor
    return closest


def negotiate_interval(requested_minutes: int, source_minutes: int) -> int:
    """Derive the grid interval actually used for a day.

    Args:
        requested_minutes: Interval the caller asked for
        source_minutes: Nominal spacing of the input data

    Returns:
        An interval that divides ``MINUTES_PER_DAY`` and is not finer than
        the source data (unless the source itself cannot tile a day)
    """
    interval = requested_minutes
    if interval < source_minutes:
        logger.debug(f"Requested interval {interval}m is finer than source data, using {source_minutes}m")
        interval = source_minutes

    if MINUTES_PER_DAY % interval:
        snapped = closest_divisor(interval)
        logger.debug(f"Interval {interval}m does not divide a day, snapped to {snapped}m")
        interval = snapped

    return interval


__all__ = [
    "MINUTES_PER_DAY",
    "VALID_DIVISORS",
    "closest_divisor",
    "negotiate_interval",
]
