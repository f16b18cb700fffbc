#!/usr/bin/env python3
"""Script to check how well a CSV of readings covers a day grid."""

import argparse
import sys
from pathlib import Path

# Add src to path when run from a checkout
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pandas as pd

from app_logging import get_logger
from config import get_settings
from models.reading import Reading
from resampling import Resampler
from validators import GridCoverageValidator, find_order_violations

logger = get_logger("check_grid_coverage")


def parse_args(argv=None):
    settings = get_settings()
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("csv", help="CSV file with one reading per row")
    parser.add_argument("--timestamp-col", default="timestamp")
    parser.add_argument("--requested", type=int, default=settings.requested_interval_minutes,
                        help="grid interval in minutes")
    parser.add_argument("--source", type=int, default=settings.source_interval_minutes,
                        help="nominal spacing of the readings in minutes")
    parser.add_argument("--placeholders", action="store_true", default=settings.write_placeholders,
                        help="fill unmatched slots with placeholders")
    return parser.parse_args(argv)


def check_coverage(argv=None) -> int:
    """Check grid coverage for one CSV file."""
    args = parse_args(argv)

    df = pd.read_csv(args.csv)
    timestamps = pd.to_datetime(df[args.timestamp_col]).dropna()
    readings = [Reading(timestamp=ts.to_pydatetime()) for ts in timestamps]

    violations = find_order_violations(readings)
    if violations:
        logger.warning(f"{args.csv}: input is not sorted, results are unreliable")

    resampler = Resampler(readings, args.requested, args.source, write_placeholders=args.placeholders)
    result = GridCoverageValidator().validate(resampler.get_resampled_sequence(), name=args.csv)

    print("Grid Coverage Analysis")
    print("=" * 80)
    print(f"{'Rows':<8} {'Interval':<10} {'Slots':<8} {'Matched':<9} {'Filled':<8} {'Empty':<8} {'Coverage':<10} {'Unsorted':<9} {'Status':<10}")
    print("-" * 80)
    print(
        f"{len(readings):<8} {resampler.effective_interval_minutes:<10} {result.total_slots:<8} "
        f"{result.matched_slots:<9} {result.placeholder_slots:<8} {result.empty_slots:<8} "
        f"{result.coverage_pct:<10.1f} {len(violations):<9} {result.status:<10}"
    )
    print("-" * 80)

    if result.status == "poor":
        print(f"⚠️ Poor coverage for {args.csv}")
        return 1
    print("✅ Coverage acceptable")
    return 0


if __name__ == "__main__":
    sys.exit(check_coverage())
