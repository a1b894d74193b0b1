#!/usr/bin/env python3
"""
Example: Adjust a set of schedule dates under every business day convention.

Usage:
    python examples/run_adjust.py [dates ...] [--calendar GBLO] [--calendar-file spec.json] [--verbose]
"""

import sys
from pathlib import Path
import argparse
import traceback
from datetime import date

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bizcal.core.adjustment import adjust_date
from bizcal.core.conventions import BusinessDayConvention
from bizcal.core.period import SchedulePeriod
from bizcal.core.registry import get_calendar
from bizcal.schema import build_calendar, load_calendar_spec, print_calendar_summary


DEFAULT_DATES = ["2024-03-31", "2024-06-30", "2024-09-30", "2024-12-25", "2025-03-31"]


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Adjust schedule dates to business days"
    )
    parser.add_argument(
        "dates",
        type=str,
        nargs="*",
        default=DEFAULT_DATES,
        help="Unadjusted dates (YYYY-MM-DD)"
    )
    parser.add_argument(
        "--calendar", "-c",
        type=str,
        default="GBLO",
        help="Calendar identifier (default: GBLO)"
    )
    parser.add_argument(
        "--calendar-file", "-f",
        type=str,
        default=None,
        help="JSON calendar spec, e.g. examples/gulf_calendar.json"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print detailed output"
    )

    args = parser.parse_args()

    print("=" * 70)
    print("BUSINESS DAY ADJUSTMENT")
    print("=" * 70)

    try:
        # 1. Load calendar
        if args.calendar_file:
            print(f"\n[1/3] Loading calendar spec: {Path(args.calendar_file).name}")
            calendar = build_calendar(load_calendar_spec(args.calendar_file))
        else:
            print(f"\n[1/3] Building calendar: {args.calendar}")
            calendar = get_calendar(args.calendar)

        dates = [date.fromisoformat(d) for d in args.dates]
        if args.verbose:
            print_calendar_summary(calendar, year=dates[0].year if dates else None)

        # 2. Adjust every date under every convention
        print(f"\n[2/3] Adjusting {len(dates)} dates...")
        header = f"  {'Date':<12}" + "".join(f"{c.value:>20}" for c in BusinessDayConvention)
        print(header)
        for d in dates:
            row = f"  {d.isoformat():<12}"
            for convention in BusinessDayConvention:
                row += f"{adjust_date(d, convention, calendar).isoformat():>20}"
            print(row)

        # 3. Periods between consecutive dates
        print(f"\n[3/3] Modified Following periods:")
        for start, end in zip(dates, dates[1:]):
            period = SchedulePeriod.from_unadjusted(
                start, end, BusinessDayConvention.MODIFIED_FOLLOWING, calendar
            )
            print(f"  {period.start_date} -> {period.end_date}  {period.length_in_days:>4} days")

        return 0

    except FileNotFoundError as e:
        print(f"\nERROR: {e}")
        return 1

    except Exception as e:
        print(f"\nERROR: {type(e).__name__}: {e}")
        if args.verbose:
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
