"""
Command line interface for holiday calendars.

Usage:
    bizcal holidays GBLO --year 2024
    bizcal check GBLO 2024-12-25
    bizcal adjust GBLO 2024-12-25 --convention "Modified Following"
    bizcal adjust CUST 2024-06-01 --calendar-file my_calendar.json
"""

import argparse
import logging
import sys
import traceback
from datetime import date
from typing import List, Optional

from bizcal.core.adjustment import adjust_date
from bizcal.core.calendar import HolidayCalendar
from bizcal.core.conventions import BusinessDayConvention
from bizcal.core.exceptions import CalendarError, CalendarSpecError
from bizcal.core.registry import get_calendar
from bizcal.core.rules import CalendarId
from bizcal.schema import build_calendar, load_calendar_spec, print_calendar_summary

logger = logging.getLogger(__name__)


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date {value!r}, expected YYYY-MM-DD")


def _resolve_calendar(args: argparse.Namespace) -> HolidayCalendar:
    if args.calendar_file:
        spec = load_calendar_spec(args.calendar_file)
        if spec.calendar_id.value != args.calendar:
            raise CalendarSpecError(
                f"Calendar file {args.calendar_file} defines {spec.calendar_id.value}, "
                f"not {args.calendar}"
            )
        calendar = build_calendar(spec)
    else:
        calendar = get_calendar(args.calendar)
    if args.weekends_only:
        calendar = calendar.with_weekends_only()
    logger.debug(f"Using {calendar!r}")
    return calendar


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bizcal",
        description="Holiday calendars and business day adjustment",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "calendar",
        type=str,
        choices=[c.value for c in CalendarId],
        help="Calendar identifier"
    )
    common.add_argument(
        "--calendar-file", "-f",
        type=str,
        default=None,
        help="JSON calendar spec to use instead of the generated calendar (its calendar_id must match)"
    )
    common.add_argument(
        "--weekends-only",
        action="store_true",
        help="Ignore the holiday list and treat only weekend days as holidays"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    holidays = subparsers.add_parser("holidays", parents=[common], help="List holidays")
    holidays.add_argument(
        "--year", "-y",
        type=int,
        default=None,
        help="Year to list (default: summary only)"
    )

    check = subparsers.add_parser("check", parents=[common], help="Check a date")
    check.add_argument("date", type=_parse_date, help="Date (YYYY-MM-DD)")

    adjust = subparsers.add_parser("adjust", parents=[common], help="Adjust a date")
    adjust.add_argument("date", type=_parse_date, help="Date (YYYY-MM-DD)")
    adjust.add_argument(
        "--convention", "-c",
        type=str,
        default=BusinessDayConvention.MODIFIED_FOLLOWING.value,
        help="Business day convention label (default: Modified Following)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        calendar = _resolve_calendar(args)

        if args.command == "holidays":
            print_calendar_summary(calendar, year=args.year)

        elif args.command == "check":
            status = "business day" if calendar.is_business_day(args.date) else "holiday"
            print(f"{args.date.isoformat()} ({args.date.strftime('%A')}): {status}")

        elif args.command == "adjust":
            convention = BusinessDayConvention.parse(args.convention)
            adjusted = adjust_date(args.date, convention, calendar)
            print(f"{args.date.isoformat()} -> {adjusted.isoformat()} ({convention.value})")

        return 0

    except FileNotFoundError as e:
        print(f"ERROR: {e}")
        return 1

    except CalendarError as e:
        print(f"ERROR: {type(e).__name__}: {e}")
        if args.verbose:
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
