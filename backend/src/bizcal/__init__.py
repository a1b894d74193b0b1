"""
Business day calendars - holiday generation and date adjustment.

Builds holiday calendars from per-jurisdiction rule tables (London, New York
Stock Exchange, TARGET) or from caller-supplied holiday lists, and adjusts
dates to business days under the standard conventions:
- No Adjustment, Following, Modified Following
- Preceding, Modified Preceding

Example:
    >>> from datetime import date
    >>> from bizcal import get_calendar, adjust_date, BusinessDayConvention
    >>> cal = get_calendar("GBLO")
    >>> adjust_date(date(2021, 12, 25), BusinessDayConvention.FOLLOWING, cal)
    datetime.date(2021, 12, 29)
"""

__version__ = "0.1.0"

from bizcal.core import (
    Weekday,
    easter,
    CalendarError,
    AdjustmentError,
    CalendarSpecError,
    CalendarId,
    generate_holidays,
    HolidayCalendar,
    DEFAULT_CALENDAR,
    BusinessDayConvention,
    adjust_date,
    add_business_days,
    business_days_between,
    next_business_day,
    previous_business_day,
    SchedulePeriod,
    get_calendar,
)

from bizcal.schema import (
    CalendarSpec,
    load_calendar_spec,
    validate_calendar_spec,
    build_calendar,
    print_calendar_summary,
)

__all__ = [
    # Version
    "__version__",
    # Date math
    "Weekday",
    "easter",
    # Errors
    "CalendarError",
    "AdjustmentError",
    "CalendarSpecError",
    # Calendars
    "CalendarId",
    "generate_holidays",
    "HolidayCalendar",
    "DEFAULT_CALENDAR",
    "get_calendar",
    # Adjustment
    "BusinessDayConvention",
    "adjust_date",
    "add_business_days",
    "business_days_between",
    "next_business_day",
    "previous_business_day",
    "SchedulePeriod",
    # Calendar specs
    "CalendarSpec",
    "load_calendar_spec",
    "validate_calendar_spec",
    "build_calendar",
    "print_calendar_summary",
]
