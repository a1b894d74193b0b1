"""
Business day adjustment.

Moves dates that fall on a weekend or holiday to a nearby business day
according to a BusinessDayConvention.
"""

from datetime import date, timedelta
from typing import Optional, Union

from bizcal.core.calendar import HolidayCalendar, DEFAULT_CALENDAR
from bizcal.core.conventions import BusinessDayConvention
from bizcal.core.exceptions import AdjustmentError

# Longest run of consecutive non-business days tolerated by a walk
MAX_ADJUSTMENT_DAYS = 366


def _step(d: date, step: int, calendar: HolidayCalendar) -> date:
    try:
        return d + timedelta(days=step)
    except OverflowError as e:
        direction = "after" if step > 0 else "before"
        raise AdjustmentError(
            f"Calendar {calendar.calendar_id.value} has no business day "
            f"{direction} {d.isoformat()} within the supported date range"
        ) from e


def _walk(d: date, step: int, calendar: HolidayCalendar) -> date:
    """Step from ``d`` in direction ``step`` until a business day is reached."""
    current = d
    for _ in range(MAX_ADJUSTMENT_DAYS + 1):
        if not calendar.is_holiday(current):
            return current
        current = _step(current, step, calendar)
    direction = "after" if step > 0 else "before"
    raise AdjustmentError(
        f"Calendar {calendar.calendar_id.value} has no business day within "
        f"{MAX_ADJUSTMENT_DAYS} days {direction} {d.isoformat()}"
    )


def next_business_day(d: date, calendar: Optional[HolidayCalendar] = None) -> date:
    """Get the next business day on or after the given date."""
    return _walk(d, 1, calendar or DEFAULT_CALENDAR)


def previous_business_day(d: date, calendar: Optional[HolidayCalendar] = None) -> date:
    """Get the previous business day on or before the given date."""
    return _walk(d, -1, calendar or DEFAULT_CALENDAR)


def adjust_date(
    d: date,
    convention: Union[BusinessDayConvention, str],
    calendar: Optional[HolidayCalendar] = None,
) -> date:
    """
    Adjust a date according to a business day convention.

    Modified conventions fall back to the opposite base direction, applied
    to the original date, when the walk leaves the month. The fallback is
    never itself modified, so recursion stops after one level.

    Args:
        d: Date to adjust
        convention: Business day convention or its display label
        calendar: Calendar to use (defaults to weekend-only)

    Returns:
        Adjusted date

    Raises:
        AdjustmentError: If no business day lies within MAX_ADJUSTMENT_DAYS
            or the walk runs past the supported date range
    """
    cal = calendar or DEFAULT_CALENDAR
    convention = BusinessDayConvention.parse(convention)

    if convention == BusinessDayConvention.NO_ADJUST:
        return d

    elif convention == BusinessDayConvention.FOLLOWING:
        return next_business_day(d, cal)

    elif convention == BusinessDayConvention.PRECEDING:
        return previous_business_day(d, cal)

    elif convention == BusinessDayConvention.MODIFIED_FOLLOWING:
        # A failed walk has left the month as well
        try:
            adjusted = next_business_day(d, cal)
        except AdjustmentError:
            adjusted = None
        # If adjusted date is in a different month, go backwards instead
        if adjusted is None or adjusted.month != d.month:
            return adjust_date(d, BusinessDayConvention.PRECEDING, cal)
        return adjusted

    elif convention == BusinessDayConvention.MODIFIED_PRECEDING:
        try:
            adjusted = previous_business_day(d, cal)
        except AdjustmentError:
            adjusted = None
        if adjusted is None or adjusted.month != d.month:
            return adjust_date(d, BusinessDayConvention.FOLLOWING, cal)
        return adjusted

    else:
        raise ValueError(f"Unknown business day convention: {convention}")


def add_business_days(
    d: date,
    days: int,
    calendar: Optional[HolidayCalendar] = None,
) -> date:
    """Add (or subtract, for negative ``days``) business days to a date."""
    cal = calendar or DEFAULT_CALENDAR
    if days == 0:
        return d

    step = 1 if days > 0 else -1
    current = d
    for _ in range(abs(days)):
        current = _walk(_step(current, step, cal), step, cal)
    return current


def business_days_between(
    start: date,
    end: date,
    calendar: Optional[HolidayCalendar] = None,
) -> int:
    """Count business days between two dates (exclusive of start, inclusive of end)."""
    cal = calendar or DEFAULT_CALENDAR

    if end <= start:
        return 0

    count = 0
    for offset in range(1, (end - start).days + 1):
        if cal.is_business_day(start + timedelta(days=offset)):
            count += 1

    return count
