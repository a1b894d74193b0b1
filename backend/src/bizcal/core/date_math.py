"""
Date arithmetic used by the holiday rule tables.

Covers the Easter moving feast and weekday-relative lookups within a month.
"""

import calendar
from datetime import date, timedelta
from enum import IntEnum
from typing import Tuple


class Weekday(IntEnum):
    """Days of the week, numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


ONE_DAY = timedelta(days=1)


def easter(year: int) -> date:
    """
    Western (Gregorian) Easter Sunday for a given year.

    Anonymous Gregorian algorithm (Meeus/Jones/Butcher). Every step is an
    integer floor division or modulo; the order of operations matters.

    Examples:
        >>> easter(2023)
        datetime.date(2023, 4, 9)
        >>> easter(2024)
        datetime.date(2024, 3, 31)
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = (h + l - 7 * m + 114) % 31 + 1
    return date(year, month, day)


def first_weekday_on_or_after(year: int, month: int, weekday: int) -> date:
    """First date in the month falling on ``weekday``."""
    result = date(year, month, 1)
    while result.weekday() != weekday:
        result += ONE_DAY
    return result


def last_weekday_on_or_before(year: int, month: int, weekday: int) -> date:
    """Last date in the month falling on ``weekday``."""
    last_day = calendar.monthrange(year, month)[1]
    result = date(year, month, last_day)
    while result.weekday() != weekday:
        result -= ONE_DAY
    return result


def nth_weekday_in_month(year: int, month: int, weekday: int, n: int) -> date:
    """
    The ``n``-th occurrence (1-based) of ``weekday`` in a month.

    Raises:
        ValueError: If the month has fewer than ``n`` such weekdays.
    """
    if n < 1:
        raise ValueError(f"Occurrence must be >= 1, got {n}")
    result = first_weekday_on_or_after(year, month, weekday) + timedelta(weeks=n - 1)
    if result.month != month:
        raise ValueError(
            f"No occurrence {n} of weekday {weekday} in {year}-{month:02d}"
        )
    return result


def bump_sunday_to_monday(d: date, secondary_weekend: int = Weekday.SUNDAY) -> date:
    """Move ``d`` one day forward if it lands on the secondary weekend day."""
    if d.weekday() == secondary_weekend:
        return d + ONE_DAY
    return d


def fixed_holiday_bumped(
    year: int,
    month: int,
    day: int,
    weekend_days: Tuple[int, int] = (Weekday.SATURDAY, Weekday.SUNDAY),
    shift: int = 2,
) -> date:
    """
    A fixed-date holiday, moved to its makeup day when it hits the weekend.

    With a Saturday/Sunday weekend, Christmas (25th) and Boxing Day (26th)
    both shift by two days, landing on the two weekdays after the weekend.
    """
    holiday = date(year, month, day)
    if holiday.weekday() in weekend_days:
        return holiday + timedelta(days=shift)
    return holiday


def nearest_weekday(d: date) -> date:
    """Saturday observes on Friday, Sunday on Monday."""
    if d.weekday() == Weekday.SATURDAY:
        return d - ONE_DAY
    if d.weekday() == Weekday.SUNDAY:
        return d + ONE_DAY
    return d
