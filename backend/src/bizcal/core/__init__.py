"""Core utilities: date math, holiday calendars, and business day adjustment."""

from bizcal.core.date_math import Weekday, easter
from bizcal.core.exceptions import CalendarError, AdjustmentError, CalendarSpecError
from bizcal.core.rules import CalendarId, generate_holidays
from bizcal.core.calendar import HolidayCalendar, DEFAULT_CALENDAR
from bizcal.core.conventions import BusinessDayConvention
from bizcal.core.adjustment import (
    adjust_date,
    add_business_days,
    business_days_between,
    next_business_day,
    previous_business_day,
)
from bizcal.core.period import SchedulePeriod
from bizcal.core.registry import get_calendar

__all__ = [
    "Weekday",
    "easter",
    "CalendarError",
    "AdjustmentError",
    "CalendarSpecError",
    "CalendarId",
    "generate_holidays",
    "HolidayCalendar",
    "DEFAULT_CALENDAR",
    "BusinessDayConvention",
    "adjust_date",
    "add_business_days",
    "business_days_between",
    "next_business_day",
    "previous_business_day",
    "SchedulePeriod",
    "get_calendar",
]
