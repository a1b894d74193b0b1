"""
Shared pytest fixtures for calendar tests.

Provides generated jurisdiction calendars and small custom calendars.
"""

import pytest
from datetime import date

from bizcal.core.calendar import HolidayCalendar
from bizcal.core.date_math import Weekday
from bizcal.core.registry import get_calendar, clear_calendar_cache
from bizcal.core.rules import CalendarId


@pytest.fixture
def gblo() -> HolidayCalendar:
    """London calendar, consulting the generated holiday set."""
    return get_calendar(CalendarId.GBLO)


@pytest.fixture
def gblo_weekends_only(gblo: HolidayCalendar) -> HolidayCalendar:
    """London calendar where only Saturdays and Sundays are holidays."""
    return gblo.with_weekends_only()


@pytest.fixture
def custom_holidays() -> list[date]:
    """A handful of injected holidays, one of them on a Saturday."""
    return [
        date(2024, 1, 1),
        date(2024, 7, 4),
        date(2024, 12, 25),
        date(2024, 12, 28),  # Saturday
    ]


@pytest.fixture
def custom_calendar(custom_holidays: list[date]) -> HolidayCalendar:
    """Custom calendar with a Saturday/Sunday weekend."""
    return HolidayCalendar(
        holidays=custom_holidays,
        first_weekend_day=Weekday.SATURDAY,
        second_weekend_day=Weekday.SUNDAY,
        calendar_id=CalendarId.CUST,
    )


@pytest.fixture
def fresh_registry():
    """Empty calendar cache before and after the test."""
    clear_calendar_cache()
    yield
    clear_calendar_cache()
