"""
Process-wide cache of rule-generated calendars.

Each jurisdiction calendar is built on first use and shared afterwards.
Calendars are immutable, so callers may use the shared instance from any
thread without locking.
"""

import logging
import threading
from typing import Dict, List, Union

from bizcal.core.calendar import HolidayCalendar
from bizcal.core.exceptions import CalendarError
from bizcal.core.rules import CalendarId

logger = logging.getLogger(__name__)

_CACHE: Dict[CalendarId, HolidayCalendar] = {}
_LOCK = threading.Lock()


def get_calendar(calendar_id: Union[CalendarId, str]) -> HolidayCalendar:
    """
    Shared calendar for an id, built at most once per process.

    Raises:
        CalendarError: If the id is not a known CalendarId
    """
    try:
        calendar_id = CalendarId(calendar_id)
    except ValueError as e:
        raise CalendarError(f"Unknown calendar id: {calendar_id!r}") from e

    cached = _CACHE.get(calendar_id)
    if cached is not None:
        return cached

    with _LOCK:
        if calendar_id not in _CACHE:
            logger.debug(f"Building calendar {calendar_id.value}")
            _CACHE[calendar_id] = HolidayCalendar.from_id(calendar_id)
        return _CACHE[calendar_id]


def available_calendars() -> List[CalendarId]:
    """All calendar ids accepted by get_calendar."""
    return list(CalendarId)


def clear_calendar_cache() -> None:
    """Drop all cached calendars."""
    with _LOCK:
        _CACHE.clear()
