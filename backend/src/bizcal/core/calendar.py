"""
Holiday calendars.

A holiday calendar keeps track of which dates are holidays and which days of
the week are weekend days. Different countries, exchanges and payment systems
observe different holidays, so each calendar is identified by a CalendarId.
Calendars built from an id replay that jurisdiction's rule table; custom
calendars take their holiday dates from the caller.
"""

from datetime import date
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from bizcal.core.date_math import Weekday
from bizcal.core.exceptions import CalendarError
from bizcal.core.rules import CalendarId, generate_holidays, rules_for, SATURDAY_SUNDAY


class HolidayCalendar:
    """
    Immutable business day calendar.

    Attributes:
        calendar_id: Calendar identifier (e.g. GBLO, NYSE, EUTA)
        weekend_days: The two weekend days of the week
        holidays: Holiday dates (weekend-coincident entries are kept)
        weekends_only: If True, only weekend days count as holidays and the
            holiday set is carried but not consulted
    """

    __slots__ = ("_calendar_id", "_weekend_days", "_holidays", "_weekends_only")

    def __init__(
        self,
        holidays: Optional[Iterable[date]] = None,
        first_weekend_day: int = Weekday.SATURDAY,
        second_weekend_day: int = Weekday.SUNDAY,
        calendar_id: Union[CalendarId, str] = CalendarId.CUST,
        weekends_only: bool = False,
    ) -> None:
        """
        Create a calendar from an explicit holiday list.

        No rules are applied; use ``from_id`` to generate a jurisdiction's
        holidays.

        Args:
            holidays: Holiday dates
            first_weekend_day: First weekend day (0=Monday .. 6=Sunday)
            second_weekend_day: Second weekend day
            calendar_id: Calendar identifier
            weekends_only: Ignore the holiday set when testing dates
        """
        try:
            self._weekend_days: Tuple[Weekday, Weekday] = (
                Weekday(first_weekend_day),
                Weekday(second_weekend_day),
            )
            self._calendar_id = CalendarId(calendar_id)
        except ValueError as e:
            raise CalendarError(f"Invalid calendar definition: {e}") from e

        self._holidays = frozenset(() if holidays is None else holidays)
        self._weekends_only = weekends_only

    @classmethod
    def from_id(
        cls,
        calendar_id: Union[CalendarId, str],
        weekends_only: bool = False,
    ) -> "HolidayCalendar":
        """
        Build a calendar by replaying the rule table for ``calendar_id``.

        Ids without a rule table (CUST) give an empty holiday set with a
        Saturday/Sunday weekend.
        """
        try:
            calendar_id = CalendarId(calendar_id)
        except ValueError as e:
            raise CalendarError(f"Unknown calendar id: {calendar_id!r}") from e

        rule_set = rules_for(calendar_id)
        weekend = rule_set.weekend_days if rule_set else SATURDAY_SUNDAY
        return cls(
            holidays=generate_holidays(calendar_id),
            first_weekend_day=weekend[0],
            second_weekend_day=weekend[1],
            calendar_id=calendar_id,
            weekends_only=weekends_only,
        )

    # ── properties ──────────────────────────────────────────────────────

    @property
    def calendar_id(self) -> CalendarId:
        return self._calendar_id

    @property
    def holidays(self) -> frozenset:
        return self._holidays

    @property
    def weekend_days(self) -> Tuple[Weekday, Weekday]:
        return self._weekend_days

    @property
    def first_weekend_day(self) -> Weekday:
        return self._weekend_days[0]

    @property
    def second_weekend_day(self) -> Weekday:
        return self._weekend_days[1]

    @property
    def weekends_only(self) -> bool:
        return self._weekends_only

    # ── predicates ──────────────────────────────────────────────────────

    def is_weekend(self, d: date) -> bool:
        """Check if a date falls on a weekend day."""
        return d.weekday() in self._weekend_days

    def is_holiday(self, d: date) -> bool:
        """Check if a date is a weekend day or, unless weekends_only, a holiday."""
        if self.is_weekend(d):
            return True
        if self._weekends_only:
            return False
        return d in self._holidays

    def is_business_day(self, d: date) -> bool:
        """Check if a date is a business day."""
        return not self.is_holiday(d)

    def holidays_between(self, start: date, end: date) -> List[date]:
        """Sorted holiday dates in [start, end]."""
        return sorted(d for d in self._holidays if start <= d <= end)

    # ── derived calendars ───────────────────────────────────────────────

    def remove_weekend_entries(self) -> "HolidayCalendar":
        """Copy of this calendar without holidays that fall on a weekend day."""
        return HolidayCalendar(
            holidays=(d for d in self._holidays if not self.is_weekend(d)),
            first_weekend_day=self.first_weekend_day,
            second_weekend_day=self.second_weekend_day,
            calendar_id=self._calendar_id,
            weekends_only=self._weekends_only,
        )

    def with_weekends_only(self, weekends_only: bool = True) -> "HolidayCalendar":
        """Copy of this calendar with the holiday-set lookup switched on or off."""
        return HolidayCalendar(
            holidays=self._holidays,
            first_weekend_day=self.first_weekend_day,
            second_weekend_day=self.second_weekend_day,
            calendar_id=self._calendar_id,
            weekends_only=weekends_only,
        )

    def adjust(self, d: date, convention) -> date:
        """Adjust a date to a business day with the given convention."""
        from bizcal.core.adjustment import adjust_date

        return adjust_date(d, convention, self)

    # ── vectorized queries ──────────────────────────────────────────────

    def to_busdaycalendar(self) -> np.busdaycalendar:
        """Equivalent numpy business day calendar."""
        weekmask = [0 if day in self._weekend_days else 1 for day in Weekday]
        holidays = [] if self._weekends_only else sorted(self._holidays)
        return np.busdaycalendar(
            weekmask=weekmask,
            holidays=np.array(holidays, dtype="datetime64[D]"),
        )

    def is_business_day_array(self, dates: Union[Iterable[date], np.ndarray]) -> np.ndarray:
        """
        Vectorized business day test.

        Args:
            dates: Dates as ``datetime.date`` values or a datetime64 array

        Returns:
            Boolean array, True where the date is a business day
        """
        if not isinstance(dates, np.ndarray):
            dates = list(dates)
        values = np.asarray(dates, dtype="datetime64[D]")
        return np.is_busday(values, busdaycal=self.to_busdaycalendar())

    # ── dunder ──────────────────────────────────────────────────────────

    def _key(self) -> tuple:
        return (self._calendar_id, self._weekend_days, self._holidays, self._weekends_only)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HolidayCalendar):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"HolidayCalendar(calendar_id={self._calendar_id.value!r}, "
            f"weekend_days=({self.first_weekend_day.name}, {self.second_weekend_day.name}), "
            f"holidays={len(self._holidays)}, "
            f"weekends_only={self._weekends_only})"
        )


# Default weekend-only calendar
DEFAULT_CALENDAR = HolidayCalendar()
