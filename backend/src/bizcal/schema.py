"""
Pydantic schema for calendar spec documents.

A calendar spec either names a rule-generated calendar or supplies its own
holiday dates, e.g.::

    {
        "calendar_id": "CUST",
        "holidays": ["2024-12-25", "2024-12-26"],
        "weekend_days": ["FRIDAY", "SATURDAY"]
    }
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from bizcal.core.calendar import HolidayCalendar
from bizcal.core.date_math import Weekday
from bizcal.core.exceptions import CalendarSpecError
from bizcal.core.rules import CalendarId, generate_holidays, rules_for, SATURDAY_SUNDAY

logger = logging.getLogger(__name__)


class CalendarSpec(BaseModel):
    """
    Calendar definition.

    When ``holidays`` is given the calendar is built from that list and no
    rules are applied; otherwise the holidays are generated for
    ``calendar_id``.
    """

    model_config = ConfigDict(extra="forbid")

    calendar_id: CalendarId = CalendarId.CUST
    holidays: Optional[List[date]] = Field(
        default=None,
        description="Explicit holiday dates; disables rule generation",
    )
    weekend_days: Optional[Tuple[Weekday, Weekday]] = Field(
        default=None,
        description="Two weekend days by name (e.g. SATURDAY) or number (0=Monday)",
    )
    weekends_only: bool = Field(
        default=False,
        description="Only weekend days count as non-business days",
    )
    remove_weekend_entries: bool = Field(
        default=False,
        description="Drop holidays that fall on a weekend day",
    )

    @field_validator("weekend_days", mode="before")
    @classmethod
    def parse_weekday_names(cls, v):
        """Accept weekday names in any case as well as numbers."""
        if v is None:
            return v
        if not isinstance(v, (list, tuple)) or len(v) != 2:
            raise ValueError("weekend_days needs exactly two days")
        days = []
        for day in v:
            if isinstance(day, str):
                name = day.strip().upper()
                if name.isdigit():
                    day = int(name)
                elif name in Weekday.__members__:
                    day = Weekday[name]
                else:
                    raise ValueError(f"Unknown weekday name: {day!r}")
            days.append(day)
        return tuple(days)


# ============================================================================
# Loading and building
# ============================================================================

def validate_calendar_spec(data: dict) -> CalendarSpec:
    """
    Validate calendar spec data dictionary.

    Raises:
        CalendarSpecError: If the data doesn't match the schema
    """
    try:
        return CalendarSpec(**data)
    except ValidationError as e:
        raise CalendarSpecError(f"Invalid calendar spec: {e}") from e


def load_calendar_spec(path: Union[str, Path]) -> CalendarSpec:
    """
    Load and validate a calendar spec from a JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        CalendarSpecError: If the file isn't valid JSON or doesn't match the schema
    """
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"Calendar spec not found: {path}")

    with open(filepath, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise CalendarSpecError(f"Calendar spec {filepath.name} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise CalendarSpecError(f"Calendar spec {filepath.name} must be a JSON object")
    return validate_calendar_spec(data)


def build_calendar(spec: CalendarSpec) -> HolidayCalendar:
    """Build the HolidayCalendar described by a spec."""
    rule_set = rules_for(spec.calendar_id)
    weekend = spec.weekend_days or (rule_set.weekend_days if rule_set else SATURDAY_SUNDAY)

    if spec.holidays is not None:
        holidays = frozenset(spec.holidays)
        on_weekend = sorted(d for d in holidays if d.weekday() in weekend)
        if on_weekend and not spec.remove_weekend_entries:
            logger.warning(
                f"{len(on_weekend)} supplied holidays fall on a weekend day, "
                f"first is {on_weekend[0].isoformat()}"
            )
    else:
        holidays = generate_holidays(spec.calendar_id)

    calendar = HolidayCalendar(
        holidays=holidays,
        first_weekend_day=weekend[0],
        second_weekend_day=weekend[1],
        calendar_id=spec.calendar_id,
        weekends_only=spec.weekends_only,
    )
    if spec.remove_weekend_entries:
        calendar = calendar.remove_weekend_entries()
    return calendar


def print_calendar_summary(calendar: HolidayCalendar, year: Optional[int] = None) -> None:
    """Print a clean summary of a calendar."""
    print("=" * 70)
    print(f"CALENDAR SUMMARY: {calendar.calendar_id.value}")
    print("=" * 70)

    print(f"  Weekend:       {calendar.first_weekend_day.name.title()}, "
          f"{calendar.second_weekend_day.name.title()}")
    print(f"  Holidays:      {len(calendar.holidays)}")
    print(f"  Weekends only: {calendar.weekends_only}")

    if calendar.holidays:
        print(f"  First:         {min(calendar.holidays)}")
        print(f"  Last:          {max(calendar.holidays)}")

    if year is not None:
        in_year = calendar.holidays_between(date(year, 1, 1), date(year, 12, 31))
        print(f"\n--- HOLIDAYS {year} ({len(in_year)}) ---")
        for d in in_year:
            print(f"  {d.isoformat()}  {d.strftime('%A')}")

    print("=" * 70)
