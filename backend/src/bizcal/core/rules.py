"""
Holiday rule tables, one per jurisdiction.

Each jurisdiction contributes a pure per-year rule (year -> holiday dates),
a range of supported years, a weekend definition and an optional list of
one-off closures. ``generate_holidays`` replays the rule over a year range.

The London rules follow the OpenGamma Strata global holiday calendars,
including their era boundaries.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple

from bizcal.core.date_math import (
    Weekday,
    easter,
    first_weekday_on_or_after,
    last_weekday_on_or_before,
    nth_weekday_in_month,
    bump_sunday_to_monday,
    fixed_holiday_bumped,
    nearest_weekday,
)
from bizcal.core.exceptions import CalendarError

logger = logging.getLogger(__name__)

GENERATION_START_YEAR = 1950
GENERATION_END_YEAR = 2099

SATURDAY_SUNDAY: Tuple[Weekday, Weekday] = (Weekday.SATURDAY, Weekday.SUNDAY)


class CalendarId(str, Enum):
    """Supported holiday calendars."""

    GBLO = "GBLO"  # London (UK) bank holidays
    NYSE = "NYSE"  # New York Stock Exchange
    EUTA = "EUTA"  # TARGET interbank payment system
    CUST = "CUST"  # Custom, holidays supplied by the caller


@dataclass(frozen=True)
class HolidayRuleSet:
    """Generation rule for one jurisdiction."""

    year_rule: Callable[[int], List[date]]
    start_year: int = GENERATION_START_YEAR
    end_year: int = GENERATION_END_YEAR
    weekend_days: Tuple[Weekday, Weekday] = SATURDAY_SUNDAY
    one_offs: Tuple[date, ...] = field(default_factory=tuple)

    def supports(self, year: int) -> bool:
        return self.start_year <= year <= self.end_year

    def generate(self, years: Iterable[int]) -> FrozenSet[date]:
        """Replay the rule for every supported year in ``years``."""
        holidays = set()
        generated_years = set()
        for year in years:
            if not self.supports(year):
                continue
            holidays.update(self.year_rule(year))
            generated_years.add(year)

        holidays.update(d for d in self.one_offs if d.year in generated_years)
        return frozenset(holidays)


# ============================================================================
# London
# ============================================================================

def _gblo_year(year: int) -> List[date]:
    holidays: List[date] = []

    # New Year
    if year >= 1974:
        holidays.append(bump_sunday_to_monday(date(year, 1, 1)))

    # Easter
    holidays.append(easter(year) - timedelta(days=2))
    holidays.append(easter(year) + timedelta(days=1))

    # Early May
    if year in (1995, 2020):
        holidays.append(date(year, 5, 8))
    elif year >= 1978:
        holidays.append(first_weekday_on_or_after(year, 5, Weekday.MONDAY))

    # Spring, replaced by the golden, diamond and platinum jubilees
    if year == 2002:
        holidays.extend([date(2002, 6, 3), date(2002, 6, 4)])
    elif year == 2012:
        holidays.extend([date(2012, 6, 4), date(2012, 6, 5)])
    elif year == 2022:
        holidays.extend([date(2022, 6, 2), date(2022, 6, 3)])
    elif year in (1967, 1970):
        holidays.append(last_weekday_on_or_before(year, 5, Weekday.MONDAY))
    elif year < 1971:
        # Whit Monday
        holidays.append(easter(year) + timedelta(days=50))
    else:
        holidays.append(last_weekday_on_or_before(year, 5, Weekday.MONDAY))

    # Summer
    if year < 1965:
        holidays.append(first_weekday_on_or_after(year, 8, Weekday.MONDAY))
    elif year < 1971:
        holidays.append(
            last_weekday_on_or_before(year, 8, Weekday.SATURDAY) + timedelta(days=2)
        )
    else:
        holidays.append(last_weekday_on_or_before(year, 8, Weekday.MONDAY))

    # Christmas
    holidays.append(fixed_holiday_bumped(year, 12, 25, SATURDAY_SUNDAY))
    holidays.append(fixed_holiday_bumped(year, 12, 26, SATURDAY_SUNDAY))

    return holidays


GBLO_RULES = HolidayRuleSet(
    year_rule=_gblo_year,
    one_offs=(
        date(2011, 4, 29),   # royal wedding
        date(1999, 12, 31),  # millennium
    ),
)


# ============================================================================
# TARGET
# ============================================================================

def _euta_year(year: int) -> List[date]:
    if year >= 2000:
        holidays = [
            date(year, 1, 1),
            easter(year) - timedelta(days=2),
            easter(year) + timedelta(days=1),
            date(year, 5, 1),
            date(year, 12, 25),
            date(year, 12, 26),
        ]
    else:
        holidays = [date(year, 1, 1), date(year, 12, 25)]

    if year in (1999, 2001):
        holidays.append(date(year, 12, 31))
    return holidays


EUTA_RULES = HolidayRuleSet(year_rule=_euta_year, start_year=1997)


# ============================================================================
# New York Stock Exchange
# ============================================================================

def _nyse_year(year: int) -> List[date]:
    holidays: List[date] = []

    # New Year, not observed on the preceding Friday
    new_year = date(year, 1, 1)
    if new_year.weekday() != Weekday.SATURDAY:
        holidays.append(bump_sunday_to_monday(new_year))

    # Martin Luther King Jr. Day
    if year >= 1998:
        holidays.append(nth_weekday_in_month(year, 1, Weekday.MONDAY, 3))

    # Washington's Birthday
    if year < 1971:
        holidays.append(nearest_weekday(date(year, 2, 22)))
    else:
        holidays.append(nth_weekday_in_month(year, 2, Weekday.MONDAY, 3))

    holidays.append(easter(year) - timedelta(days=2))

    # Memorial Day
    if year < 1971:
        holidays.append(nearest_weekday(date(year, 5, 30)))
    else:
        holidays.append(last_weekday_on_or_before(year, 5, Weekday.MONDAY))

    # Juneteenth
    if year >= 2022:
        holidays.append(nearest_weekday(date(year, 6, 19)))

    holidays.append(nearest_weekday(date(year, 7, 4)))
    holidays.append(first_weekday_on_or_after(year, 9, Weekday.MONDAY))
    holidays.append(nth_weekday_in_month(year, 11, Weekday.THURSDAY, 4))
    holidays.append(nearest_weekday(date(year, 12, 25)))

    return holidays


NYSE_RULES = HolidayRuleSet(
    year_rule=_nyse_year,
    one_offs=(
        # September 11
        date(2001, 9, 11),
        date(2001, 9, 12),
        date(2001, 9, 13),
        date(2001, 9, 14),
        # Hurricane Sandy
        date(2012, 10, 29),
        date(2012, 10, 30),
        # National days of mourning
        date(2004, 6, 11),
        date(2007, 1, 2),
        date(2018, 12, 5),
        date(2025, 1, 9),
    ),
)


RULES: Dict[CalendarId, HolidayRuleSet] = {
    CalendarId.GBLO: GBLO_RULES,
    CalendarId.EUTA: EUTA_RULES,
    CalendarId.NYSE: NYSE_RULES,
}


def rules_for(calendar_id: CalendarId) -> Optional[HolidayRuleSet]:
    """Rule set for a calendar id, or None when holidays are not generated."""
    try:
        calendar_id = CalendarId(calendar_id)
    except ValueError as e:
        raise CalendarError(f"Unknown calendar id: {calendar_id!r}") from e
    return RULES.get(calendar_id)


def generate_holidays(
    calendar_id: CalendarId,
    years: Optional[Iterable[int]] = None,
) -> FrozenSet[date]:
    """
    Generate the holiday set for a calendar.

    Args:
        calendar_id: Calendar to generate
        years: Years to generate (defaults to the full supported range)

    Returns:
        Holiday dates; empty for the custom calendar and for years outside
        the supported range

    Raises:
        CalendarError: If calendar_id is not a known calendar
    """
    rule_set = rules_for(calendar_id)
    if rule_set is None:
        return frozenset()
    if years is None:
        years = range(GENERATION_START_YEAR, GENERATION_END_YEAR + 1)

    holidays = rule_set.generate(years)
    logger.debug(f"Generated {len(holidays)} holidays for {CalendarId(calendar_id).value}")
    return holidays
