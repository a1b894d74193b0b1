"""Schedule period value type produced by adjusting period boundaries."""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from bizcal.core.adjustment import adjust_date
from bizcal.core.calendar import HolidayCalendar
from bizcal.core.conventions import BusinessDayConvention


@dataclass(frozen=True)
class SchedulePeriod:
    """
    A single period (date range) within a schedule.

    The period runs from start_date to end_date. The unadjusted dates are the
    scheduled dates before business day adjustment; when a scheduled date is
    a weekend or holiday, the adjusted date is the related business day.

    Attributes:
        start_date: Adjusted start, used for accrual calculations
        end_date: Adjusted end, used for accrual calculations
        unadjusted_start_date: Scheduled start before adjustment
        unadjusted_end_date: Scheduled end before adjustment
    """

    start_date: date
    end_date: date
    unadjusted_start_date: date
    unadjusted_end_date: date

    @classmethod
    def from_unadjusted(
        cls,
        unadjusted_start_date: date,
        unadjusted_end_date: date,
        convention: Union[BusinessDayConvention, str],
        calendar: Optional[HolidayCalendar] = None,
    ) -> "SchedulePeriod":
        """Build a period by adjusting both boundaries with one convention."""
        return cls(
            start_date=adjust_date(unadjusted_start_date, convention, calendar),
            end_date=adjust_date(unadjusted_end_date, convention, calendar),
            unadjusted_start_date=unadjusted_start_date,
            unadjusted_end_date=unadjusted_end_date,
        )

    @property
    def length_in_days(self) -> int:
        """
        Actual number of days in the period.

        Counts from the adjusted start (inclusive) to the adjusted end
        (exclusive); no day count or calendar is involved.
        """
        return (self.end_date - self.start_date).days

    @property
    def is_adjusted(self) -> bool:
        """True if either boundary was moved by business day adjustment."""
        return (
            self.start_date != self.unadjusted_start_date
            or self.end_date != self.unadjusted_end_date
        )
