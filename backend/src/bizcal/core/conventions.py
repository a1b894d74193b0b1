"""
Business day adjustment conventions.

- NO_ADJUST: make no adjustment.
- FOLLOWING: move to the next business day.
- MODIFIED_FOLLOWING: move to the next business day, unless that is in the
  next month, in which case move to the previous business day.
- PRECEDING: move to the previous business day.
- MODIFIED_PRECEDING: move to the previous business day, unless that is in
  the previous month, in which case move to the next business day.
"""

import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class BusinessDayConvention(str, Enum):
    """Business day adjustment conventions, valued by their display label."""

    NO_ADJUST = "No Adjustment"
    FOLLOWING = "Following"
    MODIFIED_FOLLOWING = "Modified Following"
    PRECEDING = "Preceding"
    MODIFIED_PRECEDING = "Modified Preceding"

    @classmethod
    def parse(cls, label: Optional[str]) -> "BusinessDayConvention":
        """
        Convention for a display label.

        Unrecognized labels fall back to NO_ADJUST rather than raising;
        callers that need strict parsing should use ``BusinessDayConvention(label)``.

        Examples:
            >>> BusinessDayConvention.parse("Modified Following")
            <BusinessDayConvention.MODIFIED_FOLLOWING: 'Modified Following'>
            >>> BusinessDayConvention.parse("unknown")
            <BusinessDayConvention.NO_ADJUST: 'No Adjustment'>
        """
        if isinstance(label, cls):
            return label
        try:
            return cls(label)
        except ValueError:
            logger.debug(f"Unrecognized business day convention {label!r}, using NO_ADJUST")
            return cls.NO_ADJUST

    @property
    def is_modified(self) -> bool:
        return self in (
            BusinessDayConvention.MODIFIED_FOLLOWING,
            BusinessDayConvention.MODIFIED_PRECEDING,
        )

    @property
    def direction(self) -> int:
        """+1 for forward conventions, -1 for backward ones, 0 for NO_ADJUST."""
        if self in (
            BusinessDayConvention.FOLLOWING,
            BusinessDayConvention.MODIFIED_FOLLOWING,
        ):
            return 1
        if self in (
            BusinessDayConvention.PRECEDING,
            BusinessDayConvention.MODIFIED_PRECEDING,
        ):
            return -1
        return 0
