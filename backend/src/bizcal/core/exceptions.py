"""Exceptions raised by calendar construction and date adjustment."""


class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class AdjustmentError(CalendarError):
    """Raised when no business day can be reached within the walk limit."""


class CalendarSpecError(CalendarError):
    """Raised when a calendar spec document cannot be loaded or validated."""
