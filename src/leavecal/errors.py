"""Exceptions raised by the leave calendar."""

from __future__ import annotations


class LeaveCalendarError(ValueError):
    """Base class for all leave calendar validation errors."""


class InvalidDateError(LeaveCalendarError):
    """A value could not be interpreted as a calendar day."""


class InvalidRangeError(LeaveCalendarError):
    """A ranged leave interval ends before it starts."""


class InvalidMonthError(LeaveCalendarError):
    """A month number outside 1..12."""
