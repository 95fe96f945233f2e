"""Leave-day calendar computation.

Turns leave intervals and a holiday list into the set of days that count as
leave, and describes the layout of a month for calendar views.

Every function here is a pure function of its arguments: nothing reads the
system clock, nothing is cached, and nothing is logged.  Days are compared by
their canonical ``YYYY-MM-DD`` key, so a ``date``, a ``datetime`` and an ISO
string naming the same calendar day are interchangeable.

Weekdays follow the Sunday-first numbering used by calendar grids
(0 = Sunday ... 6 = Saturday), unlike ``datetime.date.weekday()``.
"""

from __future__ import annotations

import calendar
import datetime
from collections.abc import Callable, Iterable
from typing import NamedTuple

from leavecal.errors import InvalidDateError, InvalidMonthError, InvalidRangeError
from leavecal.intervals import LeaveInterval, Range, SingleDay

LeaveDaySet = frozenset[str]
"""Canonical day keys of counted leave days."""

MonthLabel = Callable[[int, int], str]
"""Signature: label(year, month) -> display string."""

_ONE_DAY = datetime.timedelta(days=1)

# ---------------------------------------------------------------------------
# Day identity
# ---------------------------------------------------------------------------


def parse_day(value: object) -> datetime.date:
    """Return the calendar day named by *value*.

    Accepts ``date`` and ``datetime`` objects (the time of day is dropped) and
    ISO 8601 strings, either plain dates or full timestamps such as
    ``2025-08-04T00:00:00.000Z``.
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return datetime.date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.datetime.fromisoformat(text).date()
        except ValueError:
            raise InvalidDateError(f"Invalid date {value!r}. Use YYYY-MM-DD.") from None
    raise InvalidDateError(f"Cannot interpret {value!r} as a calendar day.")


def day_key(value: object) -> str:
    """Canonical ``YYYY-MM-DD`` key for a date-like *value*."""
    return parse_day(value).isoformat()


def sunday_weekday(day: datetime.date) -> int:
    """Weekday index with 0 = Sunday ... 6 = Saturday."""
    return (day.weekday() + 1) % 7


def is_weekend(day: datetime.date) -> bool:
    return day.weekday() >= 5


def _holiday_keys(holidays: Iterable[object]) -> frozenset[str]:
    return frozenset(day_key(h) for h in holidays)


def is_working_day(day: object, holidays: Iterable[object] = ()) -> bool:
    """True if *day* is neither a weekend nor one of *holidays*."""
    d = parse_day(day)
    return not is_weekend(d) and d.isoformat() not in _holiday_keys(holidays)


# ---------------------------------------------------------------------------
# Leave days
# ---------------------------------------------------------------------------


def _bounds(interval: LeaveInterval | object) -> tuple[datetime.date, datetime.date]:
    """Inclusive ``(start, end)`` days of an interval."""
    if isinstance(interval, Range):
        start, end = parse_day(interval.start), parse_day(interval.end)
        if end < start:
            msg = f"Leave range ends before it starts: {start} -> {end}"
            raise InvalidRangeError(msg)
        return start, end
    if isinstance(interval, SingleDay):
        d = parse_day(interval.day)
    else:
        # A bare date standing in for a single-day interval.
        d = parse_day(interval)
    return d, d


def _iter_days(start: datetime.date, end: datetime.date) -> Iterable[datetime.date]:
    d = start
    while d <= end:
        yield d
        d += _ONE_DAY


def build_leave_day_set(
    intervals: Iterable[LeaveInterval],
    holidays: Iterable[object] = (),
) -> LeaveDaySet:
    """Return the days covered by *intervals* that count as leave.

    Weekends and *holidays* inside an interval are skipped rather than
    rejected.  Overlapping intervals collapse to one entry per day.

    Raises ``InvalidRangeError`` for a range whose end precedes its start and
    ``InvalidDateError`` for values that are not calendar days.
    """
    holiday_keys = _holiday_keys(holidays)
    days: set[str] = set()
    for interval in intervals:
        start, end = _bounds(interval)
        for d in _iter_days(start, end):
            key = d.isoformat()
            if not is_weekend(d) and key not in holiday_keys:
                days.add(key)
    return frozenset(days)


def is_leave_day(day: object, leave_day_set: LeaveDaySet) -> bool:
    """Membership test by canonical day key."""
    return day_key(day) in leave_day_set


def count_working_days(
    start: object,
    end: object,
    holidays: Iterable[object] = (),
    *,
    half_day: bool = False,
) -> float:
    """Number of working days from *start* to *end* inclusive.

    A half-day request counts ``0.5`` when the range holds at least one
    working day and ``0`` otherwise.
    """
    lo, hi = _bounds(Range(start, end))  # type: ignore[arg-type]
    holiday_keys = _holiday_keys(holidays)
    working = sum(
        1 for d in _iter_days(lo, hi) if not is_weekend(d) and d.isoformat() not in holiday_keys
    )
    if half_day:
        return 0.5 if working else 0.0
    return float(working)


# ---------------------------------------------------------------------------
# Month layout
# ---------------------------------------------------------------------------


def default_month_label(year: int, month: int) -> str:
    """``"August 2025"`` style label."""
    return f"{calendar.month_name[month]} {year}"


class MonthGrid(NamedTuple):
    """Layout of one month in a Sunday-first calendar view."""

    year: int
    month: int
    day_count: int
    leading_blanks: int
    label: str

    def weeks(self) -> list[list[int | None]]:
        """Rows of seven cells; blank cells are ``None``."""
        cells: list[int | None] = [None] * self.leading_blanks
        cells.extend(range(1, self.day_count + 1))
        cells.extend([None] * (-len(cells) % 7))
        return [cells[i : i + 7] for i in range(0, len(cells), 7)]


def _check_month(year: int, month: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidMonthError(f"Month must be between 1 and 12; got {month}.")
    if not datetime.MINYEAR <= year <= datetime.MAXYEAR:
        raise InvalidDateError(f"Year {year} is outside the supported calendar range.")


def build_month_grid(year: int, month: int, label: MonthLabel = default_month_label) -> MonthGrid:
    """Describe the calendar grid for *month* of *year*.

    *label* formats the heading; pass a custom callable to control locale.
    """
    _check_month(year, month)
    day_count = calendar.monthrange(year, month)[1]
    return MonthGrid(
        year=year,
        month=month,
        day_count=day_count,
        leading_blanks=sunday_weekday(datetime.date(year, month, 1)),
        label=label(year, month),
    )


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move *delta* months from ``(year, month)``; negative goes back."""
    _check_month(year, month)
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def quarter_of(month: int) -> int:
    """Calendar quarter (1-4) of a 1-based *month*."""
    if not 1 <= month <= 12:
        raise InvalidMonthError(f"Month must be between 1 and 12; got {month}.")
    return (month - 1) // 3 + 1


# ---------------------------------------------------------------------------
# Monthly attendance
# ---------------------------------------------------------------------------


class MonthSummary(NamedTuple):
    """Working, leave and worked day counts for one month."""

    year: int
    month: int
    working_days: int
    leave_days: int
    worked_days: int


def working_days_in_month(year: int, month: int, holidays: Iterable[object] = ()) -> int:
    _check_month(year, month)
    last = calendar.monthrange(year, month)[1]
    holiday_keys = _holiday_keys(holidays)
    return sum(
        1
        for d in _iter_days(datetime.date(year, month, 1), datetime.date(year, month, last))
        if not is_weekend(d) and d.isoformat() not in holiday_keys
    )


def summarize_month(
    year: int,
    month: int,
    leave_day_set: LeaveDaySet,
    holidays: Iterable[object] = (),
) -> MonthSummary:
    """Attendance figures for *month*: worked days never go below zero."""
    working = working_days_in_month(year, month, holidays)
    prefix = f"{year:04d}-{month:02d}-"
    leave = sum(1 for key in leave_day_set if key.startswith(prefix))
    return MonthSummary(
        year=year,
        month=month,
        working_days=working,
        leave_days=leave,
        worked_days=max(working - leave, 0),
    )


def format_date_range(start: object, end: object) -> str:
    """Compact label for a leave span: ``Oct-28``, ``Oct-28–29``, ``Oct-28 to Nov-2``."""
    s, e = parse_day(start), parse_day(end)
    s_label = f"{s.strftime('%b')}-{s.day}"
    if s == e:
        return s_label
    if (s.year, s.month) == (e.year, e.month):
        return f"{s_label}–{e.day}"
    return f"{s_label} to {e.strftime('%b')}-{e.day}"
