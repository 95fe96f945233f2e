"""Plain-text rendering of month grids and leave days."""

from __future__ import annotations

import datetime
from collections.abc import Iterable

from leavecal.engine import LeaveDaySet, MonthGrid, MonthSummary, day_key, parse_day

WEEKDAY_HEADER = "  Su  Mo  Tu  We  Th  Fr  Sa"
LEGEND = "  Legend: L=Leave  H=Holiday  *=Today"


def _cell(
    day_num: int,
    key: str,
    leave: LeaveDaySet,
    holidays: frozenset[str],
    today: str | None,
) -> str:
    prefix = "*" if key == today else " "
    if key in leave:
        suffix = "L"
    elif key in holidays:
        suffix = "H"
    else:
        suffix = " "
    return f"{prefix}{day_num:>2}{suffix}"


def format_month(
    grid: MonthGrid,
    leave_day_set: LeaveDaySet,
    holidays: Iterable[object] = (),
    today: datetime.date | None = None,
) -> str:
    """Return a Sunday-first month view marking leave days and holidays.

    *today* is highlighted only when given; the current date is never read
    here.
    """
    holiday_keys = frozenset(day_key(h) for h in holidays)
    today_key = today.isoformat() if today is not None else None

    lines = [f"  {grid.label}", WEEKDAY_HEADER]
    for week in grid.weeks():
        row = ""
        for day_num in week:
            if day_num is None:
                row += "    "
                continue
            key = datetime.date(grid.year, grid.month, day_num).isoformat()
            row += _cell(day_num, key, leave_day_set, holiday_keys, today_key)
        lines.append(row.rstrip())
    lines.append("")
    lines.append(LEGEND)
    return "\n".join(lines)


def format_leave_days(leave_day_set: LeaveDaySet) -> str:
    """One line per leave day, in date order."""
    if not leave_day_set:
        return "  (no leave days)"
    return "\n".join(
        f"    -> {parse_day(key).strftime('%A, %B %d, %Y')}" for key in sorted(leave_day_set)
    )


def format_summary(summary: MonthSummary) -> str:
    return "\n".join(
        [
            f"  Working days: {summary.working_days}",
            f"  Leave days:   {summary.leave_days}",
            f"  Worked days:  {summary.worked_days}",
        ]
    )
