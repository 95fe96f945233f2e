"""Leave calendar.

Works out which days of a leave request count against the leave balance
once weekends and holidays are taken out, and lays those days out on a
month view.
"""

from leavecal.engine import (
    LeaveDaySet,
    MonthGrid,
    MonthSummary,
    build_leave_day_set,
    build_month_grid,
    count_working_days,
    day_key,
    is_leave_day,
    summarize_month,
)
from leavecal.errors import (
    InvalidDateError,
    InvalidMonthError,
    InvalidRangeError,
    LeaveCalendarError,
)
from leavecal.holidays import get_holidays
from leavecal.intervals import Range, SingleDay, tag_interval

__all__ = [
    "InvalidDateError",
    "InvalidMonthError",
    "InvalidRangeError",
    "LeaveCalendarError",
    "LeaveDaySet",
    "MonthGrid",
    "MonthSummary",
    "Range",
    "SingleDay",
    "build_leave_day_set",
    "build_month_grid",
    "count_working_days",
    "day_key",
    "get_holidays",
    "is_leave_day",
    "summarize_month",
    "tag_interval",
]
