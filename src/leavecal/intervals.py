"""Leave interval variants and tagging of raw leave records.

Leave records arrive from the leave API in two shapes: a bare date (string or
date object) for single-day requests, or an object carrying ``startDate`` and
``endDate``.  The calendar core only accepts the tagged variants defined here,
so callers run raw records through :func:`tag_interval` first.
"""

from __future__ import annotations

import datetime
from collections.abc import Iterable, Mapping
from typing import NamedTuple, Union

from leavecal.errors import InvalidDateError

DateLike = Union[datetime.date, str]


class SingleDay(NamedTuple):
    """A one-day leave interval."""

    day: DateLike


class Range(NamedTuple):
    """A leave interval from *start* to *end*, both inclusive."""

    start: DateLike
    end: DateLike


LeaveInterval = Union[SingleDay, Range]

_START_KEYS = ("startDate", "start_date", "start")
_END_KEYS = ("endDate", "end_date", "end")


def _first_present(record: Mapping[str, object], keys: tuple[str, ...]) -> object | None:
    for key in keys:
        value = record.get(key)
        if value:
            return value
    return None


def tag_interval(record: object) -> LeaveInterval:
    """Convert a raw leave record into a :class:`SingleDay` or :class:`Range`.

    Already-tagged intervals are returned unchanged.
    """
    if isinstance(record, (SingleDay, Range)):
        return record
    if isinstance(record, Mapping):
        start = _first_present(record, _START_KEYS)
        end = _first_present(record, _END_KEYS)
        if start is None or end is None:
            msg = f"Leave record needs both a start and an end date: {dict(record)!r}"
            raise InvalidDateError(msg)
        return Range(start, end)  # type: ignore[arg-type]
    if isinstance(record, (str, datetime.date)):
        return SingleDay(record)
    raise InvalidDateError(f"Unrecognised leave record {record!r}")


def tag_intervals(records: Iterable[object]) -> list[LeaveInterval]:
    """Tag every record in *records*."""
    return [tag_interval(r) for r in records]
