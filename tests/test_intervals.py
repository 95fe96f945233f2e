from __future__ import annotations

import datetime

import pytest

from leavecal.engine import build_leave_day_set
from leavecal.errors import InvalidDateError
from leavecal.intervals import Range, SingleDay, tag_interval, tag_intervals


class TestTagInterval:
    def test_bare_string(self) -> None:
        assert tag_interval("2025-08-04") == SingleDay("2025-08-04")

    def test_bare_date(self) -> None:
        d = datetime.date(2025, 8, 4)
        assert tag_interval(d) == SingleDay(d)

    def test_api_record(self) -> None:
        record = {
            "startDate": "2025-08-04T00:00:00.000Z",
            "endDate": "2025-08-06T00:00:00.000Z",
            "status": "approved",
        }
        assert tag_interval(record) == Range(record["startDate"], record["endDate"])

    def test_snake_case_record(self) -> None:
        assert tag_interval({"start_date": "2025-08-04", "end_date": "2025-08-05"}) == Range(
            "2025-08-04", "2025-08-05"
        )

    def test_already_tagged(self) -> None:
        r = Range("2025-08-04", "2025-08-05")
        assert tag_interval(r) is r

    def test_missing_end(self) -> None:
        with pytest.raises(InvalidDateError):
            tag_interval({"startDate": "2025-08-04"})

    def test_unknown_shape(self) -> None:
        with pytest.raises(InvalidDateError):
            tag_interval(42)

    def test_mixed_records_feed_the_engine(self) -> None:
        records = [
            "2025-08-11",
            {"startDate": "2025-08-04T00:00:00.000Z", "endDate": "2025-08-06T00:00:00.000Z"},
        ]
        leave = build_leave_day_set(tag_intervals(records), [])
        assert leave == frozenset({"2025-08-04", "2025-08-05", "2025-08-06", "2025-08-11"})
