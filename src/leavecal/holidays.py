"""Built-in holiday presets.

Each preset returns ``(date, name)`` pairs for a given year, sorted by date.
The calendar core only needs the dates; names are for listings.

``in-ka``
    The Bengaluru office calendar.  Fixed-date national and state holidays
    apply to every year; festival dates move with the lunar calendar and are
    only known for the years listed in ``_IN_KA_FESTIVALS``.
"""

from __future__ import annotations

import datetime
from collections.abc import Callable

Holidays = list[tuple[datetime.date, str]]

PRESETS: dict[str, str] = {
    "in-ka": "Bengaluru office holidays",
}

_IN_KA_FIXED: list[tuple[int, int, str]] = [
    (1, 1, "New Year's Day"),
    (1, 14, "Makar Sankranti"),
    (1, 26, "Republic Day"),
    (5, 1, "May Day"),
    (8, 15, "Independence Day"),
    (10, 2, "Gandhi Jayanti"),
    (11, 1, "Kannada Rajyotsava"),
    (12, 25, "Christmas Day"),
]

_IN_KA_FESTIVALS: dict[int, list[tuple[int, int, str]]] = {
    2025: [
        (2, 26, "Maha Shivaratri"),
        (4, 18, "Good Friday"),
        (8, 27, "Ganesh Chaturthi"),
        (10, 1, "Ayudha Puja"),
        (10, 20, "Deepavali"),
    ],
}


def in_ka_holidays(year: int) -> Holidays:
    """Bengaluru office holidays for *year*.

    No weekend shifting: a holiday on a weekend is simply lost.
    """
    entries = _IN_KA_FIXED + _IN_KA_FESTIVALS.get(year, [])
    return sorted((datetime.date(year, m, d), name) for m, d, name in entries)


_PRESET_FNS: dict[str, Callable[[int], Holidays]] = {
    "in-ka": in_ka_holidays,
}


def get_holidays(country: str, year: int) -> Holidays:
    """Return ``(date, name)`` pairs for the *country* preset and *year*.

    Raises ``KeyError`` for an unknown preset.
    """
    try:
        fn = _PRESET_FNS[country]
    except KeyError:
        supported = ", ".join(sorted(PRESETS))
        raise KeyError(f"Unknown country preset {country!r}. Supported: {supported}") from None
    return fn(year)
