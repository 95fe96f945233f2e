"""Typer CLI for the leave calendar."""

from __future__ import annotations

import datetime
import json
import logging
import pathlib
import sys

import typer

from leavecal.engine import (
    LeaveDaySet,
    MonthGrid,
    MonthSummary,
    build_leave_day_set,
    build_month_grid,
    count_working_days,
    format_date_range,
    parse_day,
    summarize_month,
)
from leavecal.errors import LeaveCalendarError
from leavecal.holidays import PRESETS, get_holidays
from leavecal.intervals import LeaveInterval, Range, SingleDay, tag_intervals
from leavecal.render import format_leave_days, format_month, format_summary

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="leavecal",
    help="Leave calendar: count leave days around weekends and holidays, "
    "and show them on a month view.",
    add_completion=False,
)

DEFAULT_COUNTRY = "in-ka"


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(code=1)


def _parse_date(value: str) -> datetime.date:
    """Parse a YYYY-MM-DD date string."""
    try:
        return parse_day(value)
    except LeaveCalendarError:
        raise typer.BadParameter(f"Invalid date format {value!r}. Use YYYY-MM-DD.") from None


def _parse_leave(value: str) -> LeaveInterval:
    """Parse ``YYYY-MM-DD`` or ``YYYY-MM-DD:YYYY-MM-DD``."""
    if ":" in value:
        start, _, end = value.partition(":")
        return Range(_parse_date(start), _parse_date(end))
    return SingleDay(_parse_date(value))


def _today() -> datetime.date:
    return datetime.date.today()


# ---------------------------------------------------------------------------
# Callback
# ---------------------------------------------------------------------------


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug details to stderr.",
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Config and holidays
# ---------------------------------------------------------------------------


def _load_config(path: str) -> dict[str, object]:
    """Load and validate a JSON leave config file."""
    p = pathlib.Path(path)
    if not p.exists():
        raise _fail(f"Config file not found: {path}")

    try:
        data = json.loads(p.read_text())
    except json.JSONDecodeError as exc:
        raise _fail(f"Invalid JSON in config file: {exc}") from None

    if not isinstance(data, dict):
        raise _fail("Config file must contain a JSON object.")
    for key in ("leaves", "holidays"):
        if not isinstance(data.get(key, []), list):
            raise _fail(f"'{key}' must be a list.")
    for key in ("year", "month"):
        if key not in data:
            continue
        value = data[key]
        msg = f"'{key}' must be an integer; got {value!r}."
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise _fail(msg)
        try:
            data[key] = int(value)
        except ValueError:
            raise _fail(msg) from None

    logger.debug("Loaded config %s with keys %s", p, sorted(data))
    return data


def _collect_holidays(
    country: str | None,
    extra: list[object],
    years: range,
) -> tuple[list[datetime.date], dict[datetime.date, str]]:
    """Preset holidays for every year in *years* plus *extra* dates."""
    names: dict[datetime.date, str] = {}

    if country and country != "none":
        for y in years:
            try:
                preset = get_holidays(country, y)
            except KeyError as exc:
                raise _fail(str(exc.args[0])) from None
            names.update(preset)

    dates = set(names)
    for h in extra:
        try:
            dates.add(parse_day(h))
        except LeaveCalendarError as exc:
            raise _fail(str(exc)) from None

    logger.debug("Using %d holidays (preset=%s)", len(dates), country)
    return sorted(dates), names


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def month(
    year: int = typer.Option(
        None,
        "--year",
        "-y",
        help="Year to show. Defaults to the config value or the current year.",
    ),
    month_: int = typer.Option(
        None,
        "--month",
        "-m",
        help="Month to show (1-12). Defaults to the config value or the current month.",
    ),
    leave: list[str] | None = typer.Option(  # noqa: B008
        None,
        "--leave",
        "-l",
        help="Leave day (YYYY-MM-DD) or range (YYYY-MM-DD:YYYY-MM-DD). Repeatable.",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        help="Path to JSON file with 'leaves', 'holidays', 'country', 'year', 'month'.",
    ),
    country: str | None = typer.Option(
        None,
        "--country",
        "-c",
        help=f"Holiday preset ({', '.join(sorted(PRESETS))}). Use 'none' to skip.",
    ),
    holiday: list[str] | None = typer.Option(  # noqa: B008
        None,
        "--holiday",
        "-H",
        help="Additional holiday date (YYYY-MM-DD). Repeatable.",
    ),
    today: str | None = typer.Option(
        None,
        "--today",
        help="Date to highlight (YYYY-MM-DD). Defaults to the current date.",
    ),
    output_json: bool = typer.Option(
        False,
        "--json",
        help="Output results as JSON.",
    ),
) -> None:
    """Show one month with leave days and holidays marked."""
    data = _load_config(config) if config is not None else {}
    now = _today()

    # _load_config has already coerced year/month to int
    resolved_year = year if year is not None else data.get("year", now.year)
    resolved_month = month_ if month_ is not None else data.get("month", now.month)
    resolved_country = country or str(data.get("country", DEFAULT_COUNTRY))
    highlight = _parse_date(today) if today is not None else now

    try:
        grid = build_month_grid(resolved_year, resolved_month)
    except LeaveCalendarError as exc:
        raise _fail(str(exc)) from None

    extra: list[object] = list(data.get("holidays", []))  # type: ignore[call-overload]
    extra.extend(holiday or [])

    try:
        intervals = tag_intervals(data.get("leaves", []))  # type: ignore[arg-type]
        intervals.extend(_parse_leave(v) for v in leave or [])
        years = _years_covered(intervals, resolved_year)
    except LeaveCalendarError as exc:
        raise _fail(str(exc)) from None

    holidays, holiday_names = _collect_holidays(resolved_country, extra, years)

    try:
        leave_days = build_leave_day_set(intervals, holidays)
        summary = summarize_month(resolved_year, resolved_month, leave_days, holidays)
    except LeaveCalendarError as exc:
        raise _fail(str(exc)) from None

    logger.debug(
        "%d intervals -> %d leave days; %s", len(intervals), len(leave_days), grid.label
    )

    if output_json:
        _print_month_json(grid, leave_days, summary)
        return

    typer.echo(format_month(grid, leave_days, holidays, today=highlight))
    typer.echo()
    typer.echo(format_summary(summary))

    in_month = [h for h in holidays if (h.year, h.month) == (resolved_year, resolved_month)]
    if in_month:
        typer.echo()
        typer.echo("  Holidays:")
        for h in in_month:
            typer.echo(f"    {h.strftime('%a, %b %d'):>12}  {holiday_names.get(h, 'Holiday')}")


def _print_month_json(grid: MonthGrid, leave_days: LeaveDaySet, summary: MonthSummary) -> None:
    output = {
        "year": grid.year,
        "month": grid.month,
        "label": grid.label,
        "day_count": grid.day_count,
        "leading_blanks": grid.leading_blanks,
        "leave_days": sorted(leave_days),
        "summary": summary._asdict(),
    }
    json.dump(output, sys.stdout, indent=2)
    typer.echo()


@app.command()
def count(
    start: str = typer.Option(..., "--start", "-s", help="First day of leave (YYYY-MM-DD)."),
    end: str = typer.Option(..., "--end", "-e", help="Last day of leave (YYYY-MM-DD)."),
    half_day: bool = typer.Option(
        False,
        "--half-day",
        help="Count the request as a half day.",
    ),
    country: str = typer.Option(
        DEFAULT_COUNTRY,
        "--country",
        "-c",
        help=f"Holiday preset ({', '.join(sorted(PRESETS))}). Use 'none' to skip.",
    ),
    holiday: list[str] | None = typer.Option(  # noqa: B008
        None,
        "--holiday",
        "-H",
        help="Additional holiday date (YYYY-MM-DD). Repeatable.",
    ),
) -> None:
    """Count the working days a leave request uses."""
    first, last = _parse_date(start), _parse_date(end)
    years = range(min(first.year, last.year), max(first.year, last.year) + 1)
    holidays, _names = _collect_holidays(country, list(holiday or []), years)

    try:
        days = count_working_days(first, last, holidays, half_day=half_day)
    except LeaveCalendarError as exc:
        raise _fail(str(exc)) from None

    label = format_date_range(first, last)
    typer.echo(f"  {label}: {days:g} working day{'s' if days != 1 else ''}")


@app.command()
def holidays(
    country: str = typer.Option(
        DEFAULT_COUNTRY,
        "--country",
        "-c",
        help=f"Country preset ({', '.join(sorted(PRESETS))}).",
    ),
    year: int = typer.Option(
        None,
        "--year",
        "-y",
        help="Year to list holidays for. Defaults to the current year.",
    ),
) -> None:
    """List holidays for a country preset."""
    resolved_year = year if year is not None else _today().year

    try:
        preset = get_holidays(country, resolved_year)
    except KeyError as exc:
        raise _fail(str(exc.args[0])) from None

    typer.echo(f"  {PRESETS[country]} — {resolved_year}")
    typer.echo()
    for d, name in preset:
        typer.echo(f"    {d.strftime('%a, %b %d'):>12}  {name}")


@app.command()
def days(
    leave: list[str] | None = typer.Option(  # noqa: B008
        None,
        "--leave",
        "-l",
        help="Leave day (YYYY-MM-DD) or range (YYYY-MM-DD:YYYY-MM-DD). Repeatable.",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        help="Path to JSON file with 'leaves', 'holidays' and 'country'.",
    ),
    country: str | None = typer.Option(
        None,
        "--country",
        "-c",
        help=f"Holiday preset ({', '.join(sorted(PRESETS))}). Use 'none' to skip.",
    ),
    output_json: bool = typer.Option(
        False,
        "--json",
        help="Output results as JSON.",
    ),
) -> None:
    """List every day that counts as leave."""
    data = _load_config(config) if config is not None else {}

    try:
        intervals = tag_intervals(data.get("leaves", []))  # type: ignore[arg-type]
        intervals.extend(_parse_leave(v) for v in leave or [])
        years = _years_covered(intervals)
        holidays, _names = _collect_holidays(
            country or str(data.get("country", DEFAULT_COUNTRY)),
            list(data.get("holidays", [])),  # type: ignore[call-overload]
            years,
        )
        leave_days = build_leave_day_set(intervals, holidays)
    except LeaveCalendarError as exc:
        raise _fail(str(exc)) from None

    if output_json:
        output = {"leave_days": sorted(leave_days), "total": len(leave_days)}
        json.dump(output, sys.stdout, indent=2)
        typer.echo()
        return

    typer.echo(f"  Leave days: {len(leave_days)}")
    typer.echo(format_leave_days(leave_days))


def _years_covered(intervals: list[LeaveInterval], *years: int) -> range:
    """Every year touched by *intervals* or listed in *years*."""
    seen = list(years)
    for interval in intervals:
        if isinstance(interval, Range):
            seen += [parse_day(interval.start).year, parse_day(interval.end).year]
        else:
            seen.append(parse_day(interval.day).year)
    if not seen:
        return range(0)
    return range(min(seen), max(seen) + 1)


def main() -> None:
    """Entry point for the CLI."""
    app()

