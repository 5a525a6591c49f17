"""Transform Airtable records into site events and apply the date window."""

from datetime import date, datetime, timezone
from typing import Any, Iterable
from zoneinfo import ZoneInfo

DISPLAY_TIMEZONE = "Europe/London"
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
TIME_RANGE_SEPARATOR = "–"  # en dash
DEFAULT_EVENT_TYPE = "show"


def parse_timestamp(value: str) -> datetime:
    """Airtable datetimes are UTC with a trailing Z, e.g. 2024-03-15T19:30:00.000Z."""
    value = value.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_local(value: str, tz: str = DISPLAY_TIMEZONE) -> datetime:
    return parse_timestamp(value).astimezone(ZoneInfo(tz))


def format_date(start: str, tz: str = DISPLAY_TIMEZONE, date_format: str = DATE_FORMAT) -> str:
    return to_local(start, tz).strftime(date_format)


def format_time(
    start: str,
    end: str | None = None,
    tz: str = DISPLAY_TIMEZONE,
    time_format: str = TIME_FORMAT,
) -> str:
    """'19:30' for a start only, '19:30–21:00' when an end is given. Wall-clock time in tz."""
    start_time = to_local(start, tz).strftime(time_format)
    if not end:
        return start_time
    end_time = to_local(end, tz).strftime(time_format)
    return f"{start_time}{TIME_RANGE_SEPARATOR}{end_time}"


def transform_event(
    record: dict[str, Any],
    tz: str = DISPLAY_TIMEZONE,
    date_format: str = DATE_FORMAT,
    time_format: str = TIME_FORMAT,
) -> dict[str, str]:
    """
    Map one Airtable record to the site's event shape. The record must have a Start;
    transform_events drops those that don't.
    Missing optional fields fall back to defaults. Tickets URL takes precedence over Event URL.
    description is a placeholder and is never filled from Airtable.
    """
    fields = record.get("fields", {})
    return {
        "date": format_date(fields["Start"], tz, date_format),
        "title": fields.get("Title") or "",
        "venue": fields.get("Venue") or "",
        "time": format_time(fields["Start"], fields.get("End"), tz, time_format),
        "type": (fields.get("Type") or DEFAULT_EVENT_TYPE).lower(),
        "url": fields.get("Tickets URL") or fields.get("Event URL") or "",
        "description": "",
    }


def transform_events(
    records: Iterable[dict[str, Any]],
    tz: str = DISPLAY_TIMEZONE,
    date_format: str = DATE_FORMAT,
    time_format: str = TIME_FORMAT,
) -> list[dict[str, str]]:
    """Airtable omits empty fields, so records without a Start are skipped rather than failing the run."""
    return [
        transform_event(r, tz, date_format, time_format)
        for r in records
        if r.get("fields", {}).get("Start")
    ]


def previous_month_start(now: datetime, tz: str = DISPLAY_TIMEZONE, date_format: str = DATE_FORMAT) -> str:
    """First day of the month before now's month, as seen in tz. Naive now is taken as UTC."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local = now.astimezone(ZoneInfo(tz))
    year, month = local.year, local.month - 1
    if month == 0:
        year, month = year - 1, 12
    return date(year, month, 1).strftime(date_format)


def filter_recent_and_future(events: Iterable[dict[str, str]], threshold: str) -> list[dict[str, str]]:
    """
    Keep events dated on or after threshold. Dates are zero-padded YYYY-MM-DD so string
    comparison matches calendar order. There is no upper bound. Input order is kept.
    """
    return [e for e in events if e["date"] >= threshold]
