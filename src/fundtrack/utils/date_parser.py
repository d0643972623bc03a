"""Date parsing utilities."""

from datetime import date, datetime, time, timedelta, UTC
from dateutil import parser as date_parser


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports ISO and free-form absolute dates ("2024-01-15",
    "January 15, 2024") and the relative words "today", "yesterday"
    and "tomorrow".

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    if not isinstance(date_str, str):
        raise ValueError(f"Could not parse date {date_str!r}")

    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_datetime(value: str) -> datetime:
    """Parse a timestamp string into a timezone-aware UTC datetime.

    Full ISO 8601 timestamps keep their time of day; naive values are taken
    as UTC. Anything ``parse_date`` accepts resolves to midnight UTC.

    Raises:
        ValueError: If the value cannot be parsed
    """
    if not isinstance(value, str):
        raise ValueError(f"Could not parse date {value!r}")

    try:
        parsed = date_parser.isoparse(value.strip())
    except (ValueError, OverflowError):
        parsed = datetime.combine(parse_date(value), time.min)

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)
