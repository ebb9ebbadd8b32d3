"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Any, Optional
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "15 Jan 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow"
    - Offsets used for due dates: "+30d", "+2w", "+1m"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # Handle "+N<unit>" offsets from today
    if date_str.startswith("+") and len(date_str) > 2 and date_str[1:-1].isdigit():
        count = int(date_str[1:-1])
        unit = date_str[-1]
        if unit == "d":
            return today + timedelta(days=count)
        elif unit == "w":
            return today + timedelta(weeks=count)
        elif unit == "m":
            return today + relativedelta(months=count)
        raise ValueError(f"Unknown offset unit in '{date_str}' (use d, w or m)")

    try:
        # Indian documents write dates day-first
        dt = date_parser.parse(date_str, dayfirst=not _is_iso(date_str))
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_wire_date(value: Any) -> Optional[date]:
    """Parse a date stored in a wire payload.

    Payloads carry ISO-8601 strings, sometimes full timestamps such as
    "2024-01-15T00:00:00.000Z". Empty or unparseable values yield None.
    """
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    try:
        return date_parser.isoparse(str(value)).date()
    except (ValueError, OverflowError):
        return None


def _is_iso(date_str: str) -> bool:
    return len(date_str) >= 10 and date_str[4] == "-" and date_str[:4].isdigit()
