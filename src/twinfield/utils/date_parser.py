"""Date parsing utilities for the Twinfield wire format."""

from datetime import date
from typing import Optional

from dateutil import parser as date_parser

WIRE_DATE_FORMAT = "%Y%m%d"


def parse_date(date_str: Optional[str]) -> Optional[date]:
    """Parse a date string from a response document.

    The service writes dates as ``YYYYMMDD``, some elements use
    ``YYYY-MM-DD`` or include a time component. Empty values mean "no date".

    Args:
        date_str: Date string as found in the document

    Returns:
        Date object, or None for an empty value

    Raises:
        ValueError: If date string cannot be parsed
    """
    if date_str is None or not date_str.strip():
        return None

    date_str = date_str.strip()
    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def format_date(value: date) -> str:
    """Format a date the way the service expects it in requests."""
    return value.strftime(WIRE_DATE_FORMAT)
