"""
Date display helpers.

Every date in a rendered résumé is shown as "{Mon} {YYYY}" (e.g., "Mar 2021").
Blank or unparseable values display as an empty string; nothing here raises.
"""

from datetime import date, datetime
from typing import Union

# Formats tried after ISO parsing fails, in order
FALLBACK_FORMATS = ["%Y-%m", "%b %Y", "%B %Y", "%m/%Y", "%Y"]

DateLike = Union[str, date, datetime, None]


def parse_date(value: DateLike):
    """Parse a date-like value into a date, or None when blank or malformed."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return None

    # JavaScript Date.toJSON() output ends with "Z"
    iso_text = text[:-1] + "+00:00" if text.endswith("Z") else text
    try:
        return datetime.fromisoformat(iso_text).date()
    except ValueError:
        pass

    for fmt in FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    return None


def format_date(value: DateLike) -> str:
    """
    Format a date-like value as "{Month-abbrev} {4-digit-year}".

    Examples:
        format_date("2021-03-15")                 # "Mar 2021"
        format_date("2021-03-15T00:00:00.000Z")   # "Mar 2021"
        format_date("")                           # ""
        format_date("not a date")                 # ""
    """
    parsed = parse_date(value)
    if parsed is None:
        return ""
    return f"{parsed.strftime('%b')} {parsed.year:04d}"


def format_date_range(start: DateLike, end: DateLike, current: bool = False) -> str:
    """
    Format a "{start} - {end}" range, with "Present" as the end label when current.

    Returns an empty string when both ends are empty and the range is not current.
    """
    start_label = format_date(start)
    end_label = "Present" if current else format_date(end)
    if not start_label and not end_label:
        return ""
    return f"{start_label} - {end_label}"


def format_location(city: str, state: str) -> str:
    """Join city and state with ", ", dropping the comma when either side is empty."""
    city = (city or "").strip()
    state = (state or "").strip()
    separator = ", " if city and state else ""
    return f"{city}{separator}{state}"
