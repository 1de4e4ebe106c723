"""
Calendar date parsing and formatting for exercise logs.

Dates travel over the wire in two shapes:
- Inbound: ``YYYY-MM-DD`` strings (exercise dates, ``from``/``to`` filters)
- Outbound: a fixed human-readable form, e.g. ``"Mon Jan 01 1990"``

The outbound form is built from fixed English tables rather than
``strftime`` so the output does not depend on the process locale.

Examples:
    >>> parse_calendar_date("2020-02-02")
    datetime.date(2020, 2, 2)

    >>> format_calendar_date(datetime.date(2020, 2, 2))
    'Sun Feb 02 2020'
"""

import datetime
import re

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_ISO_DATE_RE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")


def parse_calendar_date(text: str) -> datetime.date:
    """
    Parse a ``YYYY-MM-DD`` string into a date.

    Args:
        text: Date string, surrounding whitespace is ignored

    Returns:
        The parsed calendar date

    Raises:
        ValueError: If the text is not a real ``YYYY-MM-DD`` date
    """
    match = _ISO_DATE_RE.match(text.strip())
    if not match:
        raise ValueError(f"Invalid date '{text}', expected YYYY-MM-DD")

    year, month, day = (int(part) for part in match.groups())
    # datetime.date rejects impossible days such as 2023-02-30
    return datetime.date(year, month, day)


def format_calendar_date(value: datetime.date) -> str:
    """
    Render a date as ``"<Wkd> <Mon> <DD> <YYYY>"``.

    Args:
        value: Calendar date (a datetime is truncated to its date)

    Returns:
        Fixed-format string such as ``"Sun Feb 02 2020"``
    """
    if isinstance(value, datetime.datetime):
        value = value.date()
    return (
        f"{WEEKDAY_NAMES[value.weekday()]} "
        f"{MONTH_NAMES[value.month - 1]} "
        f"{value.day:02d} "
        f"{value.year:04d}"
    )


def utc_today() -> datetime.date:
    """Current calendar date in UTC."""
    return datetime.datetime.now(datetime.timezone.utc).date()
