"""
Input validation shared by the use cases.

Request values arrive either as JSON (typed) or as form/query strings,
so each helper accepts both shapes and raises ValidationError with a
message suitable for returning to the client.
"""

import datetime as dt
import re
from typing import Any, Optional

from application.exceptions import ValidationError
from domain.dates import parse_calendar_date

# ASCII digits only; anything longer than ten digits is above MAX_INT
_DIGITS_RE = re.compile(r"^[0-9]{1,10}$")

# Largest value a Postgres integer column holds
MAX_INT = 2**31 - 1


def is_blank(value: Any) -> bool:
    """True for None and whitespace-only strings."""
    return value is None or (isinstance(value, str) and not value.strip())


def require_text(value: Any, field: str) -> str:
    """
    Validate a required, non-empty string.

    Returns:
        The value with surrounding whitespace stripped
    """
    if is_blank(value):
        raise ValidationError(f"{field} is required", field=field)
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string", field=field)
    return value.strip()


def parse_positive_int(value: Any, field: str) -> int:
    """
    Validate a positive integer given as an int or a string of digits.

    Booleans and floats are rejected even when they look integral, and
    values above MAX_INT are rejected so they fit the store's integer columns.
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a positive integer", field=field)

    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and _DIGITS_RE.match(value.strip()):
        number = int(value.strip())
    else:
        raise ValidationError(f"{field} must be a positive integer", field=field)

    if number < 1:
        raise ValidationError(f"{field} must be a positive integer", field=field)
    if number > MAX_INT:
        raise ValidationError(f"{field} must be at most {MAX_INT}", field=field)
    return number


def parse_optional_date(value: Any, field: str) -> Optional[dt.date]:
    """Parse an optional ``YYYY-MM-DD`` value; blank means absent."""
    if is_blank(value):
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a YYYY-MM-DD date", field=field)
    try:
        return parse_calendar_date(value)
    except ValueError:
        raise ValidationError(f"{field} must be a YYYY-MM-DD date", field=field)


def parse_optional_limit(value: Any) -> Optional[int]:
    """Parse an optional positive ``limit``; blank means absent."""
    if is_blank(value):
        return None
    return parse_positive_int(value, "limit")
