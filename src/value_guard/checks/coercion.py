"""
Value coercion helpers shared by the check modules.

Checks operate on loosely typed input, so the interpretation of a value as
text, as a number or as a date is centralised here:

- to_text: the string form used by exists() and length()
- to_number: numeric interpretation, or None when not numeric
- parse_date: timezone-aware datetime, or DateParseError
"""

import numbers
import re
from collections.abc import Mapping, Sequence, Set
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Optional
from zoneinfo import ZoneInfo

from dateutil import parser as date_parser

from ..config import settings
from ..exceptions import DateParseError

COLLECTION_TYPES = (Sequence, Set, Mapping)

# Sequences that are text, not collections
TEXT_TYPES = (str, bytes, bytearray, memoryview)

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent
NUMERIC_PATTERN = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")

RELATIVE_DAYS = {"today": 0, "tomorrow": 1, "yesterday": -1}


def is_collection(value: Any) -> bool:
    return isinstance(value, COLLECTION_TYPES) and not isinstance(value, TEXT_TYPES)


def to_text(value: Any) -> str:
    """
    String form of a value.

    None becomes the empty string and bytes are decoded as UTF-8.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def to_number(value: Any) -> Optional[numbers.Number]:
    """
    Numeric interpretation of a value.

    Accepts real numbers (bool and NaN excluded) and numeric strings such as
    "42", " -1.5 ", "3e2" or ".5".

    Returns:
        The number, or None if the value is not numeric
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        return None
    if isinstance(value, Decimal):
        return None if value.is_nan() else value
    if isinstance(value, numbers.Number):
        # NaN is the only value unequal to itself
        return None if value != value else value
    if isinstance(value, str) and NUMERIC_PATTERN.match(value):
        text = value.strip()
        if any(marker in text for marker in ".eE"):
            return float(text)
        return int(text)
    return None


def is_numeric(value: Any) -> bool:
    return to_number(value) is not None


def _default_tzinfo():
    if settings.DEFAULT_TIMEZONE:
        return ZoneInfo(settings.DEFAULT_TIMEZONE)
    return None


def _localize(moment: datetime) -> datetime:
    """Attach the default time zone to naive datetimes."""
    if moment.tzinfo is not None:
        return moment
    tzinfo = _default_tzinfo()
    if tzinfo is not None:
        return moment.replace(tzinfo=tzinfo)
    # Naive datetimes are taken as process local time
    return moment.astimezone()


def _now() -> datetime:
    tzinfo = _default_tzinfo()
    if tzinfo is not None:
        return datetime.now(tzinfo)
    return datetime.now().astimezone()


def _parse_relative(text: str) -> Optional[datetime]:
    """Resolve "now", "today", "tomorrow" and "yesterday"."""
    keyword = text.lower()
    if keyword == "now":
        return _now()
    if keyword in RELATIVE_DAYS:
        midnight = datetime.combine(_now().date(), time.min)
        return _localize(midnight + timedelta(days=RELATIVE_DAYS[keyword]))
    return None


def parse_date(value: Any) -> datetime:
    """
    Interpret a value as a timezone-aware datetime.

    Accepts datetime and date objects, the keywords "now", "today",
    "tomorrow" and "yesterday", and any string dateutil can read
    ("2024-05-01", "May 1, 2024", "2024/05/01", "05/01/2024",
    "2024-05-01T10:00:00+02:00"). Ambiguous numeric dates are read month
    first. Numbers and numeric strings are never dates.

    Raises:
        DateParseError: If the value cannot be read as a date
    """
    if isinstance(value, datetime):
        return _localize(value)
    if isinstance(value, date):
        return _localize(datetime.combine(value, time.min))
    if not isinstance(value, str):
        raise DateParseError(value)

    text = value.strip()
    if not text or NUMERIC_PATTERN.match(text):
        raise DateParseError(value)

    relative = _parse_relative(text)
    if relative is not None:
        return relative

    try:
        parsed = date_parser.parse(text)
    except (ValueError, OverflowError) as e:
        raise DateParseError(value) from e
    return _localize(parsed)


def is_date(value: Any) -> bool:
    try:
        parse_date(value)
    except DateParseError:
        return False
    return True
