"""
Date checks: is_date, before, after.

Both the guarded value and the bound are parsed with parse_date(). If
either side cannot be parsed the check records is-date instead of its own
issue (DateParseError propagates to the dispatcher).
"""

from typing import Any

from ..issues import Issue
from .coercion import is_date as _is_date, parse_date
from .registry import default_registry


@default_registry.register("is_date", Issue.IS_DATE)
def is_date(value: Any) -> bool:
    return _is_date(value)


@default_registry.register("before", Issue.IS_BEFORE)
def before(value: Any, limit: Any) -> bool:
    """Pass if value is strictly earlier than limit."""
    return parse_date(value) < parse_date(limit)


@default_registry.register("after", Issue.IS_AFTER)
def after(value: Any, limit: Any) -> bool:
    """Pass if value is strictly later than limit."""
    return parse_date(value) > parse_date(limit)
