"""
Presence and boolean checks: exists, is_true, is_false.
"""

from typing import Any

from ..issues import Issue
from .coercion import is_collection, to_text
from .registry import default_registry


@default_registry.register("exists", Issue.EXISTS)
def exists(value: Any) -> bool:
    """
    Pass if the value has content.

    Booleans and collections (even empty ones) always exist; anything else
    must have non-blank text. None has no text.
    """
    if isinstance(value, bool) or is_collection(value):
        return True
    return to_text(value).strip() != ""


@default_registry.register("is_true", Issue.TRUE)
def is_true(value: Any) -> bool:
    return value is True


@default_registry.register("is_false", Issue.FALSE)
def is_false(value: Any) -> bool:
    return value is False
