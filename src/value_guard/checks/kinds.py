"""
Type and character-class checks.

These never coerce: is_integer("5") fails, is_string(5) fails.
"""

from typing import Any

from ..issues import Issue
from .coercion import is_collection, is_numeric as _is_numeric
from .registry import default_registry


def _matches_class_name(value: Any, class_name: str) -> bool:
    """Match a class name (simple or dotted) anywhere in the value's MRO."""
    for cls in type(value).__mro__:
        if class_name in (cls.__name__, cls.__qualname__, f"{cls.__module__}.{cls.__qualname__}"):
            return True
    return False


@default_registry.register("is_class", Issue.IS_CLASS)
def is_class(value: Any, expected: Any) -> bool:
    """
    Pass if value is an instance of `expected`.

    `expected` may be a class, a tuple of classes, or a class name such as
    "Decimal" or "decimal.Decimal".
    """
    if isinstance(expected, str):
        return _matches_class_name(value, expected)
    return isinstance(value, expected)


@default_registry.register("is_array", Issue.IS_ARRAY)
def is_array(value: Any) -> bool:
    return is_collection(value)


@default_registry.register("is_integer", Issue.IS_INTEGER)
def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@default_registry.register("is_string", Issue.IS_STRING)
def is_string(value: Any) -> bool:
    return isinstance(value, str)


@default_registry.register("is_numeric", Issue.IS_NUMERIC)
def is_numeric(value: Any) -> bool:
    return _is_numeric(value)


@default_registry.register("is_alpha", Issue.IS_ALPHA)
def is_alpha(value: Any) -> bool:
    """Pass for non-empty strings made only of ASCII letters."""
    return isinstance(value, str) and value.isascii() and value.isalpha()
