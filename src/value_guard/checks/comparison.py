"""
Comparison checks: numeric relations, between, equal, membership, length.

Numeric relations fail (rather than error) when either operand is not
numeric; numeric strings count as numbers.
"""

import operator
from typing import Any, Callable, Iterable

from ..issues import Issue
from .coercion import is_date, parse_date, to_number, to_text
from .registry import default_registry


def _compare(value: Any, match: Any, relation: Callable[[Any, Any], bool]) -> bool:
    left, right = to_number(value), to_number(match)
    if left is None or right is None:
        return False
    return relation(left, right)


@default_registry.register("less_than", Issue.LESS_THAN)
def less_than(value: Any, match: Any) -> bool:
    return _compare(value, match, operator.lt)


@default_registry.register("equal_or_less_than", Issue.EQUAL_OR_LESS_THAN)
def equal_or_less_than(value: Any, match: Any) -> bool:
    return _compare(value, match, operator.le)


@default_registry.register("greater_than", Issue.GREATER_THAN, aliases=("more_than",))
def greater_than(value: Any, match: Any) -> bool:
    return _compare(value, match, operator.gt)


@default_registry.register(
    "equal_or_greater_than", Issue.EQUAL_OR_GREATER_THAN, aliases=("equal_or_more_than",)
)
def equal_or_greater_than(value: Any, match: Any) -> bool:
    return _compare(value, match, operator.ge)


@default_registry.register("between", Issue.IS_BETWEEN)
def between(value: Any, lower: Any, upper: Any) -> bool:
    """
    Pass if lower < value < upper (both bounds exclusive).

    When both bounds are dates the value is compared as a date and must
    parse as one (otherwise is-date is recorded). Otherwise all three are
    compared as numbers.
    """
    if is_date(lower) and is_date(upper):
        moment = parse_date(value)
        return parse_date(lower) < moment < parse_date(upper)

    number, low, high = to_number(value), to_number(lower), to_number(upper)
    if number is None or low is None or high is None:
        return False
    return low < number < high


@default_registry.register("equal", Issue.EQUAL)
def equal(value: Any, match: Any) -> bool:
    """
    Pass if value equals match.

    Dates compare by instant: "2024-01-01T00:00:00+00:00" equals
    "2024-01-01T01:00:00+01:00". Anything else needs the same type and ==.
    """
    if is_date(match):
        moment, target = parse_date(value), parse_date(match)
        return not moment < target and not moment > target
    return type(value) is type(match) and value == match


@default_registry.register("is_in", Issue.IS_IN)
def is_in(value: Any, options: Iterable[Any]) -> bool:
    return any(value == option for option in options)


@default_registry.register("not_in", Issue.IS_NOT_EXCLUDED)
def not_in(value: Any, options: Iterable[Any]) -> bool:
    return not is_in(value, options)


@default_registry.register("length", Issue.IS_LENGTH)
def length(value: Any, expected: int) -> bool:
    """Pass if the value's text form has exactly `expected` characters."""
    return len(to_text(value)) == expected
