"""
Issue identifiers and the default message catalog.

An issue is the tag recorded on a guard by the first check that fails.
Built-in checks use the closed Issue enum below; custom checks may record
any string identifier, so the catalog is keyed by plain strings.
"""

from enum import Enum
from typing import Mapping, Optional


class Issue(str, Enum):
    """
    Identifiers recorded by the built-in checks.

    Members compare equal to their string value (Issue.EXISTS == "exists").
    """

    EXISTS = "exists"
    TRUE = "true"
    FALSE = "false"
    IS_CLASS = "is-class"
    IS_ARRAY = "is-array"
    IS_DATE = "is-date"
    IS_BEFORE = "is-before"
    IS_AFTER = "is-after"
    IS_BETWEEN = "is-between"
    IS_ALPHA = "is-alpha"
    IS_NUMERIC = "is-numeric"
    IS_LENGTH = "is-length"
    IS_URL = "is-url"
    IS_ACTIVE_URL = "is-active-url"
    IS_IN = "is-in"
    IS_NOT_EXCLUDED = "is-not-excluded"
    IS_JSON = "is-json"
    IS_IP = "is-ip"
    IS_INTEGER = "is-integer"
    IS_STRING = "is-string"
    IS_EMAIL = "is-email"
    LESS_THAN = "less-than"
    EQUAL_OR_LESS_THAN = "equal-or-less-than"
    GREATER_THAN = "greater-than"
    EQUAL_OR_GREATER_THAN = "equal-or-greater-than"
    EQUAL = "equal"

    def __str__(self) -> str:
        return self.value


DEFAULT_MESSAGES: dict[str, str] = {
    Issue.EXISTS.value: "Value does not exist",
    Issue.TRUE.value: "Value is not true",
    Issue.FALSE.value: "Value is not false",
    Issue.IS_CLASS.value: "Value is not an instance of the expected class",
    Issue.IS_ARRAY.value: "Value is not an array",
    Issue.IS_DATE.value: "Value is not a valid date",
    Issue.IS_BEFORE.value: "Date is not before the given date",
    Issue.IS_AFTER.value: "Date is not after the given date",
    Issue.IS_BETWEEN.value: "Value is not between the given bounds",
    Issue.IS_ALPHA.value: "Value contains non-alphabetic characters",
    Issue.IS_NUMERIC.value: "Value is not numeric",
    Issue.IS_LENGTH.value: "Value does not have the expected length",
    Issue.IS_URL.value: "Value is not a valid URL",
    Issue.IS_ACTIVE_URL.value: "Value is not an active URL",
    Issue.IS_IN.value: "Value is not one of the allowed values",
    Issue.IS_NOT_EXCLUDED.value: "Value is one of the excluded values",
    Issue.IS_JSON.value: "Value is not valid JSON",
    Issue.IS_IP.value: "Value is not a valid IP address",
    Issue.IS_INTEGER.value: "Value is not an integer",
    Issue.IS_STRING.value: "Value is not a string",
    Issue.IS_EMAIL.value: "Value is not a valid email address",
    Issue.LESS_THAN.value: "Value is not less than the given value",
    Issue.EQUAL_OR_LESS_THAN.value: "Value is greater than the given value",
    Issue.GREATER_THAN.value: "Value is not greater than the given value",
    Issue.EQUAL_OR_GREATER_THAN.value: "Value is less than the given value",
    Issue.EQUAL.value: "Value is not equal to the given value",
}


def issue_key(issue: "Issue | str") -> str:
    """Normalize an issue identifier to the plain string used as catalog key."""
    if isinstance(issue, Issue):
        return issue.value
    return str(issue)


def build_catalog(overrides: Optional[Mapping["Issue | str", str]] = None) -> dict[str, str]:
    """
    Merge message overrides into a copy of the default catalog.

    Args:
        overrides: Extra or replacement messages keyed by issue identifier

    Returns:
        New catalog dict; overrides win on key collision
    """
    catalog = dict(DEFAULT_MESSAGES)
    if overrides:
        catalog.update({issue_key(issue): message for issue, message in overrides.items()})
    return catalog
