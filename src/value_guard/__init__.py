"""
value-guard: fluent value validation.

    from value_guard import guard

    guard(email).exists().is_string().is_email_address().raises()

A chain runs checks until the first one fails, remembers that issue and
skips everything after it. Resolve it with passes(), otherwise(callback) or
raises().
"""

from .chain import Guard, guard
from .checks import Check, CheckRegistry, default_registry
from .exceptions import (
    GuardError,
    GuardIssueError,
    GuardUsageError,
    InvalidCallbackError,
    UnknownCheckError,
)
from .issues import DEFAULT_MESSAGES, Issue

__version__ = "0.1.0"

__all__ = [
    # Chain
    "Guard",
    "guard",
    # Catalog
    "Issue",
    "DEFAULT_MESSAGES",
    "Check",
    "CheckRegistry",
    "default_registry",
    # Exceptions
    "GuardError",
    "GuardUsageError",
    "UnknownCheckError",
    "InvalidCallbackError",
    "GuardIssueError",
]
