"""
Guard exceptions.

Two families:
- Usage errors (GuardUsageError): the API was called incorrectly. These
  propagate immediately and are never recorded on a chain.
- GuardIssueError: raised on request by Guard.raises() when a check failed.

CheckFailed is an internal signal that predicates raise to record an issue
other than their own. The dispatcher always catches it.
"""

from typing import Any

from .issues import Issue


class GuardError(Exception):
    """
    Base exception for all guard errors.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize guard error.

        Args:
            message: Human-readable error description
            details: Structured error data for logging/metrics
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class GuardUsageError(GuardError):
    """
    The guard API was used incorrectly (programmer error, never retried).
    """


class UnknownCheckError(GuardUsageError, AttributeError):
    """
    Raised when a chain is asked to run a check that is not registered.

    Also an AttributeError so that hasattr() and getattr() defaults behave.
    """

    def __init__(self, check: str):
        """
        Initialize unknown check error.

        Args:
            check: Name of the check that was requested
        """
        super().__init__(
            f"Guard check {check} method does not exist",
            {"check": check},
        )
        self.check = check


class InvalidCallbackError(GuardUsageError):
    """
    Raised when otherwise() receives a missing or non-callable callback.
    """

    def __init__(self, callback: Any):
        super().__init__(
            "Guard callback is not a function",
            {"callback_type": type(callback).__name__},
        )


class GuardIssueError(GuardError):
    """
    Raised by Guard.raises() when the chain recorded an issue.

    str(error) is exactly the catalog message for the issue.

    Attributes:
        issue: Identifier of the first failing check
        value: The guarded value
    """

    def __init__(self, message: str, issue: Any = None, value: Any = None):
        super().__init__(message)
        self.issue = issue
        self.value = value


class CheckFailed(Exception):
    """
    Internal signal: the running check failed with the given issue.

    Lets a predicate report a more general issue than its own
    (e.g. date checks report is-date when parsing fails).
    """

    def __init__(self, issue: Any):
        super().__init__(str(issue))
        self.issue = issue


class DateParseError(CheckFailed):
    """
    A value could not be interpreted as a date.
    """

    def __init__(self, value: Any):
        super().__init__(Issue.IS_DATE)
        self.value = value
