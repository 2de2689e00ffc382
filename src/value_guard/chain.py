"""
Guard: a fluent validation chain around a single value.

    guard(age).exists().is_integer().between(0, 130).otherwise(reject)

Every check method is looked up by name in a CheckRegistry and run through
one dispatcher that enforces the short-circuit rule: once a check fails its
issue is recorded and every later check is skipped. The chain is resolved
with passes(), otherwise(callback) or raises().
"""

import inspect
from typing import Any, Callable, Mapping, Optional

from .checks import CheckRegistry, default_registry
from .checks.registry import Check
from .exceptions import CheckFailed, GuardIssueError, InvalidCallbackError, UnknownCheckError
from .issues import Issue, build_catalog, issue_key
from .logging_config import get_logger
from .monitoring.metrics import record_issue, record_usage_error

logger = get_logger(__name__)


def _accepts_argument(callback: Callable[..., Any]) -> bool:
    """Whether callback can be called with one positional argument."""
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures
        return True
    positional = (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
        inspect.Parameter.VAR_POSITIONAL,
    )
    return any(param.kind in positional for param in signature.parameters.values())


class Guard:
    """
    Validation chain bound to one value.

    Check methods (exists(), is_integer(), between(lo, hi), ...) are not
    defined on the class; they are resolved from the registry on attribute
    access and always return the guard itself.

    Args:
        value: The value to validate
        messages: Extra or replacement messages keyed by issue identifier,
            merged over the default catalog
        registry: Checks available to this guard (default: built-ins)
    """

    def __init__(
        self,
        value: Any,
        messages: Optional[Mapping["Issue | str", str]] = None,
        registry: Optional[CheckRegistry] = None,
    ):
        self._value = value
        self._has_issue = False
        self._issue: "Issue | str | None" = None
        self._messages = build_catalog(messages)
        self._registry = registry if registry is not None else default_registry

    @property
    def value(self) -> Any:
        return self._value

    @property
    def has_issue(self) -> bool:
        return self._has_issue

    @property
    def issue(self) -> "Issue | str | None":
        """Identifier of the first failed check, or None."""
        return self._issue

    @property
    def messages(self) -> dict[str, str]:
        return dict(self._messages)

    @property
    def message(self) -> Optional[str]:
        """Catalog message for the recorded issue, or None if the chain passes."""
        if not self._has_issue:
            return None
        key = issue_key(self._issue)
        return self._messages.get(key, f"Value failed the '{key}' check")

    # === Dispatch ===

    def __getattr__(self, name: str) -> Callable[..., "Guard"]:
        # Only called for names not found on the instance or class
        registry = self.__dict__.get("_registry")
        if registry is None or name.startswith("__"):
            raise AttributeError(name)

        check = registry.get(name)
        if check is None:
            # Not counted: hasattr() lookups land here too
            raise UnknownCheckError(name)

        def run_check(*args: Any, **kwargs: Any) -> "Guard":
            return self._run(check, args, kwargs)

        run_check.__name__ = name
        return run_check

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._registry.names()))

    def _run(self, check: Check, args: tuple, kwargs: dict) -> "Guard":
        if self._has_issue:
            logger.debug("Guard check skipped", check=check.name, issue=issue_key(self._issue))
            return self

        try:
            passed = check(self._value, *args, **kwargs)
        except CheckFailed as e:
            self._record(check.name, e.issue)
            return self

        if not passed:
            self._record(check.name, check.issue)
        return self

    def _record(self, check_name: str, issue: "Issue | str") -> None:
        self._has_issue = True
        self._issue = issue
        record_issue(issue_key(issue))
        logger.debug("Guard check failed", check=check_name, issue=issue_key(issue))

    # === Resolution ===

    def passes(self) -> bool:
        """True if no check has failed so far."""
        return not self._has_issue

    def fails(self) -> bool:
        return self._has_issue

    def otherwise(self, callback: Optional[Callable[..., Any]] = None) -> Any:
        """
        Call `callback` if a check failed.

        The callback receives the issue identifier when it accepts a
        positional argument, otherwise it is called with no arguments.
        Calling otherwise() again calls the callback again.

        Args:
            callback: Failure handler

        Returns:
            The callback's return value, or None if the chain passed

        Raises:
            InvalidCallbackError: If callback is missing or not callable
        """
        if callback is None or not callable(callback):
            record_usage_error("invalid_callback")
            raise InvalidCallbackError(callback)

        if not self._has_issue:
            return None
        if _accepts_argument(callback):
            return callback(self._issue)
        return callback()

    def raises(self, error: type[Exception] = GuardIssueError) -> "Guard":
        """
        Raise if a check failed; otherwise return the guard.

        Args:
            error: Exception class to raise. GuardIssueError subclasses
                also receive the issue and the guarded value.

        Raises:
            GuardIssueError: (or `error`) with the catalog message for the issue
        """
        if not self._has_issue:
            return self
        if issubclass(error, GuardIssueError):
            raise error(self.message, issue=self._issue, value=self._value)
        raise error(self.message)

    def __repr__(self) -> str:
        if self._has_issue:
            return f"Guard(value={self._value!r}, issue={issue_key(self._issue)!r})"
        return f"Guard(value={self._value!r})"


def guard(
    value: Any,
    *,
    messages: Optional[Mapping["Issue | str", str]] = None,
    registry: Optional[CheckRegistry] = None,
) -> Guard:
    """Create a Guard for `value`: guard(name).exists().is_string().passes()."""
    return Guard(value, messages=messages, registry=registry)
