"""
Check registry: the name -> predicate table consulted by the dispatcher.

A predicate takes the guarded value plus the check's arguments and returns
True when the value passes. It may raise CheckFailed to record an issue
other than the check's own.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from ..issues import Issue

Predicate = Callable[..., bool]


@dataclass(frozen=True)
class Check:
    """A named check and the issue it records on failure."""

    name: str
    issue: "Issue | str"
    predicate: Predicate

    def __call__(self, value: Any, *args: Any, **kwargs: Any) -> bool:
        return bool(self.predicate(value, *args, **kwargs))


class CheckRegistry:
    """
    Registry of checks available to guard chains.

    The built-in catalog lives in `default_registry`. To add checks without
    touching the built-ins, extend a copy:

        >>> registry = default_registry.extend()
        >>> @registry.register("is_even", "is-even")
        ... def is_even(value):
        ...     return isinstance(value, int) and value % 2 == 0
        >>> Guard(4, registry=registry).is_even().passes()
        True
    """

    def __init__(self, checks: Optional[dict[str, Check]] = None) -> None:
        self._checks: dict[str, Check] = dict(checks or {})

    def add(self, name: str, issue: "Issue | str", predicate: Predicate) -> Check:
        """
        Register a predicate under a check name.

        Re-registering a name replaces the previous check.
        """
        check = Check(name=name, issue=issue, predicate=predicate)
        self._checks[name] = check
        return check

    def register(
        self, name: str, issue: "Issue | str", aliases: tuple[str, ...] = ()
    ) -> Callable[[Predicate], Predicate]:
        """
        Decorator form of add().

        Args:
            name: Method name the check is exposed under on a guard
            issue: Identifier recorded when the predicate fails
            aliases: Extra method names bound to the same check

        Returns:
            Decorator that registers and returns the predicate unchanged
        """

        def decorator(predicate: Predicate) -> Predicate:
            for check_name in (name, *aliases):
                self.add(check_name, issue, predicate)
            return predicate

        return decorator

    def get(self, name: str) -> Optional[Check]:
        return self._checks.get(name)

    def extend(self) -> "CheckRegistry":
        """Return an independent copy that new checks can be added to."""
        return CheckRegistry(self._checks)

    def names(self) -> list[str]:
        return sorted(self._checks)

    def __contains__(self, name: object) -> bool:
        return name in self._checks

    def __iter__(self) -> Iterator[Check]:
        return iter(self._checks.values())

    def __len__(self) -> int:
        return len(self._checks)


# Populated by the check modules imported in value_guard.checks
default_registry = CheckRegistry()
