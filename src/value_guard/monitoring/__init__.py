"""Metrics instrumentation for value-guard.

Exports Prometheus counters for recorded issues and API misuse.
"""

from value_guard.monitoring.metrics import (
    guard_issues_total,
    guard_usage_errors_total,
    record_issue,
    record_usage_error,
)

__all__ = [
    "guard_issues_total",
    "guard_usage_errors_total",
    "record_issue",
    "record_usage_error",
]
