"""Prometheus metrics for value-guard.

Counters live in the default prometheus_client registry; host applications
expose them with whatever exporter they already run.
"""

from prometheus_client import Counter

from ..config import settings

# === Check Metrics ===

guard_issues_total = Counter(
    "guard_issues_total",
    "Total issues recorded on guard chains by issue identifier",
    ["issue"],
)
"""
Issues counter by identifier.

Labels:
- issue: exists, is-integer, is-date, less-than, ... (or a custom identifier)

Only the first failing check of a chain is counted; skipped checks are not.
"""

guard_usage_errors_total = Counter(
    "guard_usage_errors_total",
    "Total guard API usage errors by error type",
    ["error_type"],
)
"""
Usage errors counter.

Labels:
- error_type: invalid_callback

Unknown check names are not counted: hasattr() on a guard reaches the same
code path as a mistyped check.
"""


def record_issue(issue: str) -> None:
    """Count a recorded issue if metrics are enabled."""
    if settings.METRICS_ENABLED:
        guard_issues_total.labels(issue=issue).inc()


def record_usage_error(error_type: str) -> None:
    """Count a usage error if metrics are enabled."""
    if settings.METRICS_ENABLED:
        guard_usage_errors_total.labels(error_type=error_type).inc()
