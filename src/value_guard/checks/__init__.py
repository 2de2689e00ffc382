"""
Check catalog for guard chains.

- registry.py: Check / CheckRegistry and the shared default_registry
- coercion.py: text, number and date interpretation of loose values
- presence.py: exists, is_true, is_false
- kinds.py: is_class, is_array, is_integer, is_string, is_numeric, is_alpha
- dates.py: is_date, before, after
- comparison.py: numeric relations, between, equal, is_in, not_in, length
- formats.py: is_url, is_active_url, is_ip, is_email_address, is_json

Importing this package registers every built-in check on default_registry.
"""

from . import comparison, dates, formats, kinds, presence  # noqa: F401
from .registry import Check, CheckRegistry, default_registry

__all__ = [
    "Check",
    "CheckRegistry",
    "default_registry",
]
