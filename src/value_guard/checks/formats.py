"""
Format checks: URL, active URL, IP address, email address, JSON.

All format checks require text input; non-string values fail.
is_active_url is the only check that performs I/O (a DNS lookup with the
resolver's own timeout).
"""

import ipaddress
import json
import re
import socket
from typing import Any, Optional
from urllib.parse import urlsplit

from ..issues import Issue
from ..logging_config import get_logger
from .registry import default_registry

logger = get_logger(__name__)

SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")

EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,}$"
)


def url_host(value: Any) -> Optional[str]:
    """
    Host of a syntactically valid URL.

    Returns:
        The lower-cased host name, or None if value is not a valid URL
    """
    if not isinstance(value, str) or not value or any(char.isspace() for char in value):
        return None
    try:
        parsed = urlsplit(value)
        # Accessing the port validates it
        parsed.port
    except ValueError:
        return None
    if not parsed.scheme or not SCHEME_PATTERN.match(parsed.scheme):
        return None
    return parsed.hostname or None


@default_registry.register("is_url", Issue.IS_URL)
def is_url(value: Any) -> bool:
    """Pass for URLs with a scheme and a host, e.g. https://example.com/path."""
    return url_host(value) is not None


@default_registry.register("is_active_url", Issue.IS_ACTIVE_URL)
def is_active_url(value: Any) -> bool:
    """Pass if value is a valid URL whose host resolves in DNS."""
    host = url_host(value)
    if host is None:
        return False
    try:
        socket.getaddrinfo(host, None)
    except (OSError, UnicodeError) as e:
        logger.debug("DNS lookup failed", host=host, error=str(e))
        return False
    return True


@default_registry.register("is_ip", Issue.IS_IP)
def is_ip(value: Any) -> bool:
    """Pass for IPv4 ("10.0.0.1") or IPv6 ("::1") address strings."""
    if not isinstance(value, str):
        return False
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


@default_registry.register("is_email_address", Issue.IS_EMAIL)
def is_email_address(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None


@default_registry.register("is_json", Issue.IS_JSON)
def is_json(value: Any) -> bool:
    """Pass if value is JSON text (str, bytes or bytearray)."""
    if not isinstance(value, (str, bytes, bytearray)):
        return False
    try:
        json.loads(value)
    except ValueError:
        return False
    return True
