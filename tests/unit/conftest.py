"""Unit test fixtures (mocks and stubs).

Provides callbacks and DNS stubs for testing without network access.
"""

import socket
from unittest.mock import Mock, patch

import pytest


@pytest.fixture
def callback():
    """Mock failure callback; called with the issue identifier."""
    return Mock(return_value="handled")


@pytest.fixture
def resolving_dns():
    """Patch DNS so every host resolves."""
    with patch(
        "value_guard.checks.formats.socket.getaddrinfo",
        return_value=[(socket.AF_INET, socket.SOCK_STREAM, 6, "", ("93.184.216.34", 0))],
    ) as mock_lookup:
        yield mock_lookup


@pytest.fixture
def failing_dns():
    """Patch DNS so every lookup fails."""
    with patch(
        "value_guard.checks.formats.socket.getaddrinfo",
        side_effect=socket.gaierror(socket.EAI_NONAME, "Name or service not known"),
    ) as mock_lookup:
        yield mock_lookup
