"""
Unit tests for format checks: URL, active URL, IP, email, JSON.

DNS is patched (see tests/unit/conftest.py); no test touches the network.
"""

import pytest

from tests.fixtures import INVALID_EMAILS, INVALID_URLS, VALID_EMAILS, VALID_URLS
from value_guard import Issue, guard


class TestIsURL:
    """Test suite for is_url()."""

    @pytest.mark.parametrize("value", VALID_URLS)
    def test_valid_urls(self, value):
        assert guard(value).is_url().passes() is True

    @pytest.mark.parametrize("value", INVALID_URLS)
    def test_invalid_urls(self, value):
        assert guard(value).is_url().issue == Issue.IS_URL


class TestIsActiveURL:
    """Test suite for is_active_url()."""

    def test_resolving_host(self, resolving_dns):
        chain = guard("https://example.com/page").is_active_url()

        assert chain.passes() is True
        resolving_dns.assert_called_once_with("example.com", None)

    def test_unresolvable_host(self, failing_dns):
        chain = guard("https://no-such-host.invalid").is_active_url()

        assert chain.issue == Issue.IS_ACTIVE_URL
        failing_dns.assert_called_once()

    def test_invalid_url_skips_lookup(self, resolving_dns):
        """Test that malformed URLs fail without a DNS query."""
        chain = guard("not a url").is_active_url()

        assert chain.issue == Issue.IS_ACTIVE_URL
        resolving_dns.assert_not_called()

    def test_lookup_skipped_after_earlier_failure(self, resolving_dns):
        """Test short-circuiting avoids the DNS query entirely."""
        guard(5).is_string().is_active_url()

        resolving_dns.assert_not_called()


class TestIsIP:
    """Test suite for is_ip()."""

    @pytest.mark.parametrize("value", ["127.0.0.1", "10.0.0.255", "::1", "2001:db8::8a2e:370:7334", "fe80::1"])
    def test_valid_addresses(self, value):
        assert guard(value).is_ip().passes() is True

    @pytest.mark.parametrize("value", ["", "256.0.0.1", "1.2.3", "1.2.3.4.5", "gggg::1", "example.com", 2130706433, None])
    def test_invalid_addresses(self, value):
        """Test malformed strings and integers are not IP addresses."""
        assert guard(value).is_ip().issue == Issue.IS_IP


class TestIsEmailAddress:
    """Test suite for is_email_address()."""

    @pytest.mark.parametrize("value", VALID_EMAILS)
    def test_valid_emails(self, value):
        assert guard(value).is_email_address().passes() is True

    @pytest.mark.parametrize("value", INVALID_EMAILS)
    def test_invalid_emails(self, value):
        assert guard(value).is_email_address().issue == Issue.IS_EMAIL


class TestIsJSON:
    """Test suite for is_json()."""

    @pytest.mark.parametrize("value", ['{"a": 1}', "[1, 2]", '"text"', "42", "null", b'{"a": true}'])
    def test_valid_json(self, value):
        assert guard(value).is_json().passes() is True

    @pytest.mark.parametrize("value", ["", "{", "{'a': 1}", "undefined", b"\xff\xfe{", {"a": 1}, None, 42])
    def test_invalid_json(self, value):
        """Test malformed text and non-text values fail."""
        assert guard(value).is_json().issue == Issue.IS_JSON
