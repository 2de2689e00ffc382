"""
Unit tests for structlog configuration.
"""

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest
import structlog
from structlog.testing import capture_logs

import value_guard
from value_guard import guard
from value_guard.logging_config import add_app_context, build_processors, configure_logging


@pytest.fixture
def restore_logging():
    """Restore root logger and structlog defaults after a test."""
    root_logger = logging.getLogger()
    handlers, level = list(root_logger.handlers), root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()


class TestLoggingConfig:
    """Test suite for configure_logging()."""

    def test_add_app_context(self):
        event = add_app_context(None, "info", {"event": "x"})

        assert event["app"] == "value-guard"

    def test_production_processors_format_exceptions(self):
        assert structlog.processors.format_exc_info in build_processors(is_production=True)
        assert structlog.processors.format_exc_info not in build_processors(is_production=False)

    def test_configure_sets_root_level(self, restore_logging):
        configure_logging(log_level="DEBUG", environment="production")

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1

    def test_unknown_level_defaults_to_info(self, restore_logging):
        configure_logging(log_level="chatty", environment="development")

        assert logging.getLogger().level == logging.INFO

    def test_failed_check_is_logged(self):
        """Test the chain emits a debug event when an issue is recorded."""
        with capture_logs() as logs:
            guard("x").is_integer().is_string()

        failed = [entry for entry in logs if entry["event"] == "Guard check failed"]
        skipped = [entry for entry in logs if entry["event"] == "Guard check skipped"]
        assert failed == [
            {"event": "Guard check failed", "check": "is_integer", "issue": "is-integer", "log_level": "debug"}
        ]
        assert skipped[0]["check"] == "is_string"


class TestLibraryLoggers:
    """Test suite for the library's stdlib-backed loggers."""

    def test_unconfigured_interpreter_prints_nothing(self):
        """Test a host that never configures logging sees no guard output."""
        src_dir = Path(value_guard.__file__).resolve().parents[1]
        env = {**os.environ, "PYTHONPATH": os.pathsep.join(filter(None, [str(src_dir), os.environ.get("PYTHONPATH")]))}

        result = subprocess.run(
            [
                sys.executable,
                "-c",
                "from value_guard import guard; guard('x').is_integer().is_string().passes()",
            ],
            capture_output=True,
            text=True,
            env=env,
            check=True,
        )

        assert result.stdout == ""
        assert result.stderr == ""

    def test_events_reach_stdlib_logger_when_enabled(self, caplog):
        """Test the host's stdlib level decides whether debug events are emitted."""
        with caplog.at_level(logging.DEBUG, logger="value_guard.chain"):
            guard("x").is_integer()

        records = [record for record in caplog.records if record.name == "value_guard.chain"]
        assert len(records) == 1
        assert "Guard check failed" in records[0].getMessage()

    def test_debug_events_filtered_at_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="value_guard.chain"):
            guard("x").is_integer()

        assert [record for record in caplog.records if record.name == "value_guard.chain"] == []
