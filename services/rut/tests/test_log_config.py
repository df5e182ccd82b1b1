"""
Tests for structured logging configuration.
"""

import pytest
import structlog
from unittest.mock import Mock, patch

from services.rut.helpers.errors import LeadingZeroError
from services.rut.log_config import configure_logging, log_command
from services.rut.settings import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch, tmp_path):
    """Isolate every test from the process environment and cached settings."""
    monkeypatch.chdir(tmp_path)
    for name in ["RUT_LOG_LEVEL", "RUT_LOG_FORMAT", "RUT_ENVIRONMENT"]:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _renderer(mock_configure):
    """Return the final processor passed to structlog.configure."""
    return mock_configure.call_args.kwargs["processors"][-1]


class TestConfigureLogging:
    """Test renderer selection."""

    @patch("services.rut.log_config.structlog.configure")
    def test_text_by_default(self, mock_configure):
        """Test that development uses the console renderer."""
        configure_logging()

        assert isinstance(_renderer(mock_configure), structlog.dev.ConsoleRenderer)

    @patch("services.rut.log_config.structlog.configure")
    def test_production_uses_json(self, mock_configure, monkeypatch):
        """Test that production switches to JSON even with a text setting."""
        monkeypatch.setenv("RUT_ENVIRONMENT", "production")
        monkeypatch.setenv("RUT_LOG_FORMAT", "text")

        configure_logging()

        assert isinstance(_renderer(mock_configure), structlog.processors.JSONRenderer)

    @patch("services.rut.log_config.structlog.configure")
    def test_explicit_format_wins_in_production(self, mock_configure, monkeypatch):
        """Test that an explicit log format overrides the production default."""
        monkeypatch.setenv("RUT_ENVIRONMENT", "production")

        configure_logging(log_format="text")

        assert isinstance(_renderer(mock_configure), structlog.dev.ConsoleRenderer)


class TestLogCommand:
    """Test command outcome logging."""

    def test_success_logged_at_debug(self):
        """Test that completed commands log at debug level."""
        logger = Mock()

        log_command(logger, "dv", "12345678", result="5")

        logger.debug.assert_called_once_with(
            "RUT command completed", command="dv", value="12345678", result="5"
        )

    def test_rejection_logged_below_default_level(self):
        """Test that rejected input is not logged at error level."""
        logger = Mock()

        log_command(logger, "dv", "0123", error=LeadingZeroError())

        logger.error.assert_not_called()
        logger.warning.assert_not_called()
        logger.info.assert_called_once()
        assert logger.info.call_args.kwargs["error_type"] == "LeadingZeroError"
