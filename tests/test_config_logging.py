"""Tests for settings and structured logging setup."""
import logging
import uuid

import structlog

from credit_engine.config import Settings
from credit_engine.logging import (
    add_context_vars,
    clear_request_context,
    configure_logging,
    generate_request_id,
    get_logger,
    set_request_context,
)


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CREDIT_ENGINE_LOG_LEVEL", raising=False)
        config = Settings(_env_file=None)

        assert config.service_name == "credit-engine"
        assert config.log_level == "INFO"
        assert config.metrics_enabled is True

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("CREDIT_ENGINE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CREDIT_ENGINE_METRICS_ENABLED", "false")

        config = Settings(_env_file=None)

        assert config.log_level == "DEBUG"
        assert config.metrics_enabled is False


class TestRequestContext:
    """Test the context processor."""

    def teardown_method(self):
        clear_request_context()

    def test_request_id_added(self):
        set_request_context("req-123")

        event_dict = add_context_vars(None, "info", {"event": "credit_calculated"})

        assert event_dict["request_id"] == "req-123"
        assert event_dict["service"] == "credit-engine"

    def test_cleared_context_omits_request_id(self):
        set_request_context("req-123")
        clear_request_context()

        event_dict = add_context_vars(None, "info", {"event": "credit_calculated"})

        assert "request_id" not in event_dict

    def test_generate_request_id(self):
        request_id = generate_request_id()
        assert str(uuid.UUID(request_id)) == request_id


class TestConfigureLogging:
    """Test structlog configuration."""

    def setup_method(self):
        self.root_level = logging.getLogger().level

    def teardown_method(self):
        structlog.reset_defaults()
        logging.getLogger().setLevel(self.root_level)

    def test_configures_structlog(self):
        configure_logging("debug")

        assert structlog.is_configured()
        assert logging.getLogger().level == logging.DEBUG
        assert get_logger("credit_engine.test") is not None
