# ============================================================================
# CONFIGURATION AND LOGGING TESTS
# ============================================================================
# STATUS: Tests - Defaults, environment overrides, structured logging
# PURPOSE: Verify HealthOptions and the logging formatters
# CREATED: 17 OCT 2026
# ============================================================================
"""
Configuration and Logging Tests

Run with:
    pytest tests/test_config.py -v
"""

import json
import logging
import pytest

from core.config import HealthOptions, get_defaults, get_options, reset_defaults
from core.logging import (
    HumanFormatter,
    StructuredFormatter,
    get_current_context,
    log_context,
)
from health.executor import HealthCheckExecutor
from health.groups import HealthGroup


@pytest.fixture(autouse=True)
def fresh_defaults():
    reset_defaults()
    yield
    reset_defaults()


class TestHealthOptions:

    def test_defaults(self):
        options = HealthOptions()
        assert options.enabled is True
        assert options.path == "/health"
        assert options.liveness_path == "/health/live"
        assert options.readiness_path == "/health/ready"
        assert options.startup_path == "/health/started"

    def test_default_check_timeout_is_one_second(self, monkeypatch):
        monkeypatch.delenv("HEALTH_CHECK_TIMEOUT", raising=False)
        assert HealthOptions().check_timeout_seconds == 1.0
        assert HealthOptions.from_env().check_timeout_seconds == 1.0
        assert HealthCheckExecutor().default_timeout == 1.0

    def test_path_for_group(self):
        options = HealthOptions()
        assert options.path_for(HealthGroup.ALL) == "/health"
        assert options.path_for(HealthGroup.STARTUP) == "/health/started"
        assert options.path_for("readiness") == "/health/ready"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("HEALTH_ENABLED", "false")
        monkeypatch.setenv("HEALTH_PATH", "/status")
        monkeypatch.setenv("HEALTH_LIVENESS_PATH", "/status/live")
        monkeypatch.setenv("HEALTH_CHECK_TIMEOUT", "2.5")
        monkeypatch.setenv("HEALTH_OVERALL_TIMEOUT", "30")
        options = HealthOptions.from_env()
        assert options.enabled is False
        assert options.path == "/status"
        assert options.liveness_path == "/status/live"
        assert options.readiness_path == "/health/ready"
        assert options.check_timeout_seconds == 2.5
        assert options.overall_timeout_seconds == 30.0

    def test_timeout_can_be_disabled(self, monkeypatch):
        monkeypatch.setenv("HEALTH_CHECK_TIMEOUT", "none")
        assert HealthOptions.from_env().check_timeout_seconds is None

    def test_get_options_cached(self, monkeypatch):
        monkeypatch.setenv("HEALTH_READINESS_PATH", "/ready")
        assert get_options().readiness_path == "/ready"
        monkeypatch.setenv("HEALTH_READINESS_PATH", "/other")
        assert get_options() is get_defaults().health
        assert get_options().readiness_path == "/ready"


class TestLogging:

    def _record(self, message="hello"):
        return logging.LogRecord(
            name="health.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg=message,
            args=(),
            exc_info=None,
        )

    def test_context_nesting(self):
        with log_context(group="liveness"):
            with log_context(check_name="db"):
                context = get_current_context()
                assert context.group == "liveness"
                assert context.check_name == "db"
            assert get_current_context().check_name is None
        assert get_current_context().group is None

    def test_structured_formatter_includes_context(self):
        with log_context(group="readiness", check_name="db"):
            output = json.loads(StructuredFormatter().format(self._record()))
        assert output["message"] == "hello"
        assert output["level"] == "INFO"
        assert output["context"] == {"group": "readiness", "check_name": "db"}

    def test_human_formatter(self):
        with log_context(group="startup"):
            output = HumanFormatter().format(self._record("ready"))
        assert "[group=startup]" in output
        assert output.endswith("health.test [group=startup]: ready")
