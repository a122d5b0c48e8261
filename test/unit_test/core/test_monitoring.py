"""Unit tests for the Logfire monitoring helpers."""

from unittest.mock import MagicMock, patch

import pytest

from hotel_voice_assistant.core import monitoring


@pytest.fixture
def logfire_ready():
    with patch.object(monitoring, "_logfire_ready", True), patch.object(monitoring, "logfire") as mock_logfire:
        yield mock_logfire


class TestInitializeLogfire:
    def test_disabled_does_not_configure(self):
        with patch.object(monitoring, "LOGFIRE_ENABLED", False), patch.object(monitoring, "logfire") as mock_logfire:
            monitoring.initialize_logfire()

        mock_logfire.configure.assert_not_called()
        assert monitoring.is_logfire_ready() is False

    def test_enabled_without_token_warns(self):
        with patch.object(monitoring, "LOGFIRE_ENABLED", True), patch.object(
            monitoring, "LOGFIRE_TOKEN", ""
        ), patch.object(monitoring, "logfire") as mock_logfire, patch.object(monitoring, "logger") as mock_logger:
            monitoring.initialize_logfire()

        mock_logfire.configure.assert_not_called()
        mock_logger.warning.assert_called_once()

    def test_enabled_instruments_app(self):
        app = MagicMock()
        with patch.object(monitoring, "LOGFIRE_ENABLED", True), patch.object(
            monitoring, "LOGFIRE_TOKEN", "token"
        ), patch.object(monitoring, "logfire") as mock_logfire, patch.object(monitoring, "_logfire_ready", False):
            monitoring.initialize_logfire(app)

            assert monitoring.is_logfire_ready() is True

        mock_logfire.configure.assert_called_once()
        mock_logfire.instrument_sqlalchemy.assert_called_once()
        mock_logfire.instrument_httpx.assert_called_once()
        mock_logfire.instrument_fastapi.assert_called_once_with(app=app)

    def test_configure_failure_leaves_logfire_off(self):
        with patch.object(monitoring, "LOGFIRE_ENABLED", True), patch.object(
            monitoring, "LOGFIRE_TOKEN", "token"
        ), patch.object(monitoring, "logfire") as mock_logfire, patch.object(monitoring, "_logfire_ready", False):
            mock_logfire.configure.side_effect = RuntimeError("boom")
            monitoring.initialize_logfire()

            assert monitoring.is_logfire_ready() is False
        mock_logfire.instrument_sqlalchemy.assert_not_called()


class TestLogHelpers:
    def test_helpers_only_debug_log_when_not_ready(self):
        with patch.object(monitoring, "_logfire_ready", False), patch.object(
            monitoring, "logfire"
        ) as mock_logfire, patch.object(monitoring, "logger") as mock_logger:
            monitoring.log_api_request("GET", "/api/health", 200, 1.5)

        mock_logfire.info.assert_not_called()
        mock_logger.debug.assert_called_once()

    def test_log_api_request(self, logfire_ready):
        monitoring.log_api_request("GET", "/api/health", 200, 1.5)

        logfire_ready.info.assert_called_once_with(
            "API request completed", method="GET", path="/api/health", status_code=200, duration_ms=1.5
        )

    def test_log_order_event(self, logfire_ready):
        monitoring.log_order_event("order_created", 7, "201", "pending")

        kwargs = logfire_ready.info.call_args.kwargs
        assert kwargs == {"event": "order_created", "order_id": 7, "room_number": "201", "status": "pending"}

    def test_log_realtime_event_uses_debug(self, logfire_ready):
        monitoring.log_realtime_event("data_changed", "staff_requests", 3)

        logfire_ready.debug.assert_called_once()

    def test_log_error_includes_context(self, logfire_ready):
        monitoring.log_error("NotFoundError", "Order 1 not found", {"path": "/api/orders/1"})

        logfire_ready.error.assert_called_once_with("NotFoundError: Order 1 not found", path="/api/orders/1")

    def test_logfire_failure_is_swallowed(self, logfire_ready):
        logfire_ready.info.side_effect = RuntimeError("exporter down")

        monitoring.log_api_request("GET", "/", 200, 1.0)
