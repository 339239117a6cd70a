"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods forward event names and context
- error() flattens exceptions into error_type / error_message
- bind() returns an adapter with bound context
- Real JSON output (level filtering, ISO timestamp, redaction)
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from hostpanel.infrastructure.logging import ConsoleAdapter
from hostpanel.infrastructure.logging.console_adapter import REDACTED, redact_secrets


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter forwarding with mocked structlog."""

    @pytest.fixture
    def structlog_logger(self):
        with patch("hostpanel.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger
            yield mock_logger

    def test_info_logs_message_with_context(self, structlog_logger):
        adapter = ConsoleAdapter()

        adapter.info("identity_stored", user_id=7, user_type="user")

        structlog_logger.info.assert_called_once_with(
            "identity_stored", user_id=7, user_type="user"
        )

    def test_warning_logs_message_with_context(self, structlog_logger):
        adapter = ConsoleAdapter()

        adapter.warning("sign_in_blocked", client_ip="203.0.113.7")

        structlog_logger.warning.assert_called_once_with(
            "sign_in_blocked", client_ip="203.0.113.7"
        )

    def test_error_flattens_exception(self, structlog_logger):
        """Test exception details become structured fields."""
        adapter = ConsoleAdapter()

        adapter.error("daemon_connection_failed", error=ConnectionRefusedError("refused"), port=9876)

        structlog_logger.error.assert_called_once_with(
            "daemon_connection_failed",
            port=9876,
            error_type="ConnectionRefusedError",
            error_message="refused",
        )

    def test_bind_returns_new_adapter(self, structlog_logger):
        bound_logger = MagicMock()
        structlog_logger.bind.return_value = bound_logger
        adapter = ConsoleAdapter()

        bound = adapter.bind(request_id="abc")
        bound.debug("auth_listener_registered")

        assert bound is not adapter
        structlog_logger.bind.assert_called_once_with(request_id="abc")
        bound_logger.debug.assert_called_once_with("auth_listener_registered")


@pytest.mark.unit
class TestConsoleAdapterOutput:
    """Test real structlog output."""

    def test_json_output_filters_by_level(self, capsys):
        """Test JSON lines carry event, level and timestamp."""
        # Arrange
        adapter = ConsoleAdapter(use_json=True, level="WARNING")

        # Act
        adapter.info("not_shown")
        adapter.warning("sign_in_throttled", client_ip="203.0.113.7")

        # Assert
        lines = [line for line in capsys.readouterr().out.splitlines() if line]
        assert len(lines) == 1
        record = json.loads(lines[0])
        assert record["event"] == "sign_in_throttled"
        assert record["level"] == "warning"
        assert record["client_ip"] == "203.0.113.7"
        assert "timestamp" in record

    def test_credentials_are_redacted(self, capsys):
        adapter = ConsoleAdapter(use_json=True, level="DEBUG")

        adapter.debug("password_check", username="bob", password="s3cret")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["password"] == "<redacted>"
        assert record["username"] == "bob"


@pytest.mark.unit
class TestRedactSecrets:
    """Test the redaction processor on its own."""

    def test_masks_only_secret_keys(self):
        event_dict = {"event": "x", "password_hash": "$2b$...", "user_id": 3}

        result = redact_secrets(None, "info", event_dict)

        assert result == {"event": "x", "password_hash": REDACTED, "user_id": 3}
