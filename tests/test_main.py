"""Unit tests for the command line entry point.

Tests the main() function including:
- CLI argument parsing
- Configuration loading with priority (CLI > env > config)
- Subcommand dispatch to the client
- Exit code handling
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from notification_sdk.config.exceptions import ConfigurationError
from notification_sdk.config.models import ClientConfig
from notification_sdk.domain.enums import NotificationType
from notification_sdk.domain.responses import NotificationResponse
from notification_sdk.exceptions import AuthenticationError
from notification_sdk.main import (
    EXIT_CLIENT_ERROR,
    EXIT_CONFIG_ERROR,
    EXIT_OK,
    build_parser,
    load_runtime_config,
    main,
    parse_variables,
    run_command,
)


@pytest.fixture
def env(monkeypatch):
    """Minimal environment for loading config without a file."""
    monkeypatch.setenv("NOTIFICATION_SERVICE_URL", "https://notifications.example.com")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    return monkeypatch


@pytest.fixture
def mock_client():
    """Client double usable as a context manager."""
    client = MagicMock()
    client.__enter__.return_value = client
    client.__exit__.return_value = False
    client.get_status.return_value = NotificationResponse(id="n-1")
    return client


@pytest.fixture
def no_logging_setup():
    with patch("notification_sdk.main.configure_logging") as mock_configure:
        yield mock_configure


class TestParseVariables:
    """Test suite for --var parsing."""

    def test_pairs(self):
        assert parse_variables(["name=Ada", "code=a=b"]) == {"name": "Ada", "code": "a=b"}

    def test_none(self):
        assert parse_variables(None) == {}

    @pytest.mark.parametrize("pair", ["novalue", "=value"])
    def test_invalid(self, pair):
        with pytest.raises(Exception, match="expected key=value"):
            parse_variables([pair])


class TestLoadRuntimeConfig:
    """Test suite for load_runtime_config helper."""

    def test_environment_without_file(self, env):
        client_config, logging_config = load_runtime_config(None, None)

        assert client_config.base_url == "https://notifications.example.com"
        assert logging_config.level == "INFO"

    def test_log_level_priority(self, env, tmp_path):
        """CLI > env > config."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "client:\n  base_url: https://file.example.com\nlogging:\n  level: ERROR\n  format: json\n"
        )

        _, logging_config = load_runtime_config(config_file, None)
        assert logging_config.level == "ERROR"

        env.setenv("LOG_LEVEL", "warning")
        _, logging_config = load_runtime_config(config_file, None)
        assert logging_config.level == "WARNING"
        assert logging_config.format == "json"

        _, logging_config = load_runtime_config(config_file, "DEBUG")
        assert logging_config.level == "DEBUG"

    def test_invalid_env_log_level(self, env):
        env.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigurationError, match="Invalid log level"):
            load_runtime_config(None, None)


class TestRunCommand:
    """Test suite for subcommand dispatch."""

    def _args(self, *argv):
        return build_parser().parse_args(list(argv))

    def test_send_email_by_type(self, mock_client):
        args = self._args(
            "send-email", "user@example.com", "--subject", "Sale", "--template", "promo",
            "--var", "code=SPRING", "--type", "PROMOTIONAL_OFFER",
        )
        run_command(mock_client, args)

        mock_client.send_typed_email.assert_called_once_with(
            NotificationType.PROMOTIONAL_OFFER,
            "user@example.com",
            "Sale",
            "promo",
            {"code": "SPRING"},
            priority=None,
        )

    def test_send_email_from_account(self, mock_client):
        args = self._args(
            "send-email", "user@example.com", "--subject", "Hi", "--template", "t", "--account", "support",
            "--priority", "HIGH",
        )
        run_command(mock_client, args)

        mock_client.send_email_from.assert_called_once_with(
            "support",
            "user@example.com",
            "Hi",
            "t",
            {},
            priority="HIGH",
            notification_type=NotificationType.EMAIL_VERIFICATION,
        )

    def test_send_sms(self, mock_client):
        run_command(mock_client, self._args("send-sms", "+12015550123", "--template", "otp"))
        mock_client.send_sms.assert_called_once_with("+12015550123", "otp", {}, priority=None)

    def test_send_push(self, mock_client):
        run_command(
            mock_client,
            self._args("send-push", "user-1", "--title", "T", "--body", "B", "--template", "p"),
        )
        mock_client.send_push_to_user.assert_called_once_with("user-1", "T", "B", "p", {}, image_url=None)

    def test_status(self, mock_client):
        run_command(mock_client, self._args("status", "notif-1"))
        mock_client.get_status.assert_called_once_with("notif-1")

    def test_register_device(self, mock_client):
        run_command(mock_client, self._args("register-device", "u-1", "tok", "d-1", "--platform", "IOS"))
        mock_client.register_device.assert_called_once_with("u-1", "tok", "IOS", "d-1", app_version=None)

    def test_unregister_device_returns_nothing(self, mock_client):
        assert run_command(mock_client, self._args("unregister-device", "u-1", "d-1")) is None
        mock_client.unregister_device.assert_called_once_with("u-1", "d-1")


class TestMain:
    """Test suite for main()."""

    def test_success_prints_response(self, env, mock_client, no_logging_setup, capsys):
        mock_client.get_status.return_value = NotificationResponse(id="notif-1", status="SENT")

        with patch("notification_sdk.main.create_client", return_value=mock_client) as mock_create:
            exit_code = main(["status", "notif-1"])

        assert exit_code == EXIT_OK
        assert json.loads(capsys.readouterr().out) == {"id": "notif-1", "status": "SENT"}
        config = mock_create.call_args.kwargs["config"]
        assert isinstance(config, ClientConfig)
        no_logging_setup.assert_called_once_with(level="INFO", format_type="key-value", environment="local")

    def test_printed_json_uses_wire_names(self, env, mock_client, no_logging_setup, capsys):
        mock_client.get_status.return_value = NotificationResponse(id="notif-1", retry_count=1)

        with patch("notification_sdk.main.create_client", return_value=mock_client):
            main(["status", "notif-1"])

        assert json.loads(capsys.readouterr().out) == {"id": "notif-1", "retryCount": 1}

    def test_no_output_for_empty_result(self, env, mock_client, no_logging_setup, capsys):
        with patch("notification_sdk.main.create_client", return_value=mock_client):
            exit_code = main(["unregister-device", "u-1", "d-1"])

        assert exit_code == EXIT_OK
        assert capsys.readouterr().out == ""

    def test_client_error_exit_code(self, env, mock_client, no_logging_setup, capsys):
        mock_client.get_status.side_effect = AuthenticationError()

        with patch("notification_sdk.main.create_client", return_value=mock_client):
            exit_code = main(["status", "notif-1"])

        assert exit_code == EXIT_CLIENT_ERROR
        assert "Invalid or missing API key" in capsys.readouterr().err

    def test_configuration_error_exit_code(self, monkeypatch, no_logging_setup, capsys):
        monkeypatch.delenv("NOTIFICATION_SERVICE_URL", raising=False)

        exit_code = main(["status", "notif-1"])

        assert exit_code == EXIT_CONFIG_ERROR
        assert "NOTIFICATION_SERVICE_URL" in capsys.readouterr().err

    def test_missing_config_file(self, env, no_logging_setup, tmp_path):
        assert main(["--config", str(tmp_path / "missing.yaml"), "status", "n-1"]) == EXIT_CONFIG_ERROR

    def test_bad_variable_exit_code(self, env, mock_client, no_logging_setup):
        with patch("notification_sdk.main.create_client", return_value=mock_client):
            exit_code = main(["send-sms", "+12015550123", "--template", "otp", "--var", "broken"])

        assert exit_code == EXIT_CONFIG_ERROR

    def test_log_level_flag(self, env, mock_client, no_logging_setup):
        with patch("notification_sdk.main.create_client", return_value=mock_client):
            exit_code = main(["--log-level", "DEBUG", "status", "n-1"])

        assert exit_code == EXIT_OK
        assert no_logging_setup.call_args.kwargs["level"] == "DEBUG"

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])
