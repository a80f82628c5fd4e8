"""Tests for logging configuration and formatters."""

import json
import logging

import pytest

from notification_sdk.logging import ComponentLoggerAdapter, get_logger
from notification_sdk.logging.config import (
    SERVICE_NAME,
    ContextualFilter,
    JSONFormatter,
    KeyValueFormatter,
    configure_logging,
)
from notification_sdk.logging.context import clear_log_context, log_context


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def logger():
    """Create a test logger."""
    test_logger = logging.getLogger("test_logger")
    test_logger.setLevel(logging.DEBUG)
    test_logger.handlers.clear()

    yield test_logger

    test_logger.handlers.clear()


@pytest.fixture
def restore_root_logger():
    """Restore root handlers and level replaced by configure_logging."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(logger, message="Test message", extra=None, level=logging.INFO):
    return logger.makeRecord("test", level, "test.py", 1, message, (), None, extra=extra)


# ============================================================================
# JSONFormatter
# ============================================================================


def test_json_formatter_basic(logger):
    """Test JSONFormatter produces valid JSON with mandatory fields."""
    log_obj = json.loads(JSONFormatter().format(_record(logger)))

    assert log_obj["level"] == "INFO"
    assert log_obj["message"] == "Test message"
    assert log_obj["logger"] == "test"
    assert log_obj["timestamp"].endswith("Z")


def test_json_formatter_with_extra_fields(logger):
    """Test JSONFormatter includes extra fields with their JSON types."""
    record = _record(
        logger, extra={"event": "dispatch.retry", "attempt": 2, "delay_seconds": 1.0, "server_side": True}
    )
    log_obj = json.loads(JSONFormatter().format(record))

    assert log_obj["event"] == "dispatch.retry"
    assert log_obj["attempt"] == 2
    assert log_obj["delay_seconds"] == 1.0
    assert log_obj["server_side"] is True


def test_json_formatter_redacts_credentials(logger):
    """Test credential-bearing fields are masked."""
    record = _record(logger, extra={"api_key": "secret-key", "token": "fcm-token", "user_id": "u-1"})
    log_obj = json.loads(JSONFormatter().format(record))

    assert log_obj["api_key"] == "***"
    assert log_obj["token"] == "***"
    assert log_obj["user_id"] == "u-1"


def test_json_formatter_stringifies_unknown_types(logger):
    """Test values that are not JSON native are rendered with str()."""
    record = _record(logger, extra={"error": KeyError("missing")})
    log_obj = json.loads(JSONFormatter().format(record))
    assert log_obj["error"] == "'missing'"


def test_json_formatter_includes_exception(logger):
    """Test exc_info is rendered as a traceback string."""
    try:
        raise ValueError("boom")
    except ValueError:
        import sys

        record = logger.makeRecord("test", logging.ERROR, "test.py", 1, "failed", (), sys.exc_info())

    log_obj = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in log_obj["exc_info"]


# ============================================================================
# KeyValueFormatter
# ============================================================================


def test_key_value_formatter(logger):
    """Test key=value pairs are appended in sorted order."""
    formatter = KeyValueFormatter("%(levelname)s %(message)s")
    record = _record(logger, extra={"path": "/notifications", "attempt": 1})

    assert formatter.format(record) == "INFO Test message attempt=1 path=/notifications"


def test_key_value_formatter_quotes_and_nulls(logger):
    """Test values with spaces are quoted and None/bool are normalised."""
    formatter = KeyValueFormatter("%(message)s")
    record = _record(logger, extra={"error": "HTTP 503: down", "status_code": None, "retry": False})

    output = formatter.format(record)
    assert 'error="HTTP 503: down"' in output
    assert "status_code=null" in output
    assert "retry=false" in output


def test_key_value_formatter_redacts_and_skips_labels(logger):
    """Test api_key is masked and service/environment labels are not repeated."""
    formatter = KeyValueFormatter("%(message)s")
    record = _record(logger, extra={"api_key": "secret", "service": SERVICE_NAME, "environment": "test"})

    assert formatter.format(record) == "Test message api_key=***"


# ============================================================================
# ContextualFilter
# ============================================================================


def test_contextual_filter_adds_labels_and_context(logger):
    """Test labels and active context fields are stamped on the record."""
    record = _record(logger)
    with log_context(operation="send", channel="EMAIL"):
        assert ContextualFilter(environment="staging").filter(record) is True

    assert record.service == SERVICE_NAME
    assert record.environment == "staging"
    assert record.operation == "send"
    assert record.channel == "EMAIL"


def test_contextual_filter_does_not_override_explicit_extra(logger):
    """Test a field passed through extra wins over the context."""
    record = _record(logger, extra={"operation": "explicit"})
    with log_context(operation="from-context"):
        ContextualFilter().filter(record)

    assert record.operation == "explicit"


# ============================================================================
# configure_logging
# ============================================================================


def test_configure_logging_json(restore_root_logger, capsys):
    """Test configure_logging installs a single JSON handler."""
    configure_logging(level="DEBUG", format_type="json", environment="test")

    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JSONFormatter)

    logging.getLogger("notification_sdk.test").info("hello", extra={"event": "test.event"})
    lines = [json.loads(line) for line in capsys.readouterr().out.strip().splitlines()]
    hello = [line for line in lines if line["message"] == "hello"][0]
    assert hello["event"] == "test.event"
    assert hello["environment"] == "test"
    assert hello["service"] == SERVICE_NAME


def test_configure_logging_key_value(restore_root_logger):
    """Test key-value is the default format."""
    configure_logging(level="warning")

    root = restore_root_logger
    assert root.level == logging.WARNING
    assert isinstance(root.handlers[0].formatter, KeyValueFormatter)


def test_configure_logging_replaces_handlers(restore_root_logger):
    """Test repeated calls do not stack handlers."""
    configure_logging()
    configure_logging()
    assert len(restore_root_logger.handlers) == 1


def test_configure_logging_invalid_level(restore_root_logger):
    with pytest.raises(ValueError, match="Invalid log level"):
        configure_logging(level="LOUD")


def test_configure_logging_invalid_format(restore_root_logger):
    with pytest.raises(ValueError, match="Invalid log format"):
        configure_logging(format_type="xml")


# ============================================================================
# get_logger
# ============================================================================


def test_get_logger_without_component():
    assert isinstance(get_logger("notification_sdk.test"), logging.Logger)


def test_get_logger_with_component(caplog):
    """Test the component label is injected and per-call extra is merged."""
    adapter = get_logger("notification_sdk.test", component="dispatch")
    assert isinstance(adapter, ComponentLoggerAdapter)

    with caplog.at_level(logging.INFO, logger="notification_sdk.test"):
        adapter.info("sent", extra={"event": "dispatch.succeeded"})

    record = caplog.records[-1]
    assert record.component == "dispatch"
    assert record.event == "dispatch.succeeded"
