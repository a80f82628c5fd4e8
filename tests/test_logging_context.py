"""Tests for logging context propagation."""

import threading

import pytest

from notification_sdk.logging.context import (
    clear_log_context,
    get_log_context,
    log_context,
    pop_log_context,
    push_log_context,
)


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


def test_empty_context():
    """Test that context starts empty."""
    assert get_log_context() == {}


def test_push_and_pop():
    """Test pushing fields and restoring with the token."""
    token = push_log_context(operation="send", channel="EMAIL")
    assert get_log_context() == {"operation": "send", "channel": "EMAIL"}
    pop_log_context(token)
    assert get_log_context() == {}


def test_none_values_dropped():
    """Test that optional fields left unset do not appear in the context."""
    token = push_log_context(operation="send", notification_id=None)
    assert get_log_context() == {"operation": "send"}
    pop_log_context(token)


def test_nested_context():
    """Test nested pushes and pops in reverse order."""
    token1 = push_log_context(operation="send_bulk")
    token2 = push_log_context(batch_size=3)
    assert get_log_context() == {"operation": "send_bulk", "batch_size": 3}

    pop_log_context(token2)
    assert get_log_context() == {"operation": "send_bulk"}

    pop_log_context(token1)
    assert get_log_context() == {}


def test_context_override():
    """Test that pushing the same key overwrites previous value."""
    token1 = push_log_context(operation="send")
    token2 = push_log_context(operation="get_status")
    assert get_log_context() == {"operation": "get_status"}

    pop_log_context(token2)
    assert get_log_context() == {"operation": "send"}
    pop_log_context(token1)


def test_get_returns_copy():
    """Test that mutating the returned dict does not alter the context."""
    token = push_log_context(operation="send")
    get_log_context()["operation"] = "tampered"
    assert get_log_context() == {"operation": "send"}
    pop_log_context(token)


def test_context_manager():
    """Test log_context restores the previous state on exit."""
    with log_context(operation="send", channel="SMS"):
        assert get_log_context() == {"operation": "send", "channel": "SMS"}
        with log_context(notification_type="SMS_VERIFICATION"):
            assert get_log_context()["notification_type"] == "SMS_VERIFICATION"
        assert "notification_type" not in get_log_context()

    assert get_log_context() == {}


def test_context_manager_restores_on_exception():
    """Test the context is restored when the block raises."""
    with pytest.raises(RuntimeError):
        with log_context(operation="send"):
            raise RuntimeError("boom")

    assert get_log_context() == {}


def test_threads_do_not_share_context():
    """Test that concurrent dispatches see only their own fields."""
    seen = {}
    barrier = threading.Barrier(2)

    def worker(name):
        with log_context(operation=name):
            barrier.wait(timeout=5)
            seen[name] = get_log_context()

    threads = [threading.Thread(target=worker, args=(n,)) for n in ("send", "send_bulk")]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert seen == {"send": {"operation": "send"}, "send_bulk": {"operation": "send_bulk"}}
