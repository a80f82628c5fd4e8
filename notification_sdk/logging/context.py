"""Per-dispatch logging context.

Fields pushed here (operation, notification type, channel, batch size, ...)
are stamped onto every record emitted while the scope is active. Storage is a
ContextVar, so concurrent dispatches on different threads never see each
other's fields.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional


_dispatch_context: ContextVar[Dict[str, Any]] = ContextVar(
    "notification_log_context", default={}
)


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields active in the current scope."""
    return _dispatch_context.get().copy()


def push_log_context(**fields: Any) -> Token:
    """Merge fields into the current context.

    Fields whose value is None are dropped so optional request attributes
    do not clutter the log line.

    Returns:
        Token for restoring the previous state with pop_log_context()
    """
    merged = dict(_dispatch_context.get())
    merged.update({key: value for key, value in fields.items() if value is not None})
    return _dispatch_context.set(merged)


def pop_log_context(token: Token) -> None:
    """Restore the context captured by ``token``."""
    _dispatch_context.reset(token)


def clear_log_context() -> None:
    """Drop every field. Mostly useful in tests."""
    _dispatch_context.set({})


class log_context:
    """Context manager scoping log fields to a block.

    Example:
        >>> with log_context(operation="send", channel="EMAIL"):
        ...     logger.info("Sending notification")
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = push_log_context(**self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            pop_log_context(self.token)
            self.token = None
        return False
