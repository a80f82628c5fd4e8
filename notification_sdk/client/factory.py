"""Factory for building a ready-to-use client."""

from typing import Any, Callable, Optional

from notification_sdk.config.environment import load_environment_config
from notification_sdk.config.models import ClientConfig
from notification_sdk.dispatch.dispatcher import Dispatcher
from notification_sdk.dispatch.retry import RetryPolicy
from notification_sdk.logging import get_logger
from notification_sdk.transport.base import BaseTransport
from notification_sdk.transport.http import HttpTransport

from .service import NotificationServiceClient

logger = get_logger(__name__, component="client")


def create_client(
    config: Optional[ClientConfig] = None,
    transport: Optional[BaseTransport] = None,
    sleep: Optional[Callable[[float], None]] = None,
    **settings: Any,
) -> NotificationServiceClient:
    """Build a NotificationServiceClient.

    Settings come from, in order of precedence: an explicit ``config``;
    keyword ``settings`` layered over NOTIFICATION_* environment variables.

    Args:
        config: Complete configuration; other settings are ignored when given
        transport: Transport to use instead of an HttpTransport built from config
        sleep: Backoff wait function (tests pass a no-op)
        **settings: ClientConfig fields, e.g. base_url="https://...", api_key="..."

    Returns:
        Configured client

    Raises:
        ConfigurationError: If the configuration is missing or invalid

    Example:
        >>> client = create_client(base_url="https://api.example.com", api_key="key", max_attempts=5)
    """
    if config is None:
        # Explicit settings still pick up env values they do not mention
        config = load_environment_config(**settings)

    if transport is None:
        transport = HttpTransport(
            base_url=config.base_url,
            api_key=config.api_key,
            api_prefix=config.api_prefix,
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
            log_http=config.logging_enabled,
        )

    logger.debug(
        "Creating notification client",
        extra={"event": "client.creating", **config.redacted()},
    )

    dispatcher_kwargs = {"sleep": sleep} if sleep is not None else {}
    dispatcher = Dispatcher(transport, RetryPolicy.from_config(config), **dispatcher_kwargs)
    return NotificationServiceClient(dispatcher, config)
