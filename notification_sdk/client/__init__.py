"""Client facade and factory."""

from .factory import create_client
from .service import NotificationServiceClient

__all__ = ["NotificationServiceClient", "create_client"]
