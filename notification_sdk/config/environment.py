"""Environment variable loading for the client configuration."""

import os
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from .exceptions import ConfigurationError
from .models import ClientConfig

# Environment variable -> ClientConfig field
ENV_VARIABLES = {
    "NOTIFICATION_SERVICE_URL": "base_url",
    "NOTIFICATION_API_KEY": "api_key",
    "NOTIFICATION_API_PREFIX": "api_prefix",
    "NOTIFICATION_CONNECT_TIMEOUT": "connect_timeout",
    "NOTIFICATION_READ_TIMEOUT": "read_timeout",
    "NOTIFICATION_MAX_RETRIES": "max_attempts",
    "NOTIFICATION_RETRY_DELAY": "initial_retry_delay",
    "NOTIFICATION_MAX_RETRY_DELAY": "max_retry_delay",
    "NOTIFICATION_LOGGING_ENABLED": "logging_enabled",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def read_environment(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Collect client settings present in the environment.

    Only variables that are set are returned, so the result can be layered
    over file or keyword settings.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Dictionary keyed by ClientConfig field name

    Raises:
        ConfigurationError: If a numeric or boolean variable cannot be parsed
    """
    environ = os.environ if environ is None else environ
    settings: Dict[str, Any] = {}
    errors = []

    for variable, field in ENV_VARIABLES.items():
        raw = environ.get(variable)
        if raw is None:
            continue

        if field == "max_attempts":
            try:
                settings[field] = int(raw.strip())
            except ValueError:
                errors.append(f"Invalid {variable}: '{raw}'. Must be a whole number.")
        elif field == "logging_enabled":
            lowered = raw.strip().lower()
            if lowered in _TRUE_VALUES:
                settings[field] = True
            elif lowered in _FALSE_VALUES:
                settings[field] = False
            else:
                errors.append(f"Invalid {variable}: '{raw}'. Use true/false.")
        else:
            settings[field] = raw

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=["Copy .env.example to .env and fill in your settings"],
        )

    return settings


def load_environment_config(
    environ: Optional[Mapping[str, str]] = None, **overrides: Any
) -> ClientConfig:
    """
    Build a ClientConfig from environment variables.

    Required environment variables:
    - NOTIFICATION_SERVICE_URL: Base URL of the notification service

    Optional environment variables:
    - NOTIFICATION_API_KEY: API key sent as X-API-Key
    - NOTIFICATION_API_PREFIX: API path prefix (default: /api/v1)
    - NOTIFICATION_CONNECT_TIMEOUT: Connect timeout (default: 5s)
    - NOTIFICATION_READ_TIMEOUT: Read timeout (default: 30s)
    - NOTIFICATION_MAX_RETRIES: Attempts per write operation (default: 3)
    - NOTIFICATION_RETRY_DELAY: Initial backoff delay (default: 1s)
    - NOTIFICATION_MAX_RETRY_DELAY: Maximum backoff delay (default: 10s)
    - NOTIFICATION_LOGGING_ENABLED: Log HTTP traffic (default: false)

    Keyword overrides win over the environment.

    Raises:
        ConfigurationError: If required variables are missing or invalid
    """
    settings = {**read_environment(environ), **overrides}

    if not settings.get("base_url"):
        raise ConfigurationError(
            "Missing required environment variable: NOTIFICATION_SERVICE_URL",
            suggestions=[
                "Copy .env.example to .env and fill in your settings",
                "Or pass base_url explicitly when creating the client",
            ],
        )

    try:
        return ClientConfig.model_validate(settings)
    except ValidationError as e:
        raise ConfigurationError.from_validation_error(
            e, message="Environment variable validation failed"
        ) from e
