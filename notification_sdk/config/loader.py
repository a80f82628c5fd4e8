"""YAML configuration loader.

Expected file layout (every key optional except client.base_url, which may
also come from NOTIFICATION_SERVICE_URL):

    client:
      base_url: https://notifications.example.com
      api_key: secret
      connect_timeout: 5s
      read_timeout: 30s
      max_attempts: 3
      initial_retry_delay: 1s
      max_retry_delay: 10s
      logging_enabled: false
    logging:
      level: INFO
      format: key-value
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml
from pydantic import ValidationError

from .environment import read_environment
from .exceptions import ConfigurationError
from .models import ClientConfig, LoggingConfig


def load_config(
    config_path: Path, environ: Optional[Mapping[str, str]] = None
) -> Tuple[ClientConfig, LoggingConfig]:
    """
    Load client and logging settings from a YAML file.

    Environment variables override values from the file, so a deployed
    API key never needs to live in the file.

    Args:
        config_path: Path to the YAML file
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Tuple of (ClientConfig, LoggingConfig)

    Raises:
        ConfigurationError: If the file is missing, unparsable or invalid
    """
    raw = _read_yaml(Path(config_path))

    client_section = raw.get("client") or {}
    logging_section = raw.get("logging") or {}
    if not isinstance(client_section, dict) or not isinstance(logging_section, dict):
        raise ConfigurationError(
            "Configuration sections 'client' and 'logging' must be mappings",
            suggestions=["Check indentation under 'client:' and 'logging:'"],
        )

    settings = {**client_section, **read_environment(environ)}

    try:
        client_config = ClientConfig.model_validate(settings)
        logging_config = LoggingConfig.model_validate(logging_section)
    except ValidationError as e:
        raise ConfigurationError.from_validation_error(
            e,
            message=f"Configuration validation failed: {config_path}",
        ) from e

    return client_config, logging_config


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(
            f"Configuration file not found: {config_path}",
            suggestions=[
                "Copy config.example.yaml to config.yaml",
                "Or configure the client through NOTIFICATION_* environment variables",
            ],
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse YAML configuration: {e}",
            suggestions=[
                "Check YAML syntax in your config file",
                "Ensure proper indentation (use spaces, not tabs)",
            ],
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration file: {e}",
            suggestions=[f"Ensure {config_path} is readable"],
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping, got {type(data).__name__}"
        )
    return data
