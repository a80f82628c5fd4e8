"""Configuration management for the notification client."""

from .duration import DurationParseError, parse_duration
from .environment import ENV_VARIABLES, load_environment_config, read_environment
from .exceptions import ConfigurationError
from .loader import load_config
from .models import ClientConfig, LogFormat, LoggingConfig, LogLevel

__all__ = [
    # Loaders
    "load_config",
    "load_environment_config",
    "read_environment",
    "ENV_VARIABLES",
    # Models
    "ClientConfig",
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    # Durations
    "parse_duration",
    "DurationParseError",
    # Exceptions
    "ConfigurationError",
]
