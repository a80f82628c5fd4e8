"""Client configuration schema using Pydantic."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .duration import DurationParseError, parse_duration


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class ClientConfig(BaseModel):
    """Settings fixed at client construction and read-only afterwards.

    Durations are stored in seconds; any value accepted by ``parse_duration``
    may be supplied ("500ms", "5s", "PT30S", 2.5).
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(..., description="Root URL of the notification service")
    api_key: Optional[str] = Field(None, description="Sent as X-API-Key on every request")
    api_prefix: str = Field("/api/v1", description="Path prefix of the service API")
    connect_timeout: float = Field(5.0, gt=0, description="Connection timeout (seconds)")
    read_timeout: float = Field(30.0, gt=0, description="Read timeout (seconds)")
    max_attempts: int = Field(
        3, ge=1, le=10, description="Total attempts per write operation, first one included"
    )
    initial_retry_delay: float = Field(1.0, ge=0, description="Backoff after the first failure (seconds)")
    max_retry_delay: float = Field(10.0, ge=0, description="Cap on any single backoff (seconds)")
    logging_enabled: bool = Field(False, description="Log every HTTP request/response at INFO")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        stripped = v.strip().rstrip("/")
        if not stripped:
            raise ValueError("Base URL is required")
        if not stripped.startswith(("http://", "https://")):
            raise ValueError(f"Base URL must start with http:// or https://, got: '{v}'")
        return stripped

    @field_validator("api_key")
    @classmethod
    def blank_api_key_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        stripped = v.strip()
        return stripped or None

    @field_validator(
        "connect_timeout", "read_timeout", "initial_retry_delay", "max_retry_delay", mode="before"
    )
    @classmethod
    def parse_durations(cls, v: Any) -> Any:
        try:
            return parse_duration(v)
        except DurationParseError as e:
            raise ValueError(str(e)) from e

    @model_validator(mode="after")
    def validate_backoff_bounds(self):
        if self.initial_retry_delay > self.max_retry_delay:
            raise ValueError(
                f"initial_retry_delay ({self.initial_retry_delay}s) cannot exceed "
                f"max_retry_delay ({self.max_retry_delay}s)"
            )
        return self

    def redacted(self) -> dict:
        """Settings safe to log: the API key is masked."""
        data = self.model_dump()
        if data.get("api_key"):
            data["api_key"] = "***"
        return data


class LoggingConfig(BaseModel):
    """Logging settings used by the command line entry point."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(LogFormat.KEY_VALUE, description="Log output format")

    model_config = ConfigDict(use_enum_values=True)
