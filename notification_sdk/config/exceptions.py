"""Configuration errors raised while building a client."""

from typing import List, Optional

from pydantic import ValidationError


class ConfigurationError(Exception):
    """Client configuration is missing or invalid.

    Collects every problem found in one pass so the message lists them all,
    followed by hints on how to fix them.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.errors = errors or []
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]

        if self.errors:
            parts.append("\nValidation Errors:")
            for i, error in enumerate(self.errors, 1):
                parts.append(f"  {i}. {error}")

        if self.suggestions:
            parts.append("\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"  - {suggestion}")

        return "\n".join(parts)

    @classmethod
    def from_validation_error(
        cls,
        error: ValidationError,
        message: str = "Client configuration is invalid",
        suggestions: Optional[List[str]] = None,
    ) -> "ConfigurationError":
        """Turn pydantic's error list into readable lines."""
        errors = []
        for item in error.errors():
            field_path = " -> ".join(str(loc) for loc in item["loc"]) or "config"
            if item["type"] == "missing":
                errors.append(f"Missing required setting: {field_path}")
            else:
                # pydantic prefixes messages raised in validators with "Value error, "
                errors.append(f"{field_path}: {item['msg'].removeprefix('Value error, ')}")

        return cls(
            message,
            errors=errors,
            suggestions=suggestions
            or [
                "Set NOTIFICATION_SERVICE_URL to the service's base URL",
                "Durations accept seconds (5, 0.5) or units (500ms, 5s, 1m, PT5S)",
            ],
        )
