"""Exponential backoff policy for transient transport failures.

Backoff calculation (initial_delay=1.0, multiplier=2.0, max_delay=10.0):
    after attempt 1: 1 second   (1.0 * 2^0)
    after attempt 2: 2 seconds  (1.0 * 2^1)
    after attempt 3: 4 seconds  (1.0 * 2^2)
    after attempt 5: 10 seconds (16.0 capped)

Only transient failures are retried: 5xx and 408 responses, timeouts and
connection failures. Every other 4xx is structural and resending the same
body cannot help.
"""

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from notification_sdk.transport.exceptions import (
    TransportConnectionError,
    TransportError,
    TransportHTTPError,
    TransportTimeoutError,
)

if TYPE_CHECKING:
    from notification_sdk.config.models import ClientConfig

REQUEST_TIMEOUT_STATUS = 408


def is_transient(error: BaseException) -> bool:
    """True when resending the identical request may succeed."""
    if isinstance(error, (TransportTimeoutError, TransportConnectionError)):
        return True
    if isinstance(error, TransportHTTPError):
        return error.status_code >= 500 or error.status_code == REQUEST_TIMEOUT_STATUS
    return False


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded exponential backoff.

    Attributes:
        max_attempts: Total attempts including the first one (>= 1)
        initial_delay: Delay in seconds after the first failed attempt
        max_delay: Upper bound on any single delay, in seconds
        multiplier: Growth factor applied per attempt
        jitter: Fraction (0..1) of random spread applied to each delay
    """

    max_attempts: int = 3
    initial_delay: float = 1.0
    max_delay: float = 10.0
    multiplier: float = 2.0
    jitter: float = 0.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got: {self.max_attempts}")
        if self.initial_delay < 0 or self.max_delay < 0:
            raise ValueError("Retry delays cannot be negative")
        if self.multiplier < 1.0:
            raise ValueError(f"multiplier must be >= 1.0, got: {self.multiplier}")
        if not 0.0 <= self.jitter <= 1.0:
            raise ValueError(f"jitter must be between 0 and 1, got: {self.jitter}")

    @classmethod
    def from_config(cls, config: "ClientConfig") -> "RetryPolicy":
        return cls(
            max_attempts=config.max_attempts,
            initial_delay=config.initial_retry_delay,
            max_delay=config.max_retry_delay,
        )

    @classmethod
    def no_retry(cls) -> "RetryPolicy":
        """Policy allowing a single attempt."""
        return cls(max_attempts=1)

    def should_retry(self, attempt: int, error: BaseException) -> bool:
        """Decide whether to try again after ``attempt`` (1-based) failed with ``error``."""
        if attempt >= self.max_attempts:
            return False
        return isinstance(error, TransportError) and is_transient(error)

    def delay_for(self, attempt: int) -> float:
        """Seconds to wait after failed attempt ``attempt`` (1-based)."""
        delay = min(self.initial_delay * (self.multiplier ** (max(attempt, 1) - 1)), self.max_delay)
        if self.jitter:
            spread = delay * self.jitter
            delay = min(max(delay + random.uniform(-spread, spread), 0.0), self.max_delay)
        return delay
