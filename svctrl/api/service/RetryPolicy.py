"""Polling policy for confirming a service went down."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RetryPolicy:
    """How many times to read ``supervise/stat`` and how long to wait between reads."""

    max_attempts: int = 5
    interval_secs: float = 0.5

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.interval_secs < 0:
            raise ValueError(f"interval_secs must not be negative, got {self.interval_secs}")


DEFAULT_RETRY_POLICY = RetryPolicy()
