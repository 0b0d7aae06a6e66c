"""
Retry policy for calls to the generation service.
"""

import enum
from dataclasses import dataclass

from .errors import AnalysisError, TransientServiceError

DEFAULT_MAX_RETRIES = 3
DEFAULT_BASE_DELAY = 2.0


class AttemptState(enum.Enum):
    ATTEMPTING = "attempting"
    RETRY_WAIT = "retry_wait"
    SUCCESS = "success"
    FAILED = "failed"


def backoff_delay(attempt: int, base_delay: float = DEFAULT_BASE_DELAY) -> float:
    """
    Seconds to wait after a failed attempt.

    Attempt 1 waits base_delay, and each later attempt doubles it
    (2s, 4s, 8s with the default base).
    """
    if attempt < 1:
        raise ValueError(f"attempt must be >= 1, got {attempt}")
    return base_delay * 2 ** (attempt - 1)


@dataclass(frozen=True)
class RetryPolicy:
    max_retries: int = DEFAULT_MAX_RETRIES
    base_delay: float = DEFAULT_BASE_DELAY

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def should_retry(self, error: AnalysisError, attempt: int) -> bool:
        """Only transient failures are retried, and only within budget."""
        return isinstance(error, TransientServiceError) and attempt <= self.max_retries

    def delay_for(self, attempt: int) -> float:
        return backoff_delay(attempt, self.base_delay)

    def next_state(self, error: AnalysisError, attempt: int) -> AttemptState:
        if self.should_retry(error, attempt):
            return AttemptState.RETRY_WAIT
        return AttemptState.FAILED
