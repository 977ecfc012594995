"""
Retry Policy - Which failures are retried, how often, and how long to wait.
"""

from dataclasses import dataclass

from ...core.exceptions import RecordStoreError


@dataclass(frozen=True)
class RetryPolicy:
    """
    Exponential backoff for transient store failures.

    With the defaults a refresh makes at most 4 calls, waiting 1, 2 and 4
    time units between them.
    """

    max_retries: int = 3
    base_delay: float = 1.0
    multiplier: float = 2.0

    def __post_init__(self):
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.base_delay < 0:
            raise ValueError("base_delay must be >= 0")

    def is_retryable(self, error: Exception) -> bool:
        """Only transient store errors are retried automatically."""
        return isinstance(error, RecordStoreError) and error.transient

    def delay_for(self, retry_number: int) -> float:
        """
        Delay before the given retry (1-based).

        Args:
            retry_number: 1 for the first retry, 2 for the second, ...
        """
        if retry_number < 1:
            raise ValueError("retry_number is 1-based")
        return self.base_delay * (self.multiplier ** (retry_number - 1))

    def should_retry(self, error: Exception, retries_done: int) -> bool:
        """Whether another attempt is allowed after this failure."""
        return self.is_retryable(error) and retries_done < self.max_retries
