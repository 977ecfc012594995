"""
Operation Results - Result-or-error values returned by the controller.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class OperationResult:
    """Outcome of a controller operation."""

    success: bool = True
    data: Any = None
    error: Optional[str] = None
    retryable: bool = False
    attempts: int = 0

    @classmethod
    def ok(cls, data: Any = None, attempts: int = 0) -> "OperationResult":
        """Create a successful result."""
        return cls(success=True, data=data, attempts=attempts)

    @classmethod
    def fail(
        cls,
        error: str,
        retryable: bool = False,
        attempts: int = 0,
    ) -> "OperationResult":
        """Create a failed result."""
        return cls(success=False, error=error, retryable=retryable, attempts=attempts)
