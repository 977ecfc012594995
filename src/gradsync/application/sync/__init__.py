"""
Sync Module - Keeps the client's view of the Record Store fresh.
"""

from .controller import SyncController, GATE_ERROR_MESSAGE
from .results import OperationResult
from .retry import RetryPolicy
from .state import SyncState

__all__ = [
    "SyncController",
    "GATE_ERROR_MESSAGE",
    "OperationResult",
    "RetryPolicy",
    "SyncState",
]
