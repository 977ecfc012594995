"""
Application Layer - Session logic on top of the ports.

This layer contains:
- sync/: Sync controller, state, retry policy and results
- gate: Secret-based visibility gate
"""

from .gate import GateMachine, GateState
from .sync import (
    SyncController,
    SyncState,
    RetryPolicy,
    OperationResult,
)

__all__ = [
    "GateMachine",
    "GateState",
    "SyncController",
    "SyncState",
    "RetryPolicy",
    "OperationResult",
]
