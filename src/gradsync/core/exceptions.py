"""
Exceptions - Centralized exception hierarchy.

Store errors are split by how the sync controller reacts to them:
- TransientStoreError: retried automatically with backoff
- RecordRejectedError / StoreServerError: surfaced once, never retried
- MalformedResponseError: terminal failure of the current operation
"""

from typing import Optional


class GradsyncError(Exception):
    """Base exception for all gradsync errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class RecordStoreError(GradsyncError):
    """Base exception for Record Store failures."""

    transient = False

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause=cause)
        self.status_code = status_code


class TransientStoreError(RecordStoreError):
    """The store could not be reached in time; worth retrying."""

    transient = True


class StoreUnavailableError(TransientStoreError):
    """Network unreachable or connection refused."""


class StoreTimeoutError(TransientStoreError):
    """The request exceeded its deadline and was abandoned."""


class RecordRejectedError(RecordStoreError):
    """The store answered with a 4xx and (usually) a message."""


class RecordNotFoundError(RecordRejectedError):
    """The record id is unknown to the store."""

    def __init__(self, message: str, record_id: Optional[str] = None, **kwargs):
        super().__init__(message, status_code=404, **kwargs)
        self.record_id = record_id


class StoreServerError(RecordStoreError):
    """The store answered with a 5xx."""


class MalformedResponseError(RecordStoreError):
    """The store answered with something that is not the expected JSON."""


class GateTransitionError(GradsyncError):
    """A gate event was fired from a state that does not accept it."""


class ConfigError(GradsyncError):
    """Configuration is missing or invalid."""
