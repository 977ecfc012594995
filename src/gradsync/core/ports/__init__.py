"""
Ports - Abstract interfaces for external dependencies.

Ports define the contracts that adapters must implement.
This enables dependency inversion and easy testing.
"""

from .record_store import (
    RecordStorePort,
    RecordStoreError,
    TransientStoreError,
    StoreUnavailableError,
    StoreTimeoutError,
    RecordRejectedError,
    RecordNotFoundError,
    StoreServerError,
    MalformedResponseError,
)
from .presenter import PresenterPort, NullPresenter, NotificationKind
from .config_provider import (
    ConfigProviderPort,
    AppConfig,
    StoreConfig,
    SyncConfig,
    ServerConfig,
)

__all__ = [
    "RecordStorePort",
    "RecordStoreError",
    "TransientStoreError",
    "StoreUnavailableError",
    "StoreTimeoutError",
    "RecordRejectedError",
    "RecordNotFoundError",
    "StoreServerError",
    "MalformedResponseError",
    "PresenterPort",
    "NullPresenter",
    "NotificationKind",
    "ConfigProviderPort",
    "AppConfig",
    "StoreConfig",
    "SyncConfig",
    "ServerConfig",
]
