"""
Adapters - Concrete implementations of ports.

This module contains implementations for:
- Record Store: REST over HTTP
- Config: Environment variables
"""

from .store import HttpRecordStore, StoreApiClient
from .config import EnvironmentConfigProvider

__all__ = [
    "HttpRecordStore",
    "StoreApiClient",
    "EnvironmentConfigProvider",
]
