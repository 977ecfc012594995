"""
Record Store Adapter - Implementation of RecordStorePort over HTTP.

- StoreApiClient: Blocking requests-based client for the REST contract
- HttpRecordStore: Async port implementation with per-call deadlines
"""

from .adapter import HttpRecordStore
from .client import StoreApiClient

__all__ = [
    "HttpRecordStore",
    "StoreApiClient",
]
