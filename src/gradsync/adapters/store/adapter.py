"""
HTTP Record Store - Implements RecordStorePort over the REST API.

Blocking client calls run in a worker thread so the event loop stays
free. Each call has an overall deadline; when it expires the call is
abandoned and reported as a StoreTimeoutError.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

from ...core.domain.entities import GraduateRecord
from ...core.exceptions import MalformedResponseError, StoreTimeoutError
from ...core.ports.config_provider import StoreConfig
from ...core.ports.record_store import RecordStorePort
from .client import StoreApiClient


class HttpRecordStore(RecordStorePort):
    """
    REST implementation of the RecordStorePort.

    Translates between domain entities and the store's JSON.
    """

    def __init__(
        self,
        config: StoreConfig,
        client: Optional[StoreApiClient] = None,
    ):
        """
        Initialize the store adapter.

        Args:
            config: Store configuration
            client: Optional pre-built API client
        """
        self.config = config
        self.logger = logging.getLogger("HttpRecordStore")
        self._client = client or StoreApiClient(
            base_url=config.api_url,
            timeout=config.timeout,
        )

    @property
    def name(self) -> str:
        return "HTTP"

    # -------------------------------------------------------------------------
    # RecordStorePort Implementation
    # -------------------------------------------------------------------------

    async def list_graduates(self) -> list[GraduateRecord]:
        data = await self._call(self._client.list_graduates)
        if not isinstance(data, list):
            raise MalformedResponseError(
                f"Expected a list of graduates, got {type(data).__name__}"
            )
        return [GraduateRecord.from_dict(item) for item in data]

    async def create_graduate(self, payload: dict[str, Any]) -> GraduateRecord:
        data = await self._call(self._client.create_graduate, payload)
        return GraduateRecord.from_dict(data)

    async def delete_graduate(self, record_id: str) -> str:
        data = await self._call(self._client.delete_graduate, record_id)
        if isinstance(data, dict):
            return str(data.get("message", ""))
        return ""

    def close(self) -> None:
        self._client.close()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def _call(self, func: Callable[..., Any], *args: Any) -> Any:
        """Run a blocking client call under the configured deadline."""
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(func, *args),
                timeout=self.config.timeout,
            )
        except asyncio.TimeoutError as e:
            self.logger.warning(f"{func.__name__} exceeded {self.config.timeout:g}s, abandoning")
            raise StoreTimeoutError(
                f"Request exceeded deadline of {self.config.timeout:g}s", cause=e
            )
