"""
Store API Client - Low-level HTTP client for the Record Store REST API.

This handles the raw HTTP communication with the store.
The HttpRecordStore uses this to implement the RecordStorePort.
"""

import logging
from typing import Any, Optional

import requests

from ...core.exceptions import (
    RecordStoreError,
    StoreUnavailableError,
    StoreTimeoutError,
    RecordRejectedError,
    RecordNotFoundError,
    StoreServerError,
    MalformedResponseError,
)


class StoreApiClient:
    """
    Low-level Record Store REST API client.

    Blocking; every request carries the configured timeout. Errors are
    translated into the RecordStoreError taxonomy.
    """

    RESOURCE = "graduates"

    def __init__(
        self,
        base_url: str,
        timeout: float = 8.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root (e.g., http://localhost:5000/api)
            timeout: Per-request timeout in seconds
            session: Optional pre-configured requests session
        """
        self.api_url = base_url.rstrip("/")
        self.timeout = timeout
        self.logger = logging.getLogger("StoreApiClient")

        self.headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

        self._session = session or requests.Session()
        self._session.headers.update(self.headers)

    # -------------------------------------------------------------------------
    # Core Request Methods
    # -------------------------------------------------------------------------

    def request(
        self,
        method: str,
        endpoint: str,
        **kwargs
    ) -> Any:
        """
        Make a request to the store API.

        Args:
            method: HTTP method (GET, POST, DELETE)
            endpoint: API endpoint (e.g., 'graduates/abc123')
            **kwargs: Additional arguments for requests

        Returns:
            Decoded JSON response

        Raises:
            RecordStoreError: On API or network errors
        """
        url = f"{self.api_url}/{endpoint}"
        kwargs.setdefault("timeout", self.timeout)

        self.logger.debug(f"{method} {url}")
        try:
            response = self._session.request(method, url, **kwargs)
        # Timeout first: ConnectTimeout is also a ConnectionError
        except requests.exceptions.Timeout as e:
            raise StoreTimeoutError(f"Request timed out: {e}", cause=e)
        except requests.exceptions.ConnectionError as e:
            raise StoreUnavailableError(f"Connection failed: {e}", cause=e)
        except requests.exceptions.RequestException as e:
            raise RecordStoreError(f"Request failed: {e}", cause=e)

        return self._handle_response(response, endpoint)

    def get(self, endpoint: str, **kwargs) -> Any:
        """GET request."""
        return self.request("GET", endpoint, **kwargs)

    def post(self, endpoint: str, json: dict = None, **kwargs) -> Any:
        """POST request."""
        return self.request("POST", endpoint, json=json, **kwargs)

    def delete(self, endpoint: str, **kwargs) -> Any:
        """DELETE request."""
        return self.request("DELETE", endpoint, **kwargs)

    # -------------------------------------------------------------------------
    # Response Handling
    # -------------------------------------------------------------------------

    def _handle_response(
        self,
        response: requests.Response,
        endpoint: str
    ) -> Any:
        """Handle API response and errors."""
        status = response.status_code

        if response.ok:
            if not response.text:
                return {}
            try:
                return response.json()
            except ValueError as e:
                raise MalformedResponseError(
                    f"Invalid JSON from {endpoint}", status_code=status, cause=e
                )

        message = self._error_message(response)

        if status == 404:
            record_id = endpoint.rsplit("/", 1)[-1] if "/" in endpoint else None
            raise RecordNotFoundError(message or f"Not found: {endpoint}", record_id=record_id)

        if 400 <= status < 500:
            raise RecordRejectedError(
                message or f"Request rejected ({status})", status_code=status
            )

        raise StoreServerError(
            message or f"API error {status}", status_code=status
        )

    def _error_message(self, response: requests.Response) -> str:
        """Extract the store's {message} from an error body, if any."""
        try:
            body = response.json()
        except ValueError:
            return response.text[:500] if response.text else ""
        if isinstance(body, dict):
            return str(body.get("message") or body.get("detail") or "")
        return ""

    # -------------------------------------------------------------------------
    # Graduate Endpoints
    # -------------------------------------------------------------------------

    def list_graduates(self) -> Any:
        """GET /graduates - all records, newest first."""
        return self.get(self.RESOURCE)

    def create_graduate(self, payload: dict[str, Any]) -> Any:
        """POST /graduates - create a record."""
        return self.post(self.RESOURCE, json=payload)

    def delete_graduate(self, record_id: str) -> Any:
        """DELETE /graduates/:id - delete a record."""
        return self.delete(f"{self.RESOURCE}/{record_id}")

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()
