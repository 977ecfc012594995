"""Tests for the Record Store REST client."""

from unittest.mock import Mock

import pytest
import requests

from gradsync.adapters.store.client import StoreApiClient
from gradsync.core.exceptions import (
    MalformedResponseError,
    RecordNotFoundError,
    RecordRejectedError,
    RecordStoreError,
    StoreServerError,
    StoreTimeoutError,
    StoreUnavailableError,
)


def make_response(status=200, body=None, text=None):
    response = Mock(spec=requests.Response)
    response.status_code = status
    response.ok = status < 400
    if body is not None:
        response.json.return_value = body
        response.text = text if text is not None else "json"
    else:
        response.json.side_effect = ValueError("No JSON")
        response.text = text or ""
    return response


class TestStoreApiClient:
    """Tests for StoreApiClient."""

    @pytest.fixture
    def session(self):
        session = Mock(spec=requests.Session)
        session.headers = {}
        return session

    @pytest.fixture
    def client(self, session):
        return StoreApiClient("http://store.test/api/", timeout=5, session=session)

    def test_list_graduates(self, client, session):
        session.request.return_value = make_response(200, [{"_id": "a"}])

        assert client.list_graduates() == [{"_id": "a"}]
        session.request.assert_called_once_with(
            "GET", "http://store.test/api/graduates", timeout=5
        )

    def test_sets_json_headers(self, session, client):
        assert session.headers["Accept"] == "application/json"
        assert session.headers["Content-Type"] == "application/json"

    def test_create_graduate_posts_payload(self, client, session):
        session.request.return_value = make_response(201, {"_id": "new"})
        payload = {"name": "A", "faculty": "B", "graduationYear": 2024, "telephone": "1"}

        assert client.create_graduate(payload) == {"_id": "new"}
        session.request.assert_called_once_with(
            "POST", "http://store.test/api/graduates", json=payload, timeout=5
        )

    def test_delete_graduate(self, client, session):
        session.request.return_value = make_response(
            200, {"message": "Graduate deleted successfully"}
        )

        assert client.delete_graduate("abc") == {"message": "Graduate deleted successfully"}
        session.request.assert_called_once_with(
            "DELETE", "http://store.test/api/graduates/abc", timeout=5
        )

    def test_empty_body(self, client, session):
        session.request.return_value = make_response(204, text="")

        assert client.get("graduates") == {}

    def test_invalid_json(self, client, session):
        session.request.return_value = make_response(200, text="<html>")

        with pytest.raises(MalformedResponseError):
            client.list_graduates()

    def test_not_found(self, client, session):
        session.request.return_value = make_response(404, {"message": "Graduate not found"})

        with pytest.raises(RecordNotFoundError) as exc_info:
            client.delete_graduate("missing")

        assert exc_info.value.message == "Graduate not found"
        assert exc_info.value.record_id == "missing"
        assert exc_info.value.status_code == 404

    def test_rejected(self, client, session):
        session.request.return_value = make_response(400, {"message": "All fields are required"})

        with pytest.raises(RecordRejectedError) as exc_info:
            client.create_graduate({})

        assert exc_info.value.message == "All fields are required"
        assert not exc_info.value.transient

    def test_server_error(self, client, session):
        session.request.return_value = make_response(500, {"message": "Server error"})

        with pytest.raises(StoreServerError) as exc_info:
            client.list_graduates()

        assert exc_info.value.status_code == 500

    def test_server_error_without_body(self, client, session):
        session.request.return_value = make_response(502, text="")

        with pytest.raises(StoreServerError, match="API error 502"):
            client.list_graduates()

    def test_timeout(self, client, session):
        session.request.side_effect = requests.exceptions.ConnectTimeout("slow")

        with pytest.raises(StoreTimeoutError) as exc_info:
            client.list_graduates()

        assert exc_info.value.transient

    def test_connection_refused(self, client, session):
        session.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(StoreUnavailableError) as exc_info:
            client.list_graduates()

        assert exc_info.value.transient

    def test_other_request_errors(self, client, session):
        session.request.side_effect = requests.exceptions.InvalidURL("bad")

        with pytest.raises(RecordStoreError) as exc_info:
            client.list_graduates()

        assert not exc_info.value.transient
