"""
Tests for the requests-based transport, end to end through the client.
"""

import pytest
import requests
from requests_mock import Mocker

from quickrest import Request
from quickrest.exceptions import TransportError
from quickrest.http.requests_adapter import RequestsAdapter
from tests.helpers import SUCCESS_BODY


def test_get_with_multi_value_query(live_client):
    """Test GET through the default adapter"""
    with Mocker() as m:
        m.get(
            "https://api.test.com/v3/templates",
            text=SUCCESS_BODY,
            status_code=200,
            headers={"headerA": "valueA"},
        )

        response = live_client.api(
            Request(
                method="GET",
                base_uri="api.test.com",
                endpoint="/v3/templates",
                query_params={"generations": "legacy&dynamic", "page_size": "10"},
            )
        )

        assert response.status_code == 200
        assert response.body == SUCCESS_BODY
        assert response.headers["headerA"] == "valueA"
        assert m.last_request.qs == {"generations": ["legacy", "dynamic"], "page_size": ["10"]}


def test_post_sends_json_body(live_client):
    """Test POST body and content type on the wire"""
    with Mocker() as m:
        m.post("https://api.test.com/v3/mail/send", text=SUCCESS_BODY, status_code=202)

        response = live_client.api(
            Request(
                method="POST",
                base_uri="api.test.com",
                endpoint="/v3/mail/send",
                headers={"Authorization": "Bearer XXXX"},
                body='{"test":"testResult"}',
            )
        )

        assert response.status_code == 202
        assert m.last_request.headers["Content-Type"] == "application/json"
        assert m.last_request.headers["Authorization"] == "Bearer XXXX"
        assert m.last_request.text == '{"test":"testResult"}'


def test_delete_without_entity(live_client):
    """Test 204 without body gives body None"""
    with Mocker() as m:
        m.delete("https://api.test.com/v3/templates/1", status_code=204)

        response = live_client.api(
            Request(method="DELETE", base_uri="api.test.com", endpoint="/v3/templates/1")
        )

        assert response.status_code == 204
        assert response.body is None
        assert "Content-Type" not in m.last_request.headers


def test_framed_empty_body(live_client):
    """Test 200 with Content-Length: 0 gives an empty body, not None"""
    with Mocker() as m:
        m.get(
            "https://api.test.com/v3/empty",
            text="",
            status_code=200,
            headers={"Content-Length": "0"},
        )

        response = live_client.api(Request(method="GET", base_uri="api.test.com", endpoint="/v3/empty"))

        assert response.status_code == 200
        assert response.body == ""


def test_error_status_is_not_an_exception(live_client):
    """Test 4xx/5xx responses are returned, not raised"""
    with Mocker() as m:
        m.put("https://api.test.com/v3/templates/1", text='{"errors":[]}', status_code=500)

        response = live_client.api(
            Request(method="PUT", base_uri="api.test.com", endpoint="/v3/templates/1", body="{}")
        )

        assert response.status_code == 500
        assert response.body == '{"errors":[]}'


def test_connection_error_wrapped(live_client):
    """Test connection failures become TransportError"""
    with Mocker() as m:
        m.get("https://api.test.com/down", exc=requests.exceptions.ConnectionError("connection refused"))

        with pytest.raises(TransportError, match="connection refused") as exc_info:
            live_client.api(Request(method="GET", base_uri="api.test.com", endpoint="/down"))

        assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectionError)
        assert m.call_count == 1


def test_timeout_wrapped():
    """Test timeouts become TransportError and are not retried"""
    adapter = RequestsAdapter(timeout=1.0)
    with Mocker() as m:
        m.get("https://api.test.com/slow", exc=requests.exceptions.ReadTimeout("read timed out"))
        prepared = requests.Request("GET", "https://api.test.com/slow").prepare()

        with pytest.raises(TransportError, match="read timed out"):
            adapter.send(prepared)

        assert m.call_count == 1


def test_external_session_not_closed(monkeypatch):
    """Test a session passed in is borrowed"""
    session = requests.Session()
    closed = []
    monkeypatch.setattr(session, "close", lambda: closed.append(True))

    adapter = RequestsAdapter(session=session)
    adapter.close()

    assert adapter.session is session
    assert closed == []


def test_owned_session_closed(monkeypatch):
    """Test a session created by the adapter is closed"""
    adapter = RequestsAdapter()
    closed = []
    monkeypatch.setattr(adapter.session, "close", lambda: closed.append(True))

    adapter.close()

    assert closed == [True]
