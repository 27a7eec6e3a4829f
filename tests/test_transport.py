import pytest
import requests

from core import TransportError
from infrastructure.todoist_api import transport as transport_mod
from infrastructure.todoist_api.rate_limiter import RateLimiter
from infrastructure.todoist_api.transport import Transport, rest_endpoint, sync_endpoint


class DummyResponse:
    def __init__(self, status_code=200, payload=None, text="", headers=None, reason="OK"):
        self.status_code = status_code
        self._payload = payload
        self.text = text or str(payload)
        self.headers = headers or {}
        self.reason = reason
        self.url = "https://example.test/x"

    def json(self):
        return self._payload


class RecordingSession:
    def __init__(self, responses=None, exc=None):
        self.calls = []
        self._responses = list(responses or [DummyResponse(200, [])])
        self._exc = exc

    def request(self, method, url, params=None, data=None, headers=None, timeout=None):
        self.calls.append(
            {"method": method, "url": url, "params": params, "data": data, "headers": headers, "timeout": timeout}
        )
        if self._exc:
            raise self._exc
        return self._responses.pop(0)


def _transport(session, token="tok"):
    return Transport(lambda: token, session=session)


def test_endpoints_join_segments():
    assert rest_endpoint("tasks", 12) == f"{transport_mod.REST_API}/tasks/12"
    assert sync_endpoint("quick", "add") == f"{transport_mod.SYNC_API}/quick/add"
    assert rest_endpoint("/tasks/") == f"{transport_mod.REST_API}/tasks"


def test_request_sets_bearer_and_stringifies_params():
    session = RecordingSession()
    _transport(session).request("GET", rest_endpoint("tasks"), params={"project_id": 7})
    call = session.calls[0]
    assert call["headers"]["Authorization"] == "Bearer tok"
    assert call["params"] == {"project_id": "7"}
    assert call["timeout"] == 30


def test_request_without_params_sends_none():
    session = RecordingSession()
    _transport(session).request("GET", rest_endpoint("labels"))
    assert session.calls[0]["params"] is None


def test_caller_headers_are_merged():
    session = RecordingSession()
    _transport(session).request("POST", rest_endpoint("tasks"), headers={"Content-Type": "application/json"}, body="{}")
    headers = session.calls[0]["headers"]
    assert headers["Content-Type"] == "application/json"
    assert headers["Authorization"].startswith("Bearer ")
    assert session.calls[0]["data"] == "{}"


def test_non_2xx_raises_with_status_and_body():
    session = RecordingSession([DummyResponse(403, text="Forbidden body", reason="Forbidden")])
    with pytest.raises(TransportError) as err:
        _transport(session).request("GET", rest_endpoint("tasks"))
    assert err.value.status == 403
    assert "403 Forbidden" in str(err.value)
    assert "Forbidden body" in str(err.value)


def test_connection_error_becomes_transport_error_without_retry():
    session = RecordingSession(exc=requests.ConnectionError("boom"))
    with pytest.raises(TransportError) as err:
        _transport(session).request("GET", rest_endpoint("tasks"))
    assert err.value.status is None
    assert len(session.calls) == 1


def test_missing_token_fails_before_network():
    session = RecordingSession()
    with pytest.raises(TransportError):
        _transport(session, token="").request("GET", rest_endpoint("tasks"))
    assert session.calls == []


def test_retry_after_header_feeds_rate_limiter():
    limiter = RateLimiter(max_wait=5)
    session = RecordingSession([DummyResponse(429, text="slow down", headers={"Retry-After": "120"}, reason="Too Many Requests")])
    transport = Transport(lambda: "tok", session=session, rate_limiter=limiter)
    with pytest.raises(TransportError) as err:
        transport.request("GET", rest_endpoint("tasks"))
    assert err.value.status == 429
    assert limiter.last_retry_after == 5
    assert len(session.calls) == 1


def test_rate_limiter_ignores_garbage_header():
    limiter = RateLimiter()
    limiter.update({"Retry-After": "soon"})
    assert limiter.last_retry_after is None
    limiter.acquire()
