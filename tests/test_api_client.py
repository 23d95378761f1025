# branchpos/tests/test_api_client.py
from __future__ import annotations

import json as _json
import threading

import pytest
import requests

from branchpos.api.client import ApiClient, ApiError


class _Session:
    """Minimal requests.Session double: returns queued responses, records calls."""

    def __init__(self, *responses):
        self.headers = {}
        self.queue = list(responses)
        self.calls = []

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.calls.append({
            "method": method, "url": url, "params": params, "json": json,
            "timeout": timeout, "auth": (headers or {}).get("Authorization"),
        })
        item = self.queue.pop(0)
        if isinstance(item, Exception):
            raise item
        if callable(item):
            return item()
        return item

    def close(self):
        pass


def _response(status=200, body=None, reason="OK") -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r.reason = reason
    r.encoding = "utf-8"
    if body is None:
        r._content = b""
    elif isinstance(body, (bytes, str)):
        r._content = body.encode("utf-8") if isinstance(body, str) else body
    else:
        r._content = _json.dumps(body).encode("utf-8")
    return r


def _client(*responses, token=None):
    session = _Session(*responses)
    return ApiClient("http://api.test/api/", token=token, timeout=5, session=session), session


def test_get_joins_path_and_drops_none_params():
    c, s = _client(_response(200, [{"id": 1}]))
    out = c.get("/sales/branch/1/range", params={"startDate": "2025-01-01", "endDate": None})
    assert out == [{"id": 1}]
    call = s.calls[0]
    assert call["url"] == "http://api.test/api/sales/branch/1/range"
    assert call["params"] == {"startDate": "2025-01-01"}
    assert call["timeout"] == 5


def test_bearer_token_attached_and_cleared():
    c, s = _client(_response(200, {}), _response(200, {}), token="abc")
    c.get("/auth/me")
    assert s.calls[0]["auth"] == "Bearer abc"
    c.clear_token()
    c.get("/auth/me")
    assert s.calls[1]["auth"] is None


def test_empty_body_decodes_to_none():
    c, _ = _client(_response(204, None))
    assert c.delete("/expenses/4") is None


def test_error_prefers_joined_field_errors():
    body = {"message": "Validation failed", "errors": {"name": "Name is required", "sku": "SKU taken"}}
    c, _ = _client(_response(400, body, reason="Bad Request"))
    with pytest.raises(ApiError) as ei:
        c.post("/products", json={})
    err = ei.value
    assert err.status == 400
    assert err.server_message == "Name is required, SKU taken"
    assert str(err) == "Name is required, SKU taken"
    assert err.payload == body


def test_error_falls_back_to_message_then_status():
    c, _ = _client(
        _response(409, {"message": "Insufficient stock"}, reason="Conflict"),
        _response(500, "<html>boom</html>", reason="Server Error"),
    )
    with pytest.raises(ApiError) as first:
        c.post("/sales", json={})
    assert first.value.server_message == "Insufficient stock"

    with pytest.raises(ApiError) as second:
        c.get("/sales/1")
    assert second.value.server_message is None
    assert "HTTP 500" in str(second.value)


@pytest.mark.parametrize("status", [401, 403])
def test_auth_failure_drops_token(status):
    c, _ = _client(_response(status, {"message": "Session expired", "sessionExpired": True}), token="abc")
    with pytest.raises(ApiError) as ei:
        c.get("/auth/me")
    assert ei.value.is_auth_error
    assert ei.value.session_expired
    assert c.token is None
    assert "Authorization" not in c.session.headers


def test_transport_failure_maps_to_api_error():
    c, _ = _client(requests.ConnectionError("refused"))
    with pytest.raises(ApiError) as ei:
        c.get("/branches")
    assert ei.value.status is None
    assert ei.value.server_message is None
    assert "Could not reach the server" in str(ei.value)


def test_token_never_lands_on_the_shared_session():
    c, s = _client(_response(200, {}), token="abc")
    c.set_token("def")
    c.get("/branches")
    assert s.calls[0]["auth"] == "Bearer def"
    assert "Authorization" not in s.headers


def test_stale_rejection_keeps_a_newer_token():
    c, s = None, None

    def _rejected_after_relogin():
        # another thread signs in again while this call is in flight
        c.set_token("fresh")
        return _response(401, {"message": "Session expired"})

    c, s = _client(_rejected_after_relogin, token="old")
    with pytest.raises(ApiError):
        c.get("/sales/branch/1")
    assert s.calls[0]["auth"] == "Bearer old"
    assert c.token == "fresh"


def test_concurrent_calls_each_carry_the_token():
    c, s = _client(*[_response(200, []) for _ in range(8)], token="abc")
    threads = [threading.Thread(target=c.get, args=(f"/sales/branch/{i}",)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert sorted(call["url"] for call in s.calls) == sorted(
        f"http://api.test/api/sales/branch/{i}" for i in range(8)
    )
    assert {call["auth"] for call in s.calls} == {"Bearer abc"}
