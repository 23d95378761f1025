"""
REST client for the BranchPOS backend.

Thin wrapper over a `requests.Session`:
- JSON in/out, bearer token attached per call once set (the session itself
  is shared by fan-out workers and never carries the token)
- non-2xx responses and transport failures raise ApiError
- 401/403 drop the stored token so the next call goes out anonymous
- each call is logged to the JSON-lines API log (see utils.loggers)
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Dict, Optional, Tuple

import requests

from .. import config
from ..utils.loggers import get_api_logger, log_event


class ApiError(Exception):
    """Raised for any failed backend call."""

    def __init__(
        self,
        status: Optional[int],
        message: str,
        payload: Any = None,
        server_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.status = status
        self.payload = payload
        # Message supplied by the backend itself; None for transport errors
        self.server_message = server_message

    @property
    def is_auth_error(self) -> bool:
        return self.status in (401, 403)

    @property
    def session_expired(self) -> bool:
        return bool(isinstance(self.payload, dict) and self.payload.get("sessionExpired"))


def _server_message(payload: Any) -> Optional[str]:
    """
    Extract a user-facing message from an error body: the joined values of a
    field `errors` mapping first, then `message`.
    """
    if not isinstance(payload, dict):
        return None
    errors = payload.get("errors")
    if isinstance(errors, dict) and errors:
        return ", ".join(str(v) for v in errors.values())
    if isinstance(errors, list) and errors:
        return ", ".join(str(v) for v in errors)
    msg = payload.get("message")
    if msg:
        return str(msg)
    return None


class ApiClient:
    """
    Session-backed JSON client.

    `base_url` is the API root (e.g. http://localhost:8081/api); paths passed to
    the verb helpers are joined onto it.
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or config.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.API_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json", "Accept": "application/json"})
        self._log = get_api_logger()
        self._token_lock = threading.Lock()
        self.token: Optional[str] = None
        self.set_token(token)

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------
    def set_token(self, token: Optional[str]) -> None:
        with self._token_lock:
            self.token = token or None

    def clear_token(self, only: Optional[str] = None) -> None:
        """Drop the token; with `only`, just when it is still the one in use."""
        with self._token_lock:
            if only is None or self.token == only:
                self.token = None

    def _auth_headers(self) -> Tuple[Optional[str], Dict[str, str]]:
        with self._token_lock:
            token = self.token
        return token, ({"Authorization": f"Bearer {token}"} if token else {})

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------
    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("POST", path, json=json, params=params)

    def put(self, path: str, json: Any = None, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("PUT", path, json=json, params=params)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        """Send one request and return the decoded JSON body (None when empty)."""
        op = f"{method} {path}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        sent_token, headers = self._auth_headers()
        started = time.monotonic()
        try:
            resp = self.session.request(
                method,
                self.url(path),
                params=params or None,
                json=json,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            log_event(self._log, op, "error", "transport failure", {"error": str(exc)}, level=logging.WARNING)
            raise ApiError(None, f"Could not reach the server: {exc}") from exc

        duration_ms = int((time.monotonic() - started) * 1000)
        body = self._decode(resp)

        if not resp.ok:
            if resp.status_code in (401, 403) and sent_token:
                # a token set while this call was in flight stays
                self.clear_token(only=sent_token)
            server_msg = _server_message(body)
            log_event(
                self._log,
                op,
                "error",
                server_msg or resp.reason or "request failed",
                {"status": resp.status_code, "duration_ms": duration_ms},
                level=logging.WARNING,
            )
            raise ApiError(
                resp.status_code,
                server_msg or f"Request failed (HTTP {resp.status_code})",
                payload=body,
                server_message=server_msg,
            )

        log_event(
            self._log,
            op,
            "response",
            "ok",
            {"status": resp.status_code, "duration_ms": duration_ms},
            level=logging.DEBUG,
        )
        return body

    @staticmethod
    def _decode(resp: requests.Response) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text

    def close(self) -> None:
        self.session.close()
