# branchpos/tests/conftest.py
# ---------------------------------------------------------------------
# Ground rules:
# - pytest-qt owns QApplication (use qapp/qtbot fixtures)
# - No live backend: FakeClient answers per (method, path) with canned JSON
# - Resource APIs under test are the real classes bound to FakeClient
# - Message boxes are patched so no dialog blocks a test
# - Silence benign Qt signal warnings
# ---------------------------------------------------------------------

from __future__ import annotations

import os
import re
from typing import Any, Dict, List, Optional, Tuple

# Headless test runs: default Qt to the offscreen platform plugin
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6 import QtCore
from PySide6.QtCore import QSettings

from branchpos.api import Api
from branchpos.api.branches_api import Branch
from branchpos.api.client import ApiError
from branchpos.api.users_api import User
from branchpos.modules.branch_context import BranchContext
from branchpos.utils import ui_helpers


# ---------- Qt: let pytest-qt own the app ----------
@pytest.fixture(scope="session")
def app(qapp):
    return qapp


# ---------- Silence benign Qt warnings ----------
_BENIGN_QT_PATTERNS = [
    r"^QObject::connect: .* already connected",
    r"^QObject::disconnect: Unexpected null parameter",
    r"^QBasicTimer::stop: Failed\. Platform timer not running\.",
]


@pytest.fixture(autouse=True, scope="session")
def _silence_benign_qt():
    """Filter common harmless Qt messages during tests."""
    original = QtCore.qInstallMessageHandler(None)
    rx = [re.compile(p) for p in _BENIGN_QT_PATTERNS]

    def handler(msg_type, context, message):
        text = str(message)
        for r in rx:
            if r.search(text):
                return
        QtCore.qInstallMessageHandler(None)
        try:
            QtCore.qDebug(message)
        finally:
            QtCore.qInstallMessageHandler(handler)

    QtCore.qInstallMessageHandler(handler)
    try:
        yield
    finally:
        QtCore.qInstallMessageHandler(original)


# ---------- Fake REST client ----------
class FakeClient:
    """
    Stands in for ApiClient. `routes[(METHOD, path)]` is the decoded JSON to
    return, or an exception instance to raise. Unrouted calls return None.
    """

    def __init__(self, routes: Optional[Dict[Tuple[str, str], Any]] = None):
        self.routes: Dict[Tuple[str, str], Any] = dict(routes or {})
        self.calls: List[Tuple[str, str, Any, Any]] = []
        self.token: Optional[str] = None

    def set_token(self, token):
        self.token = token or None

    def clear_token(self, only=None):
        if only is None or self.token == only:
            self.token = None

    def route(self, method: str, path: str, value: Any) -> None:
        self.routes[(method, path)] = value

    def _answer(self, method, path, params=None, json=None):
        self.calls.append((method, path, params, json))
        value = self.routes.get((method, path))
        if isinstance(value, Exception):
            raise value
        return value

    def get(self, path, params=None):
        return self._answer("GET", path, params=params)

    def post(self, path, json=None, params=None):
        return self._answer("POST", path, params=params, json=json)

    def put(self, path, json=None, params=None):
        return self._answer("PUT", path, params=params, json=json)

    def delete(self, path):
        return self._answer("DELETE", path)

    def called(self, method: str, path: str) -> List[Tuple[str, str, Any, Any]]:
        return [c for c in self.calls if c[0] == method and c[1] == path]


@pytest.fixture()
def client() -> FakeClient:
    return FakeClient()


@pytest.fixture()
def fake_api(client) -> Api:
    return Api(client)


@pytest.fixture()
def api_error():
    """Factory for a backend rejection carrying a server message."""
    def make(status: int = 400, message: str = "Bad request") -> ApiError:
        return ApiError(status, message, payload={"message": message}, server_message=message)
    return make


# ---------- Branches / users / context ----------
BRANCHES_JSON = [
    {"id": 1, "name": "Main Street", "code": "MS", "isActive": True},
    {"id": 2, "name": "Harbour", "code": "HB", "isActive": True},
    {"id": 3, "name": "Closed Mall", "code": "CM", "isActive": False},
]


@pytest.fixture()
def branches_json() -> list:
    return [dict(d) for d in BRANCHES_JSON]


@pytest.fixture()
def branches() -> List[Branch]:
    return [Branch.from_api(d) for d in BRANCHES_JSON if d["isActive"]]


@pytest.fixture()
def admin() -> User:
    return User(id=1, username="admin", full_name="Ada Admin", role="ADMIN")


@pytest.fixture()
def settings(tmp_path) -> QSettings:
    return QSettings(str(tmp_path / "branchpos.ini"), QSettings.IniFormat)


@pytest.fixture()
def context(qapp, fake_api, client, admin, settings) -> BranchContext:
    """Admin context with both active branches loaded and the company view selected."""
    client.route("GET", "/branches", BRANCHES_JSON)
    ctx = BranchContext(fake_api, admin, settings=settings)
    ctx.load()
    return ctx


# ---------- Message boxes ----------
@pytest.fixture()
def messages(monkeypatch) -> Dict[str, list]:
    """Record ui.info/ui.error calls; ui.confirm answers yes."""
    seen: Dict[str, list] = {"info": [], "error": [], "confirm": []}
    monkeypatch.setattr(ui_helpers, "info", lambda parent, title, text: seen["info"].append(text))
    monkeypatch.setattr(ui_helpers, "error", lambda parent, title, text: seen["error"].append(text))

    def _confirm(parent, title, text):
        seen["confirm"].append(text)
        return True

    monkeypatch.setattr(ui_helpers, "confirm", _confirm)
    return seen
