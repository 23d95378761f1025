# branchpos/tests/test_users.py
from __future__ import annotations

import pytest

from branchpos.api.users_api import User
from branchpos.modules.users import controller as ctl_mod
from branchpos.modules.users.form import PasswordForm, UserForm
from branchpos.modules.users.logic import (
    MIN_PASSWORD_LENGTH,
    REQUIRED_MESSAGE,
    build_user_payload,
    users_for_branch,
    validate_new_password,
)
from branchpos.utils.validators import ValidationError

STAFF = [
    User(id=1, username="admin", full_name="Ada Admin", role="ADMIN", branch_id=1),
    User(id=2, username="cash1", full_name="Cal Cashier", role="CASHIER", branch_id=1),
    User(id=3, username="keeper", full_name="Kim Keeper", role="STOCK_KEEPER", branch_id=2, is_active=False),
]


def test_users_for_branch():
    assert users_for_branch(STAFF, None) == STAFF
    assert [u.id for u in users_for_branch(STAFF, 2)] == [3]


def test_create_payload_includes_password():
    p = build_user_payload(
        branch_id="1", username=" cash2 ", full_name="Cora", role="CASHIER", email=" ", password="s3cret"
    )
    assert p == {
        "branchId": 1,
        "username": "cash2",
        "fullName": "Cora",
        "email": None,
        "phone": None,
        "role": "CASHIER",
        "password": "s3cret",
    }


def test_edit_payload_never_carries_password():
    p = build_user_payload(branch_id=2, username="k", full_name="K", role="MANAGER", password="", creating=False)
    assert "password" not in p


@pytest.mark.parametrize("kwargs", [
    dict(branch_id=None, username="u", full_name="U", role="CASHIER", password="p"),
    dict(branch_id=1, username="u", full_name=" ", role="CASHIER", password="p"),
    dict(branch_id=1, username="u", full_name="U", role="OWNER", password="p"),
    dict(branch_id=1, username="u", full_name="U", role="CASHIER", password=""),
])
def test_payload_requires_fields(kwargs):
    with pytest.raises(ValidationError, match=REQUIRED_MESSAGE):
        build_user_payload(**kwargs)


def test_form_prefills_default_branch_and_cashier_role(qtbot, branches):
    form = UserForm(None, branches=branches, default_branch_id=2)
    qtbot.addWidget(form)
    assert form.cmb_branch.currentData() == 2
    assert form.cmb_role.currentData() == "CASHIER"

    form.accept()
    assert form.payload() is None
    assert form.lbl_error.text() == REQUIRED_MESSAGE

    form.txt_username.setText("new")
    form.txt_password.setText("pw")
    form.txt_full_name.setText("New Person")
    form.accept()
    assert form.payload()["branchId"] == 2


def test_edit_form_needs_no_password(qtbot, branches):
    form = UserForm(None, branches=branches, initial=STAFF[2])
    qtbot.addWidget(form)
    assert form.windowTitle() == "Edit User"
    assert form.cmb_role.currentData() == "STOCK_KEEPER"
    form.accept()
    assert form.payload() == {
        "branchId": 2, "username": "keeper", "fullName": "Kim Keeper",
        "email": None, "phone": None, "role": "STOCK_KEEPER",
    }


# --------------------------- controller ---------------------------

USERS_JSON = [
    {"id": 1, "username": "admin", "fullName": "Ada Admin", "role": "ADMIN", "branchId": 1},
    {"id": 2, "username": "cash1", "fullName": "Cal Cashier", "role": "CASHIER", "branchId": 1},
    {"id": 3, "username": "keeper", "fullName": "Kim Keeper", "role": "STOCK_KEEPER", "branchId": 2,
     "isActive": False},
]


class _StubDialog:
    def __init__(self, payload):
        self._payload = payload

    def exec(self):
        return 1

    def payload(self):
        return self._payload


@pytest.fixture()
def users(qtbot, fake_api, client, context, messages):
    client.route("GET", "/users", USERS_JSON)
    ctl = ctl_mod.UserController(fake_api, context)
    qtbot.addWidget(ctl.get_widget())
    return ctl


def test_lists_everyone_then_filters_by_branch(users, context, branches, client):
    assert [u.id for u in users.filtered()] == [1, 2, 3]
    assert users.view.lbl_summary.text() == "3 users · 2 active"

    context.select(branches[1])
    users.on_branch_changed()
    assert [u.id for u in users.filtered()] == [3]
    # one list call per reload, never per branch
    assert not [c for c in client.calls if c[1].startswith("/users/branch/")]


def test_search_by_name(users):
    users.view.txt_search.setText("cal")
    assert [u.username for u in users.filtered()] == ["cash1"]


def test_create_user(users, client, messages, monkeypatch):
    monkeypatch.setattr(ctl_mod, "UserForm", lambda *a, **k: _StubDialog({"username": "x", "password": "p"}))
    users._on_add()
    assert client.called("POST", "/users")[0][3] == {"username": "x", "password": "p"}
    assert messages["info"] == ["User created successfully"]


def test_edit_sends_put(users, client, messages, monkeypatch):
    seen = {}

    def _form(parent, *, branches, initial=None, default_branch_id=None):
        seen["initial"] = initial
        return _StubDialog({"fullName": "Cal C."})

    monkeypatch.setattr(ctl_mod, "UserForm", _form)
    users.view.tbl.selectRow(1)
    users._on_edit()
    assert seen["initial"].username == "cash1"
    assert client.called("PUT", "/users/2")[0][3] == {"fullName": "Cal C."}


def test_deactivate_confirms_then_deletes(users, client, messages):
    users.view.tbl.selectRow(1)
    users._on_deactivate()
    assert messages["confirm"] == ["Deactivate Cal Cashier?"]
    assert client.called("DELETE", "/users/2")
    assert messages["info"] == ["User deactivated successfully"]


def test_nothing_selected(users, messages):
    users._on_edit()
    assert messages["info"] == ["Please select a user."]


# --------------------------- change password ---------------------------

@pytest.mark.parametrize("new,confirm,message", [
    ("", "", "New password is required"),
    ("abc", "abc", f"New password must be at least {MIN_PASSWORD_LENGTH} characters"),
    ("secret1", "secret2", "Passwords do not match"),
])
def test_new_password_rules(new, confirm, message):
    with pytest.raises(ValidationError, match=message):
        validate_new_password(new, confirm)


def test_password_form_payload(qtbot):
    form = PasswordForm(None, user=STAFF[1])
    qtbot.addWidget(form)
    assert form.windowTitle() == "Change Password - Cal Cashier"
    form.txt_new.setText("secret1")
    form.txt_confirm.setText("secret2")
    form.accept()
    assert form.payload() is None
    assert form.lbl_error.text() == "Passwords do not match"
    form.txt_confirm.setText("secret1")
    form.accept()
    assert form.payload() == {"newPassword": "secret1"}


def test_change_password_posts_new_password(users, client, messages, monkeypatch):
    seen = {}

    def _form(parent, *, user=None):
        seen["user"] = user
        return _StubDialog({"newPassword": "secret1"})

    monkeypatch.setattr(ctl_mod, "PasswordForm", _form)
    users.view.tbl.selectRow(1)
    users._on_change_password()
    assert seen["user"].username == "cash1"
    assert client.called("POST", "/users/2/change-password")[0][3] == {"newPassword": "secret1"}
    assert messages["info"] == ["Password changed successfully"]


def test_change_password_failure(users, client, api_error, messages, monkeypatch):
    monkeypatch.setattr(ctl_mod, "PasswordForm", lambda *a, **k: _StubDialog({"newPassword": "secret1"}))
    client.route("POST", "/users/2/change-password", api_error(403, None))
    users.view.tbl.selectRow(1)
    users._on_change_password()
    assert messages["error"] == ["Failed to change password"]
    assert messages["info"] == []


def test_change_password_needs_selection(users, client, messages):
    users._on_change_password()
    assert messages["info"] == ["Please select a user."]
    assert not [c for c in client.calls if c[0] == "POST"]
