# branchpos/tests/test_branches.py
from __future__ import annotations

import pytest

from branchpos.api.branches_api import Branch
from branchpos.modules.branches import controller as ctl_mod
from branchpos.modules.branches.form import BranchForm
from branchpos.modules.branches.logic import REQUIRED_MESSAGE, build_branch_payload
from branchpos.utils.validators import ValidationError


class _StubDialog:
    def __init__(self, payload, accepted=1):
        self._payload = payload
        self._accepted = accepted

    def exec(self):
        return self._accepted

    def payload(self):
        return self._payload


# --------------------------- logic / form ---------------------------

def test_payload_trims_and_blanks_optional_fields():
    p = build_branch_payload(name=" Airport ", code=" AP ", address=" ", phone="0700", is_active=False)
    assert p == {
        "name": "Airport", "code": "AP", "address": None, "phone": "0700", "email": None, "isActive": False,
    }


@pytest.mark.parametrize("name,code", [("", "AP"), ("Airport", "  ")])
def test_name_and_code_required(name, code):
    with pytest.raises(ValidationError, match=REQUIRED_MESSAGE):
        build_branch_payload(name=name, code=code)


def test_form_inline_error_then_edit_payload(qtbot):
    form = BranchForm(None)
    qtbot.addWidget(form)
    assert form.windowTitle() == "Add Branch"
    assert form.chk_active.isChecked()
    form.accept()
    assert form.payload() is None
    assert form.lbl_error.text() == REQUIRED_MESSAGE

    existing = Branch(id=3, name="Closed Mall", code="CM", email="cm@x.test", is_active=False)
    edit = BranchForm(None, initial=existing)
    qtbot.addWidget(edit)
    assert edit.windowTitle() == "Edit Branch"
    edit.accept()
    assert edit.payload() == {
        "name": "Closed Mall", "code": "CM", "address": None, "phone": None, "email": "cm@x.test",
        "isActive": False,
    }


# --------------------------- controller ---------------------------

@pytest.fixture()
def page(qtbot, fake_api, client, context, messages):
    ctl = ctl_mod.BranchController(fake_api, context)
    qtbot.addWidget(ctl.get_widget())
    return ctl


def test_lists_inactive_branches_too(page):
    assert [b.code for b in page.rows] == ["MS", "HB", "CM"]
    assert page.view.lbl_summary.text() == "3 branches · 2 active"


def test_search_by_code(page):
    page.view.txt_search.setText("hb")
    assert [b.name for b in page.filtered()] == ["Harbour"]


def test_create_reloads_branch_context(page, client, context, messages, monkeypatch):
    monkeypatch.setattr(ctl_mod, "BranchForm", lambda *a, **k: _StubDialog({"name": "Airport", "code": "AP"}))
    new_rows = [
        {"id": 1, "name": "Main Street", "code": "MS", "isActive": True},
        {"id": 2, "name": "Harbour", "code": "HB", "isActive": True},
        {"id": 4, "name": "Airport", "code": "AP", "isActive": True},
    ]
    client.route("GET", "/branches", new_rows)

    page._on_add()

    assert client.called("POST", "/branches")[0][3] == {"name": "Airport", "code": "AP"}
    assert messages["info"] == ["Branch created successfully"]
    assert [b.name for b in context.branches] == ["Main Street", "Harbour", "Airport"]


def test_update_failure_keeps_list(page, client, api_error, messages, monkeypatch):
    monkeypatch.setattr(ctl_mod, "BranchForm", lambda *a, **k: _StubDialog({"name": "X", "code": "MS"}))
    client.route("PUT", "/branches/1", api_error(409, "Code already in use"))
    page.view.tbl.selectRow(0)
    page._on_edit()
    assert messages["error"] == ["Code already in use"]
    assert messages["info"] == []


def test_delete_confirms(page, client, messages):
    page.view.tbl.selectRow(2)
    page._on_delete()
    assert messages["confirm"] == ["Delete Closed Mall? This cannot be undone."]
    assert client.called("DELETE", "/branches/3")
    assert messages["info"] == ["Branch deleted successfully"]


def test_cancelled_form_sends_nothing(page, client, monkeypatch):
    monkeypatch.setattr(ctl_mod, "BranchForm", lambda *a, **k: _StubDialog(None, accepted=0))
    page._on_add()
    assert not client.called("POST", "/branches")


def test_edit_needs_selection(page, messages):
    page._on_edit()
    assert messages["info"] == ["Please select a branch."]
