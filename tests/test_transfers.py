# branchpos/tests/test_transfers.py
from __future__ import annotations

import pytest

from branchpos.api.stock_api import StockItem
from branchpos.api.transfers_api import Transfer
from branchpos.modules.transfers import controller as ctl_mod
from branchpos.modules.transfers.form import TransferForm
from branchpos.modules.transfers.logic import (
    APPROVE, INCOMING, OUTGOING, PENDING, RECEIVE, REJECT, SEND,
    available_actions,
    build_transfer_items,
)
from branchpos.utils.validators import ValidationError


@pytest.mark.parametrize("status,direction,expected", [
    ("PENDING", OUTGOING, [APPROVE, REJECT, SEND]),
    ("PENDING", PENDING, [APPROVE, REJECT, SEND]),
    ("IN_TRANSIT", INCOMING, [RECEIVE, REJECT]),
    ("IN_TRANSIT", OUTGOING, [REJECT]),
    ("RECEIVED", INCOMING, []),
    ("REJECTED", PENDING, []),
])
def test_available_actions(status, direction, expected):
    assert available_actions(Transfer(id=1, transfer_number="T-1", status=status), direction) == expected


def test_items_skip_blank_rows_and_check_stock():
    rows = [
        {"product_id": 1, "quantity": "2"},
        {"product_id": None, "quantity": "5"},
        {"product_id": 2, "quantity": " "},
    ]
    items = build_transfer_items(rows, from_branch_id=1, to_branch_id=2, stock_by_product={1: 3})
    assert items == [{"productId": 1, "quantity": 2}]


@pytest.mark.parametrize("kwargs,rows,message", [
    ({"from_branch_id": None, "to_branch_id": 2}, [], "Please select a source branch"),
    ({"from_branch_id": 1, "to_branch_id": None}, [], "Please select a destination branch"),
    ({"from_branch_id": 1, "to_branch_id": 1}, [], "must be different"),
    ({"from_branch_id": 1, "to_branch_id": 2}, [{"product_id": 1, "quantity": "0"}], "whole number of at least 1"),
    ({"from_branch_id": 1, "to_branch_id": 2}, [{"product_id": 1, "quantity": "4"}], "Only 3 of Cable in stock"),
    ({"from_branch_id": 1, "to_branch_id": 2}, [{"product_id": None, "quantity": ""}], "Please add at least one item"),
])
def test_items_validation(kwargs, rows, message):
    with pytest.raises(ValidationError, match=message):
        build_transfer_items(rows, stock_by_product={1: 3}, names={1: "Cable"}, **kwargs)


def test_form_offers_other_branches_and_stocked_products(qtbot, branches):
    stock = [
        StockItem(id=1, branch_id=1, product_id=1, product_name="Cable", quantity=3),
        StockItem(id=2, branch_id=1, product_id=2, product_name="Empty", quantity=0),
    ]
    form = TransferForm(None, source=branches[0], branches=branches, stock=stock)
    qtbot.addWidget(form)
    destinations = [form.cmb_to.itemData(i) for i in range(form.cmb_to.count())]
    assert destinations == [None, 2]
    products = form.items.row_widget(0).cmb_product
    assert [products.itemData(i) for i in range(products.count())] == [None, 1]

    form.cmb_to.setCurrentIndex(1)
    form.items.set_row(0, 1, quantity="2")
    form.txt_notes.setPlainText("weekly top-up")
    form.accept()
    assert form.payload() == {
        "to_branch_id": 2,
        "notes": "weekly top-up",
        "items": [{"productId": 1, "quantity": 2}],
    }


# --------------------------- controller ---------------------------

def _t(tid, status, created, frm=1, to=2):
    return {"id": tid, "transferNumber": f"T-{tid}", "status": status, "createdAt": created,
            "fromBranchId": frm, "toBranchId": to}


@pytest.fixture()
def transfers(qtbot, fake_api, client, context, messages):
    # company view: the same transfer comes back from both branches
    client.route("GET", "/transfers/from/1", [_t(1, "PENDING", "2025-05-02")])
    client.route("GET", "/transfers/to/2", [_t(1, "PENDING", "2025-05-02"), _t(2, "IN_TRANSIT", "2025-05-03", 1, 2)])
    client.route("GET", "/transfers/from/2", [])
    client.route("GET", "/transfers/to/1", [])
    client.route("GET", "/transfers/pending/1", [_t(1, "PENDING", "2025-05-02")])
    client.route("GET", "/transfers/pending/2", [_t(1, "PENDING", "2025-05-02")])
    ctl = ctl_mod.TransferController(fake_api, context)
    qtbot.addWidget(ctl.get_widget())
    return ctl


def test_company_view_dedupes_each_list(transfers):
    assert [t.id for t in transfers.lists[OUTGOING]] == [1]
    assert [t.id for t in transfers.lists[INCOMING]] == [1, 2]
    assert [t.id for t in transfers.lists[PENDING]] == [1]
    assert not transfers.view.btn_new.isEnabled()


def test_incoming_in_transit_can_be_received(transfers, client, messages):
    transfers.view.tabs.setCurrentIndex(1)
    transfers.view.tables[INCOMING].selectRow(1)
    transfers._sync_actions()
    assert transfers.view.btn_receive.isEnabled()
    assert not transfers.view.btn_approve.isEnabled()

    client.route("POST", "/transfers/2/receive", {"id": 2, "status": "RECEIVED"})
    assert transfers.run_action(RECEIVE) is True
    assert client.called("POST", "/transfers/2/receive")
    assert messages["info"] == ["Transfer received. Stock has been updated."]


def test_action_not_offered_is_refused(transfers, client):
    transfers.view.tabs.setCurrentIndex(0)
    transfers.view.tables[OUTGOING].selectRow(0)
    assert transfers.run_action(RECEIVE) is False
    assert not client.called("POST", "/transfers/1/receive")


def test_failed_action_shows_server_message(transfers, client, api_error, messages):
    transfers.view.tabs.setCurrentIndex(2)
    transfers.view.tables[PENDING].selectRow(0)
    client.route("POST", "/transfers/1/approve", api_error(400, "Insufficient stock at source"))
    assert transfers.run_action(APPROVE) is False
    assert messages["error"] == ["Insufficient stock at source"]


def test_create_uses_selected_branch_as_source(qtbot, fake_api, client, context, branches, messages, monkeypatch):
    client.route("GET", "/stock/branch/1", [{"id": 1, "branchId": 1, "productId": 1, "productName": "Cable", "quantity": 3}])
    context.select(branches[0])
    ctl = ctl_mod.TransferController(fake_api, context)
    qtbot.addWidget(ctl.get_widget())
    assert [s.product_id for s in ctl.stock] == [1]

    class _Stub:
        def exec(self):
            return 1

        def payload(self):
            return {"to_branch_id": 2, "notes": None, "items": [{"productId": 1, "quantity": 1}]}

    monkeypatch.setattr(ctl_mod, "TransferForm", lambda *a, **k: _Stub())
    ctl._on_new()
    (_m, _p, _q, body), = client.called("POST", "/transfers")
    assert body == {"fromBranchId": 1, "toBranchId": 2, "notes": None, "items": [{"productId": 1, "quantity": 1}]}
    assert messages["info"] == ["Transfer request created successfully"]
