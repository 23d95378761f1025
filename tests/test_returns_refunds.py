# branchpos/tests/test_returns_refunds.py
from __future__ import annotations

import pytest
from PySide6.QtWidgets import QDialogButtonBox

from branchpos.api.returns_api import SupplierReturn
from branchpos.api.sales_api import Sale, SaleItem
from branchpos.modules.approvals import approval_summary
from branchpos.modules.refunds import controller as refund_ctl_mod
from branchpos.modules.refunds.form import RefundForm
from branchpos.modules.refunds.logic import (
    LOOKUP_FAILED,
    build_refund_payload,
    default_method,
    lines_from_sale,
    refund_total,
    set_quantity,
)
from branchpos.modules.returns import controller as return_ctl_mod
from branchpos.modules.returns.form import ReturnForm
from branchpos.modules.returns.logic import REQUIRED_MESSAGE, build_return_payload, return_total
from branchpos.utils.validators import ValidationError


def _sale(method="CARD", customer_id=None):
    return Sale(
        id=40,
        sale_number="S-40",
        payment_method=method,
        customer_id=customer_id,
        items=[
            SaleItem(product_id=1, product_name="Cable", quantity=3, unit_price=5.0),
            SaleItem(product_id=2, product_name="Case", quantity=1, unit_price=12.0),
        ],
    )


# --------------------------- returns ---------------------------

def test_return_total_treats_junk_as_zero():
    rows = [
        {"product_id": 1, "quantity": "2", "unit_cost": "4.5"},
        {"product_id": 2, "quantity": "x", "unit_cost": "10"},
        {"product_id": 3, "quantity": "1", "unit_cost": ""},
        {"product_id": 4, "quantity": "1", "unit_cost": "nan"},
        {"product_id": 5, "quantity": "1", "unit_cost": "inf"},
    ]
    assert return_total(rows) == 9.0


def test_return_payload():
    payload = build_return_payload(
        [{"product_id": 3, "quantity": "2", "unit_cost": "7.25"}],
        branch_id=1, supplier_id="4", reason="  Damaged  ",
    )
    assert payload == {
        "branchId": 1,
        "supplierId": 4,
        "reason": "Damaged",
        "items": [{"productId": 3, "quantity": 2, "unitCost": 7.25}],
    }


@pytest.mark.parametrize("kwargs,rows,message", [
    ({"branch_id": None, "supplier_id": 4, "reason": "x"}, [{"product_id": 1, "quantity": "1", "unit_cost": "1"}], REQUIRED_MESSAGE),
    ({"branch_id": 1, "supplier_id": 4, "reason": " "}, [{"product_id": 1, "quantity": "1", "unit_cost": "1"}], REQUIRED_MESSAGE),
    ({"branch_id": 1, "supplier_id": 4, "reason": "x"}, [{"product_id": 1, "quantity": "", "unit_cost": "1"}], REQUIRED_MESSAGE),
    ({"branch_id": 1, "supplier_id": 4, "reason": "x"}, [{"product_id": 1, "quantity": "0", "unit_cost": "1"}], "Quantity must be at least 1"),
    ({"branch_id": 1, "supplier_id": 4, "reason": "x"}, [{"product_id": 1, "quantity": "1", "unit_cost": "-2"}], "Unit cost cannot be negative"),
    ({"branch_id": 1, "supplier_id": 4, "reason": "x"}, [{"product_id": 1, "quantity": "1", "unit_cost": "inf"}], REQUIRED_MESSAGE),
    ({"branch_id": 1, "supplier_id": 4, "reason": "x"}, [{"product_id": 1, "quantity": "1", "unit_cost": "NaN"}], REQUIRED_MESSAGE),
])
def test_return_payload_validation(kwargs, rows, message):
    with pytest.raises(ValidationError, match=message):
        build_return_payload(rows, **kwargs)


def test_return_form_running_total(qtbot):
    form = ReturnForm(None, branch_id=1, suppliers=[(4, "Acme")], products=[(1, "Cable"), (2, "Case")])
    qtbot.addWidget(form)
    form.items.set_row(0, 1, quantity="2", unit_cost="3")
    form.items.add_row(2, quantity="1", unit_cost="4.5")
    assert form.total() == 10.5
    assert form.lbl_total.text() == "10.50"

    form.accept()
    assert form.payload() is None
    assert form.lbl_error.text() == REQUIRED_MESSAGE


def test_approval_summary():
    rows = [
        SupplierReturn(id=1, return_number="R1", status="PENDING", total_amount=10),
        SupplierReturn(id=2, return_number="R2", status="APPROVED", total_amount=5),
    ]
    assert approval_summary(rows) == {"count": 2, "pending": 1, "total": 15}


RETURNS_JSON = [
    {"id": 1, "returnNumber": "R-1", "status": "APPROVED", "createdAt": "2025-05-01", "totalAmount": 20},
    {"id": 2, "returnNumber": "R-2", "status": "PENDING", "createdAt": "2025-05-04", "totalAmount": 8},
]


@pytest.fixture()
def returns(qtbot, fake_api, client, context, branches, messages):
    client.route("GET", "/returns/branch/1", RETURNS_JSON)
    context.select(branches[0])
    ctl = return_ctl_mod.ReturnController(fake_api, context)
    qtbot.addWidget(ctl.get_widget())
    return ctl


def test_returns_newest_first_and_only_pending_decidable(returns):
    assert [r.return_number for r in returns.rows] == ["R-2", "R-1"]
    returns.view.tbl.selectRow(1)
    returns._sync_actions()
    assert not returns.view.btn_approve.isEnabled()
    assert returns.decide(True) is False

    returns.view.tbl.selectRow(0)
    returns._sync_actions()
    assert returns.view.btn_approve.isEnabled()


def test_return_approve_and_reject_messages(returns, client, api_error, messages):
    returns.view.tbl.selectRow(0)
    client.route("POST", "/returns/2/approve", {"id": 2, "status": "APPROVED"})
    assert returns.decide(True) is True
    assert messages["info"] == ["Return approved successfully"]

    returns.view.tbl.selectRow(0)
    client.route("POST", "/returns/2/reject", api_error(500, ""))
    assert returns.decide(False) is False
    assert messages["error"] == ["Failed to reject return"]


def test_return_create_posts_payload(returns, client, messages, monkeypatch):
    payload = {"branchId": 1, "supplierId": 4, "reason": "Damaged", "items": [{"productId": 1, "quantity": 1, "unitCost": 2.0}]}

    class _Stub:
        def exec(self):
            return 1

        def payload(self):
            return payload

    monkeypatch.setattr(return_ctl_mod, "ReturnForm", lambda *a, **k: _Stub())
    returns._on_new()
    (_m, _p, _q, body), = client.called("POST", "/returns")
    assert body == payload
    assert messages["info"] == ["Return request created successfully"]


# --------------------------- refunds ---------------------------

def test_refund_lines_start_fully_selected():
    lines = lines_from_sale(_sale())
    assert [(l.product_id, l.quantity, l.max_quantity, l.selected) for l in lines] == [
        (1, 3, 3, True), (2, 1, 1, True),
    ]
    assert refund_total(lines) == 27.0
    assert default_method(_sale("MOBILE_MONEY")) == "mobile_money"
    assert default_method(_sale(None)) == "cash"


def test_refund_quantity_bounds():
    line = lines_from_sale(_sale())[0]
    assert set_quantity(line, 4) is False
    assert line.quantity == 3
    assert set_quantity(line, "2") is True
    assert line.quantity == 2
    assert set_quantity(line, -1) is False
    assert line.quantity == 2


def test_refund_payload_only_selected_positive_lines():
    lines = lines_from_sale(_sale())
    lines[1].selected = False
    payload = build_refund_payload(
        lines, branch_id=1, sale=_sale(), customer_id=7, reason=" Faulty ", method="store_credit",
    )
    assert payload == {
        "branchId": 1,
        "saleId": 40,
        "reason": "Faulty",
        "refundMethod": "STORE_CREDIT",
        "items": [{"productId": 1, "quantity": 3, "unitPrice": 5.0}],
        "customerId": 7,
    }

    lines[0].quantity = 0
    with pytest.raises(ValidationError):
        build_refund_payload(lines, branch_id=1, sale=_sale(), customer_id=None, reason="x", method="cash")


def test_refund_form_lookup_flow(qtbot):
    sales = {"S-40": _sale("CARD", customer_id=7)}

    def lookup(number):
        if number not in sales:
            raise LookupError(number)
        return sales[number]

    form = RefundForm(None, branch_id=1, customers=[(7, "Ana")], lookup=lookup)
    qtbot.addWidget(form)
    ok_button = form.buttons.button(QDialogButtonBox.Ok)
    assert not ok_button.isEnabled()

    form.txt_receipt.setText("nope")
    assert form.lookup() is False
    assert form.lbl_lookup.text() == LOOKUP_FAILED
    assert form.sale is None

    form.txt_receipt.setText(" S-40 ")
    assert form.lookup() is True
    assert ok_button.isEnabled()
    assert form.cmb_customer.currentData() == 7
    assert form.cmb_method.currentData() == "card"
    assert form.tbl_items.rowCount() == 2
    assert form.total() == 27.0

    form.set_selected(1, False)
    assert form.set_line_quantity(0, 5) is False
    assert form.set_line_quantity(0, 1) is True
    assert form.total() == 5.0

    form.accept()
    assert form.payload() is None  # reason missing
    form.txt_reason.setText("Faulty")
    form.accept()
    assert form.payload()["items"] == [{"productId": 1, "quantity": 1, "unitPrice": 5.0}]
    assert form.payload()["refundMethod"] == "CARD"


def test_refund_controller_wires_receipt_lookup(qtbot, fake_api, client, context, branches, messages, monkeypatch):
    context.select(branches[0])
    ctl = refund_ctl_mod.RefundController(fake_api, context)
    qtbot.addWidget(ctl.get_widget())
    seen = {}

    class _Stub:
        def __init__(self, *a, **k):
            seen.update(k)

        def exec(self):
            return 1

        def payload(self):
            return {"branchId": 1, "saleId": 40, "reason": "x", "refundMethod": "CASH", "items": []}

    monkeypatch.setattr(refund_ctl_mod, "RefundForm", _Stub)
    ctl._on_new()
    assert seen["branch_id"] == 1
    assert seen["lookup"] == fake_api.sales.by_sale_number
    assert client.called("POST", "/refunds")
    assert messages["info"] == ["Refund request created successfully"]
