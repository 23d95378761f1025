# branchpos/tests/test_inventory.py
from __future__ import annotations

import pytest

from branchpos.api.stock_api import StockItem
from branchpos.modules.inventory import controller as ctl_mod
from branchpos.modules.inventory.form import ProductForm, StockAdjustForm
from branchpos.modules.inventory.logic import (
    build_product_payload,
    category_options,
    filter_stock,
    parse_adjustment,
    stock_summary,
)
from branchpos.utils.validators import ValidationError


def _stock(name, qty, *, sku="", category=None, reorder=None, cost=1.0, pid=1, branch=1):
    return StockItem(
        id=pid * 10 + branch,
        branch_id=branch,
        product_id=pid,
        product_name=name,
        product_sku=sku,
        quantity=qty,
        cost_price=cost,
        selling_price=cost * 2,
        reorder_level=reorder,
        category_name=category,
    )


ROWS = [
    _stock("USB Cable", 50, sku="CB-1", category="Accessories", pid=1),
    _stock("Phone X", 3, sku="PX", category="Phones", reorder=5, cost=100.0, pid=2),
    _stock("Charger", 8, sku="CH", category="Accessories", pid=3),
]


# --------------------------- logic ---------------------------

def test_filter_by_term_category_and_low():
    assert [s.product_name for s in filter_stock(ROWS, "px")] == ["Phone X"]
    assert [s.product_name for s in filter_stock(ROWS, category="Accessories")] == ["USB Cable", "Charger"]
    # Charger has no reorder level, so the default threshold applies
    assert [s.product_name for s in filter_stock(ROWS, low_only=True)] == ["Phone X", "Charger"]


def test_category_options_sorted_with_all_first():
    assert category_options(ROWS) == ["all", "Accessories", "Phones"]


def test_stock_summary():
    assert stock_summary(ROWS) == {"count": 3, "low": 2, "value": 50 + 300 + 8}


def test_product_payload():
    p = build_product_payload(
        name=" Phone ", sku="PH", category_id="2", selling_price="9.5", description=" ", requires_serial=True
    )
    assert p == {
        "name": "Phone",
        "sku": "PH",
        "categoryId": 2,
        "sellingPrice": 9.5,
        "description": None,
        "requiresSerial": True,
    }


@pytest.mark.parametrize("kwargs,message", [
    (dict(name="", sku="A", category_id=1, selling_price="1"), "Name, SKU and category are required"),
    (dict(name="A", sku="A", category_id=None, selling_price="1"), "Name, SKU and category are required"),
    (dict(name="A", sku="A", category_id=1, selling_price="-2"), "Selling price must be a number of 0 or more"),
    (dict(name="A", sku="A", category_id=1, selling_price="nan"), "Selling price must be a number of 0 or more"),
])
def test_product_payload_rejects(kwargs, message):
    with pytest.raises(ValidationError, match=message):
        build_product_payload(description="", requires_serial=False, **kwargs)


def test_adjustment_parses_optional_reorder_level():
    assert parse_adjustment(quantity="4", cost_price="1.5", selling_price="3") == {
        "quantity": 4, "cost_price": 1.5, "selling_price": 3.0, "reorder_level": None,
    }
    assert parse_adjustment(quantity="0", cost_price="0", selling_price="0", reorder_level="7")["reorder_level"] == 7


@pytest.mark.parametrize("kwargs,message", [
    (dict(quantity="1.5", cost_price="1", selling_price="1"), "Quantity must be a whole number"),
    (dict(quantity="1", cost_price="x", selling_price="1"), "Cost and selling price"),
    (dict(quantity="1", cost_price="inf", selling_price="1"), "Cost and selling price"),
    (dict(quantity="1", cost_price="1", selling_price="-inf"), "Cost and selling price"),
    (dict(quantity="1", cost_price="1", selling_price="1", reorder_level="-1"), "Reorder level"),
])
def test_adjustment_rejects(kwargs, message):
    with pytest.raises(ValidationError, match=message):
        parse_adjustment(**kwargs)


# --------------------------- dialogs ---------------------------

def test_product_form_inline_error_then_payload(qtbot):
    form = ProductForm(None, categories=[(2, "Phones")])
    qtbot.addWidget(form)

    form.accept()
    assert form.payload() is None
    assert form.lbl_error.text() == "Name, SKU and category are required"

    form.txt_name.setText("Phone X")
    form.txt_sku.setText("PX")
    form.cmb_category.setCurrentIndex(form.cmb_category.findData(2))
    form.txt_price.setText("120")
    form.chk_serial.setChecked(True)
    form.accept()
    assert form.payload()["categoryId"] == 2
    assert form.payload()["requiresSerial"] is True


def test_adjust_form_prefills_current_stock(qtbot):
    form = StockAdjustForm(None, ROWS[1])
    qtbot.addWidget(form)
    assert form.txt_quantity.text() == "3"
    assert form.txt_reorder.text() == "5"
    form.txt_quantity.setText("12")
    form.accept()
    assert form.payload() == {"quantity": 12, "cost_price": 100.0, "selling_price": 200.0, "reorder_level": 5}


# --------------------------- controller ---------------------------

STOCK_1 = [
    {"id": 11, "branchId": 1, "branchName": "Main Street", "productId": 1, "productName": "USB Cable",
     "productSku": "CB-1", "quantity": 50, "costPrice": 1, "sellingPrice": 2, "categoryName": "Accessories"},
]
STOCK_2 = [
    {"id": 22, "branchId": 2, "branchName": "Harbour", "productId": 2, "productName": "Phone X",
     "productSku": "PX", "quantity": 3, "costPrice": 100, "sellingPrice": 150, "categoryName": "Phones"},
]


class _StubDialog:
    def __init__(self, payload, accepted=1):
        self._payload = payload
        self._accepted = accepted

    def exec(self):
        return self._accepted

    def payload(self):
        return self._payload


@pytest.fixture()
def inventory(qtbot, fake_api, client, context, messages):
    client.route("GET", "/stock/branch/1", STOCK_1)
    client.route("GET", "/stock/branch/2", STOCK_2)
    ctl = ctl_mod.InventoryController(fake_api, context)
    qtbot.addWidget(ctl.get_widget())
    return ctl


def test_company_view_merges_branches(inventory):
    assert [s.branch_name for s in inventory.rows] == ["Main Street", "Harbour"]
    assert not inventory.view.btn_adjust.isEnabled()
    assert inventory.view.lbl_summary.text().startswith("2 items · 1 low stock")


def test_category_filter_narrows_rows(inventory):
    cmb = inventory.view.cmb_category
    cmb.setCurrentIndex(cmb.findData("Phones"))
    assert [s.product_name for s in inventory.filtered()] == ["Phone X"]


def test_adjust_needs_a_branch(inventory, client, messages):
    inventory._on_adjust()
    assert messages["info"] == ["Select a branch to adjust stock."]
    assert not [c for c in client.calls if c[0] == "POST"]


def test_adjust_posts_new_levels(inventory, context, branches, client, messages, monkeypatch):
    context.select(branches[0])
    inventory.on_branch_changed()
    assert [s.branch_id for s in inventory.rows] == [1]
    assert inventory.view.btn_adjust.isEnabled()
    stub = _StubDialog({"quantity": 40, "cost_price": 1.0, "selling_price": 2.5, "reorder_level": None})
    monkeypatch.setattr(ctl_mod, "StockAdjustForm", lambda *a, **k: stub)
    client.route("POST", "/stock/1/1", {"id": 11})

    inventory.view.tbl.selectRow(0)
    inventory._on_adjust()

    (_m, _p, _q, body), = client.called("POST", "/stock/1/1")
    assert body == {"quantity": 40, "costPrice": 1.0, "sellingPrice": 2.5}
    assert messages["info"] == ["Stock updated successfully"]


def test_add_product_posts_payload(inventory, client, messages, monkeypatch):
    client.route("GET", "/categories", [{"id": 2, "name": "Phones"}])
    client.route("POST", "/products", {"id": 9})
    payload = {"name": "Tab", "sku": "TB", "categoryId": 2, "sellingPrice": 10.0,
               "description": None, "requiresSerial": False}
    seen = {}

    def _form(parent, *, categories):
        seen["categories"] = categories
        return _StubDialog(payload)

    monkeypatch.setattr(ctl_mod, "ProductForm", _form)
    inventory._on_add_product()

    assert seen["categories"] == [(2, "Phones")]
    assert client.called("POST", "/products")[0][3] == payload
    assert messages["info"] == ["Product created successfully"]


def test_failed_update_shows_server_message(inventory, context, branches, client, messages, monkeypatch, api_error):
    context.select(branches[0])
    monkeypatch.setattr(
        ctl_mod, "StockAdjustForm",
        lambda *a, **k: _StubDialog({"quantity": 1, "cost_price": 1.0, "selling_price": 1.0, "reorder_level": 3}),
    )
    client.route("POST", "/stock/1/1", api_error(400, "Quantity below reserved"))
    inventory.view.tbl.selectRow(0)
    inventory._on_adjust()
    assert messages["error"] == ["Quantity below reserved"]
