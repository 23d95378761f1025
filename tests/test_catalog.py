# branchpos/tests/test_catalog.py
from __future__ import annotations

import pytest

from branchpos.api.products_api import Product
from branchpos.modules.catalog import controller as ctl_mod
from branchpos.modules.catalog.form import CategoryForm
from branchpos.modules.catalog.logic import CATEGORY_NAME_REQUIRED, build_category_payload, product_counts
from branchpos.modules.inventory.form import ProductForm
from branchpos.utils.validators import ValidationError

CATEGORIES_JSON = [
    {"id": 2, "name": "Phones", "description": "Handsets"},
    {"id": 3, "name": "Cables"},
]
PRODUCTS_JSON = [
    {"id": 10, "name": "Phone X", "sku": "PX", "categoryId": 2, "categoryName": "Phones",
     "sellingPrice": 500, "requiresSerial": True},
    {"id": 11, "name": "Phone Y", "sku": "PY", "categoryId": 2, "categoryName": "Phones", "sellingPrice": 300},
    {"id": 12, "name": "USB-C Cable", "sku": "USBC", "categoryId": 3, "categoryName": "Cables",
     "sellingPrice": 9.5, "isActive": False},
]


class _StubDialog:
    def __init__(self, payload):
        self._payload = payload

    def exec(self):
        return 1

    def payload(self):
        return self._payload


# --------------------------- logic / forms ---------------------------

def test_category_payload():
    assert build_category_payload(name=" Phones ", description=" ") == {"name": "Phones", "description": None}
    with pytest.raises(ValidationError, match=CATEGORY_NAME_REQUIRED):
        build_category_payload(name="")


def test_product_counts_skip_uncategorised():
    rows = [Product.from_api(d) for d in PRODUCTS_JSON] + [Product(id=13, name="Loose", sku="L")]
    assert product_counts(rows) == {2: 2, 3: 1}


def test_category_form_title_and_inline_error(qtbot):
    form = CategoryForm(None)
    qtbot.addWidget(form)
    assert form.windowTitle() == "Create Category"
    form.accept()
    assert form.lbl_error.text() == CATEGORY_NAME_REQUIRED


def test_product_form_edit_prefills(qtbot):
    form = ProductForm(None, categories=[(2, "Phones"), (3, "Cables")], initial=Product.from_api(PRODUCTS_JSON[0]))
    qtbot.addWidget(form)
    assert form.windowTitle() == "Edit Product"
    assert form.cmb_category.currentText() == "Phones"
    form.accept()
    assert form.payload() == {
        "name": "Phone X", "sku": "PX", "categoryId": 2, "sellingPrice": 500.0,
        "description": None, "requiresSerial": True,
    }


# --------------------------- controllers ---------------------------

@pytest.fixture()
def routed(client):
    client.route("GET", "/categories", CATEGORIES_JSON)
    client.route("GET", "/products", PRODUCTS_JSON)
    return client


@pytest.fixture()
def categories(qtbot, fake_api, routed, context, messages):
    ctl = ctl_mod.CategoryController(fake_api, context)
    qtbot.addWidget(ctl.get_widget())
    return ctl


@pytest.fixture()
def products(qtbot, fake_api, routed, context, messages):
    ctl = ctl_mod.ProductController(fake_api, context)
    qtbot.addWidget(ctl.get_widget())
    return ctl


def test_category_list_shows_product_counts(categories):
    model = categories.model
    assert model.rowCount() == 2
    assert model.data(model.index(0, 2)) == 2
    assert model.data(model.index(1, 2)) == 1


def test_category_counts_missing_when_products_fail(qtbot, fake_api, client, context, messages, api_error):
    client.route("GET", "/categories", CATEGORIES_JSON)
    client.route("GET", "/products", api_error(500, "down"))
    ctl = ctl_mod.CategoryController(fake_api, context)
    qtbot.addWidget(ctl.get_widget())
    assert [c.name for c in ctl.rows] == ["Phones", "Cables"]
    assert ctl.model.counts == {}
    assert messages["error"] == []


def test_category_delete_failure_message(categories, client, messages):
    client.route("DELETE", "/categories/2", RuntimeError("constraint"))
    categories.view.tbl.selectRow(0)
    categories._on_delete()
    assert messages["error"] == ["Failed to delete category. It may have products assigned."]


def test_category_save_failure_message(categories, client, messages, monkeypatch):
    monkeypatch.setattr(ctl_mod, "CategoryForm", lambda *a, **k: _StubDialog({"name": "Phones"}))
    client.route("POST", "/categories", RuntimeError("duplicate"))
    categories._on_add()
    assert messages["error"] == ["Failed to save category"]
    assert messages["info"] == []


def test_product_search_and_summary(products):
    assert products.view.lbl_summary.text() == "3 products · 1 serialized"
    products.view.txt_search.setText("cables")
    assert [p.sku for p in products.filtered()] == ["USBC"]


def test_product_edit_uses_current_categories(products, client, messages, monkeypatch):
    seen = {}

    def _form(parent, *, categories=(), initial=None):
        seen.update(categories=list(categories), initial=initial)
        return _StubDialog({"name": "Phone Y2", "sku": "PY", "categoryId": 2, "sellingPrice": 280.0})

    monkeypatch.setattr(ctl_mod, "ProductForm", _form)
    products.view.tbl.selectRow(1)
    products._on_edit()

    assert seen["categories"] == [(2, "Phones"), (3, "Cables")]
    assert seen["initial"].sku == "PY"
    assert client.called("PUT", "/products/11")[0][3]["sellingPrice"] == 280.0
    assert messages["info"] == ["Product updated successfully"]


def test_product_delete_confirm_uses_sku(products, client, messages):
    products.view.tbl.selectRow(2)
    products._on_delete()
    assert messages["confirm"] == ["Delete USB-C Cable (USBC)? This cannot be undone."]
    assert client.called("DELETE", "/products/12")
