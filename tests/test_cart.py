# branchpos/tests/test_cart.py
from __future__ import annotations

import pytest

from branchpos.api.parties_api import Customer
from branchpos.api.stock_api import StockItem
from branchpos.modules.pos.cart import (
    ADDED,
    NEEDS_SERIALS,
    Cart,
    CartError,
    category_options,
    filter_customers,
    filter_products,
    sellable,
)


def _stock(pid, qty=5, price=10.0, serial=False, name=None, category=None, sku=None):
    return StockItem(
        id=100 + pid,
        branch_id=1,
        product_id=pid,
        product_name=name or f"Product {pid}",
        product_sku=sku or f"SKU-{pid}",
        quantity=qty,
        selling_price=price,
        category_name=category,
        requires_serial=serial,
    )


def test_add_merges_lines_in_first_added_order():
    cart = Cart()
    a, b = _stock(1), _stock(2)
    assert cart.add(a) == ADDED
    cart.add(b)
    cart.add(a)
    assert [(ln.product_id, ln.quantity) for ln in cart.lines] == [(1, 2), (2, 1)]
    assert cart.total == 30.0
    assert cart.item_count == 3


def test_add_refuses_past_stock_ceiling():
    cart = Cart()
    s = _stock(1, qty=2)
    cart.add(s)
    cart.add(s)
    with pytest.raises(CartError, match="Only 2 items in stock"):
        cart.add(s)
    assert cart.line(1).quantity == 2


def test_serialized_add_defers_to_serial_selection():
    cart = Cart()
    assert cart.add(_stock(1, serial=True)) == NEEDS_SERIALS
    assert cart.is_empty()


def test_set_serials_replaces_selection_and_sets_quantity():
    cart = Cart()
    s = _stock(1, serial=True)
    cart.set_serials(s, ["A", "B", "C"])
    line = cart.set_serials(s, ["C"])
    assert len(cart) == 1
    assert line.serial_numbers == ["C"]
    assert line.quantity == 1
    with pytest.raises(CartError):
        cart.set_serials(s, [])


def test_update_quantity_rules():
    cart = Cart()
    s = _stock(1, qty=3)
    cart.add(s)
    cart.update_quantity(1, +2)
    assert cart.line(1).quantity == 3
    with pytest.raises(CartError):
        cart.update_quantity(1, +1)
    # dropping to zero or below leaves the line as it is
    cart.update_quantity(1, -3)
    assert cart.line(1).quantity == 3
    cart.update_quantity(99, +1)  # unknown product is ignored


def test_serialized_quantity_only_changes_through_serials():
    cart = Cart()
    cart.set_serials(_stock(1, serial=True), ["A"])
    with pytest.raises(CartError):
        cart.update_quantity(1, +1)


def test_price_override_ignores_negative():
    cart = Cart()
    cart.add(_stock(1, price=10.0))
    cart.update_price(1, 7.5)
    cart.update_price(1, -1)
    assert cart.line(1).price == 7.5
    assert cart.subtotal == 7.5


def test_remove_and_clear():
    cart = Cart()
    cart.add(_stock(1))
    cart.add(_stock(2))
    cart.quick_customer_name = "Sam"
    cart.remove(1)
    assert [ln.product_id for ln in cart.lines] == [2]
    cart.clear()
    assert cart.is_empty() and cart.quick_customer_name == "" and cart.customer is None


def test_checkout_payload_with_customer_and_serials():
    cart = Cart()
    cart.add(_stock(1, price=4.0))
    cart.set_serials(_stock(2, serial=True, price=99.0), ["SN1", "SN2"])
    cart.customer = Customer(id=7, name="Ana")
    cart.quick_customer_name = "ignored"
    payload = cart.checkout_payload(3, "mobile_money")
    assert payload == {
        "branchId": 3,
        "paymentMethod": "MOBILE_MONEY",
        "customerId": 7,
        "items": [
            {"productId": 1, "quantity": 1, "unitPrice": 4.0},
            {"productId": 2, "quantity": 2, "unitPrice": 99.0, "serialNumbers": ["SN1", "SN2"]},
        ],
    }


def test_checkout_payload_walk_in_quick_name():
    cart = Cart()
    cart.add(_stock(1))
    cart.quick_customer_name = "  Lee  "
    assert cart.checkout_payload(1, "cash")["customerName"] == "Lee"
    cart.quick_customer_name = "   "
    assert "customerName" not in cart.checkout_payload(1, "cash")


def test_catalog_filters():
    items = [
        _stock(1, qty=0, name="Cable", category="Accessories"),
        _stock(2, name="Phone X", category="Phones", sku="PX-1"),
        _stock(3, name="Case", category="Accessories"),
    ]
    assert [s.product_id for s in sellable(items)] == [2, 3]
    assert category_options(items) == ["all", "Accessories", "Phones"]
    assert [s.product_id for s in filter_products(items, "px")] == [2]
    assert [s.product_id for s in filter_products(items, "", "Accessories")] == [1, 3]


def test_customer_filter_matches_name_or_phone():
    people = [Customer(id=1, name="Ana", phone="0711"), Customer(id=2, name="Ben")]
    assert [c.id for c in filter_customers(people, "an")] == [1]
    assert [c.id for c in filter_customers(people, "071")] == [1]
    assert [c.id for c in filter_customers(people, "")] == [1, 2]
