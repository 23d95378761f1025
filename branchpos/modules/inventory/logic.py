from __future__ import annotations

from typing import Iterable, List

from ...utils.validators import ValidationError, non_empty, try_parse_float, try_parse_int


def filter_stock(items: Iterable, term: str = "", category: str = "all", low_only: bool = False) -> list:
    term = (term or "").strip().lower()
    out = []
    for s in items:
        if term and term not in s.product_name.lower() and term not in (s.product_sku or "").lower():
            continue
        if category != "all" and (s.category_name or "") != category:
            continue
        if low_only and not s.is_low:
            continue
        out.append(s)
    return out


def category_options(items: Iterable) -> List[str]:
    return ["all"] + sorted({s.category_name for s in items if s.category_name})


def stock_summary(items) -> dict:
    return {
        "count": len(items),
        "low": sum(1 for s in items if s.is_low),
        "value": sum(s.value for s in items),
    }


def build_product_payload(*, name: str, sku: str, category_id, selling_price: str, description: str, requires_serial: bool) -> dict:
    if not non_empty(name) or not non_empty(sku) or not category_id:
        raise ValidationError("Name, SKU and category are required")
    ok, price = try_parse_float(selling_price)
    if not ok or price < 0:
        raise ValidationError("Selling price must be a number of 0 or more")
    return {
        "name": name.strip(),
        "sku": sku.strip(),
        "categoryId": int(category_id),
        "sellingPrice": price,
        "description": (description or "").strip() or None,
        "requiresSerial": bool(requires_serial),
    }


def parse_adjustment(*, quantity: str, cost_price: str, selling_price: str, reorder_level: str = "") -> dict:
    ok_q, qty = try_parse_int(quantity)
    if not ok_q or qty < 0:
        raise ValidationError("Quantity must be a whole number of 0 or more")
    ok_c, cost = try_parse_float(cost_price)
    ok_s, sell = try_parse_float(selling_price)
    if not ok_c or not ok_s or cost < 0 or sell < 0:
        raise ValidationError("Cost and selling price must be numbers of 0 or more")
    level = None
    if non_empty(reorder_level):
        ok_r, level = try_parse_int(reorder_level)
        if not ok_r or level < 0:
            raise ValidationError("Reorder level must be a whole number of 0 or more")
    return {"quantity": qty, "cost_price": cost, "selling_price": sell, "reorder_level": level}
