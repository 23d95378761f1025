"""
Payload builders for purchase orders.

Kept free of Qt so the dialogs and tests share the same rules.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from ...utils.validators import ValidationError, try_parse_float, try_parse_int


def build_purchase_items(rows: Iterable[dict], supplier_id: Optional[int]) -> List[Dict]:
    """
    Turn raw item rows ({product_id, quantity, unit_cost}) into the purchase
    items payload.

    - any negative unit cost rejects the whole order
    - rows need a product and an integer quantity above 0; others are dropped
    - a blank or unparsable unit cost is left out of the item
    """
    parsed = []
    for r in rows:
        ok_q, qty = try_parse_int(r.get("quantity"))
        ok_c, cost = try_parse_float(r.get("unit_cost"))
        parsed.append((r.get("product_id"), qty if ok_q else None, cost if ok_c else None))

    if any(cost is not None and cost < 0 for _, _, cost in parsed):
        raise ValidationError("Unit cost cannot be negative")

    valid = [(pid, qty, cost) for pid, qty, cost in parsed if pid and qty is not None and qty > 0]
    if not supplier_id or not valid:
        raise ValidationError("Please select a supplier and add at least one item with quantity above 0")

    items = []
    for pid, qty, cost in valid:
        item: Dict = {"productId": int(pid), "quantity": qty}
        if cost is not None:
            item["unitCost"] = cost
        items.append(item)
    return items


def serial_slots(purchase, serialized_product_ids: Iterable[int]) -> Dict[int, int]:
    """product_id -> number of serials to capture (the ordered quantity)."""
    ids = set(serialized_product_ids)
    return {i.product_id: i.quantity for i in purchase.items if i.product_id in ids}


def validate_serials(purchase, serial_entries: Mapping[int, Sequence[str]]) -> None:
    """Every slot filled and no duplicates within a product."""
    names = {i.product_id: (i.product_name, i.quantity) for i in purchase.items}
    for pid, serials in serial_entries.items():
        name, qty = names.get(pid, ("", len(serials)))
        if any(not (s or "").strip() for s in serials):
            raise ValidationError(f"Please enter all {qty} serial numbers for {name}")
        cleaned = [s.strip() for s in serials]
        if len(set(cleaned)) != len(cleaned):
            raise ValidationError(f"Duplicate serial numbers found for {name}")


def build_receive_items(
    purchase,
    *,
    update_prices: bool,
    price_updates: Mapping[int, str],
    serial_entries: Mapping[int, Sequence[str]],
) -> Optional[List[Dict]]:
    """
    Items for the receive call, or None when neither price updates nor
    serialized products are involved (the call then goes out without a body).
    """
    validate_serials(purchase, serial_entries)
    if not update_prices and not serial_entries:
        return None

    items = []
    for it in purchase.items:
        entry: Dict = {"productId": it.product_id}
        if update_prices:
            ok, price = try_parse_float(price_updates.get(it.product_id))
            if ok:
                entry["sellingPrice"] = price
        serials = [s.strip() for s in serial_entries.get(it.product_id, []) if s and s.strip()]
        if serials:
            entry["serialNumbers"] = serials
        items.append(entry)
    return items


def purchase_summary(purchases) -> dict:
    return {
        "count": len(purchases),
        "pending": sum(1 for p in purchases if p.is_pending),
        "received": sum(1 for p in purchases if p.status == "RECEIVED"),
        "total_value": sum(p.total_amount for p in purchases),
    }
