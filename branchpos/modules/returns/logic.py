"""
Supplier return payload rules.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from ...utils.validators import ValidationError, float_or_zero, non_empty, try_parse_float, try_parse_int

REQUIRED_MESSAGE = "Please fill in all required fields"


def return_total(rows: Iterable[dict]) -> float:
    """Running total; unparsable quantities or costs count as 0."""
    total = 0.0
    for r in rows:
        ok, qty = try_parse_int(r.get("quantity"))
        total += (qty if ok else 0) * float_or_zero(r.get("unit_cost"))
    return total


def build_return_payload(
    rows: Iterable[dict],
    *,
    branch_id: Optional[int],
    supplier_id: Optional[int],
    reason: str,
) -> Dict:
    rows = list(rows)
    if not branch_id or not supplier_id or not non_empty(reason) or not rows:
        raise ValidationError(REQUIRED_MESSAGE)

    items: List[Dict] = []
    for r in rows:
        ok_q, qty = try_parse_int(r.get("quantity"))
        ok_c, cost = try_parse_float(r.get("unit_cost"))
        if not r.get("product_id") or not ok_q or not ok_c:
            raise ValidationError(REQUIRED_MESSAGE)
        if qty < 1:
            raise ValidationError("Quantity must be at least 1")
        if cost < 0:
            raise ValidationError("Unit cost cannot be negative")
        items.append({"productId": int(r["product_id"]), "quantity": qty, "unitCost": cost})

    return {
        "branchId": branch_id,
        "supplierId": int(supplier_id),
        "reason": reason.strip(),
        "items": items,
    }
