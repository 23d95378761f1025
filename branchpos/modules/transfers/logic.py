"""
Transfer rules shared by the dialog, the controller and the tests.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional

from ...utils.validators import ValidationError, try_parse_int

OUTGOING = "outgoing"
INCOMING = "incoming"
PENDING = "pending"

APPROVE = "approve"
REJECT = "reject"
SEND = "send"
RECEIVE = "receive"


def available_actions(transfer, direction: str) -> List[str]:
    """Actions offered for a transfer shown on the given tab."""
    status = (transfer.status or "").upper()
    if status == "PENDING":
        return [APPROVE, REJECT, SEND]
    if status == "IN_TRANSIT":
        actions = [REJECT]
        if direction == INCOMING:
            actions.insert(0, RECEIVE)
        return actions
    return []


def build_transfer_items(
    rows: Iterable[dict],
    *,
    from_branch_id: Optional[int],
    to_branch_id: Optional[int],
    stock_by_product: Mapping[int, int],
    names: Optional[Mapping[int, str]] = None,
) -> List[Dict]:
    """
    Validate the create form and return the transfer items payload.

    Rows without a product or quantity are skipped; quantities are integers
    of at least 1 and may not exceed the source branch stock.
    """
    if from_branch_id is None:
        raise ValidationError("Please select a source branch")
    if to_branch_id is None:
        raise ValidationError("Please select a destination branch")
    if to_branch_id == from_branch_id:
        raise ValidationError("Source and destination branches must be different")

    items: List[Dict] = []
    for r in rows:
        pid = r.get("product_id")
        raw_qty = (r.get("quantity") or "").strip()
        if not pid or not raw_qty:
            continue
        ok, qty = try_parse_int(raw_qty)
        name = (names or {}).get(pid, f"product {pid}")
        if not ok or qty < 1:
            raise ValidationError(f"Quantity for {name} must be a whole number of at least 1")
        available = stock_by_product.get(pid, 0)
        if qty > available:
            raise ValidationError(f"Only {available} of {name} in stock at the source branch")
        items.append({"productId": int(pid), "quantity": qty})

    if not items:
        raise ValidationError("Please add at least one item")
    return items
