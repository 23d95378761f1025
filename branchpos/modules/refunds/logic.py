"""
Refund lines built from a looked-up sale.

Every sold item starts selected with its full sold quantity; the quantity can
be lowered but never raised above what was sold.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ...utils.validators import ValidationError, non_empty, try_parse_int

LOOKUP_FAILED = "Receipt not found. Please check the number and try again."
REQUIRED_MESSAGE = "Please look up a receipt, select items, and fill in required fields"


@dataclass
class RefundLine:
    product_id: int
    product_name: str
    unit_price: float
    max_quantity: int
    quantity: int
    selected: bool = True

    @property
    def line_total(self) -> float:
        return self.quantity * self.unit_price if self.selected else 0.0


def lines_from_sale(sale) -> List[RefundLine]:
    return [
        RefundLine(
            product_id=i.product_id,
            product_name=i.product_name,
            unit_price=i.unit_price,
            max_quantity=i.quantity,
            quantity=i.quantity,
        )
        for i in sale.items
    ]


def default_method(sale) -> str:
    return (sale.payment_method or "cash").lower()


def set_quantity(line: RefundLine, value) -> bool:
    """Apply a typed quantity; values above the sold quantity are ignored."""
    ok, qty = try_parse_int(value)
    qty = qty if ok else 0
    if qty < 0 or qty > line.max_quantity:
        return False
    line.quantity = qty
    return True


def refund_total(lines: Iterable[RefundLine]) -> float:
    return sum(l.line_total for l in lines)


def build_refund_payload(
    lines: Iterable[RefundLine],
    *,
    branch_id: Optional[int],
    sale,
    customer_id: Optional[int],
    reason: str,
    method: str,
) -> Dict:
    chosen = [l for l in lines if l.selected and l.quantity > 0]
    if not branch_id or sale is None or not non_empty(reason) or not method or not chosen:
        raise ValidationError(REQUIRED_MESSAGE)
    payload: Dict = {
        "branchId": branch_id,
        "saleId": sale.id,
        "reason": reason.strip(),
        "refundMethod": method.upper(),
        "items": [
            {"productId": l.product_id, "quantity": l.quantity, "unitPrice": l.unit_price}
            for l in chosen
        ],
    }
    if customer_id:
        payload["customerId"] = int(customer_id)
    return payload
