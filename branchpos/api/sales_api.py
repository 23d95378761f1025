"""
Sales endpoints.

A sale is created from the POS cart payload (see modules.pos.cart) and is
read back for history, receipts and refund lookups.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ._base import ResourceApi, num, int_or_none


@dataclass
class SaleItem:
    product_id: int
    product_name: str
    quantity: int
    unit_price: float
    product_sku: str = ""
    tax_amount: float = 0.0
    total_price: float = 0.0
    serial_numbers: List[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "SaleItem":
        return cls(
            product_id=d.get("productId"),
            product_name=d.get("productName") or "",
            product_sku=d.get("productSku") or "",
            quantity=int(num(d.get("quantity"))),
            unit_price=num(d.get("unitPrice")),
            tax_amount=num(d.get("taxAmount")),
            total_price=num(d.get("totalPrice")),
            serial_numbers=list(d.get("serialNumbers") or []),
        )


@dataclass
class Sale:
    id: int
    sale_number: str
    branch_id: Optional[int] = None
    branch_name: Optional[str] = None
    customer_id: Optional[int] = None
    customer_name: Optional[str] = None
    user_name: Optional[str] = None
    sale_date: Optional[str] = None
    total_amount: float = 0.0
    tax_amount: float = 0.0
    discount_amount: float = 0.0
    grand_total: float = 0.0
    amount_paid: float = 0.0
    payment_method: Optional[str] = None
    payment_status: Optional[str] = None
    refund_status: str = "NONE"
    refunded_amount: float = 0.0
    notes: Optional[str] = None
    created_at: Optional[str] = None
    items: List[SaleItem] = field(default_factory=list)

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "Sale":
        return cls(
            id=d.get("id"),
            sale_number=d.get("saleNumber") or "",
            branch_id=int_or_none(d.get("branchId")),
            branch_name=d.get("branchName"),
            customer_id=int_or_none(d.get("customerId")),
            customer_name=d.get("customerName"),
            user_name=d.get("userName"),
            sale_date=d.get("saleDate"),
            total_amount=num(d.get("totalAmount")),
            tax_amount=num(d.get("taxAmount")),
            discount_amount=num(d.get("discountAmount")),
            grand_total=num(d.get("grandTotal")),
            amount_paid=num(d.get("amountPaid")),
            payment_method=d.get("paymentMethod"),
            payment_status=d.get("paymentStatus"),
            refund_status=d.get("refundStatus") or "NONE",
            refunded_amount=num(d.get("refundedAmount")),
            notes=d.get("notes"),
            created_at=d.get("createdAt"),
            items=[SaleItem.from_api(i) for i in d.get("items") or []],
        )

    @property
    def is_refunded(self) -> bool:
        return self.refund_status in ("PARTIAL", "FULL")


class SalesApi(ResourceApi):
    """/sales"""

    def by_branch(self, branch_id: int) -> List[Sale]:
        return self._list(f"/sales/branch/{branch_id}", Sale.from_api)

    def get(self, sale_id: int) -> Sale:
        return self._one(self.client.get(f"/sales/{sale_id}"), Sale.from_api)

    def by_date_range(self, branch_id: int, start_date: str, end_date: str) -> List[Sale]:
        return self._list(
            f"/sales/branch/{branch_id}/range",
            Sale.from_api,
            params={"startDate": start_date, "endDate": end_date},
        )

    def create(self, payload: Dict[str, Any]) -> Sale:
        return self._one(self.client.post("/sales", json=payload), Sale.from_api)

    def refund(self, sale_id: int) -> Sale:
        return self._one(self.client.post(f"/sales/{sale_id}/refund"), Sale.from_api)

    def by_sale_number(self, sale_number: str) -> Sale:
        return self._one(self.client.get(f"/sales/number/{sale_number.strip()}"), Sale.from_api)
