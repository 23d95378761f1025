"""
Supplier returns and customer refunds.

Both go through an approval step (PENDING -> APPROVED/REJECTED) handled by
the backend.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ._base import ResourceApi, num, int_or_none


@dataclass
class ReturnItem:
    product_id: int
    product_name: str
    quantity: int
    unit_cost: float = 0.0
    total_cost: float = 0.0
    reason: Optional[str] = None

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "ReturnItem":
        return cls(
            product_id=d.get("productId"),
            product_name=d.get("productName") or "",
            quantity=int(num(d.get("quantity"))),
            unit_cost=num(d.get("unitCost")),
            total_cost=num(d.get("totalCost")),
            reason=d.get("reason"),
        )


@dataclass
class SupplierReturn:
    id: int
    return_number: str
    branch_id: Optional[int] = None
    branch_name: Optional[str] = None
    supplier_id: Optional[int] = None
    supplier_name: Optional[str] = None
    purchase_id: Optional[int] = None
    purchase_number: Optional[str] = None
    user_name: Optional[str] = None
    return_date: Optional[str] = None
    total_amount: float = 0.0
    status: str = "PENDING"
    reason: Optional[str] = None
    created_at: Optional[str] = None
    items: List[ReturnItem] = field(default_factory=list)

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "SupplierReturn":
        return cls(
            id=d.get("id"),
            return_number=d.get("returnNumber") or "",
            branch_id=int_or_none(d.get("branchId")),
            branch_name=d.get("branchName"),
            supplier_id=int_or_none(d.get("supplierId")),
            supplier_name=d.get("supplierName"),
            purchase_id=int_or_none(d.get("purchaseId")),
            purchase_number=d.get("purchaseNumber"),
            user_name=d.get("userName"),
            return_date=d.get("returnDate"),
            total_amount=num(d.get("totalAmount")),
            status=(d.get("status") or "PENDING").upper(),
            reason=d.get("reason"),
            created_at=d.get("createdAt"),
            items=[ReturnItem.from_api(i) for i in d.get("items") or []],
        )


@dataclass
class RefundItem:
    product_id: int
    product_name: str
    quantity: int
    unit_price: float = 0.0
    total_price: float = 0.0

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "RefundItem":
        return cls(
            product_id=d.get("productId"),
            product_name=d.get("productName") or "",
            quantity=int(num(d.get("quantity"))),
            unit_price=num(d.get("unitPrice")),
            total_price=num(d.get("totalPrice")),
        )


@dataclass
class Refund:
    id: int
    refund_number: str
    branch_id: Optional[int] = None
    branch_name: Optional[str] = None
    customer_id: Optional[int] = None
    customer_name: Optional[str] = None
    sale_id: Optional[int] = None
    sale_number: Optional[str] = None
    user_name: Optional[str] = None
    refund_date: Optional[str] = None
    total_amount: float = 0.0
    refund_method: Optional[str] = None
    status: str = "PENDING"
    reason: Optional[str] = None
    created_at: Optional[str] = None
    items: List[RefundItem] = field(default_factory=list)

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "Refund":
        return cls(
            id=d.get("id"),
            refund_number=d.get("refundNumber") or "",
            branch_id=int_or_none(d.get("branchId")),
            branch_name=d.get("branchName"),
            customer_id=int_or_none(d.get("customerId")),
            customer_name=d.get("customerName"),
            sale_id=int_or_none(d.get("saleId")),
            sale_number=d.get("saleNumber"),
            user_name=d.get("userName"),
            refund_date=d.get("refundDate"),
            total_amount=num(d.get("totalAmount")),
            refund_method=d.get("refundMethod"),
            status=(d.get("status") or "PENDING").upper(),
            reason=d.get("reason"),
            created_at=d.get("createdAt"),
            items=[RefundItem.from_api(i) for i in d.get("items") or []],
        )


class ReturnApi(ResourceApi):
    """/returns"""

    def list_all(self) -> List[SupplierReturn]:
        return self._list("/returns", SupplierReturn.from_api)

    def by_branch(self, branch_id: int) -> List[SupplierReturn]:
        return self._list(f"/returns/branch/{branch_id}", SupplierReturn.from_api)

    def create(self, payload: Dict[str, Any]) -> SupplierReturn:
        return self._one(self.client.post("/returns", json=payload), SupplierReturn.from_api)

    def approve(self, return_id: int) -> SupplierReturn:
        return self._one(self.client.post(f"/returns/{return_id}/approve"), SupplierReturn.from_api)

    def reject(self, return_id: int) -> SupplierReturn:
        return self._one(self.client.post(f"/returns/{return_id}/reject"), SupplierReturn.from_api)


class RefundApi(ResourceApi):
    """/refunds"""

    def list_all(self) -> List[Refund]:
        return self._list("/refunds", Refund.from_api)

    def by_branch(self, branch_id: int) -> List[Refund]:
        return self._list(f"/refunds/branch/{branch_id}", Refund.from_api)

    def create(self, payload: Dict[str, Any]) -> Refund:
        return self._one(self.client.post("/refunds", json=payload), Refund.from_api)

    def approve(self, refund_id: int) -> Refund:
        return self._one(self.client.post(f"/refunds/{refund_id}/approve"), Refund.from_api)

    def reject(self, refund_id: int) -> Refund:
        return self._one(self.client.post(f"/refunds/{refund_id}/reject"), Refund.from_api)
