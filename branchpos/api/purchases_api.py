"""
Purchase orders: create against a supplier, then receive into stock.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ._base import ResourceApi, num, int_or_none
from ..constants import PENDING_PURCHASE_STATUSES


@dataclass
class PurchaseItem:
    product_id: int
    product_name: str
    quantity: int
    unit_cost: float = 0.0
    product_sku: str = ""
    selling_price: Optional[float] = None
    total_cost: float = 0.0

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "PurchaseItem":
        sp = d.get("sellingPrice")
        return cls(
            product_id=d.get("productId"),
            product_name=d.get("productName") or "",
            product_sku=d.get("productSku") or "",
            quantity=int(num(d.get("quantity"))),
            unit_cost=num(d.get("unitCost")),
            selling_price=None if sp is None else num(sp),
            total_cost=num(d.get("totalCost")),
        )


@dataclass
class Purchase:
    id: int
    purchase_number: str
    branch_id: Optional[int] = None
    branch_name: Optional[str] = None
    supplier_id: Optional[int] = None
    supplier_name: Optional[str] = None
    user_name: Optional[str] = None
    purchase_date: Optional[str] = None
    total_amount: float = 0.0
    status: str = ""
    notes: Optional[str] = None
    items: List[PurchaseItem] = field(default_factory=list)

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "Purchase":
        return cls(
            id=d.get("id"),
            purchase_number=d.get("purchaseNumber") or "",
            branch_id=int_or_none(d.get("branchId")),
            branch_name=d.get("branchName"),
            supplier_id=int_or_none(d.get("supplierId")),
            supplier_name=d.get("supplierName"),
            user_name=d.get("userName"),
            purchase_date=d.get("purchaseDate"),
            total_amount=num(d.get("totalAmount")),
            status=(d.get("status") or "").upper(),
            notes=d.get("notes"),
            items=[PurchaseItem.from_api(i) for i in d.get("items") or []],
        )

    @property
    def is_pending(self) -> bool:
        return self.status in PENDING_PURCHASE_STATUSES

    @property
    def can_receive(self) -> bool:
        return self.status != "RECEIVED"


class PurchaseApi(ResourceApi):
    """/purchases"""

    def by_branch(self, branch_id: int) -> List[Purchase]:
        return self._list(f"/purchases/branch/{branch_id}", Purchase.from_api)

    def create(
        self,
        branch_id: int,
        supplier_id: int,
        items: List[Dict[str, Any]],
        notes: Optional[str] = None,
        payment_method: str = "CASH",
    ) -> Purchase:
        payload = {
            "branchId": branch_id,
            "supplierId": supplier_id,
            "paymentMethod": payment_method or "CASH",
            "notes": notes,
            "items": items,
        }
        return self._one(self.client.post("/purchases", json=payload), Purchase.from_api)

    def receive(self, purchase_id: int, items: Optional[List[Dict[str, Any]]] = None) -> Purchase:
        body = {"items": items} if items else None
        return self._one(self.client.post(f"/purchases/{purchase_id}/receive", json=body), Purchase.from_api)
