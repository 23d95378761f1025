"""
Inter-branch stock transfers.

Lifecycle on the backend: PENDING -> (approve) APPROVED / (send) IN_TRANSIT
-> (receive) RECEIVED, or REJECTED from PENDING/IN_TRANSIT.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ._base import ResourceApi, num, int_or_none


@dataclass
class TransferItem:
    product_id: int
    product_name: str
    quantity: int
    product_sku: str = ""
    serial_numbers: List[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "TransferItem":
        return cls(
            product_id=d.get("productId"),
            product_name=d.get("productName") or "",
            product_sku=d.get("productSku") or "",
            quantity=int(num(d.get("quantity"))),
            serial_numbers=list(d.get("serialNumbers") or []),
        )


@dataclass
class Transfer:
    id: int
    transfer_number: str
    from_branch_id: Optional[int] = None
    from_branch_name: Optional[str] = None
    to_branch_id: Optional[int] = None
    to_branch_name: Optional[str] = None
    requested_by_name: Optional[str] = None
    approved_by_name: Optional[str] = None
    transfer_date: Optional[str] = None
    status: str = "PENDING"
    notes: Optional[str] = None
    created_at: Optional[str] = None
    items: List[TransferItem] = field(default_factory=list)

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "Transfer":
        return cls(
            id=d.get("id"),
            transfer_number=d.get("transferNumber") or "",
            from_branch_id=int_or_none(d.get("fromBranchId")),
            from_branch_name=d.get("fromBranchName"),
            to_branch_id=int_or_none(d.get("toBranchId")),
            to_branch_name=d.get("toBranchName"),
            requested_by_name=d.get("requestedByName"),
            approved_by_name=d.get("approvedByName"),
            transfer_date=d.get("transferDate"),
            status=(d.get("status") or "PENDING").upper(),
            notes=d.get("notes"),
            created_at=d.get("createdAt"),
            items=[TransferItem.from_api(i) for i in d.get("items") or []],
        )


class TransferApi(ResourceApi):
    """/transfers"""

    def from_branch(self, branch_id: int) -> List[Transfer]:
        return self._list(f"/transfers/from/{branch_id}", Transfer.from_api)

    def to_branch(self, branch_id: int) -> List[Transfer]:
        return self._list(f"/transfers/to/{branch_id}", Transfer.from_api)

    def pending(self, branch_id: int) -> List[Transfer]:
        return self._list(f"/transfers/pending/{branch_id}", Transfer.from_api)

    def create(self, from_branch_id: int, to_branch_id: int, items: List[Dict[str, Any]], notes: Optional[str] = None) -> Transfer:
        payload = {
            "fromBranchId": from_branch_id,
            "toBranchId": to_branch_id,
            "notes": notes,
            "items": items,
        }
        return self._one(self.client.post("/transfers", json=payload), Transfer.from_api)

    def approve(self, transfer_id: int) -> Transfer:
        return self._one(self.client.post(f"/transfers/{transfer_id}/approve"), Transfer.from_api)

    def reject(self, transfer_id: int) -> Transfer:
        return self._one(self.client.post(f"/transfers/{transfer_id}/reject"), Transfer.from_api)

    def send(self, transfer_id: int) -> Transfer:
        return self._one(self.client.post(f"/transfers/{transfer_id}/send"), Transfer.from_api)

    def receive(self, transfer_id: int) -> Transfer:
        return self._one(self.client.post(f"/transfers/{transfer_id}/receive"), Transfer.from_api)
