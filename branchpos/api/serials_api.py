"""
Serial-number tracking for serialized products.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import quote

from ._base import ResourceApi, int_or_none


@dataclass
class SerialNumber:
    id: int
    serial_number: str
    status: str
    product_id: Optional[int] = None
    product_name: str = ""
    product_sku: str = ""
    stock_item_id: Optional[int] = None
    purchase_number: Optional[str] = None
    sale_number: Optional[str] = None
    branch_id: Optional[int] = None
    branch_name: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "SerialNumber":
        return cls(
            id=d.get("id"),
            serial_number=d.get("serialNumber") or "",
            status=(d.get("status") or "IN_STOCK").upper(),
            product_id=int_or_none(d.get("productId")),
            product_name=d.get("productName") or "",
            product_sku=d.get("productSku") or "",
            stock_item_id=int_or_none(d.get("stockItemId")),
            purchase_number=d.get("purchaseNumber"),
            sale_number=d.get("saleNumber"),
            branch_id=int_or_none(d.get("branchId")),
            branch_name=d.get("branchName"),
            notes=d.get("notes"),
            created_at=d.get("createdAt"),
            updated_at=d.get("updatedAt"),
        )


@dataclass
class SerialStats:
    total: int = 0
    in_stock: int = 0
    sold: int = 0
    transferred: int = 0
    returned: int = 0
    defective: int = 0

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "SerialStats":
        return cls(
            total=int(d.get("total") or 0),
            in_stock=int(d.get("inStock") or 0),
            sold=int(d.get("sold") or 0),
            transferred=int(d.get("transferred") or 0),
            returned=int(d.get("returned") or 0),
            defective=int(d.get("defective") or 0),
        )

    @classmethod
    def combine(cls, items: Iterable["SerialStats"]) -> "SerialStats":
        """Field-wise sum."""
        out = cls()
        for s in items:
            for f in fields(cls):
                setattr(out, f.name, getattr(out, f.name) + getattr(s, f.name))
        return out


class SerialApi(ResourceApi):
    """/serial-numbers"""

    def by_branch(self, branch_id: int) -> List[SerialNumber]:
        return self._list(f"/serial-numbers/branch/{branch_id}", SerialNumber.from_api)

    def all_by_branch(self, branch_id: int, status: Optional[str] = None) -> List[SerialNumber]:
        return self._list(
            f"/serial-numbers/branch/{branch_id}/all",
            SerialNumber.from_api,
            params={"status": status} if status else None,
        )

    def available(self, product_id: int, branch_id: int) -> List[SerialNumber]:
        return self._list(
            "/serial-numbers/available",
            SerialNumber.from_api,
            params={"productId": product_id, "branchId": branch_id},
        )

    def lookup(self, serial_number: str) -> SerialNumber:
        path = f"/serial-numbers/lookup/{quote(serial_number.strip(), safe='')}"
        return self._one(self.client.get(path), SerialNumber.from_api)

    def update_status(self, serial_id: int, status: str, notes: Optional[str] = None) -> SerialNumber:
        params = {"status": status}
        if notes:
            params["notes"] = notes
        return self._one(self.client.put(f"/serial-numbers/{serial_id}/status", params=params), SerialNumber.from_api)

    def stats(self, branch_id: int) -> SerialStats:
        return self._one(self.client.get(f"/serial-numbers/stats/{branch_id}"), SerialStats.from_api)
