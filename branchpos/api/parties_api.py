"""
Customers and suppliers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ._base import ResourceApi


@dataclass
class Customer:
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    loyalty_points: int = 0
    is_active: bool = True

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "Customer":
        return cls(
            id=d.get("id"),
            name=d.get("name") or "",
            email=d.get("email"),
            phone=d.get("phone"),
            address=d.get("address"),
            loyalty_points=int(d.get("loyaltyPoints") or 0),
            is_active=d.get("isActive", True) is not False,
        )


@dataclass
class Supplier:
    id: int
    name: str
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    is_active: bool = True

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "Supplier":
        return cls(
            id=d.get("id"),
            name=d.get("name") or "",
            contact_person=d.get("contactPerson"),
            email=d.get("email"),
            phone=d.get("phone"),
            address=d.get("address"),
            is_active=d.get("isActive", True) is not False,
        )


class CustomerApi(ResourceApi):
    """/customers"""

    def list_all(self) -> List[Customer]:
        return self._list("/customers", Customer.from_api)

    def create(self, payload: Dict[str, Any]) -> Customer:
        return self._one(self.client.post("/customers", json=payload), Customer.from_api)

    def update(self, customer_id: int, payload: Dict[str, Any]) -> Customer:
        return self._one(self.client.put(f"/customers/{customer_id}", json=payload), Customer.from_api)

    def delete(self, customer_id: int) -> None:
        self.client.delete(f"/customers/{customer_id}")


class SupplierApi(ResourceApi):
    """/suppliers"""

    def list_all(self) -> List[Supplier]:
        return self._list("/suppliers", Supplier.from_api)

    def create(self, payload: Dict[str, Any]) -> Supplier:
        return self._one(self.client.post("/suppliers", json=payload), Supplier.from_api)

    def update(self, supplier_id: int, payload: Dict[str, Any]) -> Supplier:
        return self._one(self.client.put(f"/suppliers/{supplier_id}", json=payload), Supplier.from_api)

    def delete(self, supplier_id: int) -> None:
        self.client.delete(f"/suppliers/{supplier_id}")
