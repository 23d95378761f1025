"""
Catalog endpoints: categories and products.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ._base import ResourceApi, num, int_or_none


@dataclass
class Category:
    id: int
    name: str
    description: Optional[str] = None
    parent_id: Optional[int] = None
    parent_name: Optional[str] = None
    is_active: bool = True

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "Category":
        return cls(
            id=d.get("id"),
            name=d.get("name") or "",
            description=d.get("description"),
            parent_id=int_or_none(d.get("parentId")),
            parent_name=d.get("parentName"),
            is_active=d.get("isActive", True) is not False,
        )


@dataclass
class Product:
    id: int
    name: str
    sku: str
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    description: Optional[str] = None
    unit_of_measure: Optional[str] = None
    selling_price: float = 0.0
    tax_rate: float = 0.0
    reorder_level: Optional[int] = None
    requires_serial: bool = False
    is_active: bool = True

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "Product":
        return cls(
            id=d.get("id"),
            name=d.get("name") or "",
            sku=d.get("sku") or "",
            category_id=int_or_none(d.get("categoryId")),
            category_name=d.get("categoryName"),
            description=d.get("description"),
            unit_of_measure=d.get("unitOfMeasure"),
            selling_price=num(d.get("sellingPrice")),
            tax_rate=num(d.get("taxRate")),
            reorder_level=int_or_none(d.get("reorderLevel")),
            requires_serial=bool(d.get("requiresSerial")),
            is_active=d.get("isActive", True) is not False,
        )


class CategoryApi(ResourceApi):
    """/categories"""

    def list_all(self) -> List[Category]:
        return self._list("/categories", Category.from_api)

    def create(self, payload: Dict[str, Any]) -> Category:
        return self._one(self.client.post("/categories", json=payload), Category.from_api)

    def update(self, category_id: int, payload: Dict[str, Any]) -> Category:
        return self._one(self.client.put(f"/categories/{category_id}", json=payload), Category.from_api)

    def delete(self, category_id: int) -> None:
        self.client.delete(f"/categories/{category_id}")


class ProductApi(ResourceApi):
    """/products"""

    def list_all(self) -> List[Product]:
        return self._list("/products", Product.from_api)

    def create(self, payload: Dict[str, Any]) -> Product:
        return self._one(self.client.post("/products", json=payload), Product.from_api)

    def update(self, product_id: int, payload: Dict[str, Any]) -> Product:
        return self._one(self.client.put(f"/products/{product_id}", json=payload), Product.from_api)

    def delete(self, product_id: int) -> None:
        self.client.delete(f"/products/{product_id}")
