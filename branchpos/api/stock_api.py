from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ._base import ResourceApi, num, int_or_none
from ..constants import LOW_STOCK_DEFAULT


@dataclass
class StockItem:
    id: int
    branch_id: int
    product_id: int
    product_name: str
    product_sku: str = ""
    branch_name: Optional[str] = None
    quantity: int = 0
    cost_price: float = 0.0
    selling_price: float = 0.0
    reorder_level: Optional[int] = None
    last_stock_date: Optional[str] = None
    category_name: Optional[str] = None
    requires_serial: bool = False

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "StockItem":
        return cls(
            id=d.get("id"),
            branch_id=d.get("branchId"),
            branch_name=d.get("branchName"),
            product_id=d.get("productId"),
            product_name=d.get("productName") or "",
            product_sku=d.get("productSku") or "",
            quantity=int(num(d.get("quantity"))),
            cost_price=num(d.get("costPrice")),
            selling_price=num(d.get("sellingPrice")),
            reorder_level=int_or_none(d.get("reorderLevel")),
            last_stock_date=d.get("lastStockDate"),
            category_name=d.get("categoryName"),
            requires_serial=bool(d.get("requiresSerial")),
        )

    @property
    def is_low(self) -> bool:
        level = self.reorder_level if self.reorder_level else LOW_STOCK_DEFAULT
        return self.quantity <= level

    @property
    def value(self) -> float:
        return self.quantity * self.cost_price


class StockApi(ResourceApi):
    """/stock"""

    def by_branch(self, branch_id: int) -> List[StockItem]:
        return self._list(f"/stock/branch/{branch_id}", StockItem.from_api)

    def update_stock(
        self,
        branch_id: int,
        product_id: int,
        quantity: int,
        cost_price: float,
        selling_price: float,
        reorder_level: Optional[int] = None,
    ) -> StockItem:
        payload: Dict[str, Any] = {
            "quantity": quantity,
            "costPrice": cost_price,
            "sellingPrice": selling_price,
        }
        if reorder_level is not None:
            payload["reorderLevel"] = reorder_level
        return self._one(self.client.post(f"/stock/{branch_id}/{product_id}", json=payload), StockItem.from_api)
