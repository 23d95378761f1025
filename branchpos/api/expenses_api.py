from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ._base import ResourceApi, num, int_or_none


@dataclass
class Expense:
    id: int
    category: str
    description: str
    amount: float
    expense_date: Optional[str] = None
    branch_id: Optional[int] = None
    branch_name: Optional[str] = None
    user_name: Optional[str] = None
    expense_number: Optional[str] = None
    payment_method: Optional[str] = None
    receipt_number: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "Expense":
        return cls(
            id=d.get("id"),
            category=d.get("category") or "",
            description=d.get("description") or "",
            amount=num(d.get("amount")),
            expense_date=d.get("expenseDate"),
            branch_id=int_or_none(d.get("branchId")),
            branch_name=d.get("branchName"),
            user_name=d.get("userName"),
            expense_number=d.get("expenseNumber"),
            payment_method=d.get("paymentMethod"),
            receipt_number=d.get("receiptNumber"),
            notes=d.get("notes"),
            created_at=d.get("createdAt"),
        )


class ExpenseApi(ResourceApi):
    """/expenses"""

    def by_branch(self, branch_id: int) -> List[Expense]:
        return self._list(f"/expenses/branch/{branch_id}", Expense.from_api)

    def create(self, payload: Dict[str, Any]) -> Expense:
        return self._one(self.client.post("/expenses", json=payload), Expense.from_api)

    def update(self, expense_id: int, payload: Dict[str, Any]) -> Expense:
        return self._one(self.client.put(f"/expenses/{expense_id}", json=payload), Expense.from_api)

    def delete(self, expense_id: int) -> None:
        self.client.delete(f"/expenses/{expense_id}")
