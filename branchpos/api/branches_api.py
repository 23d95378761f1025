from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ._base import ResourceApi


@dataclass
class Branch:
    id: int
    name: str
    code: str = ""
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    is_active: bool = True

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "Branch":
        return cls(
            id=d.get("id"),
            name=d.get("name") or "",
            code=d.get("code") or "",
            address=d.get("address"),
            phone=d.get("phone"),
            email=d.get("email"),
            # branches without the flag are treated as active
            is_active=d.get("isActive", True) is not False,
        )


class BranchApi(ResourceApi):
    """/branches"""

    def list_all(self) -> List[Branch]:
        return self._list("/branches", Branch.from_api)

    def list_active(self) -> List[Branch]:
        return [b for b in self.list_all() if b.is_active]

    def create(self, payload: Dict[str, Any]) -> Branch:
        return self._one(self.client.post("/branches", json=payload), Branch.from_api)

    def update(self, branch_id: int, payload: Dict[str, Any]) -> Branch:
        return self._one(self.client.put(f"/branches/{branch_id}", json=payload), Branch.from_api)

    def delete(self, branch_id: int) -> None:
        self.client.delete(f"/branches/{branch_id}")
