"""
Users and authentication.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ._base import ResourceApi, int_or_none


@dataclass
class User:
    id: int
    username: str
    full_name: str = ""
    role: str = "CASHIER"
    branch_id: Optional[int] = None
    branch_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    is_active: bool = True

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "User":
        return cls(
            # /auth responses carry userId instead of id
            id=d.get("id", d.get("userId")),
            username=d.get("username") or "",
            full_name=d.get("fullName") or "",
            role=(d.get("role") or "CASHIER").upper(),
            branch_id=int_or_none(d.get("branchId")),
            branch_name=d.get("branchName"),
            email=d.get("email"),
            phone=d.get("phone"),
            is_active=d.get("isActive", True) is not False,
        )

    @property
    def is_admin(self) -> bool:
        return self.role == "ADMIN"


@dataclass
class AuthSession:
    token: str
    user: User


class AuthApi(ResourceApi):
    """/auth"""

    def login(self, username: str, password: str) -> AuthSession:
        data = self.client.post("/auth/login", json={"username": username, "password": password}) or {}
        token = data.get("token") or ""
        self.client.set_token(token)
        return AuthSession(token=token, user=User.from_api(data))

    def current_user(self) -> User:
        return self._one(self.client.get("/auth/me"), User.from_api)


class UserApi(ResourceApi):
    """/users"""

    def list_all(self) -> List[User]:
        return self._list("/users", User.from_api)

    def create(self, payload: Dict[str, Any]) -> User:
        return self._one(self.client.post("/users", json=payload), User.from_api)

    def update(self, user_id: int, payload: Dict[str, Any]) -> User:
        return self._one(self.client.put(f"/users/{user_id}", json=payload), User.from_api)

    def change_password(self, user_id: int, new_password: str) -> None:
        self.client.post(f"/users/{user_id}/change-password", json={"newPassword": new_password})

    def deactivate(self, user_id: int) -> None:
        self.client.delete(f"/users/{user_id}")
