from __future__ import annotations

from typing import Optional

from ...constants import ROLES
from ...utils.validators import ValidationError, non_empty

REQUIRED_MESSAGE = "Please fill in all required fields"


def users_for_branch(users, branch_id: Optional[int]) -> list:
    """All users in the company view, else only the branch's own staff."""
    if branch_id is None:
        return list(users)
    return [u for u in users if u.branch_id == branch_id]


def build_user_payload(
    *,
    branch_id,
    username: str,
    full_name: str,
    role: str,
    email: str = "",
    phone: str = "",
    password: Optional[str] = None,
    creating: bool = True,
) -> dict:
    """Create needs a password; edit keeps the existing one."""
    missing = not branch_id or not non_empty(username) or not non_empty(full_name) or role not in ROLES
    if creating and not non_empty(password):
        missing = True
    if missing:
        raise ValidationError(REQUIRED_MESSAGE)
    payload = {
        "branchId": int(branch_id),
        "username": username.strip(),
        "fullName": full_name.strip(),
        "email": (email or "").strip() or None,
        "phone": (phone or "").strip() or None,
        "role": role,
    }
    if creating:
        payload["password"] = password
    return payload


MIN_PASSWORD_LENGTH = 6


def validate_new_password(new_password: str, confirm: str) -> str:
    if not new_password:
        raise ValidationError("New password is required")
    if len(new_password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"New password must be at least {MIN_PASSWORD_LENGTH} characters")
    if new_password != confirm:
        raise ValidationError("Passwords do not match")
    return new_password
