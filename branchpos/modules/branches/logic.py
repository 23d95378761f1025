from __future__ import annotations

from ...utils.validators import ValidationError, non_empty

REQUIRED_MESSAGE = "Name and Code are required"


def _optional(text) -> str | None:
    return (text or "").strip() or None


def build_branch_payload(*, name: str, code: str, address: str = "", phone: str = "", email: str = "",
                         is_active: bool = True) -> dict:
    if not non_empty(name) or not non_empty(code):
        raise ValidationError(REQUIRED_MESSAGE)
    return {
        "name": name.strip(),
        "code": code.strip(),
        "address": _optional(address),
        "phone": _optional(phone),
        "email": _optional(email),
        "isActive": bool(is_active),
    }
