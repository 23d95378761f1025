from __future__ import annotations

from ...utils.validators import ValidationError, non_empty

NAME_REQUIRED = "Name is required"


def build_party_payload(*, name: str, email: str = "", phone: str = "", address: str = "",
                        contact_person: str | None = None) -> dict:
    """Customer payload; passing `contact_person` (even blank) makes it a supplier payload."""
    if not non_empty(name):
        raise ValidationError(NAME_REQUIRED)
    payload = {
        "name": name.strip(),
        "email": (email or "").strip() or None,
        "phone": (phone or "").strip() or None,
        "address": (address or "").strip() or None,
    }
    if contact_person is not None:
        payload["contactPerson"] = contact_person.strip() or None
    return payload


def party_matches(party, term: str) -> bool:
    """Case-insensitive match on name, phone or email; `term` is already lowercased."""
    return any(term in (v or "").lower() for v in (party.name, party.phone, party.email))
