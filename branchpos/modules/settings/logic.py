"""
Company settings payloads. Company details and receipt settings are saved
separately; each save sends only its own fields.
"""

from __future__ import annotations

from ...utils.validators import ValidationError, non_empty

DEFAULT_CURRENCY = "UGX"


def build_company_payload(*, company_name: str, phone: str = "", email: str = "", address: str = "",
                          website: str = "", tax_id: str = "") -> dict:
    if not non_empty(company_name):
        raise ValidationError("Company name is required")
    payload = {"companyName": company_name.strip()}
    for key, value in (
        ("phone", phone),
        ("email", email),
        ("address", address),
        ("website", website),
        ("taxId", tax_id),
    ):
        text = (value or "").strip()
        if text:
            payload[key] = text
    return payload


def build_receipt_payload(*, receipt_footer: str = "", receipt_tagline: str = "", currency_symbol: str = "") -> dict:
    return {
        "receiptFooter": (receipt_footer or "").strip(),
        "receiptTagline": (receipt_tagline or "").strip(),
        "currencySymbol": (currency_symbol or "").strip() or DEFAULT_CURRENCY,
    }
