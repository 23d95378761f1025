from __future__ import annotations

from typing import Dict, Iterable

from ...utils.validators import ValidationError, non_empty

CATEGORY_NAME_REQUIRED = "Please enter a category name"


def build_category_payload(*, name: str, description: str = "") -> dict:
    if not non_empty(name):
        raise ValidationError(CATEGORY_NAME_REQUIRED)
    return {"name": name.strip(), "description": (description or "").strip() or None}


def product_counts(products: Iterable) -> Dict[int, int]:
    """Number of products per category id."""
    counts: Dict[int, int] = {}
    for p in products:
        if p.category_id is not None:
            counts[p.category_id] = counts.get(p.category_id, 0) + 1
    return counts


def product_matches(product, term: str) -> bool:
    return any(term in (v or "").lower() for v in (product.name, product.sku, product.category_name))
