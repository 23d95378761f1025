"""
Client-side views over a list of serial numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ...constants import RECENT_ACTIVITY_ROWS

LOOKUP_FAILED = "Serial number not found in any branch."

_STATUS_FIELDS = {
    "IN_STOCK": "in_stock",
    "SOLD": "sold",
    "TRANSFERRED": "transferred",
    "RETURNED": "returned",
    "DEFECTIVE": "defective",
}


@dataclass
class ProductBreakdown:
    product_id: Optional[int]
    product_name: str
    sku: str
    total: int = 0
    in_stock: int = 0
    sold: int = 0
    transferred: int = 0
    returned: int = 0
    defective: int = 0


@dataclass
class BranchBreakdown:
    branch_id: Optional[int]
    branch_name: str
    total: int = 0
    in_stock: int = 0
    sold: int = 0


def product_breakdown(serials: Iterable) -> List[ProductBreakdown]:
    """Counts per status for each product, largest totals first."""
    grouped: Dict[Optional[int], ProductBreakdown] = {}
    for sn in serials:
        entry = grouped.get(sn.product_id)
        if entry is None:
            entry = grouped[sn.product_id] = ProductBreakdown(sn.product_id, sn.product_name, sn.product_sku)
        entry.total += 1
        attr = _STATUS_FIELDS.get(sn.status)
        if attr:
            setattr(entry, attr, getattr(entry, attr) + 1)
    return sorted(grouped.values(), key=lambda e: e.total, reverse=True)


def branch_breakdown(serials: Iterable) -> List[BranchBreakdown]:
    grouped: Dict[Optional[int], BranchBreakdown] = {}
    for sn in serials:
        entry = grouped.get(sn.branch_id)
        if entry is None:
            entry = grouped[sn.branch_id] = BranchBreakdown(sn.branch_id, sn.branch_name or "")
        entry.total += 1
        if sn.status == "IN_STOCK":
            entry.in_stock += 1
        elif sn.status == "SOLD":
            entry.sold += 1
    return sorted(grouped.values(), key=lambda e: e.total, reverse=True)


def recent_activity(serials: Iterable, limit: int = RECENT_ACTIVITY_ROWS) -> list:
    """Most recently updated serials; rows without updated_at are left out."""
    dated = [sn for sn in serials if sn.updated_at]
    dated.sort(key=lambda sn: str(sn.updated_at), reverse=True)
    return dated[:limit]


def filter_serials(serials: Iterable, term: str = "", status: str = "all") -> list:
    term = (term or "").strip().lower()
    out = []
    for sn in serials:
        if status != "all" and sn.status != status:
            continue
        if term:
            haystack = (
                sn.serial_number,
                sn.product_name,
                sn.product_sku,
                sn.sale_number or "",
                sn.purchase_number or "",
            )
            if not any(term in (h or "").lower() for h in haystack):
                continue
        out.append(sn)
    return out
