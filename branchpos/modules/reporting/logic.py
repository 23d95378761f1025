"""
Report data shaping: date filtering, totals and previews.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ...constants import REPORT_PREVIEW_ROWS
from ...utils.helpers import date_part

SALES = "sales"
PURCHASES = "purchases"
INVENTORY = "inventory"
PROFIT = "profit"

REPORT_TYPES = [
    (SALES, "Sales Report"),
    (PURCHASES, "Purchases Report"),
    (INVENTORY, "Inventory Report"),
    (PROFIT, "Profit & Loss"),
]


def in_range(value: Optional[str], start: str, end: str) -> bool:
    """Inclusive date check on the YYYY-MM-DD part of an ISO value."""
    d = date_part(value)
    return bool(d) and start <= d <= end


def purchases_in_range(purchases: Iterable, start: str, end: str) -> list:
    return [p for p in purchases if in_range(p.purchase_date, start, end)]


def sales_total(sales) -> float:
    return sum(s.grand_total for s in sales)


def purchases_total(purchases) -> float:
    return sum(p.total_amount for p in purchases)


def stock_value(stock) -> float:
    return sum(s.quantity * s.cost_price for s in stock)


def profit_and_loss(sales, purchases) -> dict:
    revenue = sales_total(sales)
    cost = purchases_total(purchases)
    gross = revenue - cost
    return {
        "revenue": revenue,
        "purchases": cost,
        "gross_profit": gross,
        "margin": (gross / revenue * 100.0) if revenue > 0 else 0.0,
    }


def preview(rows: list, limit: int = REPORT_PREVIEW_ROWS) -> Tuple[List, str]:
    """First `limit` rows plus the 'Showing N of M transactions' note when truncated."""
    if len(rows) > limit:
        return rows[:limit], f"Showing {limit} of {len(rows)} transactions"
    return list(rows), ""
