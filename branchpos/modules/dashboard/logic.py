"""
Pure helpers behind the dashboard tables: the daily sales window, per-branch
daily totals, the branch comparison ranking and the recent sales list.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ...utils.helpers import date_part


def trend_dates(days: int, today: Optional[date] = None) -> List[str]:
    """ISO dates of the last `days` days, oldest first, ending today."""
    end = today or date.today()
    start = end - timedelta(days=max(days, 1) - 1)
    return [(start + timedelta(days=i)).isoformat() for i in range(max(days, 1))]


def sale_day(sale) -> str:
    return date_part(sale.sale_date or sale.created_at)


def daily_totals(
    sales_by_branch: Sequence[Tuple[str, Iterable]],
    dates: Sequence[str],
) -> List[dict]:
    """
    One row per date with each branch's grand total for that day and a
    "total" across branches. Sales outside `dates` are ignored.
    """
    per_branch: Dict[str, Dict[str, float]] = {}
    for name, sales in sales_by_branch:
        bucket = per_branch.setdefault(name, {})
        for s in sales:
            day = sale_day(s)
            bucket[day] = bucket.get(day, 0.0) + s.grand_total

    rows = []
    for d in dates:
        row = {"date": d}
        for name, _sales in sales_by_branch:
            row[name] = per_branch[name].get(d, 0.0)
        row["total"] = sum(row[name] for name, _sales in sales_by_branch)
        rows.append(row)
    return rows


def branch_comparison(pairs: Iterable[Tuple[object, object]]) -> List[Tuple[object, object]]:
    """(branch, stats) pairs ranked by this month's revenue, best first."""
    return sorted(pairs, key=lambda p: p[1].total_sales_this_month, reverse=True)


def recent_sales(sales: Iterable, limit: int) -> list:
    """Newest first on sale date (created date as fallback); undated sales last."""
    rows = list(sales)
    dated = [s for s in rows if s.sale_date or s.created_at]
    undated = [s for s in rows if not (s.sale_date or s.created_at)]
    dated.sort(key=lambda s: str(s.sale_date or s.created_at), reverse=True)
    return (dated + undated)[:limit]
