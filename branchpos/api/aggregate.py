"""
Company-wide views: fan a per-branch call out over every active branch and
merge the results.

A branch whose call fails contributes nothing; the aggregate itself never
raises for a single branch failure.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, TypeVar

from ..utils.loggers import get_logger

T = TypeVar("T")

_log = get_logger(__name__)

# Upper bound on concurrent per-branch requests
MAX_WORKERS = 8


def fan_out(
    branches: Sequence[Any],
    fetch: Callable[[int], Any],
    *,
    active_only: bool = True,
) -> List[Any]:
    """
    Call `fetch(branch.id)` for each branch in parallel and return the results
    flattened in branch order. List results are concatenated; a non-list
    result is appended as one element.
    """
    targets = [b for b in branches if not active_only or getattr(b, "is_active", True)]
    if not targets:
        return []

    def _safe(branch) -> List[Any]:
        try:
            result = fetch(branch.id)
        except Exception as e:
            _log.warning("Per-branch fetch failed for branch %s: %s", getattr(branch, "id", "?"), e)
            return []
        if result is None:
            return []
        if isinstance(result, list):
            return result
        return [result]

    workers = min(MAX_WORKERS, len(targets))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        per_branch = list(pool.map(_safe, targets))

    merged: List[Any] = []
    for rows in per_branch:
        merged.extend(rows)
    return merged


def dedupe_by_id(rows: Iterable[T]) -> List[T]:
    """
    Keep one row per `id` (the last one seen) at the position the id first
    appeared. Rows without an id are kept as-is.
    """
    order: List[Any] = []
    by_id: Dict[Any, T] = {}
    loose: List[T] = []
    for r in rows:
        rid = getattr(r, "id", None)
        if rid is None:
            loose.append(r)
            continue
        if rid not in by_id:
            order.append(rid)
        by_id[rid] = r
    return [by_id[i] for i in order] + loose


def newest_first(rows: Iterable[T], key: str) -> List[T]:
    """Sort descending on an ISO date attribute; rows without one go last."""
    rows = list(rows)
    dated = [r for r in rows if getattr(r, key, None)]
    undated = [r for r in rows if not getattr(r, key, None)]
    dated.sort(key=lambda r: str(getattr(r, key)), reverse=True)
    return dated + undated


def load_for_scope(
    branch_id: Optional[int],
    branches: Sequence[Any],
    fetch: Callable[[int], Any],
    *,
    date_key: Optional[str] = None,
    dedupe: bool = False,
) -> List[Any]:
    """
    Single-branch call when `branch_id` is set, else fan out over `branches`.
    Optionally dedupes by id and orders newest first on `date_key`.
    """
    if branch_id is not None:
        rows = fetch(branch_id) or []
    else:
        rows = fan_out(branches, fetch)
    if dedupe:
        rows = dedupe_by_id(rows)
    if date_key:
        rows = newest_first(rows, date_key)
    return list(rows)


def sum_stats(stats: Iterable[Any]) -> Any:
    """Field-wise sum of per-branch SerialStats records."""
    from .serials_api import SerialStats

    return SerialStats.combine(s for s in stats if s is not None)
