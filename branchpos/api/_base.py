"""
Shared helpers for the resource API classes.

Every resource API takes an ApiClient and converts camelCase JSON from the
backend into snake_case dataclasses via each dataclass's `from_api`.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, TypeVar

from .client import ApiClient

T = TypeVar("T")


def num(value: Any, default: float = 0.0) -> float:
    """BigDecimal fields arrive as numbers or numeric strings; None becomes `default`."""
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def int_or_none(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def as_list(data: Any) -> List[Dict[str, Any]]:
    """Collections come back as JSON arrays; anything else is treated as empty."""
    if isinstance(data, list):
        return [d for d in data if isinstance(d, dict)]
    return []


class ResourceApi:
    """Base for the per-collection API wrappers."""

    def __init__(self, client: ApiClient):
        self.client = client

    def _list(self, path: str, factory: Callable[[Dict[str, Any]], T], params: Optional[Dict[str, Any]] = None) -> List[T]:
        return [factory(d) for d in as_list(self.client.get(path, params=params))]

    def _one(self, data: Any, factory: Callable[[Dict[str, Any]], T]) -> T:
        return factory(data if isinstance(data, dict) else {})
