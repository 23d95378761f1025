# utils/helpers.py
import logging
import math
from datetime import date, datetime
from typing import Optional, Tuple, Union

NumberLike = Union[float, int, str]

_log = logging.getLogger(__name__)


def today_str() -> str:
    """Return today's date as ISO string (YYYY-MM-DD)."""
    return date.today().isoformat()


def month_start_str(today: Optional[date] = None) -> str:
    """First day of the current month as ISO string."""
    d = today or date.today()
    return d.replace(day=1).isoformat()


def fmt_money(v: NumberLike, places: int = 2) -> str:
    """
    Format a number as money with thousands separators and a fixed number of decimals.

    Values that do not parse are returned as str(v).
    """
    try:
        x = float(v)
    except (TypeError, ValueError) as e:
        _log.debug("fmt_money: failed to parse %r as float: %s", v, e)
        return str(v)
    return f"{x:,.{places}f}"


def fmt_date(value: Optional[str]) -> str:
    """Render an ISO date/datetime from the API as YYYY-MM-DD HH:MM (or the date alone)."""
    if not value:
        return ""
    text = str(value)
    try:
        dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return text
    if "T" in text or " " in text:
        return dt.strftime("%Y-%m-%d %H:%M")
    return dt.strftime("%Y-%m-%d")


def date_part(value: Optional[str]) -> str:
    """YYYY-MM-DD prefix of an ISO date/datetime, or '' when missing."""
    return str(value)[:10] if value else ""


# ---- Pagination ----

def total_pages(total: int, page_size: int) -> int:
    """Number of pages for `total` rows; never less than 1."""
    if page_size <= 0:
        return 1
    return max(1, math.ceil(total / page_size))


def page_bounds(page: int, page_size: int, total: int) -> Tuple[int, int]:
    """
    Slice bounds (start, end) for 1-based `page`. The page is clamped into
    [1, total_pages] so a shrinking list never leaves an empty page.
    """
    page = min(max(1, page), total_pages(total, page_size))
    start = (page - 1) * page_size
    end = min(start + page_size, total)
    return start, end


def page_label(page: int, page_size: int, total: int) -> str:
    """'Showing a-b of n' for the current page."""
    if total == 0:
        return "Showing 0 of 0"
    start, end = page_bounds(page, page_size, total)
    return f"Showing {start + 1}-{end} of {total}"
