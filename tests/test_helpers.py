# branchpos/tests/test_helpers.py
from __future__ import annotations

from datetime import date

import pytest

from branchpos.utils.helpers import (
    date_part,
    fmt_date,
    fmt_money,
    month_start_str,
    page_bounds,
    page_label,
    total_pages,
)
from branchpos.utils.validators import (
    float_or_zero,
    non_empty,
    try_parse_float,
    try_parse_int,
)
from branchpos.widgets.pager import Pager


def test_fmt_money_formats_and_tolerates_junk():
    assert fmt_money(1234.5) == "1,234.50"
    assert fmt_money("abc") == "abc"
    assert fmt_money(None) == "None"
    assert fmt_money("2", places=0) == "2"


def test_date_helpers():
    assert fmt_date("2025-04-03T14:05:59") == "2025-04-03 14:05"
    assert fmt_date("2025-04-03") == "2025-04-03"
    assert fmt_date(None) == ""
    assert date_part("2025-04-03T14:05:59") == "2025-04-03"
    assert month_start_str(date(2025, 4, 17)) == "2025-04-01"


@pytest.mark.parametrize(
    "total,size,pages",
    [(0, 10, 1), (10, 10, 1), (11, 10, 2), (250, 100, 3), (5, 0, 1)],
)
def test_total_pages(total, size, pages):
    assert total_pages(total, size) == pages


def test_page_bounds_clamps_past_the_end():
    assert page_bounds(1, 10, 25) == (0, 10)
    assert page_bounds(3, 10, 25) == (20, 25)
    assert page_bounds(9, 10, 25) == (20, 25)
    assert page_bounds(0, 10, 25) == (0, 10)


def test_page_label():
    assert page_label(1, 10, 0) == "Showing 0 of 0"
    assert page_label(2, 10, 25) == "Showing 11-20 of 25"


def test_validators():
    assert try_parse_int("3.0") == (True, 3)
    assert try_parse_int("3.5") == (False, None)
    assert try_parse_int("") == (False, None)
    assert float_or_zero("junk") == 0.0
    assert not non_empty("   ")


@pytest.mark.parametrize("raw", ["nan", "NaN", "inf", "-inf", "Infinity", float("nan"), float("inf"), "1e999"])
def test_non_finite_numbers_are_rejected(raw):
    assert try_parse_float(raw) == (False, None)
    assert try_parse_int(raw) == (False, None)
    assert float_or_zero(raw) == 0.0


def test_pager_slices_and_clamps(qtbot):
    pager = Pager()
    qtbot.addWidget(pager)
    pager.cmb_size.setCurrentIndex(0)  # 10 rows per page
    rows = list(range(25))
    pager.set_total(len(rows))
    assert pager.pages == 3

    pager.go_to(3)
    assert pager.slice(rows) == [20, 21, 22, 23, 24]
    assert not pager.btn_next.isEnabled()

    # shrinking list pulls the page back into range
    pager.set_total(12)
    assert pager.page == 2
    pager.reset()
    assert pager.page == 1
    assert pager.lbl_range.text() == "Showing 1-10 of 12"
