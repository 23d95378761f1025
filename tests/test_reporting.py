# branchpos/tests/test_reporting.py
from __future__ import annotations

import pytest
from PySide6.QtCore import QDate

from branchpos.api.purchases_api import Purchase
from branchpos.api.sales_api import Sale
from branchpos.modules.reporting import controller as ctl_mod
from branchpos.modules.reporting.logic import (
    INVENTORY,
    PROFIT,
    PURCHASES,
    in_range,
    preview,
    profit_and_loss,
    purchases_in_range,
)
from branchpos.utils import printing


# --------------------------- logic ---------------------------

@pytest.mark.parametrize("value,expected", [
    ("2025-05-01", True),
    ("2025-05-31T23:59:00", True),
    ("2025-06-01", False),
    (None, False),
    ("", False),
])
def test_in_range_is_inclusive_on_the_date_part(value, expected):
    assert in_range(value, "2025-05-01", "2025-05-31") is expected


def test_purchases_in_range():
    rows = [
        Purchase(id=1, purchase_number="A", purchase_date="2025-04-30"),
        Purchase(id=2, purchase_number="B", purchase_date="2025-05-10T09:00:00"),
        Purchase(id=3, purchase_number="C"),
    ]
    assert [p.id for p in purchases_in_range(rows, "2025-05-01", "2025-05-31")] == [2]


def test_profit_and_loss():
    sales = [Sale(id=1, sale_number="S1", grand_total=300.0), Sale(id=2, sale_number="S2", grand_total=100.0)]
    purchases = [Purchase(id=1, purchase_number="P1", total_amount=100.0)]
    assert profit_and_loss(sales, purchases) == {
        "revenue": 400.0, "purchases": 100.0, "gross_profit": 300.0, "margin": 75.0,
    }


def test_margin_is_zero_without_revenue():
    pl = profit_and_loss([], [Purchase(id=1, purchase_number="P1", total_amount=50.0)])
    assert pl["gross_profit"] == -50.0
    assert pl["margin"] == 0.0


def test_preview_note_only_when_truncated():
    assert preview(list(range(5)), limit=20) == ([0, 1, 2, 3, 4], "")
    rows, note = preview(list(range(25)), limit=20)
    assert len(rows) == 20
    assert note == "Showing 20 of 25 transactions"


# --------------------------- controller ---------------------------

def _sales_json(n, branch_id):
    return [
        {"id": branch_id * 100 + i, "saleNumber": f"S{branch_id}-{i}", "branchId": branch_id,
         "saleDate": "2025-05-02", "grandTotal": 10, "paymentMethod": "CASH"}
        for i in range(n)
    ]


PURCHASES_1 = [
    {"id": 1, "purchaseNumber": "PO-1", "branchId": 1, "purchaseDate": "2025-05-03", "totalAmount": 80,
     "status": "RECEIVED"},
    {"id": 2, "purchaseNumber": "PO-2", "branchId": 1, "purchaseDate": "2025-04-03", "totalAmount": 999,
     "status": "PENDING"},
]


@pytest.fixture()
def reports(qtbot, fake_api, client, context, messages):
    client.route("GET", "/sales/branch/1/range", _sales_json(15, 1))
    client.route("GET", "/sales/branch/2/range", _sales_json(10, 2))
    client.route("GET", "/purchases/branch/1", PURCHASES_1)
    client.route("GET", "/purchases/branch/2", [])
    client.route("GET", "/stock/branch/1", [
        {"id": 1, "branchId": 1, "productId": 1, "productName": "Cable", "quantity": 4, "costPrice": 2.5},
    ])
    client.route("GET", "/stock/branch/2", [])
    ctl = ctl_mod.ReportsController(fake_api, context)
    qtbot.addWidget(ctl.get_widget())
    ctl.view.date_from.setDate(QDate(2025, 5, 1))
    ctl.view.date_to.setDate(QDate(2025, 5, 31))
    ctl._reload()
    return ctl


def _select(ctl, kind):
    ctl.view.cmb_report.setCurrentIndex(ctl.view.cmb_report.findData(kind))


def test_sales_report_sends_range_per_branch(reports, client):
    _m, _p, params, _j = client.called("GET", "/sales/branch/2/range")[-1]
    assert params == {"startDate": "2025-05-01", "endDate": "2025-05-31"}
    assert len(reports.sales) == 25


def test_sales_table_previews_but_totals_count_everything(reports):
    model, totals, note = reports.build()
    assert model.rowCount() == 20
    assert note == "Showing 20 of 25 transactions"
    assert totals == [("Transactions", "25"), ("Total Sales", "250.00")]
    assert not reports.view.lbl_note.isHidden()


def test_full_build_keeps_every_row(reports):
    model, _totals, note = reports.build(full=True)
    assert model.rowCount() == 25
    assert note == ""


def test_purchases_report_filters_to_range(reports):
    _select(reports, PURCHASES)
    assert [p.purchase_number for p in reports.purchases] == ["PO-1"]
    _model, totals, _ = reports.build()
    assert totals == [("Orders", "1"), ("Pending", "0"), ("Total Purchases", "80.00")]


def test_inventory_report_disables_dates(reports):
    _select(reports, INVENTORY)
    assert not reports.view.date_from.isEnabled()
    _model, totals, _ = reports.build()
    assert totals == [("Items", "1"), ("Low Stock", "1"), ("Stock Value", "10.00")]


def test_profit_and_loss_report(reports):
    _select(reports, PROFIT)
    model, totals, _ = reports.build()
    assert model.rowCount() == 4
    assert totals == [("Gross Profit", "170.00")]


def test_failed_load_shows_fallback(reports, client, context, branches, messages):
    context.select(branches[0])
    client.route("GET", "/sales/branch/1/range", RuntimeError("connection reset"))
    reports.on_branch_changed()
    assert messages["error"] == ["Failed to load report"]


def test_printed_html_has_every_row(reports, monkeypatch):
    printed = {}
    monkeypatch.setattr(printing, "print_html", lambda parent, html, name: printed.setdefault("html", html))
    reports._on_print()
    html = printed["html"]
    assert "Sales Report" in html
    assert "All Branches" in html and "2025-05-01 to 2025-05-31" in html
    assert "S2-9" in html and "S1-14" in html


def test_pdf_export(reports, monkeypatch, messages, tmp_path):
    target = str(tmp_path / "sales.pdf")
    written = {}
    monkeypatch.setattr(ctl_mod.QFileDialog, "getSaveFileName", lambda *a, **k: (target, "PDF Files (*.pdf)"))
    monkeypatch.setattr(printing, "export_pdf", lambda html, path: written.setdefault("path", path))
    reports._on_export_pdf()
    assert written["path"] == target
    assert messages["info"] == [f"Report saved to {target}"]
