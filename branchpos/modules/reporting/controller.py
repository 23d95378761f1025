"""
Controller for the reports page.

Report types:
  - Sales: range endpoint per branch, first rows previewed
  - Purchases: full branch history filtered to the date range
  - Inventory: current stock (date range unused)
  - Profit & Loss: sales minus purchases over the range

Reports render to HTML through Jinja2 for printing or PDF export.
"""

from __future__ import annotations

from typing import List

from PySide6.QtWidgets import QFileDialog, QWidget

from ..base_module import BranchModule
from .logic import (
    INVENTORY,
    PROFIT,
    PURCHASES,
    REPORT_TYPES,
    SALES,
    preview,
    profit_and_loss,
    purchases_in_range,
    purchases_total,
    sales_total,
    stock_value,
)
from .model import InventoryReportModel, ProfitLossModel, PurchasesReportModel, SalesReportModel
from .view import ReportsView
from ...utils import printing
from ...utils import ui_helpers as ui
from ...utils.helpers import fmt_money


class ReportsController(BranchModule):
    def __init__(self, api, context):
        super().__init__(api, context)
        self.sales: List = []
        self.purchases: List = []
        self.stock: List = []
        self.model = SalesReportModel([])

        self.view = ReportsView()
        self.view.tbl.setModel(self.model)
        self.view.cmb_report.currentIndexChanged.connect(lambda _=None: self._reload())
        self.view.btn_generate.clicked.connect(self._reload)
        self.view.btn_print.clicked.connect(self._on_print)
        self.view.btn_pdf.clicked.connect(self._on_export_pdf)

        self._reload()

    def get_widget(self) -> QWidget:
        return self.view

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def _load_sales(self) -> None:
        start, end = self.view.date_from_str, self.view.date_to_str
        self.sales = self._scoped(lambda bid: self.api.sales.by_date_range(bid, start, end))

    def _load_purchases(self) -> None:
        rows = self._scoped(self.api.purchases.by_branch)
        self.purchases = purchases_in_range(rows, self.view.date_from_str, self.view.date_to_str)

    def _load_stock(self) -> None:
        self.stock = self._scoped(self.api.stock.by_branch)

    def _reload(self) -> None:
        kind = self.view.report_type
        dated = kind != INVENTORY
        self.view.date_from.setEnabled(dated)
        self.view.date_to.setEnabled(dated)
        try:
            if kind == SALES:
                self._load_sales()
            elif kind == PURCHASES:
                self._load_purchases()
            elif kind == INVENTORY:
                self._load_stock()
            elif kind == PROFIT:
                self._load_sales()
                self._load_purchases()
        except Exception as e:
            self._handle_error("Failed to load report", e, "Failed to load report")
        self._render()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def build(self, *, full: bool = False):
        """(model, totals, note) for the current report type."""
        kind = self.view.report_type
        note = ""
        if kind == SALES:
            rows, note = (self.sales, "") if full else preview(self.sales)
            model = SalesReportModel(rows)
            totals = [("Transactions", str(len(self.sales))), ("Total Sales", fmt_money(sales_total(self.sales)))]
        elif kind == PURCHASES:
            model = PurchasesReportModel(self.purchases)
            pending = sum(1 for p in self.purchases if p.is_pending)
            totals = [
                ("Orders", str(len(self.purchases))),
                ("Pending", str(pending)),
                ("Total Purchases", fmt_money(purchases_total(self.purchases))),
            ]
        elif kind == INVENTORY:
            model = InventoryReportModel(self.stock)
            low = sum(1 for s in self.stock if s.is_low)
            totals = [
                ("Items", str(len(self.stock))),
                ("Low Stock", str(low)),
                ("Stock Value", fmt_money(stock_value(self.stock))),
            ]
        else:
            pl = profit_and_loss(self.sales, self.purchases)
            model = ProfitLossModel([
                ("Revenue (Sales)", pl["revenue"], False),
                ("Purchases", pl["purchases"], False),
                ("Gross Profit", pl["gross_profit"], False),
                ("Margin", pl["margin"], True),
            ])
            totals = [("Gross Profit", fmt_money(pl["gross_profit"]))]
        return model, totals, note

    def _render(self) -> None:
        self.model, totals, note = self.build()
        self.view.tbl.setModel(self.model)
        self.view.tbl.resizeColumnsToContents()
        self.view.lbl_totals.setText(" · ".join(f"{k}: {v}" for k, v in totals))
        self.view.lbl_note.setText(note)
        self.view.lbl_note.setVisible(bool(note))

    def render_html(self) -> str:
        model, totals, _ = self.build(full=True)
        title = dict(REPORT_TYPES)[self.view.report_type]
        notes = [self.ctx.branch.name if self.ctx.branch else "All Branches"]
        if self.view.report_type != INVENTORY:
            notes.append(f"{self.view.date_from_str} to {self.view.date_to_str}")
        return printing.render_model(title, model, notes=notes, totals=totals)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def _on_print(self) -> None:
        try:
            printing.print_html(self.view, self.render_html(), "Report")
        except Exception as e:
            self._handle_error("Failed to print report", e)

    def _on_export_pdf(self) -> None:
        fn, _ = QFileDialog.getSaveFileName(self.view, "Export to PDF", f"{self.view.report_type}_report.pdf", "PDF Files (*.pdf)")
        if not fn:
            return
        try:
            printing.export_pdf(self.render_html(), fn)
        except Exception as e:
            self._handle_error("Could not export PDF", e)
            return
        ui.info(self.view, "Export", f"Report saved to {fn}")
