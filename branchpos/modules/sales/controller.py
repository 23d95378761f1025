"""
Controller for the sales history page.

Lists sales for the selected branch, or for every active branch in the
company view (newest first). With the date range enabled the range endpoint
is used; otherwise the full branch history is loaded.
"""

from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import QWidget

from ..base_module import BranchModule
from .details import SaleDetailsDialog
from .model import SalesTableModel
from .view import SalesView
from ...utils import ui_helpers as ui
from ...utils import printing
from ...utils.helpers import fmt_money


def sales_summary(sales) -> dict:
    return {
        "count": len(sales),
        "revenue": sum(s.grand_total for s in sales),
        "refunded": sum(1 for s in sales if s.is_refunded),
    }


class SalesController(BranchModule):
    def __init__(self, api, context):
        super().__init__(api, context)
        self.rows: List = []
        self.view = SalesView()
        self.model = SalesTableModel([])
        self.view.tbl.setModel(self.model)

        self.view.txt_search.textChanged.connect(lambda _=None: self._render())
        self.view.chk_range.toggled.connect(lambda _=None: self._reload())
        self.view.date_from.dateChanged.connect(lambda _=None: self._reload())
        self.view.date_to.dateChanged.connect(lambda _=None: self._reload())
        self.view.btn_refresh.clicked.connect(self._reload)
        self.view.btn_details.clicked.connect(self._on_details)
        self.view.btn_void.clicked.connect(self._on_void)
        self.view.tbl.doubleClicked.connect(lambda _=None: self._on_details())
        self.view.pager.changed.connect(self._render)

        self._sc_print = QShortcut(QKeySequence("Ctrl+P"), self.view)
        self._sc_print.setContext(Qt.WidgetWithChildrenShortcut)
        self._sc_print.activated.connect(self._on_print)

        self._reload()

    def get_widget(self) -> QWidget:
        return self.view

    # ------------------------------------------------------------------
    def _fetcher(self):
        """Per-branch fetch bound to the current filter; reads widgets on the GUI thread only."""
        sales = self.api.sales
        if not self.view.use_range:
            return sales.by_branch
        start, end = self.view.date_from_str, self.view.date_to_str
        return lambda branch_id: sales.by_date_range(branch_id, start, end)

    def _reload(self) -> None:
        try:
            self.rows = self._scoped(self._fetcher(), date_key="created_at")
        except Exception as e:
            self.rows = []
            self._handle_error("Failed to load sales", e)
        self.view.pager.reset()
        self._render()

    def filtered(self) -> list:
        term = self.view.search_text.lower()
        if not term:
            return list(self.rows)
        return [
            s for s in self.rows
            if term in (s.sale_number or "").lower() or term in (s.customer_name or "").lower()
        ]

    def _render(self) -> None:
        rows = self.filtered()
        self.view.pager.set_total(len(rows))
        self.model.replace(self.view.pager.slice(rows))
        self.view.tbl.resizeColumnsToContents()
        s = sales_summary(rows)
        self.view.lbl_summary.setText(
            f"{s['count']} sales · Revenue {fmt_money(s['revenue'])} · {s['refunded']} refunded"
        )

    def _selected(self):
        r = self.view.tbl.selected_row()
        return None if r is None else self.model.at(r)

    # ------------------------------------------------------------------
    def _on_details(self) -> None:
        sale = self._selected()
        if sale is None:
            ui.info(self.view, "Select", "Please select a sale.")
            return
        try:
            full = self.api.sales.get(sale.id)
        except Exception as e:
            self.log.warning("Falling back to list row for sale %s: %s", sale.id, e)
            full = sale
        SaleDetailsDialog(self.view, full).exec()

    def _on_void(self) -> None:
        sale = self._selected()
        if sale is None:
            ui.info(self.view, "Select", "Please select a sale to void.")
            return
        if not ui.confirm(self.view, "Void sale", f"Void/refund sale {sale.sale_number}? Stock will be restored."):
            return
        try:
            self.api.sales.refund(sale.id)
        except Exception as e:
            self._handle_error("Failed to void sale", e, "Failed to void sale")
            return
        ui.info(self.view, "Sale", "Sale voided/refunded successfully")
        self._reload()

    def _on_print(self) -> None:
        rows = self.filtered()
        if not rows:
            ui.info(self.view, "Print", "Nothing to print.")
            return
        s = sales_summary(rows)
        html = printing.render_model(
            "Sales",
            SalesTableModel(rows),
            notes=[self.ctx.branch.name if self.ctx.branch else "All Branches"],
            totals=[("Revenue", fmt_money(s["revenue"]))],
        )
        try:
            printing.print_html(self.view, html, "Sales")
        except Exception as e:
            self._handle_error("Failed to print sales", e)
