"""
Controller for the stock page.

Stock rows for the selected branch or all active branches, filtered by
search text, category and low-stock flag. Adjustments need a single branch.
"""

from __future__ import annotations

from typing import List

from PySide6.QtWidgets import QWidget

from ..base_module import BranchModule
from .form import ProductForm, StockAdjustForm
from .logic import category_options, filter_stock, stock_summary
from .model import StockTableModel
from .view import InventoryView
from ...utils import ui_helpers as ui
from ...utils.helpers import fmt_money


class InventoryController(BranchModule):
    def __init__(self, api, context):
        super().__init__(api, context)
        self.rows: List = []

        self.view = InventoryView()
        self.model = StockTableModel([])
        self.view.tbl.setModel(self.model)

        self.view.txt_search.textChanged.connect(lambda _=None: self._render(reset=True))
        self.view.cmb_category.currentIndexChanged.connect(lambda _=None: self._render(reset=True))
        self.view.chk_low.toggled.connect(lambda _=None: self._render(reset=True))
        self.view.pager.changed.connect(self._render)
        self.view.btn_refresh.clicked.connect(self._reload)
        self.view.btn_add_product.clicked.connect(self._on_add_product)
        self.view.btn_adjust.clicked.connect(self._on_adjust)
        self.view.tbl.doubleClicked.connect(lambda _=None: self._on_adjust())

        self._reload()

    def get_widget(self) -> QWidget:
        return self.view

    # ------------------------------------------------------------------
    def _reload(self) -> None:
        try:
            self.rows = self._scoped(self.api.stock.by_branch)
        except Exception as e:
            self.rows = []
            self._handle_error("Failed to load inventory", e, "Failed to load inventory")
        self._fill_categories()
        self.view.btn_adjust.setEnabled(self.branch_id is not None)
        self._render(reset=True)

    def _fill_categories(self) -> None:
        current = self.view.selected_category
        cmb = self.view.cmb_category
        cmb.blockSignals(True)
        cmb.clear()
        for c in category_options(self.rows):
            cmb.addItem("All categories" if c == "all" else c, userData=c)
        i = cmb.findData(current)
        cmb.setCurrentIndex(i if i >= 0 else 0)
        cmb.blockSignals(False)

    def filtered(self) -> list:
        return filter_stock(self.rows, self.view.search_text, self.view.selected_category, self.view.low_only)

    def _render(self, reset: bool = False) -> None:
        if reset:
            self.view.pager.reset()
        rows = self.filtered()
        self.view.pager.set_total(len(rows))
        self.model.replace(self.view.pager.slice(rows))
        self.view.tbl.resizeColumnsToContents()
        s = stock_summary(self.rows)
        self.view.lbl_summary.setText(
            f"{s['count']} items · {s['low']} low stock · Stock value {fmt_money(s['value'])}"
        )

    # ------------------------------------------------------------------
    def _on_add_product(self) -> None:
        try:
            categories = self.api.categories.list_all()
        except Exception as e:
            self._handle_error("Failed to load categories", e)
            return
        dlg = ProductForm(self.view, categories=[(c.id, c.name) for c in categories])
        if not dlg.exec():
            return
        payload = dlg.payload()
        if not payload:
            return
        try:
            self.api.products.create(payload)
        except Exception as e:
            self._handle_error("Failed to create product", e, "Failed to create product")
            return
        ui.info(self.view, "Product", "Product created successfully")
        self._reload()

    def _on_adjust(self) -> None:
        branch_id = self._require_branch("Select a branch to adjust stock.")
        if branch_id is None:
            return
        r = self.view.tbl.selected_row()
        if r is None:
            ui.info(self.view, "Select", "Please select a stock item.")
            return
        stock = self.model.at(r)
        dlg = StockAdjustForm(self.view, stock)
        if not dlg.exec():
            return
        p = dlg.payload()
        if not p:
            return
        try:
            self.api.stock.update_stock(
                branch_id,
                stock.product_id,
                p["quantity"],
                p["cost_price"],
                p["selling_price"],
                p["reorder_level"],
            )
        except Exception as e:
            self._handle_error("Failed to update stock", e, "Failed to update stock")
            return
        ui.info(self.view, "Stock", "Stock updated successfully")
        self._reload()
