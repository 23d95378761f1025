"""
Controller for the serial-number page.

Loads every serial and the status counters for the selected branch, or for
all active branches in the company view (counters summed field-wise).
"""

from __future__ import annotations

from typing import List

from PySide6.QtWidgets import QWidget

from ..base_module import BranchModule
from .dialogs import LookupDialog, StatusDialog
from .logic import branch_breakdown, filter_serials, product_breakdown, recent_activity
from .model import BranchBreakdownModel, ProductBreakdownModel, SerialsTableModel
from .view import SerialView
from ...api.aggregate import fan_out, sum_stats
from ...api.serials_api import SerialStats
from ...utils import ui_helpers as ui


class SerialController(BranchModule):
    def __init__(self, api, context):
        super().__init__(api, context)
        self.serials: List = []
        self.stats = SerialStats()

        self.view = SerialView()
        self.model = SerialsTableModel([])
        self.products_model = ProductBreakdownModel([])
        self.branches_model = BranchBreakdownModel([])
        self.recent_model = SerialsTableModel([])
        self.view.tbl.setModel(self.model)
        self.view.tbl_products.setModel(self.products_model)
        self.view.tbl_branches.setModel(self.branches_model)
        self.view.tbl_recent.setModel(self.recent_model)

        self.view.txt_search.textChanged.connect(lambda _=None: self._render(reset=True))
        self.view.cmb_status.currentIndexChanged.connect(lambda _=None: self._render(reset=True))
        self.view.pager.changed.connect(self._render)
        self.view.btn_refresh.clicked.connect(self._reload)
        self.view.btn_status.clicked.connect(self._on_update_status)
        self.view.btn_lookup.clicked.connect(self._on_lookup)
        self.view.tbl.doubleClicked.connect(lambda _=None: self._on_update_status())

        self._reload()

    def get_widget(self) -> QWidget:
        return self.view

    # ------------------------------------------------------------------
    def _load_stats(self) -> SerialStats:
        if self.branch_id is not None:
            return self.api.serials.stats(self.branch_id)
        return sum_stats(fan_out(self.ctx.branches, self.api.serials.stats))

    def _reload(self) -> None:
        try:
            self.serials = self._scoped(self.api.serials.all_by_branch)
            self.stats = self._load_stats()
        except Exception as e:
            self.serials, self.stats = [], SerialStats()
            self._handle_error("Failed to load serial data", e, "Failed to load serial data")

        s = self.stats
        self.view.lbl_stats.setText(
            f"Total {s.total} · In stock {s.in_stock} · Sold {s.sold} · Transferred {s.transferred} · "
            f"Returned {s.returned} · Defective {s.defective}"
        )
        self.products_model.replace(product_breakdown(self.serials))
        self.branches_model.replace(branch_breakdown(self.serials) if self.ctx.is_company_view else [])
        self.view.tabs.setTabVisible(self.view.branch_tab_index, self.ctx.is_company_view)
        self.recent_model.replace(recent_activity(self.serials))
        for tbl in (self.view.tbl_products, self.view.tbl_branches, self.view.tbl_recent):
            tbl.resizeColumnsToContents()
        self._render(reset=True)

    def filtered(self) -> list:
        return filter_serials(self.serials, self.view.search_text, self.view.status_filter)

    def _render(self, reset: bool = False) -> None:
        if reset:
            self.view.pager.reset()
        rows = self.filtered()
        self.view.pager.set_total(len(rows))
        self.model.replace(self.view.pager.slice(rows))
        self.view.tbl.resizeColumnsToContents()

    # ------------------------------------------------------------------
    def _on_update_status(self) -> None:
        r = self.view.tbl.selected_row()
        if r is None:
            ui.info(self.view, "Select", "Please select a serial number.")
            return
        sn = self.model.at(r)
        dlg = StatusDialog(self.view, sn)
        if not dlg.exec():
            return
        payload = dlg.payload()
        if not payload:
            return
        try:
            self.api.serials.update_status(sn.id, payload["status"], payload.get("notes"))
        except Exception as e:
            self._handle_error("Failed to update status", e, "Failed to update status")
            return
        ui.info(self.view, "Serial", f"Serial {sn.serial_number} status updated")
        self._reload()

    def _on_lookup(self) -> None:
        LookupDialog(self.view, self.api.serials.lookup).exec()
