"""
Controller for purchase orders.

Lists purchases for the selected branch (or every active branch in the
company view, newest first), creates orders for the selected branch and
receives them into stock.
"""

from __future__ import annotations

from typing import List

from PySide6.QtWidgets import QWidget

from ..base_module import BranchModule
from .details import PurchaseDetailsDialog
from .form import PurchaseForm
from .logic import purchase_summary
from .model import PurchasesTableModel
from .receive_dialog import ReceivePurchaseDialog
from .view import PurchaseView
from ...utils import ui_helpers as ui
from ...utils.helpers import fmt_money


class PurchaseController(BranchModule):
    def __init__(self, api, context):
        super().__init__(api, context)
        self.rows: List = []
        self.products: List = []
        self.suppliers: List = []

        self.view = PurchaseView()
        self.model = PurchasesTableModel([])
        self.view.tbl.setModel(self.model)

        self.view.txt_search.textChanged.connect(lambda _=None: self._render(reset=True))
        self.view.chk_pending.toggled.connect(lambda _=None: self._render(reset=True))
        self.view.btn_new.clicked.connect(self._on_new)
        self.view.btn_details.clicked.connect(self._on_details)
        self.view.btn_receive.clicked.connect(self._on_receive)
        self.view.btn_refresh.clicked.connect(self._reload)
        self.view.tbl.doubleClicked.connect(lambda _=None: self._on_details())
        self.view.tbl.clicked.connect(lambda _=None: self._sync_actions())
        self.view.pager.changed.connect(self._render)

        self._reload()

    def get_widget(self) -> QWidget:
        return self.view

    # ------------------------------------------------------------------
    def _reload(self) -> None:
        try:
            self.suppliers = self.api.suppliers.list_all()
            self.products = self.api.products.list_all()
        except Exception as e:
            self.log.warning("Failed to load suppliers/products: %s", e)
        try:
            self.rows = self._scoped(self.api.purchases.by_branch, date_key="purchase_date")
        except Exception as e:
            self.rows = []
            self._handle_error("Failed to load purchases", e, "Failed to load purchases")
        self.view.btn_new.setEnabled(self.branch_id is not None)
        self.view.btn_new.setToolTip("" if self.branch_id is not None else "Select a branch to create purchases")
        self._render(reset=True)

    def filtered(self) -> list:
        rows = [p for p in self.rows if p.is_pending] if self.view.pending_only else list(self.rows)
        term = self.view.search_text.lower()
        if term:
            rows = [
                p for p in rows
                if term in (p.purchase_number or "").lower() or term in (p.supplier_name or "").lower()
            ]
        return rows

    def _render(self, reset: bool = False) -> None:
        if reset:
            self.view.pager.reset()
        rows = self.filtered()
        self.view.pager.set_total(len(rows))
        self.model.replace(self.view.pager.slice(rows))
        self.view.tbl.resizeColumnsToContents()
        s = purchase_summary(self.rows)
        self.view.lbl_summary.setText(
            f"{s['count']} orders · {s['pending']} pending · {s['received']} received · "
            f"Total value {fmt_money(s['total_value'])}"
        )
        self._sync_actions()

    def _selected(self):
        r = self.view.tbl.selected_row()
        return None if r is None else self.model.at(r)

    def _sync_actions(self) -> None:
        p = self._selected()
        self.view.btn_receive.setEnabled(bool(p and p.can_receive))

    # ------------------------------------------------------------------
    def _on_new(self) -> None:
        branch_id = self._require_branch("Select a branch to create purchases.")
        if branch_id is None:
            return
        dlg = PurchaseForm(
            self.view,
            suppliers=[(s.id, s.name) for s in self.suppliers],
            products=[(p.id, f"{p.name} ({p.sku})") for p in self.products],
        )
        if not dlg.exec():
            return
        payload = dlg.payload()
        if not payload:
            return
        try:
            self.api.purchases.create(
                branch_id,
                payload["supplier_id"],
                payload["items"],
                notes=payload["notes"],
            )
        except Exception as e:
            self._handle_error("Failed to create purchase order", e, "Failed to create purchase order")
            return
        ui.info(self.view, "Saved", "Purchase order created successfully!")
        self._reload()

    def _on_details(self) -> None:
        p = self._selected()
        if p is None:
            ui.info(self.view, "Select", "Please select a purchase order.")
            return
        PurchaseDetailsDialog(self.view, p).exec()

    def _serialized_ids(self) -> List[int]:
        return [p.id for p in self.products if p.requires_serial]

    def _on_receive(self) -> None:
        p = self._selected()
        if p is None:
            ui.info(self.view, "Select", "Please select a purchase order to receive.")
            return
        if not p.can_receive:
            ui.info(self.view, "Receive", "This purchase order has already been received.")
            return
        dlg = ReceivePurchaseDialog(self.view, p, self._serialized_ids())
        if not dlg.exec():
            return
        payload = dlg.payload() or {}
        try:
            self.api.purchases.receive(p.id, payload.get("items"))
        except Exception as e:
            self._handle_error("Failed to receive stock", e, "Failed to receive stock")
            return
        ui.info(self.view, "Received", "Stock received successfully! Inventory has been updated.")
        self._reload()
