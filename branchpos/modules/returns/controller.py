from __future__ import annotations

from ..approvals import ApprovalListController, ApprovalListView, RecordDetailsDialog
from .details import return_fields
from .form import ReturnForm
from .model import ReturnsTableModel, ReturnItemsModel
from ...utils import ui_helpers as ui


class ReturnController(ApprovalListController):
    NOUN = "return"

    def __init__(self, api, context):
        super().__init__(api, context, ApprovalListView("Returns", "New Return"), ReturnsTableModel([]))
        self.suppliers = []
        self.products = []
        self._reload()

    @property
    def resource(self):
        return self.api.returns

    def _load_lookups(self) -> None:
        try:
            self.suppliers = self.api.suppliers.list_all()
            self.products = self.api.products.list_all()
        except Exception as e:
            self.log.warning("Failed to load suppliers/products: %s", e)

    def _on_new(self) -> None:
        branch_id = self._require_branch("Select a branch to create returns.")
        if branch_id is None:
            return
        self._load_lookups()
        dlg = ReturnForm(
            self.view,
            branch_id=branch_id,
            suppliers=[(s.id, s.name) for s in self.suppliers],
            products=[(p.id, f"{p.name} ({p.sku})") for p in self.products],
        )
        if not dlg.exec():
            return
        payload = dlg.payload()
        if not payload:
            return
        try:
            self.api.returns.create(payload)
        except Exception as e:
            self._handle_error("Failed to create return", e, "Failed to create return")
            return
        ui.info(self.view, "Return", "Return request created successfully")
        self._reload()

    def _on_details(self) -> None:
        r = self.selected()
        if r is None:
            ui.info(self.view, "Select", "Please select a return.")
            return
        RecordDetailsDialog(
            self.view, f"Return {r.return_number}", return_fields(r), ReturnItemsModel(r.items), r.total_amount
        ).exec()
