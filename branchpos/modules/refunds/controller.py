from __future__ import annotations

from ..approvals import ApprovalListController, ApprovalListView, RecordDetailsDialog
from .form import RefundForm
from .model import RefundsTableModel, RefundItemsModel
from ...utils import ui_helpers as ui
from ...utils.helpers import fmt_date


class RefundController(ApprovalListController):
    NOUN = "refund"

    def __init__(self, api, context):
        super().__init__(api, context, ApprovalListView("Refunds", "New Refund"), RefundsTableModel([]))
        self.customers = []
        self._reload()

    @property
    def resource(self):
        return self.api.refunds

    def _on_new(self) -> None:
        branch_id = self._require_branch("Select a branch to create refunds.")
        if branch_id is None:
            return
        try:
            self.customers = self.api.customers.list_all()
        except Exception as e:
            self.log.warning("Failed to load customers: %s", e)
        dlg = RefundForm(
            self.view,
            branch_id=branch_id,
            customers=[(c.id, c.name) for c in self.customers],
            lookup=self.api.sales.by_sale_number,
        )
        if not dlg.exec():
            return
        payload = dlg.payload()
        if not payload:
            return
        try:
            self.api.refunds.create(payload)
        except Exception as e:
            self._handle_error("Failed to create refund", e, "Failed to create refund")
            return
        ui.info(self.view, "Refund", "Refund request created successfully")
        self._reload()

    def _on_details(self) -> None:
        r = self.selected()
        if r is None:
            ui.info(self.view, "Select", "Please select a refund.")
            return
        fields = [
            ("Refund #", r.refund_number),
            ("Date", fmt_date(r.refund_date or r.created_at)),
            ("Branch", r.branch_name),
            ("Receipt #", r.sale_number),
            ("Customer", r.customer_name or "Walk-in"),
            ("Method", (r.refund_method or "").replace("_", " ").title()),
            ("Status", (r.status or "").title()),
            ("Reason", r.reason),
            ("Processed by", r.user_name),
        ]
        RecordDetailsDialog(
            self.view, f"Refund {r.refund_number}", fields, RefundItemsModel(r.items), r.total_amount
        ).exec()
