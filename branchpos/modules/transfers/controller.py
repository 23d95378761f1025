"""
Controller for inter-branch transfers.

Three lists (outgoing, incoming, pending approval). In the company view each
list is fanned out over the active branches and deduplicated, since one
transfer shows up under both of its branches.
"""

from __future__ import annotations

from typing import Dict, List

from PySide6.QtWidgets import QWidget

from ..base_module import BranchModule
from .details import TransferDetailsDialog
from .form import TransferForm
from .logic import (
    APPROVE, REJECT, SEND, RECEIVE,
    OUTGOING, INCOMING, PENDING,
    available_actions,
)
from .model import TransfersTableModel
from .view import TransferView
from ...utils import ui_helpers as ui

_ACTION_MESSAGES = {
    APPROVE: ("Transfer approved", "Failed to approve transfer"),
    REJECT: ("Transfer rejected", "Failed to reject transfer"),
    SEND: ("Transfer sent", "Failed to send transfer"),
    RECEIVE: ("Transfer received. Stock has been updated.", "Failed to receive transfer"),
}


class TransferController(BranchModule):
    def __init__(self, api, context):
        super().__init__(api, context)
        self.lists: Dict[str, List] = {OUTGOING: [], INCOMING: [], PENDING: []}
        self.stock: List = []

        self.view = TransferView()
        self.models = {key: TransfersTableModel([]) for key in self.lists}
        for key, tbl in self.view.tables.items():
            tbl.setModel(self.models[key])
            tbl.doubleClicked.connect(lambda _=None: self._on_details())
            tbl.clicked.connect(lambda _=None: self._sync_actions())

        self.view.tabs.currentChanged.connect(lambda _=None: self._sync_actions())
        self.view.btn_new.clicked.connect(self._on_new)
        self.view.btn_refresh.clicked.connect(self._reload)
        self.view.btn_details.clicked.connect(self._on_details)
        self.view.btn_approve.clicked.connect(lambda: self.run_action(APPROVE))
        self.view.btn_reject.clicked.connect(lambda: self.run_action(REJECT))
        self.view.btn_send.clicked.connect(lambda: self.run_action(SEND))
        self.view.btn_receive.clicked.connect(lambda: self.run_action(RECEIVE))

        self._reload()

    def get_widget(self) -> QWidget:
        return self.view

    # ------------------------------------------------------------------
    def _reload(self) -> None:
        fetchers = {
            OUTGOING: self.api.transfers.from_branch,
            INCOMING: self.api.transfers.to_branch,
            PENDING: self.api.transfers.pending,
        }
        try:
            for key, fetch in fetchers.items():
                self.lists[key] = self._scoped(fetch, dedupe=True)
        except Exception as e:
            self._handle_error("Failed to load transfers", e, "Failed to load transfers")

        self.stock = []
        if self.branch_id is not None:
            try:
                self.stock = self.api.stock.by_branch(self.branch_id)
            except Exception as e:
                self.log.warning("Failed to load stock for transfers: %s", e)

        for key, model in self.models.items():
            model.replace(self.lists[key])
            self.view.tables[key].resizeColumnsToContents()
        self.view.btn_new.setEnabled(self.branch_id is not None)
        self.view.lbl_summary.setText(
            f"{len(self.lists[OUTGOING])} outgoing · {len(self.lists[INCOMING])} incoming · "
            f"{len(self.lists[PENDING])} pending approval"
        )
        self._sync_actions()

    def selected(self):
        key = self.view.current_tab
        r = self.view.tables[key].selected_row()
        return None if r is None else self.models[key].at(r)

    def _sync_actions(self) -> None:
        t = self.selected()
        actions = available_actions(t, self.view.current_tab) if t else []
        self.view.btn_details.setEnabled(t is not None)
        self.view.btn_approve.setEnabled(APPROVE in actions)
        self.view.btn_reject.setEnabled(REJECT in actions)
        self.view.btn_send.setEnabled(SEND in actions)
        self.view.btn_receive.setEnabled(RECEIVE in actions)

    # ------------------------------------------------------------------
    def _on_new(self) -> None:
        if self._require_branch("Please select a source branch") is None:
            return
        dlg = TransferForm(self.view, source=self.ctx.branch, branches=self.ctx.branches, stock=self.stock)
        if not dlg.exec():
            return
        payload = dlg.payload()
        if not payload:
            return
        try:
            self.api.transfers.create(self.branch_id, payload["to_branch_id"], payload["items"], payload["notes"])
        except Exception as e:
            self._handle_error("Failed to create transfer", e, "Failed to create transfer")
            return
        ui.info(self.view, "Transfer", "Transfer request created successfully")
        self._reload()

    def _on_details(self) -> None:
        t = self.selected()
        if t is None:
            ui.info(self.view, "Select", "Please select a transfer.")
            return
        TransferDetailsDialog(self.view, t).exec()

    def run_action(self, action: str) -> bool:
        t = self.selected()
        if t is None or action not in available_actions(t, self.view.current_tab):
            return False
        ok_msg, fail_msg = _ACTION_MESSAGES[action]
        try:
            getattr(self.api.transfers, action)(t.id)
        except Exception as e:
            self._handle_error(fail_msg, e, fail_msg)
            return False
        ui.info(self.view, "Transfer", ok_msg)
        self._reload()
        return True
