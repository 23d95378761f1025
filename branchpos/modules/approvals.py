"""
Shared pieces for the returns and refunds pages: a paginated list (newest
first by created_at) with approve/reject for pending records, plus a
read-only details dialog.
"""

from __future__ import annotations

from typing import List

from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .base_module import BranchModule
from ..utils import ui_helpers as ui
from ..utils.helpers import fmt_money
from ..widgets.pager import Pager
from ..widgets.table_view import TableView


def approval_summary(records) -> dict:
    """Pending count and total amount for returns or refunds."""
    return {
        "count": len(records),
        "pending": sum(1 for r in records if r.status == "PENDING"),
        "total": sum(r.total_amount for r in records),
    }


class ApprovalListView(QWidget):
    def __init__(self, title: str, new_label: str, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle(title)

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        top = QHBoxLayout()
        self.lbl_summary = QLabel("")
        top.addWidget(self.lbl_summary, 1)
        self.btn_new = QPushButton(new_label)
        self.btn_details = QPushButton("Details")
        self.btn_approve = QPushButton("Approve")
        self.btn_reject = QPushButton("Reject")
        self.btn_refresh = QPushButton("Refresh")
        for b in (self.btn_new, self.btn_details, self.btn_approve, self.btn_reject, self.btn_refresh):
            top.addWidget(b)
        root.addLayout(top)

        self.tbl = TableView()
        root.addWidget(self.tbl, 1)
        self.pager = Pager()
        root.addWidget(self.pager)


class RecordDetailsDialog(QDialog):
    """Header fields + line items for a return or refund."""

    def __init__(self, parent: QWidget | None, title: str, fields, items_model, total: float):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setMinimumWidth(480)

        form = QFormLayout()
        for label, value in fields:
            if value:
                form.addRow(label, QLabel(str(value)))

        tbl = TableView()
        tbl.setModel(items_model)
        tbl.resizeColumnsToContents()

        buttons = QDialogButtonBox(QDialogButtonBox.Close)
        buttons.rejected.connect(self.reject)

        lay = QVBoxLayout(self)
        lay.addLayout(form)
        lay.addWidget(tbl, 1)
        lay.addWidget(QLabel(f"<b>Total: {fmt_money(total)}</b>"))
        lay.addWidget(buttons)


class ApprovalListController(BranchModule):
    NOUN = "record"

    def __init__(self, api, context, view, model):
        super().__init__(api, context)
        self.rows: List = []
        self.view = view
        self.model = model
        self.view.tbl.setModel(self.model)

        self.view.btn_new.clicked.connect(self._on_new)
        self.view.btn_details.clicked.connect(self._on_details)
        self.view.btn_approve.clicked.connect(lambda: self.decide(True))
        self.view.btn_reject.clicked.connect(lambda: self.decide(False))
        self.view.btn_refresh.clicked.connect(self._reload)
        self.view.tbl.doubleClicked.connect(lambda _=None: self._on_details())
        self.view.tbl.clicked.connect(lambda _=None: self._sync_actions())
        self.view.pager.changed.connect(self._render)

    def get_widget(self) -> QWidget:
        return self.view

    # subclass hooks ------------------------------------------------------
    @property
    def resource(self):
        raise NotImplementedError

    def _on_new(self) -> None:
        raise NotImplementedError

    def _on_details(self) -> None:
        raise NotImplementedError

    # ------------------------------------------------------------------
    def _reload(self) -> None:
        try:
            self.rows = self._scoped(self.resource.by_branch, date_key="created_at")
        except Exception as e:
            self.rows = []
            self._handle_error(f"Failed to load {self.NOUN}s", e, f"Failed to load {self.NOUN}s")
        self.view.btn_new.setEnabled(self.branch_id is not None)
        self.view.pager.reset()
        self._render()

    def _render(self) -> None:
        self.view.pager.set_total(len(self.rows))
        self.model.replace(self.view.pager.slice(self.rows))
        self.view.tbl.resizeColumnsToContents()
        s = approval_summary(self.rows)
        self.view.lbl_summary.setText(
            f"{s['count']} {self.NOUN}s · {s['pending']} pending · Total {fmt_money(s['total'])}"
        )
        self._sync_actions()

    def selected(self):
        r = self.view.tbl.selected_row()
        return None if r is None else self.model.at(r)

    def _sync_actions(self) -> None:
        rec = self.selected()
        pending = bool(rec and rec.status == "PENDING")
        self.view.btn_details.setEnabled(rec is not None)
        self.view.btn_approve.setEnabled(pending)
        self.view.btn_reject.setEnabled(pending)

    def decide(self, approve: bool) -> bool:
        rec = self.selected()
        if rec is None or rec.status != "PENDING":
            return False
        verb = "approve" if approve else "reject"
        try:
            getattr(self.resource, verb)(rec.id)
        except Exception as e:
            self._handle_error(f"Failed to {verb} {self.NOUN}", e, f"Failed to {verb} {self.NOUN}")
            return False
        done = "approved successfully" if approve else "rejected"
        ui.info(self.view, self.NOUN.title(), f"{self.NOUN.title()} {done}")
        self._reload()
        return True
