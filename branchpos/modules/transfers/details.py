from __future__ import annotations

from PySide6.QtWidgets import QDialog, QDialogButtonBox, QFormLayout, QLabel, QVBoxLayout, QWidget

from ...utils.helpers import fmt_date
from ...widgets.table_view import TableView
from .model import TransferItemsModel, status_label


class TransferDetailsDialog(QDialog):
    def __init__(self, parent: QWidget | None, transfer):
        super().__init__(parent)
        self.setWindowTitle(f"Transfer {transfer.transfer_number}")
        self.setMinimumWidth(480)

        form = QFormLayout()
        form.addRow("From", QLabel(transfer.from_branch_name or ""))
        form.addRow("To", QLabel(transfer.to_branch_name or ""))
        form.addRow("Date", QLabel(fmt_date(transfer.transfer_date or transfer.created_at)))
        form.addRow("Status", QLabel(status_label(transfer.status)))
        form.addRow("Requested by", QLabel(transfer.requested_by_name or ""))
        if transfer.approved_by_name:
            form.addRow("Approved by", QLabel(transfer.approved_by_name))
        if transfer.notes:
            form.addRow("Notes", QLabel(transfer.notes))

        tbl = TableView()
        tbl.setModel(TransferItemsModel(transfer.items))
        tbl.resizeColumnsToContents()

        buttons = QDialogButtonBox(QDialogButtonBox.Close)
        buttons.rejected.connect(self.reject)

        lay = QVBoxLayout(self)
        lay.addLayout(form)
        lay.addWidget(tbl, 1)
        lay.addWidget(buttons)
