"""
Serial status update and lookup dialogs.
"""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...constants import SERIAL_STATUSES
from ...utils.helpers import fmt_date
from .logic import LOOKUP_FAILED
from .model import status_label


class StatusDialog(QDialog):
    def __init__(self, parent: QWidget | None, serial):
        super().__init__(parent)
        self.setWindowTitle(f"Update Status: {serial.serial_number}")
        self.setModal(True)

        self.cmb_status = QComboBox()
        for s in SERIAL_STATUSES:
            self.cmb_status.addItem(status_label(s), userData=s)
        i = self.cmb_status.findData(serial.status)
        if i >= 0:
            self.cmb_status.setCurrentIndex(i)

        self.txt_notes = QPlainTextEdit()
        self.txt_notes.setPlaceholderText("Optional notes")
        self.txt_notes.setFixedHeight(70)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.buttons.button(QDialogButtonBox.Ok).setText("Update")
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)

        form = QFormLayout()
        form.addRow("Product", QLabel(serial.product_name))
        form.addRow("Status*", self.cmb_status)
        form.addRow("Notes", self.txt_notes)

        lay = QVBoxLayout(self)
        lay.addLayout(form)
        lay.addWidget(self.buttons)

        self._payload: Optional[dict] = None

    def accept(self) -> None:  # type: ignore[override]
        notes = self.txt_notes.toPlainText().strip()
        self._payload = {"status": self.cmb_status.currentData(), "notes": notes or None}
        super().accept()

    def payload(self) -> dict | None:
        return self._payload


class LookupDialog(QDialog):
    """Find which branch holds a serial number and its current state."""

    def __init__(self, parent: QWidget | None, lookup: Callable[[str], object]):
        super().__init__(parent)
        self.setWindowTitle("Serial Lookup")
        self.setMinimumWidth(420)
        self._lookup = lookup
        self.result = None

        self.txt_query = QLineEdit()
        self.txt_query.setPlaceholderText("Enter serial number")
        self.btn_lookup = QPushButton("Look up")
        self.btn_lookup.clicked.connect(self.lookup)
        self.txt_query.returnPressed.connect(self.lookup)

        row = QHBoxLayout()
        row.addWidget(self.txt_query, 1)
        row.addWidget(self.btn_lookup)

        self.lbl_result = QLabel("")
        self.lbl_result.setWordWrap(True)

        buttons = QDialogButtonBox(QDialogButtonBox.Close)
        buttons.rejected.connect(self.reject)

        lay = QVBoxLayout(self)
        lay.addLayout(row)
        lay.addWidget(self.lbl_result, 1)
        lay.addWidget(buttons)

    def lookup(self) -> bool:
        query = self.txt_query.text().strip()
        if not query:
            return False
        self.result = None
        try:
            sn = self._lookup(query)
        except Exception:
            sn = None
        if sn is None or not sn.serial_number:
            self.lbl_result.setStyleSheet("color:#b00020;")
            self.lbl_result.setText(LOOKUP_FAILED)
            return False
        self.result = sn
        self.lbl_result.setStyleSheet("")
        lines = [
            f"<b>{sn.serial_number}</b>",
            f"Product: {sn.product_name} ({sn.product_sku})",
            f"Branch: {sn.branch_name or '—'}",
            f"Status: {status_label(sn.status)}",
        ]
        if sn.purchase_number:
            lines.append(f"Purchase: {sn.purchase_number}")
        if sn.sale_number:
            lines.append(f"Sale: {sn.sale_number}")
        if sn.updated_at:
            lines.append(f"Last updated: {fmt_date(sn.updated_at)}")
        self.lbl_result.setText("<br>".join(lines))
        return True
