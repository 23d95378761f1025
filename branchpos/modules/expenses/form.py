"""
Dialog for creating and editing expenses.

Collects: category, description, amount, date, payment method, receipt
number and notes.
Validates: category chosen, non-empty description, amount > 0.0.
On accept, `payload()` returns the API body (camelCase keys).
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QDate, Qt
from PySide6.QtWidgets import (
    QComboBox,
    QDateEdit,
    QDialog,
    QDialogButtonBox,
    QDoubleSpinBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QVBoxLayout,
    QWidget,
)

from ...constants import EXPENSE_CATEGORIES, PAYMENT_METHODS, PAYMENT_METHOD_LABELS
from ...utils.validators import non_empty


class ExpenseForm(QDialog):
    """Modal dialog for adding or editing an expense."""

    def __init__(self, parent: QWidget | None = None, *, branch_id: Optional[int] = None, initial=None):
        super().__init__(parent)
        self.setWindowTitle("Edit Expense" if initial else "Add Expense")
        self.setModal(True)
        self.setMinimumWidth(420)

        self._expense_id = initial.id if initial else None
        self._branch_id = initial.branch_id if initial and initial.branch_id else branch_id

        self.cmb_category = QComboBox()
        self.cmb_category.addItem("Select category…", userData=None)
        for c in EXPENSE_CATEGORIES:
            self.cmb_category.addItem(c, userData=c)

        self.edt_description = QLineEdit()
        self.edt_description.setPlaceholderText("e.g., Stationery, fuel, utilities…")
        self.edt_description.setClearButtonEnabled(True)

        self.spin_amount = QDoubleSpinBox()
        self.spin_amount.setMinimum(0.0)   # validation enforces > 0.0
        self.spin_amount.setMaximum(10**9)
        self.spin_amount.setDecimals(2)
        self.spin_amount.setButtonSymbols(QDoubleSpinBox.ButtonSymbols.NoButtons)
        self.spin_amount.setAlignment(Qt.AlignRight)

        self.date_edit = QDateEdit()
        self.date_edit.setDisplayFormat("yyyy-MM-dd")
        self.date_edit.setCalendarPopup(True)
        self.date_edit.setDate(QDate.currentDate())

        self.cmb_method = QComboBox()
        for m in PAYMENT_METHODS:
            self.cmb_method.addItem(PAYMENT_METHOD_LABELS[m], userData=m)

        self.edt_receipt = QLineEdit()
        self.edt_receipt.setPlaceholderText("Optional")
        self.txt_notes = QPlainTextEdit()
        self.txt_notes.setFixedHeight(60)

        self.lbl_error = QLabel("")
        self.lbl_error.setObjectName("errorLabel")
        self.lbl_error.setStyleSheet("color:#b00020;")
        self.lbl_error.setVisible(False)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)

        layout = QVBoxLayout(self)
        form = QFormLayout()
        form.addRow("Category*", self.cmb_category)
        form.addRow("Description*", self.edt_description)
        form.addRow("Amount*", self.spin_amount)
        form.addRow("Date*", self.date_edit)
        form.addRow("Payment Method", self.cmb_method)
        form.addRow("Receipt #", self.edt_receipt)
        form.addRow("Notes", self.txt_notes)
        layout.addLayout(form)
        layout.addWidget(self.lbl_error)
        layout.addWidget(self.buttons)

        if initial:
            idx = self.cmb_category.findData(initial.category)
            if idx < 0 and initial.category:
                self.cmb_category.addItem(initial.category, userData=initial.category)
                idx = self.cmb_category.count() - 1
            self.cmb_category.setCurrentIndex(max(0, idx))
            self.edt_description.setText(initial.description)
            self.spin_amount.setValue(float(initial.amount or 0.0))
            qd = QDate.fromString((initial.expense_date or "")[:10], "yyyy-MM-dd")
            if qd.isValid():
                self.date_edit.setDate(qd)
            idx = self.cmb_method.findData((initial.payment_method or "").upper())
            if idx >= 0:
                self.cmb_method.setCurrentIndex(idx)
            self.edt_receipt.setText(initial.receipt_number or "")
            self.txt_notes.setPlainText(initial.notes or "")

        self._payload: Optional[dict] = None

    # ----------------------------------------------------------------------
    def _fail(self, message: str, widget_to_focus: QWidget) -> None:
        self.lbl_error.setText(message)
        self.lbl_error.setVisible(True)
        widget_to_focus.setFocus()

    def get_payload(self) -> dict | None:
        """Validate inputs and return a dict or None on failure."""
        self.lbl_error.setVisible(False)

        category = self.cmb_category.currentData()
        if not category:
            self._fail("Please select a category.", self.cmb_category)
            return None

        if not non_empty(self.edt_description.text()):
            self._fail("Description cannot be empty.", self.edt_description)
            return None

        amount = float(self.spin_amount.value())
        if amount <= 0.0:
            self._fail("Amount must be greater than 0.00.", self.spin_amount)
            return None

        receipt = self.edt_receipt.text().strip()
        notes = self.txt_notes.toPlainText().strip()
        return {
            "branchId": self._branch_id,
            "category": category,
            "description": self.edt_description.text().strip(),
            "amount": amount,
            "expenseDate": self.date_edit.date().toString("yyyy-MM-dd"),
            "paymentMethod": self.cmb_method.currentData(),
            "receiptNumber": receipt or None,
            "notes": notes or None,
        }

    def accept(self) -> None:  # type: ignore[override]
        p = self.get_payload()
        if p is None:
            return
        self._payload = p
        super().accept()

    def payload(self) -> dict | None:
        """Return the last accepted payload, or None if dialog was canceled."""
        return self._payload

    def expense_id(self) -> int | None:
        return self._expense_id
