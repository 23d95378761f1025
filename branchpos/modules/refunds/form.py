"""
Refund request dialog.

The user looks up a receipt by sale number; the sale's customer, payment
method and items pre-fill the form. `lookup` is a callable taking the sale
number and returning a Sale (raising on failure).
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from ...constants import REFUND_METHODS
from ...utils.helpers import fmt_money
from ...utils.validators import ValidationError
from .logic import (
    LOOKUP_FAILED,
    RefundLine,
    build_refund_payload,
    default_method,
    lines_from_sale,
    refund_total,
    set_quantity,
)


class RefundForm(QDialog):
    def __init__(
        self,
        parent: QWidget | None,
        *,
        branch_id: Optional[int],
        customers: Iterable[Tuple[int, str]] = (),
        lookup: Callable[[str], object],
    ):
        super().__init__(parent)
        self.setWindowTitle("Create Refund")
        self.setModal(True)
        self.setMinimumWidth(600)
        self.branch_id = branch_id
        self._lookup = lookup
        self.sale = None
        self.lines: List[RefundLine] = []

        self.txt_receipt = QLineEdit()
        self.txt_receipt.setPlaceholderText("Receipt / sale number")
        self.btn_lookup = QPushButton("Look up")
        self.btn_lookup.clicked.connect(self.lookup)
        self.txt_receipt.returnPressed.connect(self.lookup)
        self.lbl_lookup = QLabel("")
        self.lbl_lookup.setStyleSheet("color:#b00020;")
        self.lbl_lookup.setVisible(False)

        receipt_row = QHBoxLayout()
        receipt_row.addWidget(self.txt_receipt, 1)
        receipt_row.addWidget(self.btn_lookup)

        self.cmb_customer = QComboBox()
        self.cmb_customer.addItem("Walk-in customer", userData=None)
        for cid, name in customers:
            self.cmb_customer.addItem(name, userData=cid)

        self.cmb_method = QComboBox()
        for m in REFUND_METHODS:
            self.cmb_method.addItem(m.replace("_", " ").title(), userData=m)

        self.txt_reason = QLineEdit()
        self.txt_reason.setPlaceholderText("Reason for refund")

        self.tbl_items = QTableWidget(0, 5)
        self.tbl_items.setHorizontalHeaderLabels(["Refund", "Product", "Qty", "Unit Price", "Total"])
        self.tbl_items.verticalHeader().setVisible(False)
        self.tbl_items.setEditTriggers(QTableWidget.NoEditTriggers)

        self.lbl_total = QLabel(fmt_money(0))

        self.lbl_error = QLabel("")
        self.lbl_error.setStyleSheet("color:#b00020;")
        self.lbl_error.setVisible(False)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.buttons.button(QDialogButtonBox.Ok).setText("Create Refund")
        self.buttons.button(QDialogButtonBox.Ok).setEnabled(False)
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)

        form = QFormLayout()
        form.addRow("Receipt #*", receipt_row)
        form.addRow("", self.lbl_lookup)
        form.addRow("Customer", self.cmb_customer)
        form.addRow("Refund Method*", self.cmb_method)
        form.addRow("Reason*", self.txt_reason)

        lay = QVBoxLayout(self)
        lay.addLayout(form)
        lay.addWidget(self.tbl_items, 1)
        total_row = QHBoxLayout()
        total_row.addStretch(1)
        total_row.addWidget(QLabel("Refund total:"))
        total_row.addWidget(self.lbl_total)
        lay.addLayout(total_row)
        lay.addWidget(self.lbl_error)
        lay.addWidget(self.buttons)

        self._payload: Optional[dict] = None

    # ------------------------------------------------------------------
    def lookup(self) -> bool:
        number = self.txt_receipt.text().strip()
        self.lbl_lookup.setVisible(False)
        if not number:
            self._lookup_failed("Please enter a receipt number")
            return False
        self.sale = None
        self.lines = []
        try:
            sale = self._lookup(number)
        except Exception:
            self._lookup_failed(LOOKUP_FAILED)
            self._fill_items()
            return False
        if sale is None or not getattr(sale, "id", None):
            self._lookup_failed(LOOKUP_FAILED)
            self._fill_items()
            return False

        self.sale = sale
        self.lines = lines_from_sale(sale)
        if sale.customer_id:
            i = self.cmb_customer.findData(sale.customer_id)
            if i >= 0:
                self.cmb_customer.setCurrentIndex(i)
        i = self.cmb_method.findData(default_method(sale))
        if i >= 0:
            self.cmb_method.setCurrentIndex(i)
        self._fill_items()
        return True

    def _lookup_failed(self, message: str) -> None:
        self.lbl_lookup.setText(message)
        self.lbl_lookup.setVisible(True)

    def _fill_items(self) -> None:
        self.tbl_items.setRowCount(len(self.lines))
        for row, line in enumerate(self.lines):
            chk = QCheckBox()
            chk.setChecked(line.selected)
            chk.toggled.connect(lambda on, r=row: self.set_selected(r, on))
            self.tbl_items.setCellWidget(row, 0, chk)
            self.tbl_items.setItem(row, 1, QTableWidgetItem(line.product_name))
            spin = QSpinBox()
            spin.setRange(0, line.max_quantity)
            spin.setValue(line.quantity)
            spin.valueChanged.connect(lambda v, r=row: self.set_line_quantity(r, v))
            self.tbl_items.setCellWidget(row, 2, spin)
            price = QTableWidgetItem(fmt_money(line.unit_price))
            price.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
            self.tbl_items.setItem(row, 3, price)
            self.tbl_items.setItem(row, 4, QTableWidgetItem(""))
        self.tbl_items.resizeColumnsToContents()
        self.buttons.button(QDialogButtonBox.Ok).setEnabled(self.sale is not None)
        self._update_totals()

    def set_selected(self, row: int, on: bool) -> None:
        self.lines[row].selected = bool(on)
        self._update_totals()

    def set_line_quantity(self, row: int, value) -> bool:
        ok = set_quantity(self.lines[row], value)
        self._update_totals()
        return ok

    def total(self) -> float:
        return refund_total(self.lines)

    def _update_totals(self) -> None:
        for row, line in enumerate(self.lines):
            cell = self.tbl_items.item(row, 4)
            if cell is not None:
                cell.setText(fmt_money(line.line_total) if line.selected else "—")
        self.lbl_total.setText(fmt_money(self.total()))

    # ------------------------------------------------------------------
    def get_payload(self) -> dict | None:
        self.lbl_error.setVisible(False)
        try:
            return build_refund_payload(
                self.lines,
                branch_id=self.branch_id,
                sale=self.sale,
                customer_id=self.cmb_customer.currentData(),
                reason=self.txt_reason.text(),
                method=self.cmb_method.currentData(),
            )
        except ValidationError as e:
            self.lbl_error.setText(str(e))
            self.lbl_error.setVisible(True)
            return None

    def accept(self) -> None:  # type: ignore[override]
        p = self.get_payload()
        if p is None:
            return
        self._payload = p
        super().accept()

    def payload(self) -> dict | None:
        return self._payload
