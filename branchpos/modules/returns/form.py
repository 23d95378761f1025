"""
Dialog for a return to a supplier.

Supplier, reason and every item row are required. The total below the rows
updates as the user types.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QVBoxLayout,
    QWidget,
)

from ...utils.helpers import fmt_money
from ...utils.validators import ValidationError
from ...widgets.item_rows import ItemRowsEditor
from .logic import build_return_payload, return_total


class ReturnForm(QDialog):
    def __init__(
        self,
        parent: QWidget | None,
        *,
        branch_id: Optional[int],
        suppliers: Iterable[Tuple[int, str]] = (),
        products: Iterable[Tuple[int, str]] = (),
    ):
        super().__init__(parent)
        self.setWindowTitle("Create Return")
        self.setModal(True)
        self.setMinimumWidth(540)
        self.branch_id = branch_id

        self.cmb_supplier = QComboBox()
        self.cmb_supplier.addItem("Select supplier…", userData=None)
        for sid, name in suppliers:
            self.cmb_supplier.addItem(name, userData=sid)

        self.txt_reason = QLineEdit()
        self.txt_reason.setPlaceholderText("e.g. Damaged on delivery")

        self.items = ItemRowsEditor(products, fields=(("quantity", "Qty"), ("unit_cost", "Unit Cost")), min_rows=1)
        self.lbl_total = QLabel()
        self.items.changed.connect(self._update_total)

        self.lbl_error = QLabel("")
        self.lbl_error.setStyleSheet("color:#b00020;")
        self.lbl_error.setVisible(False)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.buttons.button(QDialogButtonBox.Ok).setText("Create Return")
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)

        form = QFormLayout()
        form.addRow("Supplier*", self.cmb_supplier)
        form.addRow("Reason*", self.txt_reason)
        form.addRow("Items*", self.items)
        form.addRow("Total", self.lbl_total)

        lay = QVBoxLayout(self)
        lay.addLayout(form)
        lay.addWidget(self.lbl_error)
        lay.addWidget(self.buttons)

        self._payload: Optional[dict] = None
        self._update_total()

    def total(self) -> float:
        return return_total(self.items.rows())

    def _update_total(self) -> None:
        self.lbl_total.setText(fmt_money(self.total()))

    def get_payload(self) -> dict | None:
        self.lbl_error.setVisible(False)
        try:
            return build_return_payload(
                self.items.rows(),
                branch_id=self.branch_id,
                supplier_id=self.cmb_supplier.currentData(),
                reason=self.txt_reason.text(),
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
