"""
Dialog for creating a purchase order.

Collects: supplier, notes and item rows (product, quantity, unit cost).
On accept, `payload()` returns {"supplier_id", "notes", "items"} with items
already in API shape (see logic.build_purchase_items).
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QPlainTextEdit,
    QVBoxLayout,
    QWidget,
)

from ...utils.validators import ValidationError
from ...widgets.item_rows import ItemRowsEditor
from .logic import build_purchase_items


class PurchaseForm(QDialog):
    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        suppliers: Iterable[Tuple[int, str]] = (),
        products: Iterable[Tuple[int, str]] = (),
    ):
        super().__init__(parent)
        self.setWindowTitle("Create Purchase Order")
        self.setModal(True)
        self.setMinimumWidth(560)

        self.cmb_supplier = QComboBox()
        self.cmb_supplier.addItem("Select supplier…", userData=None)
        for sid, name in suppliers:
            self.cmb_supplier.addItem(name, userData=sid)

        self.items = ItemRowsEditor(
            products,
            fields=(("quantity", "Qty"), ("unit_cost", "Unit Cost")),
        )

        self.txt_notes = QPlainTextEdit()
        self.txt_notes.setPlaceholderText("Any additional notes…")
        self.txt_notes.setFixedHeight(60)

        self.lbl_error = QLabel("")
        self.lbl_error.setObjectName("errorLabel")
        self.lbl_error.setStyleSheet("color:#b00020;")
        self.lbl_error.setVisible(False)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.buttons.button(QDialogButtonBox.Ok).setText("Create Order")
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)

        form = QFormLayout()
        form.addRow("Supplier*", self.cmb_supplier)
        form.addRow("Items*", self.items)
        form.addRow("Notes", self.txt_notes)

        lay = QVBoxLayout(self)
        lay.addLayout(form)
        lay.addWidget(self.lbl_error)
        lay.addWidget(self.buttons)

        self._payload: Optional[dict] = None

    def _fail(self, message: str, widget_to_focus: QWidget) -> None:
        self.lbl_error.setText(message)
        self.lbl_error.setVisible(True)
        widget_to_focus.setFocus()

    def get_payload(self) -> dict | None:
        self.lbl_error.setVisible(False)
        supplier_id = self.cmb_supplier.currentData()
        try:
            items = build_purchase_items(self.items.rows(), supplier_id)
        except ValidationError as e:
            self._fail(str(e), self.cmb_supplier if not supplier_id else self.items)
            return None
        notes = self.txt_notes.toPlainText().strip()
        return {
            "supplier_id": int(supplier_id),
            "notes": notes or None,
            "items": items,
        }

    def accept(self) -> None:  # type: ignore[override]
        p = self.get_payload()
        if p is None:
            return
        self._payload = p
        super().accept()

    def payload(self) -> dict | None:
        return self._payload
