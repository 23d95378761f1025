"""
Dialog for requesting a stock transfer out of the selected branch.

`payload()` returns {"to_branch_id", "notes", "items"} with items in API
shape once the form validates.
"""

from __future__ import annotations

from typing import Iterable, Optional

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
from .logic import build_transfer_items


class TransferForm(QDialog):
    def __init__(self, parent: QWidget | None, *, source, branches: Iterable, stock: Iterable):
        super().__init__(parent)
        self.setWindowTitle("Create Transfer")
        self.setModal(True)
        self.setMinimumWidth(520)
        self.source = source

        sellable = [s for s in stock if s.quantity > 0]
        self._stock = {s.product_id: s.quantity for s in sellable}
        self._names = {s.product_id: s.product_name for s in sellable}

        self.lbl_source = QLabel(source.name if source else "—")

        self.cmb_to = QComboBox()
        self.cmb_to.addItem("Select destination…", userData=None)
        for b in branches:
            if source is None or b.id != source.id:
                self.cmb_to.addItem(b.name, userData=b.id)

        self.items = ItemRowsEditor(
            [(s.product_id, f"{s.product_name} ({s.quantity} available)") for s in sellable],
            fields=(("quantity", "Qty"),),
        )

        self.txt_notes = QPlainTextEdit()
        self.txt_notes.setFixedHeight(60)

        self.lbl_error = QLabel("")
        self.lbl_error.setStyleSheet("color:#b00020;")
        self.lbl_error.setVisible(False)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.buttons.button(QDialogButtonBox.Ok).setText("Create Transfer")
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)

        form = QFormLayout()
        form.addRow("From", self.lbl_source)
        form.addRow("To*", self.cmb_to)
        form.addRow("Items*", self.items)
        form.addRow("Notes", self.txt_notes)

        lay = QVBoxLayout(self)
        lay.addLayout(form)
        lay.addWidget(self.lbl_error)
        lay.addWidget(self.buttons)

        self._payload: Optional[dict] = None

    def get_payload(self) -> dict | None:
        self.lbl_error.setVisible(False)
        to_id = self.cmb_to.currentData()
        try:
            items = build_transfer_items(
                self.items.rows(),
                from_branch_id=self.source.id if self.source else None,
                to_branch_id=to_id,
                stock_by_product=self._stock,
                names=self._names,
            )
        except ValidationError as e:
            self.lbl_error.setText(str(e))
            self.lbl_error.setVisible(True)
            return None
        notes = self.txt_notes.toPlainText().strip()
        return {"to_branch_id": int(to_id), "notes": notes or None, "items": items}

    def accept(self) -> None:  # type: ignore[override]
        p = self.get_payload()
        if p is None:
            return
        self._payload = p
        super().accept()

    def payload(self) -> dict | None:
        return self._payload
