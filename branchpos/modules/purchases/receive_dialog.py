"""
Receive a purchase order into stock.

Optionally updates selling prices per item, and captures one serial number
per ordered unit for serialized products.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QGroupBox,
    QLabel,
    QLineEdit,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from ...utils.validators import ValidationError
from .logic import build_receive_items, serial_slots


class ReceivePurchaseDialog(QDialog):
    def __init__(self, parent: QWidget | None, purchase, serialized_product_ids: Iterable[int] = ()):
        super().__init__(parent)
        self.setWindowTitle(f"Receive {purchase.purchase_number}")
        self.setModal(True)
        self.setMinimumWidth(480)
        self.purchase = purchase

        body = QWidget()
        body_lay = QVBoxLayout(body)

        self.chk_update_prices = QCheckBox("Update selling prices")
        body_lay.addWidget(self.chk_update_prices)

        self.price_box = QGroupBox("Selling prices")
        price_form = QFormLayout(self.price_box)
        self.price_edits: Dict[int, QLineEdit] = {}
        for it in purchase.items:
            e = QLineEdit("" if it.selling_price is None else f"{it.selling_price:g}")
            e.setPlaceholderText("Selling price")
            self.price_edits[it.product_id] = e
            price_form.addRow(it.product_name, e)
        self.price_box.setVisible(False)
        self.chk_update_prices.toggled.connect(self.price_box.setVisible)
        body_lay.addWidget(self.price_box)

        self.serial_edits: Dict[int, List[QLineEdit]] = {}
        slots = serial_slots(purchase, serialized_product_ids)
        if slots:
            serial_box = QGroupBox("Serial numbers")
            serial_lay = QVBoxLayout(serial_box)
            for it in purchase.items:
                n = slots.get(it.product_id)
                if not n:
                    continue
                serial_lay.addWidget(QLabel(f"{it.product_name} ({n} serial{'s' if n != 1 else ''} needed)"))
                edits = []
                for k in range(n):
                    e = QLineEdit()
                    e.setPlaceholderText(f"Serial #{k + 1}")
                    serial_lay.addWidget(e)
                    edits.append(e)
                self.serial_edits[it.product_id] = edits
            body_lay.addWidget(serial_box)
        body_lay.addStretch(1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(body)

        self.lbl_error = QLabel("")
        self.lbl_error.setStyleSheet("color:#b00020;")
        self.lbl_error.setVisible(False)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.buttons.button(QDialogButtonBox.Ok).setText("Receive Stock")
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)

        lay = QVBoxLayout(self)
        lay.addWidget(scroll, 1)
        lay.addWidget(self.lbl_error)
        lay.addWidget(self.buttons)

        self._payload: Optional[dict] = None

    def get_payload(self) -> dict | None:
        self.lbl_error.setVisible(False)
        try:
            items = build_receive_items(
                self.purchase,
                update_prices=self.chk_update_prices.isChecked(),
                price_updates={pid: e.text() for pid, e in self.price_edits.items()},
                serial_entries={pid: [e.text() for e in edits] for pid, edits in self.serial_edits.items()},
            )
        except ValidationError as e:
            self.lbl_error.setText(str(e))
            self.lbl_error.setVisible(True)
            return None
        return {"items": items}

    def accept(self) -> None:  # type: ignore[override]
        p = self.get_payload()
        if p is None:
            return
        self._payload = p
        super().accept()

    def payload(self) -> dict | None:
        return self._payload
