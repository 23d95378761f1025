"""
Product (add/edit) and stock-adjustment dialogs.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QVBoxLayout,
    QWidget,
)

from ...utils.validators import ValidationError
from .logic import build_product_payload, parse_adjustment


class _Dialog(QDialog):
    def _finish_layout(self, form: QFormLayout, ok_text: str) -> None:
        self.lbl_error = QLabel("")
        self.lbl_error.setStyleSheet("color:#b00020;")
        self.lbl_error.setVisible(False)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.buttons.button(QDialogButtonBox.Ok).setText(ok_text)
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)

        lay = QVBoxLayout(self)
        lay.addLayout(form)
        lay.addWidget(self.lbl_error)
        lay.addWidget(self.buttons)
        self._payload: Optional[dict] = None

    def get_payload(self) -> dict | None:
        raise NotImplementedError

    def accept(self) -> None:  # type: ignore[override]
        self.lbl_error.setVisible(False)
        try:
            p = self.get_payload()
        except ValidationError as e:
            self.lbl_error.setText(str(e))
            self.lbl_error.setVisible(True)
            return
        self._payload = p
        super().accept()

    def payload(self) -> dict | None:
        return self._payload


class ProductForm(_Dialog):
    """Add a product, or edit one when `initial` is given."""

    def __init__(self, parent: QWidget | None = None, *, categories: Iterable[Tuple[int, str]] = (), initial=None):
        super().__init__(parent)
        self.setWindowTitle("Add Product" if initial is None else "Edit Product")
        self.setModal(True)

        self.txt_name = QLineEdit()
        self.txt_sku = QLineEdit()
        self.cmb_category = QComboBox()
        self.cmb_category.addItem("Select category…", userData=None)
        for cid, name in categories:
            self.cmb_category.addItem(name, userData=cid)
        self.txt_price = QLineEdit()
        self.txt_price.setPlaceholderText("0.00")
        self.txt_description = QLineEdit()
        self.chk_serial = QCheckBox("Track serial numbers")

        form = QFormLayout()
        form.addRow("Name*", self.txt_name)
        form.addRow("SKU*", self.txt_sku)
        form.addRow("Category*", self.cmb_category)
        form.addRow("Selling Price*", self.txt_price)
        form.addRow("Description", self.txt_description)
        form.addRow("", self.chk_serial)
        self._finish_layout(form, "Add Product" if initial is None else "Save")

        if initial is not None:
            self.txt_name.setText(initial.name)
            self.txt_sku.setText(initial.sku)
            i = self.cmb_category.findData(initial.category_id) if initial.category_id is not None else -1
            if i >= 0:
                self.cmb_category.setCurrentIndex(i)
            self.txt_price.setText(f"{initial.selling_price:g}")
            self.txt_description.setText(initial.description or "")
            self.chk_serial.setChecked(initial.requires_serial)

    def get_payload(self) -> dict:
        return build_product_payload(
            name=self.txt_name.text(),
            sku=self.txt_sku.text(),
            category_id=self.cmb_category.currentData(),
            selling_price=self.txt_price.text(),
            description=self.txt_description.text(),
            requires_serial=self.chk_serial.isChecked(),
        )


class StockAdjustForm(_Dialog):
    def __init__(self, parent: QWidget | None, stock):
        super().__init__(parent)
        self.setWindowTitle(f"Adjust Stock: {stock.product_name}")
        self.setModal(True)

        self.txt_quantity = QLineEdit(str(stock.quantity))
        self.txt_cost = QLineEdit(f"{stock.cost_price:g}")
        self.txt_price = QLineEdit(f"{stock.selling_price:g}")
        self.txt_reorder = QLineEdit("" if stock.reorder_level is None else str(stock.reorder_level))
        self.txt_reorder.setPlaceholderText("Optional")

        form = QFormLayout()
        form.addRow("Quantity*", self.txt_quantity)
        form.addRow("Cost Price*", self.txt_cost)
        form.addRow("Selling Price*", self.txt_price)
        form.addRow("Reorder Level", self.txt_reorder)
        self._finish_layout(form, "Save")

    def get_payload(self) -> dict:
        return parse_adjustment(
            quantity=self.txt_quantity.text(),
            cost_price=self.txt_cost.text(),
            selling_price=self.txt_price.text(),
            reorder_level=self.txt_reorder.text(),
        )
