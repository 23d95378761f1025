"""
Editable list of line-item rows (product + free-text numeric fields) used by
the purchase, transfer and return dialogs.

`rows()` returns the raw entries as dicts:
    {"product_id": int | None, "<field>": "<text>", ...}
Parsing and validation are left to the owning dialog.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)


class _ItemRow(QWidget):
    def __init__(self, products: Sequence[Tuple[int, str]], fields: Sequence[Tuple[str, str]], parent=None):
        super().__init__(parent)
        lay = QHBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)

        self.cmb_product = QComboBox()
        self.cmb_product.addItem("Select product…", userData=None)
        for pid, label in products:
            self.cmb_product.addItem(label, userData=pid)
        lay.addWidget(self.cmb_product, 1)

        self.edits: Dict[str, QLineEdit] = {}
        for key, placeholder in fields:
            e = QLineEdit()
            e.setPlaceholderText(placeholder)
            e.setMaximumWidth(110)
            self.edits[key] = e
            lay.addWidget(e)

        self.btn_remove = QPushButton("×")
        self.btn_remove.setFixedWidth(28)
        self.btn_remove.setToolTip("Remove item")
        lay.addWidget(self.btn_remove)

    def value(self) -> dict:
        out = {"product_id": self.cmb_product.currentData()}
        for key, e in self.edits.items():
            out[key] = e.text().strip()
        return out


class ItemRowsEditor(QWidget):
    changed = Signal()

    def __init__(
        self,
        products: Iterable[Tuple[int, str]] = (),
        fields: Sequence[Tuple[str, str]] = (("quantity", "Qty"),),
        *,
        min_rows: int = 1,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._products = list(products)
        self._fields = list(fields)
        self._min_rows = min_rows
        self._rows: List[_ItemRow] = []

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        self._rows_lay = QVBoxLayout()
        root.addLayout(self._rows_lay)
        self.btn_add = QPushButton("Add Item")
        self.btn_add.clicked.connect(lambda: self.add_row())
        root.addWidget(self.btn_add)

        for _ in range(max(1, min_rows)):
            self.add_row()

    # ------------------------------------------------------------------
    def count(self) -> int:
        return len(self._rows)

    def row_widget(self, index: int) -> _ItemRow:
        return self._rows[index]

    def add_row(self, product_id: Optional[int] = None, **values: str) -> int:
        row = _ItemRow(self._products, self._fields, self)
        row.btn_remove.clicked.connect(lambda _=None, r=row: self.remove_row(self._rows.index(r)))
        row.cmb_product.currentIndexChanged.connect(lambda _=None: self.changed.emit())
        for e in row.edits.values():
            e.textChanged.connect(lambda _=None: self.changed.emit())
        self._rows.append(row)
        self._rows_lay.addWidget(row)
        idx = len(self._rows) - 1
        self.set_row(idx, product_id, **values)
        self._sync_remove_buttons()
        self.changed.emit()
        return idx

    def remove_row(self, index: int) -> None:
        if len(self._rows) <= self._min_rows or not (0 <= index < len(self._rows)):
            return
        row = self._rows.pop(index)
        self._rows_lay.removeWidget(row)
        row.deleteLater()
        self._sync_remove_buttons()
        self.changed.emit()

    def set_row(self, index: int, product_id: Optional[int] = None, **values: str) -> None:
        row = self._rows[index]
        if product_id is not None:
            i = row.cmb_product.findData(product_id)
            if i >= 0:
                row.cmb_product.setCurrentIndex(i)
        for key, text in values.items():
            if key in row.edits:
                row.edits[key].setText("" if text is None else str(text))

    def rows(self) -> List[dict]:
        return [r.value() for r in self._rows]

    def _sync_remove_buttons(self) -> None:
        can_remove = len(self._rows) > self._min_rows
        for r in self._rows:
            r.btn_remove.setEnabled(can_remove)
