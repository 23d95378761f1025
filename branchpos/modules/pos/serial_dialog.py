"""
Serial selection for serialized products at the till.

Lists the product's IN_STOCK serials at the branch; the cashier ticks the
units being sold. A previous selection for the same cart line is pre-ticked.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)


class SerialSelectDialog(QDialog):
    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        product_name: str = "",
        serials: Iterable[str] = (),
        preselected: Iterable[str] = (),
    ):
        super().__init__(parent)
        self.setWindowTitle(f"Select Serial Numbers - {product_name}")
        self.setModal(True)
        self.setMinimumWidth(380)

        pre = set(preselected)

        self.edt_search = QLineEdit()
        self.edt_search.setPlaceholderText("Search serial numbers…")
        self.edt_search.setClearButtonEnabled(True)
        self.edt_search.textChanged.connect(self._apply_filter)

        self.lst = QListWidget()
        for sn in serials:
            it = QListWidgetItem(sn)
            it.setFlags(it.flags() | Qt.ItemIsUserCheckable)
            it.setCheckState(Qt.Checked if sn in pre else Qt.Unchecked)
            self.lst.addItem(it)
        self.lst.itemChanged.connect(lambda _=None: self._update_count())

        self.lbl_empty = QLabel("No serial numbers available for this product.")
        self.lbl_empty.setVisible(self.lst.count() == 0)

        self.lbl_count = QLabel("")

        self.lbl_error = QLabel("")
        self.lbl_error.setStyleSheet("color:#b00020;")
        self.lbl_error.setVisible(False)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)

        lay = QVBoxLayout(self)
        lay.addWidget(self.edt_search)
        lay.addWidget(self.lst, 1)
        lay.addWidget(self.lbl_empty)
        lay.addWidget(self.lbl_count)
        lay.addWidget(self.lbl_error)
        lay.addWidget(self.buttons)

        self._payload: Optional[List[str]] = None
        self._update_count()

    def _apply_filter(self, text: str) -> None:
        term = (text or "").lower()
        for i in range(self.lst.count()):
            it = self.lst.item(i)
            it.setHidden(term not in it.text().lower())

    def _update_count(self) -> None:
        self.lbl_count.setText(f"{len(self.selected())} selected")

    def selected(self) -> List[str]:
        out = []
        for i in range(self.lst.count()):
            it = self.lst.item(i)
            if it.checkState() == Qt.Checked:
                out.append(it.text())
        return out

    def accept(self) -> None:  # type: ignore[override]
        chosen = self.selected()
        if not chosen:
            self.lbl_error.setText("Please select at least one serial number")
            self.lbl_error.setVisible(True)
            return
        self._payload = chosen
        super().accept()

    def payload(self) -> Optional[List[str]]:
        return self._payload
