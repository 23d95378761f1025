from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...widgets.pager import Pager
from ...widgets.table_view import TableView


class InventoryView(QWidget):
    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("Inventory")

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        top = QHBoxLayout()
        self.txt_search = QLineEdit()
        self.txt_search.setPlaceholderText("Search name or SKU…")
        self.txt_search.setClearButtonEnabled(True)
        top.addWidget(self.txt_search, 1)
        self.cmb_category = QComboBox()
        top.addWidget(self.cmb_category)
        self.chk_low = QCheckBox("Low stock only")
        top.addWidget(self.chk_low)
        self.btn_add_product = QPushButton("Add Product")
        self.btn_adjust = QPushButton("Adjust Stock")
        self.btn_refresh = QPushButton("Refresh")
        for b in (self.btn_add_product, self.btn_adjust, self.btn_refresh):
            top.addWidget(b)
        root.addLayout(top)

        self.lbl_summary = QLabel("")
        root.addWidget(self.lbl_summary)

        self.tbl = TableView()
        root.addWidget(self.tbl, 1)
        self.pager = Pager()
        root.addWidget(self.pager)

    @property
    def search_text(self) -> str:
        return self.txt_search.text().strip()

    @property
    def selected_category(self) -> str:
        return self.cmb_category.currentData() or "all"

    @property
    def low_only(self) -> bool:
        return self.chk_low.isChecked()
