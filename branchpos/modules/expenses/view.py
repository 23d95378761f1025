from __future__ import annotations

from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSplitter,
    QVBoxLayout,
    QWidget,
)
from PySide6.QtCore import Qt

from ...constants import EXPENSE_CATEGORIES
from ...widgets.pager import Pager
from ...widgets.table_view import TableView


class ExpenseView(QWidget):
    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("Expenses")

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        top = QHBoxLayout()
        self.txt_search = QLineEdit()
        self.txt_search.setPlaceholderText("Search description or receipt #…")
        self.txt_search.setClearButtonEnabled(True)
        top.addWidget(self.txt_search, 1)
        self.cmb_category = QComboBox()
        self.cmb_category.addItem("(All)", userData=None)
        for c in EXPENSE_CATEGORIES:
            self.cmb_category.addItem(c, userData=c)
        top.addWidget(self.cmb_category)
        self.btn_add = QPushButton("Add")
        self.btn_edit = QPushButton("Edit")
        self.btn_delete = QPushButton("Delete")
        self.btn_print = QPushButton("Print")
        for b in (self.btn_add, self.btn_edit, self.btn_delete, self.btn_print):
            top.addWidget(b)
        root.addLayout(top)

        self.lbl_total = QLabel("")
        root.addWidget(self.lbl_total)

        split = QSplitter(Qt.Horizontal)
        left = QWidget()
        left_lay = QVBoxLayout(left)
        left_lay.setContentsMargins(0, 0, 0, 0)
        self.tbl_expenses = TableView()
        left_lay.addWidget(self.tbl_expenses, 1)
        self.pager = Pager()
        left_lay.addWidget(self.pager)
        split.addWidget(left)

        self.tbl_totals = TableView()
        split.addWidget(self.tbl_totals)
        split.setStretchFactor(0, 3)
        split.setStretchFactor(1, 1)
        root.addWidget(split, 1)

    @property
    def search_text(self) -> str:
        return self.txt_search.text().strip()

    @property
    def selected_category(self) -> str | None:
        return self.cmb_category.currentData()
