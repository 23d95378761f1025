from __future__ import annotations

from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QCheckBox,
    QDateEdit,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...widgets.pager import Pager
from ...widgets.table_view import TableView


class SalesView(QWidget):
    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("Sales")

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        top = QHBoxLayout()
        self.txt_search = QLineEdit()
        self.txt_search.setPlaceholderText("Search sale # or customer…")
        self.txt_search.setClearButtonEnabled(True)
        top.addWidget(self.txt_search, 1)

        self.chk_range = QCheckBox("Date range")
        self.chk_range.setChecked(True)
        top.addWidget(self.chk_range)
        self.date_from = QDateEdit(QDate.currentDate())
        self.date_from.setCalendarPopup(True)
        self.date_from.setDisplayFormat("yyyy-MM-dd")
        self.date_to = QDateEdit(QDate.currentDate())
        self.date_to.setCalendarPopup(True)
        self.date_to.setDisplayFormat("yyyy-MM-dd")
        top.addWidget(QLabel("From:"))
        top.addWidget(self.date_from)
        top.addWidget(QLabel("To:"))
        top.addWidget(self.date_to)

        self.btn_refresh = QPushButton("Refresh")
        self.btn_details = QPushButton("Details")
        self.btn_void = QPushButton("Void / Refund")
        top.addWidget(self.btn_refresh)
        top.addWidget(self.btn_details)
        top.addWidget(self.btn_void)
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
    def use_range(self) -> bool:
        return self.chk_range.isChecked()

    @property
    def date_from_str(self) -> str:
        return self.date_from.date().toString("yyyy-MM-dd")

    @property
    def date_to_str(self) -> str:
        return self.date_to.date().toString("yyyy-MM-dd")
