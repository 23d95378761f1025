from __future__ import annotations

from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QComboBox,
    QDateEdit,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...widgets.table_view import TableView
from .logic import REPORT_TYPES


def _date_edit(d: QDate) -> QDateEdit:
    e = QDateEdit()
    e.setDisplayFormat("yyyy-MM-dd")
    e.setCalendarPopup(True)
    e.setDate(d)
    return e


class ReportsView(QWidget):
    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("Reports")

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        top = QHBoxLayout()
        self.cmb_report = QComboBox()
        for key, label in REPORT_TYPES:
            self.cmb_report.addItem(label, userData=key)
        top.addWidget(self.cmb_report)
        today = QDate.currentDate()
        top.addWidget(QLabel("From"))
        self.date_from = _date_edit(QDate(today.year(), today.month(), 1))
        top.addWidget(self.date_from)
        top.addWidget(QLabel("To"))
        self.date_to = _date_edit(today)
        top.addWidget(self.date_to)
        top.addStretch(1)
        self.btn_generate = QPushButton("Generate")
        self.btn_print = QPushButton("Print")
        self.btn_pdf = QPushButton("Export PDF")
        for b in (self.btn_generate, self.btn_print, self.btn_pdf):
            top.addWidget(b)
        root.addLayout(top)

        self.lbl_totals = QLabel("")
        root.addWidget(self.lbl_totals)
        self.tbl = TableView()
        root.addWidget(self.tbl, 1)
        self.lbl_note = QLabel("")
        root.addWidget(self.lbl_note)

    @property
    def report_type(self) -> str:
        return self.cmb_report.currentData()

    @property
    def date_from_str(self) -> str:
        return self.date_from.date().toString("yyyy-MM-dd")

    @property
    def date_to_str(self) -> str:
        return self.date_to.date().toString("yyyy-MM-dd")
