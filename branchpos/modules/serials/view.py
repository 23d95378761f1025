from __future__ import annotations

from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from ...constants import SERIAL_STATUSES, SERIAL_STATUS_LABELS
from ...widgets.pager import Pager
from ...widgets.table_view import TableView


class SerialView(QWidget):
    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("Serial Numbers")

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        top = QHBoxLayout()
        self.lbl_stats = QLabel("")
        top.addWidget(self.lbl_stats, 1)
        self.btn_lookup = QPushButton("Lookup")
        self.btn_status = QPushButton("Update Status")
        self.btn_refresh = QPushButton("Refresh")
        for b in (self.btn_lookup, self.btn_status, self.btn_refresh):
            top.addWidget(b)
        root.addLayout(top)

        self.tabs = QTabWidget()

        # All serials
        all_tab = QWidget()
        all_lay = QVBoxLayout(all_tab)
        filters = QHBoxLayout()
        self.txt_search = QLineEdit()
        self.txt_search.setPlaceholderText("Search serial, product, SKU, sale or purchase #…")
        self.txt_search.setClearButtonEnabled(True)
        filters.addWidget(self.txt_search, 1)
        self.cmb_status = QComboBox()
        self.cmb_status.addItem("All statuses", userData="all")
        for s in SERIAL_STATUSES:
            self.cmb_status.addItem(SERIAL_STATUS_LABELS[s], userData=s)
        filters.addWidget(self.cmb_status)
        all_lay.addLayout(filters)
        self.tbl = TableView()
        all_lay.addWidget(self.tbl, 1)
        self.pager = Pager()
        all_lay.addWidget(self.pager)
        self.tabs.addTab(all_tab, "All Serials")

        self.tbl_products = TableView()
        self.tabs.addTab(self.tbl_products, "By Product")
        self.tbl_branches = TableView()
        self.branch_tab_index = self.tabs.addTab(self.tbl_branches, "By Branch")
        self.tbl_recent = TableView()
        self.tabs.addTab(self.tbl_recent, "Recent Activity")

        root.addWidget(self.tabs, 1)

    @property
    def search_text(self) -> str:
        return self.txt_search.text().strip()

    @property
    def status_filter(self) -> str:
        return self.cmb_status.currentData() or "all"
