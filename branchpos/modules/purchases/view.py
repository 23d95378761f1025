from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...widgets.pager import Pager
from ...widgets.table_view import TableView


class PurchaseView(QWidget):
    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("Purchase Orders")

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        top = QHBoxLayout()
        self.txt_search = QLineEdit()
        self.txt_search.setPlaceholderText("Search PO # or supplier…")
        self.txt_search.setClearButtonEnabled(True)
        top.addWidget(self.txt_search, 1)
        self.chk_pending = QCheckBox("Pending only")
        top.addWidget(self.chk_pending)
        self.btn_new = QPushButton("New Purchase Order")
        self.btn_details = QPushButton("Details")
        self.btn_receive = QPushButton("Receive")
        self.btn_refresh = QPushButton("Refresh")
        for b in (self.btn_new, self.btn_details, self.btn_receive, self.btn_refresh):
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
    def pending_only(self) -> bool:
        return self.chk_pending.isChecked()
