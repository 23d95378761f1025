from __future__ import annotations

from typing import Dict

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from ...widgets.table_view import TableView
from .logic import OUTGOING, INCOMING, PENDING


class TransferView(QWidget):
    TAB_TITLES = ((OUTGOING, "Outgoing"), (INCOMING, "Incoming"), (PENDING, "Pending Approval"))

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("Transfers")

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        top = QHBoxLayout()
        self.lbl_summary = QLabel("")
        top.addWidget(self.lbl_summary, 1)
        self.btn_new = QPushButton("New Transfer")
        self.btn_refresh = QPushButton("Refresh")
        top.addWidget(self.btn_new)
        top.addWidget(self.btn_refresh)
        root.addLayout(top)

        self.tabs = QTabWidget()
        self.tables: Dict[str, TableView] = {}
        for key, title in self.TAB_TITLES:
            tbl = TableView()
            self.tables[key] = tbl
            self.tabs.addTab(tbl, title)
        root.addWidget(self.tabs, 1)

        actions = QHBoxLayout()
        self.btn_details = QPushButton("Details")
        self.btn_approve = QPushButton("Approve")
        self.btn_reject = QPushButton("Reject")
        self.btn_send = QPushButton("Send")
        self.btn_receive = QPushButton("Receive")
        for b in (self.btn_details, self.btn_approve, self.btn_reject, self.btn_send, self.btn_receive):
            actions.addWidget(b)
        actions.addStretch(1)
        root.addLayout(actions)

    @property
    def current_tab(self) -> str:
        return self.TAB_TITLES[self.tabs.currentIndex()][0]
