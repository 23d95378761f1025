from __future__ import annotations

from typing import Dict

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...widgets.table_view import TableView

# (key, title, caption)
KPIS = (
    ("sales_today", "Sales Today", "Revenue"),
    ("sales_month", "This Month", "Revenue"),
    ("sales_year", "This Year", "Revenue"),
    ("transactions", "Transactions", "Today"),
    ("average", "Average Ticket", "Per transaction"),
    ("expenses", "Expenses", "This month"),
    ("net_profit", "Net Profit", "This month"),
)


class KPICard(QFrame):
    def __init__(self, title: str, caption: str) -> None:
        super().__init__()
        self.setObjectName("kpi_card")
        self.setStyleSheet("""
            QFrame#kpi_card {
                border: 1px solid #e1e1e1;
                border-radius: 10px;
                background: #fff;
            }
        """)

        v = QVBoxLayout(self)
        v.setContentsMargins(12, 10, 12, 12)
        v.setSpacing(2)

        self.lbl_title = QLabel(title)
        f = self.lbl_title.font()
        f.setBold(True)
        self.lbl_title.setFont(f)

        self.lbl_value = QLabel("—")
        fv = QFont(self.lbl_value.font())
        fv.setPointSize(fv.pointSize() + 6)
        fv.setBold(True)
        self.lbl_value.setFont(fv)

        self.lbl_caption = QLabel(caption)
        self.lbl_caption.setStyleSheet("color:#777;")

        v.addWidget(self.lbl_title)
        v.addWidget(self.lbl_value)
        v.addWidget(self.lbl_caption)

    def set_value(self, text: str) -> None:
        self.lbl_value.setText(text)


class DashboardView(QWidget):
    """Pure-UI dashboard surface; the controller fills it via `set_kpi` and the table models."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Dashboard")
        self.cards: Dict[str, KPICard] = {}

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        top = QHBoxLayout()
        self.lbl_scope = QLabel("")
        f = self.lbl_scope.font()
        f.setPointSize(f.pointSize() + 2)
        f.setBold(True)
        self.lbl_scope.setFont(f)
        top.addWidget(self.lbl_scope, 1)
        self.btn_refresh = QPushButton("Refresh")
        top.addWidget(self.btn_refresh)
        root.addLayout(top)

        grid = QGridLayout()
        for i, (key, title, caption) in enumerate(KPIS):
            card = KPICard(title, caption)
            self.cards[key] = card
            grid.addWidget(card, i // 4, i % 4)
        root.addLayout(grid)

        lists = QHBoxLayout()
        self.tbl_top = TableView()
        self.tbl_low = TableView()
        self.tbl_methods = TableView()
        for title, tbl in (
            ("Top Products", self.tbl_top),
            ("Low Stock", self.tbl_low),
            ("Sales by Payment Method", self.tbl_methods),
        ):
            box = QGroupBox(title)
            bl = QVBoxLayout(box)
            bl.addWidget(tbl)
            lists.addWidget(box, 1)
        root.addLayout(lists, 1)

        history = QHBoxLayout()
        self.tbl_recent = TableView()
        self.tbl_daily = TableView()
        self.tbl_compare = TableView()
        self.box_recent = QGroupBox("Recent Sales")
        self.box_daily = QGroupBox("Daily Sales")
        self.box_compare = QGroupBox("Branch Comparison (this month)")
        for box, tbl in (
            (self.box_recent, self.tbl_recent),
            (self.box_daily, self.tbl_daily),
            (self.box_compare, self.tbl_compare),
        ):
            bl = QVBoxLayout(box)
            bl.addWidget(tbl)
            history.addWidget(box, 1)
        root.addLayout(history, 1)

    def set_kpi(self, key: str, text: str) -> None:
        card = self.cards.get(key)
        if card is not None:
            card.set_value(text)
