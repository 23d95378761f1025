"""
View for the point-of-sale page.

Left: product search, category filter and the sellable stock table.
Right: customer selection, cart table with line actions, total and the
payment buttons.
"""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QComboBox,
    QDoubleSpinBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSplitter,
    QVBoxLayout,
    QWidget,
)

from ...widgets.table_view import TableView


class PosView(QWidget):
    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("Point of Sale")

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)
        splitter = QSplitter(Qt.Horizontal)
        root.addWidget(splitter, 1)

        # --- products ----------------------------------------------------
        left = QWidget()
        left_lay = QVBoxLayout(left)
        left_lay.setContentsMargins(0, 0, 0, 0)

        row = QHBoxLayout()
        self.txt_search = QLineEdit()
        self.txt_search.setPlaceholderText("Search by name or SKU…")
        self.txt_search.setClearButtonEnabled(True)
        row.addWidget(self.txt_search, 1)
        self.cmb_category = QComboBox()
        self.cmb_category.setMinimumWidth(150)
        row.addWidget(self.cmb_category)
        self.btn_refresh = QPushButton("Refresh")
        row.addWidget(self.btn_refresh)
        left_lay.addLayout(row)

        self.tbl_products = TableView()
        left_lay.addWidget(self.tbl_products, 1)
        self.lbl_products_empty = QLabel("")
        self.lbl_products_empty.setAlignment(Qt.AlignCenter)
        left_lay.addWidget(self.lbl_products_empty)
        self.btn_add = QPushButton("Add to Cart")
        left_lay.addWidget(self.btn_add)
        splitter.addWidget(left)

        # --- cart --------------------------------------------------------
        right = QWidget()
        right_lay = QVBoxLayout(right)
        right_lay.setContentsMargins(0, 0, 0, 0)

        cust_box = QGroupBox("Customer")
        cust_lay = QVBoxLayout(cust_box)
        self.txt_customer_search = QLineEdit()
        self.txt_customer_search.setPlaceholderText("Filter customers by name or phone…")
        self.txt_customer_search.setClearButtonEnabled(True)
        cust_lay.addWidget(self.txt_customer_search)
        self.cmb_customer = QComboBox()
        cust_lay.addWidget(self.cmb_customer)
        self.txt_quick_name = QLineEdit()
        self.txt_quick_name.setPlaceholderText("Walk-in customer name (optional)")
        cust_lay.addWidget(self.txt_quick_name)
        right_lay.addWidget(cust_box)

        self.tbl_cart = TableView()
        right_lay.addWidget(self.tbl_cart, 1)

        line_row = QHBoxLayout()
        self.btn_minus = QPushButton("−")
        self.btn_plus = QPushButton("+")
        self.btn_serials = QPushButton("Serials…")
        self.btn_remove = QPushButton("Remove")
        self.spin_price = QDoubleSpinBox()
        self.spin_price.setMaximum(10**9)
        self.spin_price.setDecimals(2)
        self.spin_price.setAlignment(Qt.AlignRight)
        self.btn_set_price = QPushButton("Set Price")
        for w in (self.btn_minus, self.btn_plus, self.btn_serials, self.btn_remove):
            line_row.addWidget(w)
        line_row.addStretch(1)
        line_row.addWidget(self.spin_price)
        line_row.addWidget(self.btn_set_price)
        right_lay.addLayout(line_row)

        self.lbl_total = QLabel("Total: 0.00")
        self.lbl_total.setAlignment(Qt.AlignRight)
        self.lbl_total.setStyleSheet("font-size:16px; font-weight:bold;")
        right_lay.addWidget(self.lbl_total)

        pay_row = QHBoxLayout()
        self.btn_cash = QPushButton("Cash")
        self.btn_card = QPushButton("Card")
        self.btn_mobile = QPushButton("Mobile Money")
        self.btn_clear = QPushButton("Clear")
        for w in (self.btn_cash, self.btn_card, self.btn_mobile):
            pay_row.addWidget(w)
        pay_row.addStretch(1)
        pay_row.addWidget(self.btn_clear)
        right_lay.addLayout(pay_row)
        splitter.addWidget(right)
        splitter.setSizes([600, 420])

    @property
    def search_text(self) -> str:
        return self.txt_search.text().strip()

    @property
    def selected_category(self) -> str:
        return self.cmb_category.currentData() or "all"

    def set_checkout_enabled(self, enabled: bool) -> None:
        for b in (self.btn_cash, self.btn_card, self.btn_mobile):
            b.setEnabled(enabled)
