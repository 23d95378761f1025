"""
Read-only sale details: header, line items with serial numbers, totals.
Also used as the receipt preview after a POS checkout.
"""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from ...constants import PAYMENT_METHOD_LABELS
from ...utils.helpers import fmt_money, fmt_date
from ...widgets.table_view import TableView
from .model import SaleItemsModel


class SaleDetailsDialog(QDialog):
    def __init__(self, parent: QWidget | None, sale, *, title: str = "Sale Details"):
        super().__init__(parent)
        self.setWindowTitle(f"{title} - {sale.sale_number}")
        self.setMinimumWidth(560)
        self.sale = sale

        form = QFormLayout()
        form.addRow("Sale #", QLabel(sale.sale_number))
        form.addRow("Date", QLabel(fmt_date(sale.created_at or sale.sale_date)))
        form.addRow("Branch", QLabel(sale.branch_name or ""))
        form.addRow("Customer", QLabel(sale.customer_name or "Walk-in"))
        form.addRow("Cashier", QLabel(sale.user_name or ""))
        form.addRow("Payment", QLabel(PAYMENT_METHOD_LABELS.get(sale.payment_method or "", sale.payment_method or "")))

        self.tbl_items = TableView()
        self.items_model = SaleItemsModel(sale.items)
        self.tbl_items.setModel(self.items_model)
        self.tbl_items.resizeColumnsToContents()

        totals = QFormLayout()
        totals.addRow("Subtotal", QLabel(fmt_money(sale.total_amount)))
        if sale.tax_amount:
            totals.addRow("Tax", QLabel(fmt_money(sale.tax_amount)))
        if sale.discount_amount:
            totals.addRow("Discount", QLabel(fmt_money(sale.discount_amount)))
        self.lbl_grand_total = QLabel(f"<b>{fmt_money(sale.grand_total)}</b>")
        totals.addRow("Total", self.lbl_grand_total)
        if sale.is_refunded:
            totals.addRow("Refunded", QLabel(f"{fmt_money(sale.refunded_amount)} ({sale.refund_status.title()})"))

        buttons = QDialogButtonBox(QDialogButtonBox.Close)
        buttons.rejected.connect(self.reject)
        buttons.accepted.connect(self.accept)

        lay = QVBoxLayout(self)
        lay.addLayout(form)
        lay.addWidget(self.tbl_items, 1)
        lay.addLayout(totals)
        lay.addWidget(buttons)
