from __future__ import annotations

from PySide6.QtWidgets import QDialog, QDialogButtonBox, QFormLayout, QLabel, QVBoxLayout, QWidget

from ...utils.helpers import fmt_money, fmt_date
from ...widgets.table_view import TableView
from .model import PurchaseItemsModel


class PurchaseDetailsDialog(QDialog):
    def __init__(self, parent: QWidget | None, purchase):
        super().__init__(parent)
        self.setWindowTitle(f"Purchase {purchase.purchase_number}")
        self.setMinimumWidth(560)

        form = QFormLayout()
        form.addRow("PO #", QLabel(purchase.purchase_number))
        form.addRow("Date", QLabel(fmt_date(purchase.purchase_date)))
        form.addRow("Supplier", QLabel(purchase.supplier_name or ""))
        form.addRow("Branch", QLabel(purchase.branch_name or ""))
        form.addRow("Status", QLabel((purchase.status or "PENDING").title()))
        if purchase.notes:
            form.addRow("Notes", QLabel(purchase.notes))

        tbl = TableView()
        tbl.setModel(PurchaseItemsModel(purchase.items))
        tbl.resizeColumnsToContents()

        buttons = QDialogButtonBox(QDialogButtonBox.Close)
        buttons.rejected.connect(self.reject)

        lay = QVBoxLayout(self)
        lay.addLayout(form)
        lay.addWidget(tbl, 1)
        lay.addWidget(QLabel(f"<b>Total: {fmt_money(purchase.total_amount)}</b>"))
        lay.addWidget(buttons)
