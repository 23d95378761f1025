from PySide6.QtGui import QColor

from ...constants import PAYMENT_METHOD_LABELS
from ...utils.helpers import fmt_money, fmt_date
from ...widgets.records_model import RecordsTableModel


class SalesReportModel(RecordsTableModel):
    HEADERS = ["Receipt #", "Date", "Branch", "Customer", "Payment", "Total"]
    NUMERIC_COLUMNS = (5,)

    def display(self, s, col):
        return [
            s.sale_number,
            fmt_date(s.sale_date or s.created_at),
            s.branch_name or "",
            s.customer_name or "Walk-in",
            PAYMENT_METHOD_LABELS.get((s.payment_method or "").upper(), s.payment_method or ""),
            fmt_money(s.grand_total),
        ][col]


class PurchasesReportModel(RecordsTableModel):
    HEADERS = ["PO #", "Date", "Branch", "Supplier", "Status", "Total"]
    NUMERIC_COLUMNS = (5,)

    def display(self, p, col):
        return [
            p.purchase_number,
            fmt_date(p.purchase_date),
            p.branch_name or "",
            p.supplier_name or "",
            (p.status or "").title(),
            fmt_money(p.total_amount),
        ][col]


class InventoryReportModel(RecordsTableModel):
    HEADERS = ["Product", "SKU", "Branch", "Qty", "Cost", "Value"]
    NUMERIC_COLUMNS = (3, 4, 5)

    def display(self, s, col):
        return [
            s.product_name,
            s.product_sku,
            s.branch_name or "",
            s.quantity,
            fmt_money(s.cost_price),
            fmt_money(s.quantity * s.cost_price),
        ][col]

    def foreground(self, s, col):
        if col == 3 and s.is_low:
            return QColor("#b00020")
        return None


class ProfitLossModel(RecordsTableModel):
    HEADERS = ["Line", "Amount"]
    NUMERIC_COLUMNS = (1,)

    def display(self, row, col):
        label, value, is_pct = row
        if col == 0:
            return label
        return f"{value:.1f}%" if is_pct else fmt_money(value)

    def foreground(self, row, col):
        label, value, _ = row
        if col == 1 and label == "Gross Profit":
            return QColor("#1b7f3b" if value >= 0 else "#b00020")
        return None
