from PySide6.QtGui import QColor

from ...constants import PAYMENT_METHOD_LABELS
from ...widgets.records_model import RecordsTableModel
from ...utils.helpers import fmt_money, fmt_date


class SalesTableModel(RecordsTableModel):
    HEADERS = ["Sale #", "Date", "Branch", "Customer", "Cashier", "Payment", "Total", "Refund"]
    NUMERIC_COLUMNS = (6,)

    def display(self, s, col):
        return [
            s.sale_number,
            fmt_date(s.created_at or s.sale_date),
            s.branch_name or "",
            s.customer_name or "Walk-in",
            s.user_name or "",
            PAYMENT_METHOD_LABELS.get(s.payment_method or "", s.payment_method or ""),
            fmt_money(s.grand_total),
            "" if s.refund_status == "NONE" else s.refund_status.title(),
        ][col]

    def foreground(self, s, col):
        if col == 7 and s.is_refunded:
            return QColor("#b00020")
        return None


class SaleItemsModel(RecordsTableModel):
    HEADERS = ["Product", "SKU", "Qty", "Unit Price", "Total", "Serial Numbers"]
    NUMERIC_COLUMNS = (2, 3, 4)

    def display(self, i, col):
        return [
            i.product_name,
            i.product_sku,
            i.quantity,
            fmt_money(i.unit_price),
            fmt_money(i.total_price or i.unit_price * i.quantity),
            ", ".join(i.serial_numbers),
        ][col]
