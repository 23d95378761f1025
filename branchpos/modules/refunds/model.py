from ...widgets.records_model import RecordsTableModel
from ...utils.helpers import fmt_money, fmt_date


class RefundsTableModel(RecordsTableModel):
    HEADERS = ["Refund #", "Date", "Branch", "Receipt #", "Customer", "Method", "Total", "Status"]
    NUMERIC_COLUMNS = (6,)

    def display(self, r, col):
        return [
            r.refund_number,
            fmt_date(r.refund_date or r.created_at),
            r.branch_name or "",
            r.sale_number or "",
            r.customer_name or "Walk-in",
            (r.refund_method or "").replace("_", " ").title(),
            fmt_money(r.total_amount),
            (r.status or "").title(),
        ][col]


class RefundItemsModel(RecordsTableModel):
    HEADERS = ["Product", "Qty", "Unit Price", "Total"]
    NUMERIC_COLUMNS = (1, 2, 3)

    def display(self, i, col):
        return [
            i.product_name,
            i.quantity,
            fmt_money(i.unit_price),
            fmt_money(i.total_price or i.quantity * i.unit_price),
        ][col]
