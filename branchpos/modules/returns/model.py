from ...widgets.records_model import RecordsTableModel
from ...utils.helpers import fmt_money, fmt_date


class ReturnsTableModel(RecordsTableModel):
    HEADERS = ["Return #", "Date", "Branch", "Supplier", "Items", "Total", "Reason", "Status"]
    NUMERIC_COLUMNS = (4, 5)

    def display(self, r, col):
        return [
            r.return_number,
            fmt_date(r.return_date or r.created_at),
            r.branch_name or "",
            r.supplier_name or "",
            len(r.items),
            fmt_money(r.total_amount),
            r.reason or "",
            (r.status or "").title(),
        ][col]


class ReturnItemsModel(RecordsTableModel):
    HEADERS = ["Product", "Qty", "Unit Cost", "Total"]
    NUMERIC_COLUMNS = (1, 2, 3)

    def display(self, i, col):
        return [
            i.product_name,
            i.quantity,
            fmt_money(i.unit_cost),
            fmt_money(i.total_cost or i.quantity * i.unit_cost),
        ][col]
