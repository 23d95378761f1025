from typing import List

from ...constants import PAYMENT_METHOD_LABELS
from ...utils.helpers import fmt_money
from ...widgets.records_model import RecordsTableModel


class TopProductsModel(RecordsTableModel):
    HEADERS = ["Product", "Qty Sold", "Revenue"]
    NUMERIC_COLUMNS = (1, 2)

    def display(self, p, col):
        return [p.product_name, p.total_quantity, fmt_money(p.total_revenue)][col]


class LowStockModel(RecordsTableModel):
    HEADERS = ["Product", "Branch", "Qty", "Reorder"]
    NUMERIC_COLUMNS = (2, 3)

    def display(self, s, col):
        return [
            s.product_name,
            s.branch_name or "",
            s.quantity,
            "" if s.reorder_level is None else s.reorder_level,
        ][col]


class PaymentMethodsModel(RecordsTableModel):
    HEADERS = ["Method", "Amount"]
    NUMERIC_COLUMNS = (1,)

    def display(self, row, col):
        method, amount = row
        return [PAYMENT_METHOD_LABELS.get(str(method).upper(), method), fmt_money(amount)][col]


class BranchComparisonModel(RecordsTableModel):
    HEADERS = ["Branch", "This Month", "This Year", "Transactions Today", "Net Profit"]
    NUMERIC_COLUMNS = (1, 2, 3, 4)

    def display(self, row, col):
        branch, s = row
        return [
            branch.name,
            fmt_money(s.total_sales_this_month),
            fmt_money(s.total_sales_this_year),
            s.transaction_count_today,
            fmt_money(s.net_profit_this_month),
        ][col]


class DailySalesModel(RecordsTableModel):
    """Rows from logic.daily_totals; one column per branch name."""

    def __init__(self, rows=None):
        super().__init__(rows)
        self.branch_names: List[str] = []
        self.HEADERS = ["Date", "Total"]
        self.NUMERIC_COLUMNS = (1,)

    def set_branches(self, names: List[str]) -> None:
        self.beginResetModel()
        self.branch_names = list(names)
        self.HEADERS = ["Date"] + self.branch_names + ["Total"]
        self.NUMERIC_COLUMNS = tuple(range(1, len(self.HEADERS)))
        self.endResetModel()

    def display(self, row, col):
        keys = ["date"] + self.branch_names + ["total"]
        value = row.get(keys[col], 0.0)
        return value if col == 0 else fmt_money(value)
