from ...widgets.records_model import RecordsTableModel
from ...constants import PAYMENT_METHOD_LABELS
from ...utils.helpers import fmt_money, fmt_date


class ExpensesTableModel(RecordsTableModel):
    HEADERS = ["Expense #", "Date", "Branch", "Category", "Description", "Amount", "Method", "Receipt #"]
    NUMERIC_COLUMNS = (5,)

    def display(self, e, col):
        return [
            e.expense_number or "",
            fmt_date(e.expense_date),
            e.branch_name or "",
            e.category,
            e.description,
            fmt_money(e.amount),
            PAYMENT_METHOD_LABELS.get((e.payment_method or "").upper(), e.payment_method or ""),
            e.receipt_number or "",
        ][col]


class CategoryTotalsModel(RecordsTableModel):
    HEADERS = ["Category", "Total"]
    NUMERIC_COLUMNS = (1,)

    def display(self, row, col):
        name, total = row
        return [name, fmt_money(total)][col]
