from PySide6.QtGui import QColor

from ...widgets.records_model import RecordsTableModel
from ...utils.helpers import fmt_money, fmt_date


class StockTableModel(RecordsTableModel):
    HEADERS = ["Product", "SKU", "Category", "Branch", "Qty", "Reorder", "Cost", "Price", "Value", "Last Stocked"]
    NUMERIC_COLUMNS = (4, 5, 6, 7, 8)

    def display(self, s, col):
        return [
            s.product_name,
            s.product_sku,
            s.category_name or "",
            s.branch_name or "",
            s.quantity,
            "" if s.reorder_level is None else s.reorder_level,
            fmt_money(s.cost_price),
            fmt_money(s.selling_price),
            fmt_money(s.value),
            fmt_date(s.last_stock_date),
        ][col]

    def foreground(self, s, col):
        if col == 4 and s.is_low:
            return QColor("#b00020")
        return None
