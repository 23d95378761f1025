from PySide6.QtGui import QColor

from ...utils.helpers import fmt_money
from ...widgets.records_model import RecordsTableModel


class CategoriesTableModel(RecordsTableModel):
    HEADERS = ["Name", "Description", "Products"]
    NUMERIC_COLUMNS = (2,)

    def __init__(self, rows=None):
        super().__init__(rows)
        self.counts = {}

    def display(self, c, col):
        return [c.name, c.description or "", self.counts.get(c.id, 0)][col]


class ProductsTableModel(RecordsTableModel):
    HEADERS = ["SKU", "Name", "Category", "Price", "Serialized", "Status"]
    NUMERIC_COLUMNS = (3,)

    def display(self, p, col):
        return [
            p.sku,
            p.name,
            p.category_name or "",
            fmt_money(p.selling_price),
            "Yes" if p.requires_serial else "",
            "Active" if p.is_active else "Inactive",
        ][col]

    def foreground(self, p, col):
        if col == 5 and not p.is_active:
            return QColor("#808080")
        return None
