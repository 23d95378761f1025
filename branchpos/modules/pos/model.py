from PySide6.QtGui import QColor

from ...widgets.records_model import RecordsTableModel
from ...utils.helpers import fmt_money


class ProductsTableModel(RecordsTableModel):
    HEADERS = ["Product", "SKU", "Category", "Price", "In Stock"]
    NUMERIC_COLUMNS = (3, 4)

    def display(self, s, col):
        return [
            s.product_name,
            s.product_sku,
            s.category_name or "",
            fmt_money(s.selling_price),
            f"{s.quantity}{' (serial)' if s.requires_serial else ''}",
        ][col]

    def foreground(self, s, col):
        if col == 4 and s.is_low:
            return QColor("#b26a00")
        return None


class CartTableModel(RecordsTableModel):
    HEADERS = ["Product", "Qty", "Price", "Total", "Serials"]
    NUMERIC_COLUMNS = (1, 2, 3)

    def display(self, ln, col):
        return [
            ln.name,
            ln.quantity,
            fmt_money(ln.price),
            fmt_money(ln.line_total),
            ", ".join(ln.serial_numbers),
        ][col]
