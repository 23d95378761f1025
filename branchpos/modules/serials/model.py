from PySide6.QtGui import QColor

from ...constants import SERIAL_STATUS_LABELS
from ...utils.helpers import fmt_date
from ...widgets.records_model import RecordsTableModel

_STATUS_COLORS = {
    "IN_STOCK": "#1b7f3b",
    "SOLD": "#1f5fbf",
    "DEFECTIVE": "#b00020",
    "RETURNED": "#b26a00",
}


def status_label(status: str) -> str:
    return SERIAL_STATUS_LABELS.get(status, status or "")


class SerialsTableModel(RecordsTableModel):
    HEADERS = ["Serial #", "Product", "SKU", "Branch", "Status", "Purchase #", "Sale #", "Updated"]

    def display(self, sn, col):
        return [
            sn.serial_number,
            sn.product_name,
            sn.product_sku,
            sn.branch_name or "",
            status_label(sn.status),
            sn.purchase_number or "",
            sn.sale_number or "",
            fmt_date(sn.updated_at or sn.created_at),
        ][col]

    def foreground(self, sn, col):
        if col == 4 and sn.status in _STATUS_COLORS:
            return QColor(_STATUS_COLORS[sn.status])
        return None


class ProductBreakdownModel(RecordsTableModel):
    HEADERS = ["Product", "SKU", "Total", "In Stock", "Sold", "Transferred", "Returned", "Defective"]
    NUMERIC_COLUMNS = (2, 3, 4, 5, 6, 7)

    def display(self, p, col):
        return [p.product_name, p.sku, p.total, p.in_stock, p.sold, p.transferred, p.returned, p.defective][col]


class BranchBreakdownModel(RecordsTableModel):
    HEADERS = ["Branch", "Total", "In Stock", "Sold"]
    NUMERIC_COLUMNS = (1, 2, 3)

    def display(self, b, col):
        return [b.branch_name, b.total, b.in_stock, b.sold][col]
