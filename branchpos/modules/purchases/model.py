from ...widgets.records_model import RecordsTableModel
from ...utils.helpers import fmt_money, fmt_date


class PurchasesTableModel(RecordsTableModel):
    HEADERS = ["PO #", "Date", "Branch", "Supplier", "Items", "Total", "Status"]
    NUMERIC_COLUMNS = (4, 5)

    def display(self, p, col):
        return [
            p.purchase_number,
            fmt_date(p.purchase_date),
            p.branch_name or "",
            p.supplier_name or "",
            len(p.items),
            fmt_money(p.total_amount),
            (p.status or "PENDING").title(),
        ][col]


class PurchaseItemsModel(RecordsTableModel):
    HEADERS = ["Product", "SKU", "Qty", "Unit Cost", "Selling Price", "Total"]
    NUMERIC_COLUMNS = (2, 3, 4, 5)

    def display(self, i, col):
        return [
            i.product_name,
            i.product_sku,
            i.quantity,
            fmt_money(i.unit_cost),
            "" if i.selling_price is None else fmt_money(i.selling_price),
            fmt_money(i.total_cost or i.unit_cost * i.quantity),
        ][col]
