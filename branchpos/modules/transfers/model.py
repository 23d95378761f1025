from ...widgets.records_model import RecordsTableModel
from ...constants import TRANSFER_STATUS_LABELS
from ...utils.helpers import fmt_date


def status_label(status: str) -> str:
    return TRANSFER_STATUS_LABELS.get((status or "").upper(), status or "")


class TransfersTableModel(RecordsTableModel):
    HEADERS = ["Transfer #", "From", "To", "Date", "Items", "Requested By", "Status"]
    NUMERIC_COLUMNS = (4,)

    def display(self, t, col):
        return [
            t.transfer_number,
            t.from_branch_name or "",
            t.to_branch_name or "",
            fmt_date(t.transfer_date or t.created_at),
            len(t.items),
            t.requested_by_name or "",
            status_label(t.status),
        ][col]


class TransferItemsModel(RecordsTableModel):
    HEADERS = ["Product", "SKU", "Qty"]
    NUMERIC_COLUMNS = (2,)

    def display(self, i, col):
        return [i.product_name, i.product_sku, i.quantity][col]
