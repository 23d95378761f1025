from PySide6.QtGui import QColor

from ...widgets.records_model import RecordsTableModel


class BranchesTableModel(RecordsTableModel):
    HEADERS = ["Code", "Name", "Address", "Phone", "Email", "Status"]

    def display(self, b, col):
        return [
            b.code,
            b.name,
            b.address or "",
            b.phone or "",
            b.email or "",
            "Active" if b.is_active else "Inactive",
        ][col]

    def foreground(self, b, col):
        if col == 5 and not b.is_active:
            return QColor("#808080")
        return None
