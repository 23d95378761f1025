from PySide6.QtGui import QColor

from ...constants import ROLE_LABELS
from ...widgets.records_model import RecordsTableModel


class UsersTableModel(RecordsTableModel):
    HEADERS = ["Username", "Full Name", "Role", "Branch", "Email", "Phone", "Status"]

    def display(self, u, col):
        return [
            u.username,
            u.full_name,
            ROLE_LABELS.get(u.role, u.role),
            u.branch_name or "",
            u.email or "",
            u.phone or "",
            "Active" if u.is_active else "Inactive",
        ][col]

    def foreground(self, u, col):
        if col == 6 and not u.is_active:
            return QColor("#808080")
        return None
