from __future__ import annotations

from PySide6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget

from ...widgets.table_view import TableView


class UserView(QWidget):
    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("Users")

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        top = QHBoxLayout()
        self.txt_search = QLineEdit()
        self.txt_search.setPlaceholderText("Search username or name…")
        self.txt_search.setClearButtonEnabled(True)
        top.addWidget(self.txt_search, 1)
        self.btn_add = QPushButton("Add User")
        self.btn_edit = QPushButton("Edit")
        self.btn_password = QPushButton("Change Password")
        self.btn_deactivate = QPushButton("Deactivate")
        self.btn_refresh = QPushButton("Refresh")
        for b in (self.btn_add, self.btn_edit, self.btn_password, self.btn_deactivate, self.btn_refresh):
            top.addWidget(b)
        root.addLayout(top)

        self.lbl_summary = QLabel("")
        root.addWidget(self.lbl_summary)
        self.tbl = TableView()
        root.addWidget(self.tbl, 1)

    @property
    def search_text(self) -> str:
        return self.txt_search.text().strip()
