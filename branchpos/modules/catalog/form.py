from __future__ import annotations

from PySide6.QtWidgets import QLineEdit, QWidget

from ..crud import RecordForm
from .logic import build_category_payload


class CategoryForm(RecordForm):
    def __init__(self, parent: QWidget | None = None, *, initial=None):
        super().__init__(parent, "Create Category" if initial is None else "Edit Category")
        self.txt_name = QLineEdit()
        self.txt_description = QLineEdit()
        self.form.addRow("Name*", self.txt_name)
        self.form.addRow("Description", self.txt_description)
        if initial is not None:
            self.txt_name.setText(initial.name)
            self.txt_description.setText(initial.description or "")

    def get_payload(self) -> dict:
        return build_category_payload(name=self.txt_name.text(), description=self.txt_description.text())
