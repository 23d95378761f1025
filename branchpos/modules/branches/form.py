from __future__ import annotations

from PySide6.QtWidgets import QCheckBox, QLineEdit, QWidget

from ..crud import RecordForm
from .logic import build_branch_payload


class BranchForm(RecordForm):
    def __init__(self, parent: QWidget | None = None, *, initial=None):
        super().__init__(parent, "Add Branch" if initial is None else "Edit Branch")

        self.txt_name = QLineEdit()
        self.txt_code = QLineEdit()
        self.txt_code.setPlaceholderText("e.g. MS")
        self.txt_address = QLineEdit()
        self.txt_phone = QLineEdit()
        self.txt_email = QLineEdit()
        self.chk_active = QCheckBox("Active")
        self.chk_active.setChecked(True)

        self.form.addRow("Name*", self.txt_name)
        self.form.addRow("Code*", self.txt_code)
        self.form.addRow("Address", self.txt_address)
        self.form.addRow("Phone", self.txt_phone)
        self.form.addRow("Email", self.txt_email)
        self.form.addRow("", self.chk_active)

        if initial is not None:
            self.txt_name.setText(initial.name)
            self.txt_code.setText(initial.code)
            self.txt_address.setText(initial.address or "")
            self.txt_phone.setText(initial.phone or "")
            self.txt_email.setText(initial.email or "")
            self.chk_active.setChecked(initial.is_active)

    def get_payload(self) -> dict:
        return build_branch_payload(
            name=self.txt_name.text(),
            code=self.txt_code.text(),
            address=self.txt_address.text(),
            phone=self.txt_phone.text(),
            email=self.txt_email.text(),
            is_active=self.chk_active.isChecked(),
        )
