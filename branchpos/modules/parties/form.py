from __future__ import annotations

from PySide6.QtWidgets import QLineEdit, QWidget

from ..crud import RecordForm
from .logic import build_party_payload


class PartyForm(RecordForm):
    """Customer or supplier dialog; suppliers get a contact person field."""

    def __init__(self, parent: QWidget | None = None, *, noun: str = "Customer", supplier: bool = False,
                 initial=None):
        super().__init__(parent, f"{'Add' if initial is None else 'Edit'} {noun}")
        self.supplier = supplier

        self.txt_name = QLineEdit()
        self.txt_contact = QLineEdit()
        self.txt_phone = QLineEdit()
        self.txt_email = QLineEdit()
        self.txt_address = QLineEdit()

        self.form.addRow("Name*", self.txt_name)
        if supplier:
            self.form.addRow("Contact Person", self.txt_contact)
        self.form.addRow("Phone", self.txt_phone)
        self.form.addRow("Email", self.txt_email)
        self.form.addRow("Address", self.txt_address)

        if initial is not None:
            self.txt_name.setText(initial.name)
            self.txt_contact.setText(getattr(initial, "contact_person", None) or "")
            self.txt_phone.setText(initial.phone or "")
            self.txt_email.setText(initial.email or "")
            self.txt_address.setText(initial.address or "")

    def get_payload(self) -> dict:
        return build_party_payload(
            name=self.txt_name.text(),
            email=self.txt_email.text(),
            phone=self.txt_phone.text(),
            address=self.txt_address.text(),
            contact_person=self.txt_contact.text() if self.supplier else None,
        )
