"""
Create / edit user dialog (the password field is only shown when creating)
and the change-password dialog.
"""

from __future__ import annotations

from typing import Iterable, Optional

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QVBoxLayout,
    QWidget,
)

from ...constants import ROLES, ROLE_LABELS
from ..crud import RecordForm
from ...utils.validators import ValidationError
from .logic import build_user_payload, validate_new_password


class UserForm(QDialog):
    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        branches: Iterable = (),
        default_branch_id: Optional[int] = None,
        initial=None,
    ):
        super().__init__(parent)
        self.creating = initial is None
        self.setWindowTitle("Add User" if self.creating else "Edit User")
        self.setModal(True)
        self.setMinimumWidth(400)

        self.cmb_branch = QComboBox()
        self.cmb_branch.addItem("Select branch…", userData=None)
        for b in branches:
            self.cmb_branch.addItem(b.name, userData=b.id)
        self.txt_username = QLineEdit()
        self.txt_password = QLineEdit()
        self.txt_password.setEchoMode(QLineEdit.Password)
        self.txt_full_name = QLineEdit()
        self.txt_email = QLineEdit()
        self.txt_phone = QLineEdit()
        self.cmb_role = QComboBox()
        for r in ROLES:
            self.cmb_role.addItem(ROLE_LABELS[r], userData=r)
        self.cmb_role.setCurrentIndex(ROLES.index("CASHIER"))

        self.lbl_error = QLabel("")
        self.lbl_error.setStyleSheet("color:#b00020;")
        self.lbl_error.setVisible(False)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)

        form = QFormLayout()
        form.addRow("Branch*", self.cmb_branch)
        form.addRow("Username*", self.txt_username)
        if self.creating:
            form.addRow("Password*", self.txt_password)
        form.addRow("Full Name*", self.txt_full_name)
        form.addRow("Email", self.txt_email)
        form.addRow("Phone", self.txt_phone)
        form.addRow("Role*", self.cmb_role)

        lay = QVBoxLayout(self)
        lay.addLayout(form)
        lay.addWidget(self.lbl_error)
        lay.addWidget(self.buttons)

        branch_id = initial.branch_id if initial else default_branch_id
        if branch_id is not None:
            i = self.cmb_branch.findData(branch_id)
            if i >= 0:
                self.cmb_branch.setCurrentIndex(i)
        if initial:
            self.txt_username.setText(initial.username)
            self.txt_full_name.setText(initial.full_name)
            self.txt_email.setText(initial.email or "")
            self.txt_phone.setText(initial.phone or "")
            i = self.cmb_role.findData(initial.role)
            if i >= 0:
                self.cmb_role.setCurrentIndex(i)

        self._payload: Optional[dict] = None

    def get_payload(self) -> dict | None:
        self.lbl_error.setVisible(False)
        try:
            return build_user_payload(
                branch_id=self.cmb_branch.currentData(),
                username=self.txt_username.text(),
                full_name=self.txt_full_name.text(),
                role=self.cmb_role.currentData(),
                email=self.txt_email.text(),
                phone=self.txt_phone.text(),
                password=self.txt_password.text(),
                creating=self.creating,
            )
        except ValidationError as e:
            self.lbl_error.setText(str(e))
            self.lbl_error.setVisible(True)
            return None

    def accept(self) -> None:  # type: ignore[override]
        p = self.get_payload()
        if p is None:
            return
        self._payload = p
        super().accept()

    def payload(self) -> dict | None:
        return self._payload


class PasswordForm(RecordForm):
    """Set a new password for an existing user."""

    def __init__(self, parent: QWidget | None = None, *, user=None):
        name = (user.full_name or user.username) if user is not None else ""
        super().__init__(parent, f"Change Password - {name}" if name else "Change Password")
        self.txt_new = QLineEdit()
        self.txt_new.setEchoMode(QLineEdit.Password)
        self.txt_confirm = QLineEdit()
        self.txt_confirm.setEchoMode(QLineEdit.Password)
        self.form.addRow("New Password*", self.txt_new)
        self.form.addRow("Confirm Password*", self.txt_confirm)

    def get_payload(self) -> dict:
        return {"newPassword": validate_new_password(self.txt_new.text(), self.txt_confirm.text())}
