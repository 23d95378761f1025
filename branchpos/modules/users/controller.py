from __future__ import annotations

from typing import List

from PySide6.QtWidgets import QWidget

from ..base_module import BranchModule
from .form import PasswordForm, UserForm
from .logic import users_for_branch
from .model import UsersTableModel
from .view import UserView
from ...utils import ui_helpers as ui


class UserController(BranchModule):
    def __init__(self, api, context):
        super().__init__(api, context)
        self.users: List = []

        self.view = UserView()
        self.model = UsersTableModel([])
        self.view.tbl.setModel(self.model)

        self.view.txt_search.textChanged.connect(lambda _=None: self._render())
        self.view.btn_add.clicked.connect(self._on_add)
        self.view.btn_edit.clicked.connect(self._on_edit)
        self.view.btn_password.clicked.connect(self._on_change_password)
        self.view.btn_deactivate.clicked.connect(self._on_deactivate)
        self.view.btn_refresh.clicked.connect(self._reload)
        self.view.tbl.doubleClicked.connect(lambda _=None: self._on_edit())

        self._reload()

    def get_widget(self) -> QWidget:
        return self.view

    def _reload(self) -> None:
        try:
            self.users = self.api.users.list_all()
        except Exception as e:
            self.users = []
            self._handle_error("Failed to load users", e, "Failed to load users")
        self._render()

    def filtered(self) -> list:
        rows = users_for_branch(self.users, self.branch_id)
        term = self.view.search_text.lower()
        if term:
            rows = [u for u in rows if term in u.username.lower() or term in u.full_name.lower()]
        return rows

    def _render(self) -> None:
        rows = self.filtered()
        self.model.replace(rows)
        self.view.tbl.resizeColumnsToContents()
        active = sum(1 for u in rows if u.is_active)
        self.view.lbl_summary.setText(f"{len(rows)} users · {active} active")

    def _selected(self):
        r = self.view.tbl.selected_row()
        return None if r is None else self.model.at(r)

    # ------------------------------------------------------------------
    def _on_add(self) -> None:
        dlg = UserForm(self.view, branches=self.ctx.branches, default_branch_id=self.branch_id)
        if not dlg.exec():
            return
        payload = dlg.payload()
        if not payload:
            return
        try:
            self.api.users.create(payload)
        except Exception as e:
            self._handle_error("Failed to create user", e, "Failed to create user")
            return
        ui.info(self.view, "User", "User created successfully")
        self._reload()

    def _on_edit(self) -> None:
        user = self._selected()
        if user is None:
            ui.info(self.view, "Select", "Please select a user.")
            return
        dlg = UserForm(self.view, branches=self.ctx.branches, initial=user)
        if not dlg.exec():
            return
        payload = dlg.payload()
        if not payload:
            return
        try:
            self.api.users.update(user.id, payload)
        except Exception as e:
            self._handle_error("Failed to update user", e, "Failed to update user")
            return
        ui.info(self.view, "User", "User updated successfully")
        self._reload()

    def _on_change_password(self) -> None:
        user = self._selected()
        if user is None:
            ui.info(self.view, "Select", "Please select a user.")
            return
        dlg = PasswordForm(self.view, user=user)
        if not dlg.exec():
            return
        payload = dlg.payload()
        if not payload:
            return
        try:
            self.api.users.change_password(user.id, payload["newPassword"])
        except Exception as e:
            self._handle_error("Failed to change password", e, "Failed to change password")
            return
        ui.info(self.view, "User", "Password changed successfully")

    def _on_deactivate(self) -> None:
        user = self._selected()
        if user is None:
            ui.info(self.view, "Select", "Please select a user.")
            return
        if not ui.confirm(self.view, "Deactivate user", f"Deactivate {user.full_name or user.username}?"):
            return
        try:
            self.api.users.deactivate(user.id)
        except Exception as e:
            self._handle_error("Failed to deactivate user", e, "Failed to deactivate user")
            return
        ui.info(self.view, "User", "User deactivated successfully")
        self._reload()
