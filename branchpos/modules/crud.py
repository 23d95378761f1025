"""
Shared pieces for the company-wide master data pages (branches, customers,
suppliers, categories, products): a searchable list with add/edit/delete,
and a form dialog base that shows validation errors inline.

These lists are not branch-scoped; a branch change simply reloads them.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .base_module import BranchModule
from ..utils import ui_helpers as ui
from ..utils.validators import ValidationError
from ..widgets.table_view import TableView


class RecordForm(QDialog):
    """Subclasses add rows to `self.form` and implement `get_payload()`."""

    def __init__(self, parent: QWidget | None, title: str):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setModal(True)
        self.setMinimumWidth(380)
        self.form = QFormLayout()

        self.lbl_error = QLabel("")
        self.lbl_error.setStyleSheet("color:#b00020;")
        self.lbl_error.setVisible(False)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)

        lay = QVBoxLayout(self)
        lay.addLayout(self.form)
        lay.addWidget(self.lbl_error)
        lay.addWidget(self.buttons)
        self._payload: Optional[dict] = None

    def get_payload(self) -> dict:
        raise NotImplementedError

    def accept(self) -> None:  # type: ignore[override]
        self.lbl_error.setVisible(False)
        try:
            p = self.get_payload()
        except ValidationError as e:
            self.lbl_error.setText(str(e))
            self.lbl_error.setVisible(True)
            return
        self._payload = p
        super().accept()

    def payload(self) -> dict | None:
        return self._payload


class RecordListView(QWidget):
    def __init__(self, title: str, add_label: str, search_hint: str, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle(title)

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        top = QHBoxLayout()
        self.txt_search = QLineEdit()
        self.txt_search.setPlaceholderText(search_hint)
        self.txt_search.setClearButtonEnabled(True)
        top.addWidget(self.txt_search, 1)
        self.btn_add = QPushButton(add_label)
        self.btn_edit = QPushButton("Edit")
        self.btn_delete = QPushButton("Delete")
        self.btn_refresh = QPushButton("Refresh")
        for b in (self.btn_add, self.btn_edit, self.btn_delete, self.btn_refresh):
            top.addWidget(b)
        root.addLayout(top)

        self.lbl_summary = QLabel("")
        root.addWidget(self.lbl_summary)
        self.tbl = TableView()
        root.addWidget(self.tbl, 1)

    @property
    def search_text(self) -> str:
        return self.txt_search.text().strip()


class RecordListController(BranchModule):
    """
    List page over one resource API (`list_all/create/update/delete`).

    MESSAGES keys: load_failed, created, create_failed, updated,
    update_failed, deleted, delete_failed.
    """

    NOUN = "record"
    PLURAL = "records"
    MESSAGES: Dict[str, str] = {}

    def __init__(self, api, context, model, *, search_hint: str = "Search…"):
        super().__init__(api, context)
        self.rows: List = []
        self.view = RecordListView(self.PLURAL.title(), f"Add {self.NOUN.title()}", search_hint)
        self.model = model
        self.view.tbl.setModel(self.model)

        self.view.txt_search.textChanged.connect(lambda _=None: self._render())
        self.view.btn_add.clicked.connect(self._on_add)
        self.view.btn_edit.clicked.connect(self._on_edit)
        self.view.btn_delete.clicked.connect(self._on_delete)
        self.view.btn_refresh.clicked.connect(self._reload)
        self.view.tbl.doubleClicked.connect(lambda _=None: self._on_edit())

    def get_widget(self) -> QWidget:
        return self.view

    # subclass hooks ------------------------------------------------------
    @property
    def resource(self):
        raise NotImplementedError

    def make_form(self, initial=None) -> RecordForm:
        raise NotImplementedError

    def matches(self, row, term: str) -> bool:
        return term in (row.name or "").lower()

    def label(self, row) -> str:
        return row.name

    def summary(self, rows: list) -> str:
        return f"{len(rows)} {self.PLURAL}"

    def _after_change(self) -> None:
        self._reload()

    # ------------------------------------------------------------------
    def msg(self, key: str) -> str:
        defaults = {
            "load_failed": f"Failed to load {self.PLURAL}",
            "created": f"{self.NOUN.title()} created successfully",
            "create_failed": f"Failed to create {self.NOUN}",
            "updated": f"{self.NOUN.title()} updated successfully",
            "update_failed": f"Failed to update {self.NOUN}",
            "deleted": f"{self.NOUN.title()} deleted successfully",
            "delete_failed": f"Failed to delete {self.NOUN}",
        }
        return self.MESSAGES.get(key, defaults[key])

    def _reload(self) -> None:
        try:
            self.rows = self.resource.list_all()
        except Exception as e:
            self.rows = []
            self._handle_error(self.msg("load_failed"), e, self.msg("load_failed"))
        self._render()

    def filtered(self) -> list:
        term = self.view.search_text.lower()
        if not term:
            return list(self.rows)
        return [r for r in self.rows if self.matches(r, term)]

    def _render(self) -> None:
        rows = self.filtered()
        self.model.replace(rows)
        self.view.tbl.resizeColumnsToContents()
        self.view.lbl_summary.setText(self.summary(rows))

    def selected(self):
        r = self.view.tbl.selected_row()
        return None if r is None else self.model.at(r)

    def _ask_selection(self):
        row = self.selected()
        if row is None:
            ui.info(self.view, "Select", f"Please select a {self.NOUN}.")
        return row

    # ------------------------------------------------------------------
    def _on_add(self) -> None:
        dlg = self.make_form()
        if not dlg.exec():
            return
        payload = dlg.payload()
        if not payload:
            return
        try:
            self.resource.create(payload)
        except Exception as e:
            self._handle_error(self.msg("create_failed"), e, self.msg("create_failed"))
            return
        ui.info(self.view, self.NOUN.title(), self.msg("created"))
        self._after_change()

    def _on_edit(self) -> None:
        row = self._ask_selection()
        if row is None:
            return
        dlg = self.make_form(row)
        if not dlg.exec():
            return
        payload = dlg.payload()
        if not payload:
            return
        try:
            self.resource.update(row.id, payload)
        except Exception as e:
            self._handle_error(self.msg("update_failed"), e, self.msg("update_failed"))
            return
        ui.info(self.view, self.NOUN.title(), self.msg("updated"))
        self._after_change()

    def _on_delete(self) -> None:
        row = self._ask_selection()
        if row is None:
            return
        if not ui.confirm(self.view, f"Delete {self.NOUN}", f"Delete {self.label(row)}? This cannot be undone."):
            return
        try:
            self.resource.delete(row.id)
        except Exception as e:
            self._handle_error(self.msg("delete_failed"), e, self.msg("delete_failed"))
            return
        ui.info(self.view, self.NOUN.title(), self.msg("deleted"))
        self._after_change()
