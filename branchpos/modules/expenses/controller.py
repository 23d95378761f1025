"""
Controller for the expense module.

Lists expenses for the selected branch (or every active branch, newest
first by expense date) and wires Add/Edit/Delete to ExpenseForm. Adds:
- Totals-by-category summary refresh
- Print support for the current expense list and totals
- Selection-aware UX (double-click, Delete, Ctrl+N/Ctrl+E)
"""

from __future__ import annotations

from collections import OrderedDict
from typing import List, Tuple

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import QWidget

from ..base_module import BranchModule
from .form import ExpenseForm
from .model import CategoryTotalsModel, ExpensesTableModel
from .view import ExpenseView
from ...utils import printing
from ...utils import ui_helpers as ui
from ...utils.helpers import fmt_money


def totals_by_category(expenses) -> List[Tuple[str, float]]:
    """(category, total) pairs, largest first."""
    totals: "OrderedDict[str, float]" = OrderedDict()
    for e in expenses:
        key = e.category or "(Uncategorized)"
        totals[key] = totals.get(key, 0.0) + e.amount
    return sorted(totals.items(), key=lambda kv: kv[1], reverse=True)


class ExpenseController(BranchModule):
    """UI controller for viewing and managing expenses."""

    def __init__(self, api, context):
        super().__init__(api, context)
        self.rows: List = []

        self.view = ExpenseView()
        self.model = ExpensesTableModel([])
        self.totals_model = CategoryTotalsModel([])
        self.view.tbl_expenses.setModel(self.model)
        self.view.tbl_totals.setModel(self.totals_model)

        self.view.txt_search.textChanged.connect(lambda _=None: self._render(reset=True))
        self.view.cmb_category.currentIndexChanged.connect(lambda _=None: self._render(reset=True))
        self.view.pager.changed.connect(self._render)

        self.view.btn_add.clicked.connect(self._on_add)
        self.view.btn_edit.clicked.connect(self._on_edit)
        self.view.btn_delete.clicked.connect(self._on_delete)
        self.view.btn_print.clicked.connect(self._on_print)

        self._wire_table_shortcuts()
        self._reload()

    def get_widget(self) -> QWidget:
        return self.view

    # ------------------------------------------------------------------
    # Data loading
    # ------------------------------------------------------------------
    def _reload(self) -> None:
        try:
            self.rows = self._scoped(self.api.expenses.by_branch, date_key="expense_date")
        except Exception as e:
            self.rows = []
            self._handle_error("Failed to load expenses", e, "Failed to load expenses")
        self.view.btn_add.setEnabled(self.branch_id is not None)
        self._render(reset=True)

    def filtered(self) -> list:
        term = self.view.search_text.lower()
        cat = self.view.selected_category
        out = []
        for e in self.rows:
            if cat and e.category != cat:
                continue
            if term and term not in e.description.lower() and term not in (e.receipt_number or "").lower():
                continue
            out.append(e)
        return out

    def _render(self, reset: bool = False) -> None:
        if reset:
            self.view.pager.reset()
        rows = self.filtered()
        self.view.pager.set_total(len(rows))
        self.model.replace(self.view.pager.slice(rows))
        self.view.tbl_expenses.resizeColumnsToContents()

        self.totals_model.replace(totals_by_category(rows))
        self.view.tbl_totals.resizeColumnsToContents()
        self.view.lbl_total.setText(f"Total expenses: {fmt_money(sum(e.amount for e in rows))}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _selected(self):
        r = self.view.tbl_expenses.selected_row()
        return None if r is None else self.model.at(r)

    def _wire_table_shortcuts(self) -> None:
        """Double-click and keyboard shortcuts on the table."""
        self.view.tbl_expenses.doubleClicked.connect(lambda _=None: self._on_edit())

        self._sc_add = QShortcut(QKeySequence("Ctrl+N"), self.view)
        self._sc_edit = QShortcut(QKeySequence("Ctrl+E"), self.view)
        self._sc_del = QShortcut(QKeySequence("Delete"), self.view)
        for sc in (self._sc_add, self._sc_edit, self._sc_del):
            sc.setContext(Qt.WidgetWithChildrenShortcut)
        self._sc_add.activated.connect(self._on_add)
        self._sc_edit.activated.connect(self._on_edit)
        self._sc_del.activated.connect(self._on_delete)

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------
    def _on_add(self) -> None:
        branch_id = self._require_branch("Select a branch to record expenses.")
        if branch_id is None:
            return
        dlg = ExpenseForm(self.view, branch_id=branch_id)
        if not dlg.exec():
            return
        payload = dlg.payload()
        if not payload:
            return
        try:
            self.api.expenses.create(payload)
        except Exception as e:
            self._handle_error("Failed to create expense", e, "Failed to create expense")
            return
        ui.info(self.view, "Saved", "Expense added successfully")
        self._reload()

    def _on_edit(self) -> None:
        exp = self._selected()
        if exp is None:
            ui.info(self.view, "Select", "Please select an expense to edit.")
            return
        dlg = ExpenseForm(self.view, branch_id=self.branch_id, initial=exp)
        if not dlg.exec():
            return
        payload = dlg.payload()
        if not payload:
            return
        try:
            self.api.expenses.update(exp.id, payload)
        except Exception as e:
            self._handle_error("Failed to update expense", e, "Failed to update expense")
            return
        ui.info(self.view, "Saved", "Expense updated successfully")
        self._reload()

    def _on_delete(self) -> None:
        exp = self._selected()
        if exp is None:
            ui.info(self.view, "Select", "Please select an expense to delete.")
            return
        if not ui.confirm(self.view, "Delete expense", f"Delete expense '{exp.description}'?"):
            return
        try:
            self.api.expenses.delete(exp.id)
        except Exception as e:
            self._handle_error("Failed to delete expense", e, "Failed to delete expense")
            return
        ui.info(self.view, "Deleted", "Expense deleted")
        self._reload()

    def _on_print(self) -> None:
        rows = self.filtered()
        if not rows:
            ui.info(self.view, "Print", "Nothing to print.")
            return
        html = printing.render_model(
            "Expenses",
            ExpensesTableModel(rows),
            notes=[self.ctx.branch.name if self.ctx.branch else "All Branches"],
            totals=[(name, fmt_money(total)) for name, total in totals_by_category(rows)]
            + [("Total", fmt_money(sum(e.amount for e in rows)))],
        )
        try:
            printing.print_html(self.view, html, "Expenses")
        except Exception as e:
            self._handle_error("Failed to print expenses", e)
