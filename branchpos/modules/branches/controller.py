"""
Branch administration: every branch (active or not) with add, edit and
delete. Changes reload the shared BranchContext so the branch selector and
the company-wide views pick them up.
"""

from __future__ import annotations

from ..crud import RecordListController
from .form import BranchForm
from .model import BranchesTableModel


class BranchController(RecordListController):
    NOUN = "branch"
    PLURAL = "branches"

    def __init__(self, api, context):
        super().__init__(api, context, BranchesTableModel([]), search_hint="Search name or code…")
        self._reload()

    @property
    def resource(self):
        return self.api.branches

    def make_form(self, initial=None):
        return BranchForm(self.view, initial=initial)

    def matches(self, b, term: str) -> bool:
        return term in b.name.lower() or term in (b.code or "").lower()

    def summary(self, rows: list) -> str:
        active = sum(1 for b in rows if b.is_active)
        return f"{len(rows)} branches · {active} active"

    def _after_change(self) -> None:
        self._reload()
        self.ctx.load()
