"""
Selected-branch state shared by every page.

`BranchContext.branch` is the selected branch, or None for the company-wide
view. The selection is persisted in QSettings and restored on start-up only
while that branch is still active. Users other than admins are pinned to
their own branch.
"""

from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import QObject, QSettings, Signal
from PySide6.QtWidgets import QComboBox, QWidget

from ..api.branches_api import Branch
from ..constants import SETTINGS_ORG, SETTINGS_APP, SETTING_SELECTED_BRANCH
from ..utils.loggers import get_logger

_log = get_logger(__name__)


class BranchContext(QObject):
    changed = Signal()

    def __init__(self, api, user=None, settings: QSettings | None = None):
        super().__init__()
        self.api = api
        self.user = user
        self.settings = settings or QSettings(SETTINGS_ORG, SETTINGS_APP)
        self.branches: List[Branch] = []
        self.branch: Optional[Branch] = None
        self.error: Optional[str] = None

    # ------------------------------------------------------------------
    @property
    def branch_id(self) -> Optional[int]:
        return self.branch.id if self.branch else None

    @property
    def is_company_view(self) -> bool:
        return self.branch is None

    @property
    def can_switch(self) -> bool:
        """Only admins may change branch or use the company-wide view."""
        return self.user is None or getattr(self.user, "is_admin", False)

    def find(self, branch_id) -> Optional[Branch]:
        for b in self.branches:
            if str(b.id) == str(branch_id):
                return b
        return None

    # ------------------------------------------------------------------
    def load(self) -> None:
        """Fetch active branches and restore (or pin) the selection."""
        self.error = None
        try:
            self.branches = self.api.branches.list_active()
        except Exception as e:
            _log.warning("Failed to load branches: %s", e)
            self.error = "Failed to load branches"
            self.branches = []

        if not self.can_switch:
            self.branch = self.find(getattr(self.user, "branch_id", None))
        else:
            saved = self.settings.value(SETTING_SELECTED_BRANCH, None)
            self.branch = self.find(saved) if saved not in (None, "") else None
            if saved not in (None, "") and self.branch is None:
                self.settings.remove(SETTING_SELECTED_BRANCH)
        self.changed.emit()

    def select(self, branch: Optional[Branch]) -> None:
        if not self.can_switch:
            return
        if branch is not None and self.find(branch.id) is None:
            return
        if (branch.id if branch else None) == self.branch_id:
            return
        self.branch = branch
        if branch is None:
            self.settings.remove(SETTING_SELECTED_BRANCH)
        else:
            self.settings.setValue(SETTING_SELECTED_BRANCH, str(branch.id))
        self.settings.sync()
        self.changed.emit()


class BranchSelector(QComboBox):
    """'All Branches' + each active branch, kept in sync with a BranchContext."""

    ALL_LABEL = "All Branches"

    def __init__(self, ctx: BranchContext, parent: QWidget | None = None):
        super().__init__(parent)
        self.ctx = ctx
        self.setMinimumWidth(180)
        self.currentIndexChanged.connect(self._on_index_changed)
        ctx.changed.connect(self.refresh)
        self.refresh()

    def refresh(self) -> None:
        self.blockSignals(True)
        self.clear()
        if self.ctx.can_switch:
            self.addItem(self.ALL_LABEL, userData=None)
        for b in self.ctx.branches:
            self.addItem(b.name, userData=b.id)
        idx = self.findData(self.ctx.branch_id) if self.ctx.branch_id is not None else 0
        self.setCurrentIndex(max(0, idx))
        self.setEnabled(self.ctx.can_switch)
        self.blockSignals(False)

    def _on_index_changed(self, _index: int) -> None:
        bid = self.currentData()
        self.ctx.select(self.ctx.find(bid) if bid is not None else None)
