from __future__ import annotations

from typing import Any, Callable, List, Optional

from PySide6.QtCore import QObject
from PySide6.QtWidgets import QWidget

from ..api.aggregate import load_for_scope
from ..utils import ui_helpers as ui
from ..utils.loggers import get_logger


class BaseModule(QObject):
    def get_widget(self) -> QWidget:
        raise NotImplementedError


class BranchModule(BaseModule):
    """
    Page controller bound to the shared BranchContext.

    Subclasses implement `_reload()`; it runs again whenever the selected
    branch changes.
    """

    def __init__(self, api, context):
        super().__init__()
        self.api = api
        self.ctx = context
        self.log = get_logger(f"branchpos.{type(self).__name__}")

    @property
    def branch_id(self) -> Optional[int]:
        return self.ctx.branch_id

    def on_branch_changed(self) -> None:
        self._reload()

    def _reload(self) -> None:
        raise NotImplementedError

    def _scoped(self, fetch: Callable[[int], Any], *, date_key: str | None = None, dedupe: bool = False) -> List[Any]:
        """Rows for the selected branch, or merged over all active branches."""
        return load_for_scope(self.branch_id, self.ctx.branches, fetch, date_key=date_key, dedupe=dedupe)

    def _handle_error(self, context: str, err: Exception, fallback: str | None = None) -> None:
        """Log and surface a failed call with the server message or a generic fallback."""
        self.log.warning("%s: %s", context, err)
        ui.error(self.get_widget(), "Error", ui.error_message(err, fallback or f"{context}. Please try again."))

    def _require_branch(self, message: str = "Please select a branch first.") -> Optional[int]:
        if self.branch_id is None:
            ui.info(self.get_widget(), "Select branch", message)
            return None
        return self.branch_id
