from __future__ import annotations

import sys
from importlib import import_module
from typing import List, Optional, Tuple

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QMessageBox,
    QSizePolicy,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from . import config
from .api import Api
from .constants import APP_NAME, ROLE_PAGES, ROLE_LABELS
from .modules.base_module import BaseModule
from .modules.branch_context import BranchContext, BranchSelector
from .utils.loggers import get_logger
from .utils.ui_helpers import wrap_center

log = get_logger("branchpos.main")

# nav title -> (module path, controller class)
PAGES = {
    "Dashboard": ("branchpos.modules.dashboard", "DashboardController"),
    "Point of Sale": ("branchpos.modules.pos", "PosController"),
    "Sales": ("branchpos.modules.sales", "SalesController"),
    "Inventory": ("branchpos.modules.inventory", "InventoryController"),
    "Products": ("branchpos.modules.catalog", "ProductController"),
    "Categories": ("branchpos.modules.catalog", "CategoryController"),
    "Purchases": ("branchpos.modules.purchases", "PurchaseController"),
    "Suppliers": ("branchpos.modules.parties", "SupplierController"),
    "Customers": ("branchpos.modules.parties", "CustomerController"),
    "Transfers": ("branchpos.modules.transfers", "TransferController"),
    "Returns": ("branchpos.modules.returns", "ReturnController"),
    "Refunds": ("branchpos.modules.refunds", "RefundController"),
    "Serial Numbers": ("branchpos.modules.serials", "SerialController"),
    "Expenses": ("branchpos.modules.expenses", "ExpenseController"),
    "Reports": ("branchpos.modules.reporting", "ReportsController"),
    "Branches": ("branchpos.modules.branches", "BranchController"),
    "Users": ("branchpos.modules.users", "UserController"),
    "Settings": ("branchpos.modules.settings", "SettingsController"),
}


def pages_for_role(role: Optional[str]) -> List[str]:
    """Navigation titles for a role; unknown roles get the cashier set."""
    return list(ROLE_PAGES.get((role or "").upper(), ROLE_PAGES["CASHIER"]))


def _lazy_get(name: str, attr: str):
    """Import a module by name and fetch an attribute from it, with a clear error if missing."""
    try:
        mod = import_module(name)
    except Exception as e:
        raise ImportError(f"Failed to import module '{name}': {e}") from e
    try:
        return getattr(mod, attr)
    except AttributeError as e:
        raise ImportError(f"'{attr}' not found in module '{name}'.") from e


class MainWindow(QMainWindow):
    def __init__(self, api: Api, context: BranchContext, user=None):
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.setWindowFlag(Qt.WindowMinimizeButtonHint, True)
        self.setWindowFlag(Qt.WindowMaximizeButtonHint, True)
        self.setMinimumSize(960, 600)

        self.api = api
        self.ctx = context
        self.user = user

        central = QWidget(self)
        layout = QVBoxLayout(central)
        self.setCentralWidget(central)

        # ---- Header: user + branch selector ----
        header = QHBoxLayout()
        self.lbl_user = QLabel(self._user_text())
        header.addWidget(self.lbl_user, 1)
        header.addWidget(QLabel("Branch:"))
        self.branch_selector = BranchSelector(context)
        header.addWidget(self.branch_selector)
        layout.addLayout(header)

        # ---- Left nav + stacked pages ----
        self.nav = QListWidget()
        self.nav.setFixedWidth(150)
        self.nav.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Expanding)
        self.stack = QStackedWidget()

        row = QWidget()
        row_lay = QHBoxLayout(row)
        row_lay.addWidget(self.nav)
        row_lay.addWidget(self.stack, 1)
        layout.addWidget(row, 1)

        self.titles: List[str] = []
        # index -> controller (None while not loaded or when loading failed)
        self.modules: List[Optional[BaseModule]] = []
        self._attempted: List[bool] = []

        for title in pages_for_role(getattr(user, "role", None)):
            if title in PAGES:
                self._add_page_deferred(title)

        self.nav.currentRowChanged.connect(self._on_nav_item_changed)
        context.changed.connect(self._on_branch_changed)

        if self.nav.count():
            self.nav.setCurrentRow(0)
            self._load_module_at_index(0)

        if context.error:
            self.statusBar().showMessage(context.error)

    def _user_text(self) -> str:
        if self.user is None:
            return ""
        name = getattr(self.user, "full_name", "") or getattr(self.user, "username", "")
        role = ROLE_LABELS.get(getattr(self.user, "role", ""), "")
        return f"{name} ({role})" if role else name

    # ---------- deferred pages ----------
    def _add_page_deferred(self, title: str) -> None:
        self.nav.addItem(QListWidgetItem(title))
        self.stack.addWidget(wrap_center(QLabel(f"Loading {title}...")))
        self.titles.append(title)
        self.modules.append(None)
        self._attempted.append(False)

    def _on_nav_item_changed(self, index: int) -> None:
        if 0 <= index < len(self.titles):
            self._load_module_at_index(index)

    def _load_module_at_index(self, index: int) -> None:
        if not self._attempted[index]:
            self._load_module(index)
        self.stack.setCurrentIndex(index)

    def _load_module(self, index: int) -> None:
        title = self.titles[index]
        self._attempted[index] = True
        QApplication.setOverrideCursor(Qt.WaitCursor)
        try:
            module_path, class_name = PAGES[title]
            Controller = _lazy_get(module_path, class_name)
            controller = Controller(self.api, self.ctx)
            self._replace_widget(index, controller.get_widget())
            self.modules[index] = controller
        except Exception:
            log.exception("Failed to load page %s", title)
            self._replace_widget(index, wrap_center(QLabel(f"{title}\n\nLoading failed")))
        finally:
            QApplication.restoreOverrideCursor()

    def _replace_widget(self, index: int, widget: QWidget) -> None:
        current = self.stack.widget(index)
        self.stack.removeWidget(current)
        current.deleteLater()
        self.stack.insertWidget(index, widget)

    def loaded_modules(self) -> List[Tuple[str, BaseModule]]:
        return [(t, m) for t, m in zip(self.titles, self.modules) if m is not None]

    def _on_branch_changed(self) -> None:
        for title, mod in self.loaded_modules():
            if hasattr(mod, "on_branch_changed"):
                try:
                    mod.on_branch_changed()
                except Exception:
                    log.exception("Branch change failed on page %s", title)


def _sign_in(api: Api):
    """Authenticate with the configured token or credentials and return the current user."""
    if config.API_TOKEN:
        api.client.set_token(config.API_TOKEN)
    elif config.API_USERNAME and config.API_PASSWORD:
        api.auth.login(config.API_USERNAME, config.API_PASSWORD)
    return api.auth.current_user()


def main():
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    api = Api.from_config()
    try:
        user = _sign_in(api)
    except Exception as e:
        log.error("Sign-in failed: %s", e)
        QMessageBox.critical(
            None,
            "Sign-in failed",
            "Could not sign in to the server. Set BRANCHPOS_API_TOKEN, or "
            "BRANCHPOS_USERNAME and BRANCHPOS_PASSWORD, and try again.",
        )
        return 1

    ctx = BranchContext(api, user)
    ctx.load()

    win = MainWindow(api, ctx, user)
    win.resize(1200, 720)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
