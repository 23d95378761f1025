"""
Controller for the point-of-sale page.

Loads sellable stock and customers for the selected branch, drives the Cart
from the view's buttons, and posts the sale on checkout. Serialized products
go through SerialSelectDialog instead of the +/- buttons.

Shortcuts: Enter adds the selected product, Delete removes the selected
cart line, F9 checks out in cash.
"""

from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import QWidget

from ..base_module import BranchModule
from ..sales.details import SaleDetailsDialog
from .cart import (
    Cart,
    CartError,
    NEEDS_SERIALS,
    category_options,
    filter_customers,
    filter_products,
    sellable,
)
from .model import CartTableModel, ProductsTableModel
from .serial_dialog import SerialSelectDialog
from .view import PosView
from ...utils import ui_helpers as ui
from ...utils.helpers import fmt_money


class PosController(BranchModule):
    def __init__(self, api, context):
        super().__init__(api, context)
        self.cart = Cart()
        self.stock: List = []
        self.customers: List = []

        self.view = PosView()
        self.products_model = ProductsTableModel([])
        self.cart_model = CartTableModel([])
        self.view.tbl_products.setModel(self.products_model)
        self.view.tbl_cart.setModel(self.cart_model)

        self.view.txt_search.textChanged.connect(lambda _=None: self._apply_filters())
        self.view.cmb_category.currentIndexChanged.connect(lambda _=None: self._apply_filters())
        self.view.txt_customer_search.textChanged.connect(lambda _=None: self._fill_customers())
        self.view.cmb_customer.currentIndexChanged.connect(lambda _=None: self._on_customer_changed())
        self.view.txt_quick_name.textChanged.connect(self._on_quick_name)
        self.view.btn_refresh.clicked.connect(self._reload)
        self.view.btn_add.clicked.connect(self._on_add_selected)
        self.view.tbl_products.doubleClicked.connect(lambda _=None: self._on_add_selected())

        self.view.btn_plus.clicked.connect(lambda: self._on_change_qty(+1))
        self.view.btn_minus.clicked.connect(lambda: self._on_change_qty(-1))
        self.view.btn_remove.clicked.connect(self._on_remove)
        self.view.btn_serials.clicked.connect(self._on_edit_serials)
        self.view.btn_set_price.clicked.connect(self._on_set_price)
        self.view.btn_clear.clicked.connect(self._on_clear)
        self.view.tbl_cart.clicked.connect(lambda _=None: self._sync_price_editor())

        self.view.btn_cash.clicked.connect(lambda: self.checkout("cash"))
        self.view.btn_card.clicked.connect(lambda: self.checkout("card"))
        self.view.btn_mobile.clicked.connect(lambda: self.checkout("mobile_money"))

        self._wire_shortcuts()
        self._reload()

    def get_widget(self) -> QWidget:
        return self.view

    def _wire_shortcuts(self) -> None:
        self._sc_add = QShortcut(QKeySequence("Return"), self.view.tbl_products)
        self._sc_del = QShortcut(QKeySequence("Delete"), self.view.tbl_cart)
        self._sc_cash = QShortcut(QKeySequence("F9"), self.view)
        for sc in (self._sc_add, self._sc_del, self._sc_cash):
            sc.setContext(Qt.WidgetWithChildrenShortcut)
        self._sc_add.activated.connect(self._on_add_selected)
        self._sc_del.activated.connect(self._on_remove)
        self._sc_cash.activated.connect(lambda: self.checkout("cash"))

    # ------------------------------------------------------------------
    # Data loading
    # ------------------------------------------------------------------
    def _reload(self) -> None:
        if self.branch_id is None:
            self.stock = []
            self.view.lbl_products_empty.setText("Select a branch to start selling.")
            self._apply_filters()
            self._refresh_cart()
            return
        try:
            self.stock = sellable(self.api.stock.by_branch(self.branch_id))
        except Exception as e:
            self.stock = []
            self._handle_error("Failed to load products", e, "Failed to load products")
        try:
            self.customers = self.api.customers.list_all()
        except Exception as e:
            self.customers = []
            self.log.warning("Failed to load customers: %s", e)

        self._fill_categories()
        self._fill_customers()
        self._apply_filters()
        self._refresh_cart()

    def on_branch_changed(self) -> None:
        # a cart belongs to one branch's stock
        self.cart.clear()
        self._reload()

    def _fill_categories(self) -> None:
        current = self.view.selected_category
        cmb = self.view.cmb_category
        cmb.blockSignals(True)
        cmb.clear()
        for c in category_options(self.stock):
            cmb.addItem("All Categories" if c == "all" else c, userData=c)
        idx = cmb.findData(current)
        cmb.setCurrentIndex(idx if idx >= 0 else 0)
        cmb.blockSignals(False)

    def _fill_customers(self) -> None:
        cmb = self.view.cmb_customer
        selected = self.cart.customer.id if self.cart.customer else None
        cmb.blockSignals(True)
        cmb.clear()
        cmb.addItem("Walk-in customer", userData=None)
        for c in filter_customers(self.customers, self.view.txt_customer_search.text()):
            label = f"{c.name} ({c.phone})" if c.phone else c.name
            cmb.addItem(label, userData=c.id)
        idx = cmb.findData(selected) if selected is not None else 0
        cmb.setCurrentIndex(max(0, idx))
        cmb.blockSignals(False)

    def visible_products(self) -> list:
        return filter_products(self.stock, self.view.search_text, self.view.selected_category)

    def _apply_filters(self) -> None:
        rows = self.visible_products()
        self.products_model.replace(rows)
        self.view.tbl_products.resizeColumnsToContents()
        if self.branch_id is not None:
            if not self.stock:
                self.view.lbl_products_empty.setText("No products in stock")
            elif not rows:
                self.view.lbl_products_empty.setText("No products match your search")
            else:
                self.view.lbl_products_empty.setText("")

    def _refresh_cart(self) -> None:
        self.cart_model.replace(self.cart.lines)
        self.view.lbl_total.setText(f"Total: {fmt_money(self.cart.total)}")
        self.view.set_checkout_enabled(not self.cart.is_empty() and self.branch_id is not None)

    # ------------------------------------------------------------------
    # Selection helpers
    # ------------------------------------------------------------------
    def _selected_stock(self):
        r = self.view.tbl_products.selected_row()
        return None if r is None else self.products_model.at(r)

    def _selected_line(self):
        r = self.view.tbl_cart.selected_row()
        return None if r is None else self.cart_model.at(r)

    def _stock_for(self, product_id: int):
        for s in self.stock:
            if s.product_id == product_id:
                return s
        return None

    # ------------------------------------------------------------------
    # Cart actions
    # ------------------------------------------------------------------
    def add_stock(self, stock) -> None:
        try:
            result = self.cart.add(stock)
        except CartError as e:
            ui.error(self.view, "Stock", str(e))
            return
        if result == NEEDS_SERIALS:
            self.select_serials(stock)
            return
        self._refresh_cart()

    def _on_add_selected(self) -> None:
        stock = self._selected_stock()
        if stock is None:
            ui.info(self.view, "Select", "Please select a product to add.")
            return
        self.add_stock(stock)

    def select_serials(self, stock) -> None:
        """Open the serial picker for `stock` and replace the line's serials."""
        if self.branch_id is None:
            return
        try:
            available = [s.serial_number for s in self.api.serials.available(stock.product_id, self.branch_id)]
        except Exception as e:
            self.log.warning("Failed to load serial numbers: %s", e)
            ui.error(self.view, "Serial numbers", "Failed to load serial numbers")
            available = []

        line = self.cart.line(stock.product_id)
        preselected = list(line.serial_numbers) if line else []
        # serials already on the line stay selectable
        for sn in preselected:
            if sn not in available:
                available.append(sn)

        dlg = SerialSelectDialog(
            self.view,
            product_name=stock.product_name,
            serials=available,
            preselected=preselected,
        )
        if not dlg.exec():
            return
        try:
            self.cart.set_serials(stock, dlg.payload() or [])
        except CartError as e:
            ui.error(self.view, "Serial numbers", str(e))
            return
        self._refresh_cart()

    def _on_edit_serials(self) -> None:
        ln = self._selected_line()
        if ln is None or not ln.requires_serial:
            ui.info(self.view, "Serial numbers", "Select a serialized cart line first.")
            return
        stock = self._stock_for(ln.product_id)
        if stock is not None:
            self.select_serials(stock)

    def _on_change_qty(self, delta: int) -> None:
        ln = self._selected_line()
        if ln is None:
            return
        try:
            self.cart.update_quantity(ln.product_id, delta)
        except CartError as e:
            ui.error(self.view, "Quantity", str(e))
            return
        self._refresh_cart()

    def _on_remove(self) -> None:
        ln = self._selected_line()
        if ln is None:
            return
        self.cart.remove(ln.product_id)
        self._refresh_cart()

    def _sync_price_editor(self) -> None:
        ln = self._selected_line()
        if ln is not None:
            self.view.spin_price.setValue(ln.price)

    def _on_set_price(self) -> None:
        ln = self._selected_line()
        if ln is None:
            ui.info(self.view, "Select", "Please select a cart line to re-price.")
            return
        self.cart.update_price(ln.product_id, float(self.view.spin_price.value()))
        self._refresh_cart()

    def _on_customer_changed(self) -> None:
        cid = self.view.cmb_customer.currentData()
        self.cart.customer = next((c for c in self.customers if c.id == cid), None) if cid is not None else None
        self.view.txt_quick_name.setEnabled(self.cart.customer is None)

    def _on_quick_name(self, text: str) -> None:
        self.cart.quick_customer_name = text

    def _on_clear(self) -> None:
        self.cart.clear()
        self.view.txt_quick_name.clear()
        self.view.cmb_customer.setCurrentIndex(0)
        self._refresh_cart()

    # ------------------------------------------------------------------
    # Checkout
    # ------------------------------------------------------------------
    def checkout(self, payment_method: str) -> Optional[object]:
        if self.branch_id is None or self.cart.is_empty():
            return None
        payload = self.cart.checkout_payload(self.branch_id, payment_method)
        try:
            sale = self.api.sales.create(payload)
        except Exception as e:
            self.log.warning("Checkout failed: %s", e)
            ui.error(self.view, "Sale", "Failed to process sale. Please try again.")
            return None

        self.log.info("Sale %s completed (%s items)", sale.sale_number, len(payload["items"]))
        ui.info(self.view, "Sale", f"Sale completed successfully! Receipt {sale.sale_number}")
        self._show_receipt(sale)
        self._on_clear()
        self._reload()
        return sale

    def _show_receipt(self, sale) -> None:
        SaleDetailsDialog(self.view, sale, title="Receipt").exec()
