from __future__ import annotations

from typing import List, Tuple

from PySide6.QtWidgets import QWidget

from ..base_module import BranchModule
from ..sales.model import SalesTableModel
from .logic import branch_comparison, daily_totals, recent_sales, trend_dates
from .model import (
    BranchComparisonModel,
    DailySalesModel,
    LowStockModel,
    PaymentMethodsModel,
    TopProductsModel,
)
from .view import DashboardView
from ...api.aggregate import fan_out
from ...api.dashboard_api import DashboardStats
from ...constants import DASHBOARD_RECENT_SALES, DASHBOARD_TREND_DAYS
from ...utils.helpers import fmt_money


class DashboardController(BranchModule):
    def __init__(self, api, context):
        super().__init__(api, context)
        self.stats = DashboardStats()
        self.daily: List[dict] = []
        self.comparison: List[Tuple] = []

        self.view = DashboardView()
        self.top_model = TopProductsModel([])
        self.low_model = LowStockModel([])
        self.methods_model = PaymentMethodsModel([])
        self.recent_model = SalesTableModel([])
        self.daily_model = DailySalesModel([])
        self.compare_model = BranchComparisonModel([])
        self.view.tbl_top.setModel(self.top_model)
        self.view.tbl_low.setModel(self.low_model)
        self.view.tbl_methods.setModel(self.methods_model)
        self.view.tbl_recent.setModel(self.recent_model)
        self.view.tbl_daily.setModel(self.daily_model)
        self.view.tbl_compare.setModel(self.compare_model)
        self.view.btn_refresh.clicked.connect(self._reload)

        self._reload()

    def get_widget(self) -> QWidget:
        return self.view

    def _targets(self) -> list:
        if self.branch_id is not None:
            return [self.ctx.branch] if self.ctx.branch else []
        return list(self.ctx.branches)

    def _reload(self) -> None:
        try:
            self.stats = self.api.dashboard.stats(self.branch_id)
        except Exception as e:
            self.stats = DashboardStats()
            self._handle_error("Failed to load dashboard", e, "Failed to load dashboard")
        self.daily = self._load_daily()
        self.comparison = self._load_comparison()
        self._render()

    def _load_daily(self) -> List[dict]:
        """Per-day grand totals over the trend window, one column per branch."""
        dates = trend_dates(DASHBOARD_TREND_DAYS)
        start, end = dates[0], dates[-1]
        sales = self.api.sales
        targets = self._targets()
        by_id = dict(fan_out(targets, lambda bid: (bid, sales.by_date_range(bid, start, end))))
        self.daily_model.set_branches([b.name for b in targets])
        return daily_totals([(b.name, by_id.get(b.id, [])) for b in targets], dates)

    def _load_comparison(self) -> List[Tuple]:
        if not self.ctx.is_company_view:
            return []
        dashboard = self.api.dashboard
        by_id = dict(fan_out(self.ctx.branches, lambda bid: (bid, dashboard.stats(bid))))
        return branch_comparison((b, by_id[b.id]) for b in self.ctx.branches if b.id in by_id)

    def _render(self) -> None:
        s = self.stats
        self.view.lbl_scope.setText(self.ctx.branch.name if self.ctx.branch else "All Branches")
        self.view.set_kpi("sales_today", fmt_money(s.total_sales_today))
        self.view.set_kpi("sales_month", fmt_money(s.total_sales_this_month))
        self.view.set_kpi("sales_year", fmt_money(s.total_sales_this_year))
        self.view.set_kpi("transactions", str(s.transaction_count_today))
        self.view.set_kpi("average", fmt_money(s.average_transaction_value))
        self.view.set_kpi("expenses", fmt_money(s.total_expenses_this_month))
        self.view.set_kpi("net_profit", fmt_money(s.net_profit_this_month))

        self.top_model.replace(s.top_selling_products)
        self.low_model.replace(s.low_stock_items)
        self.methods_model.replace(sorted(s.sales_by_payment_method.items(), key=lambda kv: kv[1], reverse=True))
        self.recent_model.replace(recent_sales(s.recent_sales, DASHBOARD_RECENT_SALES))
        # newest day on top
        self.daily_model.replace(list(reversed(self.daily)))
        self.compare_model.replace(self.comparison)
        self.view.box_daily.setTitle(f"Daily Sales (last {DASHBOARD_TREND_DAYS} days)")
        self.view.box_compare.setVisible(self.ctx.is_company_view)
        for tbl in (
            self.view.tbl_top,
            self.view.tbl_low,
            self.view.tbl_methods,
            self.view.tbl_recent,
            self.view.tbl_daily,
            self.view.tbl_compare,
        ):
            tbl.resizeColumnsToContents()
