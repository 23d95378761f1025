"""
Dashboard statistics and company settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ._base import ResourceApi, num
from .sales_api import Sale
from .stock_api import StockItem


@dataclass
class TopProduct:
    product_id: Optional[int]
    product_name: str
    total_quantity: int = 0
    total_revenue: float = 0.0


@dataclass
class DashboardStats:
    total_sales_today: float = 0.0
    total_sales_this_month: float = 0.0
    total_sales_this_year: float = 0.0
    transaction_count_today: int = 0
    transaction_count_this_month: int = 0
    average_transaction_value: float = 0.0
    total_expenses_this_month: float = 0.0
    net_profit_this_month: float = 0.0
    top_selling_products: List[TopProduct] = field(default_factory=list)
    low_stock_items: List[StockItem] = field(default_factory=list)
    recent_sales: List[Sale] = field(default_factory=list)
    sales_by_payment_method: Dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "DashboardStats":
        return cls(
            total_sales_today=num(d.get("totalSalesToday", d.get("todaySales"))),
            total_sales_this_month=num(d.get("totalSalesThisMonth", d.get("monthSales"))),
            total_sales_this_year=num(d.get("totalSalesThisYear")),
            transaction_count_today=int(num(d.get("transactionCountToday", d.get("todaySalesCount")))),
            transaction_count_this_month=int(num(d.get("transactionCountThisMonth"))),
            average_transaction_value=num(d.get("averageTransactionValue")),
            total_expenses_this_month=num(d.get("totalExpensesThisMonth", d.get("totalExpenses"))),
            net_profit_this_month=num(d.get("netProfitThisMonth")),
            top_selling_products=[
                TopProduct(
                    product_id=p.get("productId"),
                    product_name=p.get("productName") or "",
                    total_quantity=int(num(p.get("totalQuantity"))),
                    total_revenue=num(p.get("totalRevenue")),
                )
                for p in d.get("topSellingProducts") or []
            ],
            low_stock_items=[StockItem.from_api(s) for s in d.get("lowStockItems") or []],
            recent_sales=[Sale.from_api(s) for s in d.get("recentSales") or []],
            sales_by_payment_method={k: num(v) for k, v in (d.get("salesByPaymentMethod") or {}).items()},
        )


@dataclass
class CompanySettings:
    company_name: str = ""
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    website: Optional[str] = None
    tax_id: Optional[str] = None
    receipt_footer: Optional[str] = None
    receipt_tagline: Optional[str] = None
    currency_symbol: str = ""

    @classmethod
    def from_api(cls, d: Dict[str, Any]) -> "CompanySettings":
        return cls(
            company_name=d.get("companyName") or "",
            phone=d.get("phone"),
            email=d.get("email"),
            address=d.get("address"),
            website=d.get("website"),
            tax_id=d.get("taxId"),
            receipt_footer=d.get("receiptFooter"),
            receipt_tagline=d.get("receiptTagline"),
            currency_symbol=d.get("currencySymbol") or "",
        )


class DashboardApi(ResourceApi):
    """/dashboard"""

    def stats(self, branch_id: Optional[int] = None) -> DashboardStats:
        params = {"branchId": branch_id} if branch_id is not None else None
        return self._one(self.client.get("/dashboard/stats", params=params), DashboardStats.from_api)


class CompanySettingsApi(ResourceApi):
    """/company-settings"""

    def get(self) -> CompanySettings:
        return self._one(self.client.get("/company-settings"), CompanySettings.from_api)

    def update(self, payload: Dict[str, Any]) -> CompanySettings:
        """Partial update; only the keys present are changed."""
        return self._one(self.client.put("/company-settings", json=payload), CompanySettings.from_api)
