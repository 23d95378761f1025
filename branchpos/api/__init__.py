"""
REST API layer.

`Api` bundles one resource wrapper per backend collection over a shared
ApiClient; controllers receive an `Api` instance and call e.g.
`api.sales.by_branch(branch_id)`.
"""

from __future__ import annotations

from .client import ApiClient, ApiError
from .branches_api import BranchApi
from .products_api import CategoryApi, ProductApi
from .stock_api import StockApi
from .parties_api import CustomerApi, SupplierApi
from .sales_api import SalesApi
from .purchases_api import PurchaseApi
from .transfers_api import TransferApi
from .returns_api import ReturnApi, RefundApi
from .expenses_api import ExpenseApi
from .users_api import AuthApi, UserApi
from .serials_api import SerialApi
from .dashboard_api import DashboardApi, CompanySettingsApi


class Api:
    """All resource APIs over one client."""

    def __init__(self, client: ApiClient):
        self.client = client
        self.auth = AuthApi(client)
        self.branches = BranchApi(client)
        self.categories = CategoryApi(client)
        self.products = ProductApi(client)
        self.stock = StockApi(client)
        self.customers = CustomerApi(client)
        self.suppliers = SupplierApi(client)
        self.sales = SalesApi(client)
        self.purchases = PurchaseApi(client)
        self.transfers = TransferApi(client)
        self.returns = ReturnApi(client)
        self.refunds = RefundApi(client)
        self.expenses = ExpenseApi(client)
        self.users = UserApi(client)
        self.serials = SerialApi(client)
        self.dashboard = DashboardApi(client)
        self.settings = CompanySettingsApi(client)

    @classmethod
    def from_config(cls) -> "Api":
        return cls(ApiClient())


__all__ = ["Api", "ApiClient", "ApiError"]
