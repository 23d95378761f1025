APP_NAME = "BranchPOS"

# QSettings scope used for persisted UI state (selected branch, window size)
SETTINGS_ORG = "BranchPOS"
SETTINGS_APP = "BranchPOS Desktop"
SETTING_SELECTED_BRANCH = "selectedBranchId"

# Pagination
PAGE_SIZES = [10, 20, 50, 100]
DEFAULT_PAGE_SIZE = 100

# Stock at or below this level counts as low when an item has no reorder level
LOW_STOCK_DEFAULT = 10

# Report tables only show the first rows of long listings
REPORT_PREVIEW_ROWS = 20
RECENT_ACTIVITY_ROWS = 20

# Dashboard: daily sales window and length of the recent sales list
DASHBOARD_TREND_DAYS = 30
DASHBOARD_RECENT_SALES = 10

ROLES = ["ADMIN", "MANAGER", "CASHIER", "STOCK_KEEPER"]
ROLE_LABELS = {
    "ADMIN": "Admin",
    "MANAGER": "Manager",
    "CASHIER": "Cashier",
    "STOCK_KEEPER": "Stock Keeper",
}

SERIAL_STATUSES = ["IN_STOCK", "SOLD", "TRANSFERRED", "RETURNED", "DEFECTIVE"]
SERIAL_STATUS_LABELS = {
    "IN_STOCK": "In Stock",
    "SOLD": "Sold",
    "TRANSFERRED": "Transferred",
    "RETURNED": "Returned",
    "DEFECTIVE": "Defective",
}

TRANSFER_STATUS_LABELS = {
    "PENDING": "Pending",
    "APPROVED": "Approved",
    "IN_TRANSIT": "In Transit",
    "COMPLETED": "Completed",
    "RECEIVED": "Received",
    "REJECTED": "Rejected",
}

# Purchase orders still waiting to be received
PENDING_PURCHASE_STATUSES = ("", "PENDING", "ORDERED")

PAYMENT_METHODS = ["CASH", "CARD", "MOBILE_MONEY", "CREDIT", "BANK_TRANSFER"]
PAYMENT_METHOD_LABELS = {
    "CASH": "Cash",
    "CARD": "Card",
    "MOBILE_MONEY": "Mobile Money",
    "CREDIT": "Credit",
    "BANK_TRANSFER": "Bank Transfer",
}
REFUND_METHODS = ["cash", "card", "mobile_money", "store_credit"]

EXPENSE_CATEGORIES = [
    "Rent",
    "Utilities",
    "Salaries",
    "Transport",
    "Supplies",
    "Maintenance",
    "Marketing",
    "Insurance",
    "Taxes",
    "Other",
]

# Navigation pages per role, in display order
ROLE_PAGES = {
    "ADMIN": [
        "Dashboard", "Point of Sale", "Sales", "Inventory", "Products", "Categories",
        "Purchases", "Suppliers", "Customers", "Transfers", "Returns", "Refunds",
        "Serial Numbers", "Expenses", "Reports", "Branches", "Users", "Settings",
    ],
    "MANAGER": [
        "Dashboard", "Point of Sale", "Sales", "Inventory", "Products", "Categories",
        "Purchases", "Suppliers", "Customers", "Transfers", "Returns", "Refunds",
        "Serial Numbers", "Expenses", "Reports",
    ],
    "CASHIER": [
        "Point of Sale", "Sales", "Refunds", "Returns", "Expenses", "Purchases",
        "Transfers", "Serial Numbers", "Customers",
    ],
    "STOCK_KEEPER": [
        "Inventory", "Purchases", "Transfers", "Returns", "Serial Numbers",
    ],
}
