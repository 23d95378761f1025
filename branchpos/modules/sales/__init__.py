from .controller import SalesController
from .details import SaleDetailsDialog

__all__ = ["SalesController", "SaleDetailsDialog"]
