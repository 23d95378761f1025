from .controller import CustomerController, SupplierController

__all__ = ["CustomerController", "SupplierController"]
