from .controller import PurchaseController

__all__ = ["PurchaseController"]
