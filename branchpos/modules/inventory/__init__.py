from .controller import InventoryController

__all__ = ["InventoryController"]
