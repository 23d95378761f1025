from .controller import PosController
from .cart import Cart, CartLine, CartError

__all__ = ["PosController", "Cart", "CartLine", "CartError"]
