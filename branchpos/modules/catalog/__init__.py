from .controller import CategoryController, ProductController

__all__ = ["CategoryController", "ProductController"]
