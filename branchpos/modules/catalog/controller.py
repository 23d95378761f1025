"""
Catalog pages: product categories and the product master list.

Both are company-wide. The category list shows how many products use each
category; the product dialog offers the current categories.
"""

from __future__ import annotations

from typing import List

from ..crud import RecordListController
from ..inventory.form import ProductForm
from .form import CategoryForm
from .logic import product_counts, product_matches
from .model import CategoriesTableModel, ProductsTableModel


class CategoryController(RecordListController):
    NOUN = "category"
    PLURAL = "categories"
    MESSAGES = {
        "create_failed": "Failed to save category",
        "update_failed": "Failed to save category",
        "delete_failed": "Failed to delete category. It may have products assigned.",
    }

    def __init__(self, api, context):
        super().__init__(api, context, CategoriesTableModel([]), search_hint="Search categories…")
        self._reload()

    @property
    def resource(self):
        return self.api.categories

    def make_form(self, initial=None):
        return CategoryForm(self.view, initial=initial)

    def matches(self, c, term: str) -> bool:
        return term in c.name.lower() or term in (c.description or "").lower()

    def _reload(self) -> None:
        try:
            self.model.counts = product_counts(self.api.products.list_all())
        except Exception as e:
            self.log.warning("Failed to load product counts: %s", e)
            self.model.counts = {}
        super()._reload()


class ProductController(RecordListController):
    NOUN = "product"
    PLURAL = "products"
    MESSAGES = {
        "create_failed": "Failed to save product",
        "update_failed": "Failed to save product",
        "delete_failed": "Failed to delete product. It may be in use.",
    }

    def __init__(self, api, context):
        self.categories: List = []
        super().__init__(api, context, ProductsTableModel([]), search_hint="Search name, SKU or category…")
        self._reload()

    @property
    def resource(self):
        return self.api.products

    def make_form(self, initial=None):
        return ProductForm(self.view, categories=[(c.id, c.name) for c in self.categories], initial=initial)

    def matches(self, p, term: str) -> bool:
        return product_matches(p, term)

    def label(self, p) -> str:
        return f"{p.name} ({p.sku})"

    def summary(self, rows: list) -> str:
        serialized = sum(1 for p in rows if p.requires_serial)
        return f"{len(rows)} products · {serialized} serialized"

    def _reload(self) -> None:
        try:
            self.categories = self.api.categories.list_all()
        except Exception as e:
            self.log.warning("Failed to load categories: %s", e)
            self.categories = []
        super()._reload()
