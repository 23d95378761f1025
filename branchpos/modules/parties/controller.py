from __future__ import annotations

from ..crud import RecordListController
from .form import PartyForm
from .logic import party_matches
from .model import CustomersTableModel, SuppliersTableModel


class CustomerController(RecordListController):
    NOUN = "customer"
    PLURAL = "customers"

    def __init__(self, api, context):
        super().__init__(api, context, CustomersTableModel([]), search_hint="Search name, phone or email…")
        self._reload()

    @property
    def resource(self):
        return self.api.customers

    def make_form(self, initial=None):
        return PartyForm(self.view, noun="Customer", initial=initial)

    def matches(self, c, term: str) -> bool:
        return party_matches(c, term)


class SupplierController(RecordListController):
    NOUN = "supplier"
    PLURAL = "suppliers"
    MESSAGES = {
        "created": "Supplier created",
        "updated": "Supplier updated",
        "deleted": "Supplier deleted",
    }

    def __init__(self, api, context):
        super().__init__(api, context, SuppliersTableModel([]), search_hint="Search name, phone or email…")
        self._reload()

    @property
    def resource(self):
        return self.api.suppliers

    def make_form(self, initial=None):
        return PartyForm(self.view, noun="Supplier", supplier=True, initial=initial)

    def matches(self, s, term: str) -> bool:
        return party_matches(s, term) or term in (s.contact_person or "").lower()
