from __future__ import annotations

from PySide6.QtWidgets import QWidget

from ..base_module import BranchModule
from .logic import DEFAULT_CURRENCY, build_company_payload, build_receipt_payload
from .view import SettingsView
from ...api.dashboard_api import CompanySettings
from ...utils import ui_helpers as ui
from ...utils.validators import ValidationError


class SettingsController(BranchModule):
    """Company-wide settings; the selected branch does not matter here."""

    def __init__(self, api, context):
        super().__init__(api, context)
        self.settings = CompanySettings()
        self.view = SettingsView()
        self.view.btn_save_company.clicked.connect(self.save_company)
        self.view.btn_save_receipt.clicked.connect(self.save_receipt)
        self.view.btn_reload.clicked.connect(self._reload)
        self._reload()

    def get_widget(self) -> QWidget:
        return self.view

    def on_branch_changed(self) -> None:
        # unsaved edits survive a branch switch
        pass

    def _reload(self) -> None:
        try:
            self.settings = self.api.settings.get()
        except Exception as e:
            self.settings = CompanySettings()
            self._handle_error("Failed to load settings", e, "Failed to load settings")
        self._fill()

    def _fill(self) -> None:
        s, v = self.settings, self.view
        v.txt_company_name.setText(s.company_name)
        v.txt_phone.setText(s.phone or "")
        v.txt_email.setText(s.email or "")
        v.txt_address.setText(s.address or "")
        v.txt_website.setText(s.website or "")
        v.txt_tax_id.setText(s.tax_id or "")
        v.txt_tagline.setText(s.receipt_tagline or "")
        v.txt_footer.setText(s.receipt_footer or "")
        v.txt_currency.setText(s.currency_symbol or DEFAULT_CURRENCY)

    def _save(self, payload: dict, ok_message: str, failed_message: str) -> bool:
        try:
            self.settings = self.api.settings.update(payload)
        except Exception as e:
            self._handle_error(failed_message, e, failed_message)
            return False
        ui.info(self.view, "Settings", ok_message)
        self._fill()
        return True

    def save_company(self) -> bool:
        v = self.view
        try:
            payload = build_company_payload(
                company_name=v.txt_company_name.text(),
                phone=v.txt_phone.text(),
                email=v.txt_email.text(),
                address=v.txt_address.text(),
                website=v.txt_website.text(),
                tax_id=v.txt_tax_id.text(),
            )
        except ValidationError as e:
            ui.error(self.view, "Settings", str(e))
            return False
        return self._save(payload, "Company details saved successfully", "Failed to save company details")

    def save_receipt(self) -> bool:
        v = self.view
        payload = build_receipt_payload(
            receipt_footer=v.txt_footer.text(),
            receipt_tagline=v.txt_tagline.text(),
            currency_symbol=v.txt_currency.text(),
        )
        return self._save(payload, "Receipt settings saved successfully", "Failed to save receipt settings")
