# branchpos/tests/test_settings.py
from __future__ import annotations

import pytest

from branchpos.modules.settings.controller import SettingsController
from branchpos.modules.settings.logic import DEFAULT_CURRENCY, build_company_payload, build_receipt_payload
from branchpos.utils.validators import ValidationError

SETTINGS_JSON = {
    "companyName": "Acme Retail",
    "phone": "0700 000000",
    "email": "info@acme.test",
    "taxId": "TIN-1",
    "receiptFooter": "Thank you!",
    "currencySymbol": "KES",
}


def test_company_payload_leaves_out_blank_fields():
    assert build_company_payload(company_name=" Acme ", phone=" ", website="acme.test") == {
        "companyName": "Acme",
        "website": "acme.test",
    }
    with pytest.raises(ValidationError, match="Company name is required"):
        build_company_payload(company_name="  ")


def test_receipt_payload_defaults_currency():
    assert build_receipt_payload(receipt_footer=" Bye ") == {
        "receiptFooter": "Bye",
        "receiptTagline": "",
        "currencySymbol": DEFAULT_CURRENCY,
    }


@pytest.fixture()
def page(qtbot, fake_api, client, context, messages):
    client.route("GET", "/company-settings", SETTINGS_JSON)
    client.route("PUT", "/company-settings", dict(SETTINGS_JSON, companyName="Acme Retail Ltd"))
    ctl = SettingsController(fake_api, context)
    qtbot.addWidget(ctl.get_widget())
    return ctl


def test_load_fills_form(page):
    v = page.view
    assert v.txt_company_name.text() == "Acme Retail"
    assert v.txt_tax_id.text() == "TIN-1"
    assert v.txt_address.text() == ""
    assert v.txt_footer.text() == "Thank you!"
    assert v.txt_currency.text() == "KES"


def test_save_company_sends_only_company_fields(page, client, messages):
    page.view.txt_company_name.setText("Acme Retail Ltd")
    page.view.txt_email.setText("")
    assert page.save_company()
    sent = client.called("PUT", "/company-settings")[0][3]
    assert sent == {"companyName": "Acme Retail Ltd", "phone": "0700 000000", "taxId": "TIN-1"}
    assert messages["info"] == ["Company details saved successfully"]
    # form shows what the server returned
    assert page.view.txt_email.text() == "info@acme.test"


def test_company_name_required(page, client, messages):
    page.view.txt_company_name.setText(" ")
    assert not page.save_company()
    assert messages["error"] == ["Company name is required"]
    assert not client.called("PUT", "/company-settings")


def test_save_receipt_blank_currency_uses_default(page, client, messages):
    page.view.txt_currency.setText("")
    page.view.txt_tagline.setText("Best prices in town")
    assert page.save_receipt()
    assert client.called("PUT", "/company-settings")[0][3] == {
        "receiptFooter": "Thank you!",
        "receiptTagline": "Best prices in town",
        "currencySymbol": DEFAULT_CURRENCY,
    }
    assert messages["info"] == ["Receipt settings saved successfully"]


def test_failed_save_keeps_edits(page, client, api_error, messages):
    client.route("PUT", "/company-settings", api_error(500, None))
    page.view.txt_footer.setText("See you soon")
    assert not page.save_receipt()
    assert messages["error"] == ["Failed to save receipt settings"]
    assert page.view.txt_footer.text() == "See you soon"


def test_branch_switch_keeps_unsaved_edits(page, context, branches, client):
    page.view.txt_company_name.setText("Draft Name")
    context.select(branches[0])
    page.on_branch_changed()
    assert page.view.txt_company_name.text() == "Draft Name"
    assert len(client.called("GET", "/company-settings")) == 1


def test_load_failure(qtbot, fake_api, client, context, messages, api_error):
    client.route("GET", "/company-settings", api_error(503, None))
    ctl = SettingsController(fake_api, context)
    qtbot.addWidget(ctl.get_widget())
    assert messages["error"] == ["Failed to load settings"]
    assert ctl.view.txt_currency.text() == DEFAULT_CURRENCY
