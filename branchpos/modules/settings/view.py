from __future__ import annotations

from PySide6.QtWidgets import (
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)


class SettingsView(QWidget):
    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("Settings")

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        company = QGroupBox("Company Details")
        self.txt_company_name = QLineEdit()
        self.txt_phone = QLineEdit()
        self.txt_email = QLineEdit()
        self.txt_address = QLineEdit()
        self.txt_website = QLineEdit()
        self.txt_tax_id = QLineEdit()
        cf = QFormLayout(company)
        cf.addRow("Company Name*", self.txt_company_name)
        cf.addRow("Phone", self.txt_phone)
        cf.addRow("Email", self.txt_email)
        cf.addRow("Address", self.txt_address)
        cf.addRow("Website", self.txt_website)
        cf.addRow("Tax ID", self.txt_tax_id)
        self.btn_save_company = QPushButton("Save Company Details")
        cf.addRow("", self.btn_save_company)
        root.addWidget(company)

        receipt = QGroupBox("Receipt Settings")
        self.txt_tagline = QLineEdit()
        self.txt_footer = QLineEdit()
        self.txt_currency = QLineEdit()
        self.txt_currency.setPlaceholderText("UGX")
        rf = QFormLayout(receipt)
        rf.addRow("Receipt Tagline", self.txt_tagline)
        rf.addRow("Receipt Footer", self.txt_footer)
        rf.addRow("Currency Symbol", self.txt_currency)
        self.btn_save_receipt = QPushButton("Save Receipt Settings")
        rf.addRow("", self.btn_save_receipt)
        root.addWidget(receipt)

        bottom = QHBoxLayout()
        bottom.addStretch(1)
        self.btn_reload = QPushButton("Reload")
        bottom.addWidget(self.btn_reload)
        root.addLayout(bottom)
        root.addStretch(1)
