from ...widgets.records_model import RecordsTableModel


class CustomersTableModel(RecordsTableModel):
    HEADERS = ["Name", "Phone", "Email", "Address", "Loyalty Points"]
    NUMERIC_COLUMNS = (4,)

    def display(self, c, col):
        return [c.name, c.phone or "", c.email or "", c.address or "", c.loyalty_points][col]


class SuppliersTableModel(RecordsTableModel):
    HEADERS = ["Name", "Contact Person", "Phone", "Email", "Address"]

    def display(self, s, col):
        return [s.name, s.contact_person or "", s.phone or "", s.email or "", s.address or ""][col]
