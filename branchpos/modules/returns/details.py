from ...utils.helpers import fmt_date


def return_fields(r):
    return [
        ("Return #", r.return_number),
        ("Date", fmt_date(r.return_date or r.created_at)),
        ("Branch", r.branch_name),
        ("Supplier", r.supplier_name),
        ("Purchase", r.purchase_number),
        ("Status", (r.status or "").title()),
        ("Reason", r.reason),
        ("Created by", r.user_name),
    ]
