"""
POS cart state.

Pure Python (no Qt) so the rules can be exercised directly:

- one line per product, in the order products were first added
- quantity bounded by the stock quantity seen when the line was created
- serialized products take their quantity from the selected serial list,
  which replaces any earlier selection
- per-line price override (negative prices ignored)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ...utils.validators import ValidationError

# add() result when the product needs the serial selection dialog instead
NEEDS_SERIALS = "needs_serials"
ADDED = "added"


class CartError(ValidationError):
    """A cart operation was refused; the message is shown to the cashier."""
    pass


@dataclass
class CartLine:
    stock_id: int
    product_id: int
    name: str
    sku: str
    price: float
    quantity: int
    max_stock: int
    requires_serial: bool = False
    serial_numbers: List[str] = field(default_factory=list)

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


class Cart:
    def __init__(self):
        self.lines: List[CartLine] = []
        self.customer = None            # Customer or None (walk-in)
        self.quick_customer_name = ""

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.lines)

    def is_empty(self) -> bool:
        return not self.lines

    def line(self, product_id: int) -> Optional[CartLine]:
        for ln in self.lines:
            if ln.product_id == product_id:
                return ln
        return None

    @property
    def subtotal(self) -> float:
        return sum(ln.price * ln.quantity for ln in self.lines)

    @property
    def total(self) -> float:
        # no cart-level tax or discount
        return self.subtotal

    @property
    def item_count(self) -> int:
        return sum(ln.quantity for ln in self.lines)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def add(self, stock) -> str:
        """
        Add one unit of `stock`. Returns NEEDS_SERIALS for serialized products
        (the cart is left untouched); raises CartError when the stock ceiling
        is reached.
        """
        if stock.requires_serial:
            return NEEDS_SERIALS

        existing = self.line(stock.product_id)
        current = existing.quantity if existing else 0
        if current >= stock.quantity:
            raise CartError(f"Only {stock.quantity} items in stock")

        if existing:
            existing.quantity += 1
        else:
            self.lines.append(
                CartLine(
                    stock_id=stock.id,
                    product_id=stock.product_id,
                    name=stock.product_name,
                    sku=stock.product_sku,
                    price=stock.selling_price,
                    quantity=1,
                    max_stock=stock.quantity,
                )
            )
        return ADDED

    def set_serials(self, stock, serials: Iterable[str]) -> CartLine:
        """Replace the serial selection for a serialized product."""
        chosen = list(serials)
        if not chosen:
            raise CartError("Please select at least one serial number")

        existing = self.line(stock.product_id)
        if existing:
            existing.serial_numbers = chosen
            existing.quantity = len(chosen)
            return existing

        ln = CartLine(
            stock_id=stock.id,
            product_id=stock.product_id,
            name=stock.product_name,
            sku=stock.product_sku,
            price=stock.selling_price,
            quantity=len(chosen),
            max_stock=stock.quantity,
            requires_serial=True,
            serial_numbers=chosen,
        )
        self.lines.append(ln)
        return ln

    def update_quantity(self, product_id: int, delta: int) -> None:
        ln = self.line(product_id)
        if ln is None:
            return
        if ln.requires_serial:
            raise CartError("Use serial number selection to change quantity")
        new_qty = ln.quantity + delta
        if new_qty > ln.max_stock:
            raise CartError(f"Only {ln.max_stock} items in stock")
        if new_qty > 0:
            ln.quantity = new_qty

    def remove(self, product_id: int) -> None:
        self.lines = [ln for ln in self.lines if ln.product_id != product_id]

    def update_price(self, product_id: int, price: float) -> None:
        if price < 0:
            return
        ln = self.line(product_id)
        if ln is not None:
            ln.price = price

    def clear(self) -> None:
        self.lines = []
        self.customer = None
        self.quick_customer_name = ""

    # ------------------------------------------------------------------
    # Checkout
    # ------------------------------------------------------------------
    def checkout_payload(self, branch_id: int, payment_method: str) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "branchId": branch_id,
            "paymentMethod": payment_method.upper(),
            "items": [],
        }
        if self.customer is not None:
            payload["customerId"] = self.customer.id
        else:
            quick = (self.quick_customer_name or "").strip()
            if quick:
                payload["customerName"] = quick

        for ln in self.lines:
            item: Dict[str, Any] = {
                "productId": ln.product_id,
                "quantity": ln.quantity,
                "unitPrice": ln.price,
            }
            if ln.requires_serial and ln.serial_numbers:
                item["serialNumbers"] = list(ln.serial_numbers)
            payload["items"].append(item)
        return payload


# ----------------------------------------------------------------------
# Catalog / customer filtering
# ----------------------------------------------------------------------

def sellable(stock_items: Iterable[Any]) -> List[Any]:
    """Only stock with quantity above zero can be sold."""
    return [s for s in stock_items if s.quantity > 0]


def category_options(stock_items: Iterable[Any]) -> List[str]:
    """'all' followed by distinct category names in first-seen order."""
    seen: List[str] = []
    for s in stock_items:
        c = s.category_name
        if c and c not in seen:
            seen.append(c)
    return ["all"] + seen


def filter_products(stock_items: Iterable[Any], search: str = "", category: str = "all") -> List[Any]:
    term = (search or "").lower()
    out = []
    for s in stock_items:
        matches_search = term in (s.product_name or "").lower() or term in (s.product_sku or "").lower()
        matches_category = category == "all" or s.category_name == category
        if matches_search and matches_category:
            out.append(s)
    return out


def filter_customers(customers: Iterable[Any], search: str = "") -> List[Any]:
    term = (search or "").lower()
    return [
        c for c in customers
        if term in (c.name or "").lower() or (c.phone and (search or "") in c.phone)
    ]
