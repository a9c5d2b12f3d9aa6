"""Cart aggregate: the products a shopper has picked, with quantities.

Invariant: at most one CartLine per product id.  Adding a product that is
already present bumps its quantity instead of creating a second line.
None of the operations here fail; unknown ids are simply ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from techstore.domain.model.product import Product
from techstore.domain.model.value_objects import Money, Quantity


@dataclass
class CartLine:
    """A product plus how many units of it are in the cart."""

    product: Product
    quantity: Quantity = field(default_factory=lambda: Quantity(1))

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value

    def snapshot(self) -> CartLine:
        """Detached copy, used when an order freezes the cart contents."""
        return CartLine(product=self.product, quantity=self.quantity)


@dataclass
class Cart:
    """Aggregate root for the shopping cart."""

    lines: list[CartLine] = field(default_factory=list)

    def add(self, product: Product) -> CartLine:
        """Add one unit of *product*, merging with an existing line."""
        line = self.find(product.id)
        if line is not None:
            line.quantity = Quantity(line.quantity.value + 1)
            return line
        line = CartLine(product=product)
        self.lines.append(line)
        return line

    def set_qty(self, product_id: str, delta: int) -> None:
        """Move a line's quantity by *delta*; it never drops below 1."""
        line = self.find(product_id)
        if line is not None:
            line.quantity = line.quantity.shifted(delta)

    def remove(self, product_id: str) -> None:
        self.lines = [line for line in self.lines if line.product_id != product_id]

    def clear(self) -> None:
        self.lines = []

    def find(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    # --- Computed properties --------------------------------------------------

    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result

    def count(self) -> int:
        """Units across all lines, as shown on the cart badge."""
        return sum(line.quantity.value for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines
