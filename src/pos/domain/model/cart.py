"""Cart: the customer's mutable collection of chosen products.

The Cart owns its CartLines.  It keeps at most one line per product ID
and preserves the order in which products were first added.  Lines are
frozen; adding another unit swaps in a new line.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace

from pos.domain.exceptions import CartCapacityExceeded, ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartLine:
    """A product in the cart together with how many were added."""

    product: Product
    quantity: Quantity = Quantity(1)

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value

    def incremented(self) -> CartLine:
        return replace(self, quantity=self.quantity.incremented())


class Cart:
    """Aggregate root for the shopping cart.

    ``max_lines`` caps the number of *distinct* products.  ``None`` means
    unbounded.  Adding another unit of a product already in the cart is
    always allowed.

    Every method holds ``lock``.  It is reentrant, so a caller that must
    read and then clear the cart without interleaved additions can hold
    it across both calls.
    """

    def __init__(self, max_lines: int | None = None) -> None:
        if max_lines is not None and max_lines <= 0:
            raise ValidationError("Cart capacity must be positive")
        self._max_lines = max_lines
        self._lines: list[CartLine] = []
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def add_product(self, product: Product) -> CartLine:
        """Add one unit of *product* and return the resulting line."""
        with self._lock:
            index = self._find_index(product.id)
            if index is not None:
                line = self._lines[index].incremented()
                self._lines[index] = line
                return line

            if self._max_lines is not None and len(self._lines) >= self._max_lines:
                raise CartCapacityExceeded(
                    f"Cart is full: at most {self._max_lines} different products"
                )
            line = CartLine(product=product)
            self._lines.append(line)
            return line

    def lines(self) -> tuple[CartLine, ...]:
        with self._lock:
            return tuple(self._lines)

    def is_empty(self) -> bool:
        with self._lock:
            return not self._lines

    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines():
            result = result + line.line_total
        return result

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines())

    def clear(self) -> None:
        with self._lock:
            self._lines.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._lines)

    def _find_index(self, product_id: str) -> int | None:
        for index, line in enumerate(self._lines):
            if line.product.id == product_id:
                return index
        return None
