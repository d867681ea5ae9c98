"""Order aggregate: the immutable record of a completed purchase.

An Order is created exactly once, at the moment a payment succeeds, from
a snapshot of the cart lines.  Nothing about it changes afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from pos.domain.exceptions import ValidationError
from pos.domain.model.cart import CartLine
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderLine:
    """Copy of a CartLine taken at checkout.

    Later changes to the cart cannot reach back into a placed order.
    """

    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value

    @staticmethod
    def snapshot(line: CartLine) -> OrderLine:
        return OrderLine(product=line.product, quantity=line.quantity)


@dataclass(frozen=True)
class Order:
    """Aggregate root for placed orders.

    Use ``Order.place()`` for new orders; it enforces the invariants.  The
    plain constructor is kept simple so the order history can rebuild
    persisted orders without re-validating them.
    """

    order_id: int
    lines: tuple[OrderLine, ...]
    payment_method_label: str
    placed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def place(
        order_id: int,
        cart_lines: Iterable[CartLine],
        payment_method_label: str,
    ) -> Order:
        if isinstance(order_id, bool) or not isinstance(order_id, int) or order_id < 1:
            raise ValidationError(f"Order ID must be a positive integer, got {order_id!r}")

        lines = tuple(OrderLine.snapshot(line) for line in cart_lines)
        if not lines:
            raise ValidationError("Order must contain at least one item")

        if not payment_method_label or not payment_method_label.strip():
            raise ValidationError("Payment method label is required")

        return Order(
            order_id=order_id,
            lines=lines,
            payment_method_label=payment_method_label,
        )

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)
