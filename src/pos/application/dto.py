"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry already-formatted data from the application layer to the CLI
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.cart import CartLine
from pos.domain.model.order import Order, OrderLine
from pos.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:

    id: str
    name: str
    price: str  # formatted, e.g. "20.50"


@dataclass(frozen=True)
class LineItemDTO:
    """A single cart or order line as displayed to the user."""

    product_id: str
    product_name: str
    unit_price: str
    quantity: int
    line_total: str


@dataclass(frozen=True)
class CartDTO:

    items: list[LineItemDTO]
    total: str
    item_count: int

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class OrderDTO:

    id: int
    payment_method: str
    items: list[LineItemDTO]
    total: str
    placed_at: str


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(id=product.id, name=product.name, price=str(product.price))


def line_to_dto(line: CartLine | OrderLine) -> LineItemDTO:
    return LineItemDTO(
        product_id=line.product.id,
        product_name=line.product.name,
        unit_price=str(line.product.price),
        quantity=line.quantity.value,
        line_total=str(line.line_total),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.order_id,
        payment_method=order.payment_method_label,
        items=[line_to_dto(line) for line in order.lines],
        total=str(order.total),
        placed_at=order.placed_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
