"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  Each running store
gets exactly one counter, one audit log and one order history, created
here and passed down explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.application.checkout import CheckoutWorkflow
from pos.domain.model.cart import Cart
from pos.domain.model.catalog import Catalog
from pos.infrastructure.persistence.file_order_id_generator import (
    FileOrderIdGenerator,
)
from pos.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from pos.infrastructure.persistence.text_order_log import TextFileOrderLog
from pos.infrastructure.settings import Settings


def catalog() -> Catalog:
    return Catalog.default()


def order_id_generator(settings: Settings) -> FileOrderIdGenerator:
    return FileOrderIdGenerator(settings.counter_path)


def order_log(settings: Settings) -> TextFileOrderLog:
    return TextFileOrderLog(settings.log_path)


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.orders_path)


@dataclass
class Store:
    """Everything one interactive session works with."""

    catalog: Catalog
    cart: Cart
    orders: JsonOrderRepository
    checkout: CheckoutWorkflow


def store(settings: Settings) -> Store:
    cart = Cart(max_lines=settings.max_cart_lines)
    orders = order_repository(settings)
    return Store(
        catalog=catalog(),
        cart=cart,
        orders=orders,
        checkout=CheckoutWorkflow(
            cart=cart,
            id_generator=order_id_generator(settings),
            order_log=order_log(settings),
            order_repo=orders,
        ),
    )
