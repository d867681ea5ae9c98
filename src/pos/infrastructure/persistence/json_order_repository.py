"""JSON-file-backed implementation of OrderRepository.

Keeps the placed orders so "View Orders" still shows them after a
restart.  The file is rewritten atomically on every add.  Order IDs
come from the OrderIdGenerator, never from here.
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from pos.domain.exceptions import OrderStoreUnavailable, ValidationError
from pos.domain.model.order import Order, OrderLine
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity
from pos.domain.repository.order_repository import OrderRepository
from pos.infrastructure.persistence.atomic_file import atomic_write_text


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> None:
        orders = self._load_raw()
        if any(raw.get("id") == order.order_id for raw in orders):
            raise OrderStoreUnavailable(
                f"Order #{order.order_id} is already recorded in {self._file_path}"
            )
        orders.append(self._to_raw(order))
        self._persist_raw(orders)

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw.get("id") == order_id:
                return self._decode(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._decode(raw) for raw in self._load_raw()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.order_id,
            "payment_method": order.payment_method_label,
            "placed_at": order.placed_at.isoformat(),
            "items": [
                {
                    "product_id": line.product.id,
                    "product_name": line.product.name,
                    "unit_price": str(line.product.price.amount),
                    "quantity": line.quantity.value,
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        lines = tuple(
            OrderLine(
                product=Product(
                    id=i["product_id"],
                    name=i["product_name"],
                    price=Money(Decimal(i["unit_price"])),
                ),
                quantity=Quantity(i["quantity"]),
            )
            for i in raw["items"]
        )
        return Order(
            order_id=raw["id"],
            lines=lines,
            payment_method_label=raw["payment_method"],
            placed_at=datetime.fromisoformat(raw["placed_at"]),
        )

    def _decode(self, raw: dict) -> Order:
        try:
            return self._to_domain(raw)
        except (KeyError, TypeError, ValueError, ArithmeticError, ValidationError) as exc:
            raise OrderStoreUnavailable(
                f"Order history {self._file_path} has a malformed record: {exc!r}"
            ) from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise OrderStoreUnavailable(
                f"Cannot read order history {self._file_path}: {exc}"
            ) from exc
        if not text.strip():
            return []
        try:
            orders = json.loads(text)
        except ValueError as exc:
            raise OrderStoreUnavailable(
                f"Order history {self._file_path} is corrupt: {exc}"
            ) from exc
        if not isinstance(orders, list) or not all(isinstance(o, dict) for o in orders):
            raise OrderStoreUnavailable(
                f"Order history {self._file_path} is corrupt: expected a list of orders"
            )
        return orders

    def _persist_raw(self, orders: list[dict]) -> None:
        try:
            atomic_write_text(self._file_path, json.dumps(orders, indent=2) + "\n")
        except OSError as exc:
            raise OrderStoreUnavailable(
                f"Cannot write order history {self._file_path}: {exc}"
            ) from exc
