"""Application service: List Orders use case (query).

Reads the order history, so orders placed in earlier sessions are
listed too.
"""

from __future__ import annotations

from pos.application.dto import OrderDTO, order_to_dto
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderDTO]:
        return [order_to_dto(order) for order in self._order_repo.list_all()]


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order_to_dto(order)
