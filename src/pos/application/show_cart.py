"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from pos.application.dto import CartDTO, line_to_dto
from pos.domain.model.cart import Cart


class ShowCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        return CartDTO(
            items=[line_to_dto(line) for line in self._cart.lines()],
            total=str(self._cart.total()),
            item_count=self._cart.item_count,
        )
