"""Product value: an item the store sells.

Products are created once when the catalog is built and never change
afterwards, so carts and orders can share references to them freely.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A purchasable product. Identity is ``id``."""

    id: str
    name: str
    price: Money

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValidationError("Product ID is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
