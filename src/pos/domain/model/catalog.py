"""Catalog: the fixed set of products the store sells.

The catalog is built once at startup and is read-only afterwards.
"""

from __future__ import annotations

from pos.domain.exceptions import ProductNotFound, ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money

DEFAULT_PRODUCTS: tuple[tuple[str, str, str], ...] = (
    ("QWE", "Paper", "20.50"),
    ("ASD", "Pencil", "10.45"),
    ("ZXC", "Sharpener", "10.99"),
    ("RTY", "Ballpen", "30.25"),
    ("FGH", "Ruler", "99.99"),
)


class Catalog:

    def __init__(self, products: list[Product]) -> None:
        self._products: dict[str, Product] = {}
        for product in products:
            key = self._key(product.id)
            if key in self._products:
                raise ValidationError(f"Duplicate product ID '{product.id}'")
            self._products[key] = product

    @classmethod
    def default(cls) -> Catalog:
        return cls(
            [
                Product(id=pid, name=name, price=Money.of(price))
                for pid, name, price in DEFAULT_PRODUCTS
            ]
        )

    def list_all(self) -> list[Product]:
        """Return every product in catalog order."""
        return list(self._products.values())

    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found.

        IDs are matched case-insensitively, ignoring surrounding blanks,
        so typed input like ``" qwe"`` resolves to ``QWE``.
        """
        return self._products.get(self._key(product_id))

    def find_by_id(self, product_id: str) -> Product:
        product = self.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(f"Product not found: '{product_id.strip()}'")
        return product

    def __len__(self) -> int:
        return len(self._products)

    @staticmethod
    def _key(product_id: str) -> str:
        return product_id.strip().upper()
