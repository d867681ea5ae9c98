"""Integration tests for the cart and catalog use cases."""

import pytest

from pos.application.add_to_cart import AddToCartHandler
from pos.application.list_products import ListProductsHandler
from pos.application.show_cart import ShowCartHandler
from pos.domain.exceptions import CartCapacityExceeded, ProductNotFound
from pos.domain.model.cart import Cart
from pos.domain.model.catalog import Catalog


def _setup(max_lines: int | None = None):
    catalog = Catalog.default()
    cart = Cart(max_lines=max_lines)
    return AddToCartHandler(catalog, cart), ShowCartHandler(cart), cart


class TestAddToCart:

    def test_adds_by_typed_id(self):
        add, show, _ = _setup()
        dto = add.handle("qwe")
        assert dto.product_id == "QWE"
        assert dto.quantity == 1

        dto = add.handle("QWE")
        assert dto.quantity == 2
        assert dto.line_total == "41.00"

    def test_unknown_product_leaves_cart_unchanged(self):
        add, _, cart = _setup()
        with pytest.raises(ProductNotFound, match="Product not found"):
            add.handle("XYZ")
        assert cart.is_empty()

    def test_capacity_limit_surfaces(self):
        add, _, cart = _setup(max_lines=1)
        add.handle("QWE")
        with pytest.raises(CartCapacityExceeded):
            add.handle("ASD")
        assert len(cart) == 1


class TestShowCart:

    def test_empty_cart(self):
        _, show, _ = _setup()
        dto = show.handle()
        assert dto.is_empty
        assert dto.total == "0.00"

    def test_lines_and_total(self):
        add, show, _ = _setup()
        for pid in ("QWE", "ASD", "QWE"):
            add.handle(pid)

        dto = show.handle()

        assert [(i.product_id, i.quantity) for i in dto.items] == [("QWE", 2), ("ASD", 1)]
        assert dto.items[0].unit_price == "20.50"
        assert dto.total == "51.45"
        assert dto.item_count == 3


def test_list_products():
    products = ListProductsHandler(Catalog.default()).handle()
    assert [(p.id, p.name, p.price) for p in products][:2] == [
        ("QWE", "Paper", "20.50"),
        ("ASD", "Pencil", "10.45"),
    ]
