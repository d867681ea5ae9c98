"""Table rendering shared by the CLI commands."""

from __future__ import annotations

import click

from pos.application.dto import CartDTO, LineItemDTO, OrderDTO, ProductDTO

_COL = 20


def render_products(products: list[ProductDTO]) -> None:
    click.echo(f"{'Product ID':<{_COL}}{'Name':<{_COL}}{'Price':<{_COL}}")
    click.echo("=" * 45)
    for p in products:
        click.echo(f"{p.id:<{_COL}}{p.name:<{_COL}}{p.price:<{_COL}}")


def _render_lines(items: list[LineItemDTO]) -> None:
    click.echo(
        f"{'Product ID':<{_COL}}{'Name':<{_COL}}{'Price':<{_COL}}{'Quantity':<{_COL}}"
    )
    click.echo("=" * 67)
    for item in items:
        click.echo(
            f"{item.product_id:<{_COL}}{item.product_name:<{_COL}}"
            f"{item.unit_price:<{_COL}}{item.quantity:<{_COL}}"
        )


def render_cart(cart: CartDTO) -> None:
    _render_lines(cart.items)
    click.echo(f"{'Total':<{_COL * 3}}{cart.total}")


def render_order(order: OrderDTO) -> None:
    click.echo(f"Order ID: {order.id}")
    click.echo(f"Placed: {order.placed_at}")
    click.echo(f"Total Amount: {order.total}")
    click.echo(f"Payment Method: {order.payment_method}")
    click.echo("Order Details:")
    _render_lines(order.items)


def render_orders(orders: list[OrderDTO]) -> None:
    if not orders:
        click.echo("No orders yet.")
        return
    for order in orders:
        click.echo()
        render_order(order)
