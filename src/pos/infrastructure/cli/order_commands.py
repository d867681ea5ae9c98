"""CLI commands for placed orders."""

from __future__ import annotations

import click

from pos.application.list_orders import ListOrdersHandler, ShowOrderHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import order_repository
from pos.infrastructure.cli.views import render_order, render_orders
from pos.infrastructure.settings import Settings


@click.command("orders")
@click.option("--id", "order_id", type=int, default=None, help="Show only this order.")
@click.pass_obj
def orders_list(settings: Settings, order_id: int | None) -> None:
    """Show placed orders, including those from earlier sessions."""
    repo = order_repository(settings)

    try:
        if order_id is not None:
            render_order(ShowOrderHandler(order_repo=repo).handle(order_id))
        else:
            render_orders(ListOrdersHandler(order_repo=repo).handle())
    except DomainException as exc:
        raise click.ClickException(str(exc))
