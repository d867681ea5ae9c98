"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from pos.application.list_products import ListProductsHandler
from pos.infrastructure.bootstrap import catalog
from pos.infrastructure.cli.views import render_products


@click.command("products")
def products_list() -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(catalog=catalog())
    render_products(handler.handle())
