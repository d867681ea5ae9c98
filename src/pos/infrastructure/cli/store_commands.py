"""Interactive store menu.

This is the view layer only: it prompts, re-prompts on bad input and
renders tables.  Every decision is made by the application handlers and
the checkout workflow.
"""

from __future__ import annotations

import click

from pos.application.add_to_cart import AddToCartHandler
from pos.application.list_orders import ListOrdersHandler
from pos.application.list_products import ListProductsHandler
from pos.application.show_cart import ShowCartHandler
from pos.domain.exceptions import (
    DomainException,
    InvalidPaymentMethod,
    OrderStoreUnavailable,
    StoreUnavailableError,
)
from pos.domain.model.payment import PaymentMethod, menu_prompt
from pos.infrastructure.bootstrap import Store, store
from pos.infrastructure.cli.views import render_cart, render_orders, render_products
from pos.infrastructure.settings import Settings

MAIN_MENU = "1. View Products\n2. View Shopping Cart\n3. View Orders\n4. Exit"


@click.command("run")
@click.pass_obj
def store_run(settings: Settings) -> None:
    """Start the interactive store menu."""
    session = store(settings)

    while True:
        click.echo()
        click.echo(MAIN_MENU)
        choice = click.prompt(
            "Enter your choice",
            type=click.IntRange(1, 4),
            prompt_suffix=" (1|2|3|4): ",
        )
        if choice == 1:
            _shop(session)
        elif choice == 2:
            _view_cart(session)
        elif choice == 3:
            _view_orders(session)
        else:
            click.echo("Exiting...")
            return


def _shop(session: Store) -> None:
    render_products(ListProductsHandler(session.catalog).handle())
    handler = AddToCartHandler(session.catalog, session.cart)

    while True:
        product_id = click.prompt("Enter the ID of the product to add to cart")
        try:
            handler.handle(product_id)
        except DomainException as exc:
            click.echo(f"Error: {exc}")
        else:
            click.echo("Product added successfully!")

        if not click.confirm("Add another product?"):
            return


def _view_cart(session: Store) -> None:
    cart = ShowCartHandler(session.cart).handle()
    if cart.is_empty:
        click.echo("Shopping cart is empty.")
        return

    render_cart(cart)
    if click.confirm("Do you want to check out all products?"):
        _checkout(session, cart.total)


def _checkout(session: Store, total: str) -> None:
    click.echo(f"Total Amount: {total}")
    click.echo(f"Select Payment Method ({menu_prompt()})")
    method = _prompt_payment_method()

    try:
        outcome = session.checkout.execute(method)
    except StoreUnavailableError as exc:
        click.echo(f"Error: checkout failed, your cart was kept. {exc}")
        return

    if not outcome.ok:
        click.echo(f"Checkout cancelled: {outcome.message}")
        return

    order = outcome.order
    click.echo(f"Paying {order.total} using {order.payment_method_label}.")
    for warning in outcome.warnings:
        click.echo(f"Warning: {warning}")
    click.echo("You have successfully checked out the products!")
    click.echo(f"Order ID: {order.order_id}")


def _prompt_payment_method() -> PaymentMethod:
    while True:
        raw = click.prompt("Enter your choice", prompt_suffix=" (1|2|3): ")
        try:
            return PaymentMethod.parse(raw)
        except InvalidPaymentMethod as exc:
            click.echo(f"Error: {exc}")


def _view_orders(session: Store) -> None:
    try:
        orders = ListOrdersHandler(session.orders).handle()
    except OrderStoreUnavailable as exc:
        click.echo(f"Error: {exc}")
        return
    render_orders(orders)
