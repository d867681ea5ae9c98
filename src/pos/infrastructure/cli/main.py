from pathlib import Path

import click

from pos.infrastructure.cli.catalog_commands import products_list
from pos.infrastructure.cli.order_commands import orders_list
from pos.infrastructure.cli.store_commands import store_run
from pos.infrastructure.logging_config import configure_logging
from pos.infrastructure.settings import DEFAULT_DATA_DIR, Settings


@click.group(invoke_without_command=True)
@click.version_option(package_name="pos-simulator", prog_name="pos")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    show_default=True,
    envvar="POS_DATA_DIR",
    help="Directory for the order counter, audit log and order history.",
)
@click.option(
    "--max-cart-lines",
    type=click.IntRange(min=1),
    default=None,
    envvar="POS_MAX_CART_LINES",
    help="Most distinct products a cart may hold (default: no limit).",
)
@click.option("-v", "--verbose", is_flag=True, envvar="POS_VERBOSE", help="Debug logging.")
@click.option("--log-json", is_flag=True, envvar="POS_LOG_JSON", help="JSON log lines on stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    data_dir: Path,
    max_cart_lines: int | None,
    verbose: bool,
    log_json: bool,
) -> None:
    """POS: point-of-sale simulator"""
    configure_logging(verbose=verbose, log_json=log_json)
    ctx.obj = Settings(
        data_dir=data_dir,
        max_cart_lines=max_cart_lines,
        verbose=verbose,
        log_json=log_json,
    )
    if ctx.invoked_subcommand is None:
        ctx.invoke(store_run)


# Register subcommands
cli.add_command(store_run)
cli.add_command(products_list)
cli.add_command(orders_list)
