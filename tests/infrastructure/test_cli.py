"""End-to-end tests for the pos CLI."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from pos.infrastructure.cli.main import cli


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _keys(*lines: str) -> str:
    return "\n".join(lines) + "\n"


BUY_PAPER_TWICE_CASH = _keys(
    "9",      # out of range, re-prompted
    "1",      # view products
    "qwe",
    "y",      # add another
    "QWE",
    "n",
    "2",      # view cart
    "y",      # check out
    "5",      # invalid payment method, re-prompted
    "1",      # cash
    "2",      # cart again, now empty
    "3",      # view orders
    "4",      # exit
)


class TestInteractiveCheckout:

    def test_full_session(self, runner, tmp_path):
        result = runner.invoke(cli, ["--data-dir", str(tmp_path), "run"], input=BUY_PAPER_TWICE_CASH)

        assert result.exit_code == 0, result.output
        out = result.output
        assert out.count("Product added successfully!") == 2
        assert "41.00" in out
        assert "Error: Invalid payment method" in out
        assert "Paying 41.00 using Cash." in out
        assert "You have successfully checked out the products!" in out
        assert "Order ID: 1" in out
        assert "Shopping cart is empty." in out
        assert "Payment Method: Cash" in out
        assert out.rstrip().endswith("Exiting...")

        assert (tmp_path / "order_id.txt").read_text(encoding="utf-8").strip() == "1"
        assert (tmp_path / "order_logs.txt").read_text(encoding="utf-8").splitlines() == [
            "Order 1 has been successfully checked out and paid using Cash."
        ]
        history = json.loads((tmp_path / "orders.json").read_text(encoding="utf-8"))
        assert [(o["id"], o["payment_method"]) for o in history] == [(1, "Cash")]
        assert history[0]["items"][0]["quantity"] == 2

    def test_ids_continue_after_restart(self, runner, tmp_path):
        args = ["--data-dir", str(tmp_path), "run"]
        runner.invoke(cli, args, input=BUY_PAPER_TWICE_CASH)

        result = runner.invoke(
            cli, args, input=_keys("1", "FGH", "n", "2", "y", "3", "3", "4")
        )

        assert result.exit_code == 0, result.output
        assert "Order ID: 2" in result.output
        assert "Paying 99.99 using GCash." in result.output
        # orders from the previous session are still listed
        assert "Order ID: 1" in result.output
        assert len((tmp_path / "order_logs.txt").read_text(encoding="utf-8").splitlines()) == 2

    def test_unknown_product_is_reported(self, runner, tmp_path):
        result = runner.invoke(
            cli, ["--data-dir", str(tmp_path), "run"], input=_keys("1", "NOPE", "n", "2", "4")
        )
        assert result.exit_code == 0, result.output
        assert "Error: Product not found: 'NOPE'" in result.output
        assert "Shopping cart is empty." in result.output

    def test_declining_checkout_keeps_cart(self, runner, tmp_path):
        result = runner.invoke(
            cli,
            ["--data-dir", str(tmp_path), "run"],
            input=_keys("1", "ASD", "n", "2", "n", "2", "n", "4"),
        )
        assert result.exit_code == 0, result.output
        assert result.output.count("Pencil") >= 3
        assert not (tmp_path / "order_id.txt").exists()

    def test_cart_capacity_option(self, runner, tmp_path):
        result = runner.invoke(
            cli,
            ["--data-dir", str(tmp_path), "--max-cart-lines", "1", "run"],
            input=_keys("1", "QWE", "y", "ASD", "n", "4"),
        )
        assert result.exit_code == 0, result.output
        assert "Error: Cart is full: at most 1 different products" in result.output

    def test_counter_failure_keeps_cart(self, runner, tmp_path):
        (tmp_path / "order_id.txt").mkdir()
        result = runner.invoke(
            cli,
            ["--data-dir", str(tmp_path), "run"],
            input=_keys("1", "QWE", "n", "2", "y", "1", "2", "n", "4"),
        )
        assert result.exit_code == 0, result.output
        assert "Error: checkout failed, your cart was kept." in result.output
        assert "You have successfully checked out" not in result.output
        assert not (tmp_path / "order_logs.txt").exists()

    def test_no_subcommand_starts_menu(self, runner, tmp_path):
        result = runner.invoke(cli, ["--data-dir", str(tmp_path)], input=_keys("4"))
        assert result.exit_code == 0, result.output
        assert "1. View Products" in result.output
        assert "Exiting..." in result.output

    def test_data_dir_from_environment(self, runner, tmp_path):
        result = runner.invoke(
            cli,
            ["run"],
            input=_keys("1", "RTY", "n", "2", "y", "2", "4"),
            env={"POS_DATA_DIR": str(tmp_path)},
        )
        assert result.exit_code == 0, result.output
        assert "Paying 30.25 using Credit/Debit Card." in result.output
        assert (tmp_path / "order_id.txt").read_text(encoding="utf-8").strip() == "1"


class TestQueryCommands:

    def test_products(self, runner, tmp_path):
        result = runner.invoke(cli, ["--data-dir", str(tmp_path), "products"])
        assert result.exit_code == 0
        for name in ("Paper", "Pencil", "Sharpener", "Ballpen", "Ruler"):
            assert name in result.output
        assert "99.99" in result.output

    def test_orders_empty(self, runner, tmp_path):
        result = runner.invoke(cli, ["--data-dir", str(tmp_path), "orders"])
        assert result.exit_code == 0
        assert "No orders yet." in result.output

    def test_orders_after_checkout(self, runner, tmp_path):
        runner.invoke(cli, ["--data-dir", str(tmp_path), "run"], input=BUY_PAPER_TWICE_CASH)

        result = runner.invoke(cli, ["--data-dir", str(tmp_path), "orders", "--id", "1"])

        assert result.exit_code == 0, result.output
        assert "Order ID: 1" in result.output
        assert "Total Amount: 41.00" in result.output

    def test_missing_order(self, runner, tmp_path):
        result = runner.invoke(cli, ["--data-dir", str(tmp_path), "orders", "--id", "9"])
        assert result.exit_code == 1
        assert "Order #9 not found" in result.output

    def test_corrupt_history(self, runner, tmp_path):
        (tmp_path / "orders.json").write_text("oops", encoding="utf-8")
        result = runner.invoke(cli, ["--data-dir", str(tmp_path), "orders"])
        assert result.exit_code == 1
        assert "corrupt" in result.output
