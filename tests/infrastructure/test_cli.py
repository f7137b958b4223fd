"""End-to-end CLI tests against a temporary data directory."""

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli


@pytest.fixture
def runner(tmp_path):
    return CliRunner(env={
        "STOREFRONT_DATA_DIR": str(tmp_path),
        "ENVIRONMENT": "test",
        "STOREFRONT_PASSWORD_ITERATIONS": "1000",
        "STOREFRONT_LOG_DIR": None,
        "LOG_LEVEL": None,
    })


def _invoke(runner, *args, input=None):
    return runner.invoke(cli, list(args), input=input)


def _add_battery(runner, stock="5"):
    result = _invoke(
        runner, "product", "add",
        "--name", "Moura M60GD", "--category", "Cars", "--price", "599.90", "--stock", stock,
    )
    assert result.exit_code == 0, result.output
    return result


class TestProductCommands:

    def test_add_and_list(self, runner):
        result = _add_battery(runner)
        assert "Product #1 'Moura M60GD' added at R$ 599.90" in result.output

        listing = _invoke(runner, "product", "list")
        assert listing.exit_code == 0
        assert "Moura M60GD" in listing.output
        assert "Page 1 of 1 (1 products)" in listing.output

    def test_invalid_price_is_reported(self, runner):
        result = _invoke(
            runner, "product", "add", "--name", "X", "--price", "0", "--stock", "1",
        )
        assert result.exit_code == 1
        assert "400 Invalid Value" in result.output

    def test_bad_sort_field(self, runner):
        result = _invoke(runner, "product", "list", "--sort", "color,asc")
        assert result.exit_code == 1
        assert "'sort'" in result.output

    def test_search_and_show(self, runner):
        _add_battery(runner)
        assert "Moura M60GD" in _invoke(runner, "product", "search", "--name", "m60").output
        assert "No products matching" in _invoke(runner, "product", "search", "--name", "zzz").output
        assert "Moura M60GD" in _invoke(runner, "product", "show", "--id", "1").output

    def test_delete_missing_product(self, runner):
        result = _invoke(runner, "product", "delete", "--id", "9")
        assert result.exit_code == 1
        assert "Product with ID '9' not found (404 Not Found)" in result.output


class TestOrderCommands:

    def test_checkout_list_and_cancel(self, runner):
        _add_battery(runner)

        checkout = _invoke(runner, "cart", "checkout", "--items", "1:2")
        assert checkout.exit_code == 0, checkout.output
        assert "Order #1 created  (status=CONFIRMED)" in checkout.output
        assert "R$ 1199.80" in checkout.output

        listing = _invoke(runner, "order", "list", "--status", "confirmed")
        assert "CONFIRMED" in listing.output

        cancel = _invoke(runner, "order", "cancel", "--id", "1")
        assert cancel.exit_code == 0
        assert "stock restored" in cancel.output

        again = _invoke(runner, "order", "cancel", "--id", "1")
        assert again.exit_code == 1
        assert "already cancelled" in again.output

        assert "     5" in _invoke(runner, "product", "show", "--id", "1").output

    def test_insufficient_stock(self, runner):
        _add_battery(runner, stock="1")
        result = _invoke(runner, "cart", "checkout", "--items", "1:2")
        assert result.exit_code == 1
        assert "Insufficient Stock" in result.output
        assert "No orders found." in _invoke(runner, "order", "list").output

    def test_malformed_items(self, runner):
        result = _invoke(runner, "cart", "checkout", "--items", "1-2")
        assert result.exit_code == 2
        assert "ProductId:Quantity" in result.output


class TestAuthAndSeed:

    def test_seed_then_login(self, runner):
        seeded = _invoke(runner, "seed")
        assert seeded.exit_code == 0
        assert "Users created: admin, client" in seeded.output

        login = _invoke(runner, "auth", "login", "--username", "admin", input="admin123\n")
        assert login.exit_code == 0
        assert "role=ADMIN" in login.output

        rejected = _invoke(runner, "auth", "login", "--username", "admin", input="wrong\n")
        assert rejected.exit_code == 1
        assert "Invalid username or password (401 Unauthorized)" in rejected.output

    def test_register(self, runner):
        result = _invoke(
            runner, "auth", "register", "--name", "ana", "--email", "ana@example.com",
            input="s3cret\ns3cret\n",
        )
        assert result.exit_code == 0, result.output
        assert "User #1 'ana' registered as CLIENT" in result.output
