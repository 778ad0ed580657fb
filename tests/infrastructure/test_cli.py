"""End-to-end tests for the interactive shell, driven through CliRunner."""

from click.testing import CliRunner

from ims.application.context import AppContext
from ims.infrastructure.cli.main import cli, run_session_command


def _run_shell(*lines: str):
    runner = CliRunner()
    return runner.invoke(
        cli, ["--log-level", "ERROR", "shell"], input="\n".join(lines) + "\n"
    )


class TestShellHappyPath:

    def test_full_session(self):
        result = _run_shell(
            "product add --id A1 --name Widget --price 25.50 --stock 10",
            'product add --id B2 --name "Big Gadget" --price 50.00 --stock 3',
            "order add --product A1 --quantity 2",
            "order add --product B2 --quantity 1",
            "order place",
            "report",
            "quit",
        )

        assert result.exit_code == 0, result.output
        assert "Product A1 'Widget' added at $25.50 (stock 10)" in result.output
        assert "Order placed, total $101.00" in result.output
        assert "Big Gadget (B2)" in result.output
        assert "| Total: $101.00" in result.output
        assert "2 product(s), 13 unit(s) in stock, 1 order(s) totalling $101.00" in result.output

    def test_product_list_and_show(self):
        result = _run_shell(
            "product add --id A1 --name Widget --price 1.00 --stock 4",
            "product list",
            "product show --id A1",
            "quit",
        )
        assert result.exit_code == 0, result.output
        assert "Widget" in result.output
        assert "Stock: 4" in result.output

    def test_stock_update(self):
        result = _run_shell(
            "product add --id A1 --name Widget --price 1.00 --stock 4",
            "product stock --id A1 --stock 9",
            "product show --id A1",
            "quit",
        )
        assert "Stock for A1 set to 9" in result.output
        assert "Stock: 9" in result.output

    def test_order_show_and_discard(self):
        result = _run_shell(
            "product add --id A1 --name Widget --price 2.00 --stock 4",
            "order add --product A1 --quantity 3",
            "order show",
            "order discard",
            "order show",
            "order list",
            "quit",
        )
        assert result.exit_code == 0, result.output
        assert "$6.00" in result.output
        assert "Current order discarded." in result.output
        assert "(no items)" in result.output
        assert "No orders placed." in result.output

    def test_order_add_reports_parsed_quantity(self):
        result = _run_shell(
            "product add --id A1 --name Widget --price 2.00 --stock 4",
            "order add --product A1 --quantity 007",
            "order add --product A1 --quantity 3",
            "quit",
        )
        assert result.exit_code == 0, result.output
        assert "Widget (A1) now x 7 in order  (order total $14.00)" in result.output
        assert "Widget (A1) now x 10 in order  (order total $20.00)" in result.output
        assert "007" not in result.output.split("order add")[-1]

    def test_empty_listings(self):
        result = _run_shell("product list", "order list", "report", "quit")
        assert "No products found." in result.output
        assert "No orders placed." in result.output
        assert "(none)" in result.output

    def test_eof_ends_session(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--log-level", "ERROR", "shell"], input="product list\n")
        assert result.exit_code == 0, result.output


class TestShellErrors:

    def test_duplicate_product_reports_error_and_continues(self):
        result = _run_shell(
            "product add --id A1 --name Widget --price 1.00 --stock 1",
            "product add --id A1 --name Again --price 1.00 --stock 1",
            "product list",
            "quit",
        )
        assert result.exit_code == 0, result.output
        assert "Error: Product ID 'A1' already exists" in result.output
        assert "Again" not in result.output.split("product list")[-1]

    def test_invalid_input_reported(self):
        result = _run_shell(
            "product add --id A-1 --name Widget --price 1.00 --stock 1",
            "product add --id A1 --name Widget --price cheap --stock 1",
            "quit",
        )
        assert "letters and digits" in result.output
        assert "is not a number" in result.output

    def test_place_empty_order(self):
        result = _run_shell("order place", "quit")
        assert "Error: Order must contain at least one item" in result.output

    def test_unknown_product_in_order(self):
        result = _run_shell("order add --product ZZ9 --quantity 1", "quit")
        assert "Error: Product with ID 'ZZ9' not found" in result.output

    def test_oversized_totals_rejected_and_session_continues(self):
        result = _run_shell(
            "product add --id A1 --name Huge --price 9e999999 --stock 1",
            "product add --id B2 --name Big --price 999999999999 --stock 1",
            "order add --product B2 --quantity 1",
            "order add --product B2 --quantity 10",
            "order show",
            "quit",
        )
        assert result.exit_code == 0, result.output
        assert "Error: Money amount cannot exceed" in result.output
        assert result.output.count("Error:") == 2
        assert "$999999999999.00" in result.output.split("order show")[-1]

    def test_usage_errors_do_not_end_session(self):
        result = _run_shell(
            "frobnicate",
            "product add --id A1",
            'product add --name "unterminated',
            "product list",
            "quit",
        )
        assert result.exit_code == 0, result.output
        assert "No such command" in result.output
        assert "Missing option" in result.output
        assert "No closing quotation" in result.output
        assert "No products found." in result.output

    def test_help(self):
        result = _run_shell("help", "help product", "quit")
        assert result.exit_code == 0, result.output
        assert "Build, place and list orders." in result.output
        assert "Add a new product to the inventory." in result.output


class TestRunSessionCommand:

    def test_dispatches_against_given_context(self):
        context = AppContext()
        runner = CliRunner()
        with runner.isolation():
            run_session_command(
                context,
                ["product", "add", "--id", "A1", "--name", "Widget", "--price", "3", "--stock", "1"],
            )
        assert context.inventory.get_product_by_id("A1").name == "Widget"
