"""CLI commands for the in-progress order and the order history."""

from __future__ import annotations

import click

from ims.application.add_order_item import AddOrderItemHandler
from ims.application.context import AppContext
from ims.application.place_order import PlaceOrderHandler
from ims.application.report import ReportHandler
from ims.application.show_order import DiscardOrderHandler, ShowCurrentOrderHandler
from ims.infrastructure.cli.output import display_order, unwrap_or_fail


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, help="Number of units to add.")
@click.pass_obj
def order_add(context: AppContext, product_id: str, quantity: str) -> None:
    """Add a product to the current order."""
    dto = unwrap_or_fail(AddOrderItemHandler(context).handle(product_id, quantity))
    line = next(item for item in dto.items if item.product_id == product_id.strip())
    click.echo(
        f"{line.product_name} ({line.product_id}) now x {line.quantity} in order"
        f"  (order total {dto.total})"
    )


@click.command("show")
@click.pass_obj
def order_show(context: AppContext) -> None:
    """Show the current, not yet placed, order."""
    dto = unwrap_or_fail(ShowCurrentOrderHandler(context).handle())
    display_order(dto, "Current order")


@click.command("place")
@click.pass_obj
def order_place(context: AppContext) -> None:
    """Place the current order and start a new one."""
    dto = unwrap_or_fail(PlaceOrderHandler(context).handle())
    click.echo(f"Order placed, total {dto.total}")


@click.command("discard")
@click.pass_obj
def order_discard(context: AppContext) -> None:
    """Throw away the current order."""
    unwrap_or_fail(DiscardOrderHandler(context).handle())
    click.echo("Current order discarded.")


@click.command("list")
@click.pass_obj
def order_list(context: AppContext) -> None:
    """List all placed orders."""
    rows = ReportHandler(context.inventory, context.date_format, context.currency).order_rows()

    if not rows:
        click.echo("No orders placed.")
        return

    click.echo(f"{'#':>3}  {'Date':<22} {'Total':>12}")
    click.echo("-" * 39)
    for number, row in enumerate(rows, start=1):
        click.echo(f"{number:>3}  {row.date:<22} {row.total:>12}")
