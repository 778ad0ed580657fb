"""CLI commands for products."""

from __future__ import annotations

import click

from ims.application.add_product import AddProductHandler
from ims.application.context import AppContext
from ims.application.find_product import FindProductHandler
from ims.application.report import ReportHandler
from ims.application.update_stock import UpdateStockHandler
from ims.infrastructure.cli.output import unwrap_or_fail


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID (letters and digits).")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, help="Units in stock.")
@click.pass_obj
def product_add(context: AppContext, product_id: str, name: str, price: str, stock: str) -> None:
    """Add a new product to the inventory."""
    handler = AddProductHandler(context)
    dto = unwrap_or_fail(handler.handle(product_id, name, price, stock))
    click.echo(f"Product {dto.id} '{dto.name}' added at {dto.price} (stock {dto.stock})")


@click.command("list")
@click.pass_obj
def product_list(context: AppContext) -> None:
    """List all products in the inventory."""
    rows = ReportHandler(context.inventory, context.date_format, context.currency).product_rows()

    if not rows:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<10} {'Name':<20} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 50)
    for row in rows:
        click.echo(f"{row.id:<10} {row.name:<20} {row.price:>10} {row.stock:>7}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(context: AppContext, product_id: str) -> None:
    """Show a single product."""
    dto = unwrap_or_fail(FindProductHandler(context).handle(product_id))
    click.echo(f"ID:    {dto.id}")
    click.echo(f"Name:  {dto.name}")
    click.echo(f"Price: {dto.price}")
    click.echo(f"Stock: {dto.stock}")


@click.command("stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--stock", required=True, help="New number of units in stock.")
@click.pass_obj
def product_stock(context: AppContext, product_id: str, stock: str) -> None:
    """Set a product's stock level."""
    dto = unwrap_or_fail(UpdateStockHandler(context).handle(product_id, stock))
    click.echo(f"Stock for {dto.id} set to {dto.stock}")
