"""CLI command for the text report."""

from __future__ import annotations

import click

from ims.application.context import AppContext
from ims.application.report import ReportHandler


@click.command("report")
@click.pass_obj
def report(context: AppContext) -> None:
    """Print products, placed orders and totals."""
    handler = ReportHandler(context.inventory, context.date_format, context.currency)

    click.echo("Products:")
    for line in handler.product_lines() or ["(none)"]:
        click.echo(f"  {line}")

    click.echo("Orders:")
    for line in handler.order_lines() or ["(none)"]:
        click.echo(f"  {line}")

    summary = handler.summary()
    click.echo(
        f"{summary.product_count} product(s), {summary.units_in_stock} unit(s) in stock, "
        f"{summary.order_count} order(s) totalling {summary.orders_total}"
    )
