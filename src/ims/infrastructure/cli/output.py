"""Shared helpers for turning handler results into terminal output."""

from __future__ import annotations

from typing import TypeVar

import click

from ims.application.dto import OrderDTO
from ims.application.result import Failure, Result

T = TypeVar("T")


def unwrap_or_fail(result: Result[T]) -> T:
    """Return the success value or abort the command with the failure message."""
    if isinstance(result, Failure):
        raise click.ClickException(result.message)
    return result.value


def display_order(dto: OrderDTO, heading: str) -> None:
    click.echo(heading)
    click.echo(f"Created:  {dto.created_at}")
    click.echo()

    if dto.is_empty:
        click.echo("  (no items)")
        return

    click.echo(f"  {'ID':<10} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*58}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<10} {item.product_name:<20} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*58}")
    click.echo(f"  {'Order Total':<38} {dto.total:>20}")
