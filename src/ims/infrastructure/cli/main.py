import shlex

import click

from ims.application.context import AppContext
from ims.infrastructure import bootstrap
from ims.infrastructure.cli.order_commands import (
    order_add,
    order_discard,
    order_list,
    order_place,
    order_show,
)
from ims.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_show,
    product_stock,
)
from ims.infrastructure.cli.report_commands import report
from ims.infrastructure.logging_config import get_logger

LOGGER = get_logger(__name__)

EXIT_WORDS = ("quit", "exit")


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override IMS_LOG_LEVEL.",
)
def cli(log_level: str | None) -> None:
    """IMS: in-memory inventory and order tracker"""
    bootstrap.configure_logging(log_level)


@click.group()
def session() -> None:
    """Commands available inside the interactive shell."""


@session.group()
def product() -> None:
    """Manage products."""


@session.group()
def order() -> None:
    """Build, place and list orders."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_stock)
order.add_command(order_add)
order.add_command(order_discard)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
session.add_command(report)


def run_session_command(context: AppContext, args: list[str]) -> None:
    """Dispatch one shell line to the session command tree."""
    try:
        session.main(args=args, prog_name="", obj=context, standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
    except click.Abort:
        click.echo("Aborted!", err=True)


@cli.command()
def shell() -> None:
    """Start an interactive session.

    Products and orders live only as long as the session does.
    """
    context = bootstrap.app_context()
    LOGGER.info("Shell session started")
    click.echo("IMS shell. Type 'help' for commands, 'quit' to leave.")

    while True:
        try:
            line = click.prompt("ims", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            break

        try:
            args = shlex.split(line)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            continue

        if not args:
            continue
        if args[0] in EXIT_WORDS:
            break
        if args[0] == "help":
            args = [*args[1:], "--help"]

        run_session_command(context, args)

    LOGGER.info(
        "Shell session ended with %d product(s) and %d order(s)",
        context.inventory.product_count, context.inventory.order_count,
    )
