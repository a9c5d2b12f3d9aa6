import click

from techstore.infrastructure.bootstrap import debug_enabled
from techstore.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_qty,
    cart_remove,
    cart_show,
)
from techstore.infrastructure.cli.catalog_commands import catalog_list
from techstore.infrastructure.cli.order_commands import checkout, orders_list
from techstore.infrastructure.cli.schedule_commands import (
    schedule_cancel,
    schedule_create,
    schedule_draft,
    schedule_issues,
    schedule_list,
    schedule_reset,
    schedule_set,
    schedule_slots,
)
from techstore.infrastructure.cli.serve_command import serve
from techstore.infrastructure.logger import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Debug logging.")
def cli(verbose: bool) -> None:
    """TechStore: catalog, cart, checkout and repair scheduling"""
    configure_logging(debug=verbose or debug_enabled())


@cli.group()
def catalog() -> None:
    """Browse products."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def orders() -> None:
    """Past orders."""


@cli.group()
def schedule() -> None:
    """Book technical assistance."""


# Register subcommands
catalog.add_command(catalog_list)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_qty)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cli.add_command(checkout)
orders.add_command(orders_list)
schedule.add_command(schedule_cancel)
schedule.add_command(schedule_create)
schedule.add_command(schedule_draft)
schedule.add_command(schedule_issues)
schedule.add_command(schedule_list)
schedule.add_command(schedule_reset)
schedule.add_command(schedule_set)
schedule.add_command(schedule_slots)
cli.add_command(serve)
