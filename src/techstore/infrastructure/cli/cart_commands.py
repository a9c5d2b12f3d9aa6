"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from techstore.application.add_to_cart import AddToCartHandler
from techstore.application.dto import CartDTO
from techstore.application.show_cart import ShowCartHandler
from techstore.application.update_cart import (
    ChangeQuantityHandler,
    ClearCartHandler,
    RemoveFromCartHandler,
)
from techstore.domain.exceptions import DomainException
from techstore.infrastructure.bootstrap import cart_repository, catalog


def display_cart(dto: CartDTO) -> None:
    """Shared formatting for the cart view."""
    if dto.is_empty:
        click.echo("Seu carrinho está vazio.")
        return

    click.echo(f"  {'ID':<6} {'Product':<22} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*65}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_id:<6} {line.name:<22} {line.quantity:>5} "
            f"{line.unit_price:>14} {line.line_total:>14}"
        )
    click.echo(f"  {'-'*65}")
    click.echo(f"  {'Items':<28} {dto.count:>5}")
    click.echo(f"  {'Total':<28} {dto.total:>35}")


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID to add.")
def cart_add(product_id: str) -> None:
    """Add one unit of a product to the cart."""
    handler = AddToCartHandler(cart_repo=cart_repository(), catalog=catalog())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto)


@click.command("qty")
@click.option("--id", "product_id", required=True, help="Product ID in the cart.")
@click.option("--delta", required=True, type=int, help="Units to add (negative to take away).")
def cart_qty(product_id: str, delta: int) -> None:
    """Change a line's quantity (never below 1)."""
    display_cart(ChangeQuantityHandler(cart_repo=cart_repository()).handle(product_id, delta))


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID to remove.")
def cart_remove(product_id: str) -> None:
    """Remove a line from the cart."""
    display_cart(RemoveFromCartHandler(cart_repo=cart_repository()).handle(product_id))


@click.command("show")
def cart_show() -> None:
    """Show the cart."""
    display_cart(ShowCartHandler(cart_repo=cart_repository()).handle())


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    ClearCartHandler(cart_repo=cart_repository()).handle()
    click.echo("Cart emptied.")
