"""CLI commands for checkout and the order history."""

from __future__ import annotations

import click

from techstore.application.checkout import CheckoutHandler
from techstore.application.show_orders import ShowOrdersHandler
from techstore.domain.exceptions import DomainException
from techstore.domain.model.order import Buyer, PaymentMethod
from techstore.infrastructure.bootstrap import (
    cart_repository,
    order_ids,
    order_repository,
)


@click.command("checkout")
@click.option("--name", default="", help="Full name.")
@click.option("--email", default="", help="E-mail address.")
@click.option("--address", default="", help="Delivery address.")
@click.option(
    "--payment",
    type=click.Choice([m.value for m in PaymentMethod]),
    default=PaymentMethod.CARD.value,
    show_default=True,
    help="Payment method.",
)
def checkout(name: str, email: str, address: str, payment: str) -> None:
    """Place an order for everything in the cart."""
    handler = CheckoutHandler(
        cart_repo=cart_repository(),
        order_repo=order_repository(),
        next_id=order_ids(),
    )
    buyer = Buyer(
        name=name,
        email=email,
        address=address,
        payment_method=PaymentMethod(payment),
    )

    if not handler.can_submit(buyer):
        raise click.ClickException(
            "Checkout unavailable: the cart must have items and "
            "--name, --email and --address must be given."
        )

    try:
        result = handler.handle(buyer)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(result.notice.title)
    click.echo(result.notice.description)
    click.echo(f"Total: {result.order.total}")


@click.command("list")
def orders_list() -> None:
    """List past orders, most recent first."""
    orders = ShowOrdersHandler(order_repo=order_repository()).handle()

    if not orders:
        click.echo("Nenhum pedido ainda.")
        return

    for o in orders:
        click.echo(f"{o.id:<14} {o.created_at:<22} {o.item_count} itens • {o.total}")
