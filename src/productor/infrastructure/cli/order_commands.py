"""CLI commands for placed orders."""

from __future__ import annotations

import click

from productor.application.cancel_order import CancelOrderHandler
from productor.application.complete_order import CompleteOrderHandler
from productor.application.order_history import OrderHistoryHandler
from productor.application.show_order import ShowOrderHandler
from productor.domain.exceptions import DomainException
from productor.infrastructure.bootstrap import order_repository, session_repository
from productor.infrastructure.cli.display import display_order


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("history")
def order_history() -> None:
    """List the signed-in customer's orders, newest first."""
    handler = OrderHistoryHandler(
        session_repo=session_repository(),
        order_repo=order_repository(),
    )

    try:
        orders = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders yet.")
        return

    click.echo(f"{'ID':<6} {'Reference':<12} {'Product':<10} {'Status':<10} {'Total':>10}  Created")
    click.echo("-" * 72)
    for o in orders:
        product = o.details[0][1] if o.details else "-"
        click.echo(
            f"{o.id:<6} {o.reference:<12} {product:<10} {o.status:<10} {o.total:>10}  {o.created_at}"
        )


@click.command("complete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to complete.")
def order_complete(order_id: int) -> None:
    """Mark a confirmed order as delivered."""
    handler = CompleteOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} completed.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
def order_cancel(order_id: int) -> None:
    """Cancel an order that has not been delivered yet."""
    handler = CancelOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} cancelled.")
