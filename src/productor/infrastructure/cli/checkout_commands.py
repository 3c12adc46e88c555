"""CLI commands for the checkout steps after customization."""

from __future__ import annotations

import click

from productor.application.enter_delivery_details import EnterDeliveryDetailsHandler
from productor.application.place_order import PlaceOrderHandler
from productor.domain.exceptions import DomainException
from productor.domain.model.value_objects import NIGERIAN_STATES
from productor.infrastructure.bootstrap import (
    order_notifier,
    order_repository,
    payment_gateway,
    session_repository,
)
from productor.infrastructure.cli.display import display_configuration, display_order


@click.command("delivery")
@click.option("--name", required=True, help="Recipient name.")
@click.option("--address", required=True, help="Street address.")
@click.option("--phone", required=True, help="Phone number (10-15 digits).")
@click.option(
    "--state",
    required=True,
    type=click.Choice(NIGERIAN_STATES, case_sensitive=False),
    help="Delivery state.",
)
def checkout_delivery(name: str, address: str, phone: str, state: str) -> None:
    """Enter delivery details for the current selection."""
    handler = EnterDeliveryDetailsHandler(session_repo=session_repository())

    try:
        dto = handler.handle(name=name, address=address, phone=phone, state=state)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_configuration(dto)
    click.echo(f"Delivering to {dto.delivery.name}, {dto.delivery.state}.")


@click.command("pay")
def checkout_pay() -> None:
    """Pay for the current selection and place the order."""
    handler = PlaceOrderHandler(
        session_repo=session_repository(),
        order_repo=order_repository(),
        payment_gateway=payment_gateway(),
        notifier=order_notifier(),
    )

    try:
        dto = handler.handle()
    except DomainException as exc:
        raise click.ClickException(f"{exc}. Please try again.")

    click.echo("Payment received. Thank you!")
    click.echo()
    display_order(dto)
