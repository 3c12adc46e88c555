"""Shared formatting for CLI output."""

from __future__ import annotations

import click

from productor.application.dto import ConfigurationDTO, OrderDTO


def display_configuration(dto: ConfigurationDTO) -> None:
    for label, value in dto.details:
        click.echo(f"  {label:<10} {value}")
    click.echo(f"  {'-'*30}")
    click.echo(f"  {'Total':<10} {dto.price}")
    if dto.can_proceed:
        click.echo("Ready for checkout.")
    else:
        click.echo("Selection incomplete; checkout is disabled.")


def display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.reference}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_email}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.payment_reference:
        click.echo(f"Payment:  {dto.payment_reference}")
    click.echo()
    for label, value in dto.details:
        click.echo(f"  {label:<10} {value}")
    click.echo(f"  {'-'*30}")
    click.echo(f"  {'Total':<10} {dto.total}")
    click.echo()
    click.echo(f"Deliver to: {dto.delivery.name}, {dto.delivery.address}, {dto.delivery.state}")
    click.echo(f"Phone:      {dto.delivery.phone}")
