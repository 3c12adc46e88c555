import logging

import click

from productor.infrastructure.cli.account_commands import (
    account_sign_in,
    account_sign_out,
)
from productor.infrastructure.cli.checkout_commands import checkout_delivery, checkout_pay
from productor.infrastructure.cli.configure_commands import (
    configure_addon,
    configure_box_flavor,
    configure_box_size,
    configure_flavor,
    configure_layers,
    configure_product_type,
    configure_shape,
    configure_show,
    configure_size,
    configure_start_over,
    configure_text,
)
from productor.infrastructure.cli.order_commands import (
    order_cancel,
    order_complete,
    order_history,
    order_show,
)
from productor.infrastructure.settings import load_settings


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log at INFO level.")
def cli(verbose: bool) -> None:
    """Productor — cakes, cookies and muffins, made to order"""
    level = "INFO" if verbose else load_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@cli.group()
def configure() -> None:
    """Customize the product."""


@cli.group()
def account() -> None:
    """Sign in and out."""


@cli.group()
def checkout() -> None:
    """Delivery details and payment."""


@cli.group()
def order() -> None:
    """View and manage placed orders."""


# Register subcommands
configure.add_command(configure_addon)
configure.add_command(configure_box_flavor)
configure.add_command(configure_box_size)
configure.add_command(configure_flavor)
configure.add_command(configure_layers)
configure.add_command(configure_product_type)
configure.add_command(configure_shape)
configure.add_command(configure_show)
configure.add_command(configure_size)
configure.add_command(configure_start_over)
configure.add_command(configure_text)
account.add_command(account_sign_in)
account.add_command(account_sign_out)
checkout.add_command(checkout_delivery)
checkout.add_command(checkout_pay)
order.add_command(order_cancel)
order.add_command(order_complete)
order.add_command(order_history)
order.add_command(order_show)
