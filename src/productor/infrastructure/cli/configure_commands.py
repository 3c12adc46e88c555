"""CLI commands for customizing the product in the current session."""

from __future__ import annotations

from typing import Any

import click

from productor.application.configure_product import (
    ConfigureProductHandler,
    ShowConfigurationHandler,
)
from productor.application.start_over import StartOverHandler
from productor.domain.exceptions import DomainException
from productor.domain.model.configuration import (
    ADDONS,
    BOX_FLAVORS,
    BOX_SIZES,
    CAKE_FLAVORS,
    CAKE_SIZES,
    MAX_LAYERS,
    ProductType,
    Shape,
)
from productor.infrastructure.bootstrap import session_repository
from productor.infrastructure.cli.display import display_configuration


def _configure(action: str, value: Any) -> None:
    handler = ConfigureProductHandler(session_repo=session_repository())

    try:
        dto = handler.handle(action, value)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_configuration(dto)


@click.command("show")
def configure_show() -> None:
    """Show the current selection and its price."""
    display_configuration(ShowConfigurationHandler(session_repository()).handle())


@click.command("product-type")
@click.argument("product_type", type=click.Choice([t.value for t in ProductType]))
def configure_product_type(product_type: str) -> None:
    """Switch product (resets options for the previous product)."""
    _configure("product-type", ProductType(product_type))


@click.command("size")
@click.argument("size", type=click.Choice(CAKE_SIZES))
def configure_size(size: str) -> None:
    """Choose a cake size (Bento cakes are single layer)."""
    _configure("size", size)


@click.command("layers")
@click.argument("layers", type=click.IntRange(1, MAX_LAYERS))
def configure_layers(layers: int) -> None:
    """Choose the number of cake layers."""
    _configure("layers", layers)


@click.command("flavor")
@click.argument("flavor", type=click.Choice(CAKE_FLAVORS))
def configure_flavor(flavor: str) -> None:
    """Choose a cake flavor."""
    _configure("flavor", flavor)


@click.command("addon")
@click.argument("addon", type=click.Choice(ADDONS))
def configure_addon(addon: str) -> None:
    """Toggle a cake add-on on or off."""
    _configure("addon", addon)


@click.command("text")
@click.argument("text", default="")
def configure_text(text: str) -> None:
    """Set the message on the cake (40 characters max, empty to clear)."""
    _configure("text", text)


@click.command("shape")
@click.argument("shape", type=click.Choice([s.value for s in Shape]))
def configure_shape(shape: str) -> None:
    """Choose the cake shape."""
    _configure("shape", Shape(shape))


@click.command("box-size")
@click.argument("box_size", type=click.Choice([str(s) for s in BOX_SIZES]))
def configure_box_size(box_size: str) -> None:
    """Choose a box size for cookies or muffins (clears flavors)."""
    _configure("box-size", int(box_size))


@click.command("box-flavor")
@click.argument("flavor", type=click.Choice(BOX_FLAVORS))
def configure_box_flavor(flavor: str) -> None:
    """Toggle a box flavor (at most two)."""
    _configure("box-flavor", flavor)


@click.command("start-over")
def configure_start_over() -> None:
    """Discard the current selection."""
    display_configuration(StartOverHandler(session_repository()).handle())
