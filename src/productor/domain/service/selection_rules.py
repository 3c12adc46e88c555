"""Selection rules — how a configuration responds to each customer action.

Every rule is a pure function ``(config, value) -> config``.  A rejected
action returns the configuration unchanged rather than raising: the UI
disables controls that would violate a rule, so a rejected action is
simply inert.

Rules that target the inactive option group (for example ``set_size`` on
a box of cookies) are also no-ops.

Price is NOT recomputed here. The owning session does that after every
rule, see ``ConfigurationSession``.
"""

from __future__ import annotations

from dataclasses import replace

from productor.domain.model.configuration import (
    BENTO,
    MAX_BOX_FLAVORS,
    MAX_TEXT_LENGTH,
    ProductConfiguration,
    ProductType,
    Shape,
    default_options,
)
from productor.domain.model.value_objects import DeliveryDetails


# --- Cake rules ---------------------------------------------------------------


def set_size(config: ProductConfiguration, size: str) -> ProductConfiguration:
    """Select a cake size.  Bento forces a single layer in the same update."""
    cake = config.cake
    if cake is None:
        return config
    if size == BENTO and cake.layers > 1:
        return config.with_options(replace(cake, size=size, layers=1))
    return config.with_options(replace(cake, size=size))


def set_layers(config: ProductConfiguration, layers: int) -> ProductConfiguration:
    """Set the layer count.  Counts below 1, or above 1 on a Bento cake, are ignored."""
    cake = config.cake
    if cake is None or layers < 1:
        return config
    if cake.size == BENTO and layers > 1:
        return config
    return config.with_options(replace(cake, layers=layers))


def set_flavor(config: ProductConfiguration, flavor: str) -> ProductConfiguration:
    cake = config.cake
    if cake is None:
        return config
    return config.with_options(replace(cake, flavor=flavor))


def toggle_addon(config: ProductConfiguration, addon: str) -> ProductConfiguration:
    cake = config.cake
    if cake is None:
        return config
    addons = cake.addons - {addon} if addon in cake.addons else cake.addons | {addon}
    return config.with_options(replace(cake, addons=frozenset(addons)))


def set_text(config: ProductConfiguration, text: str) -> ProductConfiguration:
    """Set the message piped on the cake (at most 40 characters)."""
    cake = config.cake
    if cake is None or len(text) > MAX_TEXT_LENGTH:
        return config
    return config.with_options(replace(cake, text=text))


def set_shape(config: ProductConfiguration, shape: Shape) -> ProductConfiguration:
    cake = config.cake
    if cake is None:
        return config
    return config.with_options(replace(cake, shape=shape))


# --- Box rules ----------------------------------------------------------------


def set_box_size(config: ProductConfiguration, box_size: int) -> ProductConfiguration:
    """Select a box size.  Previously chosen flavors are cleared."""
    box = config.box
    if box is None:
        return config
    return config.with_options(replace(box, box_size=box_size, box_flavors=()))


def toggle_box_flavor(config: ProductConfiguration, flavor: str) -> ProductConfiguration:
    box = config.box
    if box is None:
        return config
    if flavor in box.box_flavors:
        remaining = tuple(f for f in box.box_flavors if f != flavor)
        return config.with_options(replace(box, box_flavors=remaining))
    if len(box.box_flavors) >= MAX_BOX_FLAVORS:
        return config
    return config.with_options(replace(box, box_flavors=box.box_flavors + (flavor,)))


# --- Cross-cutting rules ------------------------------------------------------


def change_product_type(
    config: ProductConfiguration, product_type: ProductType
) -> ProductConfiguration:
    """Switch product.  The new type starts from its default options and
    the price drops to 0 until it is recomputed."""
    return replace(
        config,
        product_type=product_type,
        options=default_options(product_type),
        price=0,
    )


def set_delivery_details(
    config: ProductConfiguration, delivery: DeliveryDetails
) -> ProductConfiguration:
    return replace(config, delivery=delivery)
