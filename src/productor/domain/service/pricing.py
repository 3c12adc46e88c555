"""Pricing and validity engine.

Two pure functions over a ``ProductConfiguration``:

- ``compute_price`` — whole-naira price of the current selection.
- ``can_proceed`` — whether the selection is complete enough to move on
  to the next checkout step.

Neither function raises.  The configuration is edited live and spends
most of its life incomplete, so anything unknown or missing simply
contributes nothing.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal, localcontext

from productor.domain.model.configuration import (
    BoxOptions,
    CakeOptions,
    ProductConfiguration,
    ProductType,
)

CAKE_BASE_PRICES = {"8": 50, "10": 75, "12": 100, "Bento": 40}
LAYER_MULTIPLIER = Decimal("1.5")
ADDON_PRICES = {"fruit": 15, "text": 10, "filling": 20}

BOX_PRICES = {4: 20, 6: 28, 12: 50}


def compute_price(config: ProductConfiguration) -> int:
    """Return the price of *config* as a non-negative integer."""
    product_type = getattr(config, "product_type", None)
    options = getattr(config, "options", None)

    if product_type == ProductType.CAKE and isinstance(options, CakeOptions):
        return _cake_price(options)
    if isinstance(product_type, ProductType) and product_type.is_box_product:
        if isinstance(options, BoxOptions):
            return BOX_PRICES.get(options.box_size, 0)  # type: ignore[arg-type]
    return 0


def can_proceed(config: ProductConfiguration) -> bool:
    """True when the selection has everything the next step needs."""
    product_type = getattr(config, "product_type", None)
    options = getattr(config, "options", None)

    if product_type == ProductType.CAKE and isinstance(options, CakeOptions):
        return bool(options.size) and bool(options.flavor) and options.shape is not None
    if isinstance(product_type, ProductType) and product_type.is_box_product:
        if isinstance(options, BoxOptions):
            return options.box_size is not None and len(options.box_flavors) > 0
    return False


def with_recomputed_price(config: ProductConfiguration) -> ProductConfiguration:
    """Return *config* with ``price`` brought up to date."""
    price = compute_price(config)
    if price == config.price:
        return config
    return replace(config, price=price)


# --- Internal helpers ---------------------------------------------------------


def _cake_price(options: CakeOptions) -> int:
    total = Decimal(CAKE_BASE_PRICES.get(options.size, 0))

    layers = options.layers if isinstance(options.layers, int) else 1
    with localcontext() as ctx:
        # 1.5 ** n has n decimal places; keep every digit so rounding is exact.
        ctx.prec = max(28, 2 * layers + 10)
        # Each layer beyond the first compounds the multiplier.
        if layers > 1:
            total *= LAYER_MULTIPLIER ** (layers - 1)

        for addon in options.addons or ():
            total += ADDON_PRICES.get(addon, 0)

        # Half-up matches the storefront's Math.round for non-negative totals.
        return int(total.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
