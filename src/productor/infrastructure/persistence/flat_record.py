"""Flat-record codec for ProductConfiguration.

Internally a configuration is a tagged union; on disk (and anywhere else
it leaves the process) it is the storefront's flat record with camelCase
keys and every optional field present::

    {"productType": "cake", "size": "10", "layers": 3, "flavor": "vanilla",
     "addons": ["fruit"], "text": "", "shape": "circle",
     "boxSize": null, "boxFlavors": [], "price": 184,
     "deliveryDetails": {"name": "", "address": "", "phone": "", "state": ""}}

Decoding is permissive: unknown values fall back to defaults instead of
failing, and the price is recomputed unless the caller locks it.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from productor.domain.model.configuration import (
    BENTO,
    BOX_SIZES,
    MAX_BOX_FLAVORS,
    BoxOptions,
    CakeOptions,
    ProductConfiguration,
    ProductType,
    Shape,
)
from productor.domain.model.value_objects import DeliveryDetails
from productor.domain.service.pricing import with_recomputed_price


def to_flat(config: ProductConfiguration) -> dict[str, Any]:
    cake, box = config.cake, config.box
    return {
        "productType": config.product_type.value,
        "size": cake.size if cake else None,
        "layers": cake.layers if cake else None,
        "flavor": cake.flavor if cake else None,
        "addons": sorted(cake.addons) if cake else [],
        "text": cake.text if cake else "",
        "shape": cake.shape.value if cake and cake.shape else None,
        "boxSize": box.box_size if box else None,
        "boxFlavors": list(box.box_flavors) if box else [],
        "price": config.price,
        "deliveryDetails": {
            "name": config.delivery.name,
            "address": config.delivery.address,
            "phone": config.delivery.phone,
            "state": config.delivery.state,
        },
    }


def from_flat(raw: dict[str, Any], locked_price: bool = False) -> ProductConfiguration:
    """Rebuild a configuration from its flat record.

    With ``locked_price`` the stored price is kept as-is (placed orders);
    otherwise it is recomputed from the current price tables.
    """
    if not isinstance(raw, dict):
        raw = {}
    try:
        product_type = ProductType(raw.get("productType"))
    except ValueError:
        product_type = ProductType.CAKE

    if product_type == ProductType.CAKE:
        options: CakeOptions | BoxOptions = _cake_from_flat(raw)
    else:
        options = _box_from_flat(raw)

    delivery = raw.get("deliveryDetails")
    if not isinstance(delivery, dict):
        delivery = {}
    config = ProductConfiguration(
        product_type=product_type,
        options=options,
        delivery=DeliveryDetails(
            name=delivery.get("name") or "",
            address=delivery.get("address") or "",
            phone=delivery.get("phone") or "",
            state=delivery.get("state") or "",
        ),
    )
    if locked_price:
        return replace(config, price=int(raw.get("price") or 0))
    return with_recomputed_price(config)


def _cake_from_flat(raw: dict[str, Any]) -> CakeOptions:
    try:
        shape: Shape | None = Shape(raw.get("shape"))
    except ValueError:
        shape = None
    size = raw.get("size") or ""
    layers = raw.get("layers")
    if not isinstance(layers, int) or layers < 1 or size == BENTO:
        layers = 1
    return CakeOptions(
        size=size,
        layers=layers,
        flavor=raw.get("flavor") or "",
        addons=frozenset(_string_items(raw.get("addons"))),
        text=raw.get("text") or "",
        shape=shape,
    )


def _box_from_flat(raw: dict[str, Any]) -> BoxOptions:
    box_size = raw.get("boxSize")
    return BoxOptions(
        box_size=box_size if box_size in BOX_SIZES else None,
        box_flavors=_string_items(raw.get("boxFlavors"))[:MAX_BOX_FLAVORS],
    )


def _string_items(value: Any) -> tuple[str, ...]:
    """Strings from a JSON list; anything else (a bare string included) is empty."""
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(item for item in value if isinstance(item, str))
