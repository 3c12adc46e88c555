"""ProductConfiguration — the customer's in-progress product selection.

A configuration is a tagged union: ``product_type`` selects which option
group is meaningful, and ``options`` holds exactly that group.  A cake
configuration can never carry stale box fields and vice versa.

Instances are frozen.  Selection rules in
``productor.domain.service.selection_rules`` return new instances, and
the owning session recomputes ``price`` after every change.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Union

from productor.domain.model.value_objects import DeliveryDetails


class ProductType(Enum):
    CAKE = "cake"
    COOKIES = "cookies"
    MUFFINS = "muffins"

    @property
    def is_box_product(self) -> bool:
        return self in (ProductType.COOKIES, ProductType.MUFFINS)


class Shape(Enum):
    CIRCLE = "circle"
    HEART = "heart"


# ---------------------------------------------------------------------------
# Catalog constants
# ---------------------------------------------------------------------------
BENTO = "Bento"
CAKE_SIZES = ("8", "10", "12", BENTO)
CAKE_FLAVORS = ("vanilla", "chocolate", "strawberry", "red velvet")
ADDONS = ("fruit", "text", "filling")
MAX_LAYERS = 3
MAX_TEXT_LENGTH = 40

BOX_SIZES = (4, 6, 12)
BOX_FLAVORS = ("chocolate chip", "red velvet", "vanilla", "oatmeal", "peanut butter")
MAX_BOX_FLAVORS = 2


@dataclass(frozen=True)
class CakeOptions:
    size: str = ""
    layers: int = 1
    flavor: str = ""
    addons: frozenset[str] = frozenset()
    text: str = ""
    shape: Shape | None = Shape.CIRCLE


@dataclass(frozen=True)
class BoxOptions:
    """Options for cookies and muffins, sold by the box."""

    box_size: int | None = None
    box_flavors: tuple[str, ...] = ()


ProductOptions = Union[CakeOptions, BoxOptions]


def default_options(product_type: ProductType) -> ProductOptions:
    if product_type == ProductType.CAKE:
        return CakeOptions()
    return BoxOptions()


@dataclass(frozen=True)
class ProductConfiguration:
    """One customer's selection for a single product.

    ``price`` is derived — never set it by hand, use
    ``with_recomputed_price()`` from the pricing service instead.
    """

    product_type: ProductType
    options: ProductOptions
    delivery: DeliveryDetails = field(default_factory=DeliveryDetails)
    price: int = 0

    @staticmethod
    def default() -> ProductConfiguration:
        """The configuration a new checkout session starts with."""
        return ProductConfiguration(
            product_type=ProductType.CAKE,
            options=CakeOptions(),
        )

    @property
    def cake(self) -> CakeOptions | None:
        return self.options if isinstance(self.options, CakeOptions) else None

    @property
    def box(self) -> BoxOptions | None:
        return self.options if isinstance(self.options, BoxOptions) else None

    def with_options(self, options: ProductOptions) -> ProductConfiguration:
        return replace(self, options=options)

    def describe(self) -> list[tuple[str, str]]:
        """Label/value pairs for summaries and confirmation emails."""
        lines = [("Product", self.product_type.value.capitalize())]
        cake, box = self.cake, self.box
        if cake is not None:
            lines.append(("Shape", cake.shape.value.capitalize() if cake.shape else "-"))
            lines.append(("Size", f'{cake.size}"' if cake.size else "-"))
            lines.append(("Layers", str(cake.layers)))
            lines.append(("Flavor", cake.flavor or "-"))
            if cake.addons:
                lines.append(("Add-ons", ", ".join(sorted(cake.addons))))
            if cake.text:
                lines.append(("Text", cake.text))
        elif box is not None:
            lines.append(("Box", f"{box.box_size} pieces" if box.box_size else "-"))
            lines.append(("Flavors", ", ".join(box.box_flavors) or "-"))
        return lines
