"""ConfigurationSession — applies selection rules and keeps price current.

Every mutation goes through ``_apply``, which runs the rule and then
recomputes the price before anyone can observe the result.  There is no
moment at which the configuration and its price disagree.
"""

from __future__ import annotations

from typing import Any, Callable

from productor.domain.exceptions import ValidationError
from productor.domain.model.configuration import (
    ProductConfiguration,
    ProductType,
    Shape,
)
from productor.domain.model.value_objects import DeliveryDetails
from productor.domain.service import selection_rules
from productor.domain.service.pricing import can_proceed, with_recomputed_price


class ConfigurationSession:

    def __init__(self, configuration: ProductConfiguration | None = None) -> None:
        self._config = with_recomputed_price(
            configuration or ProductConfiguration.default()
        )

    @property
    def configuration(self) -> ProductConfiguration:
        return self._config

    @property
    def price(self) -> int:
        return self._config.price

    @property
    def can_proceed(self) -> bool:
        return can_proceed(self._config)

    def require_can_proceed(self) -> None:
        """Gate for the next checkout step."""
        if not self.can_proceed:
            raise ValidationError(
                f"The {self._config.product_type.value} configuration is incomplete"
            )

    # --- Actions --------------------------------------------------------------

    def change_product_type(self, product_type: ProductType) -> None:
        self._apply(selection_rules.change_product_type, product_type)

    def set_size(self, size: str) -> None:
        self._apply(selection_rules.set_size, size)

    def set_layers(self, layers: int) -> None:
        self._apply(selection_rules.set_layers, layers)

    def set_flavor(self, flavor: str) -> None:
        self._apply(selection_rules.set_flavor, flavor)

    def toggle_addon(self, addon: str) -> None:
        self._apply(selection_rules.toggle_addon, addon)

    def set_text(self, text: str) -> None:
        self._apply(selection_rules.set_text, text)

    def set_shape(self, shape: Shape) -> None:
        self._apply(selection_rules.set_shape, shape)

    def set_box_size(self, box_size: int) -> None:
        self._apply(selection_rules.set_box_size, box_size)

    def toggle_box_flavor(self, flavor: str) -> None:
        self._apply(selection_rules.toggle_box_flavor, flavor)

    def set_delivery_details(self, delivery: DeliveryDetails) -> None:
        self._apply(selection_rules.set_delivery_details, delivery)

    def perform(self, action: str, value: Any) -> None:
        """Dispatch a named action, e.g. ``perform("size", "10")``."""
        method = _ACTIONS.get(action)
        if method is None:
            raise ValidationError(f"Unknown configuration action: '{action}'")
        method(self, value)

    # --- Internal helpers -----------------------------------------------------

    def _apply(
        self,
        rule: Callable[[ProductConfiguration, Any], ProductConfiguration],
        value: Any,
    ) -> None:
        self._config = with_recomputed_price(rule(self._config, value))


_ACTIONS: dict[str, Callable[[ConfigurationSession, Any], None]] = {
    "product-type": ConfigurationSession.change_product_type,
    "size": ConfigurationSession.set_size,
    "layers": ConfigurationSession.set_layers,
    "flavor": ConfigurationSession.set_flavor,
    "addon": ConfigurationSession.toggle_addon,
    "text": ConfigurationSession.set_text,
    "shape": ConfigurationSession.set_shape,
    "box-size": ConfigurationSession.set_box_size,
    "box-flavor": ConfigurationSession.toggle_box_flavor,
}

ACTION_NAMES = tuple(_ACTIONS)
