"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from productor.domain.model.configuration import ProductConfiguration
from productor.domain.model.order import Order
from productor.domain.model.value_objects import Money
from productor.domain.service.pricing import can_proceed


@dataclass(frozen=True)
class DeliveryDTO:
    name: str
    address: str
    phone: str
    state: str


@dataclass(frozen=True)
class ConfigurationDTO:
    """Output: the current selection, its price and whether it is complete."""

    product_type: str
    details: list[tuple[str, str]]
    price: str  # formatted, e.g. "₦184"
    price_amount: int
    can_proceed: bool
    delivery: DeliveryDTO


@dataclass(frozen=True)
class OrderDTO:
    """Output: a placed order as displayed to the user."""

    id: int
    reference: str
    customer_email: str
    status: str
    details: list[tuple[str, str]]
    delivery: DeliveryDTO
    total: str
    payment_reference: str | None
    created_at: str


# --- Mapping ------------------------------------------------------------------


def to_configuration_dto(config: ProductConfiguration) -> ConfigurationDTO:
    return ConfigurationDTO(
        product_type=config.product_type.value,
        details=config.describe(),
        price=str(Money(config.price)),
        price_amount=config.price,
        can_proceed=can_proceed(config),
        delivery=_to_delivery_dto(config),
    )


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        reference=order.reference,
        customer_email=order.customer_email,
        status=order.status.value,
        details=order.configuration.describe(),
        delivery=_to_delivery_dto(order.configuration),
        total=str(order.total),
        payment_reference=order.payment_reference,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def _to_delivery_dto(config: ProductConfiguration) -> DeliveryDTO:
    d = config.delivery
    return DeliveryDTO(name=d.name, address=d.address, phone=d.phone, state=d.state)
