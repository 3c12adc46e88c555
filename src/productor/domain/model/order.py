"""Order aggregate.

An Order captures a finalized ProductConfiguration at checkout time.  The
configuration is frozen, so the price it carries is locked: later changes
to the price tables never affect orders already placed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from productor.domain.exceptions import ValidationError
from productor.domain.model.configuration import ProductConfiguration
from productor.domain.model.value_objects import Money
from productor.domain.service.pricing import can_proceed, compute_price


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer_email: str
    configuration: ProductConfiguration
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    payment_reference: str | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(customer_email: str, configuration: ProductConfiguration) -> Order:
        """Create a new pending order, enforcing all invariants."""
        if not customer_email or "@" not in customer_email:
            raise ValidationError("A customer email is required")

        if not can_proceed(configuration):
            raise ValidationError(
                f"The {configuration.product_type.value} configuration is incomplete"
            )

        if not configuration.delivery.is_complete:
            raise ValidationError("Delivery details are required")

        expected = compute_price(configuration)
        if configuration.price != expected:
            raise ValidationError(
                f"Price {configuration.price} is stale, expected {expected}"
            )
        if expected <= 0:
            raise ValidationError("Order total must be greater than zero")

        return Order(
            id=None,
            customer_email=customer_email.strip().lower(),
            configuration=configuration,
        )

    # --- State transitions ----------------------------------------------------

    def confirm(self, payment_reference: str) -> None:
        """Transition PENDING -> CONFIRMED once payment has gone through."""
        if self.status != OrderStatus.PENDING:
            raise ValidationError(
                f"Cannot confirm order — current status is {self.status.value}, "
                f"expected pending"
            )
        if not payment_reference:
            raise ValidationError("A payment reference is required to confirm")
        self.payment_reference = payment_reference
        self.status = OrderStatus.CONFIRMED

    def complete(self) -> None:
        """Transition CONFIRMED -> COMPLETED (delivered to the customer)."""
        if self.status != OrderStatus.CONFIRMED:
            raise ValidationError(
                f"Cannot complete order in {self.status.value} status"
            )
        self.status = OrderStatus.COMPLETED

    def cancel(self) -> None:
        if self.status == OrderStatus.CANCELLED:
            raise ValidationError("Order is already cancelled")
        if self.status == OrderStatus.COMPLETED:
            raise ValidationError("Cannot cancel order in completed status")
        self.status = OrderStatus.CANCELLED

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        return Money(self.configuration.price)

    @property
    def reference(self) -> str:
        """Human-facing order reference, also sent to the payment gateway."""
        if self.id is None:
            return f"ORD-{int(self.created_at.timestamp())}"
        return f"ORD-{self.id:06d}"
