"""CheckoutSession — the state container that owns one configuration.

A session lives from "start customizing" until the order is placed or
the customer starts over.  It remembers who is signed in so the checkout
steps can require it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from productor.domain.model.configuration import ProductConfiguration


@dataclass
class CheckoutSession:

    configuration: ProductConfiguration = field(
        default_factory=ProductConfiguration.default
    )
    customer_email: str | None = None

    @property
    def is_signed_in(self) -> bool:
        return bool(self.customer_email)

    def reset_configuration(self) -> None:
        self.configuration = ProductConfiguration.default()
