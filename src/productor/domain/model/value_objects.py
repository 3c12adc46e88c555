"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from productor.domain.exceptions import ValidationError

NIGERIAN_STATES = (
    "Abia", "Adamawa", "Akwa Ibom", "Anambra", "Bauchi", "Bayelsa", "Benue",
    "Borno", "Cross River", "Delta", "Ebonyi", "Edo", "Ekiti", "Enugu", "FCT",
    "Gombe", "Imo", "Jigawa", "Kaduna", "Kano", "Katsina", "Kebbi", "Kogi",
    "Kwara", "Lagos", "Nasarawa", "Niger", "Ogun", "Ondo", "Osun", "Oyo",
    "Plateau", "Rivers", "Sokoto", "Taraba", "Yobe", "Zamfara",
)

_NON_DIGITS = re.compile(r"\D")


@dataclass(frozen=True)
class Money:
    """Whole-unit monetary amount.

    Prices are always rounded to whole naira before they reach this type,
    so the amount is an ``int``.  The payment gateway works in kobo; use
    ``minor_units`` for that.
    """

    amount: int
    currency: str = "NGN"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise ValidationError(
                f"Money amount must be an int, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    @property
    def minor_units(self) -> int:
        return self.amount * 100

    def __str__(self) -> str:
        return f"₦{self.amount:,}"


@dataclass(frozen=True)
class DeliveryDetails:
    """Where and to whom an order is delivered.

    The blank instance is a legal placeholder while the customer is still
    configuring a product.  Use ``DeliveryDetails.create()`` to build a
    checked instance at the delivery step.
    """

    name: str = ""
    address: str = ""
    phone: str = ""
    state: str = ""

    @staticmethod
    def create(name: str, address: str, phone: str, state: str) -> DeliveryDetails:
        """Validate and normalise delivery details entered by the customer."""
        name, address, phone, state = (
            (value or "").strip() for value in (name, address, phone, state)
        )
        if not (name and address and phone and state):
            raise ValidationError("All delivery fields are required")

        digits = _NON_DIGITS.sub("", phone)
        if not 10 <= len(digits) <= 15:
            raise ValidationError("Enter a valid phone number (10-15 digits)")

        matched = next(
            (s for s in NIGERIAN_STATES if s.lower() == state.lower()), None
        )
        if matched is None:
            raise ValidationError(f"Unknown delivery state: '{state}'")

        return DeliveryDetails(name=name, address=address, phone=phone, state=matched)

    @property
    def is_complete(self) -> bool:
        return all((self.name, self.address, self.phone, self.state))
