"""Payment gateway port.

The storefront never talks to a card processor directly; it hands the
gateway an amount in minor units (kobo) plus the customer's email and
gets a receipt back.  Declines surface as ``PaymentError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentRequest:
    amount_minor: int  # kobo
    currency: str
    customer_email: str
    order_reference: str


@dataclass(frozen=True)
class PaymentReceipt:
    reference: str
    amount_minor: int


class PaymentGateway(ABC):

    @abstractmethod
    def charge(self, request: PaymentRequest) -> PaymentReceipt:
        """Collect payment, raising PaymentError if it does not go through."""
