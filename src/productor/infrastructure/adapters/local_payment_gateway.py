"""Local payment gateway.

Approves every well-formed charge and issues a ``PAY-`` reference.  Used
for development and in-store checkouts where payment is taken at the till;
a hosted gateway plugs in behind the same PaymentGateway port.
"""

from __future__ import annotations

import logging
from uuid import uuid4

from productor.domain.exceptions import PaymentError
from productor.domain.port.payment_gateway import (
    PaymentGateway,
    PaymentReceipt,
    PaymentRequest,
)

logger = logging.getLogger(__name__)


class LocalPaymentGateway(PaymentGateway):

    def __init__(self, currency: str = "NGN") -> None:
        self._currency = currency

    def charge(self, request: PaymentRequest) -> PaymentReceipt:
        if request.amount_minor <= 0:
            raise PaymentError("Payment amount must be greater than zero")
        if request.currency != self._currency:
            raise PaymentError(
                f"Unsupported currency {request.currency}, expected {self._currency}"
            )
        if not request.customer_email:
            raise PaymentError("A customer email is required for the receipt")

        reference = f"PAY-{uuid4().hex[:12].upper()}"
        logger.info(
            "Charged %d kobo to %s for %s (ref %s)",
            request.amount_minor,
            request.customer_email,
            request.order_reference,
            reference,
        )
        return PaymentReceipt(reference=reference, amount_minor=request.amount_minor)
