"""Application service: Place Order use case.

Orchestrates the checkout: the session's configuration is finalized into
an Order, the payment gateway is charged, and only after a successful
charge is the order confirmed, persisted and announced.
"""

from __future__ import annotations

import logging

from productor.application.configuration_session import ConfigurationSession
from productor.application.dto import OrderDTO, to_order_dto
from productor.domain.exceptions import AuthenticationRequiredError
from productor.domain.model.order import Order
from productor.domain.port.order_notifier import OrderNotifier
from productor.domain.port.payment_gateway import PaymentGateway, PaymentRequest
from productor.domain.repository.order_repository import OrderRepository
from productor.domain.repository.session_repository import SessionRepository

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        session_repo: SessionRepository,
        order_repo: OrderRepository,
        payment_gateway: PaymentGateway,
        notifier: OrderNotifier,
    ) -> None:
        self._session_repo = session_repo
        self._order_repo = order_repo
        self._payment_gateway = payment_gateway
        self._notifier = notifier

    def handle(self) -> OrderDTO:
        """Place an order for the current selection.

        Steps:
        1. Require a signed-in customer and a complete selection.
        2. Let the Order aggregate validate the finalized configuration.
        3. Charge the gateway (amount in kobo).  A decline raises
           PaymentError and nothing is persisted.
        4. Confirm, persist, notify, and reset the session's selection.
        """
        session = self._session_repo.load()
        if not session.is_signed_in:
            raise AuthenticationRequiredError("Sign in to place an order")

        config_session = ConfigurationSession(session.configuration)
        config_session.require_can_proceed()

        order = Order.create(
            customer_email=session.customer_email,  # type: ignore[arg-type]
            configuration=config_session.configuration,
        )
        order.id = self._order_repo.next_id()

        receipt = self._payment_gateway.charge(
            PaymentRequest(
                amount_minor=order.total.minor_units,
                currency=order.total.currency,
                customer_email=order.customer_email,
                order_reference=order.reference,
            )
        )
        order.confirm(receipt.reference)
        self._order_repo.save(order)
        logger.info(
            "Order %s placed by %s for %s", order.reference, order.customer_email, order.total
        )

        try:
            self._notifier.order_placed(order)
        except Exception:
            # Order is already paid and saved.
            logger.exception("Failed to send notifications for order %s", order.reference)

        session.reset_configuration()
        self._session_repo.save(session)
        return to_order_dto(order)
