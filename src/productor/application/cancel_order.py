"""Application service: Cancel Order use case.

Refunds are handled manually through the payment provider's dashboard;
this only records the cancellation.
"""

from __future__ import annotations

import logging

from productor.domain.exceptions import EntityNotFoundError
from productor.domain.model.order import OrderStatus
from productor.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CancelOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        was_paid = order.status == OrderStatus.CONFIRMED
        order.cancel()
        self._order_repo.save(order)

        if was_paid:
            logger.warning(
                "Order %s cancelled after payment %s; refund required",
                order.reference,
                order.payment_reference,
            )
