"""Application service: Complete Order use case.

Marks a confirmed order as delivered.
"""

from __future__ import annotations

from productor.domain.exceptions import EntityNotFoundError
from productor.domain.repository.order_repository import OrderRepository


class CompleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.complete()
        self._order_repo.save(order)
