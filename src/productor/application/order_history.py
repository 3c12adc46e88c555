"""Application service: Order History use case (query).

Lists the signed-in customer's orders, newest first.
"""

from __future__ import annotations

from productor.application.dto import OrderDTO, to_order_dto
from productor.domain.exceptions import AuthenticationRequiredError
from productor.domain.repository.order_repository import OrderRepository
from productor.domain.repository.session_repository import SessionRepository


class OrderHistoryHandler:

    def __init__(
        self,
        session_repo: SessionRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._session_repo = session_repo
        self._order_repo = order_repo

    def handle(self) -> list[OrderDTO]:
        session = self._session_repo.load()
        if not session.is_signed_in:
            raise AuthenticationRequiredError("Sign in to view your orders")
        orders = self._order_repo.list_by_customer(session.customer_email)  # type: ignore[arg-type]
        return [to_order_dto(o) for o in orders]
