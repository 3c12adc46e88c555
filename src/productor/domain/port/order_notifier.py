"""Order notification port (confirmation email to the customer and a
heads-up to the business)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from productor.domain.model.order import Order


class OrderNotifier(ABC):

    @abstractmethod
    def order_placed(self, order: Order) -> None:
        """Tell the customer and the business that *order* was placed."""
