"""Outbox notifier — writes order emails to a directory instead of sending.

Each placed order produces two RFC 822 messages: a confirmation for the
customer and a new-order notice for the business.  A mail relay (or a
person) picks them up from the outbox.
"""

from __future__ import annotations

import logging
from email.message import EmailMessage
from pathlib import Path

from productor.domain.model.order import Order
from productor.domain.port.order_notifier import OrderNotifier

logger = logging.getLogger(__name__)


class OutboxOrderNotifier(OrderNotifier):

    def __init__(self, outbox_dir: Path, business_email: str) -> None:
        self._outbox_dir = outbox_dir
        self._business_email = business_email

    def order_placed(self, order: Order) -> None:
        self._write(
            self._compose(
                to=order.customer_email,
                subject=f"Order Confirmation {order.reference}",
                intro="Thank you for your order!",
                order=order,
            ),
            f"{order.reference}-customer.eml",
        )
        self._write(
            self._compose(
                to=self._business_email,
                subject=f"New order {order.reference}",
                intro=f"New order from {order.customer_email}.",
                order=order,
            ),
            f"{order.reference}-business.eml",
        )

    # --- Internal helpers -----------------------------------------------------

    def _compose(self, to: str, subject: str, intro: str, order: Order) -> EmailMessage:
        delivery = order.configuration.delivery
        lines = [intro, "", f"Order ID: {order.reference}", "", "Order details:"]
        lines += [f"  {label}: {value}" for label, value in order.configuration.describe()]
        lines += [
            f"  Total: {order.total}",
            "",
            "Delivery:",
            f"  {delivery.name}",
            f"  {delivery.address}",
            f"  {delivery.state}",
            f"  {delivery.phone}",
        ]

        message = EmailMessage()
        message["From"] = self._business_email
        message["To"] = to
        message["Subject"] = subject
        message.set_content("\n".join(lines) + "\n")
        return message

    def _write(self, message: EmailMessage, filename: str) -> None:
        self._outbox_dir.mkdir(parents=True, exist_ok=True)
        path = self._outbox_dir / filename
        path.write_bytes(message.as_bytes())
        logger.info("Queued '%s' for %s at %s", message["Subject"], message["To"], path)
