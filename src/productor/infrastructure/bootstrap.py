"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from productor.infrastructure.adapters.local_payment_gateway import (
    LocalPaymentGateway,
)
from productor.infrastructure.adapters.outbox_notifier import OutboxOrderNotifier
from productor.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from productor.infrastructure.persistence.json_session_repository import (
    JsonSessionRepository,
)
from productor.infrastructure.settings import load_settings


def session_repository() -> JsonSessionRepository:
    return JsonSessionRepository(load_settings().data_dir / "session.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(load_settings().data_dir / "orders.json")


def payment_gateway() -> LocalPaymentGateway:
    return LocalPaymentGateway()


def order_notifier() -> OutboxOrderNotifier:
    settings = load_settings()
    return OutboxOrderNotifier(settings.outbox_dir, business_email=settings.business_email)
