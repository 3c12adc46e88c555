"""Abstract repository for the checkout session.

There is a single session per store (one customer at a keyboard), so the
interface has no identifiers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from productor.domain.model.session import CheckoutSession


class SessionRepository(ABC):

    @abstractmethod
    def load(self) -> CheckoutSession:
        """Return the current session, or a fresh one if none exists."""

    @abstractmethod
    def save(self, session: CheckoutSession) -> None:
        """Persist the session."""
