"""Application services: Sign In / Sign Out.

Authentication itself belongs to the identity provider; the storefront
only records which customer is at the checkout.
"""

from __future__ import annotations

import logging

from productor.domain.exceptions import ValidationError
from productor.domain.repository.session_repository import SessionRepository

logger = logging.getLogger(__name__)


class SignInHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self, email: str) -> str:
        email = (email or "").strip().lower()
        local, _, domain = email.partition("@")
        if not local or not domain:
            raise ValidationError(f"Invalid email address: '{email}'")

        session = self._session_repo.load()
        session.customer_email = email
        self._session_repo.save(session)
        logger.info("Customer %s signed in", email)
        return email


class SignOutHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self) -> None:
        session = self._session_repo.load()
        session.customer_email = None
        self._session_repo.save(session)
