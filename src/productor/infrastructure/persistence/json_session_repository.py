"""JSON-file-backed implementation of SessionRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from productor.domain.model.session import CheckoutSession
from productor.domain.repository.session_repository import SessionRepository
from productor.infrastructure.persistence.flat_record import from_flat, to_flat

logger = logging.getLogger(__name__)


class JsonSessionRepository(SessionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- SessionRepository interface ------------------------------------------

    def load(self) -> CheckoutSession:
        if not self._file_path.exists():
            return CheckoutSession()
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning("Session file %s is corrupt; starting a new session", self._file_path)
            return CheckoutSession()
        if not isinstance(raw, dict):
            logger.warning("Session file %s is corrupt; starting a new session", self._file_path)
            return CheckoutSession()
        return CheckoutSession(
            configuration=from_flat(raw.get("config") or {}),
            customer_email=raw.get("customer_email"),
        )

    def save(self, session: CheckoutSession) -> None:
        raw = {
            "customer_email": session.customer_email,
            "config": to_flat(session.configuration),
        }
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")
