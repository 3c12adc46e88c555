"""Application service: Start Over use case.

Discards the current selection (and any delivery details) but keeps the
customer signed in.
"""

from __future__ import annotations

from productor.application.dto import ConfigurationDTO, to_configuration_dto
from productor.domain.repository.session_repository import SessionRepository


class StartOverHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self) -> ConfigurationDTO:
        session = self._session_repo.load()
        session.reset_configuration()
        self._session_repo.save(session)
        return to_configuration_dto(session.configuration)
