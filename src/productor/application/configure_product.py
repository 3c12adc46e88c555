"""Application service: Configure Product use case.

Loads the checkout session, applies one customer action through a
ConfigurationSession (which keeps the price current), and saves it back.
"""

from __future__ import annotations

import logging
from typing import Any

from productor.application.configuration_session import ConfigurationSession
from productor.application.dto import ConfigurationDTO, to_configuration_dto
from productor.domain.repository.session_repository import SessionRepository

logger = logging.getLogger(__name__)


class ConfigureProductHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self, action: str, value: Any) -> ConfigurationDTO:
        session = self._session_repo.load()
        config_session = ConfigurationSession(session.configuration)

        before = config_session.configuration
        config_session.perform(action, value)
        if config_session.configuration == before:
            logger.info("Action %s=%r left the configuration unchanged", action, value)

        session.configuration = config_session.configuration
        self._session_repo.save(session)
        return to_configuration_dto(session.configuration)


class ShowConfigurationHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self) -> ConfigurationDTO:
        session = self._session_repo.load()
        return to_configuration_dto(ConfigurationSession(session.configuration).configuration)
