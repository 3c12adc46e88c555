"""Application service: Enter Delivery Details use case.

Only reachable once the product selection is complete; the details are
validated and stored on the session's configuration.
"""

from __future__ import annotations

from productor.application.configuration_session import ConfigurationSession
from productor.application.dto import ConfigurationDTO, to_configuration_dto
from productor.domain.exceptions import AuthenticationRequiredError
from productor.domain.model.value_objects import DeliveryDetails
from productor.domain.repository.session_repository import SessionRepository


class EnterDeliveryDetailsHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self, name: str, address: str, phone: str, state: str) -> ConfigurationDTO:
        session = self._session_repo.load()
        if not session.is_signed_in:
            raise AuthenticationRequiredError("Sign in before entering delivery details")

        config_session = ConfigurationSession(session.configuration)
        config_session.require_can_proceed()
        config_session.set_delivery_details(
            DeliveryDetails.create(name=name, address=address, phone=phone, state=state)
        )

        session.configuration = config_session.configuration
        self._session_repo.save(session)
        return to_configuration_dto(session.configuration)
