"""
Remedy Ticketer Plugin

Architectural Intent:
- Implements TicketingPort on top of the Remedy incident web services
- Reads go through HPD_IncidentInterface_WS, new incidents are submitted
  through HPD_IncidentInterface_Create_WS
- Only urgency and state are pushed on update; every other incident field
  is owned by Remedy operators once the incident exists

Design Decisions:
- Endpoints and port names are read once at construction
- Service ports are created lazily on first use and cached; read_port and
  create_port may be assigned directly to substitute other implementations
- Every failure of a remote exchange surfaces as RemedyTicketerError with the
  original error chained as its cause
"""

import logging
from datetime import datetime, UTC
from typing import Callable, Optional

from remedy_ticketer.domain.entities.ticket import Ticket
from remedy_ticketer.domain.ports.incident_service_port import (
    IncidentCreatePort,
    IncidentServicePort,
)
from remedy_ticketer.domain.services.field_mapping import (
    build_create_input,
    build_modify_input,
    resolve_urgency,
)
from remedy_ticketer.domain.services.state_translation import (
    apply_local_state,
    remote_to_local_state,
)
from remedy_ticketer.domain.value_objects.incident import (
    AuthenticationInfo,
    GetInputMap,
    IncidentStatus,
)
from remedy_ticketer.infrastructure.adapters.remedy_soap_adapter import (
    create_incident_create_port,
    create_incident_port,
)
from remedy_ticketer.infrastructure.config import RemedyConfigDao
from remedy_ticketer.infrastructure.logging import INCIDENT_NUMBER

logger = logging.getLogger(__name__)


class RemedyTicketerError(RuntimeError):
    """Raised when a ticket cannot be read from or written to Remedy."""


class RemedyTicketerPlugin:
    """Host ticketing plugin backed by BMC Remedy."""

    def __init__(
        self,
        config_dao: RemedyConfigDao,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._config = config_dao
        self._clock = clock
        self._endpoint = config_dao.get_end_point()
        self._port_name = config_dao.get_port_name()
        self._create_endpoint = config_dao.get_create_end_point()
        self._create_port_name = config_dao.get_create_port_name()
        self.read_port: Optional[IncidentServicePort] = None
        self.create_port: Optional[IncidentCreatePort] = None

    # TicketingPort

    def get(self, ticket_id: Optional[str]) -> Ticket:
        if ticket_id is None:
            logger.error("No Remedy ticketID available in host ticket")
            raise RemedyTicketerError("No Remedy ticketID available in host ticket")

        logger.debug(
            "get: search ticket with id: %s", ticket_id, extra={INCIDENT_NUMBER: ticket_id}
        )
        port = self._get_ticket_service_port()

        try:
            output = port.query(
                GetInputMap(incident_number=ticket_id), self._get_authentication_header()
            )
            if output is None or output.status is None or output.urgency is None:
                raise RemedyTicketerError(
                    f"Unable to retrieve ticket, or ticket ID '{ticket_id}' invalid."
                )

            tag = {INCIDENT_NUMBER: ticket_id}
            logger.info(
                "get: found ticket: %s status: %s", ticket_id, output.status.value, extra=tag
            )
            logger.info("get: found ticket: %s urgency: %s", ticket_id, output.urgency, extra=tag)

            return Ticket(
                id=ticket_id,
                summary=output.summary,
                details=output.notes,
                state=remote_to_local_state(output.status),
                user=output.assigned_group,
            )
        except Exception as e:
            raise RemedyTicketerError("Problem getting ticket") from e

    def save_or_update(self, ticket: Ticket) -> str:
        if ticket.id is None:
            return self._save(ticket)
        self._update(ticket)
        return ticket.id

    # Create / update

    def _save(self, ticket: Ticket) -> str:
        port = self._get_create_ticket_service_port()
        try:
            output = port.submit(
                self._get_authentication_header(), build_create_input(ticket, self._config)
            )
        except Exception as e:
            raise RemedyTicketerError("Problem saving ticket") from e

        logger.debug(
            "created new remedy ticket with reported incident number: %s",
            output.incident_number,
            extra={INCIDENT_NUMBER: output.incident_number},
        )
        return output.incident_number

    def _update(self, ticket: Ticket) -> None:
        port = self._get_ticket_service_port()
        ticket_id = ticket.id
        tag = {INCIDENT_NUMBER: ticket_id}

        try:
            auth = self._get_authentication_header()
            current = port.query(GetInputMap(incident_number=ticket_id), auth)
            if current is None:
                logger.error(
                    "update: Remedy: Cannot find incident with incident_number: %s",
                    ticket_id,
                    extra=tag,
                )
                return
            if current.status == IncidentStatus.CANCELLED:
                logger.info(
                    "update: Remedy: Ticket Cancelled. Skipping updating ticket "
                    "with incident_number: %s",
                    ticket_id,
                    extra=tag,
                )
                return
            if current.status == IncidentStatus.CLOSED:
                logger.info(
                    "update: Remedy: Ticket Closed. Skipping updating ticket "
                    "with incident_number: %s",
                    ticket_id,
                    extra=tag,
                )
                return

            set_input = build_modify_input(ticket, current, self._clock())

            logger.debug(
                "update: Remedy: found urgency: %s - for ticket with incident_number: %s",
                set_input.urgency,
                ticket_id,
                extra=tag,
            )
            set_input.urgency = resolve_urgency(ticket, self._config.get_urgency())

            remote_state = remote_to_local_state(set_input.status)
            logger.debug(
                "update: host state: %s, Remedy status: %s (%s) - incident_number: %s",
                ticket.state,
                set_input.status,
                remote_state,
                ticket_id,
                extra=tag,
            )
            if ticket.state != remote_state:
                set_input = apply_local_state(
                    set_input, ticket.state, self._config.get_status_reasons()
                )

            port.modify(set_input, auth)
        except Exception as e:
            raise RemedyTicketerError("Problem updating ticket") from e

    # Plumbing

    def _get_authentication_header(self) -> AuthenticationInfo:
        header = AuthenticationInfo(
            user_name=self._config.get_user_name(),
            password=self._config.get_password(),
        )
        authentication = self._config.get_authentication()
        if authentication is not None:
            header.authentication = authentication
        locale = self._config.get_locale()
        if locale:
            header.locale = locale
        time_zone = self._config.get_time_zone()
        if time_zone:
            header.time_zone = time_zone
        return header

    def _get_ticket_service_port(self) -> IncidentServicePort:
        if self.read_port is None:
            try:
                self.read_port = create_incident_port(
                    self._endpoint,
                    self._port_name,
                    strict_ssl=self._config.get_strict_ssl(),
                    timeout=self._config.get_timeout(),
                )
            except Exception as e:
                raise RemedyTicketerError(
                    f"Unable to retrieve port for port={self._port_name}, "
                    f"endpoint={self._endpoint}"
                ) from e
        return self.read_port

    def _get_create_ticket_service_port(self) -> IncidentCreatePort:
        if self.create_port is None:
            try:
                self.create_port = create_incident_create_port(
                    self._create_endpoint,
                    self._create_port_name,
                    strict_ssl=self._config.get_create_strict_ssl(),
                    timeout=self._config.get_timeout(),
                )
            except Exception as e:
                raise RemedyTicketerError(
                    f"Unable to retrieve port for port={self._create_port_name}, "
                    f"endpoint={self._create_endpoint}"
                ) from e
        return self.create_port
