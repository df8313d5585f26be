"""
State Translation Service

Architectural Intent:
- Collapses Remedy's seven incident statuses onto the host's three ticket states
- Pushes a host state change back onto a modify request

Design Decisions:
- Resolved counts as closed: the host cannot tell the two apart
- Anything not closed or cancelled is open, including a missing status
- Status reasons and resolution text come from configuration
"""

import logging
from dataclasses import dataclass
from typing import Optional

from remedy_ticketer.domain.entities.ticket import TicketState
from remedy_ticketer.domain.value_objects.incident import (
    IncidentStatus,
    SetInputMap,
    StatusReason,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatusReasons:
    """Configured status reasons applied on state transitions."""
    reopen: Optional[str] = None
    resolved: Optional[str] = None
    cancelled: Optional[str] = None
    resolution: Optional[str] = None


def remote_to_local_state(status: Optional[IncidentStatus]) -> TicketState:
    if status in (IncidentStatus.CLOSED, IncidentStatus.RESOLVED):
        return TicketState.CLOSED
    if status == IncidentStatus.CANCELLED:
        return TicketState.CANCELLED
    return TicketState.OPEN


def apply_local_state(
    set_input: SetInputMap, state: TicketState, reasons: StatusReasons
) -> SetInputMap:
    """Set status, status reason and (for CLOSED) resolution from a host state.

    Raises ValueError if a configured reason is not a known StatusReason.
    """
    logger.debug("getting remedy state from host state: %s", state)

    if state == TicketState.OPEN:
        set_input.status = IncidentStatus.PENDING
        set_input.status_reason = StatusReason.from_value(reasons.reopen)
    elif state == TicketState.CANCELLED:
        set_input.status = IncidentStatus.CANCELLED
        set_input.status_reason = StatusReason.from_value(reasons.cancelled)
    elif state == TicketState.CLOSED:
        set_input.status = IncidentStatus.RESOLVED
        set_input.status_reason = StatusReason.from_value(reasons.resolved)
        set_input.resolution = reasons.resolution
    else:
        logger.debug("No valid host state on ticket, skipping status change")

    logger.debug("host state was %s, remedy status set to %s", state, set_input.status)
    return set_input
