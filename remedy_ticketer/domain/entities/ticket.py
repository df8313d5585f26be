"""
Ticket Entity

Architectural Intent:
- Immutable representation of the host's generic trouble ticket
- The only local model the Remedy mapping reads from or produces
- Free-form attributes carry per-alarm hints (node label, urgency, group)

Design Decisions:
- Frozen dataclass; changes produce new instances via with_id()
- State is a three-value lifecycle, richer remote states collapse onto it
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Mapping, Optional

ATTRIBUTE_NODE_LABEL = "nodelabel"
ATTRIBUTE_USER_COMMENT = "remedy.user.comment"
ATTRIBUTE_URGENCY = "remedy.urgency"
ATTRIBUTE_ASSIGNED_GROUP = "remedy.assignedgroup"


class TicketState(Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class Ticket:
    """
    Value Object for a host-side trouble ticket.

    summary carries the alarm log message, details the alarm description and
    user the owner who opened the ticket.
    """
    id: Optional[str] = None
    summary: Optional[str] = None
    details: Optional[str] = None
    state: TicketState = TicketState.OPEN
    user: Optional[str] = None
    attributes: Mapping[str, str] = field(default_factory=dict)
    alarm_id: Optional[int] = None
    node_id: Optional[int] = None
    ip_address: Optional[str] = None

    def attribute(self, key: str) -> Optional[str]:
        return self.attributes.get(key)

    def with_id(self, ticket_id: str) -> "Ticket":
        return replace(self, id=ticket_id)
