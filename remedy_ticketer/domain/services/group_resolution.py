"""
Target Group Resolution

Architectural Intent:
- Picks the Remedy assignment (group, support company, support organization)
  for a new incident
- A ticket may name a target group through its remedy.assignedgroup
  attribute; only groups listed in configuration are honoured

Design Decisions:
- Per-group values fall back to the base value key by key
- An unknown or missing group uses the base values for all three
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from remedy_ticketer.domain.entities.ticket import ATTRIBUTE_ASSIGNED_GROUP, Ticket


class AssignmentSource(Protocol):
    """Configuration lookups needed to resolve an assignment."""

    def get_target_groups(self) -> list[str]: ...

    def get_assigned_group(self, target_group: Optional[str] = None) -> Optional[str]: ...

    def get_assigned_support_company(
        self, target_group: Optional[str] = None
    ) -> Optional[str]: ...

    def get_assigned_support_organization(
        self, target_group: Optional[str] = None
    ) -> Optional[str]: ...


@dataclass(frozen=True)
class Assignment:
    group: Optional[str]
    support_company: Optional[str]
    support_organization: Optional[str]


def find_target_group(ticket: Ticket, source: AssignmentSource) -> Optional[str]:
    """Return the ticket's requested group if it is a configured target group."""
    requested = ticket.attribute(ATTRIBUTE_ASSIGNED_GROUP)
    if requested is None:
        return None
    for group in source.get_target_groups():
        if group == requested:
            return group
    return None


def resolve_assignment(ticket: Ticket, source: AssignmentSource) -> Assignment:
    group = find_target_group(ticket, source)
    return Assignment(
        group=source.get_assigned_group(group),
        support_company=source.get_assigned_support_company(group),
        support_organization=source.get_assigned_support_organization(group),
    )
