"""
Ticketing Port

Architectural Intent:
- Contract the host network-management system calls to manage tickets
- Hides which remote incident system backs the tickets

Design Decisions:
- Uses Protocol for structural typing (no inheritance needed)
- save_or_update decides between create and update from the ticket id
"""

from typing import Protocol, runtime_checkable

from remedy_ticketer.domain.entities.ticket import Ticket


@runtime_checkable
class TicketingPort(Protocol):
    """Port for host-side ticket operations."""

    def get(self, ticket_id: str) -> Ticket:
        """Fetch a ticket by its remote id."""
        ...

    def save_or_update(self, ticket: Ticket) -> str:
        """Create the ticket when it has no id, otherwise update it. Returns the id."""
        ...
