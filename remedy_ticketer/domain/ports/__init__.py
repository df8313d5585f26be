"""
Domain Ports Package

Architectural Intent:
- Contains port interfaces (abstract contracts) for external dependencies
- Ports define what the domain needs, adapters implement how
- Follows Hexagonal Architecture principles
"""

from remedy_ticketer.domain.ports.ticketing_port import TicketingPort
from remedy_ticketer.domain.ports.incident_service_port import (
    IncidentCreatePort,
    IncidentServicePort,
)
from remedy_ticketer.domain.ports.config_store_port import ConfigStorePort

__all__ = [
    "TicketingPort",
    "IncidentServicePort",
    "IncidentCreatePort",
    "ConfigStorePort",
]
