"""
Incident Service Ports

Architectural Intent:
- Port interfaces for the two Remedy web services
- HPD_IncidentInterface_WS queries and modifies incidents
- HPD_IncidentInterface_Create_WS submits new incidents
- Adapters wrap the generated SOAP client, tests substitute mocks
"""

from typing import Optional, Protocol, runtime_checkable

from remedy_ticketer.domain.value_objects.incident import (
    AuthenticationInfo,
    CreateInputMap,
    CreateOutputMap,
    GetInputMap,
    GetOutputMap,
    SetInputMap,
)


@runtime_checkable
class IncidentServicePort(Protocol):
    """Query and modify operations on existing incidents."""

    def query(
        self, get_input: GetInputMap, auth: AuthenticationInfo
    ) -> Optional[GetOutputMap]:
        """HelpDesk_Query_Service. Returns None when nothing came back."""
        ...

    def modify(self, set_input: SetInputMap, auth: AuthenticationInfo) -> None:
        """HelpDesk_Modify_Service."""
        ...


@runtime_checkable
class IncidentCreatePort(Protocol):
    """Submission of new incidents."""

    def submit(
        self, auth: AuthenticationInfo, create_input: CreateInputMap
    ) -> CreateOutputMap:
        """HelpDesk_Submit_Service."""
        ...
