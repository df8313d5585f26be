"""
Remedy SOAP Adapter

Architectural Intent:
- Implements IncidentServicePort and IncidentCreatePort over zeep
- Translates between the domain request/response shapes and zeep's
  keyword arguments and CompoundValue results
- AuthenticationInfo travels as a SOAP header on every call

Design Decisions:
- zeep unwraps single-child responses, so a submit may return the bare
  incident number instead of a CreateOutputMap
- SOAP faults and transport errors propagate; the plugin wraps them
"""

import logging
from typing import Optional

from zeep import Client
from zeep.helpers import serialize_object

from remedy_ticketer.domain.value_objects.incident import (
    AuthenticationInfo,
    CreateInputMap,
    CreateOutputMap,
    GetInputMap,
    GetOutputMap,
    SetInputMap,
)
from remedy_ticketer.infrastructure.soap.client_factory import (
    CREATE_NAMESPACE,
    CREATE_SERVICE,
    CREATE_WSDL,
    INCIDENT_NAMESPACE,
    INCIDENT_SERVICE,
    INCIDENT_WSDL,
    create_client,
    create_service_proxy,
)

logger = logging.getLogger(__name__)


class _ZeepPort:
    def __init__(self, client: Client, service, namespace: str) -> None:
        self.client = client
        self._service = service
        self._auth_element = client.get_element(f"{{{namespace}}}AuthenticationInfo")

    def _headers(self, auth: AuthenticationInfo) -> list:
        return [self._auth_element(**auth.to_soap())]


class ZeepIncidentPort(_ZeepPort):
    """HPD_IncidentInterface_WS query/modify port."""

    def __init__(self, client: Client, service) -> None:
        super().__init__(client, service, INCIDENT_NAMESPACE)

    def query(
        self, get_input: GetInputMap, auth: AuthenticationInfo
    ) -> Optional[GetOutputMap]:
        result = self._service.HelpDesk_Query_Service(
            **get_input.to_soap(), _soapheaders=self._headers(auth)
        )
        if result is None:
            return None
        return GetOutputMap.from_soap(serialize_object(result, dict))

    def modify(self, set_input: SetInputMap, auth: AuthenticationInfo) -> None:
        self._service.HelpDesk_Modify_Service(
            **set_input.to_soap(), _soapheaders=self._headers(auth)
        )


class ZeepIncidentCreatePort(_ZeepPort):
    """HPD_IncidentInterface_Create_WS submit port."""

    def __init__(self, client: Client, service) -> None:
        super().__init__(client, service, CREATE_NAMESPACE)

    def submit(
        self, auth: AuthenticationInfo, create_input: CreateInputMap
    ) -> CreateOutputMap:
        result = self._service.HelpDesk_Submit_Service(
            **create_input.to_soap(), _soapheaders=self._headers(auth)
        )
        if result is None:
            return CreateOutputMap()
        if isinstance(result, str):
            return CreateOutputMap(incident_number=result)
        return CreateOutputMap.from_soap(serialize_object(result, dict))


def create_incident_port(
    endpoint: Optional[str],
    port_name: Optional[str],
    strict_ssl: bool = True,
    timeout: int = 30,
) -> ZeepIncidentPort:
    client = create_client(INCIDENT_WSDL, strict_ssl=strict_ssl, timeout=timeout)
    service = create_service_proxy(client, INCIDENT_SERVICE, port_name, endpoint)
    return ZeepIncidentPort(client, service)


def create_incident_create_port(
    endpoint: Optional[str],
    port_name: Optional[str],
    strict_ssl: bool = True,
    timeout: int = 30,
) -> ZeepIncidentCreatePort:
    client = create_client(CREATE_WSDL, strict_ssl=strict_ssl, timeout=timeout)
    service = create_service_proxy(client, CREATE_SERVICE, port_name, endpoint)
    return ZeepIncidentCreatePort(client, service)
