"""
SOAP Client Factory

Architectural Intent:
- Builds zeep service proxies for the bundled Remedy WSDLs
- The WSDL's own address is a placeholder; the configured endpoint wins
- TLS verification can be switched off for self-signed Remedy mid-tiers

Design Decisions:
- One requests.Session per proxy carries the TLS settings
- The port is chosen by name so installations exposing several ports work
"""

import logging
from pathlib import Path
from typing import Optional

import requests
import urllib3
from zeep import Client, Settings
from zeep.transports import Transport

logger = logging.getLogger(__name__)

WSDL_DIR = Path(__file__).parent / "wsdl"

INCIDENT_WSDL = WSDL_DIR / "HPD_IncidentInterface_WS.wsdl"
INCIDENT_NAMESPACE = "urn:HPD_IncidentInterface_WS"
INCIDENT_SERVICE = "HPD_IncidentInterface_WSService"
INCIDENT_PORT = "HPD_IncidentInterface_WSPortTypeSoap"

CREATE_WSDL = WSDL_DIR / "HPD_IncidentInterface_Create_WS.wsdl"
CREATE_NAMESPACE = "urn:HPD_IncidentInterface_Create_WS"
CREATE_SERVICE = "HPD_IncidentInterface_Create_WSService"
CREATE_PORT = "HPD_IncidentInterface_Create_WSPortTypeSoap"


def create_session(strict_ssl: bool = True) -> requests.Session:
    session = requests.Session()
    if not strict_ssl:
        logger.debug("Disabling strict SSL checking.")
        # accept any certificate and host name
        session.verify = False
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
    return session


def create_client(
    wsdl: Path, strict_ssl: bool = True, timeout: int = 30
) -> Client:
    transport = Transport(
        session=create_session(strict_ssl),
        timeout=timeout,
        operation_timeout=timeout,
    )
    return Client(str(wsdl), transport=transport, settings=Settings(strict=False))


def create_service_proxy(
    client: Client,
    service_name: str,
    port_name: Optional[str],
    endpoint: Optional[str],
):
    """Bind the named port of a WSDL service to an endpoint address.

    Raises ValueError if the service or port is not in the WSDL.
    """
    try:
        service = client.wsdl.services[service_name]
    except KeyError:
        raise ValueError(f"Unknown service {service_name!r}") from None

    name = port_name or next(iter(service.ports))
    try:
        port = service.ports[name]
    except KeyError:
        raise ValueError(
            f"Unknown port {name!r} for service {service_name!r}, "
            f"available: {', '.join(service.ports)}"
        ) from None

    address = endpoint or port.binding_options["address"]
    logger.debug("Binding %s/%s to %s", service_name, name, address)
    return client.create_service(port.binding.name.text, address)
