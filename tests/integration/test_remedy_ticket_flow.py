"""Integration test: host ticket lifecycle through the real SOAP stack.

Plugin, field mapping and zeep serialization all run for real; only the
HTTP exchange with the Remedy mid-tier is replaced.
"""

from datetime import datetime, UTC
from unittest.mock import patch

import requests
from lxml import etree

from remedy_ticketer.composition_root import create_container
from remedy_ticketer.domain.entities.ticket import (
    ATTRIBUTE_ASSIGNED_GROUP,
    ATTRIBUTE_NODE_LABEL,
    ATTRIBUTE_USER_COMMENT,
    Ticket,
    TicketState,
)
from remedy_ticketer.infrastructure.adapters.remedy_soap_adapter import (
    create_incident_create_port,
    create_incident_port,
)

INCIDENT_NS = "urn:HPD_IncidentInterface_WS"
CREATE_NS = "urn:HPD_IncidentInterface_Create_WS"


def _response(namespace: str, body: str) -> requests.Response:
    response = requests.Response()
    response.status_code = 200
    response.headers["Content-Type"] = "text/xml; charset=utf-8"
    response._content = (
        '<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/"'
        f' xmlns:ns0="{namespace}"><soapenv:Body>{body}</soapenv:Body></soapenv:Envelope>'
    ).encode("utf-8")
    return response


def _incident(status: str) -> requests.Response:
    return _response(
        INCIDENT_NS,
        "<ns0:HelpDesk_Query_ServiceResponse>"
        "<ns0:Assigned_Group>TNnet - Tetranet</ns0:Assigned_Group>"
        "<ns0:Company>Trentino Network srl</ns0:Company>"
        "<ns0:Summary>router-1: OpenNMS: Node down</ns0:Summary>"
        "<ns0:Notes>OpenNMS generated ticket by user: admin</ns0:Notes>"
        "<ns0:Reported_Source>Direct Input</ns0:Reported_Source>"
        "<ns0:Service_Type>Infrastructure Event</ns0:Service_Type>"
        f"<ns0:Status>{status}</ns0:Status>"
        "<ns0:Urgency>4-Low</ns0:Urgency>"
        "</ns0:HelpDesk_Query_ServiceResponse>",
    )


def _text(envelope, name: str, namespace: str = INCIDENT_NS):
    element = envelope.find(f".//{{{namespace}}}{name}")
    return None if element is None else element.text


class TestRemedyTicketFlow:
    def test_create_then_close(self, config_store):
        container = create_container(config_store=config_store)
        plugin = container.plugin
        plugin._clock = lambda: datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
        plugin.read_port = create_incident_port(
            "http://localhost:12345", "HPD_IncidentInterface_WSPortTypeSoap"
        )
        plugin.create_port = create_incident_create_port(
            "http://localhost:12346", "HPD_IncidentInterface_Create_WSPortTypeSoap"
        )

        ticket = Ticket(
            summary="Node down",
            details="Node router-1 is down",
            user="admin",
            attributes={
                ATTRIBUTE_NODE_LABEL: "router-1",
                ATTRIBUTE_USER_COMMENT: "please check",
                ATTRIBUTE_ASSIGNED_GROUP: "Tetranet",
            },
        )

        created = _response(
            CREATE_NS,
            "<ns0:HelpDesk_Submit_ServiceResponse>"
            "<ns0:Incident_Number>INC000000000101</ns0:Incident_Number>"
            "</ns0:HelpDesk_Submit_ServiceResponse>",
        )
        with patch.object(
            plugin.create_port.client.transport, "post_xml", return_value=created
        ) as submit:
            incident_number = plugin.save_or_update(ticket)

        assert incident_number == "INC000000000101"
        envelope = submit.call_args[0][1]
        assert _text(envelope, "Summary", CREATE_NS) == "router-1: OpenNMS: Node down"
        assert _text(envelope, "Assigned_Group", CREATE_NS) == "TNnet - Tetranet"
        assert _text(envelope, "Assigned_Support_Organization", CREATE_NS) == (
            "Centro Gestione Rete - Tetranet"
        )
        assert _text(envelope, "Notes", CREATE_NS) == (
            "OpenNMS generated ticket by user: admin\n\n"
            "OpenNMS user comment: please check\n\n"
            "OpenNMS logmsg: Node down\n\n"
            "OpenNMS descr: Node router-1 is down"
        )
        assert _text(envelope, "userName", CREATE_NS) == "opennmstnn"

        transport = plugin.read_port.client.transport
        with patch.object(
            transport,
            "post_xml",
            side_effect=[
                _incident("In Progress"),
                _response(INCIDENT_NS, "<ns0:HelpDesk_Modify_ServiceResponse/>"),
            ],
        ) as exchange:
            plugin.save_or_update(Ticket(id=incident_number, state=TicketState.CLOSED))

        assert exchange.call_count == 2
        modify = exchange.call_args_list[1][0][1]
        assert _text(modify, "Incident_Number") == "INC000000000101"
        assert _text(modify, "Status") == "Resolved"
        assert _text(modify, "Status_Reason") == "Automated Resolution Reported"
        assert _text(modify, "Resolution") == "Chiusura da OpenNMS Web Service"
        assert _text(modify, "Company") == "Trentino Network srl"
        assert _text(modify, "Action") == "MODIFY"
        assert b"2024-05-01T12:00:00" in etree.tostring(modify)

    def test_get_closed_incident(self, config_store):
        plugin = create_container(config_store=config_store).plugin
        plugin.read_port = create_incident_port("http://localhost:12345", None)

        with patch.object(
            plugin.read_port.client.transport, "post_xml", return_value=_incident("Closed")
        ):
            ticket = plugin.get("INC000000000101")

        assert ticket.state is TicketState.CLOSED
        assert ticket.user == "TNnet - Tetranet"
        assert ticket.summary == "router-1: OpenNMS: Node down"
