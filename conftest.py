"""Global test configuration.

Shared fixtures for the Remedy property set used across test layers.
"""

import pytest

from remedy_ticketer.infrastructure.adapters.config_store_adapters import DictConfigStore
from remedy_ticketer.infrastructure.config import REMEDY_CONFIG_PID, RemedyConfigDao

REMEDY_PROPERTIES = {
    "remedy.username": "opennmstnn",
    "remedy.password": "TNNwsC4ll",
    "remedy.authentication": "ARSystem",
    "remedy.locale": "it_IT",
    "remedy.timezone": "CET",
    "remedy.endpoint": "http://localhost:12345",
    "remedy.portname": "HPD_IncidentInterface_WSPortTypeSoap",
    "remedy.createendpoint": "http://localhost:12346",
    "remedy.createportname": "HPD_IncidentInterface_Create_WSPortTypeSoap",
    "remedy.targetgroups": "TNnet:Tetranet",
    "remedy.assignedgroup.TNnet": "TNnet",
    "remedy.assignedgroup.Tetranet": "TNnet - Tetranet",
    "remedy.assignedsupportcompany.TNnet": "Trentino Network srl",
    "remedy.assignedsupportcompany.Tetranet": "Trentino Network srl",
    "remedy.assignedsupportorganization.TNnet": "Centro Gestione Rete",
    "remedy.assignedsupportorganization.Tetranet": "Centro Gestione Rete - Tetranet",
    "remedy.assignedgroup": "TNnet",
    "remedy.firstname": "Opennms",
    "remedy.lastname": "Tnn",
    "remedy.serviceCI": "Trentino Network Connettivita [C.TNNCN]",
    "remedy.serviceCIReconID": "RE00505688005e3s-nTg4KEI5gFSov",
    "remedy.assignedsupportcompany": "Trentino Network srl",
    "remedy.assignedsupportorganization": "Centro Gestione Rete",
    "remedy.categorizationtier1": "Incident",
    "remedy.categorizationtier2": "Generic",
    "remedy.categorizationtier3": "Non bloccante",
    "remedy.serviceType": "Infrastructure Event",
    "remedy.reportedSource": "Direct Input",
    "remedy.impact": "4-Minor/Localized",
    "remedy.urgency": "4-Low",
    "remedy.reason.reopen": "Pending Original Incident",
    "remedy.resolution": "Chiusura da OpenNMS Web Service",
    "remedy.reason.resolved": "Automated Resolution Reported",
    "remedy.reason.cancelled": "No longer a Causal CI",
}


@pytest.fixture
def remedy_properties():
    return dict(REMEDY_PROPERTIES)


@pytest.fixture
def config_store(remedy_properties):
    return DictConfigStore({REMEDY_CONFIG_PID: remedy_properties})


@pytest.fixture
def config_dao(config_store):
    return RemedyConfigDao(config_store)
