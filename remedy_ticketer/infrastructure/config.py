"""
Configuration Module

Architectural Intent:
- Typed access to the Remedy plugin's flat property set
- Properties live under one persistent id, every key prefixed "remedy."
- Per-target-group keys ("remedy.assignedgroup.<group>") override base keys

Design Decisions:
- The store is read on every lookup, nothing is cached, so live changes apply
- Absent strings are None, absent booleans are False
- Store failures (I/O, malformed or undecodable files) surface as
  ConfigRetrievalError
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from remedy_ticketer.domain.ports.config_store_port import ConfigStorePort
from remedy_ticketer.domain.services.state_translation import StatusReasons

logger = logging.getLogger(__name__)

REMEDY_CONFIG_PID = "org.opennms.plugins.opa.ticketing.remedy"
DEFAULT_TIMEOUT_SECONDS = 30

KNOWN_KEYS = (
    "remedy.username",
    "remedy.password",
    "remedy.authentication",
    "remedy.locale",
    "remedy.timezone",
    "remedy.endpoint",
    "remedy.endpoint.strict-ssl",
    "remedy.portname",
    "remedy.createendpoint",
    "remedy.createendpoint.strict-ssl",
    "remedy.createportname",
    "remedy.targetgroups",
    "remedy.assignedgroup",
    "remedy.firstname",
    "remedy.lastname",
    "remedy.serviceCI",
    "remedy.serviceCIReconID",
    "remedy.assignedsupportcompany",
    "remedy.assignedsupportorganization",
    "remedy.categorizationtier1",
    "remedy.categorizationtier2",
    "remedy.categorizationtier3",
    "remedy.serviceType",
    "remedy.reportedSource",
    "remedy.impact",
    "remedy.urgency",
    "remedy.resolution",
    "remedy.reason.reopen",
    "remedy.reason.resolved",
    "remedy.reason.cancelled",
    "remedy.timeout",
)


class ConfigRetrievalError(Exception):
    """Raised when the plugin configuration cannot be read or interpreted."""


class RemedyConfigDao:
    def __init__(self, store: ConfigStorePort, pid: str = REMEDY_CONFIG_PID) -> None:
        if store is None:
            raise ValueError("config store is required")
        self._store = store
        self._pid = pid

    def get_properties(self) -> Mapping[str, Any]:
        try:
            props = self._store.get_properties(self._pid)
        except (OSError, ValueError) as e:
            logger.error("Unable to get configuration from %s.cfg", self._pid, exc_info=True)
            raise ConfigRetrievalError(str(e)) from e
        return props if props is not None else {}

    def get_string_property(self, key: str) -> Optional[str]:
        value = self.get_properties().get(key)
        return None if value is None else str(value)

    def get_boolean_property(self, key: str) -> bool:
        value = self.get_properties().get(key)
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() == "true"
        raise ConfigRetrievalError(f"Configuration value {value!r} was of an unknown type")

    def _with_group_override(self, key: str, target_group: Optional[str]) -> Optional[str]:
        if target_group is not None:
            value = self.get_string_property(f"{key}.{target_group}")
            if value is not None:
                return value
        return self.get_string_property(key)

    # Authentication

    def get_user_name(self) -> Optional[str]:
        return self.get_string_property("remedy.username")

    def get_password(self) -> Optional[str]:
        return self.get_string_property("remedy.password")

    def get_authentication(self) -> Optional[str]:
        return self.get_string_property("remedy.authentication")

    def get_locale(self) -> Optional[str]:
        return self.get_string_property("remedy.locale")

    def get_time_zone(self) -> Optional[str]:
        return self.get_string_property("remedy.timezone")

    # Endpoints

    def get_end_point(self) -> Optional[str]:
        return self.get_string_property("remedy.endpoint")

    def get_strict_ssl(self) -> bool:
        return self.get_boolean_property("remedy.endpoint.strict-ssl")

    def get_port_name(self) -> Optional[str]:
        return self.get_string_property("remedy.portname")

    def get_create_end_point(self) -> Optional[str]:
        return self.get_string_property("remedy.createendpoint")

    def get_create_strict_ssl(self) -> bool:
        return self.get_boolean_property("remedy.createendpoint.strict-ssl")

    def get_create_port_name(self) -> Optional[str]:
        return self.get_string_property("remedy.createportname")

    def get_timeout(self) -> int:
        value = self.get_string_property("remedy.timeout")
        if value is None:
            return DEFAULT_TIMEOUT_SECONDS
        try:
            return int(value)
        except ValueError as e:
            raise ConfigRetrievalError(f"remedy.timeout is not an integer: {value!r}") from e

    # Assignment

    def get_target_groups(self) -> list[str]:
        groups = self.get_string_property("remedy.targetgroups")
        if groups is None:
            return []
        return groups.strip().split(":")

    def get_assigned_group(self, target_group: Optional[str] = None) -> Optional[str]:
        return self._with_group_override("remedy.assignedgroup", target_group)

    def get_assigned_support_company(self, target_group: Optional[str] = None) -> Optional[str]:
        return self._with_group_override("remedy.assignedsupportcompany", target_group)

    def get_assigned_support_organization(
        self, target_group: Optional[str] = None
    ) -> Optional[str]:
        return self._with_group_override("remedy.assignedsupportorganization", target_group)

    # Incident defaults

    def get_first_name(self) -> Optional[str]:
        return self.get_string_property("remedy.firstname")

    def get_last_name(self) -> Optional[str]:
        return self.get_string_property("remedy.lastname")

    def get_service_ci(self) -> Optional[str]:
        return self.get_string_property("remedy.serviceCI")

    def get_service_ci_recon_id(self) -> Optional[str]:
        return self.get_string_property("remedy.serviceCIReconID")

    def get_categorization_tier1(self) -> Optional[str]:
        return self.get_string_property("remedy.categorizationtier1")

    def get_categorization_tier2(self) -> Optional[str]:
        return self.get_string_property("remedy.categorizationtier2")

    def get_categorization_tier3(self) -> Optional[str]:
        return self.get_string_property("remedy.categorizationtier3")

    def get_service_type(self) -> Optional[str]:
        return self.get_string_property("remedy.serviceType")

    def get_reported_source(self) -> Optional[str]:
        return self.get_string_property("remedy.reportedSource")

    def get_impact(self) -> Optional[str]:
        return self.get_string_property("remedy.impact")

    def get_urgency(self) -> Optional[str]:
        return self.get_string_property("remedy.urgency")

    # State transitions

    def get_resolution(self) -> Optional[str]:
        return self.get_string_property("remedy.resolution")

    def get_reopen_status_reason(self) -> Optional[str]:
        return self.get_string_property("remedy.reason.reopen")

    def get_resolved_status_reason(self) -> Optional[str]:
        return self.get_string_property("remedy.reason.resolved")

    def get_cancelled_status_reason(self) -> Optional[str]:
        return self.get_string_property("remedy.reason.cancelled")

    def get_status_reasons(self) -> StatusReasons:
        return StatusReasons(
            reopen=self.get_reopen_status_reason(),
            resolved=self.get_resolved_status_reason(),
            cancelled=self.get_cancelled_status_reason(),
            resolution=self.get_resolution(),
        )
