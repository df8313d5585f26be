"""
Remedy Incident Value Objects

Architectural Intent:
- Mirror the data shapes of the HPD_IncidentInterface web services
- Keep WSDL element names out of the mapping logic
- Each shape converts to the keyword arguments zeep expects (to_soap) and,
  for responses, back from zeep's serialized objects (from_soap)

Design Decisions:
- Plain mutable dataclasses: the modify request is built up step by step
- WSDL element names live in field metadata, read via dataclasses.fields()
- Enumerations are strict when built from local values; an unknown value
  raises ValueError. Values decoded from a Remedy response that fall outside
  the bundled vocabulary (site-customised selection lists) decode to None
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)


class _RemedyEnum(Enum):
    @classmethod
    def from_value(cls, value: Optional[str]):
        """Look up a member by its wire value. None passes through."""
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(f"{value!r} is not a valid {cls.__name__}")


class IncidentStatus(_RemedyEnum):
    NEW = "New"
    ASSIGNED = "Assigned"
    IN_PROGRESS = "In Progress"
    PENDING = "Pending"
    RESOLVED = "Resolved"
    CLOSED = "Closed"
    CANCELLED = "Cancelled"


class StatusReason(_RemedyEnum):
    INFRASTRUCTURE_CHANGE_CREATED = "Infrastructure Change Created"
    LOCAL_SITE_ACTION_REQUIRED = "Local Site Action Required"
    PURCHASE_ORDER_APPROVAL = "Purchase Order Approval"
    REGISTRATION_APPROVAL = "Registration Approval"
    SUPPLIER_DELIVERY = "Supplier Delivery"
    SUPPORT_CONTACT_HOLD = "Support Contact Hold"
    THIRD_PARTY_VENDOR_ACTION_REQD = "Third Party Vendor Action Reqd"
    CLIENT_ACTION_REQUIRED = "Client Action Required"
    INFRASTRUCTURE_CHANGE_REQUEST = "Infrastructure Change Request"
    REQUEST = "Request"
    FUTURE_ENHANCEMENT = "Future Enhancement"
    PENDING_ORIGINAL_INCIDENT = "Pending Original Incident"
    CLIENT_HOLD = "Client Hold"
    MONITORING_INCIDENT = "Monitoring Incident"
    CUSTOMER_FOLLOW_UP_REQUIRED = "Customer Follow-Up Required"
    TEMPORARY_CORRECTIVE_ACTION = "Temporary Corrective Action"
    NO_FURTHER_ACTION_REQUIRED = "No Further Action Required"
    RESOLVED_BY_ORIGINAL_INCIDENT = "Resolved by Original Incident"
    AUTOMATED_RESOLUTION_REPORTED = "Automated Resolution Reported"
    NO_LONGER_A_CAUSAL_CI = "No longer a Causal CI"


class ReportedSource(_RemedyEnum):
    DIRECT_INPUT = "Direct Input"
    EMAIL = "Email"
    EXTERNAL_ESCALATION = "External Escalation"
    FAX = "Fax"
    SELF_SERVICE = "Self Service"
    SYSTEMS_MANAGEMENT = "Systems Management"
    PHONE = "Phone"
    VOICE_MAIL = "Voice Mail"
    WALK_IN = "Walk In"
    WEB = "Web"
    OTHER = "Other"
    BMC_IMPACT_MANAGER_EVENT = "BMC Impact Manager Event"


class ServiceType(_RemedyEnum):
    USER_SERVICE_RESTORATION = "User Service Restoration"
    USER_SERVICE_REQUEST = "User Service Request"
    INFRASTRUCTURE_RESTORATION = "Infrastructure Restoration"
    INFRASTRUCTURE_EVENT = "Infrastructure Event"
    SECURITY_INCIDENT = "Security Incident"


class WorkInfoType(_RemedyEnum):
    CUSTOMER_INBOUND = "Customer Inbound"
    CUSTOMER_COMMUNICATION = "Customer Communication"
    CUSTOMER_FOLLOW_UP = "Customer Follow-up"
    CUSTOMER_STATUS_UPDATE = "Customer Status Update"
    CUSTOMER_OUTBOUND = "Customer Outbound"
    CLOSURE_FOLLOW_UP = "Closure Follow Up"
    DETAILS_CLARIFICATION = "Details Clarification"
    GENERAL_INFORMATION = "General Information"
    RESOLUTION_COMMUNICATIONS = "Resolution Communications"
    SATISFACTION_SURVEY = "Satisfaction Survey"
    STATUS_UPDATE = "Status Update"
    WORKING_LOG = "Working Log"
    EMAIL_SYSTEM = "Email System"
    PAGING_SYSTEM = "Paging System"
    BMC_IMPACT_MANAGER_UPDATE = "BMC Impact Manager Update"
    CHAT = "Chat"


class WorkInfoSource(_RemedyEnum):
    EMAIL = "Email"
    FAX = "Fax"
    PHONE = "Phone"
    VOICE_MAIL = "Voice Mail"
    WALK_IN = "Walk In"
    PAGER = "Pager"
    SYSTEM_ASSIGNMENT = "System Assignment"
    WEB = "Web"
    OTHER = "Other"
    BMC_IMPACT_MANAGER_EVENT = "BMC Impact Manager Event"


class VIPType(_RemedyEnum):
    YES = "Yes"
    NO = "No"


class WorkInfoViewAccess(_RemedyEnum):
    INTERNAL = "Internal"
    PUBLIC = "Public"


def _soap(name: str, enum: Optional[type] = None, default: Any = None):
    return dataclasses.field(default=default, metadata={"soap": name, "enum": enum})


class _SoapMap:
    """Mixin converting between dataclass fields and WSDL element names."""

    def to_soap(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, Enum):
                value = value.value
            data[f.metadata["soap"]] = value
        return data

    @classmethod
    def from_soap(cls, data: Mapping[str, Any]):
        values = {}
        for f in dataclasses.fields(cls):
            value = data.get(f.metadata["soap"])
            enum = f.metadata.get("enum")
            if enum is not None:
                try:
                    value = enum.from_value(value)
                except ValueError:
                    logger.debug(
                        "Ignoring %s value %r not in %s", f.metadata["soap"], value, enum.__name__
                    )
                    value = None
            values[f.name] = value
        return cls(**values)


@dataclass
class AuthenticationInfo(_SoapMap):
    """SOAP header sent with every Remedy request."""
    user_name: Optional[str] = _soap("userName")
    password: Optional[str] = _soap("password")
    authentication: Optional[str] = _soap("authentication")
    locale: Optional[str] = _soap("locale")
    time_zone: Optional[str] = _soap("timeZone")

    def __repr__(self) -> str:
        return (
            f"AuthenticationInfo(user_name={self.user_name!r}, "
            f"authentication={self.authentication!r}, locale={self.locale!r}, "
            f"time_zone={self.time_zone!r})"
        )


@dataclass
class GetInputMap(_SoapMap):
    incident_number: Optional[str] = _soap("Incident_Number")


@dataclass
class GetOutputMap(_SoapMap):
    """An incident as returned by HelpDesk_Query_Service."""
    assigned_group: Optional[str] = _soap("Assigned_Group")
    assigned_support_company: Optional[str] = _soap("Assigned_Support_Company")
    assigned_support_organization: Optional[str] = _soap("Assigned_Support_Organization")
    assignee: Optional[str] = _soap("Assignee")
    categorization_tier1: Optional[str] = _soap("Categorization_Tier_1")
    categorization_tier2: Optional[str] = _soap("Categorization_Tier_2")
    categorization_tier3: Optional[str] = _soap("Categorization_Tier_3")
    closure_manufacturer: Optional[str] = _soap("Closure_Manufacturer")
    closure_product_category_tier1: Optional[str] = _soap("Closure_Product_Category_Tier1")
    closure_product_category_tier2: Optional[str] = _soap("Closure_Product_Category_Tier2")
    closure_product_category_tier3: Optional[str] = _soap("Closure_Product_Category_Tier3")
    closure_product_model_version: Optional[str] = _soap("Closure_Product_Model_Version")
    closure_product_name: Optional[str] = _soap("Closure_Product_Name")
    company: Optional[str] = _soap("Company")
    summary: Optional[str] = _soap("Summary")
    notes: Optional[str] = _soap("Notes")
    first_name: Optional[str] = _soap("First_Name")
    last_name: Optional[str] = _soap("Last_Name")
    impact: Optional[str] = _soap("Impact")
    manufacturer: Optional[str] = _soap("Manufacturer")
    priority: Optional[str] = _soap("Priority")
    product_categorization_tier1: Optional[str] = _soap("Product_Categorization_Tier_1")
    product_categorization_tier2: Optional[str] = _soap("Product_Categorization_Tier_2")
    product_categorization_tier3: Optional[str] = _soap("Product_Categorization_Tier_3")
    product_model_version: Optional[str] = _soap("Product_Model_Version")
    product_name: Optional[str] = _soap("Product_Name")
    reported_source: Optional[ReportedSource] = _soap("Reported_Source", ReportedSource)
    resolution: Optional[str] = _soap("Resolution")
    resolution_category: Optional[str] = _soap("Resolution_Category")
    resolution_category_tier2: Optional[str] = _soap("Resolution_Category_Tier_2")
    resolution_category_tier3: Optional[str] = _soap("Resolution_Category_Tier_3")
    resolution_method: Optional[str] = _soap("Resolution_Method")
    service_type: Optional[ServiceType] = _soap("Service_Type", ServiceType)
    status: Optional[IncidentStatus] = _soap("Status", IncidentStatus)
    status_reason: Optional[StatusReason] = _soap("Status_Reason", StatusReason)
    urgency: Optional[str] = _soap("Urgency")
    service_ci: Optional[str] = _soap("ServiceCI")
    service_ci_recon_id: Optional[str] = _soap("ServiceCI_ReconID")
    hpd_ci: Optional[str] = _soap("HPD_CI")
    hpd_ci_recon_id: Optional[str] = _soap("HPD_CI_ReconID")
    hpd_ci_form_name: Optional[str] = _soap("HPD_CI_FormName")
    z1d_ci_form_name: Optional[str] = _soap("z1D_CI_FormName")


@dataclass
class SetInputMap(_SoapMap):
    """Request body of HelpDesk_Modify_Service."""
    categorization_tier1: Optional[str] = _soap("Categorization_Tier_1")
    categorization_tier2: Optional[str] = _soap("Categorization_Tier_2")
    categorization_tier3: Optional[str] = _soap("Categorization_Tier_3")
    closure_manufacturer: Optional[str] = _soap("Closure_Manufacturer")
    closure_product_category_tier1: Optional[str] = _soap("Closure_Product_Category_Tier1")
    closure_product_category_tier2: Optional[str] = _soap("Closure_Product_Category_Tier2")
    closure_product_category_tier3: Optional[str] = _soap("Closure_Product_Category_Tier3")
    closure_product_model_version: Optional[str] = _soap("Closure_Product_Model_Version")
    closure_product_name: Optional[str] = _soap("Closure_Product_Name")
    company: Optional[str] = _soap("Company")
    summary: Optional[str] = _soap("Summary")
    notes: Optional[str] = _soap("Notes")
    impact: Optional[str] = _soap("Impact")
    manufacturer: Optional[str] = _soap("Manufacturer")
    product_categorization_tier1: Optional[str] = _soap("Product_Categorization_Tier_1")
    product_categorization_tier2: Optional[str] = _soap("Product_Categorization_Tier_2")
    product_categorization_tier3: Optional[str] = _soap("Product_Categorization_Tier_3")
    product_model_version: Optional[str] = _soap("Product_Model_Version")
    product_name: Optional[str] = _soap("Product_Name")
    reported_source: Optional[ReportedSource] = _soap("Reported_Source", ReportedSource)
    resolution: Optional[str] = _soap("Resolution")
    resolution_category: Optional[str] = _soap("Resolution_Category")
    resolution_category_tier2: Optional[str] = _soap("Resolution_Category_Tier_2")
    resolution_category_tier3: Optional[str] = _soap("Resolution_Category_Tier_3")
    resolution_method: Optional[str] = _soap("Resolution_Method")
    service_type: Optional[ServiceType] = _soap("Service_Type", ServiceType)
    status: Optional[IncidentStatus] = _soap("Status", IncidentStatus)
    urgency: Optional[str] = _soap("Urgency")
    action: Optional[str] = _soap("Action")
    work_info_summary: Optional[str] = _soap("Work_Info_Summary")
    work_info_notes: Optional[str] = _soap("Work_Info_Notes")
    work_info_type: Optional[WorkInfoType] = _soap("Work_Info_Type", WorkInfoType)
    work_info_date: Optional[datetime] = _soap("Work_Info_Date")
    work_info_source: Optional[WorkInfoSource] = _soap("Work_Info_Source", WorkInfoSource)
    work_info_locked: Optional[VIPType] = _soap("Work_Info_Locked", VIPType)
    work_info_view_access: Optional[WorkInfoViewAccess] = _soap(
        "Work_Info_View_Access", WorkInfoViewAccess
    )
    incident_number: Optional[str] = _soap("Incident_Number")
    status_reason: Optional[StatusReason] = _soap("Status_Reason", StatusReason)
    service_ci: Optional[str] = _soap("ServiceCI")
    service_ci_recon_id: Optional[str] = _soap("ServiceCI_ReconID")
    hpd_ci: Optional[str] = _soap("HPD_CI")
    hpd_ci_recon_id: Optional[str] = _soap("HPD_CI_ReconID")
    hpd_ci_form_name: Optional[str] = _soap("HPD_CI_FormName")
    z1d_ci_form_name: Optional[str] = _soap("z1D_CI_FormName")
    work_info_attachment1_name: Optional[str] = _soap("WorkInfoAttachment1Name")
    work_info_attachment1_data: Optional[bytes] = _soap("WorkInfoAttachment1Data")
    work_info_attachment1_orig_size: Optional[int] = _soap("WorkInfoAttachment1OrigSize")


@dataclass
class CreateInputMap(_SoapMap):
    """Request body of HelpDesk_Submit_Service."""
    assigned_group: Optional[str] = _soap("Assigned_Group")
    assigned_support_company: Optional[str] = _soap("Assigned_Support_Company")
    assigned_support_organization: Optional[str] = _soap("Assigned_Support_Organization")
    categorization_tier1: Optional[str] = _soap("Categorization_Tier_1")
    categorization_tier2: Optional[str] = _soap("Categorization_Tier_2")
    categorization_tier3: Optional[str] = _soap("Categorization_Tier_3")
    first_name: Optional[str] = _soap("First_Name")
    last_name: Optional[str] = _soap("Last_Name")
    impact: Optional[str] = _soap("Impact")
    reported_source: Optional[ReportedSource] = _soap("Reported_Source", ReportedSource)
    service_type: Optional[ServiceType] = _soap("Service_Type", ServiceType)
    status: Optional[IncidentStatus] = _soap("Status", IncidentStatus)
    action: Optional[str] = _soap("Action")
    summary: Optional[str] = _soap("Summary")
    notes: Optional[str] = _soap("Notes")
    urgency: Optional[str] = _soap("Urgency")
    service_ci: Optional[str] = _soap("ServiceCI")
    service_ci_recon_id: Optional[str] = _soap("ServiceCI_ReconID")


@dataclass
class CreateOutputMap(_SoapMap):
    incident_number: Optional[str] = _soap("Incident_Number")
