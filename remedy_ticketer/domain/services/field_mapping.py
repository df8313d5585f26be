"""
Field Mapping Service

Architectural Intent:
- Builds Remedy request shapes from a host Ticket
- The ticket only contributes summary, notes, urgency and target group;
  every other mandatory Remedy field comes from configuration
- Modify requests echo the incident's current values back, Remedy's
  modify operation overwrites every field it receives

Design Decisions:
- Pure functions over value objects; the clock is passed in
- Summary is capped because Remedy rejects summaries of 100+ characters
"""

from datetime import datetime
from typing import Optional, Protocol

from remedy_ticketer.domain.entities.ticket import (
    ATTRIBUTE_NODE_LABEL,
    ATTRIBUTE_URGENCY,
    ATTRIBUTE_USER_COMMENT,
    Ticket,
)
from remedy_ticketer.domain.services.group_resolution import (
    AssignmentSource,
    resolve_assignment,
)
from remedy_ticketer.domain.value_objects.incident import (
    CreateInputMap,
    GetOutputMap,
    IncidentStatus,
    ReportedSource,
    ServiceType,
    SetInputMap,
    VIPType,
    WorkInfoSource,
    WorkInfoType,
    WorkInfoViewAccess,
)

ACTION_CREATE = "CREATE"
ACTION_MODIFY = "MODIFY"
DEFAULT_URGENCY = "4-Low"
MAX_SUMMARY_CHARS = 99


class CreateDefaults(AssignmentSource, Protocol):
    """Configuration lookups used when submitting a new incident."""

    def get_first_name(self) -> Optional[str]: ...
    def get_last_name(self) -> Optional[str]: ...
    def get_service_ci(self) -> Optional[str]: ...
    def get_service_ci_recon_id(self) -> Optional[str]: ...
    def get_impact(self) -> Optional[str]: ...
    def get_reported_source(self) -> Optional[str]: ...
    def get_service_type(self) -> Optional[str]: ...
    def get_urgency(self) -> Optional[str]: ...
    def get_categorization_tier1(self) -> Optional[str]: ...
    def get_categorization_tier2(self) -> Optional[str]: ...
    def get_categorization_tier3(self) -> Optional[str]: ...


def _text(value: Optional[str]) -> str:
    return "" if value is None else value


def build_summary(ticket: Ticket) -> str:
    summary = ""
    node_label = ticket.attribute(ATTRIBUTE_NODE_LABEL)
    if node_label is not None:
        summary += f"{node_label}: OpenNMS: "
    summary += _text(ticket.summary)
    if len(summary) > MAX_SUMMARY_CHARS:
        return summary[:MAX_SUMMARY_CHARS - 1]
    return summary


def build_notes(ticket: Ticket) -> str:
    notes = f"OpenNMS generated ticket by user: {_text(ticket.user)}\n\n"
    comment = ticket.attribute(ATTRIBUTE_USER_COMMENT)
    if comment is not None:
        notes += f"OpenNMS user comment: {comment}\n\n"
    notes += f"OpenNMS logmsg: {_text(ticket.summary)}\n\n"
    notes += f"OpenNMS descr: {_text(ticket.details)}"
    return notes


def resolve_urgency(ticket: Ticket, configured: Optional[str]) -> str:
    urgency = ticket.attribute(ATTRIBUTE_URGENCY)
    if urgency is not None:
        return urgency
    if configured is not None:
        return configured
    return DEFAULT_URGENCY


def build_create_input(ticket: Ticket, config: CreateDefaults) -> CreateInputMap:
    """Map a new ticket onto a HelpDesk_Submit_Service request.

    Raises ValueError if the configured reported source or service type is
    not a value Remedy accepts.
    """
    assignment = resolve_assignment(ticket, config)
    return CreateInputMap(
        summary=build_summary(ticket),
        notes=build_notes(ticket),
        first_name=config.get_first_name(),
        last_name=config.get_last_name(),
        service_ci=config.get_service_ci(),
        service_ci_recon_id=config.get_service_ci_recon_id(),
        impact=config.get_impact(),
        reported_source=ReportedSource.from_value(config.get_reported_source()),
        service_type=ServiceType.from_value(config.get_service_type()),
        urgency=resolve_urgency(ticket, config.get_urgency()),
        status=IncidentStatus.NEW,
        action=ACTION_CREATE,
        categorization_tier1=config.get_categorization_tier1(),
        categorization_tier2=config.get_categorization_tier2(),
        categorization_tier3=config.get_categorization_tier3(),
        assigned_group=assignment.group,
        assigned_support_company=assignment.support_company,
        assigned_support_organization=assignment.support_organization,
    )


def build_modify_input(
    ticket: Ticket, current: GetOutputMap, now: datetime
) -> SetInputMap:
    """Start a HelpDesk_Modify_Service request from the incident as it stands."""
    return SetInputMap(
        categorization_tier1=current.categorization_tier1,
        categorization_tier2=current.categorization_tier2,
        categorization_tier3=current.categorization_tier3,
        closure_manufacturer=current.closure_manufacturer,
        closure_product_category_tier1=current.closure_product_category_tier1,
        closure_product_category_tier2=current.closure_product_category_tier2,
        closure_product_category_tier3=current.closure_product_category_tier3,
        closure_product_model_version=current.closure_product_model_version,
        closure_product_name=current.closure_product_name,
        company=current.company,
        summary=current.summary,
        notes=current.notes,
        impact=current.impact,
        manufacturer=current.manufacturer,
        product_categorization_tier1=current.product_categorization_tier1,
        product_categorization_tier2=current.product_categorization_tier2,
        product_categorization_tier3=current.product_categorization_tier3,
        product_model_version=current.product_model_version,
        product_name=current.product_name,
        reported_source=current.reported_source,
        resolution=current.resolution,
        resolution_category=current.resolution_category,
        resolution_category_tier2=current.resolution_category_tier2,
        resolution_category_tier3=current.resolution_category_tier3,
        resolution_method="",
        service_type=current.service_type,
        status=current.status,
        urgency=current.urgency,
        action=ACTION_MODIFY,
        work_info_summary="",
        work_info_notes="",
        work_info_type=WorkInfoType.SATISFACTION_SURVEY,
        work_info_date=now,
        work_info_source=WorkInfoSource.EMAIL,
        work_info_locked=VIPType.NO,
        work_info_view_access=WorkInfoViewAccess.PUBLIC,
        incident_number=ticket.id,
        status_reason=current.status_reason,
        service_ci=current.service_ci,
        service_ci_recon_id=current.service_ci_recon_id,
        hpd_ci=current.hpd_ci,
        hpd_ci_recon_id=current.hpd_ci_recon_id,
        hpd_ci_form_name=current.hpd_ci_form_name,
        z1d_ci_form_name=current.z1d_ci_form_name,
        work_info_attachment1_name="",
        work_info_attachment1_data=b"",
        work_info_attachment1_orig_size=0,
    )
