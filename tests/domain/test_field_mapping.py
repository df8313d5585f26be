"""Tests for the field mapping service."""

from datetime import datetime, UTC

from remedy_ticketer.domain.entities.ticket import (
    ATTRIBUTE_ASSIGNED_GROUP,
    ATTRIBUTE_NODE_LABEL,
    ATTRIBUTE_URGENCY,
    ATTRIBUTE_USER_COMMENT,
    Ticket,
    TicketState,
)
from remedy_ticketer.domain.services.field_mapping import (
    ACTION_CREATE,
    ACTION_MODIFY,
    DEFAULT_URGENCY,
    build_create_input,
    build_modify_input,
    build_notes,
    build_summary,
    resolve_urgency,
)
from remedy_ticketer.domain.value_objects.incident import (
    GetOutputMap,
    IncidentStatus,
    ReportedSource,
    ServiceType,
    StatusReason,
    VIPType,
    WorkInfoSource,
    WorkInfoType,
    WorkInfoViewAccess,
)


class TestBuildSummary:
    def test_plain_summary(self):
        assert build_summary(Ticket(summary="Node down")) == "Node down"

    def test_node_label_prefix(self):
        ticket = Ticket(summary="Node down", attributes={ATTRIBUTE_NODE_LABEL: "router-1"})
        assert build_summary(ticket) == "router-1: OpenNMS: Node down"

    def test_exactly_99_chars_untouched(self):
        summary = "x" * 99
        assert build_summary(Ticket(summary=summary)) == summary

    def test_longer_than_99_cut_to_98(self):
        result = build_summary(Ticket(summary="y" * 150))
        assert result == "y" * 98

    def test_prefix_counts_towards_limit(self):
        ticket = Ticket(summary="z" * 95, attributes={ATTRIBUTE_NODE_LABEL: "host"})
        result = build_summary(ticket)
        assert len(result) == 98
        assert result.startswith("host: OpenNMS: ")

    def test_missing_summary(self):
        assert build_summary(Ticket()) == ""


class TestBuildNotes:
    def test_without_comment(self):
        ticket = Ticket(summary="logmsg", details="descr", user="admin")
        assert build_notes(ticket) == (
            "OpenNMS generated ticket by user: admin\n\n"
            "OpenNMS logmsg: logmsg\n\n"
            "OpenNMS descr: descr"
        )

    def test_with_comment(self):
        ticket = Ticket(
            summary="logmsg",
            details="descr",
            user="admin",
            attributes={ATTRIBUTE_USER_COMMENT: "please check"},
        )
        assert build_notes(ticket) == (
            "OpenNMS generated ticket by user: admin\n\n"
            "OpenNMS user comment: please check\n\n"
            "OpenNMS logmsg: logmsg\n\n"
            "OpenNMS descr: descr"
        )

    def test_missing_fields_render_empty(self):
        assert build_notes(Ticket()) == (
            "OpenNMS generated ticket by user: \n\n"
            "OpenNMS logmsg: \n\n"
            "OpenNMS descr: "
        )


class TestResolveUrgency:
    def test_ticket_attribute_wins(self):
        ticket = Ticket(attributes={ATTRIBUTE_URGENCY: "1-Critical"})
        assert resolve_urgency(ticket, "4-Low") == "1-Critical"

    def test_configured(self):
        assert resolve_urgency(Ticket(), "3-Medium") == "3-Medium"

    def test_default(self):
        assert resolve_urgency(Ticket(), None) == DEFAULT_URGENCY == "4-Low"


class TestBuildCreateInput:
    def test_maps_configuration_and_ticket(self, config_dao):
        ticket = Ticket(
            summary="Test Integration",
            details="Yo, this is a unit test ticket",
            user="ranger@example.com",
            attributes={ATTRIBUTE_NODE_LABEL: "node-1"},
        )
        create_input = build_create_input(ticket, config_dao)

        assert create_input.summary == "node-1: OpenNMS: Test Integration"
        assert create_input.notes.startswith(
            "OpenNMS generated ticket by user: ranger@example.com"
        )
        assert create_input.first_name == "Opennms"
        assert create_input.last_name == "Tnn"
        assert create_input.service_ci == "Trentino Network Connettivita [C.TNNCN]"
        assert create_input.service_ci_recon_id == "RE00505688005e3s-nTg4KEI5gFSov"
        assert create_input.impact == "4-Minor/Localized"
        assert create_input.reported_source is ReportedSource.DIRECT_INPUT
        assert create_input.service_type is ServiceType.INFRASTRUCTURE_EVENT
        assert create_input.urgency == "4-Low"
        assert create_input.status is IncidentStatus.NEW
        assert create_input.action == ACTION_CREATE
        assert create_input.categorization_tier1 == "Incident"
        assert create_input.categorization_tier2 == "Generic"
        assert create_input.categorization_tier3 == "Non bloccante"
        assert create_input.assigned_group == "TNnet"
        assert create_input.assigned_support_company == "Trentino Network srl"
        assert create_input.assigned_support_organization == "Centro Gestione Rete"

    def test_target_group_override(self, config_dao):
        ticket = Ticket(summary="s", attributes={ATTRIBUTE_ASSIGNED_GROUP: "Tetranet"})
        create_input = build_create_input(ticket, config_dao)
        assert create_input.assigned_group == "TNnet - Tetranet"
        assert create_input.assigned_support_organization == "Centro Gestione Rete - Tetranet"

    def test_urgency_from_ticket(self, config_dao):
        ticket = Ticket(summary="s", attributes={ATTRIBUTE_URGENCY: "2-High"})
        assert build_create_input(ticket, config_dao).urgency == "2-High"


class TestBuildModifyInput:
    def test_copies_current_incident(self):
        now = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
        current = GetOutputMap(
            categorization_tier1="Incident",
            company="ACME",
            summary="remote summary",
            notes="remote notes",
            impact="3-Moderate/Limited",
            reported_source=ReportedSource.EMAIL,
            resolution="remote resolution",
            service_type=ServiceType.INFRASTRUCTURE_EVENT,
            status=IncidentStatus.ASSIGNED,
            status_reason=StatusReason.CLIENT_HOLD,
            urgency="3-Medium",
            service_ci="CI",
            hpd_ci="HPD",
            z1d_ci_form_name="form",
        )
        ticket = Ticket(id="INC000000000042", summary="local summary", state=TicketState.OPEN)

        set_input = build_modify_input(ticket, current, now)

        assert set_input.incident_number == "INC000000000042"
        assert set_input.action == ACTION_MODIFY
        assert set_input.categorization_tier1 == "Incident"
        assert set_input.company == "ACME"
        assert set_input.summary == "remote summary"
        assert set_input.notes == "remote notes"
        assert set_input.impact == "3-Moderate/Limited"
        assert set_input.reported_source is ReportedSource.EMAIL
        assert set_input.resolution == "remote resolution"
        assert set_input.resolution_method == ""
        assert set_input.status is IncidentStatus.ASSIGNED
        assert set_input.status_reason is StatusReason.CLIENT_HOLD
        assert set_input.urgency == "3-Medium"
        assert set_input.service_ci == "CI"
        assert set_input.hpd_ci == "HPD"
        assert set_input.z1d_ci_form_name == "form"

    def test_work_info_defaults(self):
        now = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
        set_input = build_modify_input(Ticket(id="INC1"), GetOutputMap(), now)

        assert set_input.work_info_summary == ""
        assert set_input.work_info_notes == ""
        assert set_input.work_info_type is WorkInfoType.SATISFACTION_SURVEY
        assert set_input.work_info_date == now
        assert set_input.work_info_source is WorkInfoSource.EMAIL
        assert set_input.work_info_locked is VIPType.NO
        assert set_input.work_info_view_access is WorkInfoViewAccess.PUBLIC
        assert set_input.work_info_attachment1_name == ""
        assert set_input.work_info_attachment1_data == b""
        assert set_input.work_info_attachment1_orig_size == 0
