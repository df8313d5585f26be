"""
Domain Services Package

Architectural Intent:
- Field mapping and state translation between host tickets and Remedy incidents
- Target-group resolution of incident assignment
"""

from remedy_ticketer.domain.services.field_mapping import (
    build_create_input,
    build_modify_input,
    build_notes,
    build_summary,
    resolve_urgency,
)
from remedy_ticketer.domain.services.group_resolution import (
    Assignment,
    resolve_assignment,
)
from remedy_ticketer.domain.services.state_translation import (
    StatusReasons,
    apply_local_state,
    remote_to_local_state,
)

__all__ = [
    "build_create_input",
    "build_modify_input",
    "build_notes",
    "build_summary",
    "resolve_urgency",
    "Assignment",
    "resolve_assignment",
    "StatusReasons",
    "apply_local_state",
    "remote_to_local_state",
]
