"""
CLI Module

Architectural Intent:
- Command-line access to the Remedy ticketer for operators and smoke tests
- Delegates to the plugin wired by the composition root
- Supports --verbose/--debug flags for log level control
"""

import argparse
import logging
import sys
import traceback
from typing import Optional

from remedy_ticketer.composition_root import create_container
from remedy_ticketer.domain.entities.ticket import (
    ATTRIBUTE_ASSIGNED_GROUP,
    ATTRIBUTE_NODE_LABEL,
    ATTRIBUTE_URGENCY,
    ATTRIBUTE_USER_COMMENT,
    Ticket,
    TicketState,
)
from remedy_ticketer.infrastructure.logging import configure_logging


def _add_ticket_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--summary", "-s", help="Ticket summary (alarm log message)")
    parser.add_argument("--details", "-d", help="Ticket details (alarm description)")
    parser.add_argument("--user", "-u", help="User owning the ticket")
    parser.add_argument("--node-label", help="Node label prefixed to the summary")
    parser.add_argument("--comment", help="User comment added to the notes")
    parser.add_argument("--urgency", help="Remedy urgency, e.g. '2-High'")
    parser.add_argument("--group", help="Target group for assignment")


def _ticket_from_args(args, ticket_id: Optional[str] = None) -> Ticket:
    attributes = {}
    for key, value in (
        (ATTRIBUTE_NODE_LABEL, args.node_label),
        (ATTRIBUTE_USER_COMMENT, args.comment),
        (ATTRIBUTE_URGENCY, args.urgency),
        (ATTRIBUTE_ASSIGNED_GROUP, args.group),
    ):
        if value is not None:
            attributes[key] = value
    return Ticket(
        id=ticket_id,
        summary=args.summary,
        details=args.details,
        user=args.user,
        state=TicketState(getattr(args, "state", None) or TicketState.OPEN.value),
        attributes=attributes,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Remedy Ticketer: host tickets to BMC Remedy incidents"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output with tracebacks"
    )
    parser.add_argument(
        "--json-logs", action="store_true", help="Emit logs as JSON lines"
    )
    parser.add_argument(
        "--config", "-c", help="Path to a .cfg/.json config file or a config directory"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    get_parser = subparsers.add_parser("get", help="Show a Remedy incident as a ticket")
    get_parser.add_argument("ticket_id", help="Remedy incident number")

    create_parser = subparsers.add_parser("create", help="Submit a new Remedy incident")
    _add_ticket_arguments(create_parser)

    update_parser = subparsers.add_parser(
        "update", help="Push urgency and state of a ticket to Remedy"
    )
    update_parser.add_argument("ticket_id", help="Remedy incident number")
    update_parser.add_argument(
        "--state",
        choices=[state.value for state in TicketState],
        default=TicketState.OPEN.value,
        help="Ticket state",
    )
    _add_ticket_arguments(update_parser)

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        configure_logging(level=logging.DEBUG, json_format=args.json_logs)
    elif args.verbose:
        configure_logging(level=logging.INFO, json_format=args.json_logs)
    else:
        configure_logging(level=logging.WARNING, json_format=args.json_logs)

    verbose = args.verbose or args.debug

    if args.command is None:
        parser.print_help()
        return

    try:
        plugin = create_container(args.config).plugin

        if args.command == "get":
            ticket = plugin.get(args.ticket_id)
            print(f"[+] Ticket {ticket.id}")
            print(f"    state:   {ticket.state.value}")
            print(f"    user:    {ticket.user or ''}")
            print(f"    summary: {ticket.summary or ''}")
            if ticket.details:
                print("    details:")
                for line in ticket.details.splitlines():
                    print(f"      {line}")
        elif args.command == "create":
            incident_number = plugin.save_or_update(_ticket_from_args(args))
            print(f"[+] Created Remedy incident {incident_number}")
        elif args.command == "update":
            incident_number = plugin.save_or_update(_ticket_from_args(args, args.ticket_id))
            print(f"[+] Updated Remedy incident {incident_number}")
    except Exception as e:
        print(f"[-] {args.command.capitalize()} Failed: {e}")
        if e.__cause__ is not None:
            print(f"    caused by: {e.__cause__}")
        if verbose:
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
