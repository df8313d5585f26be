"""
Centralized Logging

Architectural Intent:
- One place configuring output for every remedy_ticketer logger
- Human-readable lines by default, JSON lines for log shippers
- Log level driven by CLI flags (--verbose, --debug)
- Plugin log calls tag records with the Remedy incident number
  (extra={"incident_number": ...}); JSON lines carry it as its own field
"""

import json
import logging
import sys
from datetime import datetime, UTC

ROOT_LOGGER = "remedy_ticketer"
INCIDENT_NUMBER = "incident_number"


class JSONFormatter(logging.Formatter):
    """Structured JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        incident_number = getattr(record, INCIDENT_NUMBER, None)
        if incident_number is not None:
            log_entry[INCIDENT_NUMBER] = incident_number
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = False,
) -> None:
    """Configure the remedy_ticketer logger hierarchy.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, etc.)
        json_format: If True, emit one JSON object per line.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )

    root.addHandler(handler)
