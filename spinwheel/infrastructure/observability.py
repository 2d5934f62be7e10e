"""Structured Logging — JSON formatter and setup for game observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (session_id, item_id, spin_count, error_code, ...) surfaced when present
    - JSON format by default, human-readable when log_format != "json"

Design Decisions:
    - One JSON object per line so a log shipper can index session_id and
      spin_count without parsing message text
    - setup_logging called once on startup via bootstrap()
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS: tuple[str, ...] = (
    "session_id", "item_id", "item_type", "rule_id", "spin_count",
    "error_code", "velocity", "reason", "duration_ms",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging. Returns the installed handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
