"""Structured Logging: JSON and text formatters for the stockroom process.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Inventory fields (repository, item_id, error_code, quantity) surfaced when present,
      as JSON keys or as trailing key=value pairs
    - JSON format for machine consumption, human-readable text otherwise

Design Decisions:
    - Formatters on stdlib logging: no extra logging dependency
    - setup_logging called once by main(); library code only calls getLogger
"""

import logging
import json
from datetime import datetime, timezone

INVENTORY_FIELDS = ("repository", "item_id", "error_code", "quantity")


def _inventory_fields(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in INVENTORY_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_inventory_fields(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class InventoryTextFormatter(logging.Formatter):
    """One readable line per record, inventory fields appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _inventory_fields(record)
        if not fields:
            return line
        pairs = " ".join(f"{key}={val}" for key, val in fields.items())
        head, sep, tail = line.partition("\n")
        return f"{head} [{pairs}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Configure root logging for the process. Returns the installed handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(InventoryTextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
