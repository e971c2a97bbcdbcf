"""Structured Logging — one JSON object per record, tagged with the owning service.

Invariants:
    - Every record carries time (from the record itself), level, logger, service and message
    - Domain context (owner_id, entry_id, post_id, error_code, path, action) is copied
      only when a call site passed it through `extra`
    - setup_logging is idempotent: re-running it replaces our handler, never stacks a second one
    - Chatty library loggers (SQL echo, HTTP client) held at WARNING

Design Decisions:
    - stdlib logging with a custom Formatter, no logging dependency
    - UUIDs and other non-JSON values rendered with str()
"""

import json
import logging
from datetime import datetime, timezone

SERVICE_NAME = "devconnector"
CONTEXT_FIELDS = ("owner_id", "entry_id", "post_id", "error_code", "path", "action")
QUIET_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore")
TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_HANDLER_NAME = "devconnector-root"


class JSONFormatter(logging.Formatter):
    def __init__(self, service: str = SERVICE_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service,
            "message": record.getMessage(),
        }
        entry.update(
            (name, getattr(record, name))
            for name in CONTEXT_FIELDS
            if getattr(record, name, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the root handler for the API process and return it."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
