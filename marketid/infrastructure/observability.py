"""Structured Logging — identifier-aware JSON and text formatters.

Invariants:
    - Every record carries timestamp, level, logger, message and the service name
    - Identifier context (kind, type, byte_length) and request context (error_code, path)
      are emitted only when the caller passed them via extra=
    - setup_logging is idempotent: a second call replaces the handler it installed

Design Decisions:
    - stdlib logging with a custom formatter: the shell logs through logging.getLogger,
      core/ never logs
    - Text format appends the same extras as key=value so local runs show identifier context
"""

import logging
import json
from datetime import datetime, timezone


EXTRA_FIELDS = (
    "identifier_kind", "identifier_type", "byte_length", "error_code", "path",
)


def _extras(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in EXTRA_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def __init__(self, service: str | None = None):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self.service:
            log["service"] = self.service
        log.update(_extras(record))
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _extras(record)
        if extras:
            line += " " + " ".join(f"{k}={v}" for k, v in extras.items())
        return line


_installed_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "json", service: str | None = None):
    """Install the marketid handler on the root logger."""
    global _installed_handler
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter(service) if fmt == "json" else TextFormatter())
    if _installed_handler is not None:
        logging.root.removeHandler(_installed_handler)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _installed_handler = handler
    return handler
