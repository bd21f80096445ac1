"""Structured Logging — one JSON object per record, invoice fields at the top level.

Invariants:
    - Every record carries timestamp (record creation time, UTC), level, logger, message
    - invoice_id, operation, error_code, path, strategy are copied when set
    - A logged exception adds "error" {type, cause} and the formatted traceback;
      cause is the chained driver exception behind a DatabaseError
    - setup_logging() is idempotent: calling it again replaces, never stacks, its handler

Design Decisions:
    - Stdlib logging with a custom Formatter: modules keep logging.getLogger(__name__)
    - Driver loggers (sqlalchemy.engine, aiosqlite) pinned to WARNING so statement
      echo never floods the invoice log at INFO
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("invoice_id", "operation", "error_code", "path", "strategy")
_QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite")
_HANDLER_NAME = "invoicing"
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def _error_summary(exc: BaseException) -> dict:
    cause = exc.__cause__ or exc.__context__
    return {
        "type": type(exc).__name__,
        "cause": type(cause).__name__ if cause else None,
    }


class JSONFormatter(logging.Formatter):
    """Format invoice log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, record.__dict__[key]) for key in _EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info and record.exc_info[1] is not None:
            log["error"] = _error_summary(record.exc_info[1])
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the invoicing handler on the root logger (once) and set levels."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT)
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
