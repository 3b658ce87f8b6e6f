"""Structured Logging: JSON log lines carrying catalog mutation context.

Invariants:
    - Every line has timestamp, level, logger and message
    - Mutation context (operation, resource_type, resource_id, error_code, path)
      is surfaced when the call site passed it via extra=
    - setup_logging() is idempotent: calling it again replaces its own handler
      instead of stacking a second one

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - SQL echo stays at WARNING whatever the app level is; statement logs would
      drown the mutation trail
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "operation", "resource_type", "resource_id", "error_code", "path",
)
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite")

_HANDLER_NAME = "catalog"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the catalog handler on the root logger."""
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
