"""Diagnostics sinks for the HTMX header layer."""

import json
import logging
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, MutableMapping, Optional

LOGGER_NAME = "htmx_headers"
NULL_LOGGER_NAME = f"{LOGGER_NAME}.null"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_BYTES = 10 * 1024 * 1024
BACKUP_COUNT = 5
REDACTED = "[REDACTED]"

# HX-Prompt carries whatever the user typed into a prompt() dialog
REDACTED_HEADERS = frozenset({"HX-Prompt"})
SECRET_QUERY_PARAM = re.compile(
    r"(?i)\b(token|key|signature|password|secret|code)=[^&#\s\"]*"
)

STRUCTURED_FIELDS = (
    "event",
    "header",
    "value",
    "hx_request",
    "render_partial",
    "method",
    "path",
    "notification_level",
    "setting",
    "error_type",
)


def redact_value(header: Optional[str], value: str) -> str:
    """Mask secrets in a header value before it is written to a log."""
    if header in REDACTED_HEADERS:
        return REDACTED
    return SECRET_QUERY_PARAM.sub(lambda match: f"{match.group(1)}={REDACTED}", value)


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that tags records with the emitting component."""

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        prefix = f"{LOGGER_NAME}."
        name = self.logger.name
        extra["component"] = name[len(prefix) :] if name.startswith(prefix) else name
        kwargs["extra"] = extra
        return msg, kwargs


class JsonFormatter(logging.Formatter):
    """One JSON object per record; header values are redacted."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            field: getattr(record, field)
            for field in STRUCTURED_FIELDS
            if hasattr(record, field)
        }
        if isinstance(payload.get("value"), str):
            payload["value"] = redact_value(payload.get("header"), payload["value"])
        payload.update(
            timestamp=self.formatTime(record, self.datefmt),
            level=record.levelname,
            component=getattr(record, "component", "unknown"),
            message=record.getMessage(),
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, sort_keys=True)


def get_logger(component: str) -> ComponentLoggerAdapter:
    """Return an adapter for a child logger of the project namespace."""
    return ComponentLoggerAdapter(logging.getLogger(f"{LOGGER_NAME}.{component}"), {})


def null_logger() -> ComponentLoggerAdapter:
    """Return an adapter whose logger drops every record."""
    logger = logging.getLogger(NULL_LOGGER_NAME)
    logger.disabled = True
    logger.propagate = False
    return ComponentLoggerAdapter(logger, {})


def _open_handler(destination: Optional[str], use_json: bool) -> logging.Handler:
    if destination is None or destination.lower() == "stdout":
        handler: logging.Handler = logging.StreamHandler(sys.stdout)
    else:
        path = Path(destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(path, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT)
    formatter = (
        JsonFormatter(datefmt=DATE_FORMAT)
        if use_json
        else logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    )
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    level: str = "INFO",
    destination: Optional[str] = None,
    use_json: bool = True,
    component: str = "handler",
) -> ComponentLoggerAdapter:
    """Install a single handler on the project logger and return a component adapter.

    When the destination cannot be opened the null sink is returned instead,
    so header handling keeps working without diagnostics.
    """
    try:
        handler = _open_handler(destination, use_json)
    except OSError as exc:
        get_logger("logging").warning(
            "Cannot open log destination %r, diagnostics disabled",
            destination,
            extra={"event": "logging_unavailable", "error_type": type(exc).__name__},
        )
        return null_logger()

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger(LOGGER_NAME)
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()
    handler.setLevel(numeric_level)
    root.addHandler(handler)
    root.setLevel(numeric_level)
    root.propagate = False
    return get_logger(component)
