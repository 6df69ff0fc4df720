"""Tests for the diagnostics sinks."""

import json
import logging
from pathlib import Path

from htmx_headers.bootstrap.logging_setup import (
    ComponentLoggerAdapter,
    JsonFormatter,
    configure_logging,
    get_logger,
    null_logger,
    redact_value,
)


def header_record(**fields) -> logging.LogRecord:
    """Build a record as the handler emits it for a header write."""
    record = logging.makeLogRecord(
        {"name": "htmx_headers.handler", "levelno": logging.DEBUG, "levelname": "DEBUG"}
    )
    record.msg = "Response header set"
    for key, value in fields.items():
        setattr(record, key, value)
    return record


def test_configure_logging_returns_component_adapter():
    """The project logger gets exactly one stdout handler."""
    adapter = configure_logging("debug", "stdout", component="handler")
    project = logging.getLogger("htmx_headers")

    assert adapter.logger.name == "htmx_headers.handler"
    assert project.level == logging.DEBUG
    assert len(project.handlers) == 1
    assert isinstance(project.handlers[0].formatter, JsonFormatter)


def test_configure_logging_replaces_previous_handler(tmp_path: Path):
    configure_logging("INFO", "stdout")
    configure_logging("INFO", (tmp_path / "htmx.log").as_posix(), use_json=False)

    handlers = logging.getLogger("htmx_headers").handlers
    assert len(handlers) == 1
    assert handlers[0].baseFilename == (tmp_path / "htmx.log").as_posix()


def test_configure_logging_unknown_level_falls_back_to_info():
    configure_logging("chatty", "stdout")
    assert logging.getLogger("htmx_headers").level == logging.INFO


def test_configure_logging_unwritable_destination_uses_null_sink(tmp_path: Path, caplog):
    """Failing to open the log file never propagates to the caller."""
    blocker = tmp_path / "file"
    blocker.write_text("")

    adapter = configure_logging("INFO", (blocker / "sub" / "htmx.log").as_posix())

    assert adapter.logger.name == "htmx_headers.null"
    assert logging.getLogger("htmx_headers").handlers == []
    assert any(
        getattr(record, "event", None) == "logging_unavailable" for record in caplog.records
    )


def test_json_formatter_emits_header_fields():
    payload = json.loads(
        JsonFormatter().format(
            header_record(
                component="handler",
                event="header_set",
                header="HX-Retarget",
                value="#errors",
                unrelated="dropped",
            )
        )
    )

    assert payload["event"] == "header_set"
    assert payload["header"] == "HX-Retarget"
    assert payload["value"] == "#errors"
    assert payload["level"] == "DEBUG"
    assert "unrelated" not in payload
    assert list(payload) == sorted(payload)


def test_json_formatter_redacts_header_values():
    formatter = JsonFormatter()
    redirect = json.loads(
        formatter.format(header_record(header="HX-Redirect", value="/reset?token=abc&x=1"))
    )
    prompt = json.loads(formatter.format(header_record(header="HX-Prompt", value="hunter2")))

    assert redirect["value"] == "/reset?token=[REDACTED]&x=1"
    assert prompt["value"] == "[REDACTED]"


def test_json_formatter_default_component():
    assert json.loads(JsonFormatter().format(header_record()))["component"] == "unknown"


def test_redact_value_leaves_plain_values():
    assert redact_value("HX-Retarget", "#content") == "#content"
    assert redact_value(None, "/items?page=2") == "/items?page=2"
    assert redact_value("HX-Push-Url", "/cb?code=xyz") == "/cb?code=[REDACTED]"


def test_component_is_derived_from_logger_name():
    _, kwargs = get_logger("handler").process("msg", {"extra": {"header": "HX-Trigger"}})
    assert kwargs["extra"] == {"header": "HX-Trigger", "component": "handler"}

    _, kwargs = ComponentLoggerAdapter(logging.getLogger("other.module"), {}).process(
        "msg", {}
    )
    assert kwargs["extra"]["component"] == "other.module"


def test_null_logger_discards_records(caplog):
    """The null sink drops records regardless of handlers or propagation."""
    caplog.set_level(logging.DEBUG)
    sink = null_logger()
    sink.logger.propagate = True
    sink.error("should not be seen")

    assert "should not be seen" not in caplog.text
    sink.logger.propagate = False
