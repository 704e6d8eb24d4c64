from __future__ import annotations

import io
import sys
from collections.abc import Generator

import pytest

from typed_json.json_utils import load_json_str
from typed_json.logging import (
    JsonFormatter,
    TextFormatter,
    get_logger,
    setup_logging,
    stdlib_logging,
)


def _record(msg: str = "test message") -> stdlib_logging.LogRecord:
    return stdlib_logging.LogRecord(
        name="test.logger",
        level=stdlib_logging.INFO,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture
def _restore_root_logger() -> Generator[None, None, None]:
    root = stdlib_logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


def test_json_formatter_basic() -> None:
    formatter = JsonFormatter(static_fields={}, extra_field_names=[])
    parsed = load_json_str(formatter.format(_record()))
    assert type(parsed) is dict
    assert parsed["level"] == "INFO"
    assert parsed["logger"] == "test.logger"
    assert parsed["message"] == "test message"
    assert "timestamp" in parsed


def test_json_formatter_static_and_standard_fields() -> None:
    formatter = JsonFormatter(
        static_fields={"service": "typed-json", "instance_id": "host-1"},
        extra_field_names=[],
    )
    record = _record("decode_error")
    record.error_code = "MISSING_KEY"
    record.key = "id"
    parsed = load_json_str(formatter.format(record))
    assert type(parsed) is dict
    assert parsed["service"] == "typed-json"
    assert parsed["instance_id"] == "host-1"
    assert parsed["error_code"] == "MISSING_KEY"
    assert parsed["key"] == "id"


def test_json_formatter_extra_fields_skip_non_json_values() -> None:
    formatter = JsonFormatter(static_fields={}, extra_field_names=["attempt", "blob"])
    record = _record()
    record.attempt = 3
    record.blob = object()
    parsed = load_json_str(formatter.format(record))
    assert type(parsed) is dict
    assert parsed["attempt"] == 3
    assert "blob" not in parsed


def test_json_formatter_exc_info() -> None:
    formatter = JsonFormatter(static_fields={}, extra_field_names=[])
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = stdlib_logging.LogRecord(
            name="t",
            level=stdlib_logging.ERROR,
            pathname="t.py",
            lineno=1,
            msg="failed",
            args=(),
            exc_info=sys.exc_info(),
        )
    parsed = load_json_str(formatter.format(record))
    assert type(parsed) is dict
    exc_text = parsed["exc_info"]
    assert isinstance(exc_text, str)
    assert "RuntimeError: boom" in exc_text


def test_text_formatter_includes_fields() -> None:
    formatter = TextFormatter(extra_fields=["attempt"])
    record = _record("decoded")
    record.attempt = 2
    record.scenario = "complete"
    line = formatter.format(record)
    assert "[INFO]" in line
    assert "[test.logger]" in line
    assert "attempt=2" in line
    assert "scenario=complete" in line
    assert line.endswith("decoded")


@pytest.mark.usefixtures("_restore_root_logger")
def test_setup_logging_json(capsys: pytest.CaptureFixture[str]) -> None:
    root = setup_logging(
        level="INFO",
        format_mode="json",
        service_name="typed-json",
        instance_id="inst-1",
        extra_fields=None,
    )
    assert root.level == stdlib_logging.INFO
    assert len(root.handlers) == 1
    get_logger("typed_json.test").info("hello", extra={"key": "id"})
    get_logger("typed_json.test").debug("hidden")
    lines = [line for line in capsys.readouterr().out.splitlines() if line]
    assert len(lines) == 1
    parsed = load_json_str(lines[0])
    assert type(parsed) is dict
    assert parsed["message"] == "hello"
    assert parsed["service"] == "typed-json"
    assert parsed["instance_id"] == "inst-1"
    assert parsed["key"] == "id"


@pytest.mark.usefixtures("_restore_root_logger")
def test_setup_logging_text_generates_instance_id() -> None:
    root = setup_logging(
        level="DEBUG",
        format_mode="text",
        service_name="typed-json",
        instance_id=None,
        extra_fields=["attempt"],
    )
    assert root.level == stdlib_logging.DEBUG
    assert isinstance(root.handlers[0].formatter, TextFormatter)
    stream = io.StringIO()
    handler = stdlib_logging.StreamHandler(stream)
    handler.setFormatter(root.handlers[0].formatter)
    record = _record("plain")
    handler.emit(record)
    assert stream.getvalue().endswith("plain\n")
