from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from logging.handlers import QueueHandler

from windowing.api.logging import WindowingLoggingConfig
from windowing.runtime.config import load_windowing_config, set_windowing_config
from windowing.runtime.logging import (
    JsonFormatter,
    configure_windowing_logging,
    setup_windowing_logging,
    shutdown_windowing_logging,
)


@contextmanager
def bare_root_logger() -> Iterator[logging.Logger]:
    """Run with no root handlers; pytest re-adds its capture handlers per phase."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    try:
        yield root
    finally:
        shutdown_windowing_logging()
        root.handlers.clear()
        root.handlers.extend(saved_handlers)
        root.setLevel(saved_level)



def test_setup_uses_configured_level() -> None:
    set_windowing_config(load_windowing_config(env={"WINDOWING_LOG_LEVEL": "DEBUG"}))
    with bare_root_logger() as root:
        assert setup_windowing_logging() is True
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG


def test_setup_applies_json_console_format() -> None:
    set_windowing_config(load_windowing_config(env={"WINDOWING_LOG_FORMAT": "json"}))
    with bare_root_logger() as root:
        setup_windowing_logging()
        (handler,) = root.handlers
        assert isinstance(handler.formatter, JsonFormatter)


def test_setup_accepts_explicit_config() -> None:
    config = load_windowing_config(env={"WINDOWING_LOG_FORMAT": "json", "LOG_LEVEL": "warning"})
    with bare_root_logger() as root:
        setup_windowing_logging(config)
        (handler,) = root.handlers
        assert isinstance(handler.formatter, JsonFormatter)
        assert root.level == logging.WARNING


def test_setup_routes_configured_log_file_through_queue(tmp_path) -> None:
    log_path = tmp_path / "logs" / "windowing.jsonl"
    set_windowing_config(load_windowing_config(env={"WINDOWING_LOG_FILE": str(log_path)}))
    with bare_root_logger() as root:
        setup_windowing_logging()
        (handler,) = root.handlers
        assert isinstance(handler, QueueHandler)
        logging.getLogger("windowing.viewport").warning(
            "viewport_config_rejected field=%s", "overscan"
        )
        shutdown_windowing_logging()

    payload = json.loads(log_path.read_text(encoding="utf-8").splitlines()[-1])
    assert payload["event"] == "viewport_config_rejected"
    assert payload["msg"] == "viewport_config_rejected field=overscan"
    assert payload["level"] == "WARNING"


def test_setup_leaves_existing_handlers_alone() -> None:
    set_windowing_config(load_windowing_config(env={"WINDOWING_LOG_LEVEL": "DEBUG"}))
    sentinel = logging.NullHandler()
    with bare_root_logger() as root:
        root.addHandler(sentinel)
        root.setLevel(logging.WARNING)
        assert setup_windowing_logging() is False
        assert root.handlers == [sentinel]
        assert root.level == logging.WARNING


def test_file_logging_keeps_extra_fields(tmp_path) -> None:
    log_path = tmp_path / "nested" / "windowing.jsonl"
    with bare_root_logger():
        configure_windowing_logging(
            WindowingLoggingConfig(level_name="INFO", file_path=str(log_path), file_format="json")
        )
        logging.getLogger("windowing.viewport").info("viewport_ready", extra={"item_count": 3})
        shutdown_windowing_logging()

    payload = json.loads(log_path.read_text(encoding="utf-8").splitlines()[-1])
    assert payload["logger"] == "windowing.viewport"
    assert payload["msg"] == "viewport_ready"
    assert payload["level"] == "INFO"
    assert payload["fields"] == {"item_count": 3}


def test_json_formatter_includes_exception_text() -> None:
    formatter = JsonFormatter()
    try:
        raise ValueError("boom")
    except ValueError:
        exc_info = sys.exc_info()
    record = logging.LogRecord(
        "windowing.test", logging.ERROR, __file__, 1, "failed %s", ("now",), exc_info
    )
    payload = json.loads(formatter.format(record))
    assert payload["msg"] == "failed now"
    assert payload["event"] == "failed"
    assert "ValueError: boom" in payload["exc_info"]
    assert "fields" not in payload
