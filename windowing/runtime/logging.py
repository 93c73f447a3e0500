"""Logging pipeline driven by the windowing runtime config."""

from __future__ import annotations

import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from windowing.api.logging import WindowingLoggingConfig
from windowing.runtime.config import WindowingConfig, get_windowing_config, logging_config_from
from windowing.runtime.json_codec import dumps_text

_LOG = logging.getLogger("windowing.runtime")
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
# Anything else on a record arrived through ``extra=``.
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", None, None).__dict__
) | {"message", "asctime"}

_file_listener: QueueListener | None = None


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Windowing loggers write ``"<event> key=value ..."`` messages, so the
    leading token is also exposed as ``event`` for filtering. Values passed
    through ``extra=`` are kept under ``fields``.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": message.split(" ", 1)[0],
            "msg": message,
        }
        fields = {
            key: value for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES
        }
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dumps_text(payload)


def configure_windowing_logging(config: WindowingLoggingConfig | None = None) -> None:
    """Install root handlers for ``config``, or for the active windowing config.

    The console handler is attached directly. When a log file is configured
    both handlers sit behind a queue drained by a background listener, so
    recomputation on the scroll path never waits on disk.
    """
    global _file_listener

    if config is None:
        config = logging_config_from(get_windowing_config())
    shutdown_windowing_logging()

    handlers = _build_handlers(config)
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.getLevelNamesMapping().get(config.level_name.upper(), logging.INFO))

    if len(handlers) > 1:
        log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
        root.addHandler(QueueHandler(log_queue))
        _file_listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
        _file_listener.start()
    else:
        root.addHandler(handlers[0])
    _LOG.debug(
        "logging_configured level=%s console=%s file=%s",
        config.level_name,
        config.console_format,
        config.file_path,
    )


def setup_windowing_logging(config: WindowingConfig | None = None) -> bool:
    """Configure logging from windowing config unless the host already did.

    Returns True when handlers were installed.
    """
    if logging.getLogger().handlers:
        return False
    resolved = config if config is not None else get_windowing_config()
    configure_windowing_logging(logging_config_from(resolved))
    return True


def shutdown_windowing_logging() -> None:
    """Flush and stop the file listener, if one is running."""
    global _file_listener

    listener, _file_listener = _file_listener, None
    if listener is not None:
        listener.stop()


def _build_handlers(config: WindowingLoggingConfig) -> list[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(_formatter_for(config.console_format))
    handlers: list[logging.Handler] = [console]
    if config.file_path:
        path = Path(config.file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_formatter_for(config.file_format))
        handlers.append(file_handler)
    return handlers


def _formatter_for(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT)


__all__ = [
    "JsonFormatter",
    "configure_windowing_logging",
    "setup_windowing_logging",
    "shutdown_windowing_logging",
]
