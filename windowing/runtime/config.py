"""Centralized windowing configuration sourced from environment."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

from windowing.api.logging import WindowingLoggingConfig
from windowing.api.viewport import DEFAULT_OVERSCAN


@dataclass(frozen=True, slots=True)
class WindowingConfig:
    """Immutable windowing runtime configuration."""

    default_overscan: int
    log_level: str
    log_format: str
    log_file: str | None
    metrics_enabled: bool
    metrics_window_size: int


_WINDOWING_CONFIG: ContextVar[WindowingConfig | None] = ContextVar(
    "windowing_config", default=None
)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _normalize_log_format(raw: str) -> str:
    value = str(raw).strip().lower()
    return value if value in {"text", "json"} else "text"


def resolve_log_level_name(
    default: str = "INFO", *, env: Mapping[str, str] | None = None
) -> str:
    """Resolve log level with windowing-prefixed override."""
    value = _raw("WINDOWING_LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = _text("LOG_LEVEL", default, env=env)
    return value.strip().upper()


def load_windowing_config(*, env: Mapping[str, str] | None = None) -> WindowingConfig:
    log_file = _text("WINDOWING_LOG_FILE", "", env=env)
    return WindowingConfig(
        default_overscan=_int("WINDOWING_DEFAULT_OVERSCAN", DEFAULT_OVERSCAN, minimum=0, env=env),
        log_level=resolve_log_level_name(env=env),
        log_format=_normalize_log_format(_text("WINDOWING_LOG_FORMAT", "text", env=env)),
        log_file=log_file or None,
        metrics_enabled=_flag("WINDOWING_METRICS_ENABLED", False, env=env),
        metrics_window_size=_int("WINDOWING_METRICS_WINDOW", 60, minimum=1, env=env),
    )


def logging_config_from(config: WindowingConfig) -> WindowingLoggingConfig:
    """Project runtime config onto the logging pipeline config."""
    return WindowingLoggingConfig(
        level_name=config.log_level,
        console_format=config.log_format,
        file_path=config.log_file,
        file_format="json",
    )


def initialize_windowing_config(*, env: Mapping[str, str] | None = None) -> WindowingConfig:
    config = load_windowing_config(env=env)
    _WINDOWING_CONFIG.set(config)
    return config


def set_windowing_config(config: WindowingConfig) -> WindowingConfig:
    _WINDOWING_CONFIG.set(config)
    return config


def get_windowing_config() -> WindowingConfig:
    config = _WINDOWING_CONFIG.get()
    if config is not None:
        return config
    return initialize_windowing_config()


__all__ = [
    "WindowingConfig",
    "get_windowing_config",
    "initialize_windowing_config",
    "load_windowing_config",
    "logging_config_from",
    "resolve_log_level_name",
    "set_windowing_config",
]
