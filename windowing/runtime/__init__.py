"""Windowing runtime modules."""

from windowing.runtime.config import (
    WindowingConfig,
    get_windowing_config,
    initialize_windowing_config,
    load_windowing_config,
    logging_config_from,
    set_windowing_config,
)
from windowing.runtime.events import EventBus, RuntimeEventBus
from windowing.runtime.logging import (
    configure_windowing_logging,
    setup_windowing_logging,
    shutdown_windowing_logging,
)
from windowing.runtime.metrics import (
    MetricsCollector,
    NoopMetricsCollector,
    RecomputeMetrics,
    create_metrics_collector,
)

__all__ = [
    "EventBus",
    "MetricsCollector",
    "NoopMetricsCollector",
    "RecomputeMetrics",
    "RuntimeEventBus",
    "WindowingConfig",
    "configure_windowing_logging",
    "create_metrics_collector",
    "get_windowing_config",
    "initialize_windowing_config",
    "load_windowing_config",
    "logging_config_from",
    "set_windowing_config",
    "setup_windowing_logging",
    "shutdown_windowing_logging",
]
