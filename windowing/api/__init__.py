"""Public windowing API contracts."""

from windowing.api.errors import InvalidViewportConfigError, WindowingError
from windowing.api.events import EventBus, Subscription, create_event_bus
from windowing.api.logging import WindowingLoggingConfig
from windowing.api.viewport import (
    DEFAULT_OVERSCAN,
    RenderResult,
    ScrollEvent,
    ViewportGeometry,
    VisibleRange,
    WindowChanged,
)

__all__ = [
    "DEFAULT_OVERSCAN",
    "EventBus",
    "InvalidViewportConfigError",
    "RenderResult",
    "ScrollEvent",
    "Subscription",
    "ViewportGeometry",
    "VisibleRange",
    "WindowChanged",
    "WindowingError",
    "WindowingLoggingConfig",
    "create_event_bus",
]
