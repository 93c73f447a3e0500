"""Viewport windowing engine for large fixed-height collections."""

from windowing.api import (
    DEFAULT_OVERSCAN,
    InvalidViewportConfigError,
    RenderResult,
    ScrollEvent,
    ViewportGeometry,
    VisibleRange,
    WindowChanged,
    WindowingError,
)
from windowing.ui_runtime import (
    ScrollPositionTracker,
    VirtualListViewport,
    compute_visible_range,
    extract_slice,
    render_window,
)

__all__ = [
    "DEFAULT_OVERSCAN",
    "InvalidViewportConfigError",
    "RenderResult",
    "ScrollEvent",
    "ScrollPositionTracker",
    "ViewportGeometry",
    "VirtualListViewport",
    "VisibleRange",
    "WindowChanged",
    "WindowingError",
    "compute_visible_range",
    "extract_slice",
    "render_window",
]
