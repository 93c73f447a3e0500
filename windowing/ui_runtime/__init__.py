"""Windowing UI runtime helpers."""

from windowing.ui_runtime.batch import compute_visible_ranges, window_sizes
from windowing.ui_runtime.list_viewport import ScrollAlign, VirtualListViewport, offset_for_index
from windowing.ui_runtime.range_calculator import compute_visible_range
from windowing.ui_runtime.scroll import (
    ScrollOutcome,
    ScrollPositionTracker,
    apply_wheel_scroll,
    clamp_scroll_offset,
    max_scroll_offset,
    scroll_offset_of,
)
from windowing.ui_runtime.slice_extractor import extract_slice, render_window

__all__ = [
    "ScrollAlign",
    "ScrollOutcome",
    "ScrollPositionTracker",
    "VirtualListViewport",
    "apply_wheel_scroll",
    "clamp_scroll_offset",
    "compute_visible_range",
    "compute_visible_ranges",
    "extract_slice",
    "max_scroll_offset",
    "offset_for_index",
    "render_window",
    "scroll_offset_of",
    "window_sizes",
]
