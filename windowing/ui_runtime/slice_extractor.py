"""Slice extraction and positioning offsets for a visible window."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from windowing.api.errors import InvalidViewportConfigError
from windowing.api.viewport import DEFAULT_OVERSCAN, RenderResult, VisibleRange, require_finite
from windowing.ui_runtime.range_calculator import compute_visible_range

T = TypeVar("T")


def extract_slice(
    items: Sequence[T], visible_range: VisibleRange | None, *, item_height: float
) -> RenderResult[T]:
    """Return the realized items plus total height and slice offset."""
    height = require_finite("item_height", item_height)
    if height <= 0.0:
        raise InvalidViewportConfigError("item_height", item_height, "> 0")
    total_height = len(items) * height
    if visible_range is None:
        return RenderResult(
            visible_items=(),
            total_height=total_height,
            offset_y=0.0,
            start_index=None,
            end_index=None,
        )
    if visible_range.end_index >= len(items):
        raise InvalidViewportConfigError(
            "end_index", visible_range.end_index, f"< item count {len(items)}"
        )
    start, end = visible_range.start_index, visible_range.end_index
    return RenderResult(
        visible_items=tuple(items[start : end + 1]),
        total_height=total_height,
        offset_y=start * height,
        start_index=start,
        end_index=end,
    )


def render_window(
    items: Sequence[T],
    *,
    scroll_offset: float,
    item_height: float,
    container_height: float,
    overscan: int = DEFAULT_OVERSCAN,
) -> RenderResult[T]:
    """Compute the visible range for ``items`` and extract it in one call."""
    visible_range = compute_visible_range(
        scroll_offset=scroll_offset,
        item_height=item_height,
        container_height=container_height,
        overscan=overscan,
        item_count=len(items),
    )
    return extract_slice(items, visible_range, item_height=item_height)


__all__ = ["extract_slice", "render_window"]
