"""Visible index window computation for fixed-height list viewports."""

from __future__ import annotations

import math

from windowing.api.errors import InvalidViewportConfigError
from windowing.api.viewport import (
    DEFAULT_OVERSCAN,
    VisibleRange,
    require_count,
    require_finite,
    validate_geometry,
)


def compute_visible_range(
    *,
    scroll_offset: float,
    item_height: float,
    container_height: float,
    overscan: int = DEFAULT_OVERSCAN,
    item_count: int,
) -> VisibleRange | None:
    """Return the inclusive index window to realize, or None for an empty list.

    The window covers every item intersecting
    ``[scroll_offset, scroll_offset + container_height]`` widened by
    ``overscan`` items on each side. Both bounds are clamped into the
    collection, so an offset past the end yields a tail window rather than an
    error. Negative offsets count as 0.
    """
    height, container, pad = validate_geometry(item_height, container_height, overscan)
    count = require_count("item_count", item_count)
    offset = max(0.0, require_finite("scroll_offset", scroll_offset))
    if count == 0:
        return None

    last_row = (offset + container) / height
    if not math.isfinite(last_row):
        raise InvalidViewportConfigError(
            "item_height", item_height, f"large enough to index offset {offset!r}"
        )
    raw_start = math.floor(offset / height) - pad
    raw_end = math.ceil(last_row) + pad
    end_index = min(count - 1, raw_end)
    # raw_start can pass end_index only once end_index is pinned to the tail.
    start_index = max(0, min(raw_start, end_index))
    return VisibleRange(start_index, end_index)


__all__ = ["compute_visible_range"]
