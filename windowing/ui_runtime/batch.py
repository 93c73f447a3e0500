"""Vectorized visible-range computation over many scroll offsets."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from windowing.api.errors import InvalidViewportConfigError
from windowing.api.viewport import DEFAULT_OVERSCAN, require_count, validate_geometry


def compute_visible_ranges(
    offsets: Iterable[float] | np.ndarray,
    *,
    item_height: float,
    container_height: float,
    overscan: int = DEFAULT_OVERSCAN,
    item_count: int,
) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(starts, ends)`` int64 arrays, one window per offset.

    Matches ``compute_visible_range`` element-wise. Empty collections are
    marked with ``-1`` in both arrays.
    """
    height, container, pad = validate_geometry(item_height, container_height, overscan)
    count = require_count("item_count", item_count)
    if not isinstance(offsets, np.ndarray):
        offsets = list(offsets)
    values = np.asarray(offsets, dtype=np.float64)
    if values.ndim != 1:
        raise InvalidViewportConfigError("offsets", values.shape, "one-dimensional")
    if not np.all(np.isfinite(values)):
        raise InvalidViewportConfigError("offsets", "non-finite entries", "finite numbers")
    if count == 0:
        empty = np.full(values.shape, -1, dtype=np.int64)
        return empty, empty.copy()

    clamped = np.maximum(values, 0.0)
    with np.errstate(over="ignore"):
        last_rows = (clamped + container) / height
    if not np.all(np.isfinite(last_rows)):
        raise InvalidViewportConfigError(
            "item_height", item_height, "large enough to index every offset"
        )
    # Rows past count + pad all clamp to the tail window, so capping before the
    # int64 cast is exact.
    cap = float(count + pad)
    raw_start = np.minimum(np.floor(clamped / height), cap).astype(np.int64) - pad
    raw_end = np.minimum(np.ceil(last_rows), cap).astype(np.int64) + pad
    ends = np.minimum(raw_end, count - 1)
    starts = np.maximum(np.minimum(raw_start, ends), 0)
    return starts, ends


def window_sizes(starts: np.ndarray, ends: np.ndarray) -> np.ndarray:
    """Number of realized items per window (0 for empty markers)."""
    return np.where(ends >= 0, ends - starts + 1, 0)


__all__ = ["compute_visible_ranges", "window_sizes"]
