from __future__ import annotations

import numpy as np
import pytest

from windowing.api.errors import InvalidViewportConfigError
from windowing.ui_runtime.batch import compute_visible_ranges, window_sizes
from windowing.ui_runtime.range_calculator import compute_visible_range

GEOMETRY = {"item_height": 50.0, "container_height": 500.0, "overscan": 5, "item_count": 1000}


def test_batch_matches_scalar_calculator() -> None:
    offsets = np.concatenate(
        [np.linspace(0.0, 60_000.0, 257), np.array([-25.0, 49_500.0, 1_000_000.0])]
    )
    starts, ends = compute_visible_ranges(offsets, **GEOMETRY)
    for offset, start, end in zip(offsets.tolist(), starts.tolist(), ends.tolist()):
        window = compute_visible_range(scroll_offset=offset, **GEOMETRY)
        assert window is not None
        assert (window.start_index, window.end_index) == (start, end)


def test_batch_windows_are_monotonic_and_in_bounds() -> None:
    offsets = np.sort(np.random.default_rng(7).uniform(0.0, 80_000.0, size=2_000))
    starts, ends = compute_visible_ranges(offsets, **GEOMETRY)
    assert np.all(np.diff(starts) >= 0)
    assert np.all(np.diff(ends) >= 0)
    assert np.all(starts >= 0)
    assert np.all(starts <= ends)
    assert np.all(ends <= 999)


def test_batch_accepts_plain_iterables() -> None:
    starts, ends = compute_visible_ranges([1000, 0], **GEOMETRY)
    assert starts.tolist() == [15, 0]
    assert ends.tolist() == [35, 15]
    assert starts.dtype == np.int64


def test_batch_empty_collection_marks_windows_empty() -> None:
    starts, ends = compute_visible_ranges(
        [0.0, 100.0], item_height=50, container_height=500, item_count=0
    )
    assert starts.tolist() == [-1, -1]
    assert ends.tolist() == [-1, -1]
    assert window_sizes(starts, ends).tolist() == [0, 0]


def test_window_sizes_counts_inclusive_bounds() -> None:
    starts, ends = compute_visible_ranges([1000.0], **GEOMETRY)
    assert window_sizes(starts, ends).tolist() == [21]


def test_batch_rejects_non_finite_offsets() -> None:
    with pytest.raises(InvalidViewportConfigError):
        compute_visible_ranges([0.0, float("nan")], **GEOMETRY)


def test_batch_rejects_invalid_geometry() -> None:
    with pytest.raises(InvalidViewportConfigError):
        compute_visible_ranges([0.0], item_height=0, container_height=500, item_count=10)


def test_batch_rejects_multi_dimensional_offsets() -> None:
    with pytest.raises(InvalidViewportConfigError):
        compute_visible_ranges(np.zeros((2, 2)), **GEOMETRY)


def test_batch_matches_scalar_for_offsets_beyond_int64_rows() -> None:
    offsets = [1e19, 1e21, 1e300]
    starts, ends = compute_visible_ranges(offsets, **GEOMETRY)
    assert starts.tolist() == [999, 999, 999]
    assert ends.tolist() == [999, 999, 999]
    for offset in offsets:
        window = compute_visible_range(scroll_offset=offset, **GEOMETRY)
        assert window is not None
        assert (window.start_index, window.end_index) == (999, 999)
    assert window_sizes(starts, ends).tolist() == [1, 1, 1]


def test_batch_rejects_item_height_too_small_to_index_offset() -> None:
    with pytest.raises(InvalidViewportConfigError) as excinfo:
        compute_visible_ranges(
            [0.0, 1e10], item_height=1e-300, container_height=500, item_count=10
        )
    assert excinfo.value.field == "item_height"
