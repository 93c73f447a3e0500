"""Public viewport value types and geometry validation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from windowing.api.errors import InvalidViewportConfigError

DEFAULT_OVERSCAN = 5

T = TypeVar("T")


def require_finite(field: str, value: float) -> float:
    """Return value as float, rejecting NaN and infinities."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidViewportConfigError(field, value, "a finite number") from None
    if not math.isfinite(number):
        raise InvalidViewportConfigError(field, value, "a finite number")
    return number


def require_count(field: str, value: int) -> int:
    """Return value as a non-negative int, rejecting fractional values."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidViewportConfigError(field, value, "a non-negative integer")
    if isinstance(value, float) and (not math.isfinite(value) or not value.is_integer()):
        raise InvalidViewportConfigError(field, value, "a non-negative integer")
    count = int(value)
    if count < 0:
        raise InvalidViewportConfigError(field, value, "a non-negative integer")
    return count


def validate_geometry(
    item_height: float, container_height: float, overscan: int
) -> tuple[float, float, int]:
    """Validate geometry inputs and return them normalized."""
    height = require_finite("item_height", item_height)
    if height <= 0.0:
        raise InvalidViewportConfigError("item_height", item_height, "> 0")
    container = require_finite("container_height", container_height)
    if container < 0.0:
        raise InvalidViewportConfigError("container_height", container_height, ">= 0")
    return height, container, require_count("overscan", overscan)


@dataclass(frozen=True, slots=True)
class ViewportGeometry:
    """Caller-declared item/container geometry plus overscan."""

    item_height: float
    container_height: float
    overscan: int = DEFAULT_OVERSCAN

    def __post_init__(self) -> None:
        height, container, overscan = validate_geometry(
            self.item_height, self.container_height, self.overscan
        )
        object.__setattr__(self, "item_height", height)
        object.__setattr__(self, "container_height", container)
        object.__setattr__(self, "overscan", overscan)


@dataclass(frozen=True, slots=True)
class VisibleRange:
    """Inclusive index window into a collection."""

    start_index: int
    end_index: int

    def __post_init__(self) -> None:
        if self.start_index < 0:
            raise InvalidViewportConfigError("start_index", self.start_index, ">= 0")
        if self.end_index < self.start_index:
            raise InvalidViewportConfigError("end_index", self.end_index, ">= start_index")

    def __len__(self) -> int:
        return self.end_index - self.start_index + 1

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.start_index <= index <= self.end_index

    def indices(self) -> range:
        return range(self.start_index, self.end_index + 1)


@dataclass(frozen=True)
class RenderResult(Generic[T]):
    """Slice of a collection to realize plus its positioning offsets."""

    visible_items: tuple[T, ...]
    total_height: float
    offset_y: float
    start_index: int | None
    end_index: int | None

    @property
    def is_empty(self) -> bool:
        return self.start_index is None

    @property
    def visible_range(self) -> VisibleRange | None:
        if self.start_index is None or self.end_index is None:
            return None
        return VisibleRange(self.start_index, self.end_index)


@dataclass(frozen=True, slots=True)
class ScrollEvent:
    """Scroll notification forwarded by the rendering collaborator."""

    offset: float


@dataclass(frozen=True, slots=True)
class WindowChanged:
    """Published after every viewport recomputation."""

    result: RenderResult


__all__ = [
    "DEFAULT_OVERSCAN",
    "RenderResult",
    "ScrollEvent",
    "ViewportGeometry",
    "VisibleRange",
    "WindowChanged",
    "require_count",
    "require_finite",
    "validate_geometry",
]
