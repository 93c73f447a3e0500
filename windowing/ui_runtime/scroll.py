"""Scroll offset state and pixel scrolling helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from windowing.api.errors import InvalidViewportConfigError
from windowing.api.viewport import ScrollEvent, require_finite

_LOG = logging.getLogger("windowing.scroll")

_OFFSET_ATTRIBUTES: tuple[str, ...] = ("scroll_top", "scroll_offset", "offset")
_TARGET_ATTRIBUTES: tuple[str, ...] = ("current_target", "target")


@dataclass(frozen=True, slots=True)
class ScrollOutcome:
    """Result of attempting to scroll a pixel viewport."""

    handled: bool
    next_offset: float


class ScrollPositionTracker:
    """Owns the scroll offset of one mounted viewport.

    Every update replaces the previous offset outright; there is no queue
    and no coalescing, so only the latest position is ever observed.
    """

    def __init__(self, initial_offset: float = 0.0) -> None:
        self._offset = require_finite("scroll_offset", initial_offset)
        self._update_count = 0

    @property
    def offset(self) -> float:
        return self._offset

    @property
    def update_count(self) -> int:
        return self._update_count

    def update(self, offset: float) -> float:
        """Store a new offset reported by the scroll source and return it."""
        value = require_finite("scroll_offset", offset)
        previous = self._offset
        self._offset = value
        self._update_count += 1
        if _LOG.isEnabledFor(logging.DEBUG):
            _LOG.debug("scroll_offset_updated previous=%.1f offset=%.1f", previous, value)
        return value

    def handle_scroll(self, event: object) -> float:
        """Scroll-event handler for the rendering collaborator to attach."""
        return self.update(scroll_offset_of(event))

    def reset(self) -> None:
        """Return to the top and clear the update count."""
        self._offset = 0.0
        self._update_count = 0


def scroll_offset_of(event: object) -> float:
    """Extract a pixel offset from a scroll notification.

    DOM-style events carry the offset on the scrolled element, so
    ``current_target`` and ``target`` are searched after the event itself.
    """
    if isinstance(event, ScrollEvent):
        return event.offset
    if isinstance(event, (int, float)) and not isinstance(event, bool):
        return float(event)
    elements = (getattr(event, name, None) for name in _TARGET_ATTRIBUTES)
    for source in (event, *elements):
        offset = None if source is None else _offset_attribute(source)
        if offset is not None:
            return offset
    raise InvalidViewportConfigError("scroll_event", event, "a number or carry a scroll offset")


def _offset_attribute(source: object) -> float | None:
    for name in _OFFSET_ATTRIBUTES:
        value = getattr(source, name, None)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    return None


def max_scroll_offset(total_height: float, container_height: float) -> float:
    """Largest meaningful offset for a container of the given height."""
    return max(0.0, float(total_height) - float(container_height))


def clamp_scroll_offset(offset: float, total_height: float, container_height: float) -> float:
    """Clamp offset into ``[0, max_scroll_offset]``."""
    return max(0.0, min(float(offset), max_scroll_offset(total_height, container_height)))


def apply_wheel_scroll(
    dy: float, current_offset: float, *, step_px: float, max_offset: float
) -> ScrollOutcome:
    """Convert a wheel delta into the next pixel offset."""
    if step_px <= 0.0:
        raise InvalidViewportConfigError("step_px", step_px, "> 0")
    if dy < 0 and current_offset > 0.0:
        return ScrollOutcome(handled=True, next_offset=max(0.0, current_offset - step_px))
    if dy > 0 and current_offset < max_offset:
        return ScrollOutcome(handled=True, next_offset=min(max_offset, current_offset + step_px))
    return ScrollOutcome(handled=False, next_offset=current_offset)


__all__ = [
    "ScrollOutcome",
    "ScrollPositionTracker",
    "apply_wheel_scroll",
    "clamp_scroll_offset",
    "max_scroll_offset",
    "scroll_offset_of",
]
