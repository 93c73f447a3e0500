"""Virtualized list viewport wiring scroll state to window recomputation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Generic, Literal, TypeAlias, TypeVar

from windowing.api.errors import InvalidViewportConfigError
from windowing.api.events import EventBus, Subscription
from windowing.api.viewport import RenderResult, ScrollEvent, ViewportGeometry, WindowChanged
from windowing.runtime.config import get_windowing_config
from windowing.runtime.metrics import (
    MetricsCollector,
    NoopMetricsCollector,
    create_metrics_collector,
)
from windowing.ui_runtime.range_calculator import compute_visible_range
from windowing.ui_runtime.scroll import ScrollPositionTracker, clamp_scroll_offset
from windowing.ui_runtime.slice_extractor import extract_slice

_LOG = logging.getLogger("windowing.viewport")

T = TypeVar("T")

ScrollAlign: TypeAlias = Literal["start", "center", "end"]


def offset_for_index(
    index: int,
    *,
    item_count: int,
    item_height: float,
    container_height: float,
    align: ScrollAlign = "start",
) -> float:
    """Return the clamped offset placing ``index`` at the given viewport edge."""
    if not 0 <= index < item_count:
        raise IndexError(f"index {index} out of range for {item_count} items")
    top = index * item_height
    if align == "start":
        target = top
    elif align == "end":
        target = top + item_height - container_height
    elif align == "center":
        target = top + (item_height - container_height) / 2.0
    else:
        raise InvalidViewportConfigError("align", align, "one of 'start', 'center', 'end'")
    return clamp_scroll_offset(target, item_count * item_height, container_height)


class VirtualListViewport(Generic[T]):
    """One mounted viewport over a fixed-height collection.

    Any input change (scroll offset, items, geometry) triggers a full,
    synchronous recomputation. The fresh ``RenderResult`` is returned to the
    caller, handed to every listener and, when a bus is attached, published
    as ``WindowChanged``.
    """

    def __init__(
        self,
        items: Sequence[T] = (),
        *,
        item_height: float,
        container_height: float,
        overscan: int | None = None,
        event_bus: EventBus | None = None,
        metrics: MetricsCollector | NoopMetricsCollector | None = None,
        tracker: ScrollPositionTracker | None = None,
    ) -> None:
        config = get_windowing_config()
        resolved_overscan = config.default_overscan if overscan is None else overscan
        self._geometry = self._build_geometry(item_height, container_height, resolved_overscan)
        self._items: Sequence[T] = items
        self._tracker = tracker if tracker is not None else ScrollPositionTracker()
        self._metrics = (
            metrics
            if metrics is not None
            else create_metrics_collector(
                enabled=config.metrics_enabled, window_size=config.metrics_window_size
            )
        )
        self._bus = event_bus
        self._bus_subscription: Subscription | None = None
        self._listeners: dict[int, Callable[[RenderResult[T]], None]] = {}
        self._next_listener_id = 1
        self._result: RenderResult[T] = self._recompute()

    # ----- state ------------------------------------------------------------
    @property
    def result(self) -> RenderResult[T]:
        return self._result

    @property
    def geometry(self) -> ViewportGeometry:
        return self._geometry

    @property
    def items(self) -> Sequence[T]:
        return self._items

    @property
    def scroll_offset(self) -> float:
        return self._tracker.offset

    @property
    def metrics(self) -> MetricsCollector | NoopMetricsCollector:
        return self._metrics

    # ----- inputs -----------------------------------------------------------
    def handle_scroll(self, event: object) -> RenderResult[T]:
        """Scroll-event handler; accepts a ScrollEvent, a number or a DOM-like event."""
        self._tracker.handle_scroll(event)
        self._metrics.record_scroll_update()
        return self._recompute()

    def set_items(self, items: Sequence[T]) -> RenderResult[T]:
        self._items = items
        return self._recompute()

    def set_geometry(
        self,
        *,
        item_height: float | None = None,
        container_height: float | None = None,
        overscan: int | None = None,
    ) -> RenderResult[T]:
        """Replace any subset of the geometry; a rejected change keeps the old one."""
        current = self._geometry
        self._geometry = self._build_geometry(
            current.item_height if item_height is None else item_height,
            current.container_height if container_height is None else container_height,
            current.overscan if overscan is None else overscan,
        )
        return self._recompute()

    def scroll_to_index(self, index: int, *, align: ScrollAlign = "start") -> RenderResult[T]:
        offset = offset_for_index(
            index,
            item_count=len(self._items),
            item_height=self._geometry.item_height,
            container_height=self._geometry.container_height,
            align=align,
        )
        return self.handle_scroll(offset)

    # ----- outputs ----------------------------------------------------------
    def add_listener(self, listener: Callable[[RenderResult[T]], None]) -> Subscription:
        subscription = Subscription(self._next_listener_id)
        self._next_listener_id += 1
        self._listeners[subscription.id] = listener
        return subscription

    def remove_listener(self, subscription: Subscription) -> None:
        self._listeners.pop(subscription.id, None)

    def bind(self, bus: EventBus) -> Subscription:
        """Follow ScrollEvents on ``bus`` and publish WindowChanged back to it."""
        self.unbind()
        self._bus = bus
        self._bus_subscription = bus.subscribe(ScrollEvent, self.handle_scroll)
        return self._bus_subscription

    def unbind(self) -> None:
        """Stop following ScrollEvents and stop publishing WindowChanged."""
        if self._bus is not None and self._bus_subscription is not None:
            self._bus.unsubscribe(self._bus_subscription)
        self._bus_subscription = None
        self._bus = None

    def close(self) -> None:
        """Tear down: drop listeners, detach from the bus and reset the offset.

        ``result`` is recomputed for the reset offset; nobody is notified.
        """
        self.unbind()
        self._listeners.clear()
        self._tracker.reset()
        self._recompute()

    # ----- internals --------------------------------------------------------
    @staticmethod
    def _build_geometry(
        item_height: float, container_height: float, overscan: int
    ) -> ViewportGeometry:
        try:
            return ViewportGeometry(item_height, container_height, overscan)
        except InvalidViewportConfigError as exc:
            _LOG.warning("viewport_config_rejected field=%s value=%r", exc.field, exc.value)
            raise

    def _recompute(self) -> RenderResult[T]:
        geometry = self._geometry
        visible_range = compute_visible_range(
            scroll_offset=self._tracker.offset,
            item_height=geometry.item_height,
            container_height=geometry.container_height,
            overscan=geometry.overscan,
            item_count=len(self._items),
        )
        result = extract_slice(self._items, visible_range, item_height=geometry.item_height)
        self._result = result
        self._metrics.record_recompute(len(result.visible_items))
        if _LOG.isEnabledFor(logging.DEBUG):
            _LOG.debug(
                "viewport_recomputed offset=%.1f start=%s end=%s count=%d total_height=%.1f",
                self._tracker.offset,
                result.start_index,
                result.end_index,
                len(result.visible_items),
                result.total_height,
            )
        for listener in tuple(self._listeners.values()):
            listener(result)
        if self._bus is not None:
            self._bus.publish(WindowChanged(result))
        return result


__all__ = ["ScrollAlign", "VirtualListViewport", "offset_for_index"]
