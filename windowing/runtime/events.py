"""In-process event bus carrying scroll notifications and window changes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from windowing.api.events import Subscription

TEvent = TypeVar("TEvent")
EventHandler = Callable[[Any], None]


class RuntimeEventBus:
    """Synchronous typed pub/sub; handlers run in subscription order."""

    def __init__(self) -> None:
        self._next_id = 1
        self._handlers: dict[int, tuple[type[object], EventHandler]] = {}
        self._metrics: object | None = None
        self._per_topic_counts = False

    def set_metrics_collector(
        self, metrics_collector: object | None, *, per_topic_counts_enabled: bool = False
    ) -> None:
        """Attach optional collector for publish counts, optionally per event type."""
        self._metrics = metrics_collector
        self._per_topic_counts = bool(per_topic_counts_enabled)

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        subscription = Subscription(self._next_id)
        self._next_id += 1
        self._handlers[subscription.id] = (event_type, handler)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription; unknown tokens are ignored."""
        self._handlers.pop(subscription.id, None)

    def publish(self, event: object) -> int:
        """Dispatch to every handler whose type matches; return the invoke count."""
        self._count_publish(event)
        invoked = 0
        # Handlers may unsubscribe while we iterate.
        for event_type, handler in tuple(self._handlers.values()):
            if not isinstance(event, event_type):
                continue
            handler(event)
            invoked += 1
        return invoked

    def subscription_count(self) -> int:
        return len(self._handlers)

    def _count_publish(self, event: object) -> None:
        metrics = self._metrics
        if metrics is None:
            return
        if hasattr(metrics, "increment_event_publish_count"):
            metrics.increment_event_publish_count(1)
        if self._per_topic_counts and hasattr(metrics, "increment_event_publish_topic"):
            metrics.increment_event_publish_topic(type(event).__name__, 1)


EventBus = RuntimeEventBus
