"""Recompute metrics for viewport diagnostics."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class RecomputeMetrics:
    """Read-only snapshot of viewport recomputation activity."""

    recompute_count: int
    scroll_update_count: int
    last_window_size: int
    rolling_window_size: float
    max_window_size: int
    event_publish_count: int = 0
    event_publish_by_topic: dict[str, int] = field(default_factory=dict)


class NoopMetricsCollector:
    """No-op collector for zero-impact disabled mode."""

    def record_scroll_update(self) -> None:
        return None

    def record_recompute(self, window_size: int) -> None:
        _ = window_size

    def increment_event_publish_count(self, count: int = 1) -> None:
        _ = count

    def increment_event_publish_topic(self, topic: str, count: int = 1) -> None:
        _ = (topic, count)

    def snapshot(self) -> RecomputeMetrics:
        return RecomputeMetrics(
            recompute_count=0,
            scroll_update_count=0,
            last_window_size=0,
            rolling_window_size=0.0,
            max_window_size=0,
        )


class MetricsCollector:
    """In-memory counters with a rolling average of realized window sizes.

    Scroll updates and recomputations are counted separately so callers can
    see how many recomputations each burst of scroll events produced.
    """

    def __init__(self, *, window_size: int = 60) -> None:
        self._window_size = max(1, int(window_size))
        self._sizes: deque[int] = deque(maxlen=self._window_size)
        self._recompute_count = 0
        self._scroll_update_count = 0
        self._max_window_size = 0
        self._event_publish_count = 0
        self._event_publish_by_topic: dict[str, int] = {}

    def record_scroll_update(self) -> None:
        self._scroll_update_count += 1

    def record_recompute(self, window_size: int) -> None:
        size = max(0, int(window_size))
        self._recompute_count += 1
        self._sizes.append(size)
        self._max_window_size = max(self._max_window_size, size)

    def increment_event_publish_count(self, count: int = 1) -> None:
        self._event_publish_count += int(count)

    def increment_event_publish_topic(self, topic: str, count: int = 1) -> None:
        normalized = str(topic).strip()
        if not normalized:
            return
        self._event_publish_by_topic[normalized] = (
            self._event_publish_by_topic.get(normalized, 0) + int(count)
        )

    def snapshot(self) -> RecomputeMetrics:
        rolling = (sum(self._sizes) / len(self._sizes)) if self._sizes else 0.0
        return RecomputeMetrics(
            recompute_count=self._recompute_count,
            scroll_update_count=self._scroll_update_count,
            last_window_size=self._sizes[-1] if self._sizes else 0,
            rolling_window_size=rolling,
            max_window_size=self._max_window_size,
            event_publish_count=self._event_publish_count,
            event_publish_by_topic=dict(self._event_publish_by_topic),
        )


def create_metrics_collector(
    *, enabled: bool, window_size: int = 60
) -> MetricsCollector | NoopMetricsCollector:
    """Factory returning enabled collector or no-op implementation."""
    if not enabled:
        return NoopMetricsCollector()
    return MetricsCollector(window_size=window_size)


__all__ = [
    "MetricsCollector",
    "NoopMetricsCollector",
    "RecomputeMetrics",
    "create_metrics_collector",
]
