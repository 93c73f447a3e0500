from __future__ import annotations

from dataclasses import dataclass

import pytest

from windowing.api.viewport import RenderResult
from windowing.runtime.config import load_windowing_config, set_windowing_config


@dataclass(frozen=True, slots=True)
class FakeDomScrollEvent:
    """Stand-in for a browser-style scroll event exposing ``scroll_top``."""

    scroll_top: float


class RecordingListener:
    def __init__(self) -> None:
        self.results: list[RenderResult] = []

    def __call__(self, result: RenderResult) -> None:
        self.results.append(result)


class RecordingMetrics:
    def __init__(self) -> None:
        self.scroll_updates = 0
        self.recomputes: list[int] = []
        self.published = 0
        self.by_topic: dict[str, int] = {}

    def record_scroll_update(self) -> None:
        self.scroll_updates += 1

    def record_recompute(self, window_size: int) -> None:
        self.recomputes.append(window_size)

    def increment_event_publish_count(self, count: int = 1) -> None:
        self.published += count

    def increment_event_publish_topic(self, topic: str, count: int = 1) -> None:
        self.by_topic[topic] = self.by_topic.get(topic, 0) + count


@pytest.fixture(autouse=True)
def default_windowing_config():
    """Pin config to defaults so host env vars never leak into tests."""
    return set_windowing_config(load_windowing_config(env={}))


@pytest.fixture
def thousand_items() -> list[str]:
    return [f"item-{idx}" for idx in range(1000)]


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def recording_metrics() -> RecordingMetrics:
    return RecordingMetrics()


@pytest.fixture
def dom_event_factory():
    return FakeDomScrollEvent
