"""Counters for viewability update activity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class ViewabilityMetrics:
    """Read-only snapshot of helper activity counters."""

    update_count: int = 0
    gated_update_count: int = 0
    short_circuit_count: int = 0
    scan_count: int = 0
    timers_scheduled: int = 0
    timers_cancelled: int = 0
    viewable_callback_count: int = 0
    window_callback_count: int = 0


class ViewabilityMetricsSink(Protocol):
    def increment(self, counter: str, count: int = 1) -> None: ...

    def snapshot(self) -> ViewabilityMetrics: ...


class NoopMetricsCollector:
    """No-op collector for zero-impact disabled mode."""

    def increment(self, counter: str, count: int = 1) -> None:
        _ = (counter, count)

    def snapshot(self) -> ViewabilityMetrics:
        return ViewabilityMetrics()


class MetricsCollector:
    """Small in-memory counter collector."""

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def increment(self, counter: str, count: int = 1) -> None:
        if counter not in ViewabilityMetrics.__dataclass_fields__:
            raise ValueError(f"unknown viewability counter: {counter}")
        self._counts[counter] = self._counts.get(counter, 0) + int(count)

    def reset(self) -> None:
        self._counts = {}

    def snapshot(self) -> ViewabilityMetrics:
        return ViewabilityMetrics(**self._counts)
