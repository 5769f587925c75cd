from __future__ import annotations

import pytest

from viewability.runtime.metrics import MetricsCollector, NoopMetricsCollector, ViewabilityMetrics


def test_metrics_collector_accumulates_known_counters() -> None:
    collector = MetricsCollector()
    collector.increment("scan_count")
    collector.increment("scan_count", 2)
    collector.increment("timers_cancelled", 3)

    assert collector.snapshot() == ViewabilityMetrics(scan_count=3, timers_cancelled=3)

    collector.reset()
    assert collector.snapshot() == ViewabilityMetrics()


def test_metrics_collector_rejects_unknown_counter() -> None:
    with pytest.raises(ValueError):
        MetricsCollector().increment("frames")


def test_noop_collector_reports_empty_snapshot() -> None:
    collector = NoopMetricsCollector()
    collector.increment("scan_count")
    assert collector.snapshot() == ViewabilityMetrics()
