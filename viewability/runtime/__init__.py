"""Viewability runtime implementations."""

from viewability.runtime.config import load_viewability_config
from viewability.runtime.group import ViewabilityConfigCallbackPair, ViewabilityGroup
from viewability.runtime.helper import ViewabilityHelper
from viewability.runtime.metrics import MetricsCollector, NoopMetricsCollector, ViewabilityMetrics
from viewability.runtime.predicate import is_entirely_visible, is_viewable, pixels_visible
from viewability.runtime.scan import compute_viewable_indices
from viewability.runtime.scheduler import DeferredCallScheduler, LoopTimerScheduler

__all__ = [
    "DeferredCallScheduler",
    "LoopTimerScheduler",
    "MetricsCollector",
    "NoopMetricsCollector",
    "ViewabilityConfigCallbackPair",
    "ViewabilityGroup",
    "ViewabilityHelper",
    "ViewabilityMetrics",
    "compute_viewable_indices",
    "is_entirely_visible",
    "is_viewable",
    "load_viewability_config",
    "pixels_visible",
]
