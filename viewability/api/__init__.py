"""Public viewability API boundary."""

from viewability.api.config import DEFAULT_WINDOW_OFFSET, ViewabilityConfig
from viewability.api.contracts import (
    FrameMetric,
    FrameMetricProps,
    FrameMetricsLookup,
    ListProps,
    RenderRange,
    TimerScheduler,
    ViewabilityCallback,
    ViewabilityChange,
    ViewToken,
    ViewTokenFactory,
)
from viewability.api.errors import ViewabilityConfigError
from viewability.api.helper import (
    ViewabilityTracker,
    create_viewability_group,
    create_viewability_helper,
)

__all__ = [
    "DEFAULT_WINDOW_OFFSET",
    "FrameMetric",
    "FrameMetricProps",
    "FrameMetricsLookup",
    "ListProps",
    "RenderRange",
    "TimerScheduler",
    "ViewToken",
    "ViewTokenFactory",
    "ViewabilityCallback",
    "ViewabilityChange",
    "ViewabilityConfig",
    "ViewabilityConfigError",
    "ViewabilityTracker",
    "create_viewability_group",
    "create_viewability_helper",
]
