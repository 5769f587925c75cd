"""Viewability tracking for virtualized, scrollable lists."""

from viewability.api import (
    FrameMetric,
    ListProps,
    RenderRange,
    ViewabilityChange,
    ViewabilityConfig,
    ViewabilityConfigError,
    ViewToken,
    create_viewability_group,
    create_viewability_helper,
)
from viewability.runtime import (
    DeferredCallScheduler,
    LoopTimerScheduler,
    ViewabilityConfigCallbackPair,
    ViewabilityGroup,
    ViewabilityHelper,
)

__all__ = [
    "DeferredCallScheduler",
    "FrameMetric",
    "ListProps",
    "LoopTimerScheduler",
    "RenderRange",
    "ViewToken",
    "ViewabilityChange",
    "ViewabilityConfig",
    "ViewabilityConfigCallbackPair",
    "ViewabilityConfigError",
    "ViewabilityGroup",
    "ViewabilityHelper",
    "create_viewability_group",
    "create_viewability_helper",
]
