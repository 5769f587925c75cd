"""Public viewability tracker contract and factories."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

from viewability.api.config import ViewabilityConfig
from viewability.api.contracts import (
    FrameMetricProps,
    FrameMetricsLookup,
    RenderRange,
    TimerScheduler,
    ViewabilityCallback,
    ViewTokenFactory,
)

if TYPE_CHECKING:
    from viewability.runtime.group import ViewabilityConfigCallbackPair, ViewabilityGroup


class ViewabilityTracker(Protocol):
    """Public viewability tracking contract."""

    def compute_viewable_items(
        self,
        props: FrameMetricProps,
        scroll_offset: float,
        viewport_height: float,
        get_frame_metrics: FrameMetricsLookup,
        render_range: RenderRange | None = None,
    ) -> list[int]:
        """Return viewable indices without touching tracker state."""

    def on_update(
        self,
        props: FrameMetricProps,
        scroll_offset: float,
        viewport_height: float,
        get_frame_metrics: FrameMetricsLookup,
        create_view_token: ViewTokenFactory,
        on_viewable_items_changed: ViewabilityCallback,
        render_range: RenderRange | None = None,
        on_window_items_changed: ViewabilityCallback | None = None,
    ) -> None:
        """Diff the current viewable set and notify callbacks on change."""

    def reset_viewable_indices(self) -> None:
        """Forget the last scan result."""

    def record_interaction(self) -> None:
        """Unblock trackers waiting for interaction."""

    def dispose(self) -> None:
        """Cancel pending deferred callbacks."""


def create_viewability_helper(
    config: ViewabilityConfig | None = None,
    *,
    scheduler: TimerScheduler | None = None,
) -> ViewabilityTracker:
    """Create default viewability tracker implementation."""
    from viewability.runtime.helper import ViewabilityHelper

    return ViewabilityHelper(config, scheduler=scheduler)


def create_viewability_group(
    pairs: Iterable[ViewabilityConfigCallbackPair],
    *,
    scheduler: TimerScheduler | None = None,
) -> ViewabilityGroup:
    """Create one tracker per config/callback pair."""
    from viewability.runtime.group import ViewabilityGroup

    return ViewabilityGroup.from_pairs(pairs, scheduler=scheduler)
