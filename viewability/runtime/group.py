"""Fan-out of list updates to one helper per config/callback pair."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from viewability.api.config import ViewabilityConfig
from viewability.api.contracts import (
    FrameMetricProps,
    FrameMetricsLookup,
    RenderRange,
    TimerScheduler,
    ViewabilityCallback,
    ViewTokenFactory,
)
from viewability.api.errors import ViewabilityConfigError
from viewability.runtime.helper import ViewabilityHelper
from viewability.runtime.metrics import ViewabilityMetricsSink


@dataclass(frozen=True, slots=True)
class ViewabilityConfigCallbackPair:
    """One viewability config with the callbacks it reports to."""

    viewability_config: ViewabilityConfig
    on_viewable_items_changed: ViewabilityCallback
    on_window_items_changed: ViewabilityCallback | None = None


class ViewabilityGroup:
    """Drives several independently configured helpers from one list host."""

    def __init__(
        self,
        pairs: Sequence[ViewabilityConfigCallbackPair],
        *,
        scheduler: TimerScheduler | None = None,
        metrics: ViewabilityMetricsSink | None = None,
    ) -> None:
        self._entries: tuple[tuple[ViewabilityHelper, ViewabilityConfigCallbackPair], ...] = tuple(
            (
                ViewabilityHelper(pair.viewability_config, scheduler=scheduler, metrics=metrics),
                pair,
            )
            for pair in pairs
        )

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[ViewabilityConfigCallbackPair],
        *,
        scheduler: TimerScheduler | None = None,
        metrics: ViewabilityMetricsSink | None = None,
    ) -> ViewabilityGroup:
        normalized = tuple(pairs)
        if not normalized:
            raise ViewabilityConfigError("at least one viewability config callback pair is required")
        return cls(normalized, scheduler=scheduler, metrics=metrics)

    @property
    def helpers(self) -> tuple[ViewabilityHelper, ...]:
        return tuple(helper for helper, _ in self._entries)

    def on_update(
        self,
        props: FrameMetricProps,
        scroll_offset: float,
        viewport_height: float,
        get_frame_metrics: FrameMetricsLookup,
        create_view_token: ViewTokenFactory,
        render_range: RenderRange | None = None,
    ) -> None:
        for helper, pair in self._entries:
            helper.on_update(
                props,
                scroll_offset,
                viewport_height,
                get_frame_metrics,
                create_view_token,
                pair.on_viewable_items_changed,
                render_range,
                pair.on_window_items_changed,
            )

    def reset_viewable_indices(self) -> None:
        for helper, _ in self._entries:
            helper.reset_viewable_indices()

    def record_interaction(self) -> None:
        for helper, _ in self._entries:
            helper.record_interaction()

    def dispose(self) -> None:
        for helper, _ in self._entries:
            helper.dispose()
