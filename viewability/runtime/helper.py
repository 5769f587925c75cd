"""Stateful viewability change tracking for scrollable lists."""

from __future__ import annotations

import logging
from dataclasses import replace

from viewability.api.config import ViewabilityConfig
from viewability.api.contracts import (
    FrameMetricProps,
    FrameMetricsLookup,
    RenderRange,
    TimerScheduler,
    ViewabilityCallback,
    ViewabilityChange,
    ViewToken,
    ViewTokenFactory,
)
from viewability.api.errors import ViewabilityConfigError
from viewability.runtime.metrics import NoopMetricsCollector, ViewabilityMetricsSink
from viewability.runtime.scan import compute_viewable_indices

_LOG = logging.getLogger("viewability.helper")


class ViewabilityHelper:
    """Tracks which list items are viewable and reports changes.

    An item is viewable when it is entirely on screen, or when it meets the
    configured coverage threshold, for at least ``minimum_view_time_ms``
    (after an interaction when ``wait_for_interaction`` is set). The host calls
    ``on_update`` whenever scroll or layout state changes; callbacks fire only
    when the reported set changes.

    A second, undebounced tracker reports a window of viewable items padded by
    ``window_offset`` neighbours on each side.
    """

    def __init__(
        self,
        config: ViewabilityConfig | None = None,
        *,
        scheduler: TimerScheduler | None = None,
        metrics: ViewabilityMetricsSink | None = None,
    ) -> None:
        self._config = config if config is not None else ViewabilityConfig.default()
        if self._config.debounced and scheduler is None:
            raise ViewabilityConfigError("minimum_view_time_ms requires a timer scheduler")
        self._scheduler = scheduler
        self._metrics: ViewabilityMetricsSink = metrics or NoopMetricsCollector()
        self._has_interacted = False
        self._timers: set[int] = set()
        self._viewable_indices: list[int] = []
        self._viewable_items: dict[str, ViewToken] = {}
        self._window_items: dict[str, ViewToken] = {}

    @property
    def config(self) -> ViewabilityConfig:
        return self._config

    @property
    def has_interacted(self) -> bool:
        return self._has_interacted

    @property
    def viewable_indices(self) -> tuple[int, ...]:
        return tuple(self._viewable_indices)

    @property
    def viewable_items(self) -> tuple[ViewToken, ...]:
        """Return tokens from the last reported viewable snapshot."""
        return tuple(self._viewable_items.values())

    @property
    def window_items(self) -> tuple[ViewToken, ...]:
        """Return tokens from the last reported window snapshot."""
        return tuple(self._window_items.values())

    @property
    def pending_timer_count(self) -> int:
        return len(self._timers)

    def dispose(self) -> None:
        """Cancel pending debounce timers, e.g. when the host list unmounts."""
        scheduler = self._scheduler
        if scheduler is None or not self._timers:
            return
        _LOG.debug("viewability.dispose cancelled=%d", len(self._timers))
        for handle in self._timers:
            scheduler.cancel(handle)
        self._metrics.increment("timers_cancelled", len(self._timers))
        self._timers.clear()

    def compute_viewable_items(
        self,
        props: FrameMetricProps,
        scroll_offset: float,
        viewport_height: float,
        get_frame_metrics: FrameMetricsLookup,
        render_range: RenderRange | None = None,
    ) -> list[int]:
        """Return ascending indices that are viewable for the given metrics."""
        self._metrics.increment("scan_count")
        return compute_viewable_indices(
            self._config,
            props,
            scroll_offset,
            viewport_height,
            get_frame_metrics,
            render_range,
        )

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
        """Recompute viewable items and report changes to the callbacks."""
        self._metrics.increment("update_count")
        item_count = props.get_item_count(props.data)
        if (
            (self._config.wait_for_interaction and not self._has_interacted)
            or item_count == 0
            or get_frame_metrics(0, props) is None
        ):
            self._metrics.increment("gated_update_count")
            return
        viewable_indices = self.compute_viewable_items(
            props,
            scroll_offset,
            viewport_height,
            get_frame_metrics,
            render_range,
        )
        if viewable_indices == self._viewable_indices:
            # Most scroll frames leave the viewable set unchanged.
            self._metrics.increment("short_circuit_count")
            return
        self._viewable_indices = viewable_indices

        if viewable_indices and on_window_items_changed is not None:
            self._update_window_items(
                props,
                viewable_indices,
                item_count,
                on_window_items_changed,
                create_view_token,
            )

        scheduler = self._scheduler
        if scheduler is not None and self._config.debounced:
            self._schedule_update(
                scheduler,
                props,
                viewable_indices,
                on_viewable_items_changed,
                create_view_token,
            )
        else:
            self._update_viewable_items(
                props,
                viewable_indices,
                on_viewable_items_changed,
                create_view_token,
            )

    def reset_viewable_indices(self) -> None:
        """Forget the last scan so the next update re-evaluates every item."""
        self._viewable_indices = []

    def record_interaction(self) -> None:
        """Record that an interaction happened even if there was no scroll."""
        self._has_interacted = True

    def _schedule_update(
        self,
        scheduler: TimerScheduler,
        props: FrameMetricProps,
        viewable_indices: list[int],
        on_viewable_items_changed: ViewabilityCallback,
        create_view_token: ViewTokenFactory,
    ) -> None:
        handle = 0

        def _fire() -> None:
            self._timers.discard(handle)
            self._update_viewable_items(
                props,
                viewable_indices,
                on_viewable_items_changed,
                create_view_token,
            )

        handle = scheduler.call_later(float(self._config.minimum_view_time_ms or 0), _fire)
        self._timers.add(handle)
        self._metrics.increment("timers_scheduled")

    def _update_viewable_items(
        self,
        props: FrameMetricProps,
        indices_to_check: list[int],
        on_viewable_items_changed: ViewabilityCallback,
        create_view_token: ViewTokenFactory,
    ) -> None:
        # Drop indices that left the view while this update was pending.
        current = set(self._viewable_indices)
        next_items: dict[str, ViewToken] = {}
        for index in indices_to_check:
            if index in current:
                token = create_view_token(index, True, props)
                next_items[token.key] = token
        changed = _diff_snapshots(self._viewable_items, next_items, is_in_view_port=None)
        if not changed:
            return
        self._viewable_items = next_items
        self._metrics.increment("viewable_callback_count")
        on_viewable_items_changed(
            ViewabilityChange(
                viewable_items=tuple(next_items.values()),
                changed=changed,
                viewability_config=self._config,
            )
        )

    def _update_window_items(
        self,
        props: FrameMetricProps,
        viewable_indices: list[int],
        item_count: int,
        on_window_items_changed: ViewabilityCallback,
        create_view_token: ViewTokenFactory,
    ) -> None:
        current = set(self._viewable_indices)
        viewable = [index for index in viewable_indices if index in current]
        if not viewable:
            return
        offset = self._config.effective_window_offset
        window_indices = [
            *range(viewable[0] - offset, viewable[0]),
            *viewable,
            *range(viewable[-1] + 1, viewable[-1] + 1 + offset),
        ]
        viewable_set = set(viewable)
        next_items: dict[str, ViewToken] = {}
        for index in window_indices:
            # Bounded by the host's item count, not len(props.data).
            if 0 <= index < item_count:
                token = create_view_token(index, index in viewable_set, props)
                next_items[token.key] = replace(token, is_in_view_port=True)
        changed = _diff_snapshots(self._window_items, next_items, is_in_view_port=False)
        if not changed:
            return
        self._window_items = next_items
        self._metrics.increment("window_callback_count")
        on_window_items_changed(
            ViewabilityChange(
                viewable_items=tuple(next_items.values()),
                changed=changed,
                viewability_config=self._config,
            )
        )


def _diff_snapshots(
    previous: dict[str, ViewToken],
    current: dict[str, ViewToken],
    *,
    is_in_view_port: bool | None,
) -> tuple[ViewToken, ...]:
    """Return tokens added to ``current`` followed by exit copies of removed ones."""
    added = [token for key, token in current.items() if key not in previous]
    removed = [
        replace(token, is_viewable=False)
        if is_in_view_port is None
        else replace(token, is_viewable=False, is_in_view_port=is_in_view_port)
        for key, token in previous.items()
        if key not in current
    ]
    return (*added, *removed)
