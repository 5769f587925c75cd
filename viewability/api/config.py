"""Public viewability configuration contract."""

from __future__ import annotations

from dataclasses import dataclass

from viewability.api.errors import ViewabilityConfigError

DEFAULT_WINDOW_OFFSET = 2


@dataclass(frozen=True, slots=True)
class ViewabilityConfig:
    """Immutable parameters for the viewability predicate and debounce.

    Exactly one of ``view_area_coverage_percent_threshold`` (percent of the
    viewport an item must cover) or ``item_visible_percent_threshold``
    (percent of the item that must be visible) is required. Fully visible
    items are always viewable.

    ``minimum_view_time_ms`` delays reporting until items stay viewable for
    that long. ``wait_for_interaction`` suppresses reporting until the host
    records a scroll or other interaction. ``window_offset`` is the margin of
    neighbouring indices reported to window callbacks.
    """

    view_area_coverage_percent_threshold: float | None = None
    item_visible_percent_threshold: float | None = None
    minimum_view_time_ms: float | None = None
    wait_for_interaction: bool = False
    window_offset: int | None = None

    def __post_init__(self) -> None:
        area = self.view_area_coverage_percent_threshold
        item = self.item_visible_percent_threshold
        if (area is None) == (item is None):
            raise ViewabilityConfigError(
                "Must set exactly one of item_visible_percent_threshold "
                "or view_area_coverage_percent_threshold"
            )
        threshold = area if area is not None else item
        if not 0.0 <= float(threshold) <= 100.0:
            raise ViewabilityConfigError("viewability threshold must be within 0-100")
        if self.minimum_view_time_ms is not None and self.minimum_view_time_ms < 0:
            raise ViewabilityConfigError("minimum_view_time_ms must be >= 0")
        if self.window_offset is not None and self.window_offset < 0:
            raise ViewabilityConfigError("window_offset must be >= 0")

    @classmethod
    def default(cls) -> ViewabilityConfig:
        """Return the config used when a host supplies none."""
        return cls(view_area_coverage_percent_threshold=0)

    @property
    def view_area_mode(self) -> bool:
        return self.view_area_coverage_percent_threshold is not None

    @property
    def threshold_percent(self) -> float:
        if self.view_area_coverage_percent_threshold is not None:
            return float(self.view_area_coverage_percent_threshold)
        return float(self.item_visible_percent_threshold or 0)

    @property
    def debounced(self) -> bool:
        return bool(self.minimum_view_time_ms)

    @property
    def effective_window_offset(self) -> int:
        # Zero falls back to the default margin as well.
        return int(self.window_offset or DEFAULT_WINDOW_OFFSET)
