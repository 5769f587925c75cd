"""Public viewability data contracts and host capability protocols."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias

if TYPE_CHECKING:
    from viewability.api.config import ViewabilityConfig


@dataclass(frozen=True, slots=True)
class FrameMetric:
    """Offset and length of one item along the scroll axis."""

    offset: float
    length: float


@dataclass(frozen=True, slots=True)
class RenderRange:
    """Inclusive index range the host currently has materialized."""

    first: int
    last: int


@dataclass(frozen=True, slots=True)
class ViewToken:
    """Viewability state of one item at the time a snapshot was taken.

    Tokens are never mutated. Exit events carry a copy produced with
    ``dataclasses.replace`` and ``is_viewable=False``.
    """

    key: str
    item: Any
    index: int | None
    is_viewable: bool
    is_in_view_port: bool | None = None
    section: Any = None


@dataclass(frozen=True, slots=True)
class ViewabilityChange:
    """Payload delivered to viewability callbacks."""

    viewable_items: tuple[ViewToken, ...]
    changed: tuple[ViewToken, ...]
    viewability_config: ViewabilityConfig


class FrameMetricProps(Protocol):
    """List state surface consumed by the scan engine."""

    @property
    def data(self) -> Any:
        """Return host-owned list data."""

    def get_item_count(self, data: Any) -> int:
        """Return number of items in ``data``."""


def _sequence_length(data: Sequence[Any]) -> int:
    return len(data)


@dataclass(frozen=True, slots=True)
class ListProps:
    """Default list state for hosts backed by a plain sequence."""

    data: Sequence[Any]
    item_count: Callable[[Sequence[Any]], int] = _sequence_length

    def get_item_count(self, data: Sequence[Any]) -> int:
        return int(self.item_count(data))


FrameMetricsLookup: TypeAlias = Callable[[int, FrameMetricProps], FrameMetric | None]
ViewTokenFactory: TypeAlias = Callable[[int, bool, FrameMetricProps], ViewToken]
ViewabilityCallback: TypeAlias = Callable[[ViewabilityChange], None]
TimerCallback: TypeAlias = Callable[[], None]


class TimerScheduler(Protocol):
    """Deferred-callback capability supplied by the host."""

    def call_later(self, delay_ms: float, callback: TimerCallback) -> int:
        """Invoke ``callback`` after ``delay_ms`` and return a cancellable handle."""

    def cancel(self, handle: int) -> None:
        """Cancel a pending callback if it has not run yet."""


__all__ = [
    "FrameMetric",
    "FrameMetricProps",
    "FrameMetricsLookup",
    "ListProps",
    "RenderRange",
    "TimerCallback",
    "TimerScheduler",
    "ViewToken",
    "ViewTokenFactory",
    "ViewabilityCallback",
    "ViewabilityChange",
]
