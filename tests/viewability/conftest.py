from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from viewability.api.contracts import (
    FrameMetric,
    FrameMetricProps,
    ListProps,
    ViewabilityChange,
    ViewToken,
)


class FakeList:
    """Vertical list with fixed per-item lengths laid out back to back."""

    def __init__(self, lengths: Sequence[float], *, unmeasured: Sequence[int] = ()) -> None:
        self.items = [f"item-{index}" for index in range(len(lengths))]
        self.props = ListProps(data=self.items)
        self.unmeasured = set(unmeasured)
        self.metric_lookups: list[int] = []
        self._frames: list[FrameMetric] = []
        offset = 0.0
        for length in lengths:
            self._frames.append(FrameMetric(offset=offset, length=float(length)))
            offset += float(length)

    def get_frame_metrics(self, index: int, props: FrameMetricProps) -> FrameMetric | None:
        _ = props
        self.metric_lookups.append(index)
        if index in self.unmeasured or not 0 <= index < len(self._frames):
            return None
        return self._frames[index]

    def create_view_token(self, index: int, is_viewable: bool, props: FrameMetricProps) -> ViewToken:
        return ViewToken(
            key=f"key-{index}",
            item=props.data[index],
            index=index,
            is_viewable=is_viewable,
        )


@dataclass
class ChangeRecorder:
    calls: list[ViewabilityChange] = field(default_factory=list)

    def __call__(self, change: ViewabilityChange) -> None:
        self.calls.append(change)

    @property
    def last(self) -> ViewabilityChange:
        return self.calls[-1]


def keys(tokens: Sequence[ViewToken]) -> list[str]:
    return [token.key for token in tokens]


def flags(tokens: Sequence[ViewToken]) -> dict[str, bool]:
    return {token.key: token.is_viewable for token in tokens}
