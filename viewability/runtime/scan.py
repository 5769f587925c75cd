"""Early-exit scan producing the ascending viewable-index sequence."""

from __future__ import annotations

import logging

from viewability.api.config import ViewabilityConfig
from viewability.api.contracts import FrameMetricProps, FrameMetricsLookup, RenderRange
from viewability.api.json_codec import dumps_text
from viewability.runtime.predicate import is_viewable

_LOG = logging.getLogger("viewability.scan")


def compute_viewable_indices(
    config: ViewabilityConfig,
    props: FrameMetricProps,
    scroll_offset: float,
    viewport_height: float,
    get_frame_metrics: FrameMetricsLookup,
    render_range: RenderRange | None = None,
) -> list[int]:
    """Return indices in scan range whose items satisfy the viewability config.

    Offsets must increase with index inside the scanned range: scanning stops
    at the first non-overlapping item after the visible block.
    """
    item_count = props.get_item_count(props.data)
    viewable_indices: list[int] = []
    if item_count == 0:
        return viewable_indices
    if render_range is None:
        first, last = 0, item_count - 1
    else:
        first, last = render_range.first, render_range.last
    if last >= item_count:
        payload = {"render_range": render_range, "item_count": item_count}
        _LOG.warning(
            "Invalid render range computing viewability %s",
            dumps_text(payload),
            extra=payload,
        )
        return []

    view_area_mode = config.view_area_mode
    threshold = config.threshold_percent
    seen_visible = False
    for index in range(first, last + 1):
        metrics = get_frame_metrics(index, props)
        if metrics is None:
            continue
        top = metrics.offset - scroll_offset
        bottom = top + metrics.length
        if top < viewport_height and bottom > 0:
            seen_visible = True
            if is_viewable(
                view_area_mode,
                threshold,
                top,
                bottom,
                viewport_height,
                metrics.length,
            ):
                viewable_indices.append(index)
        elif seen_visible:
            break
    return viewable_indices
