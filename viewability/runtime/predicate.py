"""Geometric viewability predicate for one item against the viewport."""

from __future__ import annotations


def is_viewable(
    view_area_mode: bool,
    threshold_percent: float,
    top: float,
    bottom: float,
    viewport_height: float,
    item_length: float,
) -> bool:
    """Return whether an item spanning ``top``..``bottom`` counts as viewable.

    Fully visible items always qualify. Partially visible items qualify when
    the visible share of the viewport (area mode) or of the item itself
    reaches ``threshold_percent``.
    """
    if is_entirely_visible(top, bottom, viewport_height):
        return True
    pixels = pixels_visible(top, bottom, viewport_height)
    denominator = viewport_height if view_area_mode else item_length
    if denominator <= 0:
        return False
    percent = 100 * pixels / denominator
    return percent >= threshold_percent


def pixels_visible(top: float, bottom: float, viewport_height: float) -> float:
    visible_height = min(bottom, viewport_height) - max(top, 0)
    return max(0, visible_height)


def is_entirely_visible(top: float, bottom: float, viewport_height: float) -> bool:
    return top >= 0 and bottom <= viewport_height and bottom > top
