"""Environment-sourced viewability configuration."""

from __future__ import annotations

import os
from typing import Mapping

from viewability.api.config import ViewabilityConfig


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    if value is None or not str(value).strip():
        return None
    return str(value).strip()


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _optional_float(name: str, *, env: Mapping[str, str] | None = None) -> float | None:
    raw = _raw(name, env=env)
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def _optional_int(name: str, *, env: Mapping[str, str] | None = None) -> int | None:
    raw = _raw(name, env=env)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def load_viewability_config(*, env: Mapping[str, str] | None = None) -> ViewabilityConfig:
    """Load an immutable viewability config from env vars."""
    area = _optional_float("VIEWABILITY_VIEW_AREA_COVERAGE_PERCENT", env=env)
    item = _optional_float("VIEWABILITY_ITEM_VISIBLE_PERCENT", env=env)
    if area is None and item is None:
        area = 0.0
    minimum_view_time_ms = _optional_float("VIEWABILITY_MINIMUM_VIEW_TIME_MS", env=env)
    if minimum_view_time_ms is not None:
        minimum_view_time_ms = max(0.0, minimum_view_time_ms)
    window_offset = _optional_int("VIEWABILITY_WINDOW_OFFSET", env=env)
    if window_offset is not None:
        window_offset = max(0, window_offset)
    return ViewabilityConfig(
        view_area_coverage_percent_threshold=area,
        item_visible_percent_threshold=item,
        minimum_view_time_ms=minimum_view_time_ms,
        wait_for_interaction=_flag("VIEWABILITY_WAIT_FOR_INTERACTION", False, env=env),
        window_offset=window_offset,
    )
