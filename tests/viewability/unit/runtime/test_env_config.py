from __future__ import annotations

from viewability.api.config import ViewabilityConfig
from viewability.runtime.config import load_viewability_config


def test_load_viewability_config_defaults_to_area_zero() -> None:
    assert load_viewability_config(env={}) == ViewabilityConfig.default()


def test_load_viewability_config_reads_env_values() -> None:
    config = load_viewability_config(
        env={
            "VIEWABILITY_ITEM_VISIBLE_PERCENT": "75",
            "VIEWABILITY_MINIMUM_VIEW_TIME_MS": "250",
            "VIEWABILITY_WAIT_FOR_INTERACTION": "yes",
            "VIEWABILITY_WINDOW_OFFSET": "4",
        }
    )
    assert config.item_visible_percent_threshold == 75.0
    assert config.view_area_coverage_percent_threshold is None
    assert config.minimum_view_time_ms == 250.0
    assert config.wait_for_interaction
    assert config.effective_window_offset == 4


def test_load_viewability_config_ignores_malformed_numbers() -> None:
    config = load_viewability_config(
        env={
            "VIEWABILITY_VIEW_AREA_COVERAGE_PERCENT": "half",
            "VIEWABILITY_MINIMUM_VIEW_TIME_MS": "-10",
            "VIEWABILITY_WINDOW_OFFSET": "x",
            "VIEWABILITY_WAIT_FOR_INTERACTION": "maybe",
        }
    )
    assert config.view_area_coverage_percent_threshold == 0.0
    assert config.minimum_view_time_ms == 0.0
    assert not config.debounced
    assert config.window_offset is None
    assert not config.wait_for_interaction


def test_load_viewability_config_reads_process_env(monkeypatch) -> None:
    monkeypatch.setenv("VIEWABILITY_VIEW_AREA_COVERAGE_PERCENT", "30")
    assert load_viewability_config().threshold_percent == 30.0
