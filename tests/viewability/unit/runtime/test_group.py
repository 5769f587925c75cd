from __future__ import annotations

import pytest

from tests.viewability.conftest import ChangeRecorder, FakeList, keys
from viewability.api.config import ViewabilityConfig
from viewability.api.errors import ViewabilityConfigError
from viewability.api.helper import create_viewability_group
from viewability.runtime.group import ViewabilityConfigCallbackPair, ViewabilityGroup
from viewability.runtime.scheduler import DeferredCallScheduler


def test_group_reports_each_pair_with_its_own_config() -> None:
    fake = FakeList([50] * 20)
    any_pixel = ChangeRecorder()
    fully_visible = ChangeRecorder()
    window = ChangeRecorder()
    group = ViewabilityGroup(
        [
            ViewabilityConfigCallbackPair(ViewabilityConfig.default(), any_pixel, window),
            ViewabilityConfigCallbackPair(
                ViewabilityConfig(item_visible_percent_threshold=100), fully_visible
            ),
        ]
    )

    group.on_update(fake.props, 25, 100, fake.get_frame_metrics, fake.create_view_token)

    assert keys(any_pixel.last.viewable_items) == ["key-0", "key-1", "key-2"]
    assert keys(fully_visible.last.viewable_items) == ["key-1"]
    assert len(window.calls) == 1


def test_group_fans_out_lifecycle_calls() -> None:
    fake = FakeList([50] * 20)
    scheduler = DeferredCallScheduler()
    gated = ChangeRecorder()
    debounced = ChangeRecorder()
    group = create_viewability_group(
        [
            ViewabilityConfigCallbackPair(
                ViewabilityConfig(view_area_coverage_percent_threshold=0, wait_for_interaction=True),
                gated,
            ),
            ViewabilityConfigCallbackPair(
                ViewabilityConfig(view_area_coverage_percent_threshold=0, minimum_view_time_ms=100),
                debounced,
            ),
        ],
        scheduler=scheduler,
    )

    group.on_update(fake.props, 0, 100, fake.get_frame_metrics, fake.create_view_token)
    assert gated.calls == []

    group.record_interaction()
    assert all(helper.has_interacted for helper in group.helpers)

    group.reset_viewable_indices()
    group.on_update(fake.props, 0, 100, fake.get_frame_metrics, fake.create_view_token)
    assert keys(gated.last.viewable_items) == ["key-0", "key-1"]

    group.dispose()
    scheduler.advance(1000)
    assert debounced.calls == []


def test_group_requires_at_least_one_pair() -> None:
    with pytest.raises(ViewabilityConfigError):
        ViewabilityGroup.from_pairs([])
