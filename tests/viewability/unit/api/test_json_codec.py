from __future__ import annotations

from viewability.api.contracts import RenderRange
from viewability.api.json_codec import dumps_text


def test_dumps_text_encodes_contract_dataclasses() -> None:
    payload = {"render_range": RenderRange(first=2, last=9), "item_count": 4}
    assert dumps_text(payload) == '{"render_range":{"first":2,"last":9},"item_count":4}'


def test_dumps_text_sorts_sets_and_keys() -> None:
    assert dumps_text({"b": {2, 1}, "a": 1}, sort_keys=True) == '{"a":1,"b":[1,2]}'


def test_dumps_text_falls_back_to_repr() -> None:
    class Opaque:
        def __repr__(self) -> str:
            return "<opaque>"

    assert dumps_text([Opaque()]) == '["<opaque>"]'
