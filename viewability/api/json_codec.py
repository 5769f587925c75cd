"""JSON encoding for viewability diagnostics payloads."""

from __future__ import annotations

from typing import Any

import orjson


def dumps_text(payload: Any, *, sort_keys: bool = False) -> str:
    """Serialize payload to compact JSON text.

    Contract dataclasses such as ``RenderRange`` encode as objects; sets encode
    as sorted lists and anything else unknown falls back to ``repr``.
    """
    options = orjson.OPT_NON_STR_KEYS
    if sort_keys:
        options |= orjson.OPT_SORT_KEYS
    return orjson.dumps(payload, default=_fallback, option=options).decode("utf-8")


def _fallback(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    return repr(value)


__all__ = ["dumps_text"]
