"""JSON helpers shared by the query, aggregation and mapping builders."""

from __future__ import annotations

import copy
import json
from typing import Any


def merge(a: Any, b: Any) -> Any:
    """Return ``a`` deep-merged with ``b``.

    Where both values are objects, their keys are merged recursively.
    Anywhere else the value from ``b`` replaces the one from ``a``.
    Neither argument is modified.
    """
    if isinstance(a, dict) and isinstance(b, dict):
        merged = copy.deepcopy(a)
        for key, value in b.items():
            merged[key] = merge(merged.get(key), value)
        return merged
    return copy.deepcopy(b)


def to_json(value: Any) -> str:
    """Serialise ``value`` as compact JSON with object keys in sorted order."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)