"""Metric aggregations: single values and top hits computed over a bucket."""

from __future__ import annotations

from typing import Any

from .base import AggregationBase, ParentAggregation


def _field_body(field: str, missing: int = 0) -> dict[str, Any]:
    body: dict[str, Any] = {}
    if field:
        body["field"] = field
    if missing != 0:
        body["missing"] = missing
    return body


class CardinalityAggregation(AggregationBase):
    """Approximate count of distinct values of ``field``."""

    def __init__(self, name: str, field: str = "") -> None:
        super().__init__(name)
        self.field = field

    def body(self) -> dict[str, Any]:
        return {"cardinality": _field_body(self.field)}


class MaxAggregation(ParentAggregation):
    """Maximum value of ``field``."""

    def __init__(
        self,
        name: str,
        field: str = "",
        script: str = "",
        format: str = "",
        missing: int = 0,
    ) -> None:
        super().__init__(name)
        self.field = field
        self.script = script
        self.format = format
        self.missing = missing

    def body(self) -> dict[str, Any]:
        value = _field_body(self.field, self.missing)
        if self.format:
            value["format"] = self.format
        return self._with_children({"max": value})


class MinAggregation(ParentAggregation):
    """Minimum value of ``field``."""

    def __init__(self, name: str, field: str = "", script: str = "", missing: int = 0) -> None:
        super().__init__(name)
        self.field = field
        self.script = script
        self.missing = missing

    def body(self) -> dict[str, Any]:
        return self._with_children({"min": _field_body(self.field, self.missing)})


class StatsAggregation(ParentAggregation):
    """Count, min, max, sum and average of ``field``."""

    def __init__(self, name: str, field: str = "", script: str = "", missing: int = 0) -> None:
        super().__init__(name)
        self.field = field
        self.script = script
        self.missing = missing

    def body(self) -> dict[str, Any]:
        return self._with_children({"stats": _field_body(self.field, self.missing)})


class SumAggregation(ParentAggregation):
    """Sum of the values of ``field``."""

    def __init__(self, name: str, field: str = "", script: str = "", missing: int = 0) -> None:
        super().__init__(name)
        self.field = field
        self.script = script
        self.missing = missing

    def body(self) -> dict[str, Any]:
        return self._with_children({"sum": _field_body(self.field, self.missing)})


class ValueCountAggregation(ParentAggregation):
    """Number of values of ``field``."""

    def __init__(self, name: str, field: str = "", script: str = "") -> None:
        super().__init__(name)
        self.field = field
        self.script = script

    def body(self) -> dict[str, Any]:
        return self._with_children({"value_count": _field_body(self.field)})


class TopHitsAggregation(ParentAggregation):
    """The most relevant documents of each bucket.

    When ``script`` is set it is sent as the ``_source`` includes and any
    sort order is left out.
    """

    def __init__(self, name: str, size: int = 10, script: str = "") -> None:
        super().__init__(name)
        self.size = size
        self.script = script
        self.sort: list[tuple[str, str]] = []

    def add_sort(self, field: str, order: str) -> TopHitsAggregation:
        """Sort hits by ``field`` in ``order``; later sorts on a field win."""
        self.sort.append((field, order))
        return self

    def body(self) -> dict[str, Any]:
        value: dict[str, Any]
        if self.script:
            value = {"_source": {"includes": self.script}, "size": self.size}
        else:
            value = {"size": self.size}
            if self.sort:
                value["sort"] = dict(self.sort)
        return self._with_children({"top_hits": value})