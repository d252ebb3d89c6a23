"""Base classes for queries and aggregations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .util import merge, to_json


class Query(ABC):
    """A search query that renders to a JSON object."""

    @abstractmethod
    def build(self) -> dict[str, Any]:
        """Return the query as a JSON-compatible dictionary."""

    def __str__(self) -> str:
        return to_json(self.build())


class AggregationBase(ABC):
    """A named aggregation; ``build`` wraps ``body`` under the name."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def body(self) -> dict[str, Any]:
        """Return the aggregation definition without its name."""

    def build(self) -> dict[str, Any]:
        return {self.name: self.body()}

    def __str__(self) -> str:
        return to_json(self.build())


class ParentAggregation(AggregationBase):
    """An aggregation that can hold sub-aggregations under ``aggs``."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.aggregation: dict[str, Any] | None = None

    def set_aggregation(self, aggregation: AggregationBase) -> ParentAggregation:
        """Replace all sub-aggregations with ``aggregation``."""
        self.aggregation = aggregation.build()
        return self

    def append_aggregation(self, aggregation: AggregationBase) -> ParentAggregation:
        """Add ``aggregation`` to the existing sub-aggregations."""
        self.aggregation = merge(self.aggregation, aggregation.build())
        return self

    def _with_children(self, body: dict[str, Any]) -> dict[str, Any]:
        if self.aggregation is not None:
            body["aggs"] = self.aggregation
        return body