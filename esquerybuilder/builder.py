"""The search request builder and aggregation shortcuts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from .base import AggregationBase, Query
from .buckets import (
    FilterAggregation,
    MultiTermsAggregation,
    NestedAggregation,
    TermsAggregation,
)
from .metrics import (
    CardinalityAggregation,
    MaxAggregation,
    MinAggregation,
    StatsAggregation,
    SumAggregation,
    TopHitsAggregation,
)
from .util import merge, to_json


class Aggregation:
    """Shortcuts that create aggregations by kind."""

    @staticmethod
    def terms(name: str) -> TermsAggregation:
        return TermsAggregation(name)

    @staticmethod
    def cardinality(name: str) -> CardinalityAggregation:
        return CardinalityAggregation(name)

    @staticmethod
    def multi_terms(name: str) -> MultiTermsAggregation:
        return MultiTermsAggregation(name)

    @staticmethod
    def top_hits(name: str) -> TopHitsAggregation:
        return TopHitsAggregation(name)

    @staticmethod
    def sum(name: str) -> SumAggregation:
        return SumAggregation(name)

    @staticmethod
    def stats(name: str) -> StatsAggregation:
        return StatsAggregation(name)

    @staticmethod
    def max(name: str) -> MaxAggregation:
        return MaxAggregation(name)

    @staticmethod
    def min(name: str) -> MinAggregation:
        return MinAggregation(name)

    @staticmethod
    def nested(name: str) -> NestedAggregation:
        return NestedAggregation(name)

    @staticmethod
    def filter(name: str) -> FilterAggregation:
        return FilterAggregation(name)


@dataclass
class QueryBuilder:
    """Assembles a search request body.

    ``size``, ``from_`` and ``scroll`` are kept for the caller to pass as
    request parameters; they are not part of the built body.
    """

    query: dict[str, Any] | None = None
    aggs: dict[str, Any] | None = None
    size: int = 10
    from_: int = 0
    scroll: str = ""
    sort: Any = None
    source: list[str] = field(default_factory=list)
    script: Any = None

    def set_query(self, query: Query) -> QueryBuilder:
        """Use ``query`` as the request's query."""
        self.query = query.build()
        return self

    def set_aggregation(self, aggregations: Iterable[AggregationBase]) -> QueryBuilder:
        """Replace the aggregations with the merged ``aggregations``."""
        merged: Any = None
        for aggregation in aggregations:
            merged = merge(merged, aggregation.build())
        self.aggs = merged
        return self

    def append_aggregation(self, aggregation: AggregationBase) -> QueryBuilder:
        """Add ``aggregation`` to the existing aggregations."""
        self.aggs = merge(self.aggs, aggregation.build())
        return self

    def build(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.source:
            body["_source"] = list(self.source)
        body["query"] = self.query if self.query is not None else {"match_all": {}}
        if self.aggs is not None:
            body["aggs"] = self.aggs
        if self.script is not None:
            body["script"] = self.script
        if self.sort is not None:
            body["sort"] = self.sort
        return body

    def __str__(self) -> str:
        return to_json(self.build())