"""Query types for the search request body."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from .base import Query


def _display_float(value: float) -> str:
    """Render a float in plain decimal notation, dropping a trailing ``.0``."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    number = Decimal(repr(value))
    if number == number.to_integral_value():
        text = str(int(number))
        if text == "0" and math.copysign(1.0, value) < 0:
            return "-0"
        return text
    return format(number, "f")


def _with_boost(body: dict[str, Any], boost: float | None) -> dict[str, Any]:
    if boost is not None:
        body["boost"] = float(boost)
    return body


@dataclass
class BoolQuery(Query):
    """A compound query combining other queries by clause."""

    must: list[dict[str, Any]] = field(default_factory=list)
    must_not: list[dict[str, Any]] = field(default_factory=list)
    should: list[dict[str, Any]] = field(default_factory=list)
    filter: list[dict[str, Any]] = field(default_factory=list)

    def add_must(self, query: Query) -> None:
        self.must.append(query.build())

    def add_must_not(self, query: Query) -> None:
        self.must_not.append(query.build())

    def add_should(self, query: Query) -> None:
        self.should.append(query.build())

    def add_filter(self, query: Query) -> None:
        self.filter.append(query.build())

    def is_empty(self) -> bool:
        return not (self.must or self.must_not or self.should or self.filter)

    def build(self) -> dict[str, Any]:
        clauses = {
            "must": self.must,
            "must_not": self.must_not,
            "should": self.should,
            "filter": self.filter,
        }
        return {"bool": {name: list(items) for name, items in clauses.items() if items}}


@dataclass
class ExistsQuery(Query):
    """Matches documents that have a value for ``field``."""

    field: str

    def build(self) -> dict[str, Any]:
        return {"exists": {"field": self.field}}


@dataclass
class Geo:
    """A latitude/longitude pair."""

    lat: float
    lon: float


@dataclass
class GeoDistanceQuery(Query):
    """Matches geo points within ``distance`` of ``geo``."""

    field: str
    geo: Geo
    distance: str

    def build(self) -> dict[str, Any]:
        return {
            "geo_distance": {
                "distance": self.distance,
                self.field: {
                    "lat": _display_float(self.geo.lat),
                    "lon": _display_float(self.geo.lon),
                },
            }
        }


@dataclass
class MatchAllQuery(Query):
    """Matches every document."""

    boost: float | None = None

    def build(self) -> dict[str, Any]:
        return {"match_all": _with_boost({}, self.boost)}


@dataclass
class MatchQuery(Query):
    """Full-text match on a single field."""

    field: str
    query: str
    boost: float | None = None

    def build(self) -> dict[str, Any]:
        body = _with_boost({"query": self.query}, self.boost)
        return {"match": {self.field: body}}


@dataclass
class MultiMatchQuery(Query):
    """Full-text match across several fields."""

    fields: list[str]
    query: str
    search_type: str = ""
    fuzziness: str = ""
    boost: float | None = None

    def build(self) -> dict[str, Any]:
        body: dict[str, Any] = {"query": self.query, "fields": list(self.fields)}
        _with_boost(body, self.boost)
        if self.search_type:
            body["type"] = self.search_type
        if self.fuzziness:
            body["fuzziness"] = self.fuzziness
        return {"multi_match": body}


class NestedQuery(Query):
    """Runs ``query`` against nested objects under ``path``.

    The inner query is rendered when the nested query is created.
    """

    def __init__(self, path: str, query: Query, score_mode: str | None = None) -> None:
        self.path = path
        self.query = query.build()
        self.score_mode = score_mode

    def build(self) -> dict[str, Any]:
        body: dict[str, Any] = {"path": self.path, "query": self.query}
        if self.score_mode is not None:
            body["score_mode"] = self.score_mode
        return {"nested": body}


@dataclass
class RangeQuery(Query):
    """Matches values of ``field`` within the given bounds; empty bounds are omitted."""

    field: str
    gt: str = ""
    lt: str = ""
    gte: str = ""
    lte: str = ""

    def build(self) -> dict[str, Any]:
        bounds = {"gt": self.gt, "lt": self.lt, "gte": self.gte, "lte": self.lte}
        return {"range": {self.field: {key: value for key, value in bounds.items() if value}}}


@dataclass
class ScriptQuery(Query):
    """Filters documents with a script."""

    script: str

    def build(self) -> dict[str, Any]:
        return {"script": {"script": self.script}}


@dataclass
class ScriptScoreQuery(Query):
    """Scores every document with a script."""

    script: str
    boost: float | None = None

    def build(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "query": MatchAllQuery().build(),
            "script": {"source": self.script},
        }
        return {"script_score": _with_boost(body, self.boost)}


@dataclass
class TermQuery(Query):
    """Exact match of a single term."""

    field: str
    value: str
    boost: float | None = None

    def build(self) -> dict[str, Any]:
        body = _with_boost({"value": self.value}, self.boost)
        return {"term": {self.field: body}}


@dataclass
class TermsQuery(Query):
    """Exact match of any of several terms."""

    field: str
    values: list[str]

    def build(self) -> dict[str, Any]:
        return {"terms": {self.field: list(self.values)}}


@dataclass
class WildcardQuery(Query):
    """Wildcard pattern match on a field."""

    field: str
    value: str
    boost: float | None = None

    def build(self) -> dict[str, Any]:
        body = _with_boost({"value": self.value}, self.boost)
        return {"wildcard": {self.field: body}}