import pytest

from esquerybuilder.buckets import (
    FilterAggregation,
    MultiTermsAggregation,
    NestedAggregation,
    TermsAggregation,
)
from esquerybuilder.builder import Aggregation, QueryBuilder
from esquerybuilder.metrics import (
    CardinalityAggregation,
    MaxAggregation,
    MinAggregation,
    StatsAggregation,
    SumAggregation,
    TopHitsAggregation,
)
from esquerybuilder.queries import BoolQuery, MatchQuery
from esquerybuilder.util import to_json


def test_case01():
    builder = QueryBuilder()
    assert to_json(builder.build()) == '{"query":{"match_all":{}}}'
    builder.script = {"source": "ctx._source.count++", "lang": "painless"}
    assert (
        to_json(builder.build())
        == '{"query":{"match_all":{}},"script":{"lang":"painless","source":"ctx._source.count++"}}'
    )


def test_case02():
    builder = QueryBuilder()
    flt = Aggregation.filter("filter")
    flt.filter = MatchQuery("key", "value")
    agg = Aggregation.nested("name")
    agg.path = "city"
    agg.append_aggregation(flt)
    builder.set_aggregation([agg])
    assert (
        to_json(builder.build())
        == '{"aggs":{"name":{"aggs":{"filter":{"filter":{"match":{"key":{"query":"value"}}}}},'
        '"nested":{"path":"city"}}},"query":{"match_all":{}}}'
    )


@pytest.mark.parametrize(
    "factory, cls",
    [
        (Aggregation.terms, TermsAggregation),
        (Aggregation.cardinality, CardinalityAggregation),
        (Aggregation.multi_terms, MultiTermsAggregation),
        (Aggregation.top_hits, TopHitsAggregation),
        (Aggregation.sum, SumAggregation),
        (Aggregation.stats, StatsAggregation),
        (Aggregation.max, MaxAggregation),
        (Aggregation.min, MinAggregation),
        (Aggregation.nested, NestedAggregation),
        (Aggregation.filter, FilterAggregation),
    ],
)
def test_aggregation_factories(factory, cls):
    agg = factory("agg_name")
    assert isinstance(agg, cls)
    assert agg.build() == cls("agg_name").build()
    assert list(agg.build()) == ["agg_name"]


def test_defaults():
    builder = QueryBuilder()
    assert builder.size == 10
    assert builder.from_ == 0
    assert builder.scroll == ""


def test_set_query_with_bool_query():
    query = BoolQuery()
    query.add_must(MatchQuery("field", "value"))
    query.add_must(MatchQuery("field2", "value2"))
    builder = QueryBuilder()
    assert builder.set_query(query) is builder
    assert builder.build() == {"query": query.build()}


def test_size_from_scroll_not_in_body():
    builder = QueryBuilder(size=50, from_=5, scroll="1m")
    assert builder.build() == {"query": {"match_all": {}}}


def test_source_and_sort():
    builder = QueryBuilder(source=["id", "title"], sort=[{"id": "asc"}])
    body = builder.build()
    assert body["_source"] == ["id", "title"]
    assert body["sort"] == [{"id": "asc"}]


def test_append_aggregation_merges():
    builder = QueryBuilder()
    first = TermsAggregation("a", field="a_1")
    second = SumAggregation("b", field="b_1")
    builder.append_aggregation(first).append_aggregation(second)
    assert builder.build()["aggs"] == {**first.build(), **second.build()}


def test_set_aggregation_replaces():
    builder = QueryBuilder()
    builder.append_aggregation(TermsAggregation("a"))
    replacement = StatsAggregation("b", field="x")
    builder.set_aggregation([replacement])
    assert builder.build()["aggs"] == replacement.build()


def test_set_aggregation_empty_clears():
    builder = QueryBuilder()
    builder.append_aggregation(TermsAggregation("a"))
    builder.set_aggregation([])
    assert "aggs" not in builder.build()


def test_str_matches_to_json():
    builder = QueryBuilder().set_query(MatchQuery("title", "elastic"))
    assert str(builder) == to_json(builder.build())