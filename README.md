# esquerybuilder

Compose Elasticsearch request bodies — queries, aggregations and index
mappings — from small Python objects, and get back ordinary `dict`s ready
to send with any client. Calling `str()` on a query, aggregation, mapping
or builder gives compact JSON with keys in sorted order.

## Installation

```
pip install esquerybuilder
```

## Search requests

```python
from esquerybuilder.builder import QueryBuilder
from esquerybuilder.queries import BoolQuery, MatchQuery

query = BoolQuery()
query.add_must(MatchQuery("field", "value"))
query.add_must(MatchQuery("field2", "value2"))

builder = QueryBuilder()
builder.set_query(query)
body = builder.build()
```

With no query set, the body searches everything:

```python
QueryBuilder().build()
# {"query": {"match_all": {}}}
```

`QueryBuilder` also has `source`, `script` and `sort` fields, which are
added to the body as `_source`, `script` and `sort` when set. Its `size`,
`from_` and `scroll` fields are only kept for you to pass as request
parameters; they are not written into the body.

Query types live in `esquerybuilder.queries`: `BoolQuery`, `ExistsQuery`,
`GeoDistanceQuery` (with `Geo`), `MatchAllQuery`, `MatchQuery`,
`MultiMatchQuery`, `NestedQuery`, `RangeQuery`, `ScriptQuery`,
`ScriptScoreQuery`, `TermQuery`, `TermsQuery` and `WildcardQuery`.
Options such as `boost` are constructor arguments:

```python
from esquerybuilder.queries import RangeQuery, WildcardQuery

WildcardQuery("title", "elastic", boost=100.0).build()
# {"wildcard": {"title": {"value": "elastic", "boost": 100.0}}}

RangeQuery("age", gte="18", lt="65").build()
# {"range": {"age": {"lt": "65", "gte": "18"}}}
```

## Aggregations

`Aggregation` in `esquerybuilder.builder` offers shortcuts for the common
kinds (`terms`, `cardinality`, `multi_terms`, `top_hits`, `sum`, `stats`,
`max`, `min`, `nested`, `filter`). Settings are attributes or constructor
arguments, and most aggregations can carry sub-aggregations through
`set_aggregation` and `append_aggregation`.

```python
from esquerybuilder.buckets import FilterAggregation, NestedAggregation
from esquerybuilder.builder import QueryBuilder
from esquerybuilder.queries import MatchQuery

filtered = FilterAggregation("filter", MatchQuery("key", "value"))
nested = NestedAggregation("name", path="city")
nested.append_aggregation(filtered)

builder = QueryBuilder()
builder.set_aggregation([nested])
builder.build()
# {"query": {"match_all": {}},
#  "aggs": {"name": {"nested": {"path": "city"},
#                    "aggs": {"filter": {"filter": {"match": {"key": {"query": "value"}}}}}}}}
```

Metric aggregations (`CardinalityAggregation`, `MaxAggregation`,
`MinAggregation`, `StatsAggregation`, `SumAggregation`,
`ValueCountAggregation`, `TopHitsAggregation`) are in
`esquerybuilder.metrics`; bucket aggregations (`FilterAggregation`,
`MultiTermsAggregation`, `NestedAggregation`, `ReverseNestedAggregation`,
`TermsAggregation`) are in `esquerybuilder.buckets`. New kinds can be
written by subclassing `AggregationBase` or `ParentAggregation` from
`esquerybuilder.base` and implementing `body()`.

## Index mappings

```python
from esquerybuilder.field_types import KeywordFieldType, TextFieldType
from esquerybuilder.mapping import MappingBuilder

mapping = MappingBuilder(settings={"index.lifecycle.name": "logs_policy"})
mapping.add_property("title", KeywordFieldType())
mapping.add_property("content", TextFieldType())
mapping.build()
# {"mappings": {"properties": {"title": {"type": "keyword"},
#                              "content": {"type": "text"}}},
#  "settings": {"index.lifecycle.name": "logs_policy"}}
```

Numeric fields are created through `NumericFieldType.long()`,
`.integer()`, `.short()`, `.byte()`, `.double()`, `.float()`,
`.half_float()`, `.scaled_float()` and `.unsigned_long()`.
`NestedFieldType` and `ObjectFieldType` take a `MappingProperties`
(from `esquerybuilder.properties`) describing their inner fields.

## What it does not do

The package only builds request bodies. It does not connect to a cluster,
send requests or read responses. Some stored options are not written into
the output: the `script` of the min, max, sum, stats and value-count
aggregations, and `doc_values`, `store`, `format` and `index` on the
binary, boolean and date field types.

## Running the tests

```
pip install -e ".[test]"
pytest
```