import pytest

from esquerybuilder.base import AggregationBase, ParentAggregation, Query
from esquerybuilder.util import to_json


class _Fixed(Query):
    def __init__(self, body):
        self.body = body

    def build(self):
        return self.body


class _Leaf(AggregationBase):
    def __init__(self, name, field):
        super().__init__(name)
        self.field = field

    def body(self):
        return {"max": {"field": self.field}}


class _Parent(ParentAggregation):
    def body(self):
        return self._with_children({"nested": {"path": "p"}})


def test_query_is_abstract():
    with pytest.raises(TypeError):
        Query()


def test_aggregation_base_is_abstract():
    with pytest.raises(TypeError):
        AggregationBase("name")


def test_query_str_renders_sorted_json():
    fixed = _Fixed({"b": 1, "a": 2})
    assert str(fixed) == '{"a":2,"b":1}'
    assert to_json(fixed.build()) == '{"a":2,"b":1}'


def test_aggregation_build_wraps_body_under_name():
    leaf = _Leaf("latest", "updated_at")
    assert AggregationBase.build(leaf) == {"latest": {"max": {"field": "updated_at"}}}


def test_parent_without_children_has_no_aggs():
    parent = _Parent("top")
    assert AggregationBase.build(parent) == {"top": {"nested": {"path": "p"}}}


def test_append_aggregation_accumulates_children():
    parent = _Parent("top")
    ParentAggregation.append_aggregation(parent, _Leaf("a", "fa"))
    ParentAggregation.append_aggregation(parent, _Leaf("b", "fb"))
    assert AggregationBase.build(parent)["top"]["aggs"] == {
        "a": {"max": {"field": "fa"}},
        "b": {"max": {"field": "fb"}},
    }


def test_set_aggregation_replaces_children():
    parent = _Parent("top")
    ParentAggregation.append_aggregation(parent, _Leaf("a", "fa"))
    result = ParentAggregation.set_aggregation(parent, _Leaf("b", "fb"))
    assert result is parent
    assert AggregationBase.build(parent)["top"]["aggs"] == {"b": {"max": {"field": "fb"}}}


def test_append_after_set_keeps_both():
    parent = _Parent("top")
    ParentAggregation.set_aggregation(parent, _Leaf("a", "fa"))
    ParentAggregation.append_aggregation(parent, _Leaf("b", "fb"))
    assert to_json(AggregationBase.build(parent)) == (
        '{"top":{"aggs":{"a":{"max":{"field":"fa"}},"b":{"max":{"field":"fb"}}},'
        '"nested":{"path":"p"}}}'
    )