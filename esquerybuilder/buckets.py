"""Bucket aggregations: groups of documents that can hold sub-aggregations."""

from __future__ import annotations

from typing import Any, Iterable

from .base import ParentAggregation, Query


class FilterAggregation(ParentAggregation):
    """A single bucket of the documents that match ``filter``."""

    def __init__(self, name: str, filter: Query | None = None) -> None:
        super().__init__(name)
        self.filter = filter

    def body(self) -> dict[str, Any]:
        value: dict[str, Any] = {}
        if self.filter is not None:
            value["filter"] = self.filter.build()
        return self._with_children(value)


class MultiTermsAggregation(ParentAggregation):
    """One bucket per distinct combination of values of several fields.

    When ``script`` is set the fields and size are left out.
    """

    def __init__(
        self,
        name: str,
        fields: Iterable[str] = (),
        size: int = 10,
        script: str = "",
        order: tuple[str, str] | None = None,
    ) -> None:
        super().__init__(name)
        self.fields = list(fields)
        self.size = size
        self.script = script
        self.order = order

    def body(self) -> dict[str, Any]:
        value: dict[str, Any] = {}
        if not self.script:
            value["terms"] = [{"field": field} for field in self.fields]
            value["size"] = self.size
        if self.order is not None:
            order_field, order_value = self.order
            value["order"] = {order_field: order_value}
        return self._with_children({"multi_terms": value})


class NestedAggregation(ParentAggregation):
    """Aggregates over nested documents under ``path``."""

    def __init__(self, name: str, path: str = "") -> None:
        super().__init__(name)
        self.path = path

    def body(self) -> dict[str, Any]:
        value: dict[str, Any] = {}
        if self.path:
            value["path"] = self.path
        return self._with_children({"nested": value})


class ReverseNestedAggregation(ParentAggregation):
    """Steps from nested documents back to their parent documents."""

    def body(self) -> dict[str, Any]:
        return self._with_children({"reverse_nested": {}})


class TermsAggregation(ParentAggregation):
    """One bucket per distinct value of ``field``.

    When ``script`` is set the field and size are left out.
    """

    def __init__(
        self,
        name: str,
        field: str = "",
        size: int = 10,
        script: str = "",
        order: tuple[str, str] | None = None,
        include: Iterable[str] = (),
        exclude: Iterable[str] = (),
    ) -> None:
        super().__init__(name)
        self.field = field
        self.size = size
        self.script = script
        self.order = order
        self.include = list(include)
        self.exclude = list(exclude)

    def body(self) -> dict[str, Any]:
        value: dict[str, Any] = {}
        if not self.script:
            value["field"] = self.field
            value["size"] = self.size
        if self.order is not None:
            order_field, order_value = self.order
            value["order"] = {order_field: order_value}
        if self.include:
            value["include"] = list(self.include)
        if self.exclude:
            value["exclude"] = list(self.exclude)
        return self._with_children({"terms": value})