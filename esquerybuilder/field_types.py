"""Field types for index mappings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .properties import MappingProperties, MappingType


def _typed(type_name: str, index: bool | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"type": type_name}
    if index is not None:
        body["index"] = "true" if index else "false"
    return body


@dataclass
class BinaryFieldType(MappingType):
    """A base64-encoded binary field."""

    doc_values: bool | None = None
    store: bool | None = None

    def build(self) -> dict[str, Any]:
        return _typed("binary")


@dataclass
class BooleanFieldType(MappingType):
    """A true/false field."""

    doc_values: bool | None = None
    store: bool | None = None

    def build(self) -> dict[str, Any]:
        return _typed("boolean")


@dataclass
class DateFieldType(MappingType):
    """A date field."""

    doc_values: bool | None = None
    format: str | None = None
    index: bool | None = None

    def build(self) -> dict[str, Any]:
        return _typed("date")


@dataclass
class GeoPointFieldType(MappingType):
    """A latitude/longitude point field."""

    index: bool | None = None

    def build(self) -> dict[str, Any]:
        return _typed("geo_point", self.index)


@dataclass
class KeywordFieldType(MappingType):
    """An exact-value string field."""

    index: bool | None = None

    def build(self) -> dict[str, Any]:
        return _typed("keyword", self.index)


@dataclass
class TextFieldType(MappingType):
    """A full-text string field."""

    index: bool | None = None

    def build(self) -> dict[str, Any]:
        return _typed("text", self.index)


@dataclass
class NestedFieldType(MappingType):
    """An array of objects indexed as separate nested documents."""

    properties: MappingProperties = field(default_factory=MappingProperties)

    def build(self) -> dict[str, Any]:
        body: dict[str, Any] = {"type": "nested"}
        body.update(self.properties.build())
        return body


@dataclass
class ObjectFieldType(MappingType):
    """An inner object with its own properties."""

    properties: MappingProperties = field(default_factory=MappingProperties)

    def build(self) -> dict[str, Any]:
        return dict(self.properties.build())


@dataclass
class NumericFieldType(MappingType):
    """A numeric field; create it with one of the type-named constructors."""

    mapping_type: str
    index: bool | None = None

    def build(self) -> dict[str, Any]:
        return _typed(self.mapping_type, self.index)

    @classmethod
    def long(cls) -> NumericFieldType:
        return cls("long")

    @classmethod
    def integer(cls) -> NumericFieldType:
        return cls("integer")

    @classmethod
    def short(cls) -> NumericFieldType:
        return cls("short")

    @classmethod
    def byte(cls) -> NumericFieldType:
        return cls("byte")

    @classmethod
    def double(cls) -> NumericFieldType:
        return cls("double")

    @classmethod
    def float(cls) -> NumericFieldType:
        return cls("float")

    @classmethod
    def half_float(cls) -> NumericFieldType:
        return cls("half_float")

    @classmethod
    def scaled_float(cls) -> NumericFieldType:
        return cls("scaled_float")

    @classmethod
    def unsigned_long(cls) -> NumericFieldType:
        return cls("unsigned_long")