"""Index mapping properties: the named fields of a mapping."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from .util import to_json


class MappingType(ABC):
    """A piece of an index mapping that renders to a JSON object."""

    @abstractmethod
    def build(self) -> dict[str, Any]:
        """Return the mapping part as a JSON-compatible dictionary."""

    def __str__(self) -> str:
        return to_json(self.build())


@dataclass
class MappingProperties(MappingType):
    """A set of named field mappings, rendered under ``properties``."""

    properties: dict[str, MappingType] = field(default_factory=dict)

    def add_property(self, key: str, value: MappingType) -> MappingProperties:
        """Map field ``key`` to ``value``, replacing any earlier mapping of it."""
        self.properties[key] = value
        return self

    def build(self) -> dict[str, Any]:
        return {"properties": {key: value.build() for key, value in self.properties.items()}}