"""Builder for the body of an index-creation request."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .properties import MappingProperties, MappingType
from .util import to_json


@dataclass
class MappingBuilder:
    """Collects field mappings, settings and aliases for a new index."""

    properties: MappingProperties = field(default_factory=MappingProperties)
    settings: dict[str, Any] | None = None
    aliases: dict[str, Any] | None = None

    def add_property(self, key: str, value: MappingType) -> MappingBuilder:
        """Map field ``key`` to ``value``."""
        self.properties.add_property(key, value)
        return self

    def build(self) -> dict[str, Any]:
        body: dict[str, Any] = {"mappings": self.properties.build()}
        if self.settings is not None:
            body["settings"] = self.settings
        if self.aliases is not None:
            body["aliases"] = self.aliases
        return body

    def __str__(self) -> str:
        return to_json(self.build())