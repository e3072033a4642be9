from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from .values import JsonValue


def _empty_fields() -> dict[str, JsonValue]:
    return {}


def _empty_modules() -> dict[str, dict[str, JsonValue]]:
    return {}


def _empty_mutators() -> list[MutatorEntry]:
    return []


@dataclass(frozen=True, slots=True)
class CD1Document:
    """A parsed CD1 document; read-only once loaded."""

    fields: Mapping[str, JsonValue]
    # the Description was written with literal line breaks
    literal_line_breaks: bool = False

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, JsonValue], *, literal_line_breaks: bool = False
    ) -> CD1Document:
        return cls(
            fields=MappingProxyType(dict(data)),
            literal_line_breaks=literal_line_breaks,
        )

    def __contains__(self, key: str) -> bool:
        return key in self.fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def get(self, key: str) -> JsonValue:
        return self.fields.get(key)


@dataclass(slots=True)
class StatModule:
    name: str
    stats: dict[str, JsonValue] = field(default_factory=_empty_fields)

    def __len__(self) -> int:
        return len(self.stats)


@dataclass(frozen=True, slots=True)
class MutatorEntry:
    mutator_type: str
    source_field: str
    parameter: JsonValue
    module: str
    field: str


@dataclass(slots=True)
class CD2Document:
    modules: dict[str, dict[str, JsonValue]] = field(default_factory=_empty_modules)
    mutators: list[MutatorEntry] = field(default_factory=_empty_mutators)
    extensions: dict[str, JsonValue] = field(default_factory=_empty_fields)

    def module(self, name: str) -> dict[str, JsonValue]:
        return self.modules.setdefault(name, {})

    def __getitem__(self, name: str) -> dict[str, JsonValue]:
        return self.modules[name]

    def __contains__(self, name: str) -> bool:
        return name in self.modules
