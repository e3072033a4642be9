from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from ...constants import Defaults
from ..entities.mapping import FieldStatus

if TYPE_CHECKING:
    from ..entities.document import CD1Document
    from ..entities.mapping import FieldMapping, MappingTable


class Outcome(StrEnum):
    RELOCATE = FieldStatus.RELOCATE.value
    DROP = FieldStatus.DROP.value
    HANDLED = FieldStatus.HANDLED.value
    MUTATOR = FieldStatus.MUTATOR.value
    EXTENSION = "extension"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class ClassifiedField:
    name: str
    outcome: Outcome
    mapping: FieldMapping | None = None

    @property
    def destination(self) -> str | None:
        if self.outcome is Outcome.EXTENSION:
            return self.name
        return self.mapping.destination if self.mapping else None


def classify_field(name: str, table: MappingTable) -> ClassifiedField:
    mapping = table.field(name)
    if mapping is not None:
        return ClassifiedField(name, Outcome(mapping.status.value), mapping)
    if name.startswith(Defaults.EXTENSION_PREFIX):
        return ClassifiedField(name, Outcome.EXTENSION)
    return ClassifiedField(name, Outcome.UNKNOWN)


def classify_document(
    document: CD1Document, table: MappingTable
) -> list[ClassifiedField]:
    return [classify_field(name, table) for name in document]
