from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from ...constants import Modules, SourceFields
from ..entities.document import CD2Document
from ..entities.mapping import FieldStatus
from ..entities.values import expect_mapping, expect_number, expect_string
from ..exceptions import (
    MalformedInputError,
    MissingRequiredFieldError,
    UnsupportedMultilineNameError,
)
from .field_classifier import Outcome
from .transforms import get_transform

if TYPE_CHECKING:
    from ..entities.conversion import ConversionContext
    from ..entities.document import CD1Document, MutatorEntry, StatModule
    from ..entities.mapping import MappingTable
    from ..entities.values import JsonValue
    from .field_classifier import ClassifiedField

ALWAYS_EMITTED = (Modules.DIFFICULTY_SETTING, Modules.RESUPPLY)


def _check_name(value: JsonValue) -> JsonValue:
    name = expect_string(value, where=SourceFields.NAME)
    # any line boundary str.splitlines recognises, including U+2028 and NEL
    if name.splitlines() not in ([], [name]):
        raise UnsupportedMultilineNameError(SourceFields.NAME)
    return name


def _check_description(value: JsonValue) -> JsonValue:
    return expect_string(value, where=SourceFields.DESCRIPTION)


def _check_resupply_cost(value: JsonValue) -> JsonValue:
    cost = expect_number(value, where=SourceFields.RESUPPLY_COST)
    if cost <= 0:
        raise MalformedInputError(
            f"{SourceFields.RESUPPLY_COST} must be positive, got {cost}"
        )
    return cost


_HANDLED_CHECKS: dict[str, Callable[[JsonValue], JsonValue]] = {
    SourceFields.NAME: _check_name,
    SourceFields.DESCRIPTION: _check_description,
    SourceFields.RESUPPLY_COST: _check_resupply_cost,
}

_RECOMMENDED = {
    SourceFields.DESCRIPTION: "It is recommended to add a Description.",
}


class TopLevelAssembler:
    """Compose the CD2 document from the translated pieces.

    Key order never depends on the CD1 field order: modules follow
    ``module_order`` and fields within a module follow the mapping table.
    """

    def __init__(self, table: MappingTable) -> None:
        super().__init__()
        self._table = table

    def assemble(
        self,
        document: CD1Document,
        classified: list[ClassifiedField],
        context: ConversionContext,
        *,
        stat_modules: list[StatModule],
        enemies: dict[str, JsonValue] | None,
        mutators: list[MutatorEntry],
    ) -> CD2Document:
        self._check_required(document)
        content: dict[str, dict[str, JsonValue]] = {
            name: {} for name in self._table.module_order
        }

        for mapping in self._table.fields_with_status(FieldStatus.HANDLED):
            if mapping.module is None:
                continue
            # null counts as absent
            if document.get(mapping.source) is None:
                if mapping.source in _RECOMMENDED:
                    context.warn(
                        f"Field [{mapping.source}] was missing. "
                        f"[{_RECOMMENDED[mapping.source]}]"
                    )
                continue
            check = _HANDLED_CHECKS.get(mapping.source, _passthrough)
            value = check(document.get(mapping.source))
            content[mapping.module][mapping.target_field] = value

        for default in self._table.defaults:
            content[default.module].setdefault(default.field, default.value)

        for mapping in self._table.fields_with_status(FieldStatus.RELOCATE):
            if mapping.source not in document:
                continue
            transform = get_transform(mapping.transform)
            module = mapping.module or ""
            content[module][mapping.target_field] = transform(
                document.get(mapping.source), mapping.source
            )

        for module in stat_modules:
            content[module.name] = dict(module.stats)

        if enemies:
            content[Modules.ENEMIES] = enemies

        if SourceFields.ESCORT_MULE in document:
            escort = expect_mapping(
                document.get(SourceFields.ESCORT_MULE), where=SourceFields.ESCORT_MULE
            )
            content[Modules.ESCORT_MULE] = dict(escort)

        for entry in mutators:
            if entry.module not in content:
                raise ValueError(f"Mutator targets unknown module {entry.module}")

        extensions = {
            item.name: document.get(item.name)
            for item in sorted(classified, key=lambda c: c.name)
            if item.outcome is Outcome.EXTENSION
        }
        return CD2Document(
            modules={
                name: fields
                for name, fields in content.items()
                if fields or name in ALWAYS_EMITTED
            },
            mutators=list(mutators),
            extensions=extensions,
        )

    def _check_required(self, document: CD1Document) -> None:
        for mapping in self._table.top_fields:
            if mapping.required and document.get(mapping.source) is None:
                raise MissingRequiredFieldError(mapping.source, mapping.destination)


def _passthrough(value: JsonValue) -> JsonValue:
    return value
