"""Pawn stat translation.

CD1 keeps pawn statistics in a flat ``PawnStats`` block keyed by stat name.
CD2 groups them into stat modules (Movement, Resistances, ...). Each stat is
looked up in the mapping table, transformed and written into exactly one
module.

Some CD1 files were partially migrated by hand and already carry a CD2 stat
module next to the flat block, or use the newer stat name alongside the old
one. When two sources set the same CD2 stat there is no defined precedence,
so the input is rejected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..entities.document import StatModule
from ..entities.values import (
    ValueShape,
    describe,
    expect_mapping,
    is_number,
    shape_of,
)
from ..exceptions import MalformedInputError
from .transforms import get_transform

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..entities.conversion import ConversionContext
    from ..entities.mapping import MappingTable
    from ..entities.values import JsonValue


class StatModuleTranslator:
    def __init__(self, table: MappingTable) -> None:
        super().__init__()
        self._table = table

    def translate(
        self,
        pawn_stats: JsonValue,
        context: ConversionContext,
        *,
        location: str,
        pregrouped: Mapping[str, JsonValue] | None = None,
    ) -> list[StatModule]:
        """Group a CD1 ``PawnStats`` block into CD2 stat modules.

        Args:
            pawn_stats: The raw ``PawnStats`` value (``None`` when absent).
            context: Conversion context applying the unknown-field policy.
            location: Human-readable owner of the block, used in messages.
            pregrouped: Fields of the owner that may already hold CD2 stat
                modules (keyed by module name).

        Returns:
            Non-empty stat modules, in the table's module order.

        Raises:
            MalformedInputError: A stat has the wrong shape, or two sources
                set the same CD2 stat.
        """
        modules: dict[str, StatModule] = {}
        written_by: dict[tuple[str, str], str] = {}

        for name in self._table.stat_modules:
            if pregrouped is None or name not in pregrouped:
                continue
            module_location = f"{location}.{name}"
            existing = expect_mapping(pregrouped[name], where=module_location)
            known_fields = self._table.stat_fields(name)
            module = modules.setdefault(name, StatModule(name))
            for stat_field, value in existing.items():
                if stat_field not in known_fields:
                    context.unknown(stat_field, location=module_location)
                    continue
                _check_stat_value(value, where=f"{module_location}.{stat_field}")
                module.stats[stat_field] = value
                written_by[(name, stat_field)] = f"{name}.{stat_field}"

        if pawn_stats is not None:
            block_location = f"{location}.PawnStats"
            stats = expect_mapping(pawn_stats, where=block_location)
            for stat_name, value in stats.items():
                mapping = self._table.stat(stat_name)
                if mapping is None:
                    context.unknown(stat_name, location=block_location)
                    continue
                destination = mapping.destination
                if destination in written_by:
                    raise MalformedInputError(
                        f"{location}: [{stat_name}] and [{written_by[destination]}] "
                        f"both set {mapping.module}.{mapping.field}"
                    )
                where = f"{block_location}.{stat_name}"
                _check_stat_value(value, where=where)
                transform = get_transform(mapping.transform)
                module = modules.setdefault(mapping.module, StatModule(mapping.module))
                module.stats[mapping.field] = transform(value, where)
                written_by[destination] = stat_name

        return [
            self._ordered(modules[name])
            for name in self._table.stat_modules
            if name in modules and len(modules[name]) > 0
        ]

    def _ordered(self, module: StatModule) -> StatModule:
        fields = self._table.stat_fields(module.name)
        return StatModule(
            module.name, {f: module.stats[f] for f in fields if f in module.stats}
        )


def _check_stat_value(value: JsonValue, *, where: str) -> None:
    if is_number(value):
        return
    if shape_of(value) is ValueShape.SEQUENCE and all(
        is_number(item) for item in value  # type: ignore[union-attr]
    ):
        return
    raise MalformedInputError(
        f"{where} must be a number or an array of numbers, got {describe(value)}"
    )
