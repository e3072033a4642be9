from __future__ import annotations

from typing import TYPE_CHECKING

from ...constants import EnemyFields, SourceFields
from ..entities.values import expect_mapping

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..entities.conversion import ConversionContext
    from ..entities.mapping import MappingTable
    from ..entities.values import JsonValue
    from .stat_translator import StatModuleTranslator


class EnemyDescriptorTranslator:
    """Translate CD1 ``EnemyDescriptors`` into the CD2 enemies module."""

    def __init__(
        self, table: MappingTable, stat_translator: StatModuleTranslator
    ) -> None:
        super().__init__()
        self._table = table
        self._stat_translator = stat_translator

    def translate(
        self, descriptors: JsonValue, context: ConversionContext
    ) -> dict[str, JsonValue]:
        enemies = expect_mapping(descriptors, where=SourceFields.ENEMY_DESCRIPTORS)
        return {
            enemy: self._translate_enemy(enemy, enemies[enemy], context)
            for enemy in sorted(enemies)
        }

    def _translate_enemy(
        self, enemy: str, descriptor: JsonValue, context: ConversionContext
    ) -> dict[str, JsonValue]:
        location = f"{SourceFields.ENEMY_DESCRIPTORS}.{enemy}"
        controls = expect_mapping(descriptor, where=location)
        rules = self._table.enemy_controls
        stat_modules = set(self._table.stat_modules)

        for control in controls:
            if (
                control == SourceFields.PAWN_STATS
                or control in rules.valid
                or control in stat_modules
            ):
                continue
            if control in rules.deprecated:
                context.drop(
                    control, location=location, reason="deprecated enemy control"
                )
            else:
                context.unknown(control, location=location)

        translated: dict[str, JsonValue] = {
            control: controls[control] for control in rules.valid if control in controls
        }
        if self._needs_forced_elite_base(enemy, controls):
            context.note(
                f"Non-vanilla elite enemy detected with base: "
                f"[{controls.get(EnemyFields.BASE)}]"
            )
            translated[EnemyFields.FORCE_ELITE_BASE] = enemy

        modules = self._stat_translator.translate(
            controls.get(SourceFields.PAWN_STATS),
            context,
            location=location,
            pregrouped=controls,
        )
        for module in modules:
            translated[module.name] = module.stats
        return translated

    def _needs_forced_elite_base(
        self, enemy: str, controls: Mapping[str, JsonValue]
    ) -> bool:
        vanilla_elites = self._table.enemy_controls.vanilla_elites
        return (
            controls.get(EnemyFields.ELITE) is True
            and controls.get(EnemyFields.BASE) not in vanilla_elites
            and enemy in vanilla_elites
        )
