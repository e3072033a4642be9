from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

if TYPE_CHECKING:
    from collections.abc import Iterable


class FieldStatus(StrEnum):
    RELOCATE = "relocate"
    DROP = "drop"
    HANDLED = "handled"
    MUTATOR = "mutator"


class FieldMapping(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    source: str
    status: FieldStatus
    module: str | None = None
    field: str | None = None
    transform: str = "identity"
    reason: str | None = None
    required: bool = False
    mutator_type: str | None = None
    default: int | float | None = None

    @model_validator(mode="after")
    def _check_outcome(self) -> Self:
        if self.status is FieldStatus.DROP:
            if not self.reason:
                raise ValueError(f"Dropped field {self.source} needs a reason")
            if self.module is not None:
                raise ValueError(f"Dropped field {self.source} cannot name a module")
        elif self.module is None and self.status is not FieldStatus.HANDLED:
            raise ValueError(f"Field {self.source} ({self.status}) needs a module")
        if self.status is FieldStatus.MUTATOR and not self.mutator_type:
            raise ValueError(f"Mutator field {self.source} needs a mutator_type")
        return self

    @property
    def target_field(self) -> str:
        return self.field or self.source

    @property
    def destination(self) -> str | None:
        if self.module is None:
            return None
        return f"{self.module}.{self.target_field}"


class StatMapping(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    source: str
    module: str
    field: str
    transform: str = "identity"
    alias_of: str | None = None

    @property
    def destination(self) -> tuple[str, str]:
        return self.module, self.field


class EnemyControls(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    valid: list[str]
    deprecated: list[str] = Field(default_factory=list)
    vanilla_elites: list[str] = Field(default_factory=list)


class DefaultValue(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    module: str
    field: str
    value: str | int | float | bool


class MappingTable(BaseModel):
    """Declarative CD1 → CD2 correspondence.

    ``top_fields`` classifies every recognized top-level CD1 field,
    ``pawn_stats`` assigns each pawn stat to a CD2 stat module and
    ``module_order`` fixes the key order of the assembled document.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: str
    module_order: list[str]
    stat_modules: list[str]
    top_fields: list[FieldMapping]
    pawn_stats: list[StatMapping]
    enemy_controls: EnemyControls
    defaults: list[DefaultValue] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_completeness(self) -> Self:
        _ensure_unique("top field", (m.source for m in self.top_fields))
        _ensure_unique("pawn stat", (m.source for m in self.pawn_stats))
        _ensure_unique("module", self.module_order)
        known_modules = set(self.module_order)
        for mapping in self.top_fields:
            if mapping.module is not None and mapping.module not in known_modules:
                raise ValueError(
                    f"Field {mapping.source} targets unknown module {mapping.module}"
                )
        # mutators override the destination of the field they replace
        _ensure_unique(
            "top field destination",
            (
                m.destination
                for m in self.top_fields
                if m.destination and m.status is not FieldStatus.MUTATOR
            ),
        )
        for default in self.defaults:
            if default.module not in known_modules:
                raise ValueError(
                    f"Default {default.field} targets unknown module {default.module}"
                )
        stats_by_source = {m.source: m for m in self.pawn_stats}
        owners: dict[tuple[str, str], str] = {}
        for stat in self.pawn_stats:
            if stat.module not in self.stat_modules:
                raise ValueError(
                    f"Stat {stat.source} targets unknown stat module {stat.module}"
                )
            if stat.alias_of is not None:
                original = stats_by_source.get(stat.alias_of)
                if original is None or original.destination != stat.destination:
                    raise ValueError(
                        f"Stat {stat.source} is not a valid alias of {stat.alias_of}"
                    )
                continue
            owner = owners.setdefault(stat.destination, stat.source)
            if owner != stat.source:
                raise ValueError(
                    f"Stats {owner} and {stat.source} share "
                    f"{stat.module}.{stat.field} without being aliases"
                )
        return self

    def field(self, source: str) -> FieldMapping | None:
        for mapping in self.top_fields:
            if mapping.source == source:
                return mapping
        return None

    def stat(self, source: str) -> StatMapping | None:
        for mapping in self.pawn_stats:
            if mapping.source == source:
                return mapping
        return None

    def fields_with_status(self, status: FieldStatus) -> list[FieldMapping]:
        return [m for m in self.top_fields if m.status is status]

    def stat_fields(self, module: str) -> list[str]:
        fields: list[str] = []
        for stat in self.pawn_stats:
            if stat.module == module and stat.field not in fields:
                fields.append(stat.field)
        return fields


def _ensure_unique(kind: str, values: Iterable[object]) -> None:
    seen: set[object] = set()
    for value in values:
        if value in seen:
            raise ValueError(f"Duplicate {kind}: {value}")
        seen.add(value)
