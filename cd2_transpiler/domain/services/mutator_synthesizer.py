"""Mutator synthesis.

Some CD1 fields have no CD2 field of their own but an observable effect
that CD2 expresses through its mutator mechanism. ``StartingNitra`` is the
only one today: CD2 has no starting-resource setting, so the same effect is
obtained by discounting the first resupplies.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import TYPE_CHECKING

from ...constants import Mutators
from ..entities.document import MutatorEntry
from ..entities.mapping import FieldStatus
from ..entities.values import expect_number, is_number
from ..exceptions import MalformedInputError

if TYPE_CHECKING:
    from ..entities.conversion import ConversionContext
    from ..entities.document import CD1Document, CD2Document
    from ..entities.mapping import MappingTable
    from ..entities.values import JsonValue, Number


class MutatorSynthesizer:
    def __init__(self, table: MappingTable) -> None:
        super().__init__()
        self._table = table

    def synthesize(
        self, document: CD1Document, context: ConversionContext
    ) -> list[MutatorEntry]:
        """Build one mutator per non-default mutator source field.

        Entries follow the table order, never the input field order, so
        equivalent documents always yield the same mutator list.
        """
        entries: list[MutatorEntry] = []
        for mapping in self._table.fields_with_status(FieldStatus.MUTATOR):
            value = document.get(mapping.source)
            if value is None:
                continue
            number = expect_number(value, where=mapping.source)
            if number < 0:
                raise MalformedInputError(
                    f"{mapping.source} must not be negative, got {number}"
                )
            if number == (mapping.default or 0):
                continue
            entry = MutatorEntry(
                mutator_type=mapping.mutator_type or "",
                source_field=mapping.source,
                parameter=number,
                module=mapping.module or "",
                field=mapping.target_field,
            )
            entries.append(entry)
            context.note(
                f"{mapping.source} = {number} expressed as a {entry.mutator_type} "
                f"mutator on {entry.module}.{entry.field}"
            )
        return entries


def supply_vector(starting_nitra: Number, resupply_cost: Number) -> list[Number]:
    """Per-resupply costs that hand out ``starting_nitra`` up front.

    With a cost of 80 and 200 starting nitra the first two resupplies are
    free, the third costs 40 and every later one the full 80.
    """
    if resupply_cost <= 0:
        raise MalformedInputError(
            f"Resupply cost must be positive, got {resupply_cost}"
        )
    nitra, cost = _exact(starting_nitra), _exact(resupply_cost)
    if nitra <= cost:
        values = [cost - nitra, cost]
    else:
        free = int(nitra // cost)
        values = [Decimal(0)] * free + [cost - nitra % cost, cost]
    as_int = isinstance(starting_nitra, int) and isinstance(resupply_cost, int)
    return [int(v) if as_int else float(v) for v in values]


def _exact(number: Number) -> Decimal:
    return Decimal(number) if isinstance(number, int) else Decimal(repr(number))


def _render_starting_nitra(entry: MutatorEntry, current: JsonValue) -> JsonValue:
    if not is_number(current):
        raise MalformedInputError(
            f"{entry.module}.{entry.field} must be a number to apply "
            f"{entry.mutator_type}"
        )
    return {
        "Mutate": Mutators.BY_RESUPPLIES_CALLED,
        "Values": supply_vector(
            entry.parameter,  # type: ignore[arg-type]
            current,  # type: ignore[arg-type]
        ),
    }


_RENDERERS: dict[str, Callable[[MutatorEntry, JsonValue], JsonValue]] = {
    Mutators.STARTING_NITRA: _render_starting_nitra,
}


def render_mutator(entry: MutatorEntry, current: JsonValue) -> JsonValue:
    try:
        renderer = _RENDERERS[entry.mutator_type]
    except KeyError:
        raise ValueError(f"Unknown mutator type: {entry.mutator_type}") from None
    return renderer(entry, current)


def render_modules(document: CD2Document) -> dict[str, dict[str, JsonValue]]:
    """Modules with every mutator applied to the field it replaces."""
    modules = {name: dict(fields) for name, fields in document.modules.items()}
    for entry in document.mutators:
        target = modules.setdefault(entry.module, {})
        target[entry.field] = render_mutator(entry, target.get(entry.field))
    return modules


def known_mutator_types() -> frozenset[str]:
    return frozenset(_RENDERERS)
