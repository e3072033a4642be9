"""Loader for the CD1 → CD2 field mapping table.

The table ships as ``cd2_transpiler/data/cd2_modules.json``. It is parsed
and validated on every load; callers that need it more than once keep the
returned object (the dependency container does).
"""

from __future__ import annotations

from importlib import resources
import json
from pathlib import Path

from pydantic import ValidationError

from ...domain.entities.mapping import FieldStatus, MappingTable
from ...domain.services.mutator_synthesizer import known_mutator_types
from ...domain.services.transforms import TRANSFORMS
from ..io.exceptions import DataParseError, DataSourceNotFoundError

PACKAGED_TABLE = "cd2_modules.json"


class MappingTableLoadError(DataParseError):
    pass


def packaged_table_text() -> str:
    resource = resources.files("cd2_transpiler").joinpath("data", PACKAGED_TABLE)
    try:
        return resource.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataSourceNotFoundError(
            f"Packaged mapping table not found: {PACKAGED_TABLE}"
        ) from exc


def parse_mapping_table(text: str, *, origin: str = PACKAGED_TABLE) -> MappingTable:
    try:
        data = json.loads(text)
        table = MappingTable.model_validate(data)
    except json.JSONDecodeError as exc:
        raise MappingTableLoadError(f"Invalid JSON in {origin}: {exc}") from exc
    except ValidationError as exc:
        raise MappingTableLoadError(f"Invalid mapping table {origin}: {exc}") from exc
    _check_registered(table, origin)
    return table


def _check_registered(table: MappingTable, origin: str) -> None:
    unknown_transforms = sorted(
        {
            entry.transform
            for entry in [*table.top_fields, *table.pawn_stats]
            if entry.transform not in TRANSFORMS
        }
    )
    if unknown_transforms:
        raise MappingTableLoadError(
            f"{origin} uses unregistered transforms: {', '.join(unknown_transforms)}"
        )
    mutator_types = known_mutator_types()
    unknown_mutators = sorted(
        {
            entry.mutator_type or ""
            for entry in table.fields_with_status(FieldStatus.MUTATOR)
            if entry.mutator_type not in mutator_types
        }
    )
    if unknown_mutators:
        raise MappingTableLoadError(
            f"{origin} uses unknown mutator types: {', '.join(unknown_mutators)}"
        )


def load_mapping_table(path: str | Path | None = None) -> MappingTable:
    """Load and validate a mapping table.

    Args:
        path: Table file to load. The packaged table is used when omitted.

    Raises:
        DataSourceNotFoundError: The table file does not exist.
        MappingTableLoadError: The table is not valid JSON or is incomplete.
    """
    if path is None:
        return parse_mapping_table(packaged_table_text())
    file_path = Path(path)
    if not file_path.exists():
        raise DataSourceNotFoundError(f"Mapping table not found: {file_path}")
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MappingTableLoadError(f"Failed to read {file_path}: {exc}") from exc
    return parse_mapping_table(text, origin=str(file_path))


class MappingTableRepository:
    """Holds one loaded table for the lifetime of the repository."""

    def __init__(self, path: str | Path | None = None) -> None:
        super().__init__()
        self._path = path
        self._table: MappingTable | None = None

    def load(self) -> MappingTable:
        if self._table is None:
            self._table = load_mapping_table(self._path)
        return self._table
