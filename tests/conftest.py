import json
from pathlib import Path

import pytest

from cd2_transpiler.domain.entities.document import CD1Document
from cd2_transpiler.domain.services.converter import CD2Converter
from cd2_transpiler.infrastructure.repositories.mapping_table_repository import (
    load_mapping_table,
)

CD2_ENV_VARS = ("CD2_PRETTY_PRINT", "CD2_INDENT", "CD2_STRICT", "CD2_RAW_MULTILINE")


@pytest.fixture(autouse=True)
def _clean_cd2_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's CD2_* settings out of the tests."""
    for name in CD2_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mapping_table():
    """The packaged CD1 → CD2 mapping table."""
    return load_mapping_table()


@pytest.fixture
def converter(mapping_table):
    return CD2Converter(mapping_table)


@pytest.fixture
def hazard6() -> dict[str, object]:
    """The reference CD1 document used across the suite."""
    return {
        "Name": "Hazard 6",
        "Description": "Line1\nLine2",
        "StartingNitra": 200,
        "PawnStats": {"MoveSpeed": 1.1},
    }


@pytest.fixture
def make_document():
    def _make(**fields: object) -> CD1Document:
        data: dict[str, object] = {"Name": "Test", "Description": "Test difficulty"}
        data.update(fields)
        return CD1Document.from_mapping(data)

    return _make


@pytest.fixture
def write_cd1(tmp_path: Path):
    def _write(data: dict[str, object], name: str = "Hazard6.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _write
