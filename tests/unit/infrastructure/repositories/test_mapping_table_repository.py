"""Unit tests for loading the mapping table."""

import json

import pytest

from cd2_transpiler.infrastructure.io.exceptions import (
    DataParseError,
    DataSourceNotFoundError,
)
from cd2_transpiler.infrastructure.repositories.mapping_table_repository import (
    MappingTableLoadError,
    MappingTableRepository,
    load_mapping_table,
    packaged_table_text,
    parse_mapping_table,
)


@pytest.fixture
def table_data():
    return json.loads(packaged_table_text())


class TestLoadMappingTable:
    def test_packaged_table_loads(self):
        table = load_mapping_table()
        assert table.module_order[0] == "DifficultySetting"

    def test_load_from_path(self, tmp_path, table_data):
        path = tmp_path / "table.json"
        path.write_text(json.dumps(table_data), encoding="utf-8")
        assert load_mapping_table(path).version == table_data["version"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataSourceNotFoundError):
            load_mapping_table(tmp_path / "missing.json")

    def test_invalid_json(self):
        with pytest.raises(MappingTableLoadError, match="Invalid JSON"):
            parse_mapping_table("{")

    def test_load_error_is_a_parse_error(self):
        assert issubclass(MappingTableLoadError, DataParseError)

    def test_incomplete_table(self, table_data):
        table_data["top_fields"].append({"source": "Name", "status": "drop", "reason": "x"})
        with pytest.raises(MappingTableLoadError, match="Duplicate top field"):
            parse_mapping_table(json.dumps(table_data))

    def test_unregistered_transform(self, table_data):
        table_data["pawn_stats"][0]["transform"] = "square"
        with pytest.raises(MappingTableLoadError, match="unregistered transforms: square"):
            parse_mapping_table(json.dumps(table_data))

    def test_unknown_mutator_type(self, table_data):
        for entry in table_data["top_fields"]:
            if entry["status"] == "mutator":
                entry["mutator_type"] = "Gravity"
        with pytest.raises(MappingTableLoadError, match="unknown mutator types: Gravity"):
            parse_mapping_table(json.dumps(table_data))


class TestMappingTableRepository:
    def test_loads_once_per_repository(self):
        repository = MappingTableRepository()
        assert repository.load() is repository.load()

    def test_repositories_do_not_share_tables(self):
        assert MappingTableRepository().load() is not MappingTableRepository().load()
