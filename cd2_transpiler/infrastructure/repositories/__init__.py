from .mapping_table_repository import (
    MappingTableLoadError,
    MappingTableRepository,
    load_mapping_table,
    parse_mapping_table,
)

__all__ = [
    "MappingTableLoadError",
    "MappingTableRepository",
    "load_mapping_table",
    "parse_mapping_table",
]
