"""Domain entities.

Documents, mapping rules and per-run conversion state.
"""

from .conversion import ConversionContext, ConversionResult, DroppedField
from .document import CD1Document, CD2Document, MutatorEntry, StatModule
from .mapping import (
    DefaultValue,
    EnemyControls,
    FieldMapping,
    FieldStatus,
    MappingTable,
    StatMapping,
)
from .values import JsonValue, ValueShape, shape_of

__all__ = [
    # Documents
    "CD1Document",
    "CD2Document",
    "MutatorEntry",
    "StatModule",
    # Mapping table
    "DefaultValue",
    "EnemyControls",
    "FieldMapping",
    "FieldStatus",
    "MappingTable",
    "StatMapping",
    # Conversion state
    "ConversionContext",
    "ConversionResult",
    "DroppedField",
    # Values
    "JsonValue",
    "ValueShape",
    "shape_of",
]
