"""CD2 Transpiler package.

Converts difficulty configurations written for the CD1 schema into the
module-grouped CD2 schema.

Features:
- Declarative CD1 → CD2 field mapping table
- PawnStats translation into stat modules
- StartingNitra expressed as a resupply mutator
- Deterministic pretty or compact JSON output
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("cd2-transpiler")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from cd2_transpiler.domain.entities.document import CD1Document, CD2Document
from cd2_transpiler.domain.services.converter import CD2Converter
from cd2_transpiler.infrastructure.io.cd1_reader import parse_cd1
from cd2_transpiler.infrastructure.io.cd2_serializer import serialize
from cd2_transpiler.infrastructure.repositories.mapping_table_repository import (
    load_mapping_table,
)

__all__ = [
    "__version__",
    # Documents
    "CD1Document",
    "CD2Document",
    # Conversion
    "CD2Converter",
    "load_mapping_table",
    # JSON
    "parse_cd1",
    "serialize",
]
