from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from ..constants import Defaults

if TYPE_CHECKING:
    from ..domain.entities.conversion import DroppedField
    from ..domain.entities.document import CD2Document


def _empty_str_list() -> list[str]:
    return []


def _empty_dropped() -> list[DroppedField]:
    return []


@dataclass(frozen=True, slots=True)
class OutputOptions:
    pretty_print: bool = Defaults.PRETTY_PRINT
    indent: int = Defaults.INDENT
    raw_multiline_description: bool | None = Defaults.RAW_MULTILINE_DESCRIPTION


@dataclass(slots=True)
class ConvertRequest:
    source: Path
    target: Path | None = None
    output: OutputOptions = field(default_factory=OutputOptions)
    strict: bool = Defaults.STRICT
    output_marker: str = Defaults.OUTPUT_MARKER


@dataclass(slots=True)
class ConvertResponse:
    success: bool = True
    source: Path | None = None
    target: Path | None = None
    document: CD2Document | None = None
    warnings: list[str] = field(default_factory=_empty_str_list)
    notes: list[str] = field(default_factory=_empty_str_list)
    dropped: list[DroppedField] = field(default_factory=_empty_dropped)
    error: str | None = None
    error_type: str | None = None

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def to_dict(self) -> dict[str, object]:
        return {
            "success": self.success,
            "source": str(self.source) if self.source else None,
            "target": str(self.target) if self.target else None,
            "warnings": list(self.warnings),
            "notes": list(self.notes),
            "dropped": [d.name for d in self.dropped],
            "error": self.error,
            "error_type": self.error_type,
        }
