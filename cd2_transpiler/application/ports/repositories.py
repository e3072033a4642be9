from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.document import CD1Document, CD2Document
    from ...domain.entities.mapping import MappingTable
    from ..models import OutputOptions


@runtime_checkable
class MappingTableRepositoryPort(Protocol):
    pass

    def load(self) -> MappingTable: ...


@runtime_checkable
class DocumentFilePort(Protocol):
    pass

    def target_path(self, source: Path, target: Path | None, marker: str) -> Path: ...

    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, text: str) -> Path: ...


@runtime_checkable
class DocumentCodecPort(Protocol):
    pass

    def parse(self, text: str) -> CD1Document: ...

    def serialize(self, document: CD2Document, options: OutputOptions) -> str: ...
