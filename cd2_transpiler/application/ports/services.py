from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.conversion import DroppedField


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_conversion_start(self, source: Path, target: Path) -> None: ...

    def log_field_dropped(self, dropped: DroppedField) -> None: ...

    def log_conversion_complete(
        self, target: Path, *, module_count: int, mutator_count: int
    ) -> None: ...

    def log_final_stats(self) -> None: ...
