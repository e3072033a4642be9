from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.conversion import DroppedField


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_conversion_start(self, source: Path, target: Path) -> None:
        return None

    @override
    def log_field_dropped(self, dropped: DroppedField) -> None:
        return None

    @override
    def log_conversion_complete(
        self, target: Path, *, module_count: int, mutator_count: int
    ) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
