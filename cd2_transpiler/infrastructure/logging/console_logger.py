from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING

from typing_extensions import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort
from ...constants import LogLevels

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.conversion import DroppedField


class LogLevel(IntEnum):
    NORMAL = LogLevels.NORMAL
    VERBOSE = LogLevels.VERBOSE
    DEBUG = LogLevels.DEBUG


@dataclass(slots=True)
class LogContext:
    source: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "files_converted": 0,
        "fields_dropped": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    """Rich console logger.

    Messages coming from documents are escaped before printing, since CD1
    field names and descriptions may contain ``[...]`` sequences that rich
    would otherwise read as markup.
    """

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats = _empty_stats()

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            self.console.print(f"{self._get_prefix()}{escape(message)}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print(f"[dim]{self._get_prefix()}{escape(message)}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            self.console.print(
                f"[dim cyan]{self._get_prefix()}{escape(message)}[/dim cyan]"
            )

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @override
    def log_conversion_start(self, source: Path, target: Path) -> None:
        self._context = LogContext(source=source.name)
        self.verbose(f"Converting {source}")
        self.verbose(f"Output file: {target}")

    @override
    def log_field_dropped(self, dropped: DroppedField) -> None:
        self._stats["fields_dropped"] += 1
        self.verbose(
            f"Dropped [{dropped.name}] in {dropped.location}: {dropped.reason}"
        )

    @override
    def log_conversion_complete(
        self, target: Path, *, module_count: int, mutator_count: int
    ) -> None:
        self._stats["files_converted"] += 1
        details = f"{module_count} modules"
        if mutator_count:
            details += f", {mutator_count} mutators"
        if self._context is not None and self.verbosity >= LogLevel.DEBUG:
            details += f", {self._context.elapsed_ms():.1f} ms"
        self.success(f"Wrote {target} ({details})")
        self._context = None

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Conversion Statistics:[/dim]")
            self.console.print(
                f"[dim]  Files converted: {self._stats['files_converted']}[/dim]"
            )
            self.console.print(
                f"[dim]  Fields dropped: {self._stats['fields_dropped']}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        return f"\\[{escape(self._context.source)}] " if self._context.source else ""
