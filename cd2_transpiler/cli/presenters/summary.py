from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from ...application.models import ConvertResponse
    from ...domain.entities.conversion import DroppedField


class SummaryPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, response: ConvertResponse, *, verbose: int = 0) -> None:
        self.console.print()
        self.console.print(self._build_summary_table(response))
        if response.dropped and verbose > 0:
            self.console.print()
            self.console.print(self._build_dropped_table(response.dropped))
        self.console.print()
        self._print_status(response)

    def _build_summary_table(self, response: ConvertResponse) -> Table:
        table = Table(title="Conversion Summary", show_header=False)
        table.add_column("Item", style="cyan")
        table.add_column("Value")
        table.add_row("Source", escape(str(response.source or "")))
        table.add_row("Output", escape(str(response.target or "")))
        document = response.document
        if document is not None:
            table.add_row("Modules", ", ".join(document.modules))
            mutators = ", ".join(m.mutator_type for m in document.mutators)
            table.add_row("Mutators", mutators or "-")
            if document.extensions:
                table.add_row("Extensions", escape(", ".join(document.extensions)))
        table.add_row("Dropped fields", str(len(response.dropped)))
        table.add_row("Warnings", str(len(response.warnings)))
        return table

    def _build_dropped_table(self, dropped: Sequence[DroppedField]) -> Table:
        table = Table(title="Dropped Fields")
        table.add_column("Field", style="yellow")
        table.add_column("Location")
        table.add_column("Reason", style="dim")
        for item in dropped:
            table.add_row(escape(item.name), escape(item.location), escape(item.reason))
        return table

    def _print_status(self, response: ConvertResponse) -> None:
        if not response.success:
            self.console.print("[bold red]✗ Conversion failed[/bold red]")
        elif response.has_warnings:
            self.console.print(
                f"[bold yellow]⚠ Converted with {len(response.warnings)} "
                "warning(s)[/bold yellow]"
            )
        else:
            self.console.print("[bold green]✓ Converted successfully[/bold green]")
