from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ...domain.entities.mapping import FieldStatus
from ...infrastructure.container import DependencyContainer

console = Console()

_STATUS_STYLES = {
    FieldStatus.RELOCATE: "green",
    FieldStatus.HANDLED: "cyan",
    FieldStatus.MUTATOR: "magenta",
    FieldStatus.DROP: "yellow",
}


@click.command()
@click.option(
    "--status",
    type=click.Choice([status.value for status in FieldStatus]),
    help="Only list fields with this status",
)
@click.option(
    "--stats/--no-stats",
    "show_stats",
    default=False,
    show_default=True,
    help="Also list the PawnStats translations",
)
@click.option(
    "--table",
    "table_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Mapping table file to list instead of the packaged one",
)
def fields_command(status: str | None, show_stats: bool, table_path: Path | None) -> None:
    """List how each CD1 field is carried into CD2."""
    container = DependencyContainer(console=console, mapping_table_path=table_path)
    try:
        mapping_table = container.create_mapping_repository().load()
    except Exception as exc:
        raise click.ClickException(str(exc)) from exc

    table = Table(title=f"CD1 → CD2 Field Mapping ({mapping_table.version})")
    table.add_column("CD1 field", style="bold")
    table.add_column("Status")
    table.add_column("CD2 destination")
    table.add_column("Notes", style="dim")
    for mapping in mapping_table.top_fields:
        if status is not None and mapping.status != status:
            continue
        style = _STATUS_STYLES[mapping.status]
        notes = mapping.reason or ""
        if mapping.transform != "identity":
            notes = mapping.transform
        if mapping.mutator_type:
            notes = f"{mapping.mutator_type} mutator"
        if mapping.required:
            notes = "required"
        table.add_row(
            mapping.source,
            f"[{style}]{mapping.status.value}[/{style}]",
            mapping.destination or "-",
            notes,
        )
    console.print(table)

    if show_stats:
        stats = Table(title="PawnStats Translation")
        stats.add_column("CD1 stat", style="bold")
        stats.add_column("CD2 destination")
        stats.add_column("Transform", style="dim")
        for stat in mapping_table.pawn_stats:
            module, field = stat.destination
            transform = stat.transform
            if stat.alias_of:
                transform = f"{transform} (alias of {stat.alias_of})"
            stats.add_row(stat.source, f"{module}.{field}", transform)
        console.print(stats)
