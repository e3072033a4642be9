"""Convert command - Turn a CD1 difficulty file into a CD2 difficulty file.

This module is a thin adapter between Click and the application layer's
ConversionUseCase. It is responsible for:
1. Merging CLI flags over the loaded configuration
2. Creating the ConvertRequest
3. Calling the use case
4. Presenting the response
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import cast

import click
from rich.console import Console

from ...application.models import ConvertRequest, OutputOptions
from ...config import ConfigLoader, TranspilerConfig
from ...infrastructure.container import DependencyContainer
from ..presenters.summary import SummaryPresenter

console = Console()


@dataclass(frozen=True)
class ConvertCommandOptions:
    config_file: Path | None
    dont_pretty_print: bool
    strict: bool | None
    raw_multiline: bool | None
    verbose: int

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> ConvertCommandOptions:
        return cls(
            config_file=cast("Path | None", options.get("config_file")),
            dont_pretty_print=cast("bool", options["dont_pretty_print"]),
            strict=cast("bool | None", options.get("strict")),
            raw_multiline=cast("bool | None", options.get("raw_multiline")),
            verbose=cast("int", options["verbose"]),
        )

    def apply(self, config: TranspilerConfig) -> ConvertRequestSettings:
        return ConvertRequestSettings(
            output=OutputOptions(
                pretty_print=config.pretty_print and not self.dont_pretty_print,
                indent=config.indent,
                raw_multiline_description=(
                    config.raw_multiline_description
                    if self.raw_multiline is None
                    else self.raw_multiline
                ),
            ),
            strict=config.strict if self.strict is None else self.strict,
            output_marker=config.output_marker,
        )


@dataclass(frozen=True)
class ConvertRequestSettings:
    output: OutputOptions
    strict: bool
    output_marker: str


@click.command()
@click.argument(
    "source", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.argument(
    "target", required=False, type=click.Path(dir_okay=False, path_type=Path)
)
@click.option(
    "-d",
    "--dont-pretty-print",
    "dont_pretty_print",
    is_flag=True,
    help="Write compact JSON instead of indented JSON",
)
@click.option(
    "--strict/--lenient",
    "strict",
    default=None,
    help="Fail on unrecognized fields instead of dropping them (default: lenient)",
)
@click.option(
    "--raw-multiline/--escaped-multiline",
    "raw_multiline",
    default=None,
    help="Write Description line breaks literally or escaped (default: as in SOURCE)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a cd2_transpiler.toml config file (default: ./cd2_transpiler.toml)",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def convert_command(source: Path, target: Path | None, **options: object) -> None:
    """Convert a CD1 difficulty file to the CD2 format.

    The result is written to TARGET, or next to SOURCE with ``.cd2`` inserted
    before the extension. Nothing is written when the conversion fails.

    Examples:

    \b
        # Writes Hazard6.cd2.json
        cd2-transpiler convert Hazard6.json

    \b
        # Compact output to an explicit file
        cd2-transpiler convert Hazard6.json out/Hazard6.json -d
    """
    command_options = ConvertCommandOptions.from_kwargs(dict(options))
    runtime_config = ConfigLoader.load(config_file=command_options.config_file)
    settings = command_options.apply(runtime_config)

    request = ConvertRequest(
        source=source,
        target=target,
        output=settings.output,
        strict=settings.strict,
        output_marker=settings.output_marker,
    )

    container = DependencyContainer(verbose=command_options.verbose, console=console)
    use_case = container.create_conversion_use_case()
    response = use_case.execute(request)

    presenter = SummaryPresenter(console)
    presenter.present(response, verbose=command_options.verbose)
    container.create_logger().log_final_stats()

    if not response.success:
        raise click.ClickException(response.error or "Conversion failed")
