import click

from .commands.convert import convert_command
from .commands.fields import fields_command


@click.group()
@click.version_option(package_name="cd2-transpiler")
def app() -> None:
    """Convert CD1 difficulty files to the CD2 format."""


app.add_command(convert_command, name="convert")
app.add_command(fields_command, name="fields")
__all__ = ["app"]
