import click

from .commands.inspect import inspect_command
from .commands.preview import preview_command


@click.group()
def app() -> None:
    pass


app.add_command(inspect_command, name="inspect")
app.add_command(preview_command, name="preview")
__all__ = ["app"]
