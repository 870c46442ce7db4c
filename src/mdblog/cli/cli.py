"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from mdblog.cli.commands import build_cmd, latest_cmd, list_cmd, routes_cmd, show_cmd, tags_cmd


app = typer.Typer(name="mdblog", no_args_is_help=True, help="Markdown blog content pipeline")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Markdown blog content pipeline."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="build")(build_cmd)
app.command(name="list")(list_cmd)
app.command(name="latest")(latest_cmd)
app.command(name="show")(show_cmd)
app.command(name="routes")(routes_cmd)
app.command(name="tags")(tags_cmd)
