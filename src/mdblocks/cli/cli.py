"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from mdblocks.cli.commands import checklist_cmd, parse_cmd, placeholders_cmd


app = typer.Typer(name="mdblocks", no_args_is_help=True, help="Markdown to typed document model")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Configure logging before running a command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="parse")(parse_cmd)
app.command(name="checklist")(checklist_cmd)
app.command(name="placeholders")(placeholders_cmd)
