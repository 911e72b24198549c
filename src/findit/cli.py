"""
Command-line entry point for findit.

    findit [opts] [startdir] query

Flags are parsed by findit's own ConfigParser so they can be freely mixed with
the positional arguments; typer only collects the raw tokens.
"""

import logging
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.text import Text

from .config.parser import ConfigParser, ConfigurationError
from .logging_config import configure_logging
from .output.reporter import Reporter
from .search import run
from .tools.line_search import printable_path


logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


@app.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def main(
    args: Annotated[
        Optional[List[str]],
        typer.Argument(
            help="Optional start directory followed by the query, mixed with "
            "-x EXT (extension filter), -i (ignore case), -L (files without match), -d (debug)",
            show_default=False,
        ),
    ] = None,
):
    """Recursively search text files below startdir for lines containing query."""
    console = Console(highlight=False)

    try:
        config = ConfigParser().parse(args or [])
    except ConfigurationError as e:
        console.print(Text(f"Problem parsing argument: {e.message}"), soft_wrap=True)
        raise typer.Exit(code=1)

    configure_logging(config.debug)
    logger.debug(str(config))

    try:
        run(config, Reporter(config, console))
    except OSError as e:
        console.print(Text(f"Application error {printable_path(str(e))}"), soft_wrap=True)
        raise typer.Exit(code=1)
