"""Command line entry point for tma.

Loads the layout, then starts or kills the session it describes. Every
tma failure becomes a single error line and exit status 1.
"""

import logging
import sys

import click
from rich.console import Console

from . import __version__
from .config import DEFAULT_CONFIG_FILE, load_session
from .exceptions import TmaError
from .session import SessionBuilder

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def _configure_logging(verbose: int) -> None:
    logging.basicConfig(
        level=LOG_LEVELS.get(verbose, logging.DEBUG),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


@click.command(name="tma")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=DEFAULT_CONFIG_FILE,
    show_default=True,
    help="Layout file",
)
@click.option("-k", "--kill", is_flag=True, help="Kill the configured session")
@click.option("-n", "--dry-run", is_flag=True, help="Print the tmux commands instead of running them")
@click.option("-v", "--verbose", count=True, help="More output (-vv for debug)")
@click.version_option(__version__, prog_name="tma")
def cli(config_path: str, kill: bool, dry_run: bool, verbose: int) -> None:
    """Build a tmux session from a TOML layout and attach to it."""
    _configure_logging(verbose)

    try:
        session = load_session(config_path)
        builder = SessionBuilder(session, dry_run=dry_run)
        if kill:
            builder.kill()
        else:
            builder.start()
    except TmaError as e:
        err_console.print(f"Error: {e}", style="red", markup=False, highlight=False, emoji=False, soft_wrap=True)
        sys.exit(1)

    if dry_run:
        for args in builder.commands:
            console.print(builder.runner.command_line(args), markup=False, highlight=False, emoji=False, soft_wrap=True)
    else:
        logger.info(f"Session '{builder.name}' ready")


def main() -> None:
    """Console script entry point."""
    cli()
