"""Root callback for the gittr CLI."""

import logging

import typer

from gittr import __version__
from gittr.constants import APP_NAME


def main_command(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Show debug logging on stderr",
    ),
    show_version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the gittr version and exit",
    ),
) -> None:
    """Pick an emoji and commit with it."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if show_version:
        typer.echo(f"{APP_NAME} - {__version__}")
        raise typer.Exit(0)

    # If a subcommand is invoked, let it run
    if ctx.invoked_subcommand is not None:
        return

    typer.echo(ctx.get_help())
