"""CLI commands that route to the gittr dispatcher."""

import typer

from gittr import __version__
from gittr.catalog import FetchError
from gittr.config import ConfigWriteError
from gittr.constants import APP_NAME
from gittr.dispatcher import Gittr
from gittr.git import GitError
from gittr.prompts import PromptCancelled


def _create_gittr() -> Gittr:
    try:
        return Gittr()
    except ConfigWriteError as e:
        typer.echo(f"Error saving configuration: {e}", err=True)
        raise typer.Exit(1)


def commit_command() -> None:
    """Choose an emoji, write a subject and commit."""
    gittr = _create_gittr()
    try:
        gittr.commit()
    except PromptCancelled as e:
        typer.echo(f"Aborted. {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)


def reconfig_command() -> None:
    """Set your gittr preferences."""
    gittr = _create_gittr()
    try:
        gittr.reconfig()
    except PromptCancelled as e:
        typer.echo(f"Aborted. {e}", err=True)
        raise typer.Exit(1)
    except ConfigWriteError as e:
        typer.echo(f"Error saving configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Preferences saved to {gittr.config.path}")


def list_command() -> None:
    """List every available emoji."""
    gittr = _create_gittr()
    gittr.list()


def search_command() -> None:
    """Search for an emoji and print it."""
    gittr = _create_gittr()
    try:
        gittr.search()
    except PromptCancelled as e:
        typer.echo(f"Aborted. {e}", err=True)
        raise typer.Exit(1)


def update_command() -> None:
    """Refresh the emoji list from gitmoji."""
    gittr = _create_gittr()
    try:
        emojis = gittr.update()
    except FetchError as e:
        kept = len(gittr.catalog.get())
        typer.echo(f"Warning: {e}", err=True)
        typer.echo(f"Keeping the current list of {kept} emoji(s).", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Emoji list updated ({len(emojis)} emoji(s)).")


def version_command() -> None:
    """Show the gittr version."""
    typer.echo(f"{APP_NAME} - {__version__}")
