"""CLI entry point for gittr.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer
from dotenv import load_dotenv

from gittr.cli.commands import (
    commit_command,
    list_command,
    reconfig_command,
    search_command,
    update_command,
    version_command,
)
from gittr.cli.config import config_app
from gittr.cli.main import main_command

# Pick up GITTR_EMOJI_SOURCE from a .env file
load_dotenv()

# Main application
app = typer.Typer(
    name="gittr",
    help="gittr: emoji-powered git commits",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("commit")(commit_command)
app.command("reconfig")(reconfig_command)
app.command("list")(list_command)
app.command("search")(search_command)
app.command("update")(update_command)
app.command("version")(version_command)

app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
    "commit_command",
    "reconfig_command",
    "list_command",
    "search_command",
    "update_command",
    "version_command",
]
