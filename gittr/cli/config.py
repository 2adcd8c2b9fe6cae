"""CLI commands for inspecting gittr preferences."""

import typer

from gittr.config import ConfigStore, get_config_file_path

# Subcommand group for configuration diagnostics
config_app = typer.Typer(
    name="config",
    help="Inspect gittr preferences in ~/.gittr/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show current preferences."""
    config_file = get_config_file_path()
    if not config_file.exists():
        typer.echo("No preferences saved yet. Run 'gittr reconfig' to set them up.")
        return

    values = ConfigStore(config_file).get_all_values()

    typer.echo(f"Current gittr preferences ({config_file}):")
    typer.echo()
    for key, value in values.items():
        typer.echo(f"  {key}: {'not set' if value is None else value}")


@config_app.command("path")
def config_path() -> None:
    """Print the path of the preferences file."""
    typer.echo(str(get_config_file_path()))
