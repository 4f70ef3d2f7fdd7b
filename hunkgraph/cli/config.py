"""CLI commands for configuration management."""

import typer

from hunkgraph import config as hunkgraph_config

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage hunkgraph configuration in ~/.hunkgraph/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show current configuration."""
    try:
        config = hunkgraph_config.load_config()
    except hunkgraph_config.ConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Current hunkgraph configuration ({hunkgraph_config.get_config_file_path()}):")
    typer.echo()
    typer.echo(f"  Palette Size: {config.palette_size}")
    typer.echo(f"  Log Level: {config.log_level}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Setting name (palette_size, log_level)"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set a configuration value."""
    key = key.replace("-", "_")
    try:
        config = hunkgraph_config.set_config_value(key, value)
    except hunkgraph_config.ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Set {key} = {getattr(config, key)}")
