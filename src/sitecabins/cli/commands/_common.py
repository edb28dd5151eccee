"""Helpers shared by the layout commands."""

from pathlib import Path

import typer

from sitecabins.application.config import (
    ConfigError,
    LayoutConfiguration,
    config_to_working_set,
    load_config,
)
from sitecabins.domain import WorkingSet


def display_config_error(error: ConfigError) -> None:
    """Print a layout loading error to stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "validation" and error.details:
        for detail in error.details:
            typer.echo(f"  {detail['path']}: {detail['message']}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def load_working_set(layout_file: Path) -> tuple[LayoutConfiguration, WorkingSet]:
    """Load a layout file, exiting with code 1 on any configuration error."""
    try:
        config = load_config(layout_file)
        return config, config_to_working_set(config)
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)
