"""Order command: build a checkout payload for a layout file."""

import json
from pathlib import Path
from typing import Annotated

import typer

from sitecabins.cli.commands._common import load_working_set
from sitecabins.infrastructure.checkout import build_order


def order_command(
    layout_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON layout file"),
    ],
    platform: Annotated[
        str | None,
        typer.Option(
            "--platform",
            "-p",
            help="Payload shape: generic, shopify or stripe (defaults to the layout's)",
        ),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the payload to this file"),
    ] = None,
) -> None:
    """Print the checkout payload for a site layout.

    Unknown platforms produce the generic payload.

    Example:
        sitecabins order site.json --platform stripe
    """
    config, working_set = load_working_set(layout_file)
    payload = build_order(
        working_set, platform or config.platform, working_set.catalogue
    )
    text = json.dumps(payload, indent=2)

    if output_file is None:
        typer.echo(text)
        return

    output_file.write_text(text + "\n", encoding="utf-8")
    typer.echo(f"Order payload written to {output_file}")
