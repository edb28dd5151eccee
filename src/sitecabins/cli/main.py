"""Typer CLI for site cabin layouts."""

import typer

from sitecabins.cli.commands import check_command, order_command
from sitecabins.domain import DEFAULT_CATALOGUE

app = typer.Typer(
    name="sitecabins",
    help="Lay out site cabins and containers, check overlaps and build orders.",
)

app.command(name="check")(check_command)
app.command(name="order")(order_command)


@app.command()
def catalogue() -> None:
    """List the catalogued unit types."""
    typer.echo("Available units:")
    typer.echo()
    max_type_width = max(len(unit_type) for unit_type in DEFAULT_CATALOGUE)
    for unit_type, entry in DEFAULT_CATALOGUE.items():
        dims = entry.dims
        typer.echo(
            f"  {unit_type:<{max_type_width}}  {entry.sku:<7} {entry.label:<16} "
            f"{dims.length:g} x {dims.width:g} x {dims.height:g} m  "
            f"${entry.weekly_rate:g}/wk"
        )


if __name__ == "__main__":
    app()
