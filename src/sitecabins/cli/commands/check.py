"""Check command: report footprints and collisions for a layout file.

Exit codes:
    0 - No units overlap
    1 - The layout file could not be loaded
    2 - At least two units overlap
"""

from pathlib import Path
from typing import Annotated

import typer

from sitecabins.application import CheckLayoutCommand, LayoutReport
from sitecabins.cli.commands._common import load_working_set
from sitecabins.domain.services import GridStepError


def check_command(
    layout_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON layout file to check"),
    ],
    snap_step: Annotated[
        float | None,
        typer.Option("--snap", help="Snap item positions to this grid step first"),
    ] = None,
    use_layout_grid: Annotated[
        bool,
        typer.Option("--grid", help="Snap item positions to the layout's grid_step first"),
    ] = False,
) -> None:
    """Check a site layout for overlapping units.

    Example:
        sitecabins check site.json --snap 0.5
        sitecabins check site.json --grid

    An explicit ``--snap`` step wins over ``--grid``.
    """
    config, working_set = load_working_set(layout_file)

    if snap_step is None and use_layout_grid:
        snap_step = config.grid_step
    if snap_step is not None:
        try:
            working_set.snap_all(snap_step)
        except GridStepError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    report = CheckLayoutCommand().execute(working_set)
    _display_report(report)

    raise typer.Exit(code=2 if report.has_overlaps else 0)


def _display_report(report: LayoutReport) -> None:
    typer.echo(f"Units placed: {len(report.footprints)}")
    for footprint in report.footprints:
        box = footprint.box
        typer.echo(
            f"  {footprint.item_id[:8]}  {footprint.unit_type:<10} "
            f"x {box.min_x:.2f}..{box.max_x:.2f}  z {box.min_z:.2f}..{box.max_z:.2f}"
        )

    if report.orphaned_ids:
        typer.echo(f"Ignored units with unknown type: {len(report.orphaned_ids)}")

    typer.echo()
    if report.has_overlaps:
        typer.echo("Overlaps:")
        for first_id, second_id in report.overlaps:
            typer.echo(f"  {first_id[:8]} <-> {second_id[:8]}")
    else:
        typer.echo("No overlaps found.")

    typer.echo()
    typer.echo(f"Weekly total: ${report.order.total_weekly:,.2f} AUD")
