"""Typer CLI for seat layout planning."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from seatplanner.application import CalculateProjectCommand, ProjectOutput
from seatplanner.application.config import (
    ConfigError,
    config_to_venues,
    load_config,
    load_config_from_dict,
    venues_to_config_dict,
)
from seatplanner.cli.commands import display_load_error, validate_command
from seatplanner.domain import default_venue
from seatplanner.infrastructure import (
    JsonExporter,
    LayoutDiagramFormatter,
    ProjectSummaryFormatter,
)
from seatplanner.infrastructure.exporters import ExporterRegistry, ExportManager


def _calculate_from_config(config_file: Path, venue_id: str | None = None) -> ProjectOutput:
    """Load a project file and calculate its venues.

    Exits with code 1 when the file cannot be loaded or the venue is unknown.
    """
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    all_venues = config_to_venues(config)
    venues = all_venues
    if venue_id is not None:
        venues = [venue for venue in all_venues if venue.id == venue_id]
        if not venues:
            known = ", ".join(venue.id for venue in all_venues)
            typer.echo(f"Error: Unknown venue '{venue_id}'. Known venues: {known}", err=True)
            raise typer.Exit(code=1)

    result = CalculateProjectCommand().execute(venues, config.project_name)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    return result


def _parse_formats(formats_str: str) -> list[str]:
    available = ExporterRegistry.available_formats()
    if formats_str.lower() == "all":
        return available

    formats = [f.strip().lower() for f in formats_str.split(",") if f.strip()]
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    if not formats:
        typer.echo("No formats to export.", err=True)
        raise typer.Exit(code=1)
    return formats


app = typer.Typer(
    name="seatplanner",
    help="Seat layout planner for tents and halls.",
    no_args_is_help=True,
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Seat layout planner for tents and halls."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


@app.command()
def calculate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = "text",
    venue_id: Annotated[
        str | None,
        typer.Option("--venue", help="Only calculate the venue with this id"),
    ] = None,
    include_chairs: Annotated[
        bool,
        typer.Option("--chairs/--no-chairs", help="Include chair slots in JSON output"),
    ] = False,
) -> None:
    """Calculate seat counts for every venue of a project."""
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}. Use text or json.", err=True)
        raise typer.Exit(code=1)

    result = _calculate_from_config(config_file, venue_id)

    if output_format == "json":
        typer.echo(JsonExporter(include_chairs=include_chairs).export(result))
    else:
        typer.echo(ProjectSummaryFormatter().format(result))


@app.command()
def diagram(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    venue_id: Annotated[
        str | None,
        typer.Option("--venue", help="Only draw the venue with this id"),
    ] = None,
    width: Annotated[
        int,
        typer.Option("--width", "-w", min=10, help="Diagram width in characters"),
    ] = 72,
) -> None:
    """Show an ASCII plan of each venue."""
    result = _calculate_from_config(config_file, venue_id)

    formatter = LayoutDiagramFormatter()
    plans = [formatter.format(venue, width=width) for venue in result.venues]
    typer.echo("\n\n".join(plans))


@app.command()
def export(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    output_formats: Annotated[
        str,
        typer.Option(
            "--formats",
            help="Comma-separated export formats: csv,dxf,json,svg (or 'all')",
        ),
    ] = "all",
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-o", help="Output directory for exported files"),
    ] = Path("."),
    project_name: Annotated[
        str | None,
        typer.Option(
            "--project-name",
            help="Project name for output file naming (default: from config)",
        ),
    ] = None,
    venue_id: Annotated[
        str | None,
        typer.Option("--venue", help="Only export the venue with this id"),
    ] = None,
) -> None:
    """Export seat plans to files."""
    formats = _parse_formats(output_formats)
    result = _calculate_from_config(config_file, venue_id)

    manager = ExportManager(output_dir)
    try:
        files = manager.export_all(formats, result, project_name or result.project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


@app.command()
def init(
    config_file: Annotated[
        Path,
        typer.Argument(help="Where to write the starter project file"),
    ],
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Project name stored in the file"),
    ] = "seating",
    venues: Annotated[
        int,
        typer.Option("--venues", min=1, max=50, help="Number of starter venues"),
    ] = 1,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing file"),
    ] = False,
) -> None:
    """Write a starter project file with default venues."""
    if config_file.exists() and not force:
        typer.echo(f"Error: {config_file} already exists. Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    starters = [
        default_venue(venue_id=f"tent-{i}", name=f"Tent {i}") for i in range(1, venues + 1)
    ]
    data = venues_to_config_dict(starters, project_name)
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    typer.echo(f"Wrote {config_file} with {venues} venue(s)")


@app.command()
def quick(
    width: Annotated[float, typer.Option("--width", "-w", help="Venue width in meters")],
    length: Annotated[float, typer.Option("--length", "-l", help="Venue length in meters")],
    aisles: Annotated[int, typer.Option("--aisles", "-a", help="Number of center aisles")] = 1,
    aisle_width: Annotated[float, typer.Option("--aisle-width", help="Center aisle width in cm")] = 100.0,
    chair_width: Annotated[float, typer.Option("--chair-width", help="Chair width in cm")] = 45.0,
    chair_depth: Annotated[float, typer.Option("--chair-depth", help="Chair depth in cm")] = 45.0,
    side_gap: Annotated[float, typer.Option("--side-gap", help="Gap between chairs in a row in cm")] = 5.0,
    front_gap: Annotated[float, typer.Option("--front-gap", help="Gap between rows in cm")] = 10.0,
    show_diagram: Annotated[bool, typer.Option("--diagram", help="Also print an ASCII plan")] = False,
) -> None:
    """Calculate a single venue from command-line dimensions."""
    data = {
        "venues": [
            {
                "id": "quick",
                "name": f"{width:g}m x {length:g}m",
                "width_m": width,
                "length_m": length,
                "chair": {
                    "width_cm": chair_width,
                    "depth_cm": chair_depth,
                    "side_gap_cm": side_gap,
                    "front_gap_cm": front_gap,
                },
                "aisles": {"count": aisles, "width_cm": aisle_width},
            }
        ]
    }
    try:
        config = load_config_from_dict(data)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = CalculateProjectCommand().execute(config_to_venues(config), config.project_name)
    venue_output = result.venues[0]

    typer.echo(ProjectSummaryFormatter().format(result))
    if show_diagram:
        typer.echo()
        typer.echo(LayoutDiagramFormatter().format(venue_output))


if __name__ == "__main__":
    app()
