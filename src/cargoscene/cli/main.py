"""Typer CLI for container scene layout."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from cargoscene.application import get_factory
from cargoscene.application.config import (
    ConfigError,
    LayoutRequestSchema,
    load_request,
    load_request_from_dict,
    request_to_layout_input,
)
from cargoscene.application.dtos import LayoutOutput
from cargoscene.cli.commands import display_load_error, validate_command
from cargoscene.infrastructure import SceneSummaryFormatter, layout_to_dict
from cargoscene.infrastructure.exporters import ExporterRegistry, ExportManager


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _apply_overrides(
    request: LayoutRequestSchema,
    show_grid: bool,
    target_max: float | None,
) -> LayoutRequestSchema:
    """Re-validate the request with CLI setting overrides applied."""
    overrides = {}
    if show_grid:
        overrides["show_grid"] = True
    if target_max is not None:
        overrides["target_max"] = target_max
    if not overrides:
        return request

    data = request.model_dump(by_alias=False, exclude_none=True)
    data["settings"] = {**data["settings"], **overrides}
    return load_request_from_dict(data)


def _handle_multi_format_export(
    output_formats_str: str,
    output_dir: Path | None,
    project_name: str,
    result: LayoutOutput,
) -> None:
    """Export the scene to every format in ``output_formats_str``."""
    if output_formats_str.lower() == "all":
        formats = ExporterRegistry.available_formats()
    else:
        formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]

    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    manager: ExportManager = get_factory().create_export_manager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, result, project_name)
    except (OSError, ValueError) as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


app = typer.Typer(
    name="cargoscene",
    help="Turn container packing results into render-ready 3D scenes.",
)

app.command(name="validate")(validate_command)


@app.command()
def layout(
    request_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON layout request"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Console output: summary or json"),
    ] = "summary",
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: json,stl (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for exported files"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option(
            "--project-name",
            help="Base name for exported files (default: container name)",
        ),
    ] = None,
    show_grid: Annotated[
        bool,
        typer.Option("--show-grid", help="Emit a floor grid"),
    ] = False,
    target_max: Annotated[
        float | None,
        typer.Option("--target-max", help="Scene size of the longest container edge"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Lay out a container's items as a render-ready scene.

    Items carrying a position are projected as given; when no item has a
    position, items are shelf-packed on the container floor.

    Examples:
        cargoscene layout container-7.json
        cargoscene layout container-7.json --format json
        cargoscene layout container-7.json --output-formats json,stl --output-dir ./out
    """
    _configure_logging(verbose)

    try:
        request = _apply_overrides(load_request(request_file), show_grid, target_max)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    command = get_factory().create_generate_command()
    result = command.execute(request_to_layout_input(request))

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_formats:
        name = project_name or result.display_name
        _handle_multi_format_export(output_formats, output_dir, name, result)
        return

    if output_format == "json":
        typer.echo(json.dumps(layout_to_dict(result), indent=2, default=str))
    elif output_format == "summary":
        typer.echo(SceneSummaryFormatter().format(result))
    else:
        typer.echo(f"Unknown format: {output_format}. Use summary or json.", err=True)
        raise typer.Exit(code=1)


@app.command()
def formats() -> None:
    """List the available export formats."""
    for name in ExporterRegistry.available_formats():
        typer.echo(name)


if __name__ == "__main__":
    app()
