"""Validate command for checking job files.

This module provides the `validate` command that checks a JSON job file
for errors, and warns about pieces no stock sheet can hold.
"""

from pathlib import Path
from typing import Annotated

import typer

from sheetcut.application.config import (
    ConfigError,
    JobConfiguration,
    config_to_required_panels,
    config_to_settings,
    config_to_stock_panels,
    load_config,
)
from sheetcut.domain import PackerType, PanelAdjuster


def validate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file to validate"),
    ],
) -> None:
    """Validate a job file.

    Checks the job file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, non-positive sizes, etc.)
    - Pieces that no stock sheet can hold, after edge adjustments

    Exit codes:
        0 - Job is valid with no warnings
        1 - Job has errors (cannot be used)
        2 - Job is valid but has warnings

    Example:
        sheetcut validate job.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    warnings = oversized_piece_warnings(config)
    if warnings:
        typer.echo("Warnings:")
        for warning in warnings:
            typer.echo(f"  {warning}")
        typer.echo()
        typer.echo("Job is valid with warnings.")
        raise typer.Exit(code=2)

    typer.echo(
        f"Job is valid: {len(config.stock)} stock entries, "
        f"{len(config.required)} required entries."
    )


def oversized_piece_warnings(config: JobConfiguration) -> list[str]:
    """Describe required pieces that fit on none of the stock sheets.

    Pieces are checked at their adjusted size, in both orientations unless
    grain is considered. The grid engine also needs room for the kerf.
    """
    settings = config_to_settings(config)
    adjuster = PanelAdjuster(settings)
    stock = config_to_stock_panels(config)
    kerf = settings.kerf_width if settings.packer_type is PackerType.GRID_HEURISTIC else 0.0

    warnings: list[str] = []
    for index, panel in enumerate(config_to_required_panels(config)):
        adjusted = adjuster.adjust(panel)
        name = panel.label or f"required[{index}]"
        if not adjusted.is_placeable:
            warnings.append(f"{name}: non-positive size after edge banding")
            continue

        orientations = [(adjusted.width, adjusted.length)]
        if adjusted.can_rotate:
            orientations.append((adjusted.length, adjusted.width))

        fits = any(
            w + kerf <= sheet.length and h + kerf <= sheet.width
            for sheet in stock
            for w, h in orientations
        )
        if not fits:
            warnings.append(
                f"{name}: {panel.length:g} x {panel.width:g} does not fit on any stock sheet"
            )
    return warnings


def display_load_error(error: ConfigError) -> None:
    """Display a job file loading error on stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)
