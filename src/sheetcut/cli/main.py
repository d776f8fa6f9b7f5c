"""Typer CLI for sheet cutting optimization."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from sheetcut.application import CalculateLayoutCommand
from sheetcut.application.config import (
    ConfigError,
    config_to_required_panels,
    config_to_settings,
    config_to_stock_panels,
    load_config,
    merge_cli_overrides,
)
from sheetcut.cli.commands import display_load_error, validate
from sheetcut.domain import FitRule, PackerType, UnknownPackerError
from sheetcut.infrastructure import JsonExporter, LayoutReportFormatter, PackerFactory

OUTPUT_FORMATS = ("text", "json")

app = typer.Typer(
    name="sheetcut",
    help="Lay out rectangular pieces on stock sheets to minimize waste.",
)

app.command(name="validate")(validate)


@app.command()
def pack(
    config_file: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to JSON job file"),
    ],
    packer: Annotated[
        PackerType | None,
        typer.Option("--packer", "-p", help="Placement engine (overrides job file)"),
    ] = None,
    fit_rule: Annotated[
        FitRule | None,
        typer.Option("--fit-rule", help="Fit rule for the maximal-rectangles engine"),
    ] = None,
    kerf: Annotated[
        float | None,
        typer.Option("--kerf", "-k", help="Saw kerf width (overrides job file)"),
    ] = None,
    grain: Annotated[
        bool | None,
        typer.Option("--grain/--no-grain", help="Forbid or allow rotating pieces"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to a file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log calculation progress"),
    ] = False,
) -> None:
    """Calculate cutting layouts for a job file.

    CLI options override the corresponding job file settings.

    Examples:
        sheetcut pack --config job.json
        sheetcut pack --config job.json --packer maximal-rectangles --fit-rule contact-point
        sheetcut pack --config job.json --kerf 3 --no-grain --format json --output layout.json
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: unknown format '{output_format}'. "
            f"Choose from: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    try:
        settings = merge_cli_overrides(
            config_to_settings(config),
            packer=packer,
            fit_rule=fit_rule,
            kerf_width=kerf,
            consider_grain=grain,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    stock = config_to_stock_panels(config)
    required = config_to_required_panels(config)

    try:
        result = CalculateLayoutCommand().execute(stock, required, settings)
    except UnknownPackerError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        report = JsonExporter(settings).export(result)
    else:
        report = LayoutReportFormatter(settings).format(result)

    if output_file is not None:
        output_file.write_text(report, encoding="utf-8")
        typer.echo(f"Layout written to {output_file}")
    else:
        typer.echo(report)

    if not result.layouts and required:
        typer.echo(
            "Warning: no layout could be calculated; "
            "a stock sheet may be too large for the selected engine",
            err=True,
        )
    elif result.remaining_panels:
        typer.echo(
            f"Warning: {len(result.remaining_panels)} pieces could not be placed",
            err=True,
        )


@app.command()
def packers() -> None:
    """List the available placement engines and fit rules."""
    typer.echo("Placement engines:")
    for name in PackerFactory.available_packers():
        typer.echo(f"  {name}")
    typer.echo()
    typer.echo("Fit rules (maximal-rectangles):")
    for rule in FitRule:
        typer.echo(f"  {rule.value}")


if __name__ == "__main__":
    app()
