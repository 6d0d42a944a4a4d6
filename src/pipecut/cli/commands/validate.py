"""``pipecut validate``: check a job file without running the optimization."""

from pathlib import Path
from typing import Annotated

import typer

from pipecut.application.config import (
    ConfigError,
    OptimizationJobConfiguration,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file to check"),
    ],
) -> None:
    """Check a pipe cutting job file.

    Reports JSON and schema errors, then the cutting advisories: a kerf as
    wide as the stock, pieces longer than the stock, too little stock for
    the demand, and stock specifications that will be ignored.

    Exit codes:
        0 - The job is valid
        1 - The job cannot be run
        2 - The job runs, but the plan may leave pieces uncut

    Example:
        pipecut validate job.json
    """
    typer.echo(f"Checking {config_file}...")

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _report_load_error(e)
        raise typer.Exit(code=1)

    typer.echo(describe_job(config))
    typer.echo()

    result = validate_config(config)
    _report_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def describe_job(config: OptimizationJobConfiguration) -> str:
    """One-line description of what a job asks for."""
    stock = config.stock[0]
    pieces = sum(cut.quantity for cut in config.cuts)
    return (
        f"{len(config.cuts)} cut length(s), {pieces} piece(s) from "
        f"{stock.quantity} x {stock.length:g} mm stock, "
        f"kerf {config.parameters.kerf_width:g} mm"
    )


def _load_error_lines(error: ConfigError) -> list[str]:
    if error.error_type == "file_not_found":
        return [f"File not found: {error.path}"]
    if error.error_type == "json_parse":
        return [
            f"Invalid JSON syntax at line {detail['line']}, "
            f"column {detail['column']}: {detail['message']}"
            for detail in error.details
        ]
    if error.error_type == "validation":
        return [f"{detail['path']}: {detail['message']}" for detail in error.details]
    return [error.message]


def _report_load_error(error: ConfigError) -> None:
    for line in _load_error_lines(error):
        typer.echo(f"  ERROR    {line}", err=True)
    typer.echo()
    typer.echo("Validation failed: the job file could not be loaded.", err=True)


def _report_validation_result(result: ValidationResult) -> None:
    for error in result.errors:
        typer.echo(f"  ERROR    {error.path}: {error.message}", err=True)
    for warning in result.warnings:
        typer.echo(f"  WARNING  {warning.path}: {warning.message}")
        if warning.suggestion:
            typer.echo(f"           Suggestion: {warning.suggestion}")
    if result.errors or result.warnings:
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Job can run, with {len(result.warnings)} warning(s).")
    else:
        typer.echo("Job is valid.")
