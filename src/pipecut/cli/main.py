"""Typer CLI for pipe cutting optimization."""

import dataclasses
from pathlib import Path
from typing import Annotated

import typer

from pipecut.application import (
    CutInput,
    OptimizeCuttingCommand,
    ParametersInput,
    StockInput,
)
from pipecut.application.config import (
    ConfigError,
    config_to_inputs,
    load_config,
    merge_config_with_cli,
)
from pipecut.cli.commands import (
    CONSOLE_FORMATS,
    handle_multi_format_export,
    render_console_output,
    report_unmet_demand,
    validate_command,
)
from pipecut.infrastructure.exporters import ExporterRegistry

app = typer.Typer(
    name="pipecut",
    help="Plan how to cut required pipe lengths from stock pipes.",
)

# Register validate command
app.command(name="validate")(validate_command)


def parse_cut_option(value: str) -> CutInput:
    """Parse a ``LENGTHxQTY`` cut option such as ``1200x12``.

    Raises:
        ValueError: If the value is not in that form.
    """
    length_text, sep, quantity_text = value.strip().lower().partition("x")
    if not sep:
        raise ValueError(f"Expected LENGTHxQTY for --cut, got '{value}'")
    try:
        return CutInput(length=float(length_text), quantity=int(quantity_text))
    except ValueError:
        raise ValueError(f"Expected LENGTHxQTY for --cut, got '{value}'") from None


@app.command()
def optimize(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON job file"),
    ] = None,
    stock_length: Annotated[
        float | None,
        typer.Option("--stock-length", "-l", help="Stock pipe length in mm"),
    ] = None,
    stock_quantity: Annotated[
        int | None,
        typer.Option("--stock-quantity", "-q", help="Number of stock pipes"),
    ] = None,
    cuts: Annotated[
        list[str] | None,
        typer.Option("--cut", help="Required cut as LENGTHxQTY, e.g. 1200x12 (repeatable)"),
    ] = None,
    kerf: Annotated[
        float | None,
        typer.Option("--kerf", "-k", help="Saw blade width in mm"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: table, summary, diagram, json, all"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the JSON result to this file"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats (csv, dxf, json, svg, txt) or 'all'",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Directory for --output-formats files"),
    ] = None,
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Base name for exported files"),
    ] = "cutting_plan",
) -> None:
    """Compute a cutting plan for the required pipe lengths.

    Input comes from a JSON job file or from CLI options. When using
    --config, CLI options override job file values.

    Examples:
        pipecut optimize --stock-length 6000 --stock-quantity 10 --cut 1200x12 --cut 850x8
        pipecut optimize --config job.json
        pipecut optimize --config job.json --kerf 3 --format summary
        pipecut optimize --config job.json --output-formats dxf,csv --output-dir ./out
    """
    try:
        cut_inputs = [parse_cut_option(value) for value in cuts or []]
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format is not None and output_format not in CONSOLE_FORMATS:
        typer.echo(
            f"Error: Unknown format '{output_format}'. "
            f"Choose from: {', '.join(CONSOLE_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

        try:
            config = merge_config_with_cli(
                config,
                kerf_width=kerf,
                output_format=output_format,
                output_file=output_file,
            )
        except ValueError as e:
            typer.echo(f"Error: Invalid override: {e}", err=True)
            raise typer.Exit(code=1)
        stock_inputs, config_cuts, params_input = config_to_inputs(config)

        # Stock and cut options replace the job file values
        if stock_length is not None:
            stock_inputs[0] = dataclasses.replace(stock_inputs[0], length=stock_length)
        if stock_quantity is not None:
            stock_inputs[0] = dataclasses.replace(stock_inputs[0], quantity=stock_quantity)
        if not cut_inputs:
            cut_inputs = config_cuts

        output_format = config.output.format
        if config.output.output_file:
            output_file = Path(config.output.output_file)
    else:
        if stock_length is None or stock_quantity is None or not cut_inputs:
            typer.echo(
                "Error: --stock-length, --stock-quantity and at least one --cut "
                "are required when --config is not provided",
                err=True,
            )
            raise typer.Exit(code=1)

        stock_inputs = [StockInput(length=stock_length, quantity=stock_quantity)]
        params_input = ParametersInput()
        if kerf is not None:
            params_input.kerf_width = kerf

    output_format = output_format or "table"

    command = OptimizeCuttingCommand()
    result = command.execute(stock_inputs, cut_inputs, params_input)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    typer.echo(render_console_output(result, output_format))
    report_unmet_demand(result)

    if output_file is not None:
        ExporterRegistry.get("json")().export(result, output_file)
        typer.echo(f"\nResult written to {output_file}")

    if output_formats:
        handle_multi_format_export(output_formats, output_dir, project_name, result)


@app.command()
def formats() -> None:
    """List the registered export formats."""
    for format_name in ExporterRegistry.available_formats():
        exporter_class = ExporterRegistry.get(format_name)
        typer.echo(f"{format_name:<6} .{exporter_class.file_extension}")


if __name__ == "__main__":
    app()
