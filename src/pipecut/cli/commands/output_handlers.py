"""Output handling for the optimize command.

Renders the console formats and writes files through the exporter
framework.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer

from pipecut.infrastructure.cut_diagram_renderer import CutDiagramRenderer
from pipecut.infrastructure.exporters import ExporterRegistry, ExportManager
from pipecut.infrastructure.formatters import CuttingPlanFormatter, SummaryFormatter

if TYPE_CHECKING:
    from pipecut.application.dtos import OptimizationOutput

__all__ = [
    "CONSOLE_FORMATS",
    "handle_multi_format_export",
    "render_console_output",
    "report_unmet_demand",
]

CONSOLE_FORMATS = ("table", "summary", "diagram", "json", "all")


def render_console_output(output: OptimizationOutput, output_format: str) -> str:
    """Render a successful optimization for the terminal.

    Args:
        output: Output of a successful optimization.
        output_format: One of CONSOLE_FORMATS.

    Returns:
        Text to print.
    """
    stock_length = output.stock.length
    if output_format == "table":
        return CuttingPlanFormatter().format(output.result)
    if output_format == "summary":
        return SummaryFormatter().format(output)
    if output_format == "diagram":
        return CutDiagramRenderer().render_all_ascii(output.result, stock_length)
    if output_format == "json":
        return ExporterRegistry.get("json")().export_string(output)

    return "\n\n".join(
        [
            SummaryFormatter().format(output),
            CutDiagramRenderer().render_all_ascii(output.result, stock_length),
            CuttingPlanFormatter().format(output.result),
        ]
    )


def report_unmet_demand(output: OptimizationOutput) -> None:
    """Warn on stderr about pieces the plan could not cut."""
    if output.is_fully_satisfied:
        return
    typer.echo(
        f"Warning: {output.total_shortfall} piece(s) could not be cut from the "
        "available stock:",
        err=True,
    )
    for item in output.unmet_demand:
        typer.echo(
            f"  {item.length:g} mm: {item.shortfall} of {item.requested} missing",
            err=True,
        )


def handle_multi_format_export(
    output_formats_str: str,
    output_dir: Path | None,
    project_name: str,
    output: OptimizationOutput,
) -> dict[str, Path]:
    """Handle multi-format export via --output-formats option.

    Args:
        output_formats_str: Comma-separated format list or "all".
        output_dir: Output directory for exported files.
        project_name: Project name for file naming.
        output: The optimization output to export.

    Returns:
        Dictionary mapping format names to written files.
    """
    available = ExporterRegistry.available_formats()
    if output_formats_str.lower() == "all":
        formats = available
    else:
        formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]

    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, output, project_name)
    except (OSError, ValueError) as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")

    return files
