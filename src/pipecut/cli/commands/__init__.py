"""CLI command implementations for the pipecut application.

This package contains subcommands and helpers for the pipecut CLI, including:
- validate: Validate a job configuration file
- output_handlers: Console rendering and multi-format export
"""

from pipecut.cli.commands.output_handlers import (
    CONSOLE_FORMATS,
    handle_multi_format_export,
    render_console_output,
    report_unmet_demand,
)
from pipecut.cli.commands.validate import describe_job, validate_command

__all__ = [
    "CONSOLE_FORMATS",
    "describe_job",
    "handle_multi_format_export",
    "render_console_output",
    "report_unmet_demand",
    "validate_command",
]
