"""Configuration merging utilities for CLI override support.

Precedence is CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from pathlib import Path

from pipecut.application.config.schema import (
    OptimizationJobConfiguration,
    OutputConfig,
    ParametersConfig,
)


def merge_config_with_cli(
    config: OptimizationJobConfiguration,
    *,
    kerf_width: float | None = None,
    output_format: str | None = None,
    output_file: str | Path | None = None,
) -> OptimizationJobConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base configuration to merge with
        kerf_width: Override for parameters.kerf_width (if not None)
        output_format: Override for output.format (if not None)
        output_file: Override for output.output_file (if not None)

    Returns:
        A new OptimizationJobConfiguration with merged values

    Example:
        >>> config = load_config(Path("job.json"))
        >>> merged = merge_config_with_cli(config, kerf_width=3.0)
        >>> merged.parameters.kerf_width
        3.0
    """
    parameters_data = config.parameters.model_dump()
    if kerf_width is not None:
        parameters_data["kerf_width"] = kerf_width

    output_data = config.output.model_dump()
    if output_format is not None:
        output_data["format"] = output_format
    if output_file is not None:
        output_data["output_file"] = str(output_file)

    return config.model_copy(
        update={
            "parameters": ParametersConfig.model_validate(parameters_data),
            "output": OutputConfig.model_validate(output_data),
        }
    )
