"""Configuration schema and loading system for pipe cutting jobs.

Public API:
    - OptimizationJobConfiguration: Root configuration model
    - StockConfig, CutConfig, ParametersConfig, OutputConfig: Section models
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - ValidationResult, ValidationError, ValidationWarning: Validation results
    - validate_config: Perform full configuration validation
    - merge_config_with_cli: Apply CLI overrides
    - config_to_inputs: Convert configuration to command inputs

Example:
    >>> from pathlib import Path
    >>> from pipecut.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("job.json"))
    ...     print(f"Stock: {config.stock[0].length} mm x {config.stock[0].quantity}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from pipecut.application.config.adapter import config_to_inputs
from pipecut.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from pipecut.application.config.merger import merge_config_with_cli
from pipecut.application.config.schema import (
    SUPPORTED_VERSIONS,
    CutConfig,
    OptimizationJobConfiguration,
    OutputConfig,
    ParametersConfig,
    StockConfig,
)
from pipecut.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "CutConfig",
    "OptimizationJobConfiguration",
    "OutputConfig",
    "ParametersConfig",
    "StockConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_inputs",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
