"""Pydantic models for pipe cutting job configuration files.

A job file describes one optimization run: the stock on hand, the cuts
required, optional tuning parameters and output preferences. All lengths are
in millimetres.
"""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

# Version 1.0: Initial schema with stock, cuts, parameters and output
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

OutputFormat = Literal["table", "summary", "diagram", "json", "all"]


class StockConfig(BaseModel):
    """Stock pipe specification.

    Attributes:
        length: Length of one stock unit in mm.
        quantity: Number of stock units available.
        diameter: Outer diameter in mm (descriptive only).
        thickness: Wall thickness in mm (descriptive only).
        material: Material name (descriptive only).
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    length: float = Field(..., gt=0, description="Stock length in mm")
    quantity: int = Field(..., ge=0, description="Number of stock units available")
    diameter: float | None = Field(default=None, gt=0, description="Diameter in mm")
    thickness: float | None = Field(
        default=None, gt=0, description="Wall thickness in mm"
    )
    material: str | None = Field(default=None, description="Material name")


class CutConfig(BaseModel):
    """Required cut length and quantity."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    length: float = Field(..., gt=0, description="Cut length in mm")
    quantity: int = Field(..., ge=0, description="Number of pieces required")


class ParametersConfig(BaseModel):
    """Optimization parameters.

    Only the kerf width affects the cutting plan; the other values are
    recorded with the result.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    kerf_width: float = Field(default=2.0, ge=0, description="Kerf width in mm")
    min_waste_threshold: float = Field(
        default=100.0, ge=0, description="Reusable offcut threshold in mm"
    )
    prioritize_waste_reduction: float = Field(
        default=70.0, ge=0, le=100, description="Waste reduction priority (0-100)"
    )


class OutputConfig(BaseModel):
    """Output configuration.

    Attributes:
        format: Console output format.
        output_file: Optional path to write the JSON result to.
    """

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = "table"
    output_file: str | None = None


class OptimizationJobConfiguration(BaseModel):
    """Root model for a pipe cutting job file.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        project: Optional project name used for report headers and file names.
        stock: Stock specifications; the first one is cut from.
        cuts: Required cuts.
        parameters: Optimization parameters.
        output: Output configuration.

    Example:
        >>> config = OptimizationJobConfiguration(
        ...     schema_version="1.0",
        ...     stock=[StockConfig(length=6000, quantity=10)],
        ...     cuts=[CutConfig(length=1200, quantity=12)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    project: str | None = Field(default=None, description="Project name")
    stock: list[StockConfig] = Field(..., min_length=1)
    cuts: list[CutConfig] = Field(..., min_length=1)
    parameters: ParametersConfig = Field(default_factory=ParametersConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version: {v}. "
            f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )
