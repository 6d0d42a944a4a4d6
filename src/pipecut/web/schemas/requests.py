"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from pipecut.web.schemas.common import CutSchema, ParametersSchema, StockSchema


class OptimizeRequest(BaseModel):
    """Request for computing a cutting plan."""

    stock: list[StockSchema] = Field(
        ..., min_length=1, description="Stock specifications; the first is used"
    )
    cuts: list[CutSchema] = Field(..., min_length=1, description="Required cuts")
    parameters: ParametersSchema = Field(
        default_factory=ParametersSchema, description="Optimization parameters"
    )


class ExportRequest(OptimizeRequest):
    """Request for exporting a cutting plan to a specific format."""

    project_name: str = Field(
        default="cutting_plan",
        pattern=r"^[A-Za-z0-9_.-]+$",
        description="Base name for the downloaded file",
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a job configuration."""

    config: dict[str, Any] = Field(..., description="Job configuration JSON")
