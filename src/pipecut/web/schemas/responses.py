"""Pydantic response schemas for the REST API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from pipecut.web.schemas.common import (
    CuttingPatternSchema,
    ParametersSchema,
    StockSchema,
    UnmetDemandSchema,
)


class OptimizationResultSchema(BaseModel):
    """Statistics and patterns of a cutting plan."""

    stock_units_used: int = Field(..., description="Stock units opened")
    material_efficiency_percent: float = Field(
        ..., description="Share of opened stock length turned into pieces"
    )
    total_waste: float = Field(..., description="Sum of unit waste in mm")
    cut_operations_count: int = Field(..., description="Number of pieces placed")
    patterns: list[CuttingPatternSchema] = Field(default_factory=list)
    parameters: ParametersSchema


class OptimizationResponseSchema(BaseModel):
    """Response for an optimization run."""

    stock: StockSchema = Field(..., description="Stock specification cut from")
    result: OptimizationResultSchema
    unmet_demand: list[UnmetDemandSchema] = Field(
        default_factory=list, description="Cut lengths not fully placed"
    )
    is_fully_satisfied: bool = Field(..., description="Whether every piece was placed")


class StoredOptimizationSchema(BaseModel):
    """Optimization result stored against a project."""

    id: str = Field(..., description="Result identifier")
    project_id: str = Field(..., description="Owning project identifier")
    created_at: datetime = Field(..., description="Creation time (UTC)")
    optimization: OptimizationResponseSchema


class StoredOptimizationListSchema(BaseModel):
    """Stored results of a project, oldest first."""

    project_id: str
    results: list[StoredOptimizationSchema] = Field(default_factory=list)


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Error body returned by the exception handlers."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional details")
