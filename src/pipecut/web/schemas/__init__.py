"""Pydantic schemas for the REST API."""

from pipecut.web.schemas.common import (
    CutPlacementSchema,
    CutSchema,
    CuttingPatternSchema,
    ParametersSchema,
    StockSchema,
    UnmetDemandSchema,
)
from pipecut.web.schemas.requests import (
    ConfigValidateRequest,
    ExportRequest,
    OptimizeRequest,
)
from pipecut.web.schemas.responses import (
    ErrorResponseSchema,
    ExportFormatsSchema,
    OptimizationResponseSchema,
    OptimizationResultSchema,
    StoredOptimizationListSchema,
    StoredOptimizationSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "CutPlacementSchema",
    "CutSchema",
    "CuttingPatternSchema",
    "ParametersSchema",
    "StockSchema",
    "UnmetDemandSchema",
    # Requests
    "ConfigValidateRequest",
    "ExportRequest",
    "OptimizeRequest",
    # Responses
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "OptimizationResponseSchema",
    "OptimizationResultSchema",
    "StoredOptimizationListSchema",
    "StoredOptimizationSchema",
    "ValidationResultSchema",
]
