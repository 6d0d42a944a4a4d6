"""Domain layer - cutting optimizer and value objects."""

from .services import optimize_cutting
from .value_objects import (
    CutDemand,
    CutPlacement,
    CuttingPattern,
    OptimizationParameters,
    OptimizationResult,
    StockSpecification,
)

__all__ = [
    "CutDemand",
    "CutPlacement",
    "CuttingPattern",
    "OptimizationParameters",
    "OptimizationResult",
    "StockSpecification",
    "optimize_cutting",
]
