"""Application layer - use cases and orchestration."""

from .commands import OptimizeCuttingCommand
from .dtos import (
    CutInput,
    OptimizationOutput,
    ParametersInput,
    StockInput,
    UnmetDemand,
)

__all__ = [
    "CutInput",
    "OptimizationOutput",
    "OptimizeCuttingCommand",
    "ParametersInput",
    "StockInput",
    "UnmetDemand",
]
