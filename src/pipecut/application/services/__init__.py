"""Application services supporting the optimization command."""

from .demand_tracker import compute_unmet_demand
from .input_validator import InputValidatorService

__all__ = ["InputValidatorService", "compute_unmet_demand"]
