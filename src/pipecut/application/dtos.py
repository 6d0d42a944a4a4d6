"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from pipecut.domain import (
    CutDemand,
    OptimizationParameters,
    OptimizationResult,
    StockSpecification,
)


@dataclass
class StockInput:
    """Input DTO for a stock pipe specification (lengths in mm)."""

    length: float
    quantity: int
    diameter: float | None = None
    thickness: float | None = None
    material: str | None = None

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.length <= 0:
            errors.append("Stock length must be positive")
        elif not math.isfinite(self.length):
            errors.append("Stock length must be finite")
        if self.quantity < 0:
            errors.append("Stock quantity cannot be negative")
        if self.diameter is not None and self.diameter <= 0:
            errors.append("Stock diameter must be positive")
        if self.thickness is not None and self.thickness <= 0:
            errors.append("Stock wall thickness must be positive")
        return errors

    def to_stock_specification(self) -> StockSpecification:
        """Convert to StockSpecification value object."""
        return StockSpecification(
            length=self.length,
            quantity=self.quantity,
            diameter=self.diameter,
            thickness=self.thickness,
            material=self.material,
        )


@dataclass
class CutInput:
    """Input DTO for a required cut."""

    length: float
    quantity: int

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.length <= 0:
            errors.append(f"Cut length must be positive (got {self.length})")
        elif not math.isfinite(self.length):
            errors.append(f"Cut length must be finite (got {self.length})")
        if self.quantity < 0:
            errors.append(f"Cut quantity cannot be negative (got {self.quantity})")
        return errors

    def to_cut_demand(self) -> CutDemand:
        """Convert to CutDemand value object."""
        return CutDemand(length=self.length, quantity=self.quantity)


@dataclass
class ParametersInput:
    """Input DTO for optimization parameters."""

    kerf_width: float = 2.0
    min_waste_threshold: float = 100.0
    prioritize_waste_reduction: float = 70.0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.kerf_width < 0:
            errors.append("Kerf width cannot be negative")
        elif not math.isfinite(self.kerf_width):
            errors.append("Kerf width must be finite")
        if self.min_waste_threshold < 0:
            errors.append("Minimum waste threshold cannot be negative")
        elif not math.isfinite(self.min_waste_threshold):
            errors.append("Minimum waste threshold must be finite")
        if not 0 <= self.prioritize_waste_reduction <= 100:
            errors.append("Waste reduction priority must be between 0 and 100")
        return errors

    def to_parameters(self) -> OptimizationParameters:
        """Convert to OptimizationParameters value object."""
        return OptimizationParameters(
            kerf_width=self.kerf_width,
            min_waste_threshold=self.min_waste_threshold,
            prioritize_waste_reduction=self.prioritize_waste_reduction,
        )


@dataclass(frozen=True)
class UnmetDemand:
    """Demand for one cut length that the plan did not fully cover.

    Attributes:
        length: Cut length in mm.
        requested: Pieces requested across all demand entries of this length.
        placed: Pieces actually placed in the plan.
    """

    length: float
    requested: int
    placed: int

    @property
    def shortfall(self) -> int:
        """Number of pieces still missing."""
        return self.requested - self.placed


@dataclass
class OptimizationOutput:
    """Output DTO containing the optimization results.

    Attributes:
        result: Cutting plan, or None when the inputs were rejected.
        stock: Stock specification the plan was computed for.
        unmet_demand: Cut lengths the plan could not fully cover.
        errors: Validation error messages.
    """

    result: OptimizationResult | None
    stock: StockSpecification | None = None
    unmet_demand: list[UnmetDemand] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the optimization ran."""
        return len(self.errors) == 0 and self.result is not None

    @property
    def is_fully_satisfied(self) -> bool:
        """Check if every requested piece was placed."""
        return self.is_valid and not self.unmet_demand

    @property
    def total_shortfall(self) -> int:
        """Total number of requested pieces left unplaced."""
        return sum(item.shortfall for item in self.unmet_demand)
