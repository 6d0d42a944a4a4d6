"""Value objects for pipe cutting optimization.

All lengths are in millimetres. Records are frozen dataclasses passed into
and returned from the optimizer; none of them carry identity or lifecycle.

Range checks are deliberately absent here: the optimizer accepts whatever it
is given and degrades to an empty or partial plan. Validation happens at the
application boundary (see ``pipecut.application.services.input_validator``).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StockSpecification:
    """Stock pipe available for cutting.

    Attributes:
        length: Length of one stock unit in mm.
        quantity: Maximum number of stock units available.
        diameter: Outer diameter in mm (descriptive only).
        thickness: Wall thickness in mm (descriptive only).
        material: Material name (descriptive only).
    """

    length: float
    quantity: int
    diameter: float | None = None
    thickness: float | None = None
    material: str | None = None


@dataclass(frozen=True)
class CutDemand:
    """A required cut length and how many pieces of it are needed."""

    length: float
    quantity: int


@dataclass(frozen=True)
class OptimizationParameters:
    """Tuning parameters for a cutting run.

    Only ``kerf_width`` influences packing. The other two values are carried
    through to the result unchanged.

    Attributes:
        kerf_width: Material lost per placed piece in mm.
        min_waste_threshold: Offcut length in mm considered reusable.
        prioritize_waste_reduction: Weighting on a 0-100 scale.
    """

    kerf_width: float = 2.0
    min_waste_threshold: float = 100.0
    prioritize_waste_reduction: float = 70.0


@dataclass(frozen=True)
class CutPlacement:
    """A single piece placed on a stock unit."""

    length: float
    start_pos: float
    end_pos: float


@dataclass(frozen=True)
class CuttingPattern:
    """Placements assigned to one stock unit.

    Attributes:
        stock_index: Zero-based index of the stock unit.
        cuts: Placements in the order they were made.
        waste: Length left over after all placements and kerf.
    """

    stock_index: int
    cuts: tuple[CutPlacement, ...]
    waste: float

    @property
    def piece_count(self) -> int:
        """Number of pieces cut from this unit."""
        return len(self.cuts)


@dataclass(frozen=True)
class OptimizationResult:
    """Cutting plan and aggregate statistics.

    Attributes:
        stock_units_used: Number of stock units consumed.
        material_efficiency_percent: Consumed length not lost to waste, as a
            percentage of the consumed stock. Unrounded; 0.0 when no unit
            was consumed.
        total_waste: Sum of per-unit waste.
        cut_operations_count: Total placements across all units.
        patterns: One pattern per consumed unit, in unit order.
        parameters: The parameters the run was invoked with.
    """

    stock_units_used: int
    material_efficiency_percent: float
    total_waste: float
    cut_operations_count: int
    patterns: tuple[CuttingPattern, ...]
    parameters: OptimizationParameters

    def placements_by_length(self) -> dict[float, int]:
        """Count placed pieces per cut length, in first-placed order."""
        counts: dict[float, int] = {}
        for pattern in self.patterns:
            for cut in pattern.cuts:
                counts[cut.length] = counts.get(cut.length, 0) + 1
        return counts
