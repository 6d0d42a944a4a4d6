"""Greedy one-dimensional cutting optimizer for stock pipe.

Assigns required cut lengths to stock units longest-first. Each stock unit is
filled by walking the demand list in sorted order and placing as many pieces
of each length as still fit, then moving on to the next unit. The heuristic
is deterministic and makes no attempt to minimise the number of units.

The optimizer never raises. Inputs that cannot be satisfied (too little
stock, pieces longer than a stock unit) yield a partial plan; callers wanting
to know what was left over compare the result with their demand.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from pipecut.domain.value_objects import (
    CutDemand,
    CutPlacement,
    CuttingPattern,
    OptimizationParameters,
    OptimizationResult,
    StockSpecification,
)

logger = logging.getLogger(__name__)


@dataclass
class _DemandState:
    """Working copy of a demand entry with its outstanding count."""

    length: float
    remaining: int


@dataclass
class _StockUnitState:
    """Internal state for the stock unit currently being filled.

    Attributes:
        index: Stock unit index (0-based).
        remaining_length: Capacity left, after kerf, for further pieces.
        position: Start position of the next piece.
        cuts: Placements made so far.
    """

    index: int
    remaining_length: float
    position: float = 0.0
    cuts: list[CutPlacement] = field(default_factory=list)

    def fits(self, length: float, kerf: float) -> bool:
        return self.remaining_length >= length + kerf

    def place(self, length: float, kerf: float) -> None:
        self.cuts.append(
            CutPlacement(
                length=length,
                start_pos=self.position,
                end_pos=self.position + length,
            )
        )
        self.position += length + kerf
        self.remaining_length -= length + kerf


def optimize_cutting(
    stock: StockSpecification,
    demands: Sequence[CutDemand],
    parameters: OptimizationParameters,
) -> OptimizationResult:
    """Compute a cutting plan for one stock specification.

    Args:
        stock: Stock length and number of available units.
        demands: Required cut lengths with quantities, in any order.
        parameters: Tuning parameters; only the kerf width is used.

    Returns:
        OptimizationResult with one pattern per consumed stock unit.
        ``material_efficiency_percent`` is 0.0 when no unit was consumed.
    """
    working = _sorted_working_copy(demands)
    kerf = parameters.kerf_width

    patterns: list[CuttingPattern] = []
    total_waste = 0.0
    total_cut_operations = 0
    stock_index = 0

    while _has_outstanding(working) and stock_index < stock.quantity:
        pattern = _fill_stock_unit(stock_index, stock.length, working, kerf)

        total_waste += pattern.waste
        total_cut_operations += pattern.piece_count
        patterns.append(pattern)

        logger.debug(
            "Stock unit %d: %d pieces, %.1f mm waste",
            stock_index,
            pattern.piece_count,
            pattern.waste,
        )
        stock_index += 1

    total_stock_length = stock_index * stock.length
    used_length = total_stock_length - total_waste
    if total_stock_length > 0:
        efficiency = (used_length / total_stock_length) * 100
    else:
        efficiency = 0.0

    logger.info(
        "Cutting plan: %d of %d stock units, %d cuts, %.1f%% efficiency",
        stock_index,
        stock.quantity,
        total_cut_operations,
        efficiency,
    )

    return OptimizationResult(
        stock_units_used=stock_index,
        material_efficiency_percent=efficiency,
        total_waste=total_waste,
        cut_operations_count=total_cut_operations,
        patterns=tuple(patterns),
        parameters=parameters,
    )


def _sorted_working_copy(demands: Sequence[CutDemand]) -> list[_DemandState]:
    """Copy demands into mutable state, longest first.

    ``sorted`` is stable, so equal lengths keep their input order.
    """
    working = [_DemandState(length=d.length, remaining=d.quantity) for d in demands]
    return sorted(working, key=lambda d: d.length, reverse=True)


def _has_outstanding(working: list[_DemandState]) -> bool:
    return any(entry.remaining > 0 for entry in working)


def _fill_stock_unit(
    index: int,
    stock_length: float,
    working: list[_DemandState],
    kerf: float,
) -> CuttingPattern:
    """Place as many outstanding pieces as fit on one stock unit.

    Mutates ``remaining`` on the working entries it consumes.

    Args:
        index: Index of the stock unit being filled.
        stock_length: Length of the stock unit.
        working: Demand state sorted longest first.
        kerf: Kerf charged per placed piece.

    Returns:
        The completed pattern; its waste is the capacity left over.
    """
    unit = _StockUnitState(index=index, remaining_length=stock_length)

    for entry in working:
        while entry.remaining > 0 and unit.fits(entry.length, kerf):
            unit.place(entry.length, kerf)
            entry.remaining -= 1

    return CuttingPattern(
        stock_index=unit.index,
        cuts=tuple(unit.cuts),
        waste=unit.remaining_length,
    )
