"""Unmet demand detection for cutting plans.

A cutting plan only describes what was placed. This module re-derives what
was left over by comparing placements with the requested quantities.
"""

from __future__ import annotations

from typing import Sequence

from pipecut.application.dtos import UnmetDemand
from pipecut.domain import CutDemand, OptimizationResult


def compute_unmet_demand(
    demands: Sequence[CutDemand],
    result: OptimizationResult,
) -> list[UnmetDemand]:
    """List cut lengths whose requested quantity was not fully placed.

    Demand entries sharing a length are merged. Order follows the first
    appearance of each length in ``demands``.

    Args:
        demands: Demand the optimizer was invoked with.
        result: Plan returned by the optimizer.

    Returns:
        One UnmetDemand per short length; empty when demand was satisfied.
    """
    requested: dict[float, int] = {}
    for demand in demands:
        requested[demand.length] = requested.get(demand.length, 0) + demand.quantity

    placed = result.placements_by_length()

    return [
        UnmetDemand(length=length, requested=quantity, placed=placed.get(length, 0))
        for length, quantity in requested.items()
        if placed.get(length, 0) < quantity
    ]
