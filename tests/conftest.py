"""Pytest configuration and shared fixtures for pipecut tests."""

from __future__ import annotations

import pytest

from pipecut.application import (
    CutInput,
    OptimizationOutput,
    OptimizeCuttingCommand,
    ParametersInput,
    StockInput,
)
from pipecut.domain import CutDemand, OptimizationParameters, StockSpecification


# =============================================================================
# Reference job: 6000 mm stock x 10, 2 mm kerf
# =============================================================================


@pytest.fixture
def reference_stock() -> StockSpecification:
    """Ten 6 m stock pipes."""
    return StockSpecification(length=6000.0, quantity=10)


@pytest.fixture
def reference_demands() -> list[CutDemand]:
    """Mixed demand given in non-sorted order."""
    return [
        CutDemand(length=1200.0, quantity=12),
        CutDemand(length=850.0, quantity=8),
        CutDemand(length=2400.0, quantity=4),
    ]


@pytest.fixture
def default_parameters() -> OptimizationParameters:
    """Default parameters with a 2 mm kerf."""
    return OptimizationParameters()


@pytest.fixture
def reference_job_dict() -> dict:
    """The reference job as a configuration dictionary."""
    return {
        "schema_version": "1.0",
        "project": "Reference job",
        "stock": [{"length": 6000, "quantity": 10, "material": "steel"}],
        "cuts": [
            {"length": 1200, "quantity": 12},
            {"length": 850, "quantity": 8},
            {"length": 2400, "quantity": 4},
        ],
        "parameters": {"kerf_width": 2.0},
    }


# =============================================================================
# Shared fixtures for command execution
# =============================================================================


@pytest.fixture
def optimize_command() -> OptimizeCuttingCommand:
    """Create an OptimizeCuttingCommand with the default validator."""
    return OptimizeCuttingCommand()


@pytest.fixture
def reference_output(optimize_command: OptimizeCuttingCommand) -> OptimizationOutput:
    """Run the reference job through the command."""
    return optimize_command.execute(
        [StockInput(length=6000.0, quantity=10, material="steel")],
        [
            CutInput(length=1200.0, quantity=12),
            CutInput(length=850.0, quantity=8),
            CutInput(length=2400.0, quantity=4),
        ],
        ParametersInput(kerf_width=2.0),
    )


@pytest.fixture
def short_output(optimize_command: OptimizeCuttingCommand) -> OptimizationOutput:
    """A job that leaves one 5000 mm piece uncut."""
    return optimize_command.execute(
        [StockInput(length=6000.0, quantity=1)],
        [CutInput(length=5000.0, quantity=1), CutInput(length=5000.0, quantity=1)],
    )
