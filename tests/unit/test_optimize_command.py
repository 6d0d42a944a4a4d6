"""Tests for input DTOs, input validation, unmet demand and the command."""

from __future__ import annotations

import logging
import math

import pytest

from pipecut.application import (
    CutInput,
    OptimizationOutput,
    OptimizeCuttingCommand,
    ParametersInput,
    StockInput,
    UnmetDemand,
)
from pipecut.application.services import InputValidatorService, compute_unmet_demand
from pipecut.domain import (
    CutDemand,
    OptimizationParameters,
    StockSpecification,
    optimize_cutting,
)


# =============================================================================
# DTO validation
# =============================================================================


class TestInputDtos:
    """Range checks on the input DTOs."""

    def test_valid_stock_input(self) -> None:
        assert StockInput(length=6000.0, quantity=10).validate() == []

    def test_zero_stock_quantity_is_allowed(self) -> None:
        assert StockInput(length=6000.0, quantity=0).validate() == []

    def test_invalid_stock_input(self) -> None:
        errors = StockInput(length=0.0, quantity=-1, diameter=-5.0).validate()
        assert "Stock length must be positive" in errors
        assert "Stock quantity cannot be negative" in errors
        assert "Stock diameter must be positive" in errors

    def test_invalid_cut_input(self) -> None:
        errors = CutInput(length=-10.0, quantity=2).validate()
        assert errors == ["Cut length must be positive (got -10.0)"]

    @pytest.mark.parametrize("value", [math.inf, math.nan])
    def test_non_finite_lengths_rejected(self, value: float) -> None:
        assert StockInput(length=value, quantity=1).validate() == [
            "Stock length must be finite"
        ]
        assert CutInput(length=value, quantity=1).validate() == [
            f"Cut length must be finite (got {value})"
        ]
        assert ParametersInput(kerf_width=value).validate() == [
            "Kerf width must be finite"
        ]

    def test_negative_kerf_rejected(self) -> None:
        assert "Kerf width cannot be negative" in ParametersInput(kerf_width=-1).validate()

    @pytest.mark.parametrize("priority", [-1.0, 100.5])
    def test_priority_out_of_range(self, priority: float) -> None:
        errors = ParametersInput(prioritize_waste_reduction=priority).validate()
        assert errors == ["Waste reduction priority must be between 0 and 100"]

    def test_conversion_keeps_metadata(self) -> None:
        stock = StockInput(
            length=6000.0, quantity=3, diameter=48.3, thickness=3.2, material="steel"
        ).to_stock_specification()
        assert stock == StockSpecification(
            length=6000.0, quantity=3, diameter=48.3, thickness=3.2, material="steel"
        )

    def test_default_parameters(self) -> None:
        assert ParametersInput().to_parameters() == OptimizationParameters(
            kerf_width=2.0, min_waste_threshold=100.0, prioritize_waste_reduction=70.0
        )


class TestInputValidatorService:
    """Collection of errors across all inputs."""

    @pytest.fixture
    def validator(self) -> InputValidatorService:
        return InputValidatorService()

    def test_missing_stock_and_cuts(self, validator: InputValidatorService) -> None:
        errors = validator.validate_all([], [], ParametersInput())
        assert errors == ["No stock specifications provided", "No required cuts provided"]

    def test_errors_are_prefixed_with_position(
        self, validator: InputValidatorService
    ) -> None:
        errors = validator.validate_all(
            [StockInput(length=6000.0, quantity=1), StockInput(length=-1.0, quantity=1)],
            [CutInput(length=100.0, quantity=1), CutInput(length=0.0, quantity=1)],
            ParametersInput(),
        )
        assert errors == [
            "stock[1]: Stock length must be positive",
            "cuts[1]: Cut length must be positive (got 0.0)",
        ]


# =============================================================================
# Unmet demand
# =============================================================================


class TestComputeUnmetDemand:
    """Comparison of placements with requested quantities."""

    def test_fully_satisfied(
        self,
        reference_stock: StockSpecification,
        reference_demands: list[CutDemand],
        default_parameters: OptimizationParameters,
    ) -> None:
        result = optimize_cutting(reference_stock, reference_demands, default_parameters)
        assert compute_unmet_demand(reference_demands, result) == []

    def test_entries_with_same_length_are_merged(self) -> None:
        demands = [CutDemand(length=5000.0, quantity=1), CutDemand(length=5000.0, quantity=1)]
        result = optimize_cutting(
            StockSpecification(length=6000.0, quantity=1),
            demands,
            OptimizationParameters(),
        )

        unmet = compute_unmet_demand(demands, result)

        assert unmet == [UnmetDemand(length=5000.0, requested=2, placed=1)]
        assert unmet[0].shortfall == 1

    def test_order_follows_demand_order(self) -> None:
        demands = [CutDemand(length=100.0, quantity=5), CutDemand(length=9000.0, quantity=1)]
        result = optimize_cutting(
            StockSpecification(length=300.0, quantity=1),
            demands,
            OptimizationParameters(kerf_width=0.0),
        )

        unmet = compute_unmet_demand(demands, result)

        assert [item.length for item in unmet] == [100.0, 9000.0]
        assert [item.placed for item in unmet] == [3, 0]


# =============================================================================
# Command
# =============================================================================


class TestOptimizeCuttingCommand:
    """Orchestration of validation, optimization and unmet demand."""

    def test_reference_job(self, reference_output: OptimizationOutput) -> None:
        assert reference_output.is_valid
        assert reference_output.is_fully_satisfied
        assert reference_output.stock.material == "steel"
        assert reference_output.result.stock_units_used == 6

    def test_invalid_input_returns_errors(
        self, optimize_command: OptimizeCuttingCommand
    ) -> None:
        output = optimize_command.execute(
            [StockInput(length=-6000.0, quantity=1)],
            [CutInput(length=100.0, quantity=1)],
        )

        assert not output.is_valid
        assert output.result is None
        assert output.errors == ["stock[0]: Stock length must be positive"]

    def test_unmet_demand_reported(self, short_output: OptimizationOutput) -> None:
        assert short_output.is_valid
        assert not short_output.is_fully_satisfied
        assert short_output.total_shortfall == 1

    def test_unmet_demand_logged(
        self,
        caplog: pytest.LogCaptureFixture,
        optimize_command: OptimizeCuttingCommand,
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="pipecut.application.commands"):
            optimize_command.execute(
                [StockInput(length=6000.0, quantity=1)],
                [CutInput(length=7000.0, quantity=2)],
            )

        assert "Unmet demand: 2 of 2 pieces" in caplog.text

    def test_only_first_stock_specification_is_used(
        self, optimize_command: OptimizeCuttingCommand
    ) -> None:
        output = optimize_command.execute(
            [StockInput(length=1000.0, quantity=1), StockInput(length=9000.0, quantity=5)],
            [CutInput(length=800.0, quantity=2)],
            ParametersInput(kerf_width=0.0),
        )

        assert output.stock.length == 1000.0
        assert output.result.stock_units_used == 1
        assert output.total_shortfall == 1

    def test_zero_stock(self, optimize_command: OptimizeCuttingCommand) -> None:
        output = optimize_command.execute(
            [StockInput(length=6000.0, quantity=0)],
            [CutInput(length=1000.0, quantity=1)],
        )

        assert output.is_valid
        assert output.result.material_efficiency_percent == 0.0
        assert output.unmet_demand == [UnmetDemand(length=1000.0, requested=1, placed=0)]
