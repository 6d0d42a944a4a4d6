"""Input validation service for cutting optimization.

The optimizer itself accepts any numbers and never raises, so the range
checks callers rely on are collected here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from pipecut.application.dtos import CutInput, ParametersInput, StockInput


class InputValidatorService:
    """Service for validating optimization inputs.

    Keeps validation separate from orchestration so the same rules apply to
    the CLI, the REST API and configuration files.
    """

    def validate_stock_inputs(self, stock_inputs: Sequence["StockInput"]) -> list[str]:
        """Validate stock specifications.

        Args:
            stock_inputs: Stock specifications to validate.

        Returns:
            List of validation error messages (empty if valid).
        """
        if not stock_inputs:
            return ["No stock specifications provided"]

        errors: list[str] = []
        for index, stock in enumerate(stock_inputs):
            errors.extend(f"stock[{index}]: {e}" for e in stock.validate())
        return errors

    def validate_cut_inputs(self, cut_inputs: Sequence["CutInput"]) -> list[str]:
        """Validate required cuts.

        Args:
            cut_inputs: Required cuts to validate.

        Returns:
            List of validation error messages (empty if valid).
        """
        if not cut_inputs:
            return ["No required cuts provided"]

        errors: list[str] = []
        for index, cut in enumerate(cut_inputs):
            errors.extend(f"cuts[{index}]: {e}" for e in cut.validate())
        return errors

    def validate_parameters(self, params_input: "ParametersInput") -> list[str]:
        """Validate optimization parameters."""
        return params_input.validate()

    def validate_all(
        self,
        stock_inputs: Sequence["StockInput"],
        cut_inputs: Sequence["CutInput"],
        params_input: "ParametersInput",
    ) -> list[str]:
        """Validate all inputs for an optimization run.

        Args:
            stock_inputs: Stock specifications.
            cut_inputs: Required cuts.
            params_input: Optimization parameters.

        Returns:
            List of all validation error messages (empty if all valid).
        """
        errors: list[str] = []
        errors.extend(self.validate_stock_inputs(stock_inputs))
        errors.extend(self.validate_cut_inputs(cut_inputs))
        errors.extend(self.validate_parameters(params_input))
        return errors
