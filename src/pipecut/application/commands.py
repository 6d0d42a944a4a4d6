"""Application commands (use cases) for pipe cutting optimization."""

from __future__ import annotations

import logging
from typing import Sequence

from pipecut.domain import optimize_cutting

from .dtos import CutInput, OptimizationOutput, ParametersInput, StockInput
from .services import InputValidatorService, compute_unmet_demand

logger = logging.getLogger(__name__)


class OptimizeCuttingCommand:
    """Command to compute a cutting plan from user input.

    Validates the input, picks the stock specification to cut from, runs the
    optimizer and works out which cuts were left unplaced.
    """

    def __init__(self, input_validator: InputValidatorService | None = None) -> None:
        self.input_validator = input_validator or InputValidatorService()

    def execute(
        self,
        stock_inputs: Sequence[StockInput],
        cut_inputs: Sequence[CutInput],
        params_input: ParametersInput | None = None,
    ) -> OptimizationOutput:
        """Execute the optimization command.

        Only the first stock specification is cut from; any further
        specifications are ignored.

        Args:
            stock_inputs: Available stock specifications (at least one).
            cut_inputs: Required cuts (at least one).
            params_input: Optimization parameters. Defaults to a 2 mm kerf,
                100 mm minimum waste threshold and 70% waste priority.

        Returns:
            OptimizationOutput with the plan and unmet demand, or with
            errors and no plan when the inputs are invalid.
        """
        params_input = params_input or ParametersInput()

        errors = self.input_validator.validate_all(stock_inputs, cut_inputs, params_input)
        if errors:
            return OptimizationOutput(result=None, errors=errors)

        if len(stock_inputs) > 1:
            logger.info(
                "Using first of %d stock specifications; the rest are ignored",
                len(stock_inputs),
            )

        stock = stock_inputs[0].to_stock_specification()
        demands = [cut.to_cut_demand() for cut in cut_inputs]
        parameters = params_input.to_parameters()

        result = optimize_cutting(stock, demands, parameters)
        unmet = compute_unmet_demand(demands, result)

        for item in unmet:
            logger.warning(
                "Unmet demand: %d of %d pieces at %s mm could not be cut",
                item.shortfall,
                item.requested,
                item.length,
            )

        return OptimizationOutput(result=result, stock=stock, unmet_demand=unmet)
