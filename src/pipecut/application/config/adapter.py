"""Conversion from job configuration models to application DTOs."""

from pipecut.application.config.schema import OptimizationJobConfiguration
from pipecut.application.dtos import CutInput, ParametersInput, StockInput


def config_to_inputs(
    config: OptimizationJobConfiguration,
) -> tuple[list[StockInput], list[CutInput], ParametersInput]:
    """Convert a job configuration to OptimizeCuttingCommand inputs.

    Args:
        config: A validated job configuration.

    Returns:
        Tuple of (stock inputs, cut inputs, parameters input).
    """
    stock_inputs = [
        StockInput(
            length=stock.length,
            quantity=stock.quantity,
            diameter=stock.diameter,
            thickness=stock.thickness,
            material=stock.material,
        )
        for stock in config.stock
    ]
    cut_inputs = [CutInput(length=cut.length, quantity=cut.quantity) for cut in config.cuts]
    params_input = ParametersInput(
        kerf_width=config.parameters.kerf_width,
        min_waste_threshold=config.parameters.min_waste_threshold,
        prioritize_waste_reduction=config.parameters.prioritize_waste_reduction,
    )
    return stock_inputs, cut_inputs, params_input
