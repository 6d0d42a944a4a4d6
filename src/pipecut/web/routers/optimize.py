"""Cutting plan optimization endpoints."""

from dataclasses import asdict

from fastapi import APIRouter

from pipecut.application.commands import OptimizeCuttingCommand
from pipecut.application.dtos import (
    CutInput,
    OptimizationOutput,
    ParametersInput,
    StockInput,
)
from pipecut.web.dependencies import OptimizeCommandDep
from pipecut.web.exceptions import OptimizationError
from pipecut.web.schemas.common import (
    CutPlacementSchema,
    CuttingPatternSchema,
    ParametersSchema,
    StockSchema,
    UnmetDemandSchema,
)
from pipecut.web.schemas.requests import OptimizeRequest
from pipecut.web.schemas.responses import (
    ErrorResponseSchema,
    OptimizationResponseSchema,
    OptimizationResultSchema,
)

router = APIRouter(prefix="/optimize", tags=["optimize"])

OPTIMIZATION_ERROR_RESPONSES: dict[int | str, dict] = {
    422: {"model": ErrorResponseSchema, "description": "Optimization failed"},
}


def run_optimization(
    request: OptimizeRequest, command: OptimizeCuttingCommand
) -> OptimizationOutput:
    """Convert a request to command inputs and execute it.

    Raises:
        OptimizationError: If the command rejects the input.
    """
    stock_inputs = [StockInput(**stock.model_dump()) for stock in request.stock]
    cut_inputs = [CutInput(**cut.model_dump()) for cut in request.cuts]
    params_input = ParametersInput(**request.parameters.model_dump())

    output = command.execute(stock_inputs, cut_inputs, params_input)
    if not output.is_valid:
        raise OptimizationError(output.errors)
    return output


def output_to_schema(output: OptimizationOutput) -> OptimizationResponseSchema:
    """Convert OptimizationOutput to response schema."""
    result = output.result
    patterns = [
        CuttingPatternSchema(
            stock_index=pattern.stock_index,
            cuts=[CutPlacementSchema(**asdict(cut)) for cut in pattern.cuts],
            waste=pattern.waste,
        )
        for pattern in result.patterns
    ]
    unmet = [
        UnmetDemandSchema(
            length=item.length,
            requested=item.requested,
            placed=item.placed,
            shortfall=item.shortfall,
        )
        for item in output.unmet_demand
    ]

    return OptimizationResponseSchema(
        stock=StockSchema(**asdict(output.stock)),
        result=OptimizationResultSchema(
            stock_units_used=result.stock_units_used,
            material_efficiency_percent=result.material_efficiency_percent,
            total_waste=result.total_waste,
            cut_operations_count=result.cut_operations_count,
            patterns=patterns,
            parameters=ParametersSchema(**asdict(result.parameters)),
        ),
        unmet_demand=unmet,
        is_fully_satisfied=output.is_fully_satisfied,
    )


@router.post(
    "",
    response_model=OptimizationResponseSchema,
    responses=OPTIMIZATION_ERROR_RESPONSES,
)
async def optimize(
    request: OptimizeRequest,
    command: OptimizeCommandDep,
) -> OptimizationResponseSchema:
    """Compute a cutting plan.

    Args:
        request: Stock, required cuts and parameters.
        command: Injected OptimizeCuttingCommand.

    Returns:
        Cutting plan with statistics and unmet demand.

    Raises:
        OptimizationError: If the command rejects the input.
    """
    output = run_optimization(request, command)
    return output_to_schema(output)
