"""Project-scoped optimization endpoints backed by the result store."""

from fastapi import APIRouter, status

from pipecut.web.dependencies import OptimizeCommandDep, ResultStoreDep
from pipecut.web.routers.optimize import (
    OPTIMIZATION_ERROR_RESPONSES,
    output_to_schema,
    run_optimization,
)
from pipecut.web.schemas.requests import OptimizeRequest
from pipecut.web.schemas.responses import (
    StoredOptimizationListSchema,
    StoredOptimizationSchema,
)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post(
    "/{project_id}/optimize",
    response_model=StoredOptimizationSchema,
    status_code=status.HTTP_201_CREATED,
    responses=OPTIMIZATION_ERROR_RESPONSES,
)
async def optimize_for_project(
    project_id: str,
    request: OptimizeRequest,
    command: OptimizeCommandDep,
    store: ResultStoreDep,
) -> StoredOptimizationSchema:
    """Compute a cutting plan and store it against a project.

    Args:
        project_id: Project the result belongs to.
        request: Stock, required cuts and parameters.
        command: Injected OptimizeCuttingCommand.
        store: Injected ResultStore.

    Returns:
        The stored record with its id and creation time.
    """
    output = run_optimization(request, command)
    return store.add(project_id, output_to_schema(output))


@router.get(
    "/{project_id}/optimization-results",
    response_model=StoredOptimizationListSchema,
)
async def list_optimization_results(
    project_id: str,
    store: ResultStoreDep,
) -> StoredOptimizationListSchema:
    """List stored results of a project, oldest first.

    Unknown projects return an empty list.
    """
    return StoredOptimizationListSchema(
        project_id=project_id,
        results=store.list_for_project(project_id),
    )
