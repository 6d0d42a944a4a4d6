"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from pipecut.infrastructure.exporters import ExporterRegistry
from pipecut.web.dependencies import OptimizeCommandDep
from pipecut.web.exceptions import UnsupportedFormatError
from pipecut.web.routers.optimize import OPTIMIZATION_ERROR_RESPONSES, run_optimization
from pipecut.web.schemas.requests import ExportRequest
from pipecut.web.schemas.responses import ErrorResponseSchema, ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post(
    "/{format_name}",
    responses={
        **OPTIMIZATION_ERROR_RESPONSES,
        400: {"model": ErrorResponseSchema, "description": "Unsupported export format"},
    },
)
async def export_cutting_plan(
    format_name: str,
    request: ExportRequest,
    command: OptimizeCommandDep,
) -> Response:
    """Compute a cutting plan and return it in a registered format.

    Args:
        format_name: Export format name.
        request: Export request with stock, cuts and parameters.
        command: Injected OptimizeCuttingCommand.

    Returns:
        The exported document as an attachment.

    Raises:
        UnsupportedFormatError: If format is not registered.
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    output = run_optimization(request, command)

    exporter = ExporterRegistry.get(format_name)()
    content = exporter.export_string(output)
    filename = f"{request.project_name}.{exporter.file_extension}"

    return Response(
        content=content,
        media_type=exporter.media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
