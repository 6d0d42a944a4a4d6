"""Configuration validation endpoints."""

from fastapi import APIRouter

from pipecut.application.config import load_config_from_dict, validate_config
from pipecut.web.schemas.requests import ConfigValidateRequest
from pipecut.web.schemas.responses import ErrorResponseSchema, ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post(
    "",
    response_model=ValidationResultSchema,
    responses={
        422: {"model": ErrorResponseSchema, "description": "Invalid configuration"},
    },
)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a job configuration without optimizing.

    Schema violations raise ConfigError, which the registered handler turns
    into a 422 response.

    Args:
        request: Request containing configuration to validate.

    Returns:
        Validation result with errors and warnings.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[{"message": w.message, "path": w.path} for w in result.warnings],
    )
