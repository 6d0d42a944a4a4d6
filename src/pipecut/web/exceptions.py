"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pipecut.application.config import ConfigError


class OptimizationError(Exception):
    """Raised when the optimization command rejects its input."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Optimization failed: {errors}")


class UnsupportedFormatError(Exception):
    """Raised when requested export format is not supported."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"Unsupported format: {format_name}. Available: {', '.join(available)}"
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(OptimizationError)
    async def optimization_error_handler(
        request: Request, exc: OptimizationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Optimization failed",
                "error_type": "optimization",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unsupported_format",
                "details": {"format": exc.format_name, "available": exc.available},
            },
        )
