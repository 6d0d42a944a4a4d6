"""FastAPI application for the pipe cutting optimizer."""

from collections.abc import Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pipecut.web.exceptions import register_exception_handlers
from pipecut.web.routers import (
    export_router,
    optimize_router,
    projects_router,
    validate_router,
)

API_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {"name": "optimize", "description": "Compute cutting plans from stock and cuts"},
    {"name": "projects", "description": "Cutting plans stored per project"},
    {"name": "validate", "description": "Check job files before running them"},
    {"name": "export", "description": "Cutting plans as CSV, DXF, JSON, SVG or text"},
]


def create_app(cors_origins: Sequence[str] = ("*",)) -> FastAPI:
    """Build the API with every router mounted under ``/api/v1``.

    Args:
        cors_origins: Origins allowed to call the API from a browser.
    """
    app = FastAPI(
        title="Pipe Cutting Optimizer API",
        description="Plan how to cut required pipe lengths from stock pipe",
        version="1.0.0",
        openapi_tags=OPENAPI_TAGS,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for router in (optimize_router, projects_router, validate_router, export_router):
        app.include_router(router, prefix=API_PREFIX)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    return app


# Served with: uvicorn pipecut.web:app
app = create_app()
