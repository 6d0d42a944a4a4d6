"""API routers for the REST API."""

from pipecut.web.routers.export import router as export_router
from pipecut.web.routers.optimize import router as optimize_router
from pipecut.web.routers.projects import router as projects_router
from pipecut.web.routers.validate import router as validate_router

__all__ = [
    "export_router",
    "optimize_router",
    "projects_router",
    "validate_router",
]
