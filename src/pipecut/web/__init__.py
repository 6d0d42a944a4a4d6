"""FastAPI REST API for the pipe cutting optimizer.

This module provides a REST API for computing cutting plans, storing them
against projects, validating job configurations and exporting plans.

Usage:
    uvicorn pipecut.web:app --reload
"""

from pipecut.web.app import app, create_app

__all__ = ["app", "create_app"]
