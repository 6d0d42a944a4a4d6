"""FastAPI dependency injection for optimization services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from pipecut.application.commands import OptimizeCuttingCommand
from pipecut.web.store import ResultStore


def get_optimize_command() -> OptimizeCuttingCommand:
    """Dependency for OptimizeCuttingCommand."""
    return OptimizeCuttingCommand()


@lru_cache(maxsize=1)
def get_result_store() -> ResultStore:
    """Get the process-wide ResultStore."""
    return ResultStore()


# Type aliases for cleaner endpoint signatures
OptimizeCommandDep = Annotated[OptimizeCuttingCommand, Depends(get_optimize_command)]
ResultStoreDep = Annotated[ResultStore, Depends(get_result_store)]
