"""In-process store for optimization results saved against projects."""

from __future__ import annotations

import logging
import threading
import uuid
from collections import defaultdict
from datetime import datetime, timezone

from pipecut.web.schemas.responses import (
    OptimizationResponseSchema,
    StoredOptimizationSchema,
)

logger = logging.getLogger(__name__)


class ResultStore:
    """Keeps optimization results per project for the lifetime of the process.

    Results are listed in insertion order. Nothing is persisted.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._results: dict[str, list[StoredOptimizationSchema]] = defaultdict(list)

    def add(
        self, project_id: str, optimization: OptimizationResponseSchema
    ) -> StoredOptimizationSchema:
        """Store a result and return the record with its id and timestamp."""
        record = StoredOptimizationSchema(
            id=str(uuid.uuid4()),
            project_id=project_id,
            created_at=datetime.now(timezone.utc),
            optimization=optimization,
        )
        with self._lock:
            self._results[project_id].append(record)
        logger.debug("Stored optimization %s for project %s", record.id, project_id)
        return record

    def list_for_project(self, project_id: str) -> list[StoredOptimizationSchema]:
        with self._lock:
            return list(self._results.get(project_id, []))

    def clear(self) -> None:
        with self._lock:
            self._results.clear()
