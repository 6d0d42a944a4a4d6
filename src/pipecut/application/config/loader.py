"""Loading of JSON job files into validated configurations.

Every way a job can fail to load (missing or unreadable file, bad JSON,
schema violation) surfaces as a ConfigError whose ``details`` point at the
offending line or field.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from pipecut.application.config.schema import OptimizationJobConfiguration


class ConfigError(Exception):
    """A job file or job dictionary that cannot be used.

    Attributes:
        message: Human-readable summary.
        error_type: file_not_found, permission_denied, file_read_error,
            json_parse or validation.
        path: Job file the error came from, if any.
        details: One entry per problem. JSON errors carry line and column;
            schema errors carry path, message, value and error_type.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []


def json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location the way job files are written.

    ``("cuts", 1, "length")`` becomes ``cuts[1].length``. An empty location
    (an error about the job as a whole) becomes ``job``.
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path or "job"


def _schema_problems(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _describe_problems(problems: list[dict[str, Any]], source: Path | None) -> str:
    where = f" in {source}" if source is not None else ""
    lines = [f"Job has {len(problems)} invalid value(s){where}:"]
    for problem in problems:
        line = f"  - {problem['path']}: {problem['message']}"
        # Skip echoing whole objects for missing or extra fields
        if isinstance(problem["value"], (int, float, str)):
            line += f" (got {problem['value']!r})"
        lines.append(line)
    return "\n".join(lines)


def _read_job_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigError(
            f"Config file not found: {path}", "file_not_found", path
        ) from e
    except PermissionError as e:
        raise ConfigError(
            f"Permission denied reading config file: {path}", "permission_denied", path
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Cannot read config file {path}: {e}", "file_read_error", path
        ) from e


def _parse_job_json(text: str, path: Path) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def _validate_job(data: Any, source: Path | None) -> OptimizationJobConfiguration:
    try:
        return OptimizationJobConfiguration.model_validate(data)
    except PydanticValidationError as e:
        problems = _schema_problems(e)
        raise ConfigError(
            _describe_problems(problems, source), "validation", source, problems
        ) from e


def load_config(path: Path) -> OptimizationJobConfiguration:
    """Load and validate a job file.

    Args:
        path: Path to the JSON job file.

    Returns:
        The validated job configuration.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    return _validate_job(_parse_job_json(_read_job_file(path), path), path)


def load_config_from_dict(data: dict[str, Any]) -> OptimizationJobConfiguration:
    """Validate a job given as a dictionary, e.g. an API request body.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate_job(data, None)
