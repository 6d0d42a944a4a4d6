"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pipecut.application.dtos import OptimizationOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert an OptimizationOutput to a specific format.

    Attributes:
        format_name: Name for the export format (e.g., "csv", "dxf").
        file_extension: File extension without leading dot.
        media_type: MIME type used when the export is served over HTTP.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    media_type: ClassVar[str]

    @abstractmethod
    def export(self, output: OptimizationOutput, path: Path) -> None:
        """Export optimization output to a file."""
        ...

    @abstractmethod
    def export_string(self, output: OptimizationOutput) -> str:
        """Export optimization output as a string."""
        ...


def require_result(output: OptimizationOutput, format_name: str) -> None:
    """Raise ValueError unless the output carries a cutting plan and stock.

    Args:
        output: Output about to be exported.
        format_name: Export format, for the error message.

    Raises:
        ValueError: If the optimization did not run.
    """
    if not output.is_valid or output.stock is None:
        raise ValueError(
            f"{format_name.upper()} export requires a successful optimization result"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves using the @ExporterRegistry.register
    decorator.

    Example:
        @ExporterRegistry.register("csv")
        class CsvExporter:
            format_name = "csv"
            file_extension = "csv"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class under a format name."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    "Overwriting existing exporter for format '%s'", format_name
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(
                "Registered exporter '%s': %s", format_name, exporter_class.__name__
            )
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """Get a sorted list of all registered format names."""
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Manages export operations to multiple formats.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: OptimizationOutput,
        project_name: str = "cutting_plan",
    ) -> dict[str, Path]:
        """Export optimization output to multiple formats.

        Files are named ``{project_name}_{format}.{ext}``.

        Args:
            formats: Format names to export (e.g., ["csv", "svg"]).
            output: The optimization output to export.
            project_name: Base name for output files.

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            KeyError: If any format is not registered.
            ValueError: If the output has no cutting plan.
            OSError: If file operations fail.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name in formats:
            exporter = ExporterRegistry.get(format_name)()

            filename = f"{project_name}_{format_name}.{exporter.file_extension}"
            filepath = self.output_dir / filename

            logger.info("Exporting to %s: %s", format_name, filepath)
            exporter.export(output, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        output: OptimizationOutput,
        project_name: str = "cutting_plan",
    ) -> Path:
        """Export optimization output to a single format."""
        return self.export_all([format_name], output, project_name)[format_name]
