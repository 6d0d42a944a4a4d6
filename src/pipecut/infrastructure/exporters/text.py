"""Plain text report exporter."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from pipecut.infrastructure.cut_diagram_renderer import CutDiagramRenderer
from pipecut.infrastructure.exporters.base import ExporterRegistry, require_result
from pipecut.infrastructure.formatters import CuttingPlanFormatter, SummaryFormatter

if TYPE_CHECKING:
    from pipecut.application.dtos import OptimizationOutput


@ExporterRegistry.register("txt")
class TextReportExporter:
    """Exports summary, ASCII diagram and cutting plan as one text report."""

    format_name: ClassVar[str] = "txt"
    file_extension: ClassVar[str] = "txt"
    media_type: ClassVar[str] = "text/plain"

    def __init__(self, diagram_width: int = 60) -> None:
        if diagram_width <= 0:
            raise ValueError(f"diagram_width must be positive, got {diagram_width}")
        self.diagram_width = diagram_width

    def export(self, output: OptimizationOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: OptimizationOutput) -> str:
        require_result(output, self.format_name)
        sections = [
            SummaryFormatter().format(output),
            CutDiagramRenderer().render_all_ascii(
                output.result, output.stock.length, self.diagram_width
            ),
            CuttingPlanFormatter().format(output.result),
        ]
        return "\n\n".join(sections) + "\n"
