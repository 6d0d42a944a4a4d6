"""SVG exporter wrapping CutDiagramRenderer."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from pipecut.infrastructure.cut_diagram_renderer import CutDiagramRenderer
from pipecut.infrastructure.exporters.base import ExporterRegistry, require_result

if TYPE_CHECKING:
    from pipecut.application.dtos import OptimizationOutput


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for cut diagrams, one bar per stock unit.

    Attributes:
        renderer: Renderer producing the SVG document.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"
    media_type: ClassVar[str] = "image/svg+xml"

    def __init__(self, bar_width: float = 800.0, bar_height: float = 40.0) -> None:
        self.renderer = CutDiagramRenderer(bar_width=bar_width, bar_height=bar_height)

    def export(self, output: OptimizationOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: OptimizationOutput) -> str:
        require_result(output, self.format_name)
        return self.renderer.render_svg(output.result, output.stock.length)
