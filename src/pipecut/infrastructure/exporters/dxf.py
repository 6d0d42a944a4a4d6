"""DXF format exporter for cutting plans.

Generates 2D DXF files (R2010 format) with one bar per stock unit, drawn
to scale in millimetres, for saw stations and CAD review.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf

from pipecut.infrastructure.exporters.base import ExporterRegistry, require_result

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from pipecut.application.dtos import OptimizationOutput
    from pipecut.domain import CuttingPattern


logger = logging.getLogger(__name__)


# Layer name -> ACI color
LAYERS = {
    "OUTLINE": 7,  # White - stock unit outlines
    "CUTS": 5,  # Blue - cut pieces
    "WASTE": 1,  # Red - offcut
    "LABELS": 3,  # Green - text labels
}


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports cutting plans to DXF.

    Stock units are stacked top to bottom, each drawn as a closed outline of
    the stock length. Every placement becomes a closed rectangle on the CUTS
    layer and the trailing offcut a rectangle on the WASTE layer.

    Attributes:
        bar_height: Drawn height of each stock unit in mm.
        bar_spacing: Vertical gap between stock units in mm.
        text_height: Label text height in mm.
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"
    media_type: ClassVar[str] = "application/dxf"

    def __init__(
        self,
        bar_height: float = 50.0,
        bar_spacing: float = 30.0,
        text_height: float = 15.0,
    ) -> None:
        if bar_height <= 0:
            raise ValueError(f"bar_height must be positive, got {bar_height}")
        self.bar_height = bar_height
        self.bar_spacing = bar_spacing
        self.text_height = text_height

    def export(self, output: OptimizationOutput, path: Path) -> None:
        require_result(output, self.format_name)
        doc = self._build_document(output)
        doc.saveas(path)
        logger.info("Exported DXF to %s", path)

    def export_string(self, output: OptimizationOutput) -> str:
        """Export the cutting plan as DXF text."""
        require_result(output, self.format_name)
        doc = self._build_document(output)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def _build_document(self, output: OptimizationOutput) -> Drawing:
        doc = ezdxf.new("R2010")
        for name, color in LAYERS.items():
            doc.layers.add(name, color=color)

        msp = doc.modelspace()
        stock_length = output.stock.length
        for row, pattern in enumerate(output.result.patterns):
            y = -row * (self.bar_height + self.bar_spacing)
            self._draw_unit(msp, pattern, stock_length, y)
        return doc

    def _draw_unit(
        self,
        msp: Modelspace,
        pattern: CuttingPattern,
        stock_length: float,
        y: float,
    ) -> None:
        """Draw one stock unit with its placements, offcut and labels.

        Args:
            msp: DXF modelspace to draw in.
            pattern: Cutting pattern of the unit.
            stock_length: Length of the stock unit in mm.
            y: Y position of the bar's bottom edge.
        """
        self._draw_rect(msp, "OUTLINE", 0.0, y, stock_length, self.bar_height)

        for cut in pattern.cuts:
            self._draw_rect(msp, "CUTS", cut.start_pos, y, cut.length, self.bar_height)
            msp.add_mtext(
                f"{cut.length:g}",
                dxfattribs={
                    "layer": "LABELS",
                    "char_height": self.text_height,
                    "insert": (cut.start_pos + cut.length / 2, y + self.bar_height / 2),
                    "attachment_point": 5,  # Middle center
                },
            )

        if pattern.waste > 0:
            self._draw_rect(
                msp,
                "WASTE",
                stock_length - pattern.waste,
                y,
                pattern.waste,
                self.bar_height,
            )

        msp.add_mtext(
            f"Unit {pattern.stock_index + 1} - waste {pattern.waste:g} mm",
            dxfattribs={
                "layer": "LABELS",
                "char_height": self.text_height,
                "insert": (0.0, y + self.bar_height + self.text_height * 1.5),
                "attachment_point": 7,  # Bottom left
            },
        )

    @staticmethod
    def _draw_rect(
        msp: Modelspace,
        layer: str,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> None:
        points = [
            (x, y),
            (x + width, y),
            (x + width, y + height),
            (x, y + height),
            (x, y),
        ]
        msp.add_lwpolyline(points, dxfattribs={"layer": layer})
