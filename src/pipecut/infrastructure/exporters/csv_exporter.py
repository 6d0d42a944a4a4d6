"""CSV exporter for cutting plans.

One row per placed piece, followed by one waste row per stock unit, so the
file can be used directly as a saw cut sheet.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from pipecut.infrastructure.exporters.base import ExporterRegistry, require_result

if TYPE_CHECKING:
    from pipecut.application.dtos import OptimizationOutput

CSV_HEADER = ["Stock Unit", "Sequence", "Type", "Length (mm)", "Start (mm)", "End (mm)"]


@ExporterRegistry.register("csv")
class CsvExporter:
    """Exports the cutting plan as CSV rows."""

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"
    media_type: ClassVar[str] = "text/csv"

    def export(self, output: OptimizationOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: OptimizationOutput) -> str:
        require_result(output, self.format_name)
        stock_length = output.stock.length

        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)

        for pattern in output.result.patterns:
            unit = pattern.stock_index + 1
            for sequence, cut in enumerate(pattern.cuts, start=1):
                writer.writerow(
                    [unit, sequence, "cut", cut.length, cut.start_pos, cut.end_pos]
                )
            if pattern.waste > 0:
                writer.writerow(
                    [
                        unit,
                        "",
                        "waste",
                        pattern.waste,
                        stock_length - pattern.waste,
                        stock_length,
                    ]
                )

        return buffer.getvalue()
