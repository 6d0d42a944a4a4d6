"""JSON exporter for cutting plans."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from pipecut.infrastructure.exporters.base import ExporterRegistry, require_result

if TYPE_CHECKING:
    from pipecut.application.dtos import OptimizationOutput


def output_to_dict(output: OptimizationOutput) -> dict[str, Any]:
    """Convert an optimization output to JSON-compatible data.

    The efficiency is emitted unrounded.
    """
    result = output.result
    return {
        "stock": asdict(output.stock) if output.stock is not None else None,
        "stock_units_used": result.stock_units_used,
        "material_efficiency_percent": result.material_efficiency_percent,
        "total_waste": result.total_waste,
        "cut_operations_count": result.cut_operations_count,
        "patterns": [
            {
                "stock_index": pattern.stock_index,
                "cuts": [asdict(cut) for cut in pattern.cuts],
                "waste": pattern.waste,
            }
            for pattern in result.patterns
        ],
        "parameters": asdict(result.parameters),
        "unmet_demand": [
            {
                "length": item.length,
                "requested": item.requested,
                "placed": item.placed,
                "shortfall": item.shortfall,
            }
            for item in output.unmet_demand
        ],
    }


@ExporterRegistry.register("json")
class JsonExporter:
    """Exports the full cutting plan, stock and unmet demand as JSON."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    media_type: ClassVar[str] = "application/json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: OptimizationOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: OptimizationOutput) -> str:
        require_result(output, self.format_name)
        return json.dumps(output_to_dict(output), indent=self.indent)
