"""Exporter framework for cutting plans.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- csv: One row per placed piece and per offcut
- dxf: DXF drawing with one bar per stock unit
- json: Full cutting plan with stock and unmet demand
- svg: SVG cut diagram
- txt: Plain text report (summary, diagram and cutting plan)

Usage:
    from pipecut.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()

    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["csv", "svg"], output, project_name="job_42")
"""

from pipecut.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    require_result,
)

# Import exporters to trigger registration
from pipecut.infrastructure.exporters.csv_exporter import CsvExporter
from pipecut.infrastructure.exporters.dxf import DxfExporter
from pipecut.infrastructure.exporters.json_exporter import JsonExporter, output_to_dict
from pipecut.infrastructure.exporters.svg import SvgExporter
from pipecut.infrastructure.exporters.text import TextReportExporter

__all__ = [
    # Framework
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "require_result",
    # Registered exporters
    "CsvExporter",
    "DxfExporter",
    "JsonExporter",
    "SvgExporter",
    "TextReportExporter",
    "output_to_dict",
]
