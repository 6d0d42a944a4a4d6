"""Infrastructure layer - formatters, diagrams and exporters."""

from .cut_diagram_renderer import CutDiagramRenderer
from .formatters import (
    CuttingPlanFormatter,
    SummaryFormatter,
    describe_stock,
    format_efficiency,
)
from .exporters import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

__all__ = [
    "CutDiagramRenderer",
    "CuttingPlanFormatter",
    "SummaryFormatter",
    "describe_stock",
    "format_efficiency",
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
]
