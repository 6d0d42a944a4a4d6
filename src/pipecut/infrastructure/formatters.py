"""Text formatters for cutting plans."""

from __future__ import annotations

from pipecut.application.dtos import OptimizationOutput
from pipecut.domain import OptimizationResult, StockSpecification


def format_efficiency(value: float) -> str:
    """Format an efficiency percentage to one decimal place for display."""
    return f"{value:.1f}%"


def describe_stock(stock: StockSpecification) -> str:
    """One-line description of a stock specification."""
    text = f"{stock.length:.1f} mm x {stock.quantity}"
    details: list[str] = []
    if stock.material:
        details.append(stock.material)
    if stock.diameter is not None:
        size = f"OD {stock.diameter:.1f} mm"
        if stock.thickness is not None:
            size += f" x {stock.thickness:.1f} mm wall"
        details.append(size)
    elif stock.thickness is not None:
        details.append(f"{stock.thickness:.1f} mm wall")
    if details:
        text += f" ({', '.join(details)})"
    return text


class CuttingPlanFormatter:
    """Formats the per-unit cutting plan as a table."""

    def format(self, result: OptimizationResult) -> str:
        """Format every cutting pattern with its placements and waste."""
        if not result.patterns:
            return "No stock units used."

        lines = [
            "CUTTING PLAN",
            "=" * 60,
        ]

        for pattern in result.patterns:
            lines.append(
                f"Stock unit {pattern.stock_index + 1}  "
                f"({pattern.piece_count} pieces, {pattern.waste:.1f} mm waste)"
            )
            if not pattern.cuts:
                lines.append("  (nothing fits)")
                continue
            lines.append(f"  {'#':<4} {'Length':>10} {'Start':>10} {'End':>10}")
            lines.append("  " + "-" * 37)
            for number, cut in enumerate(pattern.cuts, start=1):
                lines.append(
                    f"  {number:<4} {cut.length:>10.1f} "
                    f"{cut.start_pos:>10.1f} {cut.end_pos:>10.1f}"
                )
            lines.append("")

        lines.append("-" * 60)
        lines.append(
            f"{'TOTAL':<20} {result.cut_operations_count} cuts, "
            f"{result.total_waste:.1f} mm waste"
        )
        return "\n".join(lines)


class SummaryFormatter:
    """Formats optimization statistics, parameters and unmet demand."""

    def format(self, output: OptimizationOutput) -> str:
        """Format the summary report for a completed optimization."""
        if not output.is_valid:
            return "\n".join(["Optimization failed:"] + [f"  - {e}" for e in output.errors])

        result = output.result
        parameters = result.parameters
        lines = [
            "OPTIMIZATION SUMMARY",
            "=" * 60,
        ]

        if output.stock is not None:
            lines.append(f"Stock:                    {describe_stock(output.stock)}")
            lines.append(
                f"Stock units used:         {result.stock_units_used} "
                f"of {output.stock.quantity}"
            )
        else:
            lines.append(f"Stock units used:         {result.stock_units_used}")

        lines.extend(
            [
                f"Material efficiency:      {format_efficiency(result.material_efficiency_percent)}",
                f"Total waste:              {result.total_waste:.1f} mm",
                f"Cut operations:           {result.cut_operations_count}",
                "",
                "Parameters",
                f"  Kerf width:             {parameters.kerf_width:.1f} mm",
                f"  Min waste threshold:    {parameters.min_waste_threshold:.1f} mm",
                f"  Waste reduction weight: {parameters.prioritize_waste_reduction:.0f}%",
            ]
        )

        if output.unmet_demand:
            lines.append("")
            lines.append(f"UNMET DEMAND ({output.total_shortfall} pieces)")
            for item in output.unmet_demand:
                lines.append(
                    f"  {item.length:.1f} mm: {item.shortfall} of {item.requested} not cut"
                )

        return "\n".join(lines)
