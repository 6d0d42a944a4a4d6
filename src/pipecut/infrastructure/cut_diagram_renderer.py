"""Cut diagram rendering for cutting plans.

Each stock unit is drawn as a horizontal bar scaled to the stock length, with
cut pieces from the left and the leftover waste at the right end. SVG output
is used for reports and exports; ASCII output for terminal display.
"""

from __future__ import annotations

from pipecut.domain import CuttingPattern, OptimizationResult

ASCII_CUT = "#"
ASCII_BOUNDARY = "|"
ASCII_WASTE = "~"


class CutDiagramRenderer:
    """Renders cutting patterns as proportional bars.

    Attributes:
        bar_width: Width in pixels of a full stock unit in SVG output.
        bar_height: Height in pixels of each bar in SVG output.
        bar_spacing: Vertical gap in pixels between bars.
        label_width: Width in pixels reserved for the unit labels.
        cut_fill: Fill color for cut pieces.
        waste_fill: Base color for the hatched waste segment.
        text_color: Color for labels.
        min_label_fraction: Smallest piece, as a fraction of the stock
            length, that still gets a length label.
    """

    def __init__(
        self,
        bar_width: float = 800.0,
        bar_height: float = 40.0,
        bar_spacing: float = 20.0,
        label_width: float = 90.0,
        cut_fill: str = "#3B82F6",  # Blue
        waste_fill: str = "#E87917",  # Orange
        text_color: str = "#000000",
        min_label_fraction: float = 0.05,
    ) -> None:
        self.bar_width = bar_width
        self.bar_height = bar_height
        self.bar_spacing = bar_spacing
        self.label_width = label_width
        self.cut_fill = cut_fill
        self.waste_fill = waste_fill
        self.text_color = text_color
        self.min_label_fraction = min_label_fraction

    def render_ascii(
        self,
        pattern: CuttingPattern,
        stock_length: float,
        width: int = 60,
    ) -> str:
        """Generate an ASCII bar for a single stock unit.

        Cut pieces are drawn with ``#`` and end in ``|``; any length not
        covered by a piece (kerf gaps and the offcut) shows as ``~``.

        Args:
            pattern: Cutting pattern to draw.
            stock_length: Length of the stock unit in mm.
            width: Bar width in characters (default 60).

        Returns:
            One line: unit label, bar and waste.

        Raises:
            ValueError: If width is not positive.
        """
        if width <= 0:
            raise ValueError(f"width must be positive, got {width}")
        cells = [ASCII_WASTE] * width
        scale = width / stock_length if stock_length > 0 else 0.0

        for cut in pattern.cuts:
            start = min(int(cut.start_pos * scale), width - 1)
            end = min(int(round(cut.end_pos * scale)), width)
            if end <= start:
                end = start + 1
            for col in range(start, end):
                cells[col] = ASCII_CUT
            if end - start > 1:
                cells[end - 1] = ASCII_BOUNDARY

        bar = "".join(cells)
        return f"Unit {pattern.stock_index + 1:>3} [{bar}] {pattern.waste:.1f} mm waste"

    def render_all_ascii(
        self,
        result: OptimizationResult,
        stock_length: float,
        width: int = 60,
    ) -> str:
        """Generate ASCII bars for every stock unit with a header and legend.

        Args:
            result: Optimization result to draw.
            stock_length: Length of one stock unit in mm.
            width: Bar width in characters (default 60).

        Returns:
            Multi-line ASCII diagram.

        Raises:
            ValueError: If width is not positive.
        """
        if width <= 0:
            raise ValueError(f"width must be positive, got {width}")
        if not result.patterns:
            return "No stock units to display."

        mm_per_char = stock_length / width
        lines = [
            f"CUT DIAGRAM - {result.stock_units_used} unit(s) of {stock_length:.1f} mm "
            f"(1 char = {mm_per_char:.1f} mm)",
        ]
        lines.extend(
            self.render_ascii(pattern, stock_length, width) for pattern in result.patterns
        )
        lines.append(
            f"Legend: {ASCII_CUT} cut piece  {ASCII_BOUNDARY} cut end  {ASCII_WASTE} waste"
        )
        return "\n".join(lines)

    def render_svg(self, result: OptimizationResult, stock_length: float) -> str:
        """Generate a single SVG with one bar per stock unit.

        Args:
            result: Optimization result to draw.
            stock_length: Length of one stock unit in mm.

        Returns:
            SVG document as a string.
        """
        if not result.patterns or stock_length <= 0:
            return (
                '<svg width="200" height="50" xmlns="http://www.w3.org/2000/svg">'
                '<text x="10" y="30">No stock units to display</text></svg>'
            )

        header_height = 30.0
        legend_height = 30.0
        row_height = self.bar_height + self.bar_spacing
        svg_width = self.label_width + self.bar_width + 20
        svg_height = header_height + len(result.patterns) * row_height + legend_height

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            "  <defs>",
            '    <pattern id="waste-hatch" width="12" height="12" '
            'patternUnits="userSpaceOnUse" patternTransform="rotate(45)">',
            f'      <rect width="12" height="12" fill="{self.waste_fill}" '
            'fill-opacity="0.6"/>',
            f'      <rect width="6" height="12" fill="{self.waste_fill}" '
            'fill-opacity="0.8"/>',
            "    </pattern>",
            "  </defs>",
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" '
            'fill="white"/>',
            self._render_header(result, stock_length, header_height),
        ]

        scale = self.bar_width / stock_length
        for row, pattern in enumerate(result.patterns):
            y = header_height + row * row_height
            parts.append(self._render_bar(pattern, stock_length, scale, y))

        legend_y = header_height + len(result.patterns) * row_height
        parts.append(self._render_legend(legend_y))
        parts.append("</svg>")
        return "\n".join(parts)

    def _render_header(
        self,
        result: OptimizationResult,
        stock_length: float,
        header_height: float,
    ) -> str:
        header_text = (
            f"{result.stock_units_used} x {stock_length:.0f} mm - "
            f"{result.material_efficiency_percent:.1f}% efficiency - "
            f"{result.total_waste:.0f} mm waste"
        )
        return (
            f'  <text x="10" y="{header_height - 10}" '
            f'font-family="Arial, sans-serif" font-size="14" '
            f'fill="{self.text_color}">{header_text}</text>'
        )

    def _render_bar(
        self,
        pattern: CuttingPattern,
        stock_length: float,
        scale: float,
        y: float,
    ) -> str:
        """Render one stock unit: outline, cut pieces and waste segment."""
        x0 = self.label_width
        text_y = y + self.bar_height / 2 + 4
        parts = [
            f"  <!-- Unit {pattern.stock_index + 1} -->",
            "  <g>",
            f'    <text x="{x0 - 10}" y="{text_y}" text-anchor="end" '
            f'font-family="monospace" font-size="12" '
            f'fill="{self.text_color}">Pipe {pattern.stock_index + 1}</text>',
            f'    <rect x="{x0}" y="{y}" width="{self.bar_width}" '
            f'height="{self.bar_height}" fill="#E5E5E5" stroke="#737373"/>',
        ]

        for cut in pattern.cuts:
            cx = x0 + cut.start_pos * scale
            cw = cut.length * scale
            parts.append(
                f'    <rect x="{cx:.2f}" y="{y}" width="{cw:.2f}" '
                f'height="{self.bar_height}" fill="{self.cut_fill}" stroke="#F5F5F5">'
                f"<title>{cut.length:g} mm ({cut.start_pos:g} - {cut.end_pos:g} mm)</title>"
                "</rect>"
            )
            if cut.length / stock_length > self.min_label_fraction:
                parts.append(
                    f'    <text x="{cx + cw / 2:.2f}" y="{text_y}" '
                    f'text-anchor="middle" font-family="Arial, sans-serif" '
                    f'font-size="11" fill="white">{cut.length:g}mm</text>'
                )

        if pattern.waste > 0:
            ww = pattern.waste * scale
            wx = x0 + self.bar_width - ww
            parts.append(
                f'    <rect x="{wx:.2f}" y="{y}" width="{ww:.2f}" '
                f'height="{self.bar_height}" fill="url(#waste-hatch)">'
                f"<title>Waste: {pattern.waste:g} mm</title></rect>"
            )

        parts.append(
            f'    <text x="{x0 + self.bar_width + 5}" y="{text_y}" '
            f'font-family="monospace" font-size="10" '
            f'fill="{self.text_color}">{pattern.waste:g}</text>'
        )
        parts.append("  </g>")
        return "\n".join(parts)

    def _render_legend(self, y: float) -> str:
        x = self.label_width
        return "\n".join(
            [
                "  <!-- Legend -->",
                f'  <rect x="{x}" y="{y + 8}" width="14" height="14" '
                f'fill="{self.cut_fill}"/>',
                f'  <text x="{x + 20}" y="{y + 20}" font-family="Arial, sans-serif" '
                f'font-size="12" fill="{self.text_color}">Cut piece</text>',
                f'  <rect x="{x + 110}" y="{y + 8}" width="14" height="14" '
                'fill="url(#waste-hatch)"/>',
                f'  <text x="{x + 130}" y="{y + 20}" font-family="Arial, sans-serif" '
                f'font-size="12" fill="{self.text_color}">Waste</text>',
            ]
        )
