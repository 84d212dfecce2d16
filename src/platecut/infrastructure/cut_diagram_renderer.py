"""Cut diagram rendering for packing results.

This module renders plate layouts as SVG for printing and as ASCII for
the terminal, plus a plain-text summary of the whole run.
"""

from __future__ import annotations

from xml.sax.saxutils import escape

from platecut.domain import FreeRectangle, Layout, PackingResult, PlacedPiece, RequestId

# Piece fill colors, assigned to requests in cut list order and cycled
REQUEST_COLORS: tuple[str, ...] = (
    "#60a5fa",  # Blue
    "#4ade80",  # Green
    "#facc15",  # Yellow
    "#a78bfa",  # Violet
    "#f472b6",  # Pink
    "#2dd4bf",  # Teal
    "#fb923c",  # Orange
    "#818cf8",  # Indigo
)

WASTE_LABEL_MIN_SIDE = 50
PIECE_LABEL_MIN_WIDTH = 40
PIECE_LABEL_MIN_HEIGHT = 20


def label_font_size(width: float, height: float) -> int:
    """Font size in millimeters for a label inside a ``width`` x ``height`` box."""
    smaller = min(width, height)
    if smaller < 50:
        return 12
    if smaller < 100:
        return 18
    if smaller < 300:
        return 24
    return 32


class CutDiagramRenderer:
    """Renders plate layouts as SVG and ASCII diagrams.

    Attributes:
        scale: Pixels per millimeter for SVG rendering.
        piece_stroke: Stroke color for piece outlines.
        waste_fill: Fill color for free (waste) rectangles.
        text_color: Color for header text.
        show_dimensions: Whether to label pieces and waste with their size.
    """

    def __init__(
        self,
        scale: float = 0.25,
        piece_stroke: str = "#1f2937",
        waste_fill: str = "#f87171",
        text_color: str = "#1f2937",
        show_dimensions: bool = True,
    ) -> None:
        """Initialize renderer with styling options.

        Args:
            scale: Pixels per millimeter (default 0.25, a 3000 mm plate is 750 px).
            piece_stroke: Stroke color for piece outlines.
            waste_fill: Fill color for waste rectangles.
            text_color: Color for the header text.
            show_dimensions: Whether to print ``WxH`` labels.
        """
        self.scale = scale
        self.piece_stroke = piece_stroke
        self.waste_fill = waste_fill
        self.text_color = text_color
        self.show_dimensions = show_dimensions

    def colors_for(self, result: PackingResult) -> dict[RequestId, str]:
        """Assign a fill color to every request id of a result."""
        ids = list(result.requested_counts)
        for layout in result.layouts:
            for placed in layout.placed_pieces:
                if placed.source_id not in ids:
                    ids.append(placed.source_id)
        return {rid: REQUEST_COLORS[i % len(REQUEST_COLORS)] for i, rid in enumerate(ids)}

    def render_svg(
        self,
        layout: Layout,
        total_plates: int = 1,
        colors: dict[RequestId, str] | None = None,
    ) -> str:
        """Generate the SVG cut diagram of one plate.

        Args:
            layout: Plate layout to draw.
            total_plates: Number of plates in the run, for the header.
            colors: Fill color per request id. Pieces of unknown requests
                use the first palette color.

        Returns:
            SVG document as a string.
        """
        plate = layout.plate
        colors = colors or {}
        header_height = 30

        svg_width = plate.width * self.scale
        svg_height = plate.height * self.scale + header_height

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            "",
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" '
            f'fill="white"/>',
            "",
            self._render_header(layout, total_plates, svg_width, header_height),
            "",
            "  <!-- Plate outline -->",
            f'  <rect x="0" y="{header_height}" width="{svg_width}" '
            f'height="{plate.height * self.scale}" fill="#f3f4f6" '
            f'stroke="#9ca3af" stroke-width="2"/>',
            "",
            "  <!-- Waste areas -->",
        ]

        for rect in layout.free_rectangles:
            parts.append(self._render_waste(rect, header_height))

        parts.append("")
        parts.append("  <!-- Placed pieces -->")
        for placed in layout.placed_pieces:
            fill = colors.get(placed.source_id, REQUEST_COLORS[0])
            parts.append(self._render_piece(placed, fill, header_height))

        parts.append("")
        parts.append("</svg>")
        return "\n".join(parts)

    def render_all_svg(self, result: PackingResult) -> list[str]:
        """Generate one SVG document per plate."""
        colors = self.colors_for(result)
        total = len(result.layouts)
        return [self.render_svg(layout, total, colors) for layout in result.layouts]

    def render_combined_svg(self, result: PackingResult) -> str:
        """Generate a single SVG with all plates stacked vertically."""
        if not result.layouts:
            return (
                '<svg width="200" height="50" xmlns="http://www.w3.org/2000/svg">'
                '<text x="10" y="30">No plates to display</text></svg>'
            )

        header_height = 30
        plate_spacing = 20
        plate = result.plate
        plate_block = plate.height * self.scale + header_height + plate_spacing

        svg_width = plate.width * self.scale
        svg_height = plate_block * len(result.layouts)

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" '
            f'fill="white"/>',
        ]

        for layout, plate_svg in zip(result.layouts, self.render_all_svg(result)):
            y_offset = plate_block * layout.plate_index
            parts.append(f'  <g transform="translate(0, {y_offset})">')
            parts.append(f"    <!-- Plate {layout.plate_index + 1} -->")

            start_idx = plate_svg.find(">") + 1
            end_idx = plate_svg.rfind("</svg>")
            for line in plate_svg[start_idx:end_idx].strip().split("\n"):
                if line.strip():
                    parts.append(f"  {line}")

            parts.append("  </g>")

        parts.append("</svg>")
        return "\n".join(parts)

    def _render_header(
        self,
        layout: Layout,
        total_plates: int,
        svg_width: float,
        header_height: float,
    ) -> str:
        plate = layout.plate
        count = layout.piece_count
        header_text = (
            f"Plate {layout.plate_index + 1} of {total_plates} - "
            f"{plate.width}x{plate.height} mm - "
            f"{count} piece{'s' if count != 1 else ''} - "
            f"{layout.efficiency_percent:.2f}% efficiency"
        )
        return (
            f"  <!-- Header -->\n"
            f'  <rect x="0" y="0" width="{svg_width}" height="{header_height}" '
            f'fill="#e5e7eb"/>\n'
            f'  <text x="10" y="{header_height - 10}" '
            f'font-family="Arial, sans-serif" font-size="14" '
            f'fill="{self.text_color}">{escape(header_text)}</text>'
        )

    def _render_waste(self, rect: FreeRectangle, header_height: float) -> str:
        x = rect.x * self.scale
        y = header_height + rect.y * self.scale
        w = rect.width * self.scale
        h = rect.height * self.scale

        svg = (
            f'  <rect x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="{self.waste_fill}" fill-opacity="0.9" stroke="none"/>'
        )
        if (
            self.show_dimensions
            and rect.width > WASTE_LABEL_MIN_SIDE
            and rect.height > WASTE_LABEL_MIN_SIDE
        ):
            font_size = label_font_size(rect.width, rect.height) * self.scale
            svg += (
                f'\n  <text x="{x + w / 2}" y="{y + h / 2}" text-anchor="middle" '
                f'dominant-baseline="central" font-family="Arial, sans-serif" '
                f'font-size="{font_size}" fill="white">'
                f"{rect.width}x{rect.height}</text>"
            )
        return svg

    def _render_piece(self, placed: PlacedPiece, fill: str, header_height: float) -> str:
        x = placed.x * self.scale
        y = header_height + placed.y * self.scale
        w = placed.width * self.scale
        h = placed.height * self.scale

        svg_parts = [
            "  <g>",
            f'    <rect x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="{fill}" fill-opacity="0.85" stroke="{self.piece_stroke}" '
            f'stroke-dasharray="4 2"/>',
        ]

        if (
            self.show_dimensions
            and placed.width > PIECE_LABEL_MIN_WIDTH
            and placed.height > PIECE_LABEL_MIN_HEIGHT
        ):
            dims = f"{placed.width}x{placed.height}"
            if placed.rotated:
                dims += " (R)"
            font_size = label_font_size(placed.width, placed.height) * self.scale
            svg_parts.append(
                f'    <text x="{x + w / 2}" y="{y + h / 2}" text-anchor="middle" '
                f'dominant-baseline="central" font-family="Arial, sans-serif" '
                f'font-weight="bold" font-size="{font_size}" fill="white">'
                f"{escape(dims)}</text>"
            )

        svg_parts.append("  </g>")
        return "\n".join(svg_parts)

    def render_ascii(self, layout: Layout, width: int = 80, total_plates: int = 1) -> str:
        """Generate an ASCII diagram of one plate for terminal display.

        Args:
            layout: Plate layout.
            width: Terminal width in characters.
            total_plates: Number of plates in the run, for the header.

        Returns:
            Multi-line string.
        """
        plate = layout.plate
        usable_width = width - 2
        scale_x = usable_width / plate.width

        # Terminal cells are roughly twice as tall as they are wide
        grid_height = max(int(usable_width * plate.height / plate.width * 0.5), 10)
        scale_y = grid_height / plate.height

        grid = [[" " for _ in range(usable_width)] for _ in range(grid_height)]
        for placed in layout.placed_pieces:
            self._draw_piece_ascii(grid, placed, scale_x, scale_y)

        lines = [
            f"Plate {layout.plate_index + 1} of {total_plates} - "
            f"{plate.width}x{plate.height} mm - "
            f"{layout.efficiency_percent:.2f}% efficiency",
            "+" + "-" * usable_width + "+",
        ]
        lines.extend("|" + "".join(row) + "|" for row in grid)
        lines.append("+" + "-" * usable_width + "+")
        return "\n".join(lines)

    def _draw_piece_ascii(
        self,
        grid: list[list[str]],
        placed: PlacedPiece,
        scale_x: float,
        scale_y: float,
    ) -> None:
        grid_height = len(grid)
        grid_width = len(grid[0]) if grid else 0

        def clamp(value: int, upper: int) -> int:
            return max(0, min(value, upper - 1))

        x1 = clamp(int(placed.x * scale_x), grid_width)
        x2 = clamp(int(placed.right_edge * scale_x), grid_width)
        y1 = clamp(int(placed.y * scale_y), grid_height)
        y2 = clamp(int(placed.bottom_edge * scale_y), grid_height)

        for x in range(x1, x2 + 1):
            grid[y1][x] = "-"
            grid[y2][x] = "-"
        for y in range(y1, y2 + 1):
            grid[y][x1] = "|"
            grid[y][x2] = "|"
        for cx, cy in ((x1, y1), (x2, y1), (x1, y2), (x2, y2)):
            grid[cy][cx] = "+"

        label_row = y1 + 1
        if label_row < y2:
            label = f"{placed.width}x{placed.height}" + ("R" if placed.rotated else "")
            label = label[: max(x2 - x1 - 1, 0)]
            for i, char in enumerate(label):
                grid[label_row][x1 + 1 + i] = char

    def render_all_ascii(self, result: PackingResult, width: int = 80) -> str:
        """Generate ASCII diagrams for every plate followed by the summary."""
        if not result.layouts:
            return self.render_summary(result)

        total = len(result.layouts)
        parts: list[str] = []
        for layout in result.layouts:
            parts.append(self.render_ascii(layout, width, total))
            parts.append("")
        parts.append(self.render_summary(result))
        return "\n".join(parts)

    def render_summary(self, result: PackingResult) -> str:
        """Plain-text report of global, per-plate and per-request numbers."""
        summary = result.summary
        lines: list[str] = [
            "CUTTING SUMMARY",
            "=" * 40,
            f"Plate size:        {result.plate.width} x {result.plate.height} mm",
            f"Plates required:   {summary.plates_required}",
            f"Pieces placed:     {summary.total_pieces_placed}",
            f"Used area:         {summary.total_used_area} mm2",
            f"Waste area:        {summary.total_waste_area} mm2",
            f"Total plate area:  {summary.total_base_area} mm2",
            f"Efficiency:        {summary.efficiency_percent:.2f}%",
        ]

        if result.layouts:
            lines.append("")
            lines.append("Per-Plate Details:")
            for layout in result.layouts:
                lines.append(
                    f"  Plate {layout.plate_index + 1}: "
                    f"{layout.piece_count} piece{'s' if layout.piece_count != 1 else ''}, "
                    f"used {layout.used_area} mm2, waste {layout.waste_area} mm2, "
                    f"{layout.efficiency_percent:.2f}%"
                )

        placed_counts = result.placed_counts()
        if placed_counts:
            lines.append("")
            lines.append("Pieces by Request:")
            for request_id, placed in placed_counts.items():
                requested = result.requested_counts.get(request_id, placed)
                lines.append(f"  {request_id}: {placed} of {requested} placed")

        if result.unplaced:
            lines.append("")
            lines.append(f"Unplaced Pieces: {len(result.unplaced)}")
            for piece in result.unplaced:
                lines.append(f"  {piece.request_id} #{piece.instance_index + 1}")

        return "\n".join(lines)
