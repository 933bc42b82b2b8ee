"""Cut diagram rendering for sheet layouts.

This module renders a CuttingLayout as SVG, showing the stock sheet and one
rectangle per placed panel copy, and as a plain-text waste summary.
"""

from __future__ import annotations

from panelcut.domain.value_objects import PanelType
from panelcut.infrastructure.sheet_packer import CuttingLayout, Placement

# Fill colors by panel type
PANEL_TYPE_COLORS: dict[PanelType, str] = {
    PanelType.SIDE: "#90EE90",  # Light green
    PanelType.TOP_BOTTOM: "#DDA0DD",  # Plum
    PanelType.BACK: "#D3D3D3",  # Light gray
    PanelType.DOOR: "#FFB6C1",  # Light pink
    PanelType.SHELF: "#87CEEB",  # Sky blue
}


class CutDiagramRenderer:
    """Renders cut diagrams in SVG format.

    Attributes:
        scale: SVG units per mm.
        sheet_fill: Fill color for the stock sheet.
        piece_fill: Fill color when panel colors are disabled.
        piece_stroke: Stroke color for piece outlines.
        text_color: Color for labels.
        show_labels: Whether to show the panel type label on each piece.
        show_dimensions: Whether to show piece dimensions under the label.
        use_panel_colors: Whether to color pieces by panel type.
    """

    def __init__(
        self,
        scale: float = 1.0,
        sheet_fill: str = "#051829",
        piece_fill: str = "#4A90E2",
        piece_stroke: str = "#2C5A7E",
        text_color: str = "#000000",
        show_labels: bool = True,
        show_dimensions: bool = False,
        use_panel_colors: bool = True,
    ) -> None:
        self.scale = scale
        self.sheet_fill = sheet_fill
        self.piece_fill = piece_fill
        self.piece_stroke = piece_stroke
        self.text_color = text_color
        self.show_labels = show_labels
        self.show_dimensions = show_dimensions
        self.use_panel_colors = use_panel_colors

    def render_svg(self, layout: CuttingLayout, title: str | None = None) -> str:
        """Generate an SVG cut diagram for one sheet.

        Args:
            layout: Cutting layout to draw.
            title: Optional document title.

        Returns:
            SVG document as a string.
        """
        svg_width = layout.sheet_width * self.scale
        svg_height = layout.sheet_height * self.scale

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'viewBox="0 0 {svg_width} {svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
        ]
        if title:
            parts.append(f"  <title>{title}</title>")

        parts.append("  <!-- Sheet -->")
        parts.append(
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" '
            f'fill="{self.sheet_fill}" stroke="{self.piece_stroke}"/>'
        )

        parts.append("")
        parts.append("  <!-- Placed panels -->")
        for placement in layout.placements:
            piece_svg = self._render_piece(placement)
            if piece_svg:
                parts.append(piece_svg)

        parts.append("")
        parts.append("</svg>")
        return "\n".join(parts)

    def render_waste_summary(self, layout: CuttingLayout) -> str:
        """Render a one-paragraph text summary of sheet usage."""
        lines = [
            f"Sheet usage: {layout.placed_count} of {layout.total_copies} panels placed",
            f"  Utilization: {layout.utilization_percent:.2f}%",
            f"  Waste: {layout.waste_area:.2f} mm²",
        ]
        if layout.has_overflow:
            lines.append("  Some panels did not fit; the sheet filled up before the list ended.")
        return "\n".join(lines)

    def _render_piece(self, placement: Placement) -> str:
        """Render one placed copy as an SVG group.

        Copies with a non-positive side have no drawable area and are skipped.
        """
        panel = placement.panel
        if panel.width <= 0 or panel.height <= 0:
            return ""

        x = placement.x * self.scale
        y = placement.y * self.scale
        w = panel.width * self.scale
        h = panel.height * self.scale

        if self.use_panel_colors:
            fill_color = PANEL_TYPE_COLORS.get(panel.type, self.piece_fill)
        else:
            fill_color = self.piece_fill

        svg_parts = [
            "  <g>",
            f'    <rect x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="{fill_color}" stroke="{self.piece_stroke}" stroke-width="2"/>',
        ]

        font_size = min(12 * self.scale, min(w, h) / 6)
        text_x = x + w / 2
        text_y = y + h / 2
        if self.show_labels:
            svg_parts.append(
                f'    <text x="{text_x}" y="{text_y}" text-anchor="middle" '
                f'dominant-baseline="middle" font-family="Arial, sans-serif" '
                f'font-size="{font_size}" fill="{self.text_color}">{panel.type.value}</text>'
            )
        if self.show_dimensions:
            svg_parts.append(
                f'    <text x="{text_x}" y="{text_y + font_size + 2}" '
                f'text-anchor="middle" font-family="Arial, sans-serif" '
                f'font-size="{font_size * 0.8}" fill="{self.text_color}">'
                f"{panel.width:g} x {panel.height:g}</text>"
            )

        svg_parts.append("  </g>")
        return "\n".join(svg_parts)
