"""Output formatters for cut lists and cutting layouts."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from panelcut.domain.value_objects import Panel
from panelcut.infrastructure.sheet_packer import CuttingLayout

if TYPE_CHECKING:
    from panelcut.application.dtos import CutListOutput


def _format_mm(value: float) -> str:
    """Render a millimetre value without a trailing ``.0`` for whole numbers."""
    return f"{value:g}"


class CutListFormatter:
    """Formats a panel list as a cut-list table."""

    def format(self, panels: tuple[Panel, ...] | list[Panel]) -> str:
        """Format panels as a table in the order given."""
        if not panels:
            return "No panels in cut list."

        lines = [
            "CUT LIST",
            "=" * 90,
            f"{'Reference':<12} {'Type':<18} {'Dimensions (W x H)':<24} {'Qty':<5} {'Edge Banding'}",
            "-" * 90,
        ]

        for panel in panels:
            dims = f"{_format_mm(panel.width)} x {_format_mm(panel.height)} mm"
            banding = ", ".join(tag.value for tag in panel.edge_banding)
            lines.append(
                f"{panel.id:<12} {panel.type.value:<18} {dims:<24} "
                f"{panel.quantity:<5} {banding}"
            )

        lines.append("-" * 90)
        lines.append(f"Total panels: {sum(p.quantity for p in panels)}")

        return "\n".join(lines)


class LayoutSummaryFormatter:
    """Formats the utilization and waste metrics of a cutting layout."""

    def format(self, layout: CuttingLayout) -> str:
        """Format a short metrics report for one sheet."""
        lines = [
            "SHEET UTILIZATION",
            "=" * 40,
            f"Sheet:             {_format_mm(layout.sheet_width)} x "
            f"{_format_mm(layout.sheet_height)} mm",
            f"Total utilization: {layout.utilization_percent:.2f}%",
            f"Waste area:        {layout.waste_area:.2f} mm²",
            f"Total panels:      {layout.total_copies}",
            f"Placed panels:     {layout.placed_count}",
        ]
        if layout.has_overflow:
            unplaced = layout.total_copies - layout.placed_count
            lines.append(f"Warning: {unplaced} panel(s) did not fit on the sheet")
        return "\n".join(lines)


class JsonExporter:
    """Exports cut list output as JSON."""

    def export(self, output: CutListOutput) -> str:
        """Export the full output as a JSON string."""
        if not output.is_valid:
            return json.dumps({"errors": output.errors}, indent=2)

        data = {
            "material": {
                "type": output.material.type.value,
                "thickness": output.material.thickness,
                "width": output.material.width,
                "height": output.material.height,
                "kerf": output.material.kerf,
            },
            "cabinets": [
                {
                    "cabinet_number": entry.cabinet_number,
                    "quantity": entry.cabinet.quantity,
                    "layout": self.layout_to_dict(entry.layout),
                }
                for entry in output.cut_lists
            ],
            "totals": {
                "total_panel_copies": output.total_panel_copies,
                "total_placed": output.total_placed,
                "total_placed_area": output.total_placed_area,
            },
        }
        return json.dumps(data, indent=2)

    def layout_to_dict(self, layout: CuttingLayout) -> dict[str, Any]:
        """Convert a cutting layout to plain JSON-compatible data."""
        return {
            "panels": [self.panel_to_dict(p) for p in layout.panels],
            "placements": [
                {"panel_id": p.panel.id, "x": p.x, "y": p.y}
                for p in layout.placements
            ],
            "utilization_percent": layout.utilization_percent,
            "waste_area": layout.waste_area,
            "placed_count": layout.placed_count,
            "total_copies": layout.total_copies,
        }

    def panel_to_dict(self, panel: Panel) -> dict[str, Any]:
        """Convert a panel to plain JSON-compatible data."""
        return {
            "id": panel.id,
            "type": panel.type.value,
            "width": panel.width,
            "height": panel.height,
            "quantity": panel.quantity,
            "edge_banding": [tag.value for tag in panel.edge_banding],
        }
