"""Tests for cut list formatters, JSON export and the SVG renderer."""

from __future__ import annotations

import json

import pytest

from panelcut.application import OptimizeCutListCommand
from panelcut.domain import Cabinet, EdgeBanding, Material, Panel, PanelType
from panelcut.infrastructure import (
    CutDiagramRenderer,
    CutListFormatter,
    CuttingLayout,
    JsonExporter,
    LayoutSummaryFormatter,
    SheetPacker,
)


@pytest.fixture
def layout(default_panels: tuple[Panel, ...]) -> CuttingLayout:
    return SheetPacker().pack(default_panels, 2440, 1220)


class TestCutListFormatter:
    """Tests for CutListFormatter."""

    def test_empty(self) -> None:
        assert CutListFormatter().format(()) == "No panels in cut list."

    def test_rows_in_given_order(self, layout: CuttingLayout) -> None:
        output = CutListFormatter().format(layout.panels)
        lines = output.splitlines()
        assert lines[0] == "CUT LIST"
        rows = [line for line in lines if line.startswith("C1-")]
        assert [row.split()[0] for row in rows] == [
            "C1-L1",
            "C1-T1",
            "C1-D1",
            "C1-B1",
            "C1-S1",
        ]

    def test_row_content(self, default_panels: tuple[Panel, ...]) -> None:
        output = CutListFormatter().format(default_panels)
        side_row = next(line for line in output.splitlines() if line.startswith("C1-L1"))
        assert "Side Panel" in side_row
        assert "580 x 720 mm" in side_row
        assert "top, front, back" in side_row

    def test_total_panels(self, default_panels: tuple[Panel, ...]) -> None:
        output = CutListFormatter().format(default_panels)
        assert output.splitlines()[-1] == "Total panels: 7"

    def test_fractional_dimensions(self) -> None:
        panel = Panel(
            id="C1-S1",
            width=596.5,
            height=560,
            quantity=1,
            edge_banding=(EdgeBanding.FRONT,),
            type=PanelType.SHELF,
        )
        assert "596.5 x 560 mm" in CutListFormatter().format([panel])


class TestLayoutSummaryFormatter:
    """Tests for LayoutSummaryFormatter."""

    def test_metrics_and_overflow_warning(self, layout: CuttingLayout) -> None:
        output = LayoutSummaryFormatter().format(layout)
        assert f"{layout.utilization_percent:.2f}%" in output
        assert "Total panels:      7" in output
        assert "Placed panels:     4" in output
        assert "Warning: 3 panel(s) did not fit" in output

    def test_no_warning_when_everything_fits(
        self, default_panels: tuple[Panel, ...]
    ) -> None:
        layout = SheetPacker().pack(default_panels, 2440, 2440)
        assert "Warning" not in LayoutSummaryFormatter().format(layout)


class TestJsonExporter:
    """Tests for JsonExporter."""

    def test_export_structure(self, default_cabinet: Cabinet) -> None:
        result = OptimizeCutListCommand().execute(Material(), [default_cabinet])
        data = json.loads(JsonExporter().export(result))

        assert data["material"]["type"] == "mdf"
        assert len(data["cabinets"]) == 1
        cabinet = data["cabinets"][0]
        assert cabinet["cabinet_number"] == 1
        assert [p["id"] for p in cabinet["layout"]["panels"]][0] == "C1-L1"
        assert cabinet["layout"]["placements"][1] == {"panel_id": "C1-L1", "x": 580, "y": 0}
        assert cabinet["layout"]["placed_count"] == 4
        assert data["totals"]["total_panel_copies"] == 7

    def test_edge_banding_serialized_as_strings(self, default_panels: tuple[Panel, ...]) -> None:
        data = JsonExporter().panel_to_dict(default_panels[3])
        assert data["edge_banding"] == ["all"]
        assert data["type"] == "Door Panel"

    def test_errors_only_when_invalid(self) -> None:
        result = OptimizeCutListCommand().execute(Material(width=0), [Cabinet()])
        data = json.loads(JsonExporter().export(result))
        assert list(data) == ["errors"]

    def test_export_is_deterministic(self, default_cabinet: Cabinet) -> None:
        command = OptimizeCutListCommand()
        first = JsonExporter().export(command.execute(Material(), [default_cabinet]))
        second = JsonExporter().export(command.execute(Material(), [default_cabinet]))
        assert first == second


class TestCutDiagramRenderer:
    """Tests for CutDiagramRenderer."""

    def test_svg_document(self, layout: CuttingLayout) -> None:
        svg = CutDiagramRenderer().render_svg(layout, title="Cabinet 1")
        assert svg.startswith('<svg width="2440.0" height="1220.0"')
        assert "<title>Cabinet 1</title>" in svg
        assert svg.rstrip().endswith("</svg>")

    def test_one_group_per_placement(self, layout: CuttingLayout) -> None:
        svg = CutDiagramRenderer().render_svg(layout)
        assert svg.count("<g>") == layout.placed_count
        assert svg.count(">Side Panel</text>") == 2
        assert svg.count(">Top/Bottom Panel</text>") == 2

    def test_panel_colors(self, layout: CuttingLayout) -> None:
        svg = CutDiagramRenderer().render_svg(layout)
        assert 'fill="#90EE90"' in svg
        plain = CutDiagramRenderer(use_panel_colors=False).render_svg(layout)
        assert 'fill="#90EE90"' not in plain

    def test_scale_applies_to_positions(self, layout: CuttingLayout) -> None:
        svg = CutDiagramRenderer(scale=0.5).render_svg(layout)
        assert '<rect x="290.0" y="0.0" width="290.0" height="360.0"' in svg

    def test_degenerate_placements_not_drawn(self) -> None:
        zero = Panel(
            id="C1-S1",
            width=0,
            height=0,
            quantity=1,
            edge_banding=(EdgeBanding.FRONT,),
            type=PanelType.SHELF,
        )
        layout = SheetPacker().pack([zero], 100, 100)
        assert layout.placed_count == 1
        assert "<g>" not in CutDiagramRenderer().render_svg(layout)

    def test_waste_summary(self, layout: CuttingLayout) -> None:
        summary = CutDiagramRenderer().render_waste_summary(layout)
        assert "4 of 7 panels placed" in summary
        assert "did not fit" in summary
