"""Infrastructure layer - sheet packing, formatters and renderers."""

from .cut_diagram_renderer import CutDiagramRenderer
from .formatters import CutListFormatter, JsonExporter, LayoutSummaryFormatter
from .sheet_packer import (
    CuttingLayout,
    Placement,
    SheetPacker,
    pack_panels,
    sort_by_area,
)

__all__ = [
    "CutDiagramRenderer",
    "CutListFormatter",
    "CuttingLayout",
    "JsonExporter",
    "LayoutSummaryFormatter",
    "Placement",
    "SheetPacker",
    "pack_panels",
    "sort_by_area",
]
