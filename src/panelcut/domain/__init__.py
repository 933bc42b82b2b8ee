"""Domain layer - cabinet panel derivation and value objects."""

from .panel_generator import PanelGenerator, generate_panels, panel_id
from .preview import CabinetPreview, Rect, project_preview
from .validation import (
    MAX_DIVISIONS,
    MAX_QUANTITY,
    InvalidDimension,
    validate_cabinet,
    validate_material,
)
from .value_objects import (
    AssemblyType,
    Cabinet,
    DoorStyle,
    EdgeBanding,
    Material,
    MaterialType,
    Panel,
    PanelType,
)

__all__ = [
    "MAX_DIVISIONS",
    "MAX_QUANTITY",
    "AssemblyType",
    "Cabinet",
    "CabinetPreview",
    "DoorStyle",
    "EdgeBanding",
    "InvalidDimension",
    "Material",
    "MaterialType",
    "Panel",
    "PanelGenerator",
    "PanelType",
    "Rect",
    "generate_panels",
    "panel_id",
    "project_preview",
    "validate_cabinet",
    "validate_material",
]
