"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from panelcut.domain import Panel
from panelcut.infrastructure import CuttingLayout


class PanelSchema(BaseModel):
    """A cut-list line item."""

    id: str
    type: str
    width: float
    height: float
    quantity: int
    edge_banding: list[str]

    @classmethod
    def from_domain(cls, panel: Panel) -> "PanelSchema":
        return cls(
            id=panel.id,
            type=panel.type.value,
            width=panel.width,
            height=panel.height,
            quantity=panel.quantity,
            edge_banding=[tag.value for tag in panel.edge_banding],
        )


class PlacementSchema(BaseModel):
    """One placed panel copy."""

    panel_id: str
    x: float
    y: float


class CuttingLayoutSchema(BaseModel):
    """Packing result for one sheet."""

    panels: list[PanelSchema]
    placements: list[PlacementSchema]
    utilization_percent: float
    waste_area: float
    placed_count: int
    total_copies: int

    @classmethod
    def from_domain(cls, layout: CuttingLayout) -> "CuttingLayoutSchema":
        return cls(
            panels=[PanelSchema.from_domain(p) for p in layout.panels],
            placements=[
                PlacementSchema(panel_id=p.panel.id, x=p.x, y=p.y)
                for p in layout.placements
            ],
            utilization_percent=layout.utilization_percent,
            waste_area=layout.waste_area,
            placed_count=layout.placed_count,
            total_copies=layout.total_copies,
        )


class PanelsResponse(BaseModel):
    """Generated panel list."""

    panels: list[PanelSchema]


class CabinetLayoutSchema(BaseModel):
    """Packing result for one cabinet of the request."""

    cabinet_number: int
    layout: CuttingLayoutSchema


class OptimizeResponse(BaseModel):
    """Packing results for every cabinet of the request."""

    cabinets: list[CabinetLayoutSchema]
    total_panel_copies: int
    total_placed: int
    total_placed_area: float


class ValidationResponse(BaseModel):
    """Configuration validation result."""

    is_valid: bool
    errors: list[dict[str, Any]] = Field(default_factory=list)
