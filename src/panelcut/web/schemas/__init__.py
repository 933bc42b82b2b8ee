"""Pydantic schemas for REST API requests and responses."""

from panelcut.web.schemas.common import CabinetSchema, MaterialSchema
from panelcut.web.schemas.requests import (
    ConfigValidateRequest,
    OptimizeRequest,
    PanelsRequest,
)
from panelcut.web.schemas.responses import (
    CabinetLayoutSchema,
    CuttingLayoutSchema,
    OptimizeResponse,
    PanelSchema,
    PanelsResponse,
    PlacementSchema,
    ValidationResponse,
)

__all__ = [
    "CabinetLayoutSchema",
    "CabinetSchema",
    "ConfigValidateRequest",
    "CuttingLayoutSchema",
    "MaterialSchema",
    "OptimizeRequest",
    "OptimizeResponse",
    "PanelSchema",
    "PanelsRequest",
    "PanelsResponse",
    "PlacementSchema",
    "ValidationResponse",
]
