"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from panelcut.web.schemas.common import CabinetSchema, MaterialSchema


class PanelsRequest(BaseModel):
    """Request for the panel list of one cabinet."""

    cabinet: CabinetSchema = Field(default_factory=CabinetSchema)
    cabinet_number: int = Field(default=1, ge=1, description="Number used in panel ids")


class OptimizeRequest(BaseModel):
    """Request for packing one or more cabinets onto the stock sheet."""

    material: MaterialSchema = Field(default_factory=MaterialSchema)
    cabinets: list[CabinetSchema] = Field(..., min_length=1)


class ConfigValidateRequest(BaseModel):
    """Request for validating a project configuration."""

    config: dict[str, Any] = Field(..., description="Project configuration JSON")
