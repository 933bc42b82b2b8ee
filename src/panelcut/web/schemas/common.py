"""Shared Pydantic schemas for the REST API."""

from pydantic import BaseModel, Field

from panelcut.domain import (
    MAX_DIVISIONS,
    MAX_QUANTITY,
    AssemblyType,
    Cabinet,
    DoorStyle,
    Material,
    MaterialType,
)


class MaterialSchema(BaseModel):
    """Stock sheet parameters.

    Positivity is checked by the domain boundary validation so that the
    API reports the same ``InvalidDimension`` messages as the CLI.
    """

    type: MaterialType = Field(default=MaterialType.MDF, description="Sheet material")
    thickness: float = Field(default=18.0, description="Thickness in mm")
    width: float = Field(default=2440.0, description="Sheet width in mm")
    height: float = Field(default=1220.0, description="Sheet height in mm")
    kerf: float = Field(default=3.0, description="Blade kerf in mm")

    def to_domain(self) -> Material:
        return Material(
            type=self.type,
            thickness=self.thickness,
            width=self.width,
            height=self.height,
            kerf=self.kerf,
        )


class CabinetSchema(BaseModel):
    """Cabinet design parameters."""

    height: float = Field(default=720.0, description="Height in mm")
    width: float = Field(default=600.0, description="Width in mm")
    depth: float = Field(default=580.0, description="Depth in mm")
    divisions: int = Field(
        default=1, ge=0, le=MAX_DIVISIONS, description="Internal shelf count"
    )
    drawer_spacing: float = Field(default=100.0, description="Drawer spacing in mm")
    assembly_type: AssemblyType = AssemblyType.FRAMELESS
    door_style: DoorStyle = DoorStyle.FULL_OVERLAY
    quantity: int = Field(
        default=1, ge=1, le=MAX_QUANTITY, description="Number of identical cabinets"
    )

    def to_domain(self) -> Cabinet:
        return Cabinet(
            height=self.height,
            width=self.width,
            depth=self.depth,
            divisions=self.divisions,
            drawer_spacing=self.drawer_spacing,
            assembly_type=self.assembly_type,
            door_style=self.door_style,
            quantity=self.quantity,
        )
