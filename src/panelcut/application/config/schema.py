"""Pydantic models for project configuration files.

Field constraints mirror the input boundary rules of the domain, so a
configuration that loads successfully always converts to valid Material and
Cabinet values.
"""

from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from panelcut.domain.validation import MAX_DIVISIONS, MAX_QUANTITY
from panelcut.domain.value_objects import AssemblyType, DoorStyle, MaterialType

# Supported schema versions for configuration files
# Version 1.0: Material plus a list of cabinets
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class OutputFormat(str, Enum):
    """Report formats understood by the CLI."""

    ALL = "all"
    TEXT = "text"
    JSON = "json"
    SVG = "svg"


class MaterialConfig(BaseModel):
    """Stock sheet configuration.

    Attributes:
        type: Sheet material (mdf, particleboard, plywood)
        thickness: Sheet thickness in mm
        width: Sheet width in mm
        height: Sheet height in mm
        kerf: Blade width in mm
    """

    model_config = ConfigDict(extra="forbid")

    type: MaterialType = MaterialType.MDF
    thickness: float = Field(default=18.0, gt=0)
    width: float = Field(default=2440.0, gt=0)
    height: float = Field(default=1220.0, gt=0)
    kerf: float = Field(default=3.0, gt=0)


class CabinetConfig(BaseModel):
    """Configuration for one cabinet design.

    Attributes:
        height: Cabinet height in mm
        width: Cabinet width in mm
        depth: Cabinet depth in mm
        divisions: Number of internal shelves
        drawer_spacing: Drawer spacing in mm
        assembly_type: frameless or faceframe
        door_style: full-overlay, half-overlay or inset
        quantity: Number of identical cabinets to build
    """

    model_config = ConfigDict(extra="forbid")

    height: float = Field(..., gt=0)
    width: float = Field(..., gt=0)
    depth: float = Field(..., gt=0)
    divisions: int = Field(default=1, ge=0, le=MAX_DIVISIONS)
    drawer_spacing: float = Field(default=100.0, ge=0)
    assembly_type: AssemblyType = AssemblyType.FRAMELESS
    door_style: DoorStyle = DoorStyle.FULL_OVERLAY
    quantity: int = Field(default=1, ge=1, le=MAX_QUANTITY)


class OutputConfig(BaseModel):
    """Report output configuration.

    Attributes:
        format: Report format to produce
        output_dir: Directory for written reports (optional)
    """

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = OutputFormat.ALL
    output_dir: str | None = None


class ProjectConfiguration(BaseModel):
    """Root configuration model for a cut list project.

    Example:
        >>> config = ProjectConfiguration(
        ...     schema_version="1.0",
        ...     cabinets=[CabinetConfig(height=720, width=600, depth=580)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    name: str = Field(default="project", min_length=1)
    material: MaterialConfig = Field(default_factory=MaterialConfig)
    cabinets: list[CabinetConfig] = Field(..., min_length=1)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept listed versions and newer minor versions of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
