"""Value objects for the panel cut domain.

All dimensions are in millimetres. Cabinet and Panel deliberately accept
degenerate values: validation happens at the input boundary (see
``panelcut.domain.validation``), not in the value objects themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MaterialType(str, Enum):
    """Types of sheet stock."""

    MDF = "mdf"
    PARTICLEBOARD = "particleboard"
    PLYWOOD = "plywood"


class AssemblyType(str, Enum):
    """Cabinet carcass construction style."""

    FRAMELESS = "frameless"
    FACEFRAME = "faceframe"


class DoorStyle(str, Enum):
    """How the door sits relative to the cabinet box."""

    FULL_OVERLAY = "full-overlay"
    HALF_OVERLAY = "half-overlay"
    INSET = "inset"


class EdgeBanding(str, Enum):
    """Edge tags that receive banding on a panel."""

    TOP = "top"
    FRONT = "front"
    BACK = "back"
    SIDES = "sides"
    ALL = "all"


class PanelType(str, Enum):
    """Human-readable panel categories, with their id category codes."""

    SIDE = "Side Panel"
    TOP_BOTTOM = "Top/Bottom Panel"
    BACK = "Back Panel"
    DOOR = "Door Panel"
    SHELF = "Shelf"

    @property
    def code(self) -> str:
        """Single-letter category code used in panel ids."""
        return _PANEL_CODES[self]


_PANEL_CODES: dict[PanelType, str] = {
    PanelType.SIDE: "L",
    PanelType.TOP_BOTTOM: "T",
    PanelType.BACK: "B",
    PanelType.DOOR: "D",
    PanelType.SHELF: "S",
}


@dataclass(frozen=True)
class Material:
    """Stock sheet descriptor.

    Attributes:
        type: Sheet material.
        thickness: Sheet thickness in mm.
        width: Sheet width in mm.
        height: Sheet height in mm.
        kerf: Blade width in mm. Carried as data only; placement math
            does not subtract it.
    """

    type: MaterialType = MaterialType.MDF
    thickness: float = 18.0
    width: float = 2440.0
    height: float = 1220.0
    kerf: float = 3.0

    @property
    def area(self) -> float:
        """Sheet area in square mm."""
        return self.width * self.height


@dataclass(frozen=True)
class Cabinet:
    """Parametric cabinet design.

    ``quantity`` is the number of identical cabinets to build. Only the door
    count follows it; structural panels are always listed for one carcass.
    """

    height: float = 720.0
    width: float = 600.0
    depth: float = 580.0
    divisions: int = 1
    drawer_spacing: float = 100.0
    assembly_type: AssemblyType = AssemblyType.FRAMELESS
    door_style: DoorStyle = DoorStyle.FULL_OVERLAY
    quantity: int = 1


@dataclass(frozen=True)
class Panel:
    """A cut-list line item.

    One Panel stands for ``quantity`` identical physical copies. Width and
    height may be zero or negative for degenerate cabinets.
    """

    id: str
    width: float
    height: float
    quantity: int
    edge_banding: tuple[EdgeBanding, ...]
    type: PanelType

    @property
    def unit_area(self) -> float:
        """Area of a single physical copy in square mm."""
        return self.width * self.height

    @property
    def area(self) -> float:
        """Total area for all copies of this panel in square mm."""
        return self.width * self.height * self.quantity
