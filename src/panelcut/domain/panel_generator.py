"""Panel derivation rules for a single cabinet."""

from __future__ import annotations

from panelcut.domain.value_objects import Cabinet, EdgeBanding, Panel, PanelType

# Fixed allowances in mm
DOOR_OVERLAY_ALLOWANCE = 40.0
SHELF_WIDTH_CLEARANCE = 4.0
SHELF_DEPTH_CLEARANCE = 20.0

_SIDE_BANDING = (EdgeBanding.TOP, EdgeBanding.FRONT, EdgeBanding.BACK)
_CASE_BANDING = (EdgeBanding.FRONT, EdgeBanding.BACK, EdgeBanding.SIDES)
_DOOR_BANDING = (EdgeBanding.ALL,)


def panel_id(cabinet_number: int, panel_type: PanelType, index: int = 1) -> str:
    """Build a panel id such as ``C1-L1`` or ``C2-S3``."""
    return f"C{cabinet_number}-{panel_type.code}{index}"


class PanelGenerator:
    """Derives the required panels for a cabinet.

    Each rule yields one Panel line; ``quantity`` carries the number of
    physical copies. The door allowance is fixed at 20 mm per side for every
    door style, and shelf clearances are applied without clamping, so narrow
    or shallow cabinets can produce shelves with non-positive dimensions.
    Inputs are not validated here.
    """

    def generate(self, cabinet: Cabinet, cabinet_number: int) -> tuple[Panel, ...]:
        """Generate the ordered panel list for one cabinet.

        Args:
            cabinet: Cabinet design parameters.
            cabinet_number: Caller-assigned number that keeps ids unique
                across the cabinets of a project.

        Returns:
            Side, Top/Bottom, Back and Door panels followed by one Shelf per
            division.
        """
        panels = [
            Panel(
                id=panel_id(cabinet_number, PanelType.SIDE),
                width=cabinet.depth,
                height=cabinet.height,
                quantity=2,
                edge_banding=_SIDE_BANDING,
                type=PanelType.SIDE,
            ),
            Panel(
                id=panel_id(cabinet_number, PanelType.TOP_BOTTOM),
                width=cabinet.width,
                height=cabinet.depth,
                quantity=2,
                edge_banding=_CASE_BANDING,
                type=PanelType.TOP_BOTTOM,
            ),
            Panel(
                id=panel_id(cabinet_number, PanelType.BACK),
                width=cabinet.width,
                height=cabinet.depth,
                quantity=1,
                edge_banding=_CASE_BANDING,
                type=PanelType.BACK,
            ),
            Panel(
                id=panel_id(cabinet_number, PanelType.DOOR),
                width=cabinet.width + DOOR_OVERLAY_ALLOWANCE,
                height=cabinet.height + DOOR_OVERLAY_ALLOWANCE,
                quantity=cabinet.quantity,
                edge_banding=_DOOR_BANDING,
                type=PanelType.DOOR,
            ),
        ]

        for index in range(1, cabinet.divisions + 1):
            panels.append(
                Panel(
                    id=panel_id(cabinet_number, PanelType.SHELF, index),
                    width=cabinet.width - SHELF_WIDTH_CLEARANCE,
                    height=cabinet.depth - SHELF_DEPTH_CLEARANCE,
                    quantity=1,
                    edge_banding=_CASE_BANDING,
                    type=PanelType.SHELF,
                )
            )

        return tuple(panels)


def generate_panels(cabinet: Cabinet, cabinet_number: int = 1) -> tuple[Panel, ...]:
    """Convenience wrapper around ``PanelGenerator().generate``."""
    return PanelGenerator().generate(cabinet, cabinet_number)
