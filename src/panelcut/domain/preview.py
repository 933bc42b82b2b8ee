"""Front-elevation preview geometry for a cabinet.

This is a read-only projection of a Cabinet into scaled drawing
coordinates. Unlike the panel generator, the door outline here does follow
the door style.
"""

from __future__ import annotations

from dataclasses import dataclass

from panelcut.domain.value_objects import AssemblyType, Cabinet, DoorStyle

DEFAULT_SCALE = 0.25
FACE_FRAME_OFFSET = 10.0

DOOR_OVERLAYS: dict[DoorStyle, float] = {
    DoorStyle.FULL_OVERLAY: 20.0,
    DoorStyle.HALF_OVERLAY: 10.0,
    DoorStyle.INSET: 0.0,
}
DOOR_INSETS: dict[DoorStyle, float] = {
    DoorStyle.FULL_OVERLAY: 0.0,
    DoorStyle.HALF_OVERLAY: 0.0,
    DoorStyle.INSET: 2.0,
}


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in preview coordinates (top-left origin)."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class CabinetPreview:
    """Scaled front view of a cabinet.

    Attributes:
        box: Cabinet carcass outline.
        door: Door outline, grown by the overlay and shrunk by the inset.
        face_frame: Face frame outline, present only for face-frame assembly.
        division_lines: Y coordinates of the evenly spaced shelf lines.
        depth: Scaled depth, shown as a dimension label.
        scale: Preview units per mm.
    """

    box: Rect
    door: Rect
    face_frame: Rect | None
    division_lines: tuple[float, ...]
    depth: float
    scale: float

    @property
    def view_box(self) -> tuple[float, float]:
        """Drawing extent including a 50 unit margin on every side."""
        return (self.box.width + 100, self.box.height + 100)


def project_preview(cabinet: Cabinet, scale: float = DEFAULT_SCALE) -> CabinetPreview:
    """Project a cabinet into preview geometry.

    Args:
        cabinet: Cabinet to draw.
        scale: Preview units per mm.

    Returns:
        A CabinetPreview computed solely from the inputs.
    """
    width = cabinet.width * scale
    height = cabinet.height * scale
    depth = cabinet.depth * scale

    overlay = DOOR_OVERLAYS[cabinet.door_style]
    inset = DOOR_INSETS[cabinet.door_style]
    door = Rect(
        x=inset - overlay,
        y=inset - overlay,
        width=width + overlay * 2 - inset * 2,
        height=height + overlay * 2 - inset * 2,
    )

    face_frame = None
    if cabinet.assembly_type is AssemblyType.FACEFRAME:
        face_frame = Rect(
            x=-FACE_FRAME_OFFSET,
            y=-FACE_FRAME_OFFSET,
            width=width + FACE_FRAME_OFFSET * 2,
            height=height + FACE_FRAME_OFFSET * 2,
        )

    spacing = height / (cabinet.divisions + 1)
    division_lines = tuple(spacing * (i + 1) for i in range(cabinet.divisions))

    return CabinetPreview(
        box=Rect(x=0.0, y=0.0, width=width, height=height),
        door=door,
        face_frame=face_frame,
        division_lines=division_lines,
        depth=depth,
        scale=scale,
    )
