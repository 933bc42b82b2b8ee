"""Application commands (use cases) for cut list optimization."""

from __future__ import annotations

import logging
from typing import Sequence

from panelcut.domain import (
    Cabinet,
    InvalidDimension,
    Material,
    PanelGenerator,
    validate_cabinet,
    validate_material,
)
from panelcut.infrastructure.sheet_packer import SheetPacker

from .dtos import CabinetCutList, CutListOutput

logger = logging.getLogger(__name__)


class OptimizeCutListCommand:
    """Command to derive panels for each cabinet and pack them onto a sheet.

    Each cabinet is packed onto its own sheet of the project material.
    Cabinets are numbered from 1 in input order; the number prefixes the
    ids of that cabinet's panels.
    """

    def __init__(
        self,
        panel_generator: PanelGenerator | None = None,
        sheet_packer: SheetPacker | None = None,
    ) -> None:
        self.panel_generator = panel_generator or PanelGenerator()
        self.sheet_packer = sheet_packer or SheetPacker()

    def execute(
        self, material: Material, cabinets: Sequence[Cabinet]
    ) -> CutListOutput:
        """Execute the optimization.

        Args:
            material: Stock sheet shared by every cabinet.
            cabinets: Cabinets of the project, in numbering order.

        Returns:
            CutListOutput with one CabinetCutList per cabinet, or with
            ``errors`` populated if any input failed validation.
        """
        errors = self.validate(material, cabinets)
        if errors:
            logger.debug("Rejected input with %d error(s)", len(errors))
            return CutListOutput(material=material, errors=errors)

        cut_lists: list[CabinetCutList] = []
        for number, cabinet in enumerate(cabinets, start=1):
            panels = self.panel_generator.generate(cabinet, number)
            layout = self.sheet_packer.pack(panels, material.width, material.height)
            if layout.has_overflow:
                logger.warning(
                    "Cabinet %d: only %d of %d panels fit on a %sx%s sheet",
                    number,
                    layout.placed_count,
                    layout.total_copies,
                    material.width,
                    material.height,
                )
            cut_lists.append(
                CabinetCutList(cabinet_number=number, cabinet=cabinet, layout=layout)
            )

        return CutListOutput(material=material, cut_lists=cut_lists)

    def validate(self, material: Material, cabinets: Sequence[Cabinet]) -> list[str]:
        """Collect boundary validation errors for all inputs."""
        errors: list[str] = []
        try:
            validate_material(material)
        except InvalidDimension as e:
            errors.append(str(e))

        if not cabinets:
            errors.append("At least one cabinet is required")

        for number, cabinet in enumerate(cabinets, start=1):
            try:
                validate_cabinet(cabinet)
            except InvalidDimension as e:
                errors.append(f"Cabinet {number}: {e}")

        return errors
