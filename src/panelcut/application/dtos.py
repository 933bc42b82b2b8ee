"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from panelcut.domain import Cabinet, Material
from panelcut.infrastructure.sheet_packer import CuttingLayout


@dataclass(frozen=True)
class CabinetCutList:
    """Cutting result for one cabinet of a project."""

    cabinet_number: int
    cabinet: Cabinet
    layout: CuttingLayout


@dataclass
class CutListOutput:
    """Output DTO for a cut list optimization run."""

    material: Material
    cut_lists: list[CabinetCutList] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the run completed without input errors."""
        return len(self.errors) == 0

    @property
    def total_panel_copies(self) -> int:
        """Physical copies requested across every cabinet."""
        return sum(entry.layout.total_copies for entry in self.cut_lists)

    @property
    def total_placed(self) -> int:
        """Physical copies placed across every cabinet."""
        return sum(entry.layout.placed_count for entry in self.cut_lists)

    @property
    def total_placed_area(self) -> float:
        """Placed area across every cabinet in square mm."""
        return sum(entry.layout.total_placed_area for entry in self.cut_lists)
