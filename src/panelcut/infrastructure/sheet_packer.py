"""Sheet packing data models and the shelf-row placement algorithm.

This module provides data structures for panel placements and cutting
layouts, and the ``SheetPacker`` that fills a single stock sheet using
next-fit shelf packing.

All dataclasses are frozen (immutable) so results can be shared with
read-only consumers such as formatters and renderers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from panelcut.domain.value_objects import Panel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Placement:
    """One physical copy of a panel positioned on the sheet.

    Coordinates use a top-left origin in the same units as the sheet.
    Degenerate panels can end up at negative coordinates, so positions are
    not range-checked.

    Attributes:
        panel: The panel line this copy belongs to.
        x: Horizontal offset from the left sheet edge.
        y: Vertical offset from the top sheet edge.
    """

    panel: Panel
    x: float
    y: float

    @property
    def right_edge(self) -> float:
        """X coordinate of the placement's right edge."""
        return self.x + self.panel.width

    @property
    def bottom_edge(self) -> float:
        """Y coordinate of the placement's bottom edge."""
        return self.y + self.panel.height


@dataclass(frozen=True)
class CuttingLayout:
    """Result of packing a panel list onto one sheet.

    Metrics are reported exactly as computed. Pathological inputs can push
    utilization above 100 or waste below 0; nothing is clamped.

    Attributes:
        panels: Panels sorted by total area, largest first.
        placements: Placed physical copies in placement order.
        utilization_percent: Placed area as a percentage of the sheet area.
        waste_area: Sheet area minus placed area.
        sheet_width: Sheet width used for the pass.
        sheet_height: Sheet height used for the pass.
    """

    panels: tuple[Panel, ...]
    placements: tuple[Placement, ...]
    utilization_percent: float
    waste_area: float
    sheet_width: float
    sheet_height: float

    @property
    def sheet_area(self) -> float:
        """Area of the stock sheet."""
        return self.sheet_width * self.sheet_height

    @property
    def total_placed_area(self) -> float:
        """Sum of the areas of every placed copy."""
        return sum(p.panel.unit_area for p in self.placements)

    @property
    def total_copies(self) -> int:
        """Number of physical copies requested across all panels."""
        return sum(panel.quantity for panel in self.panels)

    @property
    def placed_count(self) -> int:
        """Number of physical copies that were placed."""
        return len(self.placements)

    @property
    def has_overflow(self) -> bool:
        """True if the pass stopped before placing every copy."""
        return self.placed_count < self.total_copies


def sort_by_area(panels: Sequence[Panel]) -> list[Panel]:
    """Sort panels by total area (``width * height * quantity``), largest first.

    The sort is stable so equal-area panels keep their input order.
    """
    return sorted(panels, key=lambda p: p.area, reverse=True)


class SheetPacker:
    """Greedy next-fit shelf packer for a single sheet.

    Copies are laid left to right. When a copy would cross the right edge the
    cursor wraps to a new row below the tallest copy of the current row. When
    a copy would cross the bottom edge the whole pass stops: the remaining
    copies of that panel and every later panel are left unplaced, even if a
    smaller one would still fit. Comparisons are strict, so a copy that ends
    exactly on an edge still fits.

    There is no rotation and no backtracking.
    """

    def pack(
        self,
        panels: Sequence[Panel],
        sheet_width: float,
        sheet_height: float,
    ) -> CuttingLayout:
        """Pack panels onto one sheet.

        Args:
            panels: Panels to place; each contributes ``quantity`` copies.
            sheet_width: Sheet width, greater than zero.
            sheet_height: Sheet height, greater than zero.

        Returns:
            CuttingLayout with the sorted panels, placements and metrics.
        """
        sorted_panels = sort_by_area(panels)
        placements = self._place(sorted_panels, sheet_width, sheet_height)

        total_placed_area = sum(p.panel.unit_area for p in placements)
        sheet_area = sheet_width * sheet_height
        utilization = total_placed_area / sheet_area * 100
        waste_area = sheet_area - total_placed_area

        logger.debug(
            "Placed %d copies of %d panels on %sx%s sheet, %.2f%% utilization",
            len(placements),
            len(sorted_panels),
            sheet_width,
            sheet_height,
            utilization,
        )

        return CuttingLayout(
            panels=tuple(sorted_panels),
            placements=tuple(placements),
            utilization_percent=utilization,
            waste_area=waste_area,
            sheet_width=sheet_width,
            sheet_height=sheet_height,
        )

    def _place(
        self,
        sorted_panels: list[Panel],
        sheet_width: float,
        sheet_height: float,
    ) -> list[Placement]:
        """Run the single placement pass over already-sorted panels."""
        placements: list[Placement] = []
        current_x = 0.0
        current_y = 0.0
        max_row_height = 0.0

        for panel in sorted_panels:
            for _ in range(panel.quantity):
                if current_x + panel.width > sheet_width:
                    current_x = 0.0
                    current_y += max_row_height
                    max_row_height = 0.0

                if current_y + panel.height > sheet_height:
                    logger.info(
                        "Sheet full at panel %s (%sx%s); stopping after %d copies",
                        panel.id,
                        panel.width,
                        panel.height,
                        len(placements),
                    )
                    return placements

                placements.append(Placement(panel=panel, x=current_x, y=current_y))
                current_x += panel.width
                max_row_height = max(max_row_height, panel.height)

        return placements


def pack_panels(
    panels: Sequence[Panel], sheet_width: float, sheet_height: float
) -> CuttingLayout:
    """Convenience wrapper around ``SheetPacker().pack``."""
    return SheetPacker().pack(panels, sheet_width, sheet_height)
