"""FastAPI dependency injection for cut list services."""

from typing import Annotated

from fastapi import Depends

from panelcut.application import OptimizeCutListCommand
from panelcut.domain import PanelGenerator


def get_optimize_command() -> OptimizeCutListCommand:
    """Dependency for OptimizeCutListCommand."""
    return OptimizeCutListCommand()


def get_panel_generator() -> PanelGenerator:
    """Dependency for PanelGenerator."""
    return PanelGenerator()


OptimizeCommandDep = Annotated[OptimizeCutListCommand, Depends(get_optimize_command)]
PanelGeneratorDep = Annotated[PanelGenerator, Depends(get_panel_generator)]
