"""Application layer - use cases and orchestration."""

from .commands import OptimizeCutListCommand
from .dtos import CabinetCutList, CutListOutput

__all__ = [
    "CabinetCutList",
    "CutListOutput",
    "OptimizeCutListCommand",
]
