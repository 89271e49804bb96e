"""Application layer - use cases and orchestration."""

from .commands import CalculateLayoutCommand, CalculateProjectCommand
from .dtos import LayoutOutput, ProjectOutput

__all__ = [
    "CalculateLayoutCommand",
    "CalculateProjectCommand",
    "LayoutOutput",
    "ProjectOutput",
]
