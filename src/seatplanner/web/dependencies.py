"""FastAPI dependency injection for seat layout services."""

from typing import Annotated

from fastapi import Depends

from seatplanner.application.commands import CalculateProjectCommand


def get_project_command() -> CalculateProjectCommand:
    """Dependency for CalculateProjectCommand."""
    return CalculateProjectCommand()


# Type alias for cleaner endpoint signatures
ProjectCommandDep = Annotated[CalculateProjectCommand, Depends(get_project_command)]
