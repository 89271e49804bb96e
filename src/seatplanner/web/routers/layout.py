"""Seat layout calculation endpoints."""

from fastapi import APIRouter

from seatplanner.application.config import config_to_venues, load_config_from_dict
from seatplanner.infrastructure.formatters import project_output_to_dict
from seatplanner.web.dependencies import ProjectCommandDep
from seatplanner.web.exceptions import LayoutCalculationError
from seatplanner.web.schemas.requests import LayoutRequest
from seatplanner.web.schemas.responses import ProjectLayoutSchema

router = APIRouter(prefix="/layout", tags=["layout"])


@router.post("", response_model=ProjectLayoutSchema, response_model_exclude_none=True)
async def calculate_layout(
    request: LayoutRequest,
    command: ProjectCommandDep,
) -> ProjectLayoutSchema:
    """Calculate the seat layout of every venue in a project.

    Args:
        request: Request containing the project configuration.
        command: Injected CalculateProjectCommand.

    Returns:
        Per-venue layouts and the project total.

    Raises:
        ConfigError: If the configuration does not pass schema validation.
    """
    config = load_config_from_dict(request.config)
    output = command.execute(config_to_venues(config), config.project_name)

    if not output.is_valid:
        raise LayoutCalculationError(output.errors)

    data = project_output_to_dict(output, include_chairs=request.include_chairs)
    return ProjectLayoutSchema.model_validate(data)
