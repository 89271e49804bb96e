"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from seatplanner.application.config import config_to_venues, load_config_from_dict
from seatplanner.infrastructure.exporters import ExporterRegistry
from seatplanner.web.dependencies import ProjectCommandDep
from seatplanner.web.exceptions import LayoutCalculationError, VenueNotFoundError
from seatplanner.web.schemas.requests import ExportRequest
from seatplanner.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
async def export_project(
    format_name: str,
    request: ExportRequest,
    command: ProjectCommandDep,
) -> Response:
    """Export a project to any registered format.

    Args:
        format_name: Export format name.
        request: Export request with the project configuration.
        command: Injected CalculateProjectCommand.

    Returns:
        Exported content as an attachment.

    Raises:
        UnsupportedFormatError: If format is not registered.
        VenueNotFoundError: If venue_id names no venue of the project.
    """
    exporter_class = ExporterRegistry.get(format_name)

    config = load_config_from_dict(request.config)
    venues = config_to_venues(config)
    if request.venue_id is not None:
        selected = [venue for venue in venues if venue.id == request.venue_id]
        if not selected:
            raise VenueNotFoundError(request.venue_id, [venue.id for venue in venues])
        venues = selected

    output = command.execute(venues, config.project_name)
    if not output.is_valid:
        raise LayoutCalculationError(output.errors)

    exporter = exporter_class()
    content = exporter.export_string(output)
    filename = f"{config.project_name}_{format_name}.{exporter.file_extension}"

    return Response(
        content=content,
        media_type=exporter.media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
