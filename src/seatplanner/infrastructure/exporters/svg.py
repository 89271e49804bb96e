"""SVG exporter for seat plans.

Wraps SeatPlanRenderer to write one drawing with every venue of a project.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from seatplanner.infrastructure.exporters.base import ExporterRegistry
from seatplanner.infrastructure.seat_plan_renderer import PIXELS_PER_CM, SeatPlanRenderer

if TYPE_CHECKING:
    from seatplanner.application.dtos import ProjectOutput


logger = logging.getLogger(__name__)


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for printable seat plans.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"
    media_type: ClassVar[str] = "image/svg+xml"

    def __init__(self, scale: float = PIXELS_PER_CM, show_excluded: bool = True) -> None:
        """Initialize the SVG exporter.

        Args:
            scale: Pixels per centimeter (default 1.5).
            show_excluded: Whether to outline excluded chair slots.
        """
        self.renderer = SeatPlanRenderer(scale=scale, show_excluded=show_excluded)

    def export(self, output: ProjectOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported SVG to {path}")

    def export_string(self, output: ProjectOutput) -> str:
        return self.renderer.render_project(output)

    def export_individual_venues(self, output: ProjectOutput, base_path: Path) -> list[Path]:
        """Export one SVG file per venue.

        Args:
            output: The project output to export.
            base_path: Base path; files are named {stem}_{venue_id}.svg.

        Returns:
            List of paths to the created files.
        """
        created_files: list[Path] = []
        for venue_output in output.venues:
            safe_id = venue_output.venue.id.replace(" ", "_").replace("/", "-")
            file_path = base_path.parent / f"{base_path.stem}_{safe_id}.svg"
            file_path.write_text(self.renderer.render_venue(venue_output), encoding="utf-8")
            created_files.append(file_path)
        logger.info(f"Exported {len(created_files)} venue SVGs next to {base_path}")
        return created_files
