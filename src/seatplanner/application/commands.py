"""Application commands (use cases) for seat layout calculation."""

from __future__ import annotations

import logging

from seatplanner.domain import (
    SeatLayoutCalculator,
    VenueConfig,
    distribute_ac_units,
    venue_bounds,
)

from .dtos import LayoutOutput, ProjectOutput

logger = logging.getLogger(__name__)


class CalculateLayoutCommand:
    """Command to calculate the seat layout of a single venue."""

    def __init__(self, layout_calculator: SeatLayoutCalculator | None = None) -> None:
        self.layout_calculator = layout_calculator or SeatLayoutCalculator()

    def execute(self, venue: VenueConfig) -> LayoutOutput:
        """Calculate chairs, bounds and AC placement for a venue.

        Args:
            venue: The venue to seat.

        Returns:
            LayoutOutput bundling the layout with rendering helpers.
        """
        layout = self.layout_calculator.calculate(venue)
        ac_units = distribute_ac_units(venue.ac, venue.width_cm, venue.length_cm)
        logger.debug(
            f"Calculated '{venue.name}': {layout.total_chairs} chairs, "
            f"{len(ac_units)} AC units"
        )
        return LayoutOutput(
            venue=venue,
            layout=layout,
            bounds=venue_bounds(venue),
            ac_units=ac_units,
        )


class CalculateProjectCommand:
    """Command to calculate every venue of a project."""

    def __init__(self, layout_command: CalculateLayoutCommand | None = None) -> None:
        self.layout_command = layout_command or CalculateLayoutCommand()

    def execute(
        self, venues: list[VenueConfig], project_name: str = "seating"
    ) -> ProjectOutput:
        """Calculate all venues independently.

        Args:
            venues: Venues in display order.
            project_name: Name carried into reports and exports.

        Returns:
            ProjectOutput with one LayoutOutput per venue.
        """
        if not venues:
            return ProjectOutput(
                project_name=project_name, errors=["Project has no venues"]
            )

        outputs = [self.layout_command.execute(venue) for venue in venues]
        result = ProjectOutput(project_name=project_name, venues=outputs)
        logger.info(
            f"Project '{project_name}': {len(outputs)} venues, "
            f"{result.total_chairs} chairs in total"
        )
        return result
