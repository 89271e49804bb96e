"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from seatplanner.domain import AcPlacement, LayoutResult, Rect, VenueConfig


@dataclass
class LayoutOutput:
    """Output DTO for one venue.

    Attributes:
        venue: The venue the layout was calculated for.
        layout: Chair slots and area metrics.
        bounds: Bounding box of the hall and its wings, for viewports.
        ac_units: AC units placed around the hall.
    """

    venue: VenueConfig
    layout: LayoutResult
    bounds: Rect
    ac_units: list[AcPlacement] = field(default_factory=list)

    @property
    def total_chairs(self) -> int:
        return self.layout.total_chairs


@dataclass
class ProjectOutput:
    """Output DTO for a project with several venues.

    Attributes:
        project_name: Name used in reports and exported file names.
        venues: Per-venue outputs in configuration order.
        errors: Error messages if the calculation failed.
    """

    project_name: str
    venues: list[LayoutOutput] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def total_chairs(self) -> int:
        """Usable chairs across every venue."""
        return sum(output.total_chairs for output in self.venues)

    def get_venue(self, venue_id: str) -> LayoutOutput | None:
        for output in self.venues:
            if output.venue.id == venue_id:
                return output
        return None
