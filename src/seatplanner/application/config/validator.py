"""Validation structures and seating advisory checks.

Schema validation (types, ranges, unknown fields) happens while loading.
This module adds the advisory checks that need the venue geometry: aisles
that swallow the hall, objects placed outside the hall, and wings running
past the end of their edge.
"""

from dataclasses import dataclass, field
from typing import Any

from seatplanner.application.config.adapter import config_to_venue
from seatplanner.application.config.loader import ConfigError
from seatplanner.application.config.schema import SeatPlanConfiguration
from seatplanner.domain.entities import VenueConfig
from seatplanner.domain.services import (
    partition_blocks,
    resolve_wing_rect,
    seatable_width,
    wall_assignment,
)
from seatplanner.domain.value_objects import Rect, Wall, WingSide


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "venues[0].wings[1].id")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self

    @classmethod
    def from_config_error(cls, error: ConfigError) -> "ValidationResult":
        """Report a configuration that failed to load as validation errors."""
        result = cls()
        if error.error_type != "validation":
            return result.add_error(path=str(error.path or ""), message=error.message)
        for detail in error.details:
            value = detail.get("value")
            if isinstance(value, (dict, list)):
                value = None
            result.add_error(path=detail["path"], message=detail["message"], value=value)
        return result


def check_seating_advisories(venue: VenueConfig, path: str) -> ValidationResult:
    """Warn about venue settings that produce few or no chairs."""
    result = ValidationResult()

    available = seatable_width(venue)
    if available <= 0:
        result.add_warning(
            path=f"{path}.aisles",
            message=(
                f"Aisles take {venue.width_cm - available:.0f}cm of a "
                f"{venue.width_cm:.0f}cm wide hall; no chairs will be placed"
            ),
            suggestion="Reduce the aisle count or aisle widths",
        )
        return result

    blocks = partition_blocks(venue)
    block_width = blocks[0].rect.width
    if block_width < venue.cell_width_cm:
        result.add_warning(
            path=f"{path}.aisles",
            message=(
                f"Blocks are {block_width:.0f}cm wide, narrower than one chair "
                f"column ({venue.cell_width_cm:.0f}cm)"
            ),
            suggestion="Use fewer center aisles",
        )

    if venue.seating_height_cm < venue.cell_depth_cm:
        result.add_warning(
            path=f"{path}.aisles",
            message="Front and back aisles leave no room for a row of chairs",
        )

    return result


def _outside_hall(rect: Rect, hall: Rect) -> bool:
    return not rect.overlaps(hall)


def check_placement_advisories(venue: VenueConfig, path: str) -> ValidationResult:
    """Warn about blockers placed outside the hall and overhanging wings."""
    result = ValidationResult()
    hall = venue.main_hall

    if venue.altar is not None and venue.altar.has_area:
        if _outside_hall(venue.altar, hall):
            result.add_warning(
                path=f"{path}.altar",
                message="Altar lies entirely outside the main hall",
            )

    for i, zone in enumerate(venue.exclusion_zones):
        if _outside_hall(zone.rect, hall):
            result.add_warning(
                path=f"{path}.exclusion_zones[{i}]",
                message=f"Exclusion zone '{zone.id}' lies entirely outside the main hall",
                suggestion="Zones only affect seats they overlap, including wing seats",
            )

    for i, item in enumerate(venue.furniture):
        if _outside_hall(item.rect, hall):
            result.add_warning(
                path=f"{path}.furniture[{i}]",
                message=f"Furniture '{item.id}' lies entirely outside the main hall",
            )

    for i, wing in enumerate(venue.wings):
        rect = resolve_wing_rect(wing, venue.width_cm, venue.length_cm)
        if wing.side in (WingSide.LEFT, WingSide.RIGHT):
            edge_length = venue.length_cm
        else:
            edge_length = venue.width_cm
        if wing.offset_cm < 0 or wing.offset_cm + wing.length_cm > edge_length:
            result.add_warning(
                path=f"{path}.wings[{i}]",
                message=(
                    f"Wing '{wing.id}' runs past the end of the {wing.side.value} "
                    f"edge ({edge_length:.0f}cm)"
                ),
            )
        if not rect.has_area:
            result.add_warning(
                path=f"{path}.wings[{i}]",
                message=f"Wing '{wing.id}' has no area and will hold no chairs",
            )

    counts = wall_assignment(venue.ac.count)
    for wall, k in counts.items():
        if k == 0:
            continue
        wall_length = venue.width_cm if wall in (Wall.TOP, Wall.BOTTOM) else venue.length_cm
        if k * venue.ac.width_cm > wall_length:
            result.add_warning(
                path=f"{path}.ac",
                message=(
                    f"{k} AC units ({venue.ac.width_cm:.0f}cm each) do not fit "
                    f"on the {wall.value} wall ({wall_length:.0f}cm)"
                ),
            )

    return result


def validate_config(config: SeatPlanConfiguration) -> ValidationResult:
    """Run every cross-field check on a loaded configuration.

    Args:
        config: A configuration that already passed schema validation.

    Returns:
        ValidationResult containing errors and warnings for all venues.
    """
    result = ValidationResult()
    for i, venue_config in enumerate(config.venues):
        path = f"venues[{i}]"
        venue = config_to_venue(venue_config, i)
        result.merge(check_seating_advisories(venue, path))
        result.merge(check_placement_advisories(venue, path))
    return result
