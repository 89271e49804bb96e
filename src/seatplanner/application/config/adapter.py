"""Adapter between configuration schemas and domain objects.

Converts the Pydantic configuration models into immutable VenueConfig
values for the layout calculator, and back again for writing starter
configuration files.
"""

from typing import Any

from seatplanner.application.config.schema import (
    AcConfigSchema,
    AisleConfig,
    AltarConfig,
    ChairConfig,
    ExclusionZoneConfig,
    FurnitureConfig,
    RectConfig,
    SeatPlanConfiguration,
    VenueConfigSchema,
    WingConfig,
)
from seatplanner.domain.entities import (
    AcConfig,
    ExclusionZone,
    FurnitureItem,
    VenueConfig,
    Wing,
)
from seatplanner.domain.value_objects import FurnitureType, Rect, WingSide


def _rect_config_to_domain(config: RectConfig | AltarConfig) -> Rect:
    return Rect(config.x_cm, config.y_cm, config.width_cm, config.height_cm)


def config_to_venue(config: VenueConfigSchema, index: int = 0) -> VenueConfig:
    """Convert one venue schema into a domain VenueConfig.

    Args:
        config: The venue configuration.
        index: Position of the venue in the project, used to derive an id
            when none is given.

    Returns:
        Immutable VenueConfig ready for layout calculation.
    """
    return VenueConfig(
        id=config.id or f"venue-{index + 1}",
        name=config.name,
        width_m=config.width_m,
        length_m=config.length_m,
        chair_width_cm=config.chair.width_cm,
        chair_depth_cm=config.chair.depth_cm,
        side_gap_cm=config.chair.side_gap_cm,
        front_gap_cm=config.chair.front_gap_cm,
        aisle_count=config.aisles.count,
        aisle_width_cm=config.aisles.width_cm,
        left_aisle_cm=config.aisles.left_cm,
        right_aisle_cm=config.aisles.right_cm,
        top_aisle_cm=config.aisles.top_cm,
        bottom_aisle_cm=config.aisles.bottom_cm,
        altar=_rect_config_to_domain(config.altar) if config.altar else None,
        exclusion_zones=tuple(
            ExclusionZone(
                id=zone.id, rect=_rect_config_to_domain(zone), label=zone.label
            )
            for zone in config.exclusion_zones
        ),
        furniture=tuple(
            FurnitureItem(
                id=item.id,
                furniture_type=FurnitureType(item.type),
                rect=_rect_config_to_domain(item),
                label=item.label,
            )
            for item in config.furniture
        ),
        wings=tuple(
            Wing(
                id=wing.id,
                side=WingSide(wing.side),
                offset_cm=wing.offset_cm,
                extent_cm=wing.extent_cm,
                length_cm=wing.length_cm,
                label=wing.label,
            )
            for wing in config.wings
        ),
        ac=AcConfig(
            count=config.ac.count,
            width_cm=config.ac.width_cm,
            depth_cm=config.ac.depth_cm,
        ),
    )


def config_to_venues(config: SeatPlanConfiguration) -> list[VenueConfig]:
    """Convert every venue of a project configuration."""
    return [config_to_venue(venue, i) for i, venue in enumerate(config.venues)]


def venue_to_config(venue: VenueConfig) -> VenueConfigSchema:
    """Convert a domain VenueConfig back into its configuration schema.

    Zero-size altars are dropped since they have no effect on the layout.
    """
    altar = None
    if venue.altar is not None and venue.altar.has_area:
        altar = AltarConfig(
            x_cm=venue.altar.x,
            y_cm=venue.altar.y,
            width_cm=venue.altar.width,
            height_cm=venue.altar.height,
        )

    return VenueConfigSchema(
        id=venue.id,
        name=venue.name,
        width_m=venue.width_m,
        length_m=venue.length_m,
        chair=ChairConfig(
            width_cm=venue.chair_width_cm,
            depth_cm=venue.chair_depth_cm,
            side_gap_cm=venue.side_gap_cm,
            front_gap_cm=venue.front_gap_cm,
        ),
        aisles=AisleConfig(
            count=venue.aisle_count,
            width_cm=venue.aisle_width_cm,
            left_cm=venue.left_aisle_cm,
            right_cm=venue.right_aisle_cm,
            top_cm=venue.top_aisle_cm,
            bottom_cm=venue.bottom_aisle_cm,
        ),
        altar=altar,
        exclusion_zones=[
            ExclusionZoneConfig(
                id=zone.id,
                label=zone.label,
                x_cm=zone.rect.x,
                y_cm=zone.rect.y,
                width_cm=zone.rect.width,
                height_cm=zone.rect.height,
            )
            for zone in venue.exclusion_zones
        ],
        furniture=[
            FurnitureConfig(
                id=item.id,
                type=item.furniture_type,
                label=item.label,
                x_cm=item.rect.x,
                y_cm=item.rect.y,
                width_cm=item.rect.width,
                height_cm=item.rect.height,
            )
            for item in venue.furniture
        ],
        wings=[
            WingConfig(
                id=wing.id,
                side=wing.side,
                offset_cm=wing.offset_cm,
                extent_cm=wing.extent_cm,
                length_cm=wing.length_cm,
                label=wing.label,
            )
            for wing in venue.wings
        ],
        ac=AcConfigSchema(
            count=venue.ac.count,
            width_cm=venue.ac.width_cm,
            depth_cm=venue.ac.depth_cm,
        ),
    )


def venues_to_config_dict(
    venues: list[VenueConfig], project_name: str = "seating"
) -> dict[str, Any]:
    """Build a JSON-ready project configuration from domain venues."""
    config = SeatPlanConfiguration(
        project_name=project_name,
        venues=[venue_to_config(venue) for venue in venues],
    )
    return config.model_dump(mode="json")
