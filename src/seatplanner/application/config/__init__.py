"""Configuration schema and loading system for seat plans.

This package provides JSON-based configuration loading and validation for
seat planner projects.

Public API:
    - SeatPlanConfiguration: Root configuration model
    - VenueConfigSchema: Configuration of one venue
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - validate_config: Cross-field validation with advisories
    - config_to_venue / config_to_venues: Convert to domain VenueConfig values

Example:
    >>> from pathlib import Path
    >>> from seatplanner.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("church.json"))
    ...     print(f"{len(config.venues)} venues")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from seatplanner.application.config.adapter import (
    config_to_venue,
    config_to_venues,
    venue_to_config,
    venues_to_config_dict,
)
from seatplanner.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from seatplanner.application.config.schema import (
    SUPPORTED_VERSIONS,
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
from seatplanner.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "AcConfigSchema",
    "AisleConfig",
    "AltarConfig",
    "ChairConfig",
    "ConfigError",
    "ExclusionZoneConfig",
    "FurnitureConfig",
    "RectConfig",
    "SeatPlanConfiguration",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "VenueConfigSchema",
    "WingConfig",
    "config_to_venue",
    "config_to_venues",
    "load_config",
    "load_config_from_dict",
    "validate_config",
    "venue_to_config",
    "venues_to_config_dict",
]
