"""Pydantic schemas for the REST API."""

from seatplanner.web.schemas.requests import (
    ConfigValidateRequest,
    ExportRequest,
    LayoutRequest,
)
from seatplanner.web.schemas.responses import (
    AcUnitSchema,
    BlockSchema,
    ChairSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    LayoutSummarySchema,
    ProjectLayoutSchema,
    RectSchema,
    RegionSchema,
    ValidationResultSchema,
    VenueInfoSchema,
    VenueLayoutSchema,
    WingSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "ExportRequest",
    "LayoutRequest",
    # Responses
    "AcUnitSchema",
    "BlockSchema",
    "ChairSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "LayoutSummarySchema",
    "ProjectLayoutSchema",
    "RectSchema",
    "RegionSchema",
    "ValidationResultSchema",
    "VenueInfoSchema",
    "VenueLayoutSchema",
    "WingSchema",
]
