"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from seatplanner.application.config import ConfigError
from seatplanner.infrastructure.exporters import UnsupportedFormatError


class LayoutCalculationError(Exception):
    """Raised when a project cannot be calculated."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Calculation failed: {errors}")


class VenueNotFoundError(Exception):
    """Raised when a request names a venue the project does not have."""

    def __init__(self, venue_id: str, available: list[str]) -> None:
        self.venue_id = venue_id
        self.available = available
        super().__init__(f"Venue not found: {venue_id}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(LayoutCalculationError)
    async def calculation_error_handler(
        request: Request, exc: LayoutCalculationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Layout calculation failed",
                "error_type": "calculation",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(VenueNotFoundError)
    async def venue_not_found_handler(
        request: Request, exc: VenueNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Venue not found: {exc.venue_id}",
                "error_type": "not_found",
                "details": {"available": exc.available},
            },
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unsupported_format",
                "details": {"format": exc.format_name, "available": exc.available},
            },
        )
