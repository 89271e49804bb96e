"""Configuration validation endpoints."""

from fastapi import APIRouter

from seatplanner.application.config import (
    ConfigError,
    ValidationResult,
    load_config_from_dict,
    validate_config,
)
from seatplanner.web.schemas.requests import ConfigValidateRequest
from seatplanner.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a project configuration without calculating it.

    Schema errors are reported in the result rather than as an error
    response, so clients get one shape for every outcome.

    Args:
        request: Request containing configuration to validate.

    Returns:
        Validation result with errors and warnings.
    """
    try:
        result = validate_config(load_config_from_dict(request.config))
    except ConfigError as e:
        result = ValidationResult.from_config_error(e)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
