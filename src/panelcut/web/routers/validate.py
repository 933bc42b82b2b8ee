"""Configuration validation endpoint."""

from fastapi import APIRouter

from panelcut.application.config import ConfigError, load_config_from_dict
from panelcut.web.schemas.requests import ConfigValidateRequest
from panelcut.web.schemas.responses import ValidationResponse

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResponse)
async def validate_config(request: ConfigValidateRequest) -> ValidationResponse:
    """Validate a project configuration without running the optimizer."""
    try:
        load_config_from_dict(request.config)
    except ConfigError as e:
        errors = [
            {"path": d["path"], "message": d["message"]} for d in e.details
        ] or [{"path": "", "message": e.message}]
        return ValidationResponse(is_valid=False, errors=errors)

    return ValidationResponse(is_valid=True)
