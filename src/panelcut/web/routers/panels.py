"""Panel generation endpoint."""

from fastapi import APIRouter

from panelcut.domain import validate_cabinet
from panelcut.web.dependencies import PanelGeneratorDep
from panelcut.web.schemas.requests import PanelsRequest
from panelcut.web.schemas.responses import PanelSchema, PanelsResponse

router = APIRouter(prefix="/panels", tags=["panels"])


@router.post("", response_model=PanelsResponse)
async def generate_panels(
    request: PanelsRequest,
    generator: PanelGeneratorDep,
) -> PanelsResponse:
    """Derive the panel list for one cabinet.

    Invalid cabinet dimensions are rejected with a 422 response.
    """
    cabinet = validate_cabinet(request.cabinet.to_domain())
    panels = generator.generate(cabinet, request.cabinet_number)
    return PanelsResponse(panels=[PanelSchema.from_domain(p) for p in panels])
