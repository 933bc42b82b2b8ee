"""Cut list optimization endpoint."""

from fastapi import APIRouter

from panelcut.web.dependencies import OptimizeCommandDep
from panelcut.web.exceptions import OptimizationError
from panelcut.web.schemas.requests import OptimizeRequest
from panelcut.web.schemas.responses import (
    CabinetLayoutSchema,
    CuttingLayoutSchema,
    OptimizeResponse,
)

router = APIRouter(prefix="/optimize", tags=["optimize"])


@router.post("", response_model=OptimizeResponse)
async def optimize(
    request: OptimizeRequest,
    command: OptimizeCommandDep,
) -> OptimizeResponse:
    """Generate panels for each cabinet and pack them onto the sheet."""
    result = command.execute(
        request.material.to_domain(),
        [c.to_domain() for c in request.cabinets],
    )
    if not result.is_valid:
        raise OptimizationError(result.errors)

    return OptimizeResponse(
        cabinets=[
            CabinetLayoutSchema(
                cabinet_number=entry.cabinet_number,
                layout=CuttingLayoutSchema.from_domain(entry.layout),
            )
            for entry in result.cut_lists
        ],
        total_panel_copies=result.total_panel_copies,
        total_placed=result.total_placed,
        total_placed_area=result.total_placed_area,
    )
