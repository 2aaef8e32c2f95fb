"""Case Routes - CRUD and status update for /api/cases.

Invariants:
    - Blank or missing title/status rejected by CaseCreate / StatusUpdate (400) before the service runs
    - Unknown id → ResourceNotFoundError → 404 via the global handler
    - DELETE returns 204 with an empty body
"""

from fastapi import APIRouter, Depends, Response, status

from casework.api.dependencies import get_case_service
from casework.core.entities import Case
from casework.core.errors import ResourceNotFoundError
from casework.schemas.case import CaseCreate, CaseResponse
from casework.schemas.common import StatusUpdate
from casework.services.entity_service import EntityService

router = APIRouter(prefix="/api/cases", tags=["cases"])


@router.post(
    "", response_model=CaseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_case(
    body: CaseCreate,
    service: EntityService[Case] = Depends(get_case_service),
):
    """Create a case."""
    case = await service.create(body.to_entity())
    return CaseResponse.model_validate(case)


@router.get("", response_model=list[CaseResponse])
async def list_cases(
    service: EntityService[Case] = Depends(get_case_service),
):
    """List every case (empty list when there are none)."""
    return [CaseResponse.model_validate(c) for c in await service.get_all()]


@router.get("/{case_id}", response_model=CaseResponse)
async def get_case(
    case_id: int,
    service: EntityService[Case] = Depends(get_case_service),
):
    case = await service.get_by_id(case_id)
    if case is None:
        raise ResourceNotFoundError("Case", str(case_id))
    return CaseResponse.model_validate(case)


@router.put("/{case_id}/status", response_model=CaseResponse)
async def update_case_status(
    case_id: int,
    body: StatusUpdate,
    service: EntityService[Case] = Depends(get_case_service),
):
    """Replace the case's status."""
    case = await service.update_status(case_id, body.status)
    if case is None:
        raise ResourceNotFoundError("Case", str(case_id))
    return CaseResponse.model_validate(case)


@router.delete(
    "/{case_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_case(
    case_id: int,
    service: EntityService[Case] = Depends(get_case_service),
):
    if not await service.delete(case_id):
        raise ResourceNotFoundError("Case", str(case_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
