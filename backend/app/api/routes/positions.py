"""Position Routes — HTTP surface for PositionService.

Invariants:
    - Non-positive ids are rejected by the service (400), not by path constraints
    - A zero affected count becomes 409 PersistenceConflictError
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_position_service
from app.core.domain_types import ResourceType
from app.core.errors import PersistenceConflictError
from app.schemas.position import PositionRequest, PositionResponse
from app.services.position_service import PositionService

router = APIRouter(prefix="/api/v1/positions", tags=["positions"])


def _affected_or_409(affected: int, operation: str) -> dict:
    if affected == 0:
        raise PersistenceConflictError(ResourceType.POSITION.value, operation)
    return {"affected_rows": affected}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_position(
    body: PositionRequest,
    service: PositionService = Depends(get_position_service),
):
    """Create a position under an existing company."""
    return _affected_or_409(await service.create_position(body), "insert")


@router.get("/{position_id}", response_model=PositionResponse)
async def get_position(
    position_id: int,
    service: PositionService = Depends(get_position_service),
):
    return await service.get_position(position_id)


@router.put("/{position_id}")
async def update_position(
    position_id: int,
    body: PositionRequest,
    service: PositionService = Depends(get_position_service),
):
    return _affected_or_409(
        await service.update_position(position_id, body), "update",
    )


@router.delete("/{position_id}")
async def delete_position(
    position_id: int,
    service: PositionService = Depends(get_position_service),
):
    return _affected_or_409(await service.delete_position(position_id), "delete")
