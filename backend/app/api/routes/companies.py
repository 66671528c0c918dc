"""Company Routes — HTTP surface for CompanyService plus the company's positions.

Invariants:
    - Mutating endpoints answer {"affected_rows": n}
    - A zero affected count becomes 409 PersistenceConflictError
    - BadRequestError / ResourceNotFoundError bubble to the global handler
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_company_service, get_position_service
from app.core.domain_types import ResourceType
from app.core.errors import PersistenceConflictError
from app.schemas.company import CompanyRequest, CompanyResponse
from app.schemas.position import PositionResponse
from app.services.company_service import CompanyService
from app.services.position_service import PositionService

router = APIRouter(prefix="/api/v1/companies", tags=["companies"])


def _affected_or_409(affected: int, operation: str) -> dict:
    if affected == 0:
        raise PersistenceConflictError(ResourceType.COMPANY.value, operation)
    return {"affected_rows": affected}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_company(
    body: CompanyRequest,
    service: CompanyService = Depends(get_company_service),
):
    """Create a company."""
    return _affected_or_409(await service.create_company(body), "insert")


@router.get("", response_model=list[CompanyResponse])
async def list_companies(
    service: CompanyService = Depends(get_company_service),
):
    return await service.get_companies()


@router.get("/{company_id}", response_model=CompanyResponse)
async def get_company(
    company_id: int,
    service: CompanyService = Depends(get_company_service),
):
    return await service.get_company(company_id)


@router.put("/{company_id}")
async def update_company(
    company_id: int,
    body: CompanyRequest,
    service: CompanyService = Depends(get_company_service),
):
    """Replace a company's business fields."""
    return _affected_or_409(
        await service.update_company(company_id, body), "update",
    )


@router.delete("/{company_id}")
async def delete_company(
    company_id: int,
    service: CompanyService = Depends(get_company_service),
):
    """Delete a company and, through the FK cascade, its positions."""
    return _affected_or_409(await service.delete_company(company_id), "delete")


@router.get(
    "/{company_id}/positions", response_model=list[PositionResponse],
)
async def list_company_positions(
    company_id: int,
    service: PositionService = Depends(get_position_service),
):
    """Positions owned by a company. Unknown company → empty list."""
    return await service.get_positions_by_company(company_id)
