"""Service Wiring — FastAPI dependencies that assemble services per request.

Invariants:
    - One AsyncSession per request, shared by every repository of that request
    - Routes depend on services, never on repositories directly
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.validation import CreateCompanyValidator, PositionValidator
from app.infrastructure.database import get_db
from app.infrastructure.repositories.company_repository import (
    SqlCompanyCommand, SqlCompanyQuery,
)
from app.infrastructure.repositories.position_repository import (
    SqlPositionCommand, SqlPositionQuery,
)
from app.services.company_service import CompanyService
from app.services.position_service import PositionService


def get_company_service(db: AsyncSession = Depends(get_db)) -> CompanyService:
    return CompanyService(
        SqlCompanyQuery(db), SqlCompanyCommand(db), CreateCompanyValidator(),
    )


def get_position_service(db: AsyncSession = Depends(get_db)) -> PositionService:
    return PositionService(
        SqlPositionQuery(db),
        SqlPositionCommand(db),
        PositionValidator(),
        company_query=SqlCompanyQuery(db),
    )
