"""Company Repositories — async SQLAlchemy query/command pair for companies.

Invariants:
    - get_by_id returns None when absent (never raises)
    - get_all yields rows in primary-key order
    - insert returns 0 (after rollback) when the store rejects the row
    - update/delete return the database rowcount

Design Decisions:
    - IntegrityError mapped to a zero count here, not to DatabaseError:
      the service layer reports zero-effect persistence as a value
"""

import logging

from sqlalchemy import delete, exists, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import CompanyId
from app.models.company import Company

logger = logging.getLogger(__name__)


class SqlCompanyQuery:
    """Read side for companies."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists_by_id(self, company_id: CompanyId) -> bool:
        result = await self.db.execute(
            select(exists().where(Company.id == company_id)),
        )
        return bool(result.scalar())

    async def get_by_id(self, company_id: CompanyId) -> Company | None:
        result = await self.db.execute(
            select(Company).where(Company.id == company_id),
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> list[Company]:
        result = await self.db.execute(select(Company).order_by(Company.id))
        return list(result.scalars().all())


class SqlCompanyCommand:
    """Write side for companies."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(self, company: Company) -> int:
        self.db.add(company)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Company insert rejected: {e.orig}")
            return 0
        return 1

    async def update(self, company: Company) -> int:
        try:
            result = await self.db.execute(
                update(Company)
                .where(Company.id == company.id)
                .values(
                    cuit=company.cuit,
                    name=company.name,
                    address=company.address,
                    phone=company.phone,
                ),
            )
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"Company update rejected: {e.orig}",
                extra={"company_id": company.id},
            )
            return 0
        return result.rowcount

    async def delete(self, company: Company) -> int:
        result = await self.db.execute(
            delete(Company).where(Company.id == company.id),
        )
        await self.db.commit()
        return result.rowcount
