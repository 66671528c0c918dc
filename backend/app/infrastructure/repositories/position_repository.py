"""Position Repositories — async SQLAlchemy query/command pair for positions.

Invariants:
    - get_by_id returns None when absent (never raises)
    - get_all_by_company returns [] for a company with no positions
    - insert/update return 0 (after rollback) when the store rejects the row
"""

import logging

from sqlalchemy import delete, exists, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import CompanyId, PositionId
from app.models.position import Position

logger = logging.getLogger(__name__)


class SqlPositionQuery:
    """Read side for positions."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists_by_id(self, position_id: PositionId) -> bool:
        result = await self.db.execute(
            select(exists().where(Position.id == position_id)),
        )
        return bool(result.scalar())

    async def get_by_id(self, position_id: PositionId) -> Position | None:
        result = await self.db.execute(
            select(Position).where(Position.id == position_id),
        )
        return result.scalar_one_or_none()

    async def get_all_by_company(self, company_id: CompanyId) -> list[Position]:
        result = await self.db.execute(
            select(Position)
            .where(Position.company_id == company_id)
            .order_by(Position.id),
        )
        return list(result.scalars().all())


class SqlPositionCommand:
    """Write side for positions."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(self, position: Position) -> int:
        self.db.add(position)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"Position insert rejected: {e.orig}",
                extra={"company_id": position.company_id},
            )
            return 0
        return 1

    async def update(self, position: Position) -> int:
        try:
            result = await self.db.execute(
                update(Position)
                .where(Position.id == position.id)
                .values(
                    name=position.name,
                    hierarchy=position.hierarchy,
                    max_amount=position.max_amount,
                    company_id=position.company_id,
                ),
            )
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"Position update rejected: {e.orig}",
                extra={"position_id": position.id},
            )
            return 0
        return result.rowcount

    async def delete(self, position: Position) -> int:
        result = await self.db.execute(
            delete(Position).where(Position.id == position.id),
        )
        await self.db.commit()
        return result.rowcount
