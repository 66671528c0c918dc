"""Position Service — read, create, update, and delete pipelines for positions.

Invariants:
    - Identifier-based operations reject ids <= 0 with BadRequestError
      before any repository call
    - Missing positions (and missing owning companies on create/update)
      raise ResourceNotFoundError; delete is never invoked for a missing position
    - get_positions_by_company returns [] when nothing matches
    - Mutations return the command's affected-row count unchanged

Design Decisions:
    - Two read paths: get_position_entity returns the ORM entity,
      get_position returns PositionResponse (entity `name` → `description`)
    - company_query is required; create/update check the owning company through it
"""

import logging

from app.core.domain_types import CompanyId, PositionId, ResourceType
from app.core.errors import BadRequestError, ResourceNotFoundError
from app.core.repository_protocols import (
    CompanyQuery, PositionCommand, PositionQuery,
)
from app.core.validation import Validator, require_positive_id
from app.models.position import Position
from app.schemas.position import PositionRequest, PositionResponse

logger = logging.getLogger(__name__)


class PositionService:
    """Position use cases."""

    def __init__(
        self,
        query: PositionQuery,
        command: PositionCommand,
        validator: Validator[PositionRequest],
        company_query: CompanyQuery,
    ):
        self.query = query
        self.command = command
        self.validator = validator
        self.company_query = company_query

    async def get_positions_by_company(
        self, company_id: int,
    ) -> list[PositionResponse]:
        positions = await self.query.get_all_by_company(CompanyId(company_id))
        return [_to_response(p) for p in positions]

    async def get_position_entity(self, position_id: int) -> Position:
        require_positive_id(position_id, ResourceType.POSITION)
        return await self._get_or_raise(PositionId(position_id))

    async def get_position(self, position_id: int) -> PositionResponse:
        require_positive_id(position_id, ResourceType.POSITION)
        position = await self._get_or_raise(PositionId(position_id))
        return _to_response(position)

    async def create_position(self, request: PositionRequest) -> int:
        """Validate, confirm the owning company exists, insert."""
        self._validate(request)
        await self._require_company(request.company_id)
        affected = await self.command.insert(_to_entity(request))
        logger.info(
            f"Position insert affected {affected} row(s)",
            extra={"company_id": request.company_id, "affected_rows": affected},
        )
        return affected

    async def update_position(
        self, position_id: int, request: PositionRequest,
    ) -> int:
        require_positive_id(position_id, ResourceType.POSITION)
        self._validate(request)
        existing = await self._get_or_raise(PositionId(position_id))
        if request.company_id != existing.company_id:
            await self._require_company(request.company_id)
        affected = await self.command.update(
            _to_entity(request, position_id=existing.id),
        )
        logger.info(
            f"Position update affected {affected} row(s)",
            extra={"position_id": position_id, "affected_rows": affected},
        )
        return affected

    async def delete_position(self, position_id: int) -> int:
        require_positive_id(position_id, ResourceType.POSITION)
        position = await self._get_or_raise(PositionId(position_id))
        affected = await self.command.delete(position)
        logger.info(
            f"Position delete affected {affected} row(s)",
            extra={"position_id": position_id, "affected_rows": affected},
        )
        return affected

    # ─── Helpers ─────────────────────────────────────────────────

    def _validate(self, request: PositionRequest) -> None:
        result = self.validator.validate(request)
        if not result.is_valid:
            logger.warning(f"Invalid position request: {result.to_details()}")
            raise BadRequestError(
                "Invalid position data", errors=result.to_details(),
            )

    async def _get_or_raise(self, position_id: PositionId) -> Position:
        position = await self.query.get_by_id(position_id)
        if position is None:
            logger.warning(
                f"Position {position_id} not found",
                extra={"position_id": position_id},
            )
            raise ResourceNotFoundError(
                ResourceType.POSITION.value, str(position_id),
            )
        return position

    async def _require_company(self, company_id: int) -> None:
        if not await self.company_query.exists_by_id(CompanyId(company_id)):
            raise ResourceNotFoundError(
                ResourceType.COMPANY.value, str(company_id),
            )


def _to_entity(
    request: PositionRequest, position_id: int | None = None,
) -> Position:
    return Position(
        id=position_id,
        name=request.description,
        hierarchy=request.hierarchy,
        max_amount=request.max_amount,
        company_id=request.company_id,
    )


def _to_response(position: Position) -> PositionResponse:
    return PositionResponse(
        id=position.id,
        description=position.name,
        hierarchy=position.hierarchy,
        max_amount=position.max_amount,
        company_id=position.company_id,
    )
