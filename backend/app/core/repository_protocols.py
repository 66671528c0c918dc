"""Boundary Protocols — query/command contracts between services and persistence.

Invariants:
    - Services NEVER import a concrete repository — only these Protocol types
    - Queries translate absence into None / empty list, never an exception
    - Commands return the affected-row count; 0 means the store rejected the change

Design Decisions:
    - Protocol over ABC: structural subtyping, AsyncMock fakes satisfy it in tests
    - Query and command split per entity: reads and writes are injected separately
    - Entities typed as the ORM models (TYPE_CHECKING import only, no runtime coupling)
"""

from typing import TYPE_CHECKING, Protocol

from app.core.domain_types import CompanyId, PositionId

if TYPE_CHECKING:
    from app.models.company import Company
    from app.models.position import Position


class CompanyQuery(Protocol):
    """Read contract for companies — implemented by shell."""
    async def exists_by_id(self, company_id: CompanyId) -> bool: ...
    async def get_by_id(self, company_id: CompanyId) -> "Company | None": ...
    async def get_all(self) -> list["Company"]: ...


class CompanyCommand(Protocol):
    """Write contract for companies — implemented by shell."""
    async def insert(self, company: "Company") -> int: ...
    async def update(self, company: "Company") -> int: ...
    async def delete(self, company: "Company") -> int: ...


class PositionQuery(Protocol):
    """Read contract for positions — implemented by shell."""
    async def exists_by_id(self, position_id: PositionId) -> bool: ...
    async def get_by_id(self, position_id: PositionId) -> "Position | None": ...
    async def get_all_by_company(
        self, company_id: CompanyId,
    ) -> list["Position"]: ...


class PositionCommand(Protocol):
    """Write contract for positions — implemented by shell."""
    async def insert(self, position: "Position") -> int: ...
    async def update(self, position: "Position") -> int: ...
    async def delete(self, position: "Position") -> int: ...
