"""Company Service — validate → query → map → command pipelines for companies.

Invariants:
    - Validation runs before any repository call; failure raises BadRequestError
      carrying every validation message
    - Missing entities raise ResourceNotFoundError
    - Mutations return the command's affected-row count unchanged (0 is returned, not raised)
    - get_companies preserves the order the query yields

Design Decisions:
    - Repositories and validator injected through the constructor (Protocols only)
    - Mapping helpers are module-level functions, not methods
"""

import logging

from app.core.domain_types import CompanyId, ResourceType
from app.core.errors import BadRequestError, ResourceNotFoundError
from app.core.repository_protocols import CompanyCommand, CompanyQuery
from app.core.validation import Validator, require_positive_id
from app.models.company import Company
from app.schemas.company import CompanyRequest, CompanyResponse

logger = logging.getLogger(__name__)


class CompanyService:
    """Company use cases."""

    def __init__(
        self,
        query: CompanyQuery,
        command: CompanyCommand,
        validator: Validator[CompanyRequest],
    ):
        self.query = query
        self.command = command
        self.validator = validator

    async def create_company(self, request: CompanyRequest) -> int:
        """Validate and insert. Returns affected rows (0 = store rejected it)."""
        self._validate(request)
        affected = await self.command.insert(_to_entity(request))
        logger.info(
            f"Company insert affected {affected} row(s)",
            extra={"affected_rows": affected},
        )
        return affected

    async def get_companies(self) -> list[CompanyResponse]:
        companies = await self.query.get_all()
        return [_to_response(c) for c in companies]

    async def get_company(self, company_id: int) -> CompanyResponse:
        company = await self._get_or_raise(CompanyId(company_id))
        return _to_response(company)

    async def update_company(
        self, company_id: int, request: CompanyRequest,
    ) -> int:
        """Replace all business fields of an existing company."""
        require_positive_id(company_id, ResourceType.COMPANY)
        self._validate(request)
        existing = await self._get_or_raise(CompanyId(company_id))
        affected = await self.command.update(
            _to_entity(request, company_id=existing.id),
        )
        logger.info(
            f"Company update affected {affected} row(s)",
            extra={"company_id": company_id, "affected_rows": affected},
        )
        return affected

    async def delete_company(self, company_id: int) -> int:
        require_positive_id(company_id, ResourceType.COMPANY)
        company = await self._get_or_raise(CompanyId(company_id))
        affected = await self.command.delete(company)
        logger.info(
            f"Company delete affected {affected} row(s)",
            extra={"company_id": company_id, "affected_rows": affected},
        )
        return affected

    # ─── Helpers ─────────────────────────────────────────────────

    def _validate(self, request: CompanyRequest) -> None:
        result = self.validator.validate(request)
        if not result.is_valid:
            logger.warning(f"Invalid company request: {result.to_details()}")
            raise BadRequestError(
                "Invalid company data", errors=result.to_details(),
            )

    async def _get_or_raise(self, company_id: CompanyId) -> Company:
        company = await self.query.get_by_id(company_id)
        if company is None:
            logger.warning(
                f"Company {company_id} not found",
                extra={"company_id": company_id},
            )
            raise ResourceNotFoundError(
                ResourceType.COMPANY.value, str(company_id),
            )
        return company


def _to_entity(
    request: CompanyRequest, company_id: int | None = None,
) -> Company:
    return Company(
        id=company_id,
        cuit=request.cuit,
        name=request.name,
        address=request.address,
        phone=request.phone,
    )


def _to_response(company: Company) -> CompanyResponse:
    return CompanyResponse(
        id=company.id,
        cuit=company.cuit,
        name=company.name,
        address=company.address,
        phone=company.phone,
    )
