"""Request Validation — pure rule sets evaluated before any persistence call.

Invariants:
    - Validators are synchronous and side-effect free (no IO, no DB)
    - validate() never raises for bad input; it reports every failure in ValidationResult
    - Whitespace-only strings count as empty; max_length counts the raw value
    - require_positive_id() is the only helper that raises (BadRequestError)

Design Decisions:
    - Rules expressed as Pydantic models with Field constraints, the same
      mechanism the API schemas use; request schemas stay unconstrained so
      the service owns the client-error decision
    - Values are measured as received, the same string the service persists
    - Validator is a Protocol: services accept any object with validate()
"""

from dataclasses import dataclass, field
from typing import ClassVar, Protocol, TypeVar

from pydantic import BaseModel, Field, ValidationError, field_validator

from app.core.domain_types import ResourceType
from app.core.errors import BadRequestError

CUIT_MAX_LENGTH = 15
COMPANY_NAME_MAX_LENGTH = 50
ADDRESS_MAX_LENGTH = 100
PHONE_MAX_LENGTH = 15
POSITION_DESCRIPTION_MAX_LENGTH = 50

RequestT = TypeVar("RequestT", bound=BaseModel, contravariant=True)


@dataclass(frozen=True)
class ValidationFailure:
    """A single rule violation on one request field."""
    field: str
    message: str


@dataclass
class ValidationResult:
    """Outcome of a validator run — valid when no failures were collected."""
    errors: list[ValidationFailure] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_details(self) -> list[dict]:
        return [{"field": e.field, "message": e.message} for e in self.errors]


class Validator(Protocol[RequestT]):
    """Contract for request validators injected into services."""
    def validate(self, request: RequestT) -> ValidationResult: ...


# ─── Rule Sets ───────────────────────────────────────────────────

def _reject_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("must not be blank")
    return v


class _CompanyRules(BaseModel):
    cuit: str = Field(min_length=1, max_length=CUIT_MAX_LENGTH)
    name: str = Field(min_length=1, max_length=COMPANY_NAME_MAX_LENGTH)
    address: str = Field(min_length=1, max_length=ADDRESS_MAX_LENGTH)
    phone: str = Field(min_length=1, max_length=PHONE_MAX_LENGTH)

    @field_validator("cuit", "name", "address", "phone")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _reject_blank(v)


class _PositionRules(BaseModel):
    description: str = Field(
        min_length=1, max_length=POSITION_DESCRIPTION_MAX_LENGTH,
    )
    hierarchy: int
    max_amount: float
    company_id: int

    @field_validator("description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _reject_blank(v)


class _RuleSetValidator:
    """Runs a Pydantic rule model over a request and collects failures."""

    rules: ClassVar[type[BaseModel]]

    def validate(self, request: BaseModel) -> ValidationResult:
        try:
            self.rules.model_validate(request.model_dump())
        except ValidationError as e:
            return ValidationResult(errors=[
                ValidationFailure(
                    field=".".join(str(loc) for loc in err["loc"]),
                    message=err["msg"],
                )
                for err in e.errors()
            ])
        return ValidationResult()


class CreateCompanyValidator(_RuleSetValidator):
    """cuit, name, address, phone: required, bounded length."""
    rules = _CompanyRules


class PositionValidator(_RuleSetValidator):
    """description required and bounded; numeric fields only need presence."""
    rules = _PositionRules


# ─── Identifier Checks ──────────────────────────────────────────

def require_positive_id(value: int, resource_type: ResourceType) -> None:
    """Raise BadRequestError unless value is a strictly positive identifier."""
    if value <= 0:
        raise BadRequestError(
            f"{resource_type.value} id must be a positive integer",
            errors=[{"field": "id", "message": f"got {value}"}],
        )
