"""Company Schemas — Pydantic request/response models for the companies API.

Invariants:
    - CompanyRequest carries types only; length/emptiness rules live in core/validation
    - CompanyResponse mirrors the persisted entity field-for-field

Design Decisions:
    - from_attributes on responses: built straight from ORM instances
"""

from pydantic import BaseModel, ConfigDict


class CompanyRequest(BaseModel):
    """Company create/update payload."""
    cuit: str
    name: str
    address: str
    phone: str


class CompanyResponse(BaseModel):
    """Company response — public-facing company data."""
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    cuit: str
    name: str
    address: str
    phone: str
