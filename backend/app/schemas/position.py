"""Position Schemas — Pydantic request/response models for the positions API.

Invariants:
    - The entity's `name` is exposed as `description` in both directions
    - PositionRequest carries types only; rules live in core/validation
"""

from pydantic import BaseModel


class PositionRequest(BaseModel):
    """Position create/update payload."""
    description: str
    hierarchy: int
    max_amount: float
    company_id: int


class PositionResponse(BaseModel):
    """Position response — public-facing position data."""
    id: int | None = None
    description: str
    hierarchy: int
    max_amount: float
    company_id: int | None = None
