"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CompanyId, PositionId wrap int primary keys — never pass bare ints through repositories
    - Valid identifiers are strictly positive (checked by core/validation.require_positive_id)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CompanyId = NewType("CompanyId", int)
PositionId = NewType("PositionId", int)


# ─── Enums ───────────────────────────────────────────────────────

class ResourceType(str, Enum):
    """Resource names used in error envelopes and log records."""
    COMPANY = "Company"
    POSITION = "Position"
