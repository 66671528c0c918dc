"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Company is the aggregate root; positions are scoped by company_id

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.company import Company  # noqa: F401
from app.models.position import Position  # noqa: F401
