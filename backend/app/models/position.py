"""Position ORM — persists a role inside a company.

Invariants:
    - Always belongs to a Company (company_id FK, many-to-one)
    - hierarchy and max_amount are plain scalars, no domain constraint
"""

from sqlalchemy import String, Integer, Float, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Position(Base):
    """Position entity — name, hierarchy level, and spending ceiling."""
    __tablename__ = "positions"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    hierarchy: Mapped[int] = mapped_column(Integer, nullable=False)
    max_amount: Mapped[float] = mapped_column(Float, nullable=False)
    company_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )

    # Relationships
    company: Mapped["Company"] = relationship(
        "Company", back_populates="positions",
    )
