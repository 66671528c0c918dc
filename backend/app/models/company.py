"""Company ORM — persists the owning business entity for positions.

Invariants:
    - id is an autoincrement integer primary key
    - cuit is unique; all business columns are non-nullable
    - Column lengths match the validator ceilings (core/validation.py)

Design Decisions:
    - Length limits enforced before persistence by the validator, the
      String(n) sizes only describe the column
    - cascade delete for positions (ORM side); the FK carries ON DELETE CASCADE
"""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Company(Base):
    """Company entity — owns zero or more positions."""
    __tablename__ = "companies"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    cuit: Mapped[str] = mapped_column(String(15), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    address: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str] = mapped_column(String(15), nullable=False)

    # Relationships
    positions: Mapped[list["Position"]] = relationship(
        "Position", back_populates="company",
        cascade="all, delete-orphan", passive_deletes=True, lazy="selectin",
    )
