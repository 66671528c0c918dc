"""Baseline schema — companies and positions.

Revision ID: 001_companies_positions
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_companies_positions"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "companies",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("cuit", sa.String(15), nullable=False, unique=True),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("address", sa.String(100), nullable=False),
        sa.Column("phone", sa.String(15), nullable=False),
    )

    op.create_table(
        "positions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("hierarchy", sa.Integer, nullable=False),
        sa.Column("max_amount", sa.Float, nullable=False),
        sa.Column(
            "company_id", sa.Integer,
            sa.ForeignKey("companies.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    op.create_index("ix_positions_company_id", "positions", ["company_id"])


def downgrade() -> None:
    op.drop_index("ix_positions_company_id", table_name="positions")
    op.drop_table("positions")
    op.drop_table("companies")
