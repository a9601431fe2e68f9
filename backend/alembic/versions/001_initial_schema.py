"""Initial schema — providers, data_points.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "providers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False, unique=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "data_points",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("provider_id", sa.Integer, sa.ForeignKey("providers.id"), nullable=False),
        sa.Column("asset_class", sa.String(50), nullable=False),
        sa.Column("quarter", sa.String(20), nullable=False),
        sa.Column("min_price", sa.Float, nullable=False),
        sa.Column("max_price", sa.Float, nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_data_points_provider_id", "data_points", ["provider_id"])
    op.create_index("ix_data_points_date", "data_points", ["date"])


def downgrade() -> None:
    op.drop_index("ix_data_points_date", table_name="data_points")
    op.drop_index("ix_data_points_provider_id", table_name="data_points")
    op.drop_table("data_points")
    op.drop_table("providers")
