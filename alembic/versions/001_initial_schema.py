"""Initial schema — locations with address columns.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "locations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("Address", sa.String(255), nullable=True),
        sa.Column("City", sa.String(64), nullable=True),
        sa.Column("State", sa.String(64), nullable=True),
        sa.Column("Postcode", sa.String(10), nullable=True),
        sa.Column("Country", sa.String(2), nullable=True),
        sa.Column("Lat", sa.Float, nullable=True),
        sa.Column("Lng", sa.Float, nullable=True),
        sa.Column("geo_status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column(
            "created_at",
            sa.DateTime,
            nullable=False,
            server_default=sa.func.now(),
        ),
    )


def downgrade() -> None:
    op.drop_table("locations")
