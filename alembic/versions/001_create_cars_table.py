"""Create cars table

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "cars",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("seats", sa.Integer(), nullable=False),
        sa.Column("luggage", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("gearshift", sa.String(), nullable=False),
        sa.Column("priceKsh", sa.Integer(), nullable=False),
        sa.Column("images", sa.JSON(), nullable=True),
        sa.Column("topSpeed", sa.String(), nullable=True),
        sa.Column("brakesType", sa.String(), nullable=True),
        sa.Column("fuelConsumption", sa.String(), nullable=True),
        sa.Column("acceleration", sa.String(), nullable=True),
        sa.Column("torque", sa.String(), nullable=True),
        sa.Column("gasTankCapacity", sa.String(), nullable=True),
        sa.Column("color", sa.String(), nullable=True),
        sa.Column("mileage", sa.String(), nullable=True),
        sa.Column("year", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_cars_id"), "cars", ["id"], unique=False)
    op.create_index(op.f("ix_cars_name"), "cars", ["name"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_cars_name"), table_name="cars")
    op.drop_index(op.f("ix_cars_id"), table_name="cars")
    op.drop_table("cars")
