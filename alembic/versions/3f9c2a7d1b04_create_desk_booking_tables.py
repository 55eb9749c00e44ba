"""create_desk_booking_tables

Revision ID: 3f9c2a7d1b04
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c2a7d1b04'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
    )

    op.create_table(
        "desks",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("number", sa.Integer(), nullable=False, unique=True),
        sa.Column("is_in_maintenance", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("maintenance_message", sa.String(length=255), nullable=True),
    )

    op.create_table(
        "reservations",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("desk_id", sa.Integer(), sa.ForeignKey("desks.id", ondelete="CASCADE"), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("is_cancelled", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("id", "desk_id", name="uq_reservations_id_desk"),
    )
    op.create_index("ix_reservations_user_id", "reservations", ["user_id"])
    op.create_index("ix_reservations_desk_id", "reservations", ["desk_id"])

    op.create_table(
        "reservation_days",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("reservation_id", sa.Integer(), nullable=False),
        sa.Column("desk_id", sa.Integer(), sa.ForeignKey("desks.id", ondelete="CASCADE"), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("is_cancelled", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.ForeignKeyConstraint(
            ["reservation_id", "desk_id"],
            ["reservations.id", "reservations.desk_id"],
            ondelete="CASCADE",
            name="fk_reservation_days_reservation_desk",
        ),
        sa.UniqueConstraint("reservation_id", "date", name="uq_reservation_days_reservation_date"),
    )
    op.create_index("ix_reservation_days_date", "reservation_days", ["date"])

    # Partial unique index: one active day per desk and date
    op.create_index(
        "uq_reservation_days_active_desk_date",
        "reservation_days",
        ["desk_id", "date"],
        unique=True,
        postgresql_where=sa.text("NOT is_cancelled"),
    )


def downgrade() -> None:
    op.drop_index("uq_reservation_days_active_desk_date", table_name="reservation_days")
    op.drop_index("ix_reservation_days_date", table_name="reservation_days")
    op.drop_table("reservation_days")
    op.drop_index("ix_reservations_desk_id", table_name="reservations")
    op.drop_index("ix_reservations_user_id", table_name="reservations")
    op.drop_table("reservations")
    op.drop_table("desks")
    op.drop_table("users")
