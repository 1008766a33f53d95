"""Initial trailer scheduling schema.

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

_DAYS = ("MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY", "SUNDAY")
_RENTAL_STATUSES = (
    "PENDING",
    "CONFIRMED",
    "ACTIVE",
    "CANCELLED",
    "COMPLETED",
    "LATE_RETURN",
    "DISPUTED",
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(length=320), nullable=False, unique=True),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=120), nullable=False),
        sa.Column("last_name", sa.String(length=120), nullable=False),
        sa.Column(
            "role", sa.Enum("USER", "LESSOR", "ADMIN", name="userrole"), nullable=False
        ),
        sa.Column(
            "status", sa.Enum("ACTIVE", "SUSPENDED", name="userstatus"), nullable=False
        ),
        *_timestamps(),
    )

    op.create_table(
        "trailers",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "owner_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("min_rental_days", sa.Integer()),
        sa.Column("max_rental_days", sa.Integer()),
        *_timestamps(),
    )
    op.create_index("ix_trailers_owner_id", "trailers", ["owner_id"])

    op.create_table(
        "weekly_availability",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "trailer_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("trailers.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("day", sa.Enum(*_DAYS, name="dayofweek"), nullable=False),
        sa.Column("available", sa.Boolean(), nullable=False),
        *[
            sa.Column(f"time_slot_{index}_{edge}", sa.Time())
            for index in (1, 2, 3)
            for edge in ("start", "end")
        ],
        *_timestamps(),
        sa.UniqueConstraint(
            "trailer_id", "day", name="uq_weekly_availability_trailer_day"
        ),
    )

    op.create_table(
        "availability_exceptions",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "trailer_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("trailers.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("exception_date", sa.Date(), nullable=False),
        sa.Column("morning", sa.Boolean(), nullable=False),
        sa.Column("afternoon", sa.Boolean(), nullable=False),
        sa.Column("evening", sa.Boolean(), nullable=False),
        *[
            sa.Column(f"{segment}_{edge}", sa.Time())
            for segment in ("morning", "afternoon", "evening")
            for edge in ("start", "end")
        ],
        *_timestamps(),
        sa.UniqueConstraint(
            "trailer_id",
            "exception_date",
            name="uq_availability_exception_trailer_date",
        ),
    )

    op.create_table(
        "blocked_periods",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "user_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "trailer_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("trailers.id", ondelete="CASCADE"),
        ),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("reason", sa.String(length=255)),
        *_timestamps(),
        sa.CheckConstraint(
            "start_date <= end_date", name="ck_blocked_periods_date_order"
        ),
    )
    op.create_index("ix_blocked_periods_user_id", "blocked_periods", ["user_id"])
    op.create_index("ix_blocked_periods_trailer_id", "blocked_periods", ["trailer_id"])

    op.create_table(
        "rentals",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "trailer_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("trailers.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "renter_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "lessor_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("pickup_time", sa.Time()),
        sa.Column("return_time", sa.Time()),
        sa.Column(
            "status", sa.Enum(*_RENTAL_STATUSES, name="rentalstatus"), nullable=False
        ),
        *_timestamps(),
        sa.CheckConstraint("start_date <= end_date", name="ck_rentals_date_order"),
    )
    op.create_index("ix_rentals_trailer_id", "rentals", ["trailer_id"])
    op.create_index("ix_rentals_renter_id", "rentals", ["renter_id"])
    op.create_index("ix_rentals_lessor_id", "rentals", ["lessor_id"])
    op.create_index(
        "ix_rentals_trailer_dates", "rentals", ["trailer_id", "start_date", "end_date"]
    )


def downgrade() -> None:
    op.drop_index("ix_rentals_trailer_dates", table_name="rentals")
    op.drop_index("ix_rentals_lessor_id", table_name="rentals")
    op.drop_index("ix_rentals_renter_id", table_name="rentals")
    op.drop_index("ix_rentals_trailer_id", table_name="rentals")
    op.drop_table("rentals")
    op.drop_index("ix_blocked_periods_trailer_id", table_name="blocked_periods")
    op.drop_index("ix_blocked_periods_user_id", table_name="blocked_periods")
    op.drop_table("blocked_periods")
    op.drop_table("availability_exceptions")
    op.drop_table("weekly_availability")
    op.drop_index("ix_trailers_owner_id", table_name="trailers")
    op.drop_table("trailers")
    op.drop_table("users")
    for enum_name in ("rentalstatus", "dayofweek", "userstatus", "userrole"):
        sa.Enum(name=enum_name).drop(op.get_bind(), checkfirst=True)
