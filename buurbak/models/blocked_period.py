"""Lessor-initiated blocked date ranges."""
from __future__ import annotations

import uuid
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from buurbak.db.base import Base
from buurbak.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from buurbak.models.trailer import Trailer
    from buurbak.models.user import User


class BlockedPeriod(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Inclusive date range during which trailers cannot be booked.

    A null ``trailer_id`` blocks every trailer owned by ``user_id``.
    """

    __tablename__ = "blocked_periods"
    __table_args__ = (
        CheckConstraint("start_date <= end_date", name="date_order"),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    trailer_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("trailers.id", ondelete="CASCADE"), index=True
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    reason: Mapped[str | None] = mapped_column(String(255))

    user: Mapped["User"] = relationship("User", back_populates="blocked_periods")
    trailer: Mapped["Trailer | None"] = relationship(
        "Trailer", back_populates="blocked_periods"
    )
