"""Rental bookings."""
from __future__ import annotations

import enum
import uuid
from datetime import date, time
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, Enum, ForeignKey, Index, Time
from sqlalchemy.orm import Mapped, mapped_column, relationship

from buurbak.db.base import Base
from buurbak.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from buurbak.models.trailer import Trailer
    from buurbak.models.user import User


class RentalStatus(str, enum.Enum):
    """Lifecycle states for rentals."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    ACTIVE = "ACTIVE"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"
    LATE_RETURN = "LATE_RETURN"
    DISPUTED = "DISPUTED"


OCCUPYING_STATUSES: frozenset[RentalStatus] = frozenset(
    {RentalStatus.CONFIRMED, RentalStatus.ACTIVE}
)


class Rental(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A renter's booking of a trailer over an inclusive date range."""

    __tablename__ = "rentals"
    __table_args__ = (
        CheckConstraint("start_date <= end_date", name="date_order"),
        Index("ix_rentals_trailer_dates", "trailer_id", "start_date", "end_date"),
    )

    trailer_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("trailers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    renter_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    lessor_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    pickup_time: Mapped[time | None] = mapped_column(Time())
    return_time: Mapped[time | None] = mapped_column(Time())
    status: Mapped[RentalStatus] = mapped_column(
        Enum(RentalStatus), default=RentalStatus.PENDING, nullable=False
    )

    trailer: Mapped["Trailer"] = relationship("Trailer", back_populates="rentals")
    renter: Mapped["User"] = relationship("User", foreign_keys=[renter_id])
    lessor: Mapped["User"] = relationship("User", foreign_keys=[lessor_id])

    @property
    def occupies_calendar(self) -> bool:
        return self.status in OCCUPYING_STATUSES
