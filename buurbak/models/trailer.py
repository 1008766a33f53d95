"""Trailer listings."""
from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from buurbak.db.base import Base
from buurbak.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from buurbak.models.availability import AvailabilityException, WeeklyAvailability
    from buurbak.models.blocked_period import BlockedPeriod
    from buurbak.models.rental import Rental
    from buurbak.models.user import User


class Trailer(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A rentable trailer owned by a lessor."""

    __tablename__ = "trailers"

    owner_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    min_rental_days: Mapped[int | None] = mapped_column(Integer())
    max_rental_days: Mapped[int | None] = mapped_column(Integer())

    owner: Mapped["User"] = relationship("User", back_populates="trailers")
    weekly_availability: Mapped[list["WeeklyAvailability"]] = relationship(
        "WeeklyAvailability", back_populates="trailer", cascade="all, delete-orphan"
    )
    availability_exceptions: Mapped[list["AvailabilityException"]] = relationship(
        "AvailabilityException", back_populates="trailer", cascade="all, delete-orphan"
    )
    blocked_periods: Mapped[list["BlockedPeriod"]] = relationship(
        "BlockedPeriod", back_populates="trailer", cascade="all, delete-orphan"
    )
    rentals: Mapped[list["Rental"]] = relationship(
        "Rental", back_populates="trailer", cascade="all, delete-orphan"
    )
