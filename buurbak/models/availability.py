"""Weekly availability templates and per-date exceptions."""
from __future__ import annotations

import enum
import uuid
from datetime import date, time
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Date, Enum, ForeignKey, Time, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from buurbak.db.base import Base
from buurbak.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from buurbak.models.trailer import Trailer


class DayOfWeek(str, enum.Enum):
    """Weekday names, ordered Monday first like ``date.weekday()``."""

    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @classmethod
    def from_date(cls, value: date) -> "DayOfWeek":
        return _WEEKDAYS[value.weekday()]

    @property
    def weekday_number(self) -> int:
        return _WEEKDAYS.index(self)


_WEEKDAYS: tuple[DayOfWeek, ...] = tuple(DayOfWeek)


class DaySegment(str, enum.Enum):
    """Parts of the day an exception can open or close."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


class DayStatus(str, enum.Enum):
    """Mutually exclusive calendar statuses of a trailer day."""

    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    BLOCKED = "blocked"
    RENTED = "rented"


class WeeklyAvailability(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Recurring open/closed default for one weekday of a trailer."""

    __tablename__ = "weekly_availability"
    __table_args__ = (
        UniqueConstraint("trailer_id", "day", name="uq_weekly_availability_trailer_day"),
    )

    trailer_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("trailers.id", ondelete="CASCADE"), nullable=False
    )
    day: Mapped[DayOfWeek] = mapped_column(Enum(DayOfWeek), nullable=False)
    available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    time_slot_1_start: Mapped[time | None] = mapped_column(Time())
    time_slot_1_end: Mapped[time | None] = mapped_column(Time())
    time_slot_2_start: Mapped[time | None] = mapped_column(Time())
    time_slot_2_end: Mapped[time | None] = mapped_column(Time())
    time_slot_3_start: Mapped[time | None] = mapped_column(Time())
    time_slot_3_end: Mapped[time | None] = mapped_column(Time())

    trailer: Mapped["Trailer"] = relationship(
        "Trailer", back_populates="weekly_availability"
    )

    def time_slots(self) -> list[tuple[time, time]]:
        """Return the fully specified slots in declaration order."""
        pairs = (
            (self.time_slot_1_start, self.time_slot_1_end),
            (self.time_slot_2_start, self.time_slot_2_end),
            (self.time_slot_3_start, self.time_slot_3_end),
        )
        return [(start, end) for start, end in pairs if start is not None and end is not None]


class AvailabilityException(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Override of a single calendar date, replacing the weekly default."""

    __tablename__ = "availability_exceptions"
    __table_args__ = (
        UniqueConstraint(
            "trailer_id", "exception_date", name="uq_availability_exception_trailer_date"
        ),
    )

    trailer_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("trailers.id", ondelete="CASCADE"), nullable=False
    )
    exception_date: Mapped[date] = mapped_column(Date, nullable=False)
    morning: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    afternoon: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    evening: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    morning_start: Mapped[time | None] = mapped_column(Time())
    morning_end: Mapped[time | None] = mapped_column(Time())
    afternoon_start: Mapped[time | None] = mapped_column(Time())
    afternoon_end: Mapped[time | None] = mapped_column(Time())
    evening_start: Mapped[time | None] = mapped_column(Time())
    evening_end: Mapped[time | None] = mapped_column(Time())

    trailer: Mapped["Trailer"] = relationship(
        "Trailer", back_populates="availability_exceptions"
    )
