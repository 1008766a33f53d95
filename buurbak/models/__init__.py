"""ORM models package export."""

from buurbak.models.availability import (
    AvailabilityException,
    DayOfWeek,
    DaySegment,
    DayStatus,
    WeeklyAvailability,
)
from buurbak.models.blocked_period import BlockedPeriod
from buurbak.models.rental import OCCUPYING_STATUSES, Rental, RentalStatus
from buurbak.models.trailer import Trailer
from buurbak.models.user import User, UserRole, UserStatus

__all__ = [
    "AvailabilityException",
    "BlockedPeriod",
    "DayOfWeek",
    "DaySegment",
    "DayStatus",
    "OCCUPYING_STATUSES",
    "Rental",
    "RentalStatus",
    "Trailer",
    "User",
    "UserRole",
    "UserStatus",
    "WeeklyAvailability",
]
