"""Schema exports."""

from buurbak.schemas.auth import Token
from buurbak.schemas.availability import (
    AvailabilityExceptionRead,
    AvailabilityExceptionUpsert,
    AvailabilityRangeRead,
    DayStatusRead,
    SlotAvailabilityRead,
    WeeklyAvailabilityBulkResult,
    WeeklyAvailabilityBulkUpdate,
    WeeklyAvailabilityDay,
    WeeklyAvailabilityRead,
)
from buurbak.schemas.blocked_period import BlockedPeriodCreate, BlockedPeriodRead
from buurbak.schemas.calendar import (
    CalendarDayRead,
    CalendarSelectionRequest,
    CalendarSelectionResult,
    MonthCalendarRead,
    SelectionMode,
)
from buurbak.schemas.rental import RentalCreate, RentalRead, RentalStatusUpdate
from buurbak.schemas.trailer import TrailerCreate, TrailerRead

__all__ = [
    "AvailabilityExceptionRead",
    "AvailabilityExceptionUpsert",
    "AvailabilityRangeRead",
    "BlockedPeriodCreate",
    "BlockedPeriodRead",
    "CalendarDayRead",
    "CalendarSelectionRequest",
    "CalendarSelectionResult",
    "DayStatusRead",
    "MonthCalendarRead",
    "RentalCreate",
    "RentalRead",
    "RentalStatusUpdate",
    "SelectionMode",
    "SlotAvailabilityRead",
    "Token",
    "TrailerCreate",
    "TrailerRead",
    "WeeklyAvailabilityBulkResult",
    "WeeklyAvailabilityBulkUpdate",
    "WeeklyAvailabilityDay",
    "WeeklyAvailabilityRead",
]
