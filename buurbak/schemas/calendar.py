"""Lessor calendar schemas."""

from __future__ import annotations

import enum
import uuid
from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from buurbak.models.availability import DayStatus
from buurbak.schemas.blocked_period import BlockedPeriodRead


class SelectionMode(str, enum.Enum):
    BLOCK = "block"
    UNBLOCK = "unblock"


class CalendarDayRead(BaseModel):
    date: date
    in_month: bool
    status: DayStatus
    renter_name: str | None = None
    rental_count: int = 0
    blocked_period_id: uuid.UUID | None = None

    model_config = ConfigDict(from_attributes=True)


class MonthCalendarRead(BaseModel):
    trailer_id: uuid.UUID
    year: int
    month: int
    days: list[CalendarDayRead]


class CalendarSelectionRequest(BaseModel):
    mode: SelectionMode
    dates: list[date] = Field(min_length=1)
    reason: str | None = Field(default=None, max_length=255)


class CalendarSelectionResult(BaseModel):
    mode: SelectionMode
    created: BlockedPeriodRead | None = None
    removed_ids: list[uuid.UUID] = Field(default_factory=list)
    skipped_dates: list[date] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
