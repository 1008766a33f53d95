"""Schemas for weekly availability, exceptions and resolved statuses."""

from __future__ import annotations

import uuid
from datetime import date, time

from pydantic import BaseModel, ConfigDict, Field, model_validator

from buurbak.models.availability import DayOfWeek, DaySegment, DayStatus
from buurbak.schemas.common import HourMinute


def _check_pair(label: str, start: time | None, end: time | None) -> None:
    if (start is None) != (end is None):
        raise ValueError(f"{label} needs both a start and an end time")
    if start is not None and end is not None and end <= start:
        raise ValueError(f"{label} must end after it starts")


class WeeklyAvailabilityDay(BaseModel):
    """One weekday of a weekly template."""

    day: DayOfWeek
    available: bool = True
    time_slot_1_start: HourMinute | None = None
    time_slot_1_end: HourMinute | None = None
    time_slot_2_start: HourMinute | None = None
    time_slot_2_end: HourMinute | None = None
    time_slot_3_start: HourMinute | None = None
    time_slot_3_end: HourMinute | None = None

    @model_validator(mode="after")
    def _validate_slots(self) -> "WeeklyAvailabilityDay":
        for index in (1, 2, 3):
            _check_pair(
                f"time slot {index}",
                getattr(self, f"time_slot_{index}_start"),
                getattr(self, f"time_slot_{index}_end"),
            )
        return self


class WeeklyAvailabilityRead(WeeklyAvailabilityDay):
    id: uuid.UUID
    trailer_id: uuid.UUID

    model_config = ConfigDict(from_attributes=True)


class WeeklyAvailabilityBulkUpdate(BaseModel):
    """Replace weekday rows across several trailers at once."""

    trailer_ids: list[uuid.UUID] = Field(min_length=1)
    weekly_availability: list[WeeklyAvailabilityDay] = Field(min_length=1, max_length=7)

    @model_validator(mode="after")
    def _unique_days(self) -> "WeeklyAvailabilityBulkUpdate":
        days = [entry.day for entry in self.weekly_availability]
        if len(days) != len(set(days)):
            raise ValueError("Each weekday may appear only once")
        return self


class WeeklyAvailabilityBulkResult(BaseModel):
    trailer_ids: list[uuid.UUID]
    days_updated: int


class AvailabilityExceptionUpsert(BaseModel):
    """Override for one calendar date."""

    exception_date: date
    morning: bool = False
    afternoon: bool = False
    evening: bool = False
    morning_start: HourMinute | None = None
    morning_end: HourMinute | None = None
    afternoon_start: HourMinute | None = None
    afternoon_end: HourMinute | None = None
    evening_start: HourMinute | None = None
    evening_end: HourMinute | None = None

    @model_validator(mode="after")
    def _validate_windows(self) -> "AvailabilityExceptionUpsert":
        for segment in DaySegment:
            _check_pair(
                segment.value,
                getattr(self, f"{segment.value}_start"),
                getattr(self, f"{segment.value}_end"),
            )
        return self


class AvailabilityExceptionRead(AvailabilityExceptionUpsert):
    id: uuid.UUID
    trailer_id: uuid.UUID

    model_config = ConfigDict(from_attributes=True)


class DayStatusRead(BaseModel):
    """Resolved status of a single day."""

    date: date
    status: DayStatus


class AvailabilityRangeRead(BaseModel):
    """Resolved statuses for a contiguous range of days."""

    trailer_id: uuid.UUID
    date_from: date
    date_to: date
    days: list[DayStatusRead]


class SlotAvailabilityRead(BaseModel):
    """Answer to a morning/afternoon/evening or ``HH:MM-HH:MM`` query."""

    date: date
    slot: str
    available: bool
    day_status: DayStatus
    open_windows: list[str]
    time_options: list[str]
