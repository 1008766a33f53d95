"""Trailer schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from buurbak.schemas.availability import WeeklyAvailabilityDay


class TrailerCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    min_rental_days: int | None = Field(default=None, ge=1)
    max_rental_days: int | None = Field(default=None, ge=1)
    weekly_availability: list[WeeklyAvailabilityDay] = Field(
        default_factory=list, max_length=7
    )

    @model_validator(mode="after")
    def _validate(self) -> "TrailerCreate":
        if (
            self.min_rental_days is not None
            and self.max_rental_days is not None
            and self.min_rental_days > self.max_rental_days
        ):
            raise ValueError("min_rental_days cannot exceed max_rental_days")
        days = [entry.day for entry in self.weekly_availability]
        if len(days) != len(set(days)):
            raise ValueError("Each weekday may appear only once")
        return self


class TrailerRead(BaseModel):
    id: uuid.UUID
    owner_id: uuid.UUID
    title: str
    min_rental_days: int | None = None
    max_rental_days: int | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
