"""Rental schemas."""

from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict

from buurbak.models.rental import RentalStatus
from buurbak.schemas.common import HourMinute


class RentalCreate(BaseModel):
    trailer_id: uuid.UUID
    start_date: date
    end_date: date
    pickup_time: HourMinute | None = None
    return_time: HourMinute | None = None


class RentalStatusUpdate(BaseModel):
    status: RentalStatus


class RentalRead(BaseModel):
    id: uuid.UUID
    trailer_id: uuid.UUID
    renter_id: uuid.UUID
    lessor_id: uuid.UUID
    start_date: date
    end_date: date
    pickup_time: HourMinute | None = None
    return_time: HourMinute | None = None
    status: RentalStatus
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
