"""Trailer listing and public availability endpoints."""

from __future__ import annotations

import uuid
from datetime import date, timedelta
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from buurbak.api.deps import CurrentLessor, SessionDep
from buurbak.api.errors import DOMAIN_ERRORS, http_error
from buurbak.api.rate_limits import DEFAULT_RATE_DEP
from buurbak.core.config import get_settings
from buurbak.models.availability import DaySegment
from buurbak.schemas.availability import (
    AvailabilityExceptionRead,
    AvailabilityExceptionUpsert,
    AvailabilityRangeRead,
    DayStatusRead,
    SlotAvailabilityRead,
    WeeklyAvailabilityRead,
)
from buurbak.schemas.trailer import TrailerCreate, TrailerRead
from buurbak.services import availability_service, trailer_service
from buurbak.services.availability_resolver import (
    iter_days,
    parse_slot,
    resolve_days,
    resolve_time_slot,
    time_options,
)

router = APIRouter(prefix="/trailers", dependencies=[DEFAULT_RATE_DEP])


@router.post(
    "",
    response_model=TrailerRead,
    status_code=status.HTTP_201_CREATED,
    summary="List a trailer",
)
async def create_trailer(
    payload: TrailerCreate,
    session: SessionDep,
    current_user: CurrentLessor,
) -> TrailerRead:
    try:
        trailer = await trailer_service.create_trailer(
            session,
            owner=current_user,
            title=payload.title,
            min_rental_days=payload.min_rental_days,
            max_rental_days=payload.max_rental_days,
            weekly_availability=payload.weekly_availability,
        )
    except DOMAIN_ERRORS as exc:
        raise http_error(exc) from exc
    return TrailerRead.model_validate(trailer)


@router.get("", response_model=list[TrailerRead], summary="List my trailers")
async def list_my_trailers(
    session: SessionDep,
    current_user: CurrentLessor,
) -> list[TrailerRead]:
    trailers = await trailer_service.list_owned_trailers(
        session, owner_id=current_user.id
    )
    return [TrailerRead.model_validate(trailer) for trailer in trailers]


@router.get("/{trailer_id}", response_model=TrailerRead, summary="Get trailer")
async def get_trailer(trailer_id: uuid.UUID, session: SessionDep) -> TrailerRead:
    try:
        trailer = await trailer_service.get_trailer(session, trailer_id=trailer_id)
    except DOMAIN_ERRORS as exc:
        raise http_error(exc) from exc
    return TrailerRead.model_validate(trailer)


@router.get(
    "/{trailer_id}/weekly-availability",
    response_model=list[WeeklyAvailabilityRead],
    summary="Weekly availability template",
)
async def get_weekly_availability(
    trailer_id: uuid.UUID, session: SessionDep
) -> list[WeeklyAvailabilityRead]:
    try:
        rows = await availability_service.list_weekly(session, trailer_id=trailer_id)
    except DOMAIN_ERRORS as exc:
        raise http_error(exc) from exc
    return [WeeklyAvailabilityRead.model_validate(row) for row in rows]


@router.get(
    "/{trailer_id}/availability",
    response_model=AvailabilityRangeRead,
    summary="Day statuses over a date range",
)
async def get_availability_range(
    trailer_id: uuid.UUID,
    session: SessionDep,
    date_from: Annotated[date | None, Query()] = None,
    date_to: Annotated[date | None, Query()] = None,
) -> AvailabilityRangeRead:
    """Resolve every day in the range; renter details are never exposed here."""
    settings = get_settings()
    start = date_from or date.today()
    end = date_to or start + timedelta(days=settings.availability_window_days - 1)
    if start > end:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="date_from must be on or before date_to",
        )
    if (end - start).days + 1 > settings.max_availability_range_days:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Ranges are limited to {settings.max_availability_range_days} days",
        )
    try:
        schedule = await availability_service.load_schedule(
            session, trailer_id=trailer_id, date_from=start, date_to=end
        )
    except DOMAIN_ERRORS as exc:
        raise http_error(exc) from exc
    statuses = resolve_days(schedule, iter_days(start, end))
    return AvailabilityRangeRead(
        trailer_id=trailer_id,
        date_from=start,
        date_to=end,
        days=[
            DayStatusRead(date=day, status=day_status)
            for day, day_status in statuses.items()
        ],
    )


@router.get(
    "/{trailer_id}/availability/{day}",
    response_model=DayStatusRead,
    summary="Status of a single day",
)
async def get_day_status(
    trailer_id: uuid.UUID, day: date, session: SessionDep
) -> DayStatusRead:
    try:
        day_status = await availability_service.resolve_day_status(
            session, trailer_id=trailer_id, day=day
        )
    except DOMAIN_ERRORS as exc:
        raise http_error(exc) from exc
    return DayStatusRead(date=day, status=day_status)


@router.get(
    "/{trailer_id}/availability/{day}/slots",
    response_model=SlotAvailabilityRead,
    summary="Availability of a day segment or time window",
)
async def get_slot_availability(
    trailer_id: uuid.UUID,
    day: date,
    session: SessionDep,
    slot: Annotated[str, Query(description="morning, afternoon, evening or HH:MM-HH:MM")],
) -> SlotAvailabilityRead:
    try:
        parsed = parse_slot(slot)
        schedule = await availability_service.load_schedule(
            session, trailer_id=trailer_id, date_from=day, date_to=day
        )
    except DOMAIN_ERRORS as exc:
        raise http_error(exc) from exc
    verdict = resolve_time_slot(schedule, day, parsed)
    return SlotAvailabilityRead(
        date=day,
        slot=parsed.value if isinstance(parsed, DaySegment) else str(parsed),
        available=verdict.available,
        day_status=verdict.day_status,
        open_windows=[str(window) for window in verdict.open_windows],
        time_options=time_options(schedule, day),
    )


@router.get(
    "/{trailer_id}/exceptions",
    response_model=list[AvailabilityExceptionRead],
    summary="List availability exceptions",
)
async def list_exceptions(
    trailer_id: uuid.UUID,
    session: SessionDep,
    current_user: CurrentLessor,
    date_from: Annotated[date | None, Query()] = None,
    date_to: Annotated[date | None, Query()] = None,
) -> list[AvailabilityExceptionRead]:
    try:
        await trailer_service.ensure_owner(
            session, trailer_id=trailer_id, user=current_user
        )
        rows = await availability_service.list_exceptions(
            session, trailer_id=trailer_id, date_from=date_from, date_to=date_to
        )
    except DOMAIN_ERRORS as exc:
        raise http_error(exc) from exc
    return [AvailabilityExceptionRead.model_validate(row) for row in rows]


@router.put(
    "/{trailer_id}/exceptions",
    response_model=AvailabilityExceptionRead,
    summary="Create or replace the exception for a date",
)
async def upsert_exception(
    trailer_id: uuid.UUID,
    payload: AvailabilityExceptionUpsert,
    session: SessionDep,
    current_user: CurrentLessor,
) -> AvailabilityExceptionRead:
    try:
        row = await availability_service.upsert_exception(
            session, user=current_user, trailer_id=trailer_id, payload=payload
        )
    except DOMAIN_ERRORS as exc:
        raise http_error(exc) from exc
    return AvailabilityExceptionRead.model_validate(row)


@router.delete(
    "/{trailer_id}/exceptions/{exception_date}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove the exception for a date",
)
async def delete_exception(
    trailer_id: uuid.UUID,
    exception_date: date,
    session: SessionDep,
    current_user: CurrentLessor,
) -> None:
    try:
        await availability_service.delete_exception(
            session,
            user=current_user,
            trailer_id=trailer_id,
            exception_date=exception_date,
        )
    except DOMAIN_ERRORS as exc:
        raise http_error(exc) from exc
