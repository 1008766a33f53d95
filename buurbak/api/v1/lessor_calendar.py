"""Lessor calendar: weekly templates, blocked periods and month views."""

from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Query, status

from buurbak.api.deps import CurrentLessor, SessionDep
from buurbak.api.errors import DOMAIN_ERRORS, http_error
from buurbak.api.rate_limits import DEFAULT_RATE_DEP
from buurbak.schemas.availability import (
    WeeklyAvailabilityBulkResult,
    WeeklyAvailabilityBulkUpdate,
)
from buurbak.schemas.blocked_period import BlockedPeriodCreate, BlockedPeriodRead
from buurbak.schemas.calendar import (
    CalendarDayRead,
    CalendarSelectionRequest,
    CalendarSelectionResult,
    MonthCalendarRead,
)
from buurbak.services import (
    availability_service,
    blocked_period_service,
    calendar_service,
)

router = APIRouter(prefix="/lessor-calendar", dependencies=[DEFAULT_RATE_DEP])


@router.put(
    "/availability",
    response_model=WeeklyAvailabilityBulkResult,
    summary="Replace weekly availability on several trailers",
)
async def update_weekly_availability(
    payload: WeeklyAvailabilityBulkUpdate,
    session: SessionDep,
    current_user: CurrentLessor,
) -> WeeklyAvailabilityBulkResult:
    try:
        written = await availability_service.replace_weekly(
            session,
            user=current_user,
            trailer_ids=payload.trailer_ids,
            days=payload.weekly_availability,
        )
    except DOMAIN_ERRORS as exc:
        raise http_error(exc) from exc
    return WeeklyAvailabilityBulkResult(
        trailer_ids=list(dict.fromkeys(payload.trailer_ids)), days_updated=written
    )


@router.get(
    "/blocked-periods",
    response_model=list[BlockedPeriodRead],
    summary="List my blocked periods",
)
async def list_blocked_periods(
    session: SessionDep,
    current_user: CurrentLessor,
    trailer_id: Annotated[uuid.UUID | None, Query()] = None,
) -> list[BlockedPeriodRead]:
    periods = await blocked_period_service.list_blocked_periods(
        session, user=current_user, trailer_id=trailer_id
    )
    return [BlockedPeriodRead.model_validate(period) for period in periods]


@router.post(
    "/blocked-periods",
    response_model=BlockedPeriodRead,
    status_code=status.HTTP_201_CREATED,
    summary="Block a date range",
)
async def create_blocked_period(
    payload: BlockedPeriodCreate,
    session: SessionDep,
    current_user: CurrentLessor,
) -> BlockedPeriodRead:
    try:
        period = await blocked_period_service.add_blocked_period(
            session,
            user=current_user,
            start_date=payload.start_date,
            end_date=payload.end_date,
            reason=payload.reason,
            trailer_id=payload.trailer_id,
        )
    except DOMAIN_ERRORS as exc:
        raise http_error(exc) from exc
    return BlockedPeriodRead.model_validate(period)


@router.delete(
    "/blocked-periods/{period_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a blocked period",
)
async def delete_blocked_period(
    period_id: uuid.UUID,
    session: SessionDep,
    current_user: CurrentLessor,
) -> None:
    try:
        await blocked_period_service.remove_blocked_period(
            session, user=current_user, period_id=period_id
        )
    except DOMAIN_ERRORS as exc:
        raise http_error(exc) from exc


@router.get(
    "/trailers/{trailer_id}/month",
    response_model=MonthCalendarRead,
    summary="Month calendar for one trailer",
)
async def get_month(
    trailer_id: uuid.UUID,
    session: SessionDep,
    current_user: CurrentLessor,
    year: Annotated[int, Query(ge=1, le=9999)],
    month: Annotated[int, Query(ge=1, le=12)],
) -> MonthCalendarRead:
    try:
        days = await calendar_service.get_month_calendar(
            session, user=current_user, trailer_id=trailer_id, year=year, month=month
        )
    except DOMAIN_ERRORS as exc:
        raise http_error(exc) from exc
    return MonthCalendarRead(
        trailer_id=trailer_id,
        year=year,
        month=month,
        days=[CalendarDayRead.model_validate(day) for day in days],
    )


@router.post(
    "/trailers/{trailer_id}/selection",
    response_model=CalendarSelectionResult,
    summary="Block or unblock selected days",
)
async def apply_selection(
    trailer_id: uuid.UUID,
    payload: CalendarSelectionRequest,
    session: SessionDep,
    current_user: CurrentLessor,
) -> CalendarSelectionResult:
    try:
        outcome = await calendar_service.apply_selection(
            session,
            user=current_user,
            trailer_id=trailer_id,
            mode=payload.mode,
            days=payload.dates,
            reason=payload.reason,
        )
    except DOMAIN_ERRORS as exc:
        raise http_error(exc) from exc
    return CalendarSelectionResult.model_validate(outcome)
