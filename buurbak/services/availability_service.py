"""Weekly templates, date exceptions and schedule loading."""
from __future__ import annotations

import uuid
from collections.abc import Sequence
from datetime import date

from sqlalchemy import Select, delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from buurbak.models.availability import (
    AvailabilityException,
    DaySegment,
    WeeklyAvailability,
)
from buurbak.models.blocked_period import BlockedPeriod
from buurbak.models.rental import OCCUPYING_STATUSES, Rental
from buurbak.models.trailer import Trailer
from buurbak.models.user import User
from buurbak.schemas.availability import (
    AvailabilityExceptionUpsert,
    WeeklyAvailabilityDay,
)
from buurbak.services import trailer_service
from buurbak.services.availability_resolver import (
    SEGMENT_WINDOWS,
    BlockedRange,
    DayException,
    DayStatus,
    OccupiedRange,
    SlotVerdict,
    TimeWindow,
    TrailerSchedule,
    WeeklyRule,
    resolve_day_status as _resolve_day_status,
    resolve_time_slot as _resolve_time_slot,
)
from buurbak.services.errors import ExceptionNotFoundError, OwnershipError


async def list_weekly(
    session: AsyncSession, *, trailer_id: uuid.UUID
) -> list[WeeklyAvailability]:
    """Return a trailer's weekly rows ordered Monday to Sunday."""
    await trailer_service.get_trailer(session, trailer_id=trailer_id)
    result = await session.execute(
        select(WeeklyAvailability).where(WeeklyAvailability.trailer_id == trailer_id)
    )
    rows = list(result.scalars().all())
    rows.sort(key=lambda row: row.day.weekday_number)
    return rows


async def replace_weekly(
    session: AsyncSession,
    *,
    user: User,
    trailer_ids: Sequence[uuid.UUID],
    days: Sequence[WeeklyAvailabilityDay],
) -> int:
    """Replace the given weekday rows on every listed trailer.

    Ownership of all trailers is checked before anything is written.
    Returns the number of rows written.
    """
    unique_ids = list(dict.fromkeys(trailer_ids))
    result = await session.execute(
        select(Trailer.id).where(Trailer.id.in_(unique_ids), Trailer.owner_id == user.id)
    )
    owned = set(result.scalars().all())
    if owned != set(unique_ids):
        raise OwnershipError("You do not own all the specified trailers")

    written = 0
    for trailer_id in unique_ids:
        for entry in days:
            await session.execute(
                delete(WeeklyAvailability).where(
                    WeeklyAvailability.trailer_id == trailer_id,
                    WeeklyAvailability.day == entry.day,
                )
            )
            session.add(
                WeeklyAvailability(
                    trailer_id=trailer_id,
                    day=entry.day,
                    **trailer_service.weekly_row_values(entry),
                )
            )
            written += 1
    await session.commit()
    return written


async def list_exceptions(
    session: AsyncSession,
    *,
    trailer_id: uuid.UUID,
    date_from: date | None = None,
    date_to: date | None = None,
) -> list[AvailabilityException]:
    await trailer_service.get_trailer(session, trailer_id=trailer_id)
    stmt: Select[tuple[AvailabilityException]] = (
        select(AvailabilityException)
        .where(AvailabilityException.trailer_id == trailer_id)
        .order_by(AvailabilityException.exception_date.asc())
    )
    if date_from is not None:
        stmt = stmt.where(AvailabilityException.exception_date >= date_from)
    if date_to is not None:
        stmt = stmt.where(AvailabilityException.exception_date <= date_to)
    result = await session.execute(stmt)
    return list(result.scalars().all())


def exception_row_values(payload: AvailabilityExceptionUpsert) -> dict[str, object]:
    """Column values for an exception row; closed segments drop their times."""
    values: dict[str, object] = {"exception_date": payload.exception_date}
    for segment in DaySegment:
        is_open = getattr(payload, segment.value)
        values[segment.value] = is_open
        for edge in ("start", "end"):
            key = f"{segment.value}_{edge}"
            values[key] = getattr(payload, key) if is_open else None
    return values


async def upsert_exception(
    session: AsyncSession,
    *,
    user: User,
    trailer_id: uuid.UUID,
    payload: AvailabilityExceptionUpsert,
) -> AvailabilityException:
    """Create or replace the exception for ``payload.exception_date``."""
    await trailer_service.ensure_owner(session, trailer_id=trailer_id, user=user)
    existing = (
        await session.execute(
            select(AvailabilityException).where(
                AvailabilityException.trailer_id == trailer_id,
                AvailabilityException.exception_date == payload.exception_date,
            )
        )
    ).scalar_one_or_none()
    values = exception_row_values(payload)
    if existing is None:
        existing = AvailabilityException(trailer_id=trailer_id, **values)
        session.add(existing)
    else:
        for key, value in values.items():
            setattr(existing, key, value)
    await session.commit()
    await session.refresh(existing)
    return existing


async def delete_exception(
    session: AsyncSession,
    *,
    user: User,
    trailer_id: uuid.UUID,
    exception_date: date,
) -> None:
    await trailer_service.ensure_owner(session, trailer_id=trailer_id, user=user)
    existing = (
        await session.execute(
            select(AvailabilityException).where(
                AvailabilityException.trailer_id == trailer_id,
                AvailabilityException.exception_date == exception_date,
            )
        )
    ).scalar_one_or_none()
    if existing is None:
        raise ExceptionNotFoundError()
    await session.delete(existing)
    await session.commit()


def _weekly_rule(row: WeeklyAvailability) -> WeeklyRule:
    slots = tuple(TimeWindow(start, end) for start, end in row.time_slots())
    return WeeklyRule(day=row.day, available=row.available, slots=slots)


def _day_exception(row: AvailabilityException) -> DayException:
    segments: dict[DaySegment, TimeWindow] = {}
    for segment in DaySegment:
        if not getattr(row, segment.value):
            continue
        default = SEGMENT_WINDOWS[segment]
        start = getattr(row, f"{segment.value}_start") or default.start
        end = getattr(row, f"{segment.value}_end") or default.end
        segments[segment] = TimeWindow(start, end)
    return DayException(on_date=row.exception_date, segments=segments)


def _renter_name(rental: Rental) -> str | None:
    if rental.renter is None:
        return None
    return rental.renter.display_name


async def load_schedule(
    session: AsyncSession,
    *,
    trailer_id: uuid.UUID,
    date_from: date,
    date_to: date,
) -> TrailerSchedule:
    """Gather every scheduling layer for ``trailer_id`` within a date range.

    Raises ``TrailerNotFoundError`` for unknown trailers instead of treating
    them as available.
    """
    if date_from > date_to:
        raise ValueError("date_from must be on or before date_to")
    trailer = await trailer_service.get_trailer(session, trailer_id=trailer_id)

    weekly_rows = (
        await session.execute(
            select(WeeklyAvailability).where(WeeklyAvailability.trailer_id == trailer_id)
        )
    ).scalars().all()

    exception_rows = (
        await session.execute(
            select(AvailabilityException).where(
                AvailabilityException.trailer_id == trailer_id,
                AvailabilityException.exception_date >= date_from,
                AvailabilityException.exception_date <= date_to,
            )
        )
    ).scalars().all()

    blocked_rows = (
        await session.execute(
            select(BlockedPeriod).where(
                or_(
                    BlockedPeriod.trailer_id == trailer_id,
                    (BlockedPeriod.trailer_id.is_(None))
                    & (BlockedPeriod.user_id == trailer.owner_id),
                ),
                BlockedPeriod.start_date <= date_to,
                BlockedPeriod.end_date >= date_from,
            )
        )
    ).scalars().all()

    rental_rows = (
        await session.execute(
            select(Rental)
            .options(selectinload(Rental.renter))
            .where(
                Rental.trailer_id == trailer_id,
                Rental.status.in_(OCCUPYING_STATUSES),
                Rental.start_date <= date_to,
                Rental.end_date >= date_from,
            )
        )
    ).scalars().all()

    return TrailerSchedule(
        trailer_id=trailer_id,
        weekly={row.day: _weekly_rule(row) for row in weekly_rows},
        exceptions={row.exception_date: _day_exception(row) for row in exception_rows},
        blocked=[
            BlockedRange(
                id=row.id,
                start_date=row.start_date,
                end_date=row.end_date,
                trailer_id=row.trailer_id,
                reason=row.reason,
            )
            for row in blocked_rows
        ],
        rentals=[
            OccupiedRange(
                id=row.id,
                start_date=row.start_date,
                end_date=row.end_date,
                renter_name=_renter_name(row),
            )
            for row in rental_rows
        ],
    )


async def resolve_day_status(
    session: AsyncSession, *, trailer_id: uuid.UUID, day: date
) -> DayStatus:
    """Status of ``day`` for ``trailer_id``."""
    schedule = await load_schedule(
        session, trailer_id=trailer_id, date_from=day, date_to=day
    )
    return _resolve_day_status(schedule, day)


async def resolve_time_slot(
    session: AsyncSession,
    *,
    trailer_id: uuid.UUID,
    day: date,
    slot: DaySegment | TimeWindow | str,
) -> SlotVerdict:
    """Sub-day availability of ``slot`` on ``day`` for ``trailer_id``."""
    schedule = await load_schedule(
        session, trailer_id=trailer_id, date_from=day, date_to=day
    )
    return _resolve_time_slot(schedule, day, slot)
