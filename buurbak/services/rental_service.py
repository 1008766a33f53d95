"""Rental requests and their lifecycle."""
from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence
from datetime import date, time

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from buurbak.models.rental import Rental, RentalStatus
from buurbak.models.user import User
from buurbak.services import availability_service, trailer_service
from buurbak.services.availability_resolver import (
    DayStatus,
    find_range_conflicts,
    time_options,
)
from buurbak.services.errors import (
    AvailabilityConflictError,
    OwnershipError,
    RentalNotFoundError,
)

logger = logging.getLogger(__name__)

_ALLOWED_STATUS_TRANSITIONS: dict[RentalStatus, set[RentalStatus]] = {
    RentalStatus.PENDING: {RentalStatus.CONFIRMED, RentalStatus.CANCELLED},
    RentalStatus.CONFIRMED: {RentalStatus.ACTIVE, RentalStatus.CANCELLED},
    RentalStatus.ACTIVE: {
        RentalStatus.COMPLETED,
        RentalStatus.LATE_RETURN,
        RentalStatus.DISPUTED,
    },
    RentalStatus.LATE_RETURN: {RentalStatus.COMPLETED, RentalStatus.DISPUTED},
    RentalStatus.DISPUTED: {RentalStatus.COMPLETED},
    RentalStatus.CANCELLED: set(),
    RentalStatus.COMPLETED: set(),
}

_RENTER_STATUS_TRANSITIONS = {RentalStatus.CANCELLED}


def rental_days(start_date: date, end_date: date) -> int:
    """Number of calendar days booked, both ends inclusive."""
    return (end_date - start_date).days + 1


def _check_time(label: str, value: time | None, options: list[str]) -> None:
    if value is None:
        return
    if value.strftime("%H:%M") not in options:
        raise ValueError(f"{label} {value:%H:%M} is outside the trailer's opening hours")


async def get_rental(session: AsyncSession, *, rental_id: uuid.UUID) -> Rental:
    rental = await session.get(Rental, rental_id)
    if rental is None:
        raise RentalNotFoundError()
    return rental


async def list_renter_rentals(
    session: AsyncSession, *, renter: User
) -> Sequence[Rental]:
    result = await session.execute(
        select(Rental)
        .where(Rental.renter_id == renter.id)
        .order_by(Rental.start_date.desc())
    )
    return result.scalars().all()


async def list_trailer_rentals(
    session: AsyncSession, *, user: User, trailer_id: uuid.UUID
) -> Sequence[Rental]:
    await trailer_service.ensure_owner(session, trailer_id=trailer_id, user=user)
    result = await session.execute(
        select(Rental)
        .where(Rental.trailer_id == trailer_id)
        .order_by(Rental.start_date.asc())
    )
    return result.scalars().all()


async def create_rental(
    session: AsyncSession,
    *,
    renter: User,
    trailer_id: uuid.UUID,
    start_date: date,
    end_date: date,
    pickup_time: time | None = None,
    return_time: time | None = None,
) -> Rental:
    """Request a rental; every booked day must currently resolve to available.

    The request starts out ``PENDING`` and does not occupy the calendar until
    the lessor confirms it.
    """
    if start_date > end_date:
        raise ValueError("start_date must be on or before end_date")
    if start_date < date.today():
        raise ValueError("start_date cannot be in the past")
    trailer =await trailer_service.get_trailer(session, trailer_id=trailer_id)
    if trailer.owner_id == renter.id:
        raise ValueError("You cannot rent your own trailer")

    days = rental_days(start_date, end_date)
    if trailer.min_rental_days is not None and days < trailer.min_rental_days:
        raise ValueError(f"This trailer must be rented for at least {trailer.min_rental_days} day(s)")
    if trailer.max_rental_days is not None and days > trailer.max_rental_days:
        raise ValueError(f"This trailer can be rented for at most {trailer.max_rental_days} day(s)")

    schedule = await availability_service.load_schedule(
        session, trailer_id=trailer_id, date_from=start_date, date_to=end_date
    )
    conflicts = find_range_conflicts(schedule, start_date, end_date)
    if conflicts:
        first = conflicts[0]
        raise AvailabilityConflictError(first.day, first.status.value)
    _check_time("Pickup time", pickup_time, time_options(schedule, start_date))
    _check_time("Return time", return_time, time_options(schedule, end_date))

    rental = Rental(
        trailer_id=trailer.id,
        renter_id=renter.id,
        lessor_id=trailer.owner_id,
        start_date=start_date,
        end_date=end_date,
        pickup_time=pickup_time,
        return_time=return_time,
        status=RentalStatus.PENDING,
    )
    session.add(rental)
    await session.commit()
    await session.refresh(rental)
    logger.info(
        "Rental %s requested for trailer %s (%s..%s)",
        rental.id,
        trailer_id,
        start_date,
        end_date,
    )
    return rental


async def _ensure_not_rented(session: AsyncSession, *, rental: Rental) -> None:
    schedule = await availability_service.load_schedule(
        session,
        trailer_id=rental.trailer_id,
        date_from=rental.start_date,
        date_to=rental.end_date,
    )
    schedule.rentals = [item for item in schedule.rentals if item.id != rental.id]
    for conflict in find_range_conflicts(schedule, rental.start_date, rental.end_date):
        if conflict.status is DayStatus.RENTED:
            raise AvailabilityConflictError(conflict.day, conflict.status.value)


async def update_status(
    session: AsyncSession,
    *,
    user: User,
    rental_id: uuid.UUID,
    status: RentalStatus,
) -> Rental:
    """Move a rental along its lifecycle.

    The lessor may apply any allowed transition; the renter may only cancel.
    Confirmation fails when another rental already holds any of the dates.
    """
    rental = await get_rental(session, rental_id=rental_id)
    if user.id != rental.lessor_id:
        if user.id != rental.renter_id:
            raise OwnershipError("You are not part of this rental")
        if status not in _RENTER_STATUS_TRANSITIONS:
            raise OwnershipError("Only the lessor can change this rental's status")

    allowed = _ALLOWED_STATUS_TRANSITIONS.get(rental.status, set())
    if status not in allowed:
        raise ValueError(
            f"Cannot change rental status from {rental.status.value} to {status.value}"
        )
    if status is RentalStatus.CONFIRMED:
        await _ensure_not_rented(session, rental=rental)

    previous = rental.status
    rental.status = status
    await session.commit()
    await session.refresh(rental)
    logger.info("Rental %s moved from %s to %s", rental.id, previous.value, status.value)
    return rental
