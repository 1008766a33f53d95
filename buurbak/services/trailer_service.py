"""Trailer listing and ownership helpers."""
from __future__ import annotations

import uuid
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from buurbak.models.availability import WeeklyAvailability
from buurbak.models.trailer import Trailer
from buurbak.models.user import User
from buurbak.schemas.availability import WeeklyAvailabilityDay
from buurbak.services.errors import OwnershipError, TrailerNotFoundError


async def get_trailer(session: AsyncSession, *, trailer_id: uuid.UUID) -> Trailer:
    """Return a trailer or raise ``TrailerNotFoundError``."""
    trailer = await session.get(Trailer, trailer_id)
    if trailer is None:
        raise TrailerNotFoundError()
    return trailer


async def ensure_owner(
    session: AsyncSession, *, trailer_id: uuid.UUID, user: User
) -> Trailer:
    """Return the trailer when ``user`` owns it."""
    trailer = await get_trailer(session, trailer_id=trailer_id)
    if trailer.owner_id != user.id:
        raise OwnershipError("You do not own this trailer")
    return trailer


async def list_owned_trailers(
    session: AsyncSession, *, owner_id: uuid.UUID
) -> Sequence[Trailer]:
    result = await session.execute(
        select(Trailer).where(Trailer.owner_id == owner_id).order_by(Trailer.title)
    )
    return result.scalars().all()


def weekly_row_values(entry: WeeklyAvailabilityDay) -> dict[str, object]:
    """Column values for a weekly row; closed days drop their slots."""
    values: dict[str, object] = {"available": entry.available}
    for index in (1, 2, 3):
        for edge in ("start", "end"):
            key = f"time_slot_{index}_{edge}"
            values[key] = getattr(entry, key) if entry.available else None
    return values


async def create_trailer(
    session: AsyncSession,
    *,
    owner: User,
    title: str,
    min_rental_days: int | None = None,
    max_rental_days: int | None = None,
    weekly_availability: Sequence[WeeklyAvailabilityDay] = (),
) -> Trailer:
    """List a new trailer, optionally with its initial weekly template."""
    if not owner.is_lessor:
        raise OwnershipError("You need to be a lessor to list trailers")
    trailer = Trailer(
        owner_id=owner.id,
        title=title,
        min_rental_days=min_rental_days,
        max_rental_days=max_rental_days,
    )
    session.add(trailer)
    await session.flush()
    for entry in weekly_availability:
        session.add(
            WeeklyAvailability(
                trailer_id=trailer.id, day=entry.day, **weekly_row_values(entry)
            )
        )
    await session.commit()
    await session.refresh(trailer)
    return trailer
