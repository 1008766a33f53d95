"""Lessor-managed blocked periods."""
from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence
from datetime import date

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from buurbak.models.blocked_period import BlockedPeriod
from buurbak.models.trailer import Trailer
from buurbak.models.user import User
from buurbak.services import trailer_service
from buurbak.services.errors import BlockedPeriodNotFoundError, OwnershipError

logger = logging.getLogger(__name__)


async def list_blocked_periods(
    session: AsyncSession,
    *,
    user: User,
    trailer_id: uuid.UUID | None = None,
) -> list[BlockedPeriod]:
    """Return the user's blocked periods, optionally those affecting one trailer.

    Filtering by trailer keeps the user's global periods, since they apply to
    every trailer the user owns.
    """
    stmt: Select[tuple[BlockedPeriod]] = (
        select(BlockedPeriod)
        .where(BlockedPeriod.user_id == user.id)
        .order_by(BlockedPeriod.start_date.asc(), BlockedPeriod.end_date.asc())
    )
    if trailer_id is not None:
        stmt = stmt.where(
            (BlockedPeriod.trailer_id == trailer_id) | BlockedPeriod.trailer_id.is_(None)
        )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def add_blocked_period(
    session: AsyncSession,
    *,
    user: User,
    start_date: date,
    end_date: date,
    reason: str | None = None,
    trailer_id: uuid.UUID | None = None,
) -> BlockedPeriod:
    """Block ``[start_date, end_date]`` for one trailer or, without one, all of them."""
    if not user.is_lessor:
        raise OwnershipError("You need to be a lessor to block dates")
    if start_date > end_date:
        raise ValueError("start_date must be on or before end_date")
    if trailer_id is not None:
        await trailer_service.ensure_owner(session, trailer_id=trailer_id, user=user)

    period = BlockedPeriod(
        user_id=user.id,
        trailer_id=trailer_id,
        start_date=start_date,
        end_date=end_date,
        reason=reason,
    )
    session.add(period)
    await session.commit()
    await session.refresh(period)
    logger.info(
        "Blocked %s..%s for user %s (trailer %s)",
        start_date,
        end_date,
        user.id,
        trailer_id or "all",
    )
    return period


async def remove_blocked_period(
    session: AsyncSession, *, user: User, period_id: uuid.UUID
) -> None:
    """Delete a blocked period owned by ``user``."""
    period = await session.get(BlockedPeriod, period_id)
    if period is None:
        raise BlockedPeriodNotFoundError()
    if period.user_id != user.id:
        trailer = (
            await session.get(Trailer, period.trailer_id)
            if period.trailer_id is not None
            else None
        )
        if trailer is None or trailer.owner_id != user.id:
            raise OwnershipError("You do not own this blocked period")
    await session.delete(period)
    await session.commit()
    logger.info("Removed blocked period %s for user %s", period_id, user.id)


async def remove_periods_covering(
    session: AsyncSession,
    *,
    user: User,
    trailer_id: uuid.UUID,
    days: Sequence[date],
) -> list[uuid.UUID]:
    """Delete every period of ``user`` that affects ``trailer_id`` on any of ``days``.

    Periods are removed whole; a long block touching one selected day goes
    away entirely.
    """
    if not days:
        return []
    periods = await list_blocked_periods(session, user=user, trailer_id=trailer_id)
    doomed = [
        period
        for period in periods
        if any(period.start_date <= day <= period.end_date for day in days)
    ]
    for period in doomed:
        await session.delete(period)
    if doomed:
        await session.commit()
        logger.info(
            "Removed %d blocked period(s) for user %s on trailer %s",
            len(doomed),
            user.id,
            trailer_id,
        )
    return [period.id for period in doomed]
