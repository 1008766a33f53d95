"""Lessor month calendar and block/unblock selections."""
from __future__ import annotations

import calendar
import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from buurbak.models.blocked_period import BlockedPeriod
from buurbak.models.user import User
from buurbak.schemas.calendar import SelectionMode
from buurbak.services import (
    availability_service,
    blocked_period_service,
    trailer_service,
)
from buurbak.services.availability_resolver import (
    DayStatus,
    TrailerSchedule,
    blocked_periods_on,
    rentals_on,
    resolve_day_status,
)
from buurbak.services.errors import OwnershipError

_WEEK = calendar.Calendar(firstweekday=calendar.MONDAY)


@dataclass(slots=True)
class CalendarDay:
    date: date
    in_month: bool
    status: DayStatus
    renter_name: str | None = None
    rental_count: int = 0
    blocked_period_id: uuid.UUID | None = None


@dataclass(slots=True)
class SelectionOutcome:
    mode: SelectionMode
    created: BlockedPeriod | None = None
    removed_ids: list[uuid.UUID] = field(default_factory=list)
    skipped_dates: list[date] = field(default_factory=list)


def month_grid(year: int, month: int) -> list[date]:
    """Whole Monday-first weeks covering ``month``, padded with adjacent days."""
    if not 1 <= month <= 12:
        raise ValueError("month must be between 1 and 12")
    return list(_WEEK.itermonthdates(year, month))


def build_month(schedule: TrailerSchedule, year: int, month: int) -> list[CalendarDay]:
    """Resolve every cell of the month grid.

    Rented days carry the first renter's name; blocked days the id of a
    covering period so the UI can offer to remove it.
    """
    cells: list[CalendarDay] = []
    for day in month_grid(year, month):
        status = resolve_day_status(schedule, day)
        cell = CalendarDay(date=day, in_month=day.month == month, status=status)
        if status is DayStatus.RENTED:
            occupying = rentals_on(schedule, day)
            cell.rental_count = len(occupying)
            cell.renter_name = occupying[0].renter_name
        elif status is DayStatus.BLOCKED:
            cell.blocked_period_id = blocked_periods_on(schedule, day)[0].id
        cells.append(cell)
    return cells


def select_days(
    schedule: TrailerSchedule, mode: SelectionMode, days: Iterable[date]
) -> tuple[list[date], list[date]]:
    """Split ``days`` into selectable and skipped, both sorted.

    Rented days cannot be blocked; any day may be picked for unblocking.
    """
    selected: list[date] = []
    skipped: list[date] = []
    for day in sorted(set(days)):
        if mode is SelectionMode.BLOCK and resolve_day_status(schedule, day) is DayStatus.RENTED:
            skipped.append(day)
        else:
            selected.append(day)
    return selected, skipped


async def get_month_calendar(
    session: AsyncSession,
    *,
    user: User,
    trailer_id: uuid.UUID,
    year: int,
    month: int,
) -> list[CalendarDay]:
    await trailer_service.ensure_owner(session, trailer_id=trailer_id, user=user)
    grid = month_grid(year, month)
    schedule = await availability_service.load_schedule(
        session, trailer_id=trailer_id, date_from=grid[0], date_to=grid[-1]
    )
    return build_month(schedule, year, month)


async def apply_selection(
    session: AsyncSession,
    *,
    user: User,
    trailer_id: uuid.UUID,
    mode: SelectionMode,
    days: Iterable[date],
    reason: str | None = None,
) -> SelectionOutcome:
    """Block or unblock the selected days of one trailer."""
    if not user.is_lessor:
        raise OwnershipError("You need to be a lessor to manage the calendar")
    await trailer_service.ensure_owner(session, trailer_id=trailer_id, user=user)
    days = list(days)
    if not days:
        raise ValueError("Select at least one date")

    schedule = await availability_service.load_schedule(
        session, trailer_id=trailer_id, date_from=min(days), date_to=max(days)
    )
    selected, skipped = select_days(schedule, mode, days)
    outcome = SelectionOutcome(mode=mode, skipped_dates=skipped)
    if not selected:
        return outcome

    if mode is SelectionMode.BLOCK:
        outcome.created = await blocked_period_service.add_blocked_period(
            session,
            user=user,
            start_date=selected[0],
            end_date=selected[-1],
            reason=reason,
            trailer_id=trailer_id,
        )
    else:
        outcome.removed_ids = await blocked_period_service.remove_periods_covering(
            session, user=user, trailer_id=trailer_id, days=selected
        )
    return outcome
