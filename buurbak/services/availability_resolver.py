"""Availability resolution for trailer calendars.

Everything in this module is pure: callers gather a :class:`TrailerSchedule`
snapshot once (see ``availability_service.load_schedule``) and then ask for
day statuses, time-window verdicts or booking conflicts as often as needed.

Layers, from weakest to strongest:

* the weekly template (a missing weekday, or no template at all, is open);
* a per-date exception, which replaces the weekly rule for that date;
* blocked periods, which close the day whatever the schedule says;
* confirmed or active rentals, which occupy the day.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta

from buurbak.models.availability import DayOfWeek, DaySegment, DayStatus


@dataclass(slots=True, frozen=True)
class TimeWindow:
    """Half-open ``[start, end)`` window within a single day."""

    start: time
    end: time

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError("Time window must end after it starts")

    @classmethod
    def parse(cls, value: str) -> TimeWindow:
        """Parse ``HH:MM-HH:MM``."""
        try:
            start_raw, end_raw = value.split("-", 1)
            start = time.fromisoformat(start_raw.strip())
            end = time.fromisoformat(end_raw.strip())
        except ValueError as exc:
            raise ValueError(
                f"Invalid time window {value!r}, expected HH:MM-HH:MM"
            ) from exc
        return cls(start=start, end=end)

    def contains(self, other: TimeWindow) -> bool:
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: TimeWindow) -> bool:
        return self.start < other.end and other.start < self.end

    def __str__(self) -> str:
        return f"{self.start:%H:%M}-{self.end:%H:%M}"


SEGMENT_WINDOWS: dict[DaySegment, TimeWindow] = {
    DaySegment.MORNING: TimeWindow(time(8, 0), time(12, 0)),
    DaySegment.AFTERNOON: TimeWindow(time(12, 0), time(17, 0)),
    DaySegment.EVENING: TimeWindow(time(17, 0), time(22, 0)),
}

# Open days without explicit slots accept any time inside the default segments.
OPEN_DAY_WINDOW = TimeWindow(time(8, 0), time(22, 0))

TIME_OPTION_STEP = timedelta(minutes=30)


@dataclass(slots=True, frozen=True)
class WeeklyRule:
    """Weekly template entry for one weekday."""

    day: DayOfWeek
    available: bool
    slots: tuple[TimeWindow, ...] = ()


@dataclass(slots=True, frozen=True)
class DayException:
    """Per-date override; only enabled segments appear in ``segments``."""

    on_date: date
    segments: dict[DaySegment, TimeWindow] = field(default_factory=dict)

    @property
    def is_open(self) -> bool:
        return bool(self.segments)


@dataclass(slots=True, frozen=True)
class BlockedRange:
    """A blocked period that applies to the scheduled trailer."""

    id: uuid.UUID
    start_date: date
    end_date: date
    trailer_id: uuid.UUID | None = None
    reason: str | None = None

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(slots=True, frozen=True)
class OccupiedRange:
    """A confirmed or active rental of the scheduled trailer."""

    id: uuid.UUID
    start_date: date
    end_date: date
    renter_name: str | None = None

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(slots=True)
class TrailerSchedule:
    """Snapshot of every scheduling layer for one trailer."""

    trailer_id: uuid.UUID
    weekly: dict[DayOfWeek, WeeklyRule] = field(default_factory=dict)
    exceptions: dict[date, DayException] = field(default_factory=dict)
    blocked: list[BlockedRange] = field(default_factory=list)
    rentals: list[OccupiedRange] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class SlotVerdict:
    """Outcome of a sub-day availability question."""

    available: bool
    day_status: DayStatus
    open_windows: tuple[TimeWindow, ...] = ()


@dataclass(slots=True, frozen=True)
class RangeConflict:
    """A day inside a requested range that cannot be booked."""

    day: date
    status: DayStatus


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date from ``start`` to ``end`` inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def parse_slot(value: str) -> DaySegment | TimeWindow:
    """Interpret a segment name (``morning``) or an ``HH:MM-HH:MM`` window."""
    normalized = value.strip().lower()
    try:
        return DaySegment(normalized)
    except ValueError:
        return TimeWindow.parse(normalized)


def rentals_on(schedule: TrailerSchedule, day: date) -> list[OccupiedRange]:
    """Return the rentals occupying ``day`` ordered by start date."""
    matches = [rental for rental in schedule.rentals if rental.covers(day)]
    matches.sort(key=lambda rental: (rental.start_date, str(rental.id)))
    return matches


def blocked_periods_on(schedule: TrailerSchedule, day: date) -> list[BlockedRange]:
    """Return the blocked periods covering ``day``."""
    return [period for period in schedule.blocked if period.covers(day)]


def is_open_by_schedule(schedule: TrailerSchedule, day: date) -> bool:
    """Whether the weekly template and exceptions leave ``day`` open."""
    exception = schedule.exceptions.get(day)
    if exception is not None:
        return exception.is_open
    rule = schedule.weekly.get(DayOfWeek.from_date(day))
    if rule is None:
        return True
    return rule.available


def open_windows(schedule: TrailerSchedule, day: date) -> tuple[TimeWindow, ...]:
    """Return the time windows the schedule opens on ``day``."""
    exception = schedule.exceptions.get(day)
    if exception is not None:
        return tuple(
            exception.segments[segment]
            for segment in DaySegment
            if segment in exception.segments
        )
    rule = schedule.weekly.get(DayOfWeek.from_date(day))
    if rule is None:
        return (OPEN_DAY_WINDOW,)
    if not rule.available:
        return ()
    return rule.slots or (OPEN_DAY_WINDOW,)


def resolve_day_status(schedule: TrailerSchedule, day: date) -> DayStatus:
    """Classify ``day``; rented beats blocked beats unavailable."""
    if any(rental.covers(day) for rental in schedule.rentals):
        return DayStatus.RENTED
    if any(period.covers(day) for period in schedule.blocked):
        return DayStatus.BLOCKED
    if not is_open_by_schedule(schedule, day):
        return DayStatus.UNAVAILABLE
    return DayStatus.AVAILABLE


def resolve_time_slot(
    schedule: TrailerSchedule,
    day: date,
    slot: DaySegment | TimeWindow | str,
) -> SlotVerdict:
    """Decide whether a segment or explicit window on ``day`` is bookable.

    Blocked and rented days close every segment; rentals and blocks are
    tracked per day only.
    """
    if isinstance(slot, str):
        slot = parse_slot(slot)

    status = resolve_day_status(schedule, day)
    if status is not DayStatus.AVAILABLE:
        return SlotVerdict(available=False, day_status=status)

    windows = open_windows(schedule, day)
    exception = schedule.exceptions.get(day)
    if isinstance(slot, DaySegment):
        if exception is not None:
            available = slot in exception.segments
        else:
            target = SEGMENT_WINDOWS[slot]
            available = any(window.overlaps(target) for window in windows)
    else:
        available = any(window.contains(slot) for window in windows)
    return SlotVerdict(available=available, day_status=status, open_windows=windows)


def _window_starts(window: TimeWindow) -> Iterator[time]:
    anchor = date.min
    cursor = datetime.combine(anchor, window.start)
    end = datetime.combine(anchor, window.end)
    while cursor < end:
        yield cursor.time()
        cursor += TIME_OPTION_STEP


def time_options(schedule: TrailerSchedule, day: date) -> list[str]:
    """Half-hour pickup/return times offered on ``day`` as ``HH:MM``."""
    if resolve_day_status(schedule, day) is not DayStatus.AVAILABLE:
        return []
    options = {
        start.strftime("%H:%M")
        for window in open_windows(schedule, day)
        for start in _window_starts(window)
    }
    return sorted(options)


def find_range_conflicts(
    schedule: TrailerSchedule, start: date, end: date
) -> list[RangeConflict]:
    """Return every day in ``[start, end]`` that is not available."""
    if start > end:
        raise ValueError("start date must be on or before end date")
    conflicts: list[RangeConflict] = []
    for day in iter_days(start, end):
        status = resolve_day_status(schedule, day)
        if status is not DayStatus.AVAILABLE:
            conflicts.append(RangeConflict(day=day, status=status))
    return conflicts


def resolve_days(
    schedule: TrailerSchedule, days: Iterable[date]
) -> dict[date, DayStatus]:
    """Resolve several days at once."""
    return {day: resolve_day_status(schedule, day) for day in days}


__all__ = [
    "BlockedRange",
    "DayException",
    "DayStatus",
    "OPEN_DAY_WINDOW",
    "OccupiedRange",
    "RangeConflict",
    "SEGMENT_WINDOWS",
    "SlotVerdict",
    "TimeWindow",
    "TrailerSchedule",
    "WeeklyRule",
    "blocked_periods_on",
    "find_range_conflicts",
    "is_open_by_schedule",
    "iter_days",
    "open_windows",
    "parse_slot",
    "rentals_on",
    "resolve_day_status",
    "resolve_days",
    "resolve_time_slot",
    "time_options",
]
