"""Unit tests for day and time-slot resolution."""
from __future__ import annotations

import uuid
from datetime import date, time

import pytest

from buurbak.models.availability import DayOfWeek, DaySegment, DayStatus
from buurbak.services.availability_resolver import (
    BlockedRange,
    DayException,
    OccupiedRange,
    TimeWindow,
    TrailerSchedule,
    WeeklyRule,
    find_range_conflicts,
    iter_days,
    parse_slot,
    rentals_on,
    resolve_day_status,
    resolve_days,
    resolve_time_slot,
    time_options,
)

MONDAY = date(2030, 9, 2)
TUESDAY = date(2030, 9, 3)
SUNDAY = date(2030, 9, 8)


def _schedule(**kwargs) -> TrailerSchedule:
    return TrailerSchedule(trailer_id=uuid.uuid4(), **kwargs)


def _monday_morning_only() -> TrailerSchedule:
    return _schedule(
        weekly={
            DayOfWeek.MONDAY: WeeklyRule(
                day=DayOfWeek.MONDAY,
                available=True,
                slots=(TimeWindow(time(9, 0), time(12, 0)),),
            )
        }
    )


def _blocked(start: date, end: date) -> BlockedRange:
    return BlockedRange(id=uuid.uuid4(), start_date=start, end_date=end)


def _rental(start: date, end: date, renter: str = "Ruben Huurder") -> OccupiedRange:
    return OccupiedRange(id=uuid.uuid4(), start_date=start, end_date=end, renter_name=renter)


def test_trailer_without_template_is_available_every_day() -> None:
    schedule = _schedule()
    for offset in range(7):
        assert resolve_day_status(schedule, date(2030, 9, 2 + offset)) is DayStatus.AVAILABLE


def test_missing_weekday_row_counts_as_open() -> None:
    schedule = _monday_morning_only()
    assert resolve_day_status(schedule, TUESDAY) is DayStatus.AVAILABLE
    verdict = resolve_time_slot(schedule, TUESDAY, "14:00-15:00")
    assert verdict.available


def test_closed_weekday_is_unavailable() -> None:
    schedule = _schedule(
        weekly={DayOfWeek.SUNDAY: WeeklyRule(day=DayOfWeek.SUNDAY, available=False)}
    )
    assert resolve_day_status(schedule, SUNDAY) is DayStatus.UNAVAILABLE
    assert time_options(schedule, SUNDAY) == []


def test_window_outside_weekly_slot_is_unavailable() -> None:
    schedule = _monday_morning_only()
    assert resolve_day_status(schedule, MONDAY) is DayStatus.AVAILABLE

    outside = resolve_time_slot(schedule, MONDAY, "14:00-15:00")
    assert not outside.available
    assert outside.day_status is DayStatus.AVAILABLE
    assert [str(window) for window in outside.open_windows] == ["09:00-12:00"]

    assert resolve_time_slot(schedule, MONDAY, "09:30-11:00").available
    assert not resolve_time_slot(schedule, MONDAY, "11:30-12:30").available


def test_named_segments_against_weekly_slots() -> None:
    schedule = _monday_morning_only()
    assert resolve_time_slot(schedule, MONDAY, DaySegment.MORNING).available
    assert not resolve_time_slot(schedule, MONDAY, "afternoon").available
    assert not resolve_time_slot(schedule, MONDAY, "Evening").available


def test_exception_replaces_weekly_rule() -> None:
    schedule = _schedule(
        weekly={DayOfWeek.SUNDAY: WeeklyRule(day=DayOfWeek.SUNDAY, available=False)},
        exceptions={
            SUNDAY: DayException(
                on_date=SUNDAY,
                segments={DaySegment.AFTERNOON: TimeWindow(time(13, 0), time(15, 0))},
            )
        },
    )
    assert resolve_day_status(schedule, SUNDAY) is DayStatus.AVAILABLE
    assert resolve_time_slot(schedule, SUNDAY, "afternoon").available
    assert not resolve_time_slot(schedule, SUNDAY, "morning").available
    assert resolve_time_slot(schedule, SUNDAY, "13:30-14:30").available
    assert not resolve_time_slot(schedule, SUNDAY, "15:00-16:00").available
    assert time_options(schedule, SUNDAY) == ["13:00", "13:30", "14:00", "14:30"]


def test_exception_with_no_segments_closes_open_weekday() -> None:
    schedule = _schedule(exceptions={MONDAY: DayException(on_date=MONDAY)})
    assert resolve_day_status(schedule, MONDAY) is DayStatus.UNAVAILABLE
    assert resolve_day_status(schedule, TUESDAY) is DayStatus.AVAILABLE


def test_blocked_period_beats_schedule() -> None:
    schedule = _schedule(
        weekly={DayOfWeek.SUNDAY: WeeklyRule(day=DayOfWeek.SUNDAY, available=False)},
        blocked=[_blocked(date(2030, 9, 6), SUNDAY)],
    )
    assert resolve_day_status(schedule, date(2030, 9, 5)) is DayStatus.AVAILABLE
    assert resolve_day_status(schedule, date(2030, 9, 6)) is DayStatus.BLOCKED
    assert resolve_day_status(schedule, SUNDAY) is DayStatus.BLOCKED

    verdict = resolve_time_slot(schedule, date(2030, 9, 6), "morning")
    assert not verdict.available
    assert verdict.day_status is DayStatus.BLOCKED


def test_rented_beats_blocked() -> None:
    schedule = _schedule(
        blocked=[_blocked(date(2025, 9, 3), date(2025, 9, 3))],
        rentals=[_rental(date(2025, 9, 1), date(2025, 9, 5))],
    )
    for day in range(1, 6):
        assert resolve_day_status(schedule, date(2025, 9, day)) is DayStatus.RENTED
    assert resolve_day_status(schedule, date(2025, 9, 6)) is DayStatus.AVAILABLE
    assert time_options(schedule, date(2025, 9, 3)) == []


def test_removing_block_restores_previous_status() -> None:
    schedule = _monday_morning_only()
    before = {day: resolve_day_status(schedule, day) for day in (MONDAY, TUESDAY)}

    period = _blocked(MONDAY, TUESDAY)
    schedule.blocked.append(period)
    assert resolve_day_status(schedule, MONDAY) is DayStatus.BLOCKED

    schedule.blocked.remove(period)
    assert {day: resolve_day_status(schedule, day) for day in (MONDAY, TUESDAY)} == before


def test_open_day_without_slots_offers_default_hours() -> None:
    options = time_options(_schedule(), MONDAY)
    assert options[0] == "08:00"
    assert options[-1] == "21:30"
    assert len(options) == 28


def test_find_range_conflicts_reports_each_day() -> None:
    schedule = _schedule(
        weekly={DayOfWeek.SUNDAY: WeeklyRule(day=DayOfWeek.SUNDAY, available=False)},
        blocked=[_blocked(date(2030, 9, 4), date(2030, 9, 4))],
        rentals=[_rental(date(2030, 9, 6), date(2030, 9, 6))],
    )
    conflicts = find_range_conflicts(schedule, MONDAY, SUNDAY)
    assert [(item.day, item.status) for item in conflicts] == [
        (date(2030, 9, 4), DayStatus.BLOCKED),
        (date(2030, 9, 6), DayStatus.RENTED),
        (SUNDAY, DayStatus.UNAVAILABLE),
    ]
    assert find_range_conflicts(schedule, MONDAY, TUESDAY) == []


def test_resolve_days_keeps_calendar_order() -> None:
    schedule = _schedule(
        weekly={DayOfWeek.SUNDAY: WeeklyRule(day=DayOfWeek.SUNDAY, available=False)},
        blocked=[_blocked(date(2030, 9, 4), date(2030, 9, 4))],
        rentals=[_rental(date(2030, 9, 6), date(2030, 9, 6))],
    )
    statuses = resolve_days(schedule, iter_days(MONDAY, SUNDAY))
    assert list(statuses) == list(iter_days(MONDAY, SUNDAY))
    assert statuses[MONDAY] is DayStatus.AVAILABLE
    assert statuses[date(2030, 9, 4)] is DayStatus.BLOCKED
    assert statuses[date(2030, 9, 6)] is DayStatus.RENTED
    assert statuses[SUNDAY] is DayStatus.UNAVAILABLE


def test_find_range_conflicts_rejects_reversed_range() -> None:
    with pytest.raises(ValueError):
        find_range_conflicts(_schedule(), TUESDAY, MONDAY)


def test_rentals_on_orders_by_start_date() -> None:
    late = _rental(date(2030, 9, 3), date(2030, 9, 4), renter="Second")
    early = _rental(date(2030, 9, 1), date(2030, 9, 3), renter="First")
    schedule = _schedule(rentals=[late, early])
    assert [item.renter_name for item in rentals_on(schedule, TUESDAY)] == ["First", "Second"]


@pytest.mark.parametrize("value", ["lunch", "12:00-11:00", "9-10", "10:00"])
def test_parse_slot_rejects_malformed_values(value: str) -> None:
    with pytest.raises(ValueError):
        parse_slot(value)


def test_parse_slot_accepts_segments_and_windows() -> None:
    assert parse_slot(" Morning ") is DaySegment.MORNING
    assert parse_slot("09:00-10:30") == TimeWindow(time(9, 0), time(10, 30))
