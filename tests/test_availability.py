"""Tests for calendar availability predicates and day stepping."""

from datetime import date, datetime, time

import pytest
from pydantic import ValidationError

from taskplan.blackouts import BlackoutSlot
from taskplan.exceptions import SchedulingError
from taskplan.scheduler import (
    SchedulingConfig,
    WorkCalendar,
    is_blocked,
    is_full_day_blocked,
    is_weekend,
    is_working_window,
    next_available_instant,
)
from tests.conftest import blackout_range, full_day, partial


class TestWorkingWindow:
    """Tests for the [10:30, 18:00) work window."""

    def test_window_opens_at_half_past_ten(self) -> None:
        assert is_working_window(datetime(2025, 1, 6, 10, 30))
        assert not is_working_window(datetime(2025, 1, 6, 10, 29))

    def test_window_closes_at_six(self) -> None:
        assert is_working_window(datetime(2025, 1, 6, 17, 59))
        assert not is_working_window(datetime(2025, 1, 6, 18, 0))

    def test_custom_window(self) -> None:
        assert is_working_window(datetime(2025, 1, 6, 9, 0), time(9, 0), time(17, 0))
        assert not is_working_window(datetime(2025, 1, 6, 17, 0), time(9, 0), time(17, 0))


def test_is_weekend() -> None:
    assert is_weekend(date(2025, 1, 4))  # Saturday
    assert is_weekend(date(2025, 1, 5))  # Sunday
    assert not is_weekend(date(2025, 1, 6))  # Monday
    assert not is_weekend(date(2025, 1, 10))  # Friday


class TestIsBlocked:
    """Tests for blackout slot matching."""

    def test_full_day_slot_blocks_whole_day(self) -> None:
        slots = [full_day(date(2025, 1, 6))]
        assert is_blocked(datetime(2025, 1, 6, 0, 0), slots)
        assert is_blocked(datetime(2025, 1, 6, 12, 0), slots)
        assert not is_blocked(datetime(2025, 1, 7, 12, 0), slots)

    def test_partial_slot_bounds_are_inclusive(self) -> None:
        slots = [partial(date(2025, 1, 6), "14:00", "15:00")]
        assert not is_blocked(datetime(2025, 1, 6, 13, 59), slots)
        assert is_blocked(datetime(2025, 1, 6, 14, 0), slots)
        assert is_blocked(datetime(2025, 1, 6, 14, 30), slots)
        assert is_blocked(datetime(2025, 1, 6, 15, 0), slots)
        assert not is_blocked(datetime(2025, 1, 6, 15, 1), slots)

    def test_partial_slot_only_applies_to_its_date(self) -> None:
        slots = [partial(date(2025, 1, 6), "14:00", "15:00")]
        assert not is_blocked(datetime(2025, 1, 7, 14, 30), slots)

    def test_malformed_partial_slot_never_blocks(self) -> None:
        slot = BlackoutSlot(date=date(2025, 1, 6), is_full_day=False, start_time=time(14, 0))
        assert slot.is_malformed
        assert not is_blocked(datetime(2025, 1, 6, 14, 0), [slot])
        assert not is_blocked(datetime(2025, 1, 6, 10, 30), [slot])

    def test_full_day_check_ignores_partial_slots(self) -> None:
        slots = [partial(date(2025, 1, 6), "10:00", "19:00"), full_day(date(2025, 1, 7))]
        assert not is_full_day_blocked(date(2025, 1, 6), slots)
        assert is_full_day_blocked(date(2025, 1, 7), slots)


class TestBlackoutSlotValidation:
    """Tests for BlackoutSlot parsing."""

    def test_aliases_and_time_strings(self) -> None:
        slot = BlackoutSlot.model_validate(
            {"date": "2025-01-06", "isFullDay": False, "startTime": "09:15", "endTime": "11:45"}
        )
        assert slot.date == date(2025, 1, 6)
        assert slot.start_time == time(9, 15)
        assert slot.end_time == time(11, 45)

    def test_yaml_base60_integer_times(self) -> None:
        # YAML 1.1 reads an unquoted 10:30 as 630
        slot = BlackoutSlot.model_validate(
            {"date": "2025-01-06", "isFullDay": False, "startTime": 630, "endTime": 720}
        )
        assert slot.start_time == time(10, 30)
        assert slot.end_time == time(12, 0)

    def test_empty_time_strings_are_missing(self) -> None:
        slot = BlackoutSlot.model_validate(
            {"date": "2025-01-06", "isFullDay": False, "startTime": "", "endTime": ""}
        )
        assert slot.start_time is None
        assert slot.is_malformed

    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(ValidationError, match="end time must be after start time"):
            partial(date(2025, 1, 6), "15:00", "14:00")

    def test_full_day_slot_is_not_malformed(self) -> None:
        assert not full_day(date(2025, 1, 6)).is_malformed


class TestNextAvailableInstant:
    """Tests for advancing to the next available work day."""

    def test_next_weekday(self) -> None:
        result = next_available_instant(datetime(2025, 1, 6, 15, 0), [])
        assert result == datetime(2025, 1, 7, 10, 30)

    def test_skips_weekend(self) -> None:
        result = next_available_instant(datetime(2025, 1, 10, 12, 0), [])
        assert result == datetime(2025, 1, 13, 10, 30)

    def test_skips_full_day_blackout(self) -> None:
        result = next_available_instant(datetime(2025, 1, 10, 12, 0), [full_day(date(2025, 1, 13))])
        assert result == datetime(2025, 1, 14, 10, 30)

    def test_skips_day_whose_anchor_is_in_partial_slot(self) -> None:
        slots = [partial(date(2025, 1, 7), "10:00", "11:00")]
        result = next_available_instant(datetime(2025, 1, 6, 12, 0), slots)
        assert result == datetime(2025, 1, 8, 10, 30)

    def test_partial_slot_after_anchor_does_not_skip_day(self) -> None:
        slots = [partial(date(2025, 1, 7), "14:00", "15:00")]
        result = next_available_instant(datetime(2025, 1, 6, 12, 0), slots)
        assert result == datetime(2025, 1, 7, 10, 30)

    def test_raises_when_calendar_blocked_beyond_horizon(self) -> None:
        config = SchedulingConfig(max_lookahead_days=30)
        slots = blackout_range(date(2025, 1, 7), 40)
        with pytest.raises(SchedulingError, match="No available work day within 30 days"):
            next_available_instant(datetime(2025, 1, 6, 12, 0), slots, config)

    def test_uses_configured_window_start(self) -> None:
        config = SchedulingConfig(work_day_start=time(9, 0), work_day_end=time(17, 0))
        result = next_available_instant(datetime(2025, 1, 6, 12, 0), [], config)
        assert result == datetime(2025, 1, 7, 9, 0)


class TestWorkCalendar:
    """Tests for the calendar helper used by the allocator and projector."""

    def test_snap_before_window_moves_to_same_day_start(self) -> None:
        calendar = WorkCalendar()
        assert calendar.snap_to_window(datetime(2025, 1, 6, 9, 0)) == datetime(2025, 1, 6, 10, 30)

    def test_snap_after_window_moves_to_next_day_start(self) -> None:
        calendar = WorkCalendar()
        assert calendar.snap_to_window(datetime(2025, 1, 6, 18, 0)) == datetime(2025, 1, 7, 10, 30)
        # Next calendar day even when it is a Saturday
        assert calendar.snap_to_window(datetime(2025, 1, 10, 19, 0)) == datetime(
            2025, 1, 11, 10, 30
        )

    def test_snap_inside_window_is_unchanged(self) -> None:
        calendar = WorkCalendar()
        instant = datetime(2025, 1, 6, 12, 15)
        assert calendar.snap_to_window(instant) == instant

    def test_hours_left_in_window(self) -> None:
        calendar = WorkCalendar()
        assert calendar.hours_left_in_window(datetime(2025, 1, 6, 15, 30)) == 2.5
        assert calendar.hours_left_in_window(datetime(2025, 1, 6, 10, 30)) == 7.5
        assert calendar.hours_left_in_window(datetime(2025, 1, 6, 19, 0)) == 0.0

    def test_day_availability(self) -> None:
        calendar = WorkCalendar([full_day(date(2025, 1, 7))])
        assert calendar.is_day_available(date(2025, 1, 6))
        assert not calendar.is_day_available(date(2025, 1, 7))
        assert not calendar.is_day_available(date(2025, 1, 11))
