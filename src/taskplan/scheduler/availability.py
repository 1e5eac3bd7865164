"""Calendar availability: work window, weekends and blackout slots.

All instants are naive datetimes in a single local reference time.
"""

from collections.abc import Sequence
from datetime import date, datetime, time, timedelta

from taskplan.blackouts import BlackoutSlot
from taskplan.exceptions import SchedulingError
from taskplan.logger import get_logger

from .config import SchedulingConfig

logger = get_logger()

SECONDS_PER_HOUR = 3600.0
SATURDAY = 5  # date.weekday() value


def is_weekend(day: date) -> bool:
    """Check whether the day is a Saturday or Sunday."""
    return day.weekday() >= SATURDAY


def is_working_window(
    instant: datetime, start: time = time(10, 30), end: time = time(18, 0)
) -> bool:
    """Check whether the instant's clock time is within [start, end)."""
    return start <= instant.time() < end


def is_blocked(instant: datetime, slots: Sequence[BlackoutSlot]) -> bool:
    """Check whether any blackout slot covers the instant."""
    return any(slot.blocks(instant) for slot in slots)


def is_full_day_blocked(day: date, slots: Sequence[BlackoutSlot]) -> bool:
    """Check whether a full-day slot covers the day (partial slots are ignored)."""
    return any(slot.blocks_whole_day(day) for slot in slots)


def anchor(day: date, at: time = time(10, 30)) -> datetime:
    """Return the instant at the given clock time on the day."""
    return datetime.combine(day, at)


def next_available_instant(
    instant: datetime,
    slots: Sequence[BlackoutSlot],
    config: SchedulingConfig | None = None,
) -> datetime:
    """Find the work-window anchor of the next available day after instant's day.

    Advances whole calendar days until the day's anchor (work_day_start) is
    neither on a weekend nor blocked. Callers wanting a different clock time
    must re-snap the result themselves.

    Raises:
        SchedulingError: If no available day exists within max_lookahead_days
    """
    config = config or SchedulingConfig()
    day = instant.date()
    for _ in range(config.max_lookahead_days):
        day += timedelta(days=1)
        candidate = anchor(day, config.work_day_start)
        if is_weekend(day):
            logger.checks(f"  Skipping {day}: weekend")
            continue
        if is_blocked(candidate, slots):
            logger.checks(f"  Skipping {day}: blacked out")
            continue
        return candidate
    raise SchedulingError(
        f"No available work day within {config.max_lookahead_days} days after "
        f"{instant.date()}; check the blackout calendar"
    )


class WorkCalendar:
    """Blackout slots and work window bundled for cursor stepping.

    Holds no cursor state of its own; every method is a pure function of its
    arguments, so one calendar can serve the allocator and projector alike.
    """

    def __init__(
        self,
        slots: Sequence[BlackoutSlot] | None = None,
        config: SchedulingConfig | None = None,
    ) -> None:
        """Bind slots to a config, warning once for each partial slot without times."""
        self.slots: tuple[BlackoutSlot, ...] = tuple(slots or ())
        self.config = config or SchedulingConfig()
        malformed = [slot for slot in self.slots if slot.is_malformed]
        for slot in malformed:
            logger.warning(
                f"Blackout slot on {slot.date} is partial but lacks start/end time; "
                "it will not block anything"
            )

    def day_start(self, day: date) -> datetime:
        """Window opening instant on day."""
        return anchor(day, self.config.work_day_start)

    def day_end(self, day: date) -> datetime:
        """Window closing instant on day."""
        return anchor(day, self.config.work_day_end)

    def is_blocked(self, instant: datetime) -> bool:
        """Check whether any slot covers instant."""
        return is_blocked(instant, self.slots)

    def is_day_available(self, day: date) -> bool:
        """Check the day is a weekday whose window anchor is not blocked."""
        return not is_weekend(day) and not is_blocked(self.day_start(day), self.slots)

    def snap_to_window(self, instant: datetime) -> datetime:
        """Move instant into the work window.

        Before the window opens snaps to the same day's start; at or after it
        closes moves to the next calendar day's start (availability unchecked).
        """
        if instant.time() < self.config.work_day_start:
            return self.day_start(instant.date())
        if instant.time() >= self.config.work_day_end:
            return self.day_start(instant.date() + timedelta(days=1))
        return instant

    def next_available(self, instant: datetime) -> datetime:
        """Window opening of the next available day strictly after instant's day."""
        return next_available_instant(instant, self.slots, self.config)

    def hours_left_in_window(self, instant: datetime) -> float:
        """Hours from instant until the window closes on the same day."""
        remaining = self.day_end(instant.date()) - instant
        return max(remaining.total_seconds() / SECONDS_PER_HOUR, 0.0)
