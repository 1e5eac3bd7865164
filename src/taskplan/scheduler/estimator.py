"""Coarse estimate of working hours available before a deadline."""

from collections.abc import Sequence
from datetime import datetime, timedelta

from taskplan.blackouts import BlackoutSlot
from taskplan.logger import get_logger

from .availability import is_full_day_blocked, is_weekend

logger = get_logger()

DEFAULT_WORKING_HOURS_PER_DAY = 8.0


def calculate_available_hours(
    deadline: datetime,
    slots: Sequence[BlackoutSlot],
    working_hours_per_day: float = DEFAULT_WORKING_HOURS_PER_DAY,
    now: datetime | None = None,
) -> float:
    """Estimate working hours between now and the deadline.

    Counts whole days from today up to, but excluding, the deadline's day and
    credits working_hours_per_day for each weekday without a full-day blackout.
    Partial blackout slots and the daily work window are ignored, so this is
    coarser than what the allocator can actually place.

    Returns:
        Available hours, or 0 if the deadline is already past
    """
    now = now or datetime.now()  # noqa: DTZ005
    if deadline < now:
        return 0.0

    total = 0.0
    day = now.date()
    while day < deadline.date():
        if not is_weekend(day) and not is_full_day_blocked(day, slots):
            total += working_hours_per_day
        day += timedelta(days=1)

    logger.checks(f"Available hours before {deadline:%Y-%m-%d %H:%M}: {total:g}h")
    return total
