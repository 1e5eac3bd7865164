"""Completion-instant projection for scheduled tasks."""

from datetime import datetime, timedelta

from .allocator import EPSILON
from .availability import WorkCalendar


def project_completion(start: datetime, hours: float, calendar: WorkCalendar) -> datetime:
    """Project when a task finishes if worked from start through the calendar.

    Applies the same window, weekend and blackout stepping as the allocator but
    without any per-day cap, so it ignores other tasks sharing a day.

    Args:
        start: The task's scheduled start instant
        hours: Full task duration
        calendar: Work window and blackout slots

    Returns:
        The completion instant; equals start for a zero-hour task

    Raises:
        SchedulingError: If the calendar runs out of available days
    """
    cursor = start
    remaining = hours

    while remaining > EPSILON:
        cursor = calendar.snap_to_window(cursor)

        if not calendar.is_day_available(cursor.date()) or calendar.is_blocked(cursor):
            cursor = calendar.next_available(cursor)
            continue

        hours_today = min(remaining, calendar.hours_left_in_window(cursor))
        cursor += timedelta(hours=hours_today)
        remaining -= hours_today

        if remaining > EPSILON:
            cursor = calendar.next_available(cursor)

    return cursor
